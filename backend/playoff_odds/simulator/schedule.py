"""
Remaining strength of schedule.

Ranks teams by the average season-to-date scoring of the opponents they still
have to face in the regular season. Rank 1 is the hardest schedule.
"""

import logging
from collections import defaultdict
from typing import Dict, List

from .season import (
    SeasonData,
    get_completed_week,
    pair_matchups,
    remaining_weeks,
    validate_season_data,
)
from .stats import average_points


logger = logging.getLogger(__name__)


def remaining_opponents(season_data: SeasonData, completed_week: int) -> Dict[int, List[int]]:
    """Map roster_id -> opponents in the remaining regular season weeks."""
    opponents: Dict[int, List[int]] = defaultdict(list)
    for week, entries in remaining_weeks(season_data, completed_week):
        for game in pair_matchups(week, entries):
            opponents[game.team1_id].append(game.team2_id)
            opponents[game.team2_id].append(game.team1_id)
    return opponents


def calculate_strength_of_schedule(season_data: SeasonData) -> Dict[int, int]:
    """
    Calculate remaining strength of schedule ranks for all teams.

    Args:
        season_data: Season matchups, rosters and league

    Returns:
        Dict mapping roster_id -> rank (1 = hardest). Empty if there is no
        completed week or the season data is incomplete.

    Raises:
        InvalidSeasonDataError: If the season data holds NaN or infinite numbers
    """
    if not season_data or not season_data.get("matchups") or not season_data.get("rosters"):
        return {}

    validate_season_data(season_data)

    completed_week = get_completed_week(season_data.get("league"))
    if completed_week is None:
        logger.debug("No completed week, strength of schedule unavailable")
        return {}

    team_avg_points = average_points(season_data, completed_week)
    opponents = remaining_opponents(season_data, completed_week)

    avg_opponent_points: Dict[int, float] = {}
    for roster_id in team_avg_points:
        opponent_points = [
            team_avg_points[opp] for opp in opponents.get(roster_id, [])
            if opp in team_avg_points
        ]
        avg_opponent_points[roster_id] = (
            sum(opponent_points) / len(opponent_points) if opponent_points else 0.0
        )

    # sorted() is stable, equal averages keep roster order
    ordered = sorted(avg_opponent_points, key=lambda rid: avg_opponent_points[rid], reverse=True)

    return {roster_id: rank for rank, roster_id in enumerate(ordered, start=1)}


def get_strength_of_schedule(roster_id: int, season_data: SeasonData) -> int:
    """Strength of schedule rank for one team, or 0 if unknown."""
    return calculate_strength_of_schedule(season_data).get(roster_id, 0)
