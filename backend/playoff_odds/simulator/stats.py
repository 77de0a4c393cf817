"""
Team scoring distributions estimated from completed regular season weeks.
"""

import math
from collections import defaultdict
from typing import Dict, List

from .models import ScoreDistribution
from .season import SeasonData, completed_weeks


def collect_scores(season_data: SeasonData, completed_week: int) -> Dict[int, List[float]]:
    """Points per completed regular season week, by roster id."""
    scores: Dict[int, List[float]] = defaultdict(list)
    for _, entries in completed_weeks(season_data, completed_week):
        for entry in entries:
            scores[entry["roster_id"]].append(entry.get("points") or 0)
    return scores


def score_distribution(roster_id: int, scores: List[float]) -> ScoreDistribution:
    """
    Mean and sample standard deviation (n - 1 divisor) of a team's scores.

    Fewer than two scores means no variance; no scores at all gives a team that
    always simulates as scoring 0.
    """
    n = len(scores)
    mean = sum(scores) / n if n > 0 else 0.0
    variance = sum((s - mean) ** 2 for s in scores) / (n - 1) if n > 1 else 0.0

    return ScoreDistribution(
        roster_id=roster_id,
        mean=mean,
        std_dev=math.sqrt(variance),
        games_played=n
    )


def calculate_team_stats(season_data: SeasonData, completed_week: int) -> Dict[int, ScoreDistribution]:
    """
    Calculate each roster's scoring distribution.

    Args:
        season_data: Season matchups, rosters and league
        completed_week: Last week with final results

    Returns:
        Dict mapping roster_id -> ScoreDistribution
    """
    scores = collect_scores(season_data, completed_week)
    return {
        roster["roster_id"]: score_distribution(roster["roster_id"], scores.get(roster["roster_id"], []))
        for roster in season_data.get("rosters") or []
    }


def average_points(season_data: SeasonData, completed_week: int) -> Dict[int, float]:
    """Average points per completed game, by roster id."""
    return {
        roster_id: dist.mean
        for roster_id, dist in calculate_team_stats(season_data, completed_week).items()
    }
