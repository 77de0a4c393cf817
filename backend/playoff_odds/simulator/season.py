"""
Season data access.

Season data is the plain mapping handed over by the presentation layer:

    {
        "matchups": {"1": [{"roster_id": 1, "matchup_id": 1, "points": 101.5}, ...], ...},
        "rosters": [{"roster_id": 1, "settings": {"wins": 1, "losses": 0, ...}}, ...],
        "league": {"settings": {"leg": 3, "last_scored_leg": 2, "playoff_week_start": 15}}
    }
"""

import math
from collections import defaultdict
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .models import Game, LeagueSettings, SimulatedRecord, RecordDict


DEFAULT_PLAYOFF_WEEK_START = 15
DEFAULT_PLAYOFF_SPOTS = 6

SeasonData = Dict[str, Any]


class InvalidSeasonDataError(ValueError):
    """Raised when season data holds numbers that would corrupt the simulation."""
    pass


def _league_settings(league: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if not league:
        return {}
    return league.get("settings") or {}


def get_completed_week(league: Optional[Dict[str, Any]]) -> Optional[int]:
    """
    Get the most recent completed week for a league.

    Returns None if the season is finished (no ``leg``) or nothing is scored yet.
    """
    settings = _league_settings(league)

    current_leg = settings.get("leg")
    if not current_leg:
        return None

    last_scored_leg = settings.get("last_scored_leg")
    if last_scored_leg:
        return int(last_scored_leg)

    # leg is the week in progress
    return int(current_leg) - 1 if current_leg > 1 else None


def is_week_completed(week: int, league: Optional[Dict[str, Any]]) -> bool:
    """Check if a week is completed. Historical seasons count every week as completed."""
    completed_week = get_completed_week(league)
    if completed_week is None:
        return league is not None
    return week <= completed_week


def get_playoff_week_start(season_data: SeasonData) -> int:
    settings = _league_settings(season_data.get("league"))
    return settings.get("playoff_week_start") or DEFAULT_PLAYOFF_WEEK_START


def get_playoff_spots(season_data: SeasonData) -> int:
    settings = _league_settings(season_data.get("league"))
    return settings.get("playoff_teams") or DEFAULT_PLAYOFF_SPOTS


def get_league_settings(season_data: SeasonData) -> LeagueSettings:
    return LeagueSettings(
        playoff_spots=get_playoff_spots(season_data),
        playoff_week_start=get_playoff_week_start(season_data)
    )


def iter_weeks(matchups: Dict[str, List[Dict[str, Any]]]) -> Iterator[Tuple[int, List[Dict[str, Any]]]]:
    """Yield (week, entries) in ascending week order."""
    for week in sorted(matchups, key=int):
        yield int(week), matchups[week] or []


def pair_matchups(week: int, entries: List[Dict[str, Any]]) -> List[Game]:
    """
    Pair a week's entries into games by matchup_id.

    Entries without a matchup_id, or whose matchup_id has no second entry,
    are byes and produce no game.
    """
    groups: Dict[int, List[Dict[str, Any]]] = defaultdict(list)
    for entry in entries:
        matchup_id = entry.get("matchup_id")
        if matchup_id is not None:
            groups[matchup_id].append(entry)

    games = []
    for matchup_id, group in groups.items():
        if len(group) != 2:
            continue

        team1_data, team2_data = group
        games.append(Game(
            week=week,
            matchup_id=matchup_id,
            team1_id=team1_data["roster_id"],
            team2_id=team2_data["roster_id"],
            team1_points=team1_data.get("points") or 0,
            team2_points=team2_data.get("points") or 0
        ))

    return games


def completed_weeks(season_data: SeasonData, completed_week: int) -> Iterator[Tuple[int, List[Dict[str, Any]]]]:
    """Completed regular season weeks."""
    playoff_week_start = get_playoff_week_start(season_data)
    for week, entries in iter_weeks(season_data.get("matchups") or {}):
        if week <= completed_week and week < playoff_week_start:
            yield week, entries


def remaining_weeks(season_data: SeasonData, completed_week: int) -> Iterator[Tuple[int, List[Dict[str, Any]]]]:
    """Future regular season weeks."""
    playoff_week_start = get_playoff_week_start(season_data)
    for week, entries in iter_weeks(season_data.get("matchups") or {}):
        if completed_week < week < playoff_week_start:
            yield week, entries


def remaining_games(season_data: SeasonData, completed_week: int) -> List[Game]:
    games = []
    for week, entries in remaining_weeks(season_data, completed_week):
        games.extend(pair_matchups(week, entries))
    return games


def season_games(season_data: SeasonData) -> List[Game]:
    """Every paired game in the season, played or not."""
    games = []
    for week, entries in iter_weeks(season_data.get("matchups") or {}):
        games.extend(pair_matchups(week, entries))
    return games


def has_required_data(season_data: Optional[SeasonData]) -> bool:
    if not season_data:
        return False
    return bool(season_data.get("matchups")) and bool(season_data.get("rosters")) \
        and bool(season_data.get("league"))


def current_records(season_data: SeasonData) -> RecordDict:
    """Records as reported by the league, indexed by roster id."""
    records: RecordDict = {}
    for roster in season_data.get("rosters") or []:
        settings = roster.get("settings") or {}
        records[roster["roster_id"]] = SimulatedRecord(
            roster_id=roster["roster_id"],
            wins=settings.get("wins") or 0,
            losses=settings.get("losses") or 0,
            ties=settings.get("ties") or 0,
            total_points=(settings.get("fpts") or 0) + (settings.get("fpts_decimal") or 0) / 100
        )
    return records


def _check_number(value: Any, where: str) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidSeasonDataError(f"{where}: expected a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidSeasonDataError(f"{where}: non-finite value {value!r}")


def validate_season_data(season_data: SeasonData, picks: Optional[List[Any]] = None) -> None:
    """
    Reject malformed numbers before any simulation runs.

    Raises:
        InvalidSeasonDataError: On NaN/infinite points, records or pick scores,
            or on a week key that is not an integer.
    """
    for week, entries in (season_data.get("matchups") or {}).items():
        try:
            int(week)
        except (TypeError, ValueError):
            raise InvalidSeasonDataError(f"Invalid week key: {week!r}")
        for entry in entries or []:
            _check_number(entry.get("points"), f"week {week} roster {entry.get('roster_id')} points")

    for roster in season_data.get("rosters") or []:
        settings = roster.get("settings") or {}
        for key in ("wins", "losses", "ties", "fpts", "fpts_decimal"):
            _check_number(settings.get(key), f"roster {roster.get('roster_id')} {key}")

    for pick in picks or []:
        _check_number(pick.team1_score, f"pick week {pick.week} matchup {pick.matchup_id} team1_score")
        _check_number(pick.team2_score, f"pick week {pick.week} matchup {pick.matchup_id} team2_score")
