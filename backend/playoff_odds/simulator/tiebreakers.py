"""
Standings order for final records.

Tiebreaker order:
1. Win percentage, ties counting as half a win
2. Total points for
Teams still level after both keep their input order.
"""

from typing import Dict, Iterable, List

from .models import SimulatedRecord


def standings_key(record: SimulatedRecord):
    return (-record.win_pct, -record.total_points)


def rank_teams_by_record(records: Iterable[SimulatedRecord]) -> List[int]:
    """
    Rank teams by record with points-for as the tiebreaker.

    Args:
        records: Final records, not modified

    Returns:
        Roster ids in standings order (index 0 is rank 1)
    """
    return [r.roster_id for r in sorted(records, key=standings_key)]


def standings_positions(records: Iterable[SimulatedRecord]) -> Dict[int, int]:
    """Map roster_id -> 1-based standings position."""
    return {
        roster_id: position
        for position, roster_id in enumerate(rank_teams_by_record(records), start=1)
    }
