"""
Shared season data fixtures.

The four-team league: A (1) beat B (2) 100-90 and 110-95, C (3) beat D (4)
105-100 and 100-98 in weeks 1-2. Week 3 is A vs C and B vs D. Playoffs start
in week 4.
"""

import copy
import random

import pytest


TEAM_A, TEAM_B, TEAM_C, TEAM_D = 1, 2, 3, 4


def make_four_team_season(leg=3):
    league_settings = {"playoff_week_start": 4, "playoff_teams": 2}
    if leg is not None:
        league_settings["leg"] = leg

    return {
        "matchups": {
            "1": [
                {"roster_id": TEAM_A, "matchup_id": 1, "points": 100},
                {"roster_id": TEAM_B, "matchup_id": 1, "points": 90},
                {"roster_id": TEAM_C, "matchup_id": 2, "points": 105},
                {"roster_id": TEAM_D, "matchup_id": 2, "points": 100},
            ],
            "2": [
                {"roster_id": TEAM_A, "matchup_id": 1, "points": 110},
                {"roster_id": TEAM_B, "matchup_id": 1, "points": 95},
                {"roster_id": TEAM_C, "matchup_id": 2, "points": 100},
                {"roster_id": TEAM_D, "matchup_id": 2, "points": 98},
            ],
            "3": [
                {"roster_id": TEAM_A, "matchup_id": 1, "points": 0},
                {"roster_id": TEAM_C, "matchup_id": 1, "points": 0},
                {"roster_id": TEAM_B, "matchup_id": 2, "points": 0},
                {"roster_id": TEAM_D, "matchup_id": 2, "points": 0},
            ],
            # Playoff week, never simulated or used for stats
            "4": [
                {"roster_id": TEAM_A, "matchup_id": 1, "points": 0},
                {"roster_id": TEAM_B, "matchup_id": 1, "points": 0},
            ],
        },
        "rosters": [
            {"roster_id": TEAM_A, "settings": {"wins": 2, "losses": 0, "ties": 0, "fpts": 210, "fpts_decimal": 0}},
            {"roster_id": TEAM_B, "settings": {"wins": 0, "losses": 2, "ties": 0, "fpts": 185, "fpts_decimal": 0}},
            {"roster_id": TEAM_C, "settings": {"wins": 2, "losses": 0, "ties": 0, "fpts": 205, "fpts_decimal": 0}},
            {"roster_id": TEAM_D, "settings": {"wins": 0, "losses": 2, "ties": 0, "fpts": 198, "fpts_decimal": 0}},
        ],
        "league": {"settings": league_settings},
    }


def make_eight_team_season():
    """
    Eight teams, rosters 1-8, with no playoff_teams setting.

    Weeks 1-2 pair 1v2, 3v4, 5v6, 7v8; week 3 (1v8, 2v7, 3v6, 4v5) remains.
    Roster i scores 100 + 5i in week 1 and 90 + 5i + 7 * (i % 3) in week 2.
    """
    week1 = {rid: 100 + 5 * rid for rid in range(1, 9)}
    week2 = {rid: 90 + 5 * rid + 7 * (rid % 3) for rid in range(1, 9)}

    def week_entries(pairs, points):
        entries = []
        for matchup_id, (team1, team2) in enumerate(pairs, start=1):
            for rid in (team1, team2):
                entries.append({"roster_id": rid, "matchup_id": matchup_id, "points": points.get(rid, 0)})
        return entries

    opening_pairs = [(1, 2), (3, 4), (5, 6), (7, 8)]
    wins = {rid: 0 for rid in range(1, 9)}
    for points in (week1, week2):
        for team1, team2 in opening_pairs:
            wins[team1 if points[team1] > points[team2] else team2] += 1

    return {
        "matchups": {
            "1": week_entries(opening_pairs, week1),
            "2": week_entries(opening_pairs, week2),
            "3": week_entries([(1, 8), (2, 7), (3, 6), (4, 5)], {}),
        },
        "rosters": [
            {
                "roster_id": rid,
                "settings": {
                    "wins": wins[rid], "losses": 2 - wins[rid], "ties": 0,
                    "fpts": week1[rid] + week2[rid], "fpts_decimal": 0,
                },
            }
            for rid in range(1, 9)
        ],
        "league": {"settings": {"leg": 3, "playoff_week_start": 4}},
    }


@pytest.fixture
def season():
    """Four-team league with week 3 still to play."""
    return make_four_team_season()


@pytest.fixture
def finished_season():
    """Same league after the season is over (no leg)."""
    return make_four_team_season(leg=None)


@pytest.fixture
def rng():
    """Seeded random source for reproducible simulations."""
    return random.Random(1234)


@pytest.fixture
def snapshot():
    """Deep copy helper to check inputs are left untouched."""
    return copy.deepcopy
