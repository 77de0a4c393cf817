"""
Monte Carlo simulation engine for playoff probability calculations.
"""

import logging
import random
import time
from typing import Callable, Dict, List, Optional

from .models import (
    Game,
    GameOutcome,
    PlayoffOddsResult,
    RankCounts,
    RecordDict,
    ScoreDistribution,
    UserScenario,
)
from .sampling import sample_score
from .scenarios import PickIndex, index_picks, picked_games, picked_outcome, scenario_picks
from .season import (
    SeasonData,
    current_records,
    get_completed_week,
    get_league_settings,
    has_required_data,
    remaining_games,
    remaining_weeks,
    season_games,
    validate_season_data,
)
from .stats import calculate_team_stats
from .tiebreakers import rank_teams_by_record


logger = logging.getLogger(__name__)

N_SIMULATIONS = 10000


def apply_outcome(
    records: RecordDict,
    games: List[Game],
    outcomes: List[GameOutcome]
) -> RecordDict:
    """
    Apply a set of game outcomes to the standings.

    Args:
        records: Standings to start from (not modified)
        games: Games to resolve
        outcomes: One outcome per game

    Returns:
        Updated copies of the records
    """
    sim_records = {rid: r.copy() for rid, r in records.items()}

    for game, outcome in zip(games, outcomes):
        team1 = sim_records.get(game.team1_id)
        team2 = sim_records.get(game.team2_id)
        if team1 is None or team2 is None:
            continue

        team1.total_points += outcome.team1_score
        team2.total_points += outcome.team2_score

        if outcome.winner_id is not None:
            team1_won = outcome.winner_id == game.team1_id
            team2_won = not team1_won
        else:
            team1_won = outcome.team1_score > outcome.team2_score
            team2_won = outcome.team2_score > outcome.team1_score

        if team1_won:
            team1.wins += 1
            team2.losses += 1
        elif team2_won:
            team1.losses += 1
            team2.wins += 1
        else:
            team1.ties += 1
            team2.ties += 1

    return sim_records


def simulate_season(
    records: RecordDict,
    games: List[Game],
    team_stats: Dict[int, ScoreDistribution],
    picks: PickIndex,
    rng: random.Random
) -> RecordDict:
    """
    Simulate one hypothetical finish to the regular season.

    Picked games take the user's outcome; every other game samples both
    teams' scores independently.

    Args:
        records: Standings after the completed weeks
        games: Remaining regular season games
        team_stats: Scoring distribution per roster
        picks: User picks indexed by (week, matchup_id)
        rng: Random source

    Returns:
        Final records for every team
    """
    resolved_games = []
    outcomes = []

    for game in games:
        outcome = picked_outcome(game, picks)

        if outcome is None:
            team1_stats = team_stats.get(game.team1_id)
            team2_stats = team_stats.get(game.team2_id)
            if team1_stats is None or team2_stats is None:
                continue

            outcome = GameOutcome(
                team1_score=sample_score(team1_stats, rng),
                team2_score=sample_score(team2_stats, rng)
            )

        resolved_games.append(game)
        outcomes.append(outcome)

    return apply_outcome(records, resolved_games, outcomes)


def apply_user_scenario(
    season_data: SeasonData,
    user_scenario: Optional[UserScenario] = None
) -> RecordDict:
    """
    Current records with the user's picks applied.

    Picks count for any game in the season data, completed weeks included.
    Only the simulation restricts picks to the remaining games.
    """
    records = current_records(season_data)
    picks = index_picks(scenario_picks(user_scenario))
    if not picks:
        return records

    games, outcomes = picked_games(season_games(season_data), picks)
    return apply_outcome(records, games, outcomes)


def empty_rank_counts(roster_ids: List[int]) -> RankCounts:
    n_teams = len(roster_ids)
    return {rid: {pos: 0 for pos in range(1, n_teams + 1)} for rid in roster_ids}


def merge_rank_counts(first: RankCounts, second: RankCounts) -> RankCounts:
    """Sum two rank histograms, e.g. from separate workers."""
    merged: RankCounts = {rid: dict(counts) for rid, counts in first.items()}
    for rid, counts in second.items():
        target = merged.setdefault(rid, {})
        for pos, count in counts.items():
            target[pos] = target.get(pos, 0) + count
    return merged


def run_simulations(
    records: RecordDict,
    games: List[Game],
    team_stats: Dict[int, ScoreDistribution],
    picks: PickIndex,
    n_simulations: int = N_SIMULATIONS,
    rng: Optional[random.Random] = None,
    progress_callback: Optional[Callable[[float], None]] = None
) -> RankCounts:
    """
    Run the Monte Carlo sweep and tally final standings positions.

    Args:
        records: Standings after the completed weeks
        games: Remaining regular season games
        team_stats: Scoring distribution per roster
        picks: User picks indexed by (week, matchup_id)
        n_simulations: Number of simulations to run
        rng: Random source (defaults to an unseeded one)
        progress_callback: Optional callback for progress updates (receives percent complete)

    Returns:
        Dict mapping roster_id -> position -> count
    """
    if rng is None:
        rng = random.Random()

    counts = empty_rank_counts(list(records))

    for sim_idx in range(n_simulations):
        if progress_callback and sim_idx % 100 == 0:
            progress_callback(sim_idx / n_simulations * 100)

        final_records = simulate_season(records, games, team_stats, picks, rng)
        rankings = rank_teams_by_record(final_records.values())

        for position, roster_id in enumerate(rankings, start=1):
            counts[roster_id][position] += 1

    if progress_callback:
        progress_callback(100)

    return counts


def calculate_playoff_odds(
    season_data: SeasonData,
    user_scenario: Optional[UserScenario] = None,
    n_simulations: int = N_SIMULATIONS,
    rng: Optional[random.Random] = None,
    playoff_spots: Optional[int] = None,
    progress_callback: Optional[Callable[[float], None]] = None
) -> List[PlayoffOddsResult]:
    """
    Calculate playoff odds using Monte Carlo simulation.

    Returns an empty list when there is nothing to simulate: missing data,
    a finished season, or no regular season weeks left.

    Raises:
        InvalidSeasonDataError: If the season data holds NaN or infinite numbers
        ValueError: If n_simulations is not positive
    """
    if n_simulations <= 0:
        raise ValueError(f"n_simulations must be positive, got {n_simulations}")

    if not has_required_data(season_data):
        logger.debug("Missing matchups, rosters or league, nothing to simulate")
        return []

    picks = scenario_picks(user_scenario)
    validate_season_data(season_data, picks)

    completed_week = get_completed_week(season_data["league"])
    if completed_week is None:
        logger.debug("No completed week, nothing to simulate")
        return []

    if not any(True for _ in remaining_weeks(season_data, completed_week)):
        logger.debug("No regular season weeks after week %d", completed_week)
        return []

    if playoff_spots is None:
        playoff_spots = get_league_settings(season_data).playoff_spots

    started = time.perf_counter()

    team_stats = calculate_team_stats(season_data, completed_week)
    records = current_records(season_data)
    games = remaining_games(season_data, completed_week)

    counts = run_simulations(
        records, games, team_stats, index_picks(picks),
        n_simulations=n_simulations,
        rng=rng,
        progress_callback=progress_callback
    )

    updated_records = apply_user_scenario(season_data, user_scenario)

    results = []
    for rid in records:
        position_odds = {
            pos: count / n_simulations * 100
            for pos, count in counts[rid].items()
        }
        playoff_odds = sum(
            pct for pos, pct in position_odds.items() if pos <= playoff_spots
        )
        record = updated_records[rid]

        results.append(PlayoffOddsResult(
            roster_id=rid,
            position_odds=position_odds,
            playoff_odds=playoff_odds,
            wins=record.wins,
            losses=record.losses,
            ties=record.ties
        ))

    logger.info(
        "Ran %d simulations over %d remaining games after week %d in %.2fs",
        n_simulations, len(games), completed_week, time.perf_counter() - started
    )

    return results
