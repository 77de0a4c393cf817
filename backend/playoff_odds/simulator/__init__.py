"""
Fantasy Playoff Odds Engine

Monte Carlo simulation of the remaining regular season to calculate standings
position and playoff probabilities, plus remaining strength of schedule.
"""

from .models import (
    ScoreDistribution,
    SimulatedRecord,
    Game,
    GameOutcome,
    ScenarioPick,
    UserScenario,
    PlayoffOddsResult,
    LeagueSettings,
    RecordDict,
    RankCounts,
)
from .season import (
    InvalidSeasonDataError,
    get_completed_week,
    is_week_completed,
    get_playoff_week_start,
    get_playoff_spots,
    get_league_settings,
    pair_matchups,
    validate_season_data,
)
from .stats import calculate_team_stats, score_distribution
from .sampling import random_normal, sample_score
from .scenarios import index_picks, resolve_pick
from .engine import (
    apply_outcome,
    apply_user_scenario,
    simulate_season,
    run_simulations,
    merge_rank_counts,
    calculate_playoff_odds,
)
from .tiebreakers import rank_teams_by_record, standings_positions
from .schedule import calculate_strength_of_schedule, get_strength_of_schedule

__all__ = [
    # Models
    "ScoreDistribution",
    "SimulatedRecord",
    "Game",
    "GameOutcome",
    "ScenarioPick",
    "UserScenario",
    "PlayoffOddsResult",
    "LeagueSettings",
    "RecordDict",
    "RankCounts",
    # Season data
    "InvalidSeasonDataError",
    "get_completed_week",
    "is_week_completed",
    "get_playoff_week_start",
    "get_playoff_spots",
    "get_league_settings",
    "pair_matchups",
    "validate_season_data",
    # Scoring model
    "calculate_team_stats",
    "score_distribution",
    "random_normal",
    "sample_score",
    # Scenarios
    "index_picks",
    "resolve_pick",
    # Engine
    "apply_outcome",
    "apply_user_scenario",
    "simulate_season",
    "run_simulations",
    "merge_rank_counts",
    "calculate_playoff_odds",
    # Tiebreakers
    "rank_teams_by_record",
    "standings_positions",
    # Strength of schedule
    "calculate_strength_of_schedule",
    "get_strength_of_schedule",
]
