"""
User scenario overrides.

A pick forces the outcome of one real future matchup in every simulation run.
Picks that point at a week or matchup that doesn't exist have no effect.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .models import Game, GameOutcome, ScenarioPick, UserScenario


PickIndex = Dict[Tuple[int, int], ScenarioPick]


def scenario_picks(user_scenario: Optional[UserScenario]) -> List[ScenarioPick]:
    if user_scenario is None:
        return []
    return list(user_scenario.picks)


def index_picks(picks: Iterable[ScenarioPick]) -> PickIndex:
    """Index picks by (week, matchup_id). The first pick for a matchup wins."""
    index: PickIndex = {}
    for pick in picks:
        index.setdefault((pick.week, pick.matchup_id), pick)
    return index


def resolve_pick(game: Game, pick: ScenarioPick) -> Optional[GameOutcome]:
    """
    Turn a pick into the outcome of its game.

    Missing scores contribute 0 points; the pick's winner decides the result
    regardless of scores. Returns None when the winner isn't in the game.
    """
    if not game.involves(pick.winner_roster_id):
        return None

    return GameOutcome(
        team1_score=pick.team1_score or 0,
        team2_score=pick.team2_score or 0,
        winner_id=pick.winner_roster_id
    )


def picked_outcome(game: Game, picks: PickIndex) -> Optional[GameOutcome]:
    """Forced outcome for a game, if the user picked it."""
    pick = picks.get((game.week, game.matchup_id))
    if pick is None:
        return None
    return resolve_pick(game, pick)


def picked_games(games: Iterable[Game], picks: PickIndex) -> Tuple[List[Game], List[GameOutcome]]:
    """Split out the games the user picked, with their forced outcomes."""
    forced_games = []
    outcomes = []
    for game in games:
        outcome = picked_outcome(game, picks)
        if outcome is not None:
            forced_games.append(game)
            outcomes.append(outcome)
    return forced_games, outcomes
