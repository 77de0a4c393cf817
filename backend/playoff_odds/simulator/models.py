"""
Data models for the playoff odds engine.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class ScoreDistribution:
    """Scoring distribution of a team, estimated from completed weeks."""

    roster_id: int
    mean: float = 0.0
    std_dev: float = 0.0
    games_played: int = 0


@dataclass
class SimulatedRecord:
    """A team's win/loss/tie record and points for, real or simulated."""

    roster_id: int
    wins: int = 0
    losses: int = 0
    ties: int = 0
    total_points: float = 0.0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_pct(self) -> float:
        total = self.games_played
        if total == 0:
            return 0.0
        return (self.wins + 0.5 * self.ties) / total

    def copy(self) -> 'SimulatedRecord':
        """Create a copy of this record for simulation."""
        return SimulatedRecord(
            roster_id=self.roster_id,
            wins=self.wins,
            losses=self.losses,
            ties=self.ties,
            total_points=self.total_points
        )


@dataclass
class Game:
    """Two rosters paired by matchup_id in a given week."""

    week: int
    matchup_id: int
    team1_id: int
    team2_id: int
    team1_points: float = 0.0
    team2_points: float = 0.0

    def involves(self, roster_id: int) -> bool:
        return roster_id in (self.team1_id, self.team2_id)


@dataclass
class GameOutcome:
    """
    Resolved result of a game.

    winner_id of None means the scores decide it (equal scores are a tie).
    """

    team1_score: float = 0.0
    team2_score: float = 0.0
    winner_id: Optional[int] = None


@dataclass
class ScenarioPick:
    """A user-forced outcome for one matchup."""

    week: int
    matchup_id: int
    winner_roster_id: int
    team1_score: Optional[float] = None
    team2_score: Optional[float] = None


@dataclass
class UserScenario:
    """An ordered list of user picks."""

    picks: List[ScenarioPick] = field(default_factory=list)


@dataclass
class PlayoffOddsResult:
    """Playoff odds for a single team."""

    roster_id: int
    position_odds: Dict[int, float] = field(default_factory=dict)
    playoff_odds: float = 0.0
    wins: int = 0
    losses: int = 0
    ties: int = 0

    def to_dict(self) -> dict:
        return {
            "roster_id": self.roster_id,
            "position_odds": dict(self.position_odds),
            "playoff_odds": self.playoff_odds,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties
        }


@dataclass
class LeagueSettings:
    """League configuration settings."""

    playoff_spots: int = 6
    playoff_week_start: int = 15


# Type aliases
RecordDict = Dict[int, SimulatedRecord]
RankCounts = Dict[int, Dict[int, int]]  # roster_id -> rank -> count
