"""
Pydantic schemas for API request/response validation.

Numbers are finite-only: a NaN or infinity anywhere in the season data is
rejected before it reaches the simulation.
"""

from typing import Dict, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ============== Season Data Schemas ==============

class MatchupEntry(BaseModel):
    """One roster's result in one week."""
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)

    roster_id: int
    matchup_id: Optional[int] = None  # None is a bye
    points: Optional[float] = None


class RosterSettings(BaseModel):
    """Record and points for as reported by the league."""
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)

    wins: int = 0
    losses: int = 0
    ties: int = 0
    fpts: float = 0
    fpts_decimal: float = 0


class Roster(BaseModel):
    model_config = ConfigDict(extra="allow")

    roster_id: int
    settings: RosterSettings = Field(default_factory=RosterSettings)


class LeagueSettingsSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    leg: Optional[int] = None  # Week in progress, absent once the season is over
    last_scored_leg: Optional[int] = None
    playoff_week_start: Optional[int] = None
    playoff_teams: Optional[int] = None


class League(BaseModel):
    model_config = ConfigDict(extra="allow")

    settings: LeagueSettingsSchema = Field(default_factory=LeagueSettingsSchema)


class SeasonData(BaseModel):
    """Season matchups keyed by week number, rosters and league settings."""
    matchups: Dict[str, List[MatchupEntry]] = Field(default_factory=dict)
    rosters: List[Roster] = Field(default_factory=list)
    league: Optional[League] = None


# ============== Scenario Schemas ==============

class ScenarioPickSchema(BaseModel):
    """A forced outcome for one matchup."""
    model_config = ConfigDict(allow_inf_nan=False)

    week: int
    matchup_id: int = Field(validation_alias=AliasChoices("matchup_id", "matchupId"))
    winner_roster_id: int = Field(
        validation_alias=AliasChoices("winner_roster_id", "winnerRosterId", "winner")
    )
    team1_score: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("team1_score", "team1Score")
    )
    team2_score: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("team2_score", "team2Score")
    )


class UserScenarioSchema(BaseModel):
    picks: List[ScenarioPickSchema] = Field(default_factory=list)


# ============== Odds Schemas ==============

class PlayoffOddsRequest(BaseModel):
    """Calculate playoff odds request."""
    season: SeasonData
    scenario: Optional[UserScenarioSchema] = None
    n_simulations: Optional[int] = Field(default=None, ge=100, le=100000)
    seed: Optional[int] = None


class TeamOdds(BaseModel):
    """Playoff odds for a single team."""
    roster_id: int
    position_odds: Dict[int, float]
    playoff_odds: float
    wins: int
    losses: int
    ties: int


class PlayoffOddsResponse(BaseModel):
    """Full playoff odds response. Empty teams means nothing to simulate."""
    completed_week: Optional[int]
    n_simulations: int
    teams: List[TeamOdds]


class StrengthOfScheduleRequest(BaseModel):
    season: SeasonData


class StrengthOfScheduleResponse(BaseModel):
    """Remaining strength of schedule rank per roster (1 = hardest)."""
    ranks: Dict[int, int]
