"""
Playoff odds and strength of schedule API routes.
"""

import logging
from fastapi import APIRouter, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from ..schemas import (
    PlayoffOddsRequest,
    PlayoffOddsResponse,
    StrengthOfScheduleRequest,
    StrengthOfScheduleResponse,
    TeamOdds
)
from ...core.config import N_SIMULATIONS, SIMULATION_SEED, make_rng
from ...simulator import (
    InvalidSeasonDataError,
    ScenarioPick,
    UserScenario,
    calculate_playoff_odds,
    calculate_strength_of_schedule,
    get_completed_week
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/odds", tags=["odds"])


@router.post("/playoffs", response_model=PlayoffOddsResponse)
async def playoff_odds(request: PlayoffOddsRequest) -> PlayoffOddsResponse:
    """
    Calculate standings position and playoff odds for every team.

    The simulation is CPU bound, so it runs in the threadpool.
    """
    season_data = request.season.model_dump()
    scenario = None
    if request.scenario is not None:
        scenario = UserScenario(
            picks=[ScenarioPick(**pick.model_dump()) for pick in request.scenario.picks]
        )

    n_simulations = request.n_simulations or N_SIMULATIONS
    seed = request.seed if request.seed is not None else SIMULATION_SEED

    try:
        results = await run_in_threadpool(
            calculate_playoff_odds,
            season_data,
            scenario,
            n_simulations,
            make_rng(seed)
        )
    except InvalidSeasonDataError as e:
        logger.warning("Rejected season data: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    teams = [
        TeamOdds(**result.to_dict())
        for result in sorted(results, key=lambda r: r.playoff_odds, reverse=True)
    ]

    return PlayoffOddsResponse(
        completed_week=get_completed_week(season_data.get("league")),
        n_simulations=n_simulations,
        teams=teams
    )


@router.post("/strength-of-schedule", response_model=StrengthOfScheduleResponse)
async def strength_of_schedule(request: StrengthOfScheduleRequest) -> StrengthOfScheduleResponse:
    """Rank teams by the strength of their remaining opponents (1 = hardest)."""
    try:
        ranks = calculate_strength_of_schedule(request.season.model_dump())
    except InvalidSeasonDataError as e:
        logger.warning("Rejected season data: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return StrengthOfScheduleResponse(ranks=ranks)
