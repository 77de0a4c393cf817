"""
Core configuration.
"""

from .config import (
    CORS_ORIGINS,
    LOG_LEVEL,
    N_SIMULATIONS,
    SIMULATION_SEED,
    configure_logging,
    make_rng,
)

__all__ = [
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "N_SIMULATIONS",
    "SIMULATION_SEED",
    "configure_logging",
    "make_rng",
]
