"""
Runtime configuration read from the environment.
"""

import logging
import os
import random
from typing import Optional


CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

N_SIMULATIONS = int(os.getenv("N_SIMULATIONS", "10000"))

# Unset means a fresh, unseeded random source per request
SIMULATION_SEED: Optional[int] = (
    int(os.getenv("SIMULATION_SEED")) if os.getenv("SIMULATION_SEED") else None
)


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger for the application."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def make_rng(seed: Optional[int] = SIMULATION_SEED) -> random.Random:
    """Random source for one simulation request."""
    return random.Random(seed) if seed is not None else random.Random()
