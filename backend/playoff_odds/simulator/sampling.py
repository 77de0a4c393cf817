"""
Score sampling from a team's normal scoring distribution.
"""

import math
import random

from .models import ScoreDistribution


def random_normal(rng: random.Random) -> float:
    """Standard normal variate via the Box-Muller transform."""
    u1 = 1.0 - rng.random()  # (0, 1], log(0) is undefined
    u2 = rng.random()
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def sample_score(dist: ScoreDistribution, rng: random.Random) -> float:
    """Draw one weekly score. Not clamped, so extreme tails can go negative."""
    if dist.std_dev == 0:
        return dist.mean
    return dist.mean + dist.std_dev * random_normal(rng)
