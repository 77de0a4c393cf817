"""
Tests for team scoring distributions and score sampling.
"""

import math
import random

import pytest

from playoff_odds.simulator import (
    ScoreDistribution,
    calculate_team_stats,
    random_normal,
    sample_score,
    score_distribution,
)
from conftest import TEAM_A, TEAM_B, TEAM_C, TEAM_D


class TestTeamStats:
    """Tests for calculate_team_stats."""

    def test_means_from_completed_weeks(self, season):
        """Means use weeks 1-2 only."""
        stats = calculate_team_stats(season, 2)

        assert stats[TEAM_A].mean == pytest.approx(105)
        assert stats[TEAM_B].mean == pytest.approx(92.5)
        assert stats[TEAM_C].mean == pytest.approx(102.5)
        assert stats[TEAM_D].mean == pytest.approx(99)
        assert stats[TEAM_A].games_played == 2

    def test_sample_std_dev(self, season):
        """Standard deviation uses the n - 1 divisor."""
        stats = calculate_team_stats(season, 2)

        assert stats[TEAM_A].std_dev == pytest.approx(math.sqrt(50))
        assert stats[TEAM_C].std_dev == pytest.approx(math.sqrt(12.5))

    def test_cursor_limits_window(self, season):
        """Only weeks up to the cursor count."""
        stats = calculate_team_stats(season, 1)

        assert stats[TEAM_A].mean == pytest.approx(100)
        assert stats[TEAM_A].std_dev == 0
        assert stats[TEAM_A].games_played == 1

    def test_playoff_weeks_excluded(self, season):
        """Weeks at or after playoff_week_start never count."""
        season["matchups"]["4"][0]["points"] = 500
        stats = calculate_team_stats(season, 4)

        assert stats[TEAM_A].games_played == 3
        assert stats[TEAM_A].mean == pytest.approx(70)

    def test_team_without_games(self, season):
        """A roster with no completed games simulates as 0."""
        season["rosters"].append({"roster_id": 99, "settings": {}})
        stats = calculate_team_stats(season, 2)

        assert stats[99] == ScoreDistribution(roster_id=99, mean=0.0, std_dev=0.0, games_played=0)

    def test_score_distribution_single_sample(self):
        """One sample has no variance."""
        dist = score_distribution(5, [88.0])
        assert dist.mean == 88.0
        assert dist.std_dev == 0.0


class TestSampling:
    """Tests for Box-Muller sampling."""

    def test_standard_normal_moments(self):
        """Seeded draws have mean ~0 and std ~1."""
        rng = random.Random(42)
        draws = [random_normal(rng) for _ in range(20000)]
        mean = sum(draws) / len(draws)
        std = math.sqrt(sum((d - mean) ** 2 for d in draws) / (len(draws) - 1))

        assert mean == pytest.approx(0, abs=0.05)
        assert std == pytest.approx(1, abs=0.05)

    def test_zero_std_dev_returns_mean(self):
        """No variance degenerates to the mean."""
        dist = ScoreDistribution(roster_id=1, mean=101.5, std_dev=0.0)
        assert sample_score(dist, random.Random(0)) == 101.5

    def test_same_seed_same_samples(self):
        """Sampling is reproducible with a fixed seed."""
        dist = ScoreDistribution(roster_id=1, mean=100.0, std_dev=15.0)
        rng1, rng2 = random.Random(3), random.Random(3)
        first = [sample_score(dist, rng1) for _ in range(5)]
        second = [sample_score(dist, rng2) for _ in range(5)]

        assert first == second
