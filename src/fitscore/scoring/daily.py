"""Per-day scoring and the daily-based monthly trend."""

from __future__ import annotations

import logging
from typing import Sequence

from fitscore.scoring.fitness import calculate_fitness_score
from fitscore.scoring.metrics import HealthMetrics
from fitscore.scoring.samples import DaySamples, day_metrics_from_samples
from fitscore.scoring.summary import (
    FitnessScoreResult,
    MonthlyAverage,
    calculate_monthly_average_from_daily_scores,
)

logger = logging.getLogger(__name__)


def calculate_daily_fitness_score(day_metrics: HealthMetrics) -> FitnessScoreResult:
    """Score a single day's metrics."""
    return calculate_fitness_score(day_metrics)


def calculate_daily_scores_from_historical_data(
    days: Sequence[DaySamples],
) -> list[FitnessScoreResult]:
    """Score each day of raw samples independently.

    Output order matches input order; empty input gives an empty list.
    """
    scores = [
        calculate_daily_fitness_score(day_metrics_from_samples(day))
        for day in days
    ]
    logger.debug("Scored %d historical days", len(scores))
    return scores


def calculate_daily_based_monthly_average(
    days: Sequence[DaySamples],
) -> MonthlyAverage:
    """Monthly trend: score every day, then average the daily scores."""
    return calculate_monthly_average_from_daily_scores(
        calculate_daily_scores_from_historical_data(days)
    )
