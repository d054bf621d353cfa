"""Fitness score orchestrator.

Scoring system (100 points):
    Cardiovascular health    30  (RHR 10, HRV 10, VO2 Max 10)
    Recovery & regeneration  35  (deep sleep 15, REM 12, consistency 8)
    Activity & training      30  (training time 12, intensity 12, steps 6)
    Bonus consistency         5  (1 / 3 / 5 points for 1 / 2 / 3 categories
                                  at >= 75 % of their maximum)
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from fitscore.scoring import legacy
from fitscore.scoring.bonus import (
    calculate_bonus_points,
    create_bonus_history_item,
    determine_fitness_level,
)
from fitscore.scoring.categories import (
    calculate_activity_points,
    calculate_cardiovascular_points,
    calculate_recovery_points,
)
from fitscore.scoring.metrics import HealthMetrics
from fitscore.scoring.samples import DAYS_PER_MONTH
from fitscore.scoring.summary import BonusBreakdown, FitnessScoreResult, MonthlyAverage


def calculate_fitness_score(metrics: HealthMetrics) -> FitnessScoreResult:
    """Score a set of health metrics.

    ``monthly_training_time`` is converted to a daily average before it
    reaches the activity calculator; every other field passes through.

    Args:
        metrics: The metrics to score.

    Returns:
        FitnessScoreResult with category points, bonus, level and the
        ordered explanation feed.
    """
    cardio = calculate_cardiovascular_points(
        metrics.resting_heart_rate,
        metrics.heart_rate_variability,
        metrics.vo2_max,
    )
    recovery = calculate_recovery_points(
        metrics.deep_sleep_percentage,
        metrics.rem_sleep_percentage,
        metrics.sleep_consistency,
    )
    activity = calculate_activity_points(
        metrics.monthly_training_time / DAYS_PER_MONTH,
        metrics.training_intensity,
        metrics.daily_steps,
    )

    bonus = calculate_bonus_points(cardio.total, recovery.total, activity.total)

    total = cardio.total + recovery.total + activity.total + bonus.points

    return FitnessScoreResult(
        total_score=total,
        cardiovascular_points=cardio.total,
        recovery_points=recovery.total,
        activity_points=activity.total,
        bonus_points=bonus.points,
        fitness_level=determine_fitness_level(total),
        bonus_breakdown=BonusBreakdown(
            cardiovascular_percent=round(cardio.percent),
            recovery_percent=round(recovery.percent),
            activity_percent=round(activity.percent),
            excellent_categories=bonus.excellent_categories,
            requirements_explanation=bonus.detailed_explanation,
        ),
        history_items=(
            *cardio.items,
            *recovery.items,
            *activity.items,
            create_bonus_history_item(bonus),
        ),
    )


# ---------------------------------------------------------------------------
# Legacy adapters bound to the current scoring rules
# ---------------------------------------------------------------------------


def calculate_monthly_average(
    history_items: Sequence[legacy.HistoryEntry],
    current_metrics: HealthMetrics,
    window_days: int = 30,
    today: date | None = None,
) -> MonthlyAverage:
    return legacy.calculate_monthly_average(
        history_items,
        current_metrics,
        calculate_fitness_score,
        window_days=window_days,
        today=today,
    )


def convert_historical_data_to_history_items(
    historical_data: Sequence[legacy.LegacyDay],
) -> list[legacy.HistoryEntry]:
    return legacy.convert_historical_data_to_history_items(
        historical_data, calculate_fitness_score,
    )


def generate_sample_history_data(
    days: int = 30,
    seed: int | None = None,
    end: date | None = None,
) -> list[legacy.HistoryEntry]:
    return legacy.generate_sample_history_data(
        calculate_fitness_score, days=days, seed=seed, end=end,
    )
