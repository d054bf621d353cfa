"""Bonus-consistency rule and fitness level classification."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from fitscore.scoring.categories import (
    ACTIVITY,
    CARDIOVASCULAR,
    CATEGORY_MAX_POINTS,
    RECOVERY,
)
from fitscore.scoring.metrics import HistoryItem


CATEGORY_ORDER = (CARDIOVASCULAR, RECOVERY, ACTIVITY)

# A category qualifies for the bonus at this share of its max
BONUS_THRESHOLD_PERCENT = 75.0

# Number of qualifying categories -> bonus points
BONUS_POINTS_BY_COUNT = {0: 0, 1: 1, 2: 3, 3: 5}
BONUS_MAX = 5


class FitnessLevel(str, Enum):
    """Ordinal classification of the 0-100 total score."""

    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    VERY_GOOD = "Very Good"
    EXCELLENT = "Excellent"


# (minimum total, level), highest first; the last row covers everything else
FITNESS_LEVEL_THRESHOLDS = [
    (90, FitnessLevel.EXCELLENT),
    (75, FitnessLevel.VERY_GOOD),
    (60, FitnessLevel.GOOD),
    (40, FitnessLevel.FAIR),
    (0, FitnessLevel.POOR),
]


@dataclass(frozen=True)
class BonusResult:
    """Bonus points and which categories earned them."""

    points: int
    qualifying: Mapping[str, bool]
    percentages: Mapping[str, float]
    detailed_explanation: str

    @property
    def excellent_categories(self) -> tuple[str, ...]:
        return tuple(name for name in CATEGORY_ORDER if self.qualifying.get(name))

    def __repr__(self) -> str:
        return (
            f"BonusResult(points={self.points}, "
            f"excellent={list(self.excellent_categories)})"
        )


def _explain(qualifying: Mapping[str, bool], points: int) -> str:
    names = [name for name in CATEGORY_ORDER if qualifying[name]]
    threshold = f"{BONUS_THRESHOLD_PERCENT:g}%"

    if len(names) == len(CATEGORY_ORDER):
        return (
            f"Excellent consistency: all three categories reached {threshold} "
            f"of their maximum ({points} bonus points)"
        )
    if not names:
        return (
            f"No category reached {threshold} of its maximum (0 bonus points)"
        )
    joined = " and ".join(names)
    return (
        f"{joined} reached {threshold} of the maximum "
        f"({len(names)} of 3 categories, {points} bonus "
        f"point{'s' if points != 1 else ''})"
    )


def calculate_bonus_points(
    cardio_total: float,
    recovery_total: float,
    activity_total: float,
) -> BonusResult:
    """Award consistency bonus points for categories at >= 75 % of max.

    One qualifying category earns 1 point, two earn 3, all three earn 5.
    """
    totals = {
        CARDIOVASCULAR: cardio_total,
        RECOVERY: recovery_total,
        ACTIVITY: activity_total,
    }
    percentages: dict[str, float] = {}
    qualifying: dict[str, bool] = {}
    for name in CATEGORY_ORDER:
        total = totals[name]
        pct = total / CATEGORY_MAX_POINTS[name] * 100.0 if total > 0 else 0.0
        percentages[name] = pct
        qualifying[name] = pct >= BONUS_THRESHOLD_PERCENT

    points = BONUS_POINTS_BY_COUNT[sum(qualifying.values())]

    return BonusResult(
        points=points,
        qualifying=qualifying,
        percentages=percentages,
        detailed_explanation=_explain(qualifying, points),
    )


def create_bonus_history_item(bonus: BonusResult) -> HistoryItem:
    """Wrap a bonus result as a history item for the explanation feed."""
    return HistoryItem(
        category="Bonus",
        metric="Bonus Consistency",
        value=float(sum(bonus.qualifying.values())),
        points=bonus.points,
        max_points=BONUS_MAX,
        explanation=bonus.detailed_explanation,
    )


def determine_fitness_level(total_score: float) -> FitnessLevel:
    """Bucket a 0-100 total into a :class:`FitnessLevel`."""
    if math.isnan(total_score):
        return FitnessLevel.POOR
    for minimum, level in FITNESS_LEVEL_THRESHOLDS:
        if total_score >= minimum:
            return level
    return FitnessLevel.POOR
