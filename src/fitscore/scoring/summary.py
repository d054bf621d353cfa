"""Score result records and the monthly average reducer.

Both records are JSON-serializable through ``to_dict`` / ``to_json``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from typing import Any, Sequence

import numpy as np

from fitscore.scoring.bonus import FitnessLevel, determine_fitness_level
from fitscore.scoring.metrics import HistoryItem


def _plain(value: Any) -> Any:
    """Recursively convert enums and tuples into JSON-friendly values."""
    if isinstance(value, FitnessLevel):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class BonusBreakdown:
    """Per-category percent of max and the categories that earned a bonus."""

    cardiovascular_percent: int
    recovery_percent: int
    activity_percent: int
    excellent_categories: tuple[str, ...]
    requirements_explanation: str


@dataclass(frozen=True)
class FitnessScoreResult:
    """A complete fitness score with its breakdown and explanations."""

    total_score: int  # 0-100
    cardiovascular_points: int  # 0-30
    recovery_points: int  # 0-35
    activity_points: int  # 0-30
    bonus_points: int  # 0, 1, 3 or 5
    fitness_level: FitnessLevel
    bonus_breakdown: BonusBreakdown
    history_items: tuple[HistoryItem, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (JSON-friendly)."""
        return _plain(asdict(self))

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"FitnessScoreResult(total={self.total_score}, "
            f"cardio={self.cardiovascular_points}/30, "
            f"recovery={self.recovery_points}/35, "
            f"activity={self.activity_points}/30, "
            f"bonus={self.bonus_points}, "
            f"level={self.fitness_level.value})"
        )


@dataclass(frozen=True)
class MonthlyAverage:
    """Mean of a run of daily scores."""

    total_score: float
    cardiovascular_points: float
    recovery_points: float
    activity_points: float
    bonus_points: float
    days: int
    fitness_level: FitnessLevel

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"MonthlyAverage(total={self.total_score:.1f}, "
            f"days={self.days}, level={self.fitness_level.value})"
        )


def calculate_monthly_average_from_daily_scores(
    daily_scores: Sequence[FitnessScoreResult],
) -> MonthlyAverage:
    """Average the total and every category sub-total across days.

    An empty sequence averages to 0 rather than failing.
    """
    if len(daily_scores) == 0:
        return MonthlyAverage(
            total_score=0.0,
            cardiovascular_points=0.0,
            recovery_points=0.0,
            activity_points=0.0,
            bonus_points=0.0,
            days=0,
            fitness_level=determine_fitness_level(0.0),
        )

    # One row per day: total, cardio, recovery, activity, bonus
    arr = np.array(
        [
            [
                s.total_score,
                s.cardiovascular_points,
                s.recovery_points,
                s.activity_points,
                s.bonus_points,
            ]
            for s in daily_scores
        ],
        dtype=np.float64,
    )
    means = [round(float(m), 1) for m in arr.mean(axis=0)]

    return MonthlyAverage(
        total_score=means[0],
        cardiovascular_points=means[1],
        recovery_points=means[2],
        activity_points=means[3],
        bonus_points=means[4],
        days=len(daily_scores),
        fitness_level=determine_fitness_level(means[0]),
    )
