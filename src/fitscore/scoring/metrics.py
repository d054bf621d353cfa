"""Input and explanation records shared by every scoring module.

A :class:`HealthMetrics` is the single record the data source hands to the
engine.  Zero in any field means the value was unavailable.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Any, Mapping


# camelCase keys used by the health data source, mapped to field names
_CAMEL_KEYS = {
    "restingHeartRate": "resting_heart_rate",
    "heartRateVariability": "heart_rate_variability",
    "vo2Max": "vo2_max",
    "deepSleepPercentage": "deep_sleep_percentage",
    "remSleepPercentage": "rem_sleep_percentage",
    "sleepConsistency": "sleep_consistency",
    "monthlyTrainingTime": "monthly_training_time",
    "trainingIntensity": "training_intensity",
    "dailySteps": "daily_steps",
}


@dataclass(frozen=True)
class HealthMetrics:
    """Physiological and activity measurements for one scoring run."""

    resting_heart_rate: float = 0.0  # bpm
    heart_rate_variability: float = 0.0  # ms
    vo2_max: float = 0.0  # ml/kg/min
    deep_sleep_percentage: float = 0.0
    rem_sleep_percentage: float = 0.0
    sleep_consistency: float = 0.0  # 0-100, lower variance = higher
    monthly_training_time: float = 0.0  # minutes per month
    training_intensity: float = 0.0  # 0-100
    daily_steps: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HealthMetrics:
        """Build metrics from a mapping with snake_case or camelCase keys.

        Unknown keys are ignored and missing ones default to 0.
        """
        names = {f.name for f in fields(cls)}
        values: dict[str, float] = {}
        for key, raw in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in names and raw is not None:
                values[name] = float(raw)
        return cls(**values)

    def __repr__(self) -> str:
        return (
            f"HealthMetrics(rhr={self.resting_heart_rate:.0f}bpm, "
            f"hrv={self.heart_rate_variability:.0f}ms, "
            f"vo2={self.vo2_max:.1f}, "
            f"steps={self.daily_steps:.0f})"
        )


@dataclass(frozen=True)
class HistoryItem:
    """One explained line of a score: a sub-metric or the bonus."""

    category: str
    metric: str
    value: float  # raw input fed to the scale
    points: int
    max_points: int
    explanation: str


@dataclass(frozen=True)
class CategoryResult:
    """Points earned in one category plus the per-sub-metric explanations."""

    category: str
    total: int
    max_points: int
    items: tuple[HistoryItem, ...]

    @property
    def percent(self) -> float:
        return self.total / self.max_points * 100.0 if self.max_points else 0.0

    def __repr__(self) -> str:
        return f"CategoryResult({self.category}: {self.total}/{self.max_points})"


def get_zero_health_metrics() -> HealthMetrics:
    """Metrics with every field unavailable."""
    return HealthMetrics()


def get_mock_health_metrics() -> HealthMetrics:
    """A moderately fit adult, used for demos and sample history."""
    return HealthMetrics(
        resting_heart_rate=58.0,
        heart_rate_variability=45.0,
        vo2_max=42.5,
        deep_sleep_percentage=16.0,
        rem_sleep_percentage=21.0,
        sleep_consistency=82.0,
        monthly_training_time=900.0,  # 30 min/day
        training_intensity=65.0,
        daily_steps=8500.0,
    )
