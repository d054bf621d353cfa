"""Raw per-day health samples and their reduction to :class:`HealthMetrics`.

Historical data arrives as timestamped samples (steps, heart rate, HRV,
sleep stages, workouts).  Each calendar day is reduced to one
``HealthMetrics`` with the same rules used for live scoring, so historical
and live scores are comparable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Sequence

import numpy as np

from fitscore.scoring.metrics import HealthMetrics


DAYS_PER_MONTH = 30

# Rolling window (samples) for the resting heart rate estimate
RESTING_HR_WINDOW = 5

# Consistency points lost per hour of sleep-duration standard deviation
SLEEP_CONSISTENCY_PENALTY = 20.0


class SleepStage(str, Enum):
    """Sleep analysis sample categories reported by the health store."""

    INBED = "INBED"
    ASLEEP = "ASLEEP"
    AWAKE = "AWAKE"
    CORE = "CORE"
    DEEP = "DEEP"
    REM = "REM"


@dataclass(frozen=True)
class HealthSample:
    """A single quantity sample (steps, bpm, ms...)."""

    value: float
    start: datetime
    end: datetime | None = None


@dataclass(frozen=True)
class SleepSample:
    """A sleep-stage interval."""

    stage: SleepStage
    start: datetime
    end: datetime

    @property
    def duration_hours(self) -> float:
        return (self.end - self.start).total_seconds() / 3600.0


@dataclass(frozen=True)
class WorkoutSample:
    """A workout session."""

    start: datetime
    duration_min: float
    intensity: float  # 0-100


@dataclass(frozen=True)
class DaySamples:
    """One calendar day of raw samples."""

    date: date
    steps: tuple[HealthSample, ...] = ()
    heart_rate: tuple[HealthSample, ...] = ()
    hrv: tuple[HealthSample, ...] = ()
    sleep: tuple[SleepSample, ...] = ()
    workouts: tuple[WorkoutSample, ...] = ()
    vo2_max: float = 0.0

    def __repr__(self) -> str:
        return (
            f"DaySamples({self.date.isoformat()}: "
            f"steps={len(self.steps)}, hr={len(self.heart_rate)}, "
            f"hrv={len(self.hrv)}, sleep={len(self.sleep)}, "
            f"workouts={len(self.workouts)})"
        )


@dataclass(frozen=True)
class SleepMetrics:
    """Sleep-derived recovery inputs."""

    deep_sleep_percentage: float = 0.0
    rem_sleep_percentage: float = 0.0
    sleep_consistency: float = 0.0


# ---------------------------------------------------------------------------
# Per-metric reductions
# ---------------------------------------------------------------------------


def sleep_metrics_from_samples(samples: Sequence[SleepSample]) -> SleepMetrics:
    """Derive deep/REM percentages and consistency from sleep samples.

    Percentages are shares of total sampled hours.  Consistency is
    ``100 - 20 * std(sample hours)``, floored at 0.
    """
    if len(samples) == 0:
        return SleepMetrics()

    hours = np.array([max(s.duration_hours, 0.0) for s in samples], dtype=np.float64)
    total = float(np.sum(hours))
    deep = float(sum(h for s, h in zip(samples, hours) if s.stage == SleepStage.DEEP))
    rem = float(sum(h for s, h in zip(samples, hours) if s.stage == SleepStage.REM))

    deep_pct = deep / total * 100.0 if total > 0 else 0.0
    rem_pct = rem / total * 100.0 if total > 0 else 0.0

    std = float(np.std(hours))
    consistency = max(0.0, 100.0 - std * SLEEP_CONSISTENCY_PENALTY)

    return SleepMetrics(
        deep_sleep_percentage=round(deep_pct, 1),
        rem_sleep_percentage=round(rem_pct, 1),
        sleep_consistency=float(round(consistency)),
    )


def resting_hr_from_samples(
    samples: Sequence[HealthSample],
    window: int = RESTING_HR_WINDOW,
) -> float:
    """Resting HR as the lowest rolling mean of *window* consecutive samples.

    Falls back to the overall mean for short series; 0 when empty.
    """
    if len(samples) == 0:
        return 0.0
    ordered = sorted(samples, key=lambda s: s.start)
    arr = np.asarray([s.value for s in ordered], dtype=np.float64)
    if len(arr) < window:
        return float(round(float(np.mean(arr))))

    cumsum = np.insert(np.cumsum(arr), 0, 0)
    rolling = (cumsum[window:] - cumsum[:-window]) / window
    return float(round(float(np.min(rolling))))


def _mean_value(samples: Sequence[HealthSample]) -> float:
    if len(samples) == 0:
        return 0.0
    return float(round(float(np.mean([s.value for s in samples]))))


def _training(
    workouts: Sequence[WorkoutSample],
) -> tuple[float, float]:
    """Total minutes and duration-weighted mean intensity for a day."""
    minutes = np.array([max(w.duration_min, 0.0) for w in workouts], dtype=np.float64)
    total = float(np.sum(minutes)) if len(minutes) else 0.0
    if total <= 0:
        return 0.0, 0.0
    intensities = np.array([w.intensity for w in workouts], dtype=np.float64)
    intensity = float(np.sum(minutes * intensities) / total)
    return total, round(intensity, 1)


def day_metrics_from_samples(day: DaySamples) -> HealthMetrics:
    """Reduce one day of raw samples to a :class:`HealthMetrics` record.

    The day's training minutes are stored as a monthly figure
    (``minutes * DAYS_PER_MONTH``) so the scoring step, which divides the
    monthly total by the same constant, sees that day's minutes.
    """
    sleep = sleep_metrics_from_samples(day.sleep)
    training_min, intensity = _training(day.workouts)

    return HealthMetrics(
        resting_heart_rate=resting_hr_from_samples(day.heart_rate),
        heart_rate_variability=_mean_value(day.hrv),
        vo2_max=max(float(day.vo2_max), 0.0),
        deep_sleep_percentage=sleep.deep_sleep_percentage,
        rem_sleep_percentage=sleep.rem_sleep_percentage,
        sleep_consistency=sleep.sleep_consistency,
        monthly_training_time=training_min * DAYS_PER_MONTH,
        training_intensity=intensity,
        daily_steps=float(sum(max(s.value, 0.0) for s in day.steps)),
    )


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


def group_samples_by_day(
    steps: Iterable[HealthSample] = (),
    heart_rate: Iterable[HealthSample] = (),
    hrv: Iterable[HealthSample] = (),
    sleep: Iterable[SleepSample] = (),
    workouts: Iterable[WorkoutSample] = (),
) -> list[DaySamples]:
    """Bucket flat sample streams by the calendar date of each sample start.

    Returns:
        One DaySamples per date that has any sample, newest day first.
    """
    buckets: dict[date, dict[str, list]] = {}

    def bucket(start: datetime) -> dict[str, list]:
        return buckets.setdefault(start.date(), {
            "steps": [], "heart_rate": [], "hrv": [], "sleep": [], "workouts": [],
        })

    for s in steps:
        bucket(s.start)["steps"].append(s)
    for s in heart_rate:
        bucket(s.start)["heart_rate"].append(s)
    for s in hrv:
        bucket(s.start)["hrv"].append(s)
    for s in sleep:
        bucket(s.start)["sleep"].append(s)
    for w in workouts:
        bucket(w.start)["workouts"].append(w)

    return [
        DaySamples(
            date=d,
            steps=tuple(b["steps"]),
            heart_rate=tuple(b["heart_rate"]),
            hrv=tuple(b["hrv"]),
            sleep=tuple(b["sleep"]),
            workouts=tuple(b["workouts"]),
        )
        for d, b in sorted(buckets.items(), key=lambda kv: kv[0], reverse=True)
    ]
