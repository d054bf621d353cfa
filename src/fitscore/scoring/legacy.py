"""Adapters for the older history shapes.

Every function here takes the scoring function as ``score_fn`` instead of
importing the orchestrator, so this module sits below
:mod:`fitscore.scoring.fitness` in the import graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Callable, Sequence

import numpy as np

from fitscore.scoring.metrics import HealthMetrics, get_mock_health_metrics
from fitscore.scoring.samples import (
    DaySamples,
    HealthSample,
    SleepSample,
    day_metrics_from_samples,
)
from fitscore.scoring.summary import (
    FitnessScoreResult,
    MonthlyAverage,
    calculate_monthly_average_from_daily_scores,
)

logger = logging.getLogger(__name__)

ScoreFn = Callable[[HealthMetrics], FitnessScoreResult]

# Relative spread of each mock field when generating sample history
SAMPLE_JITTER = {
    "resting_heart_rate": 0.06,
    "heart_rate_variability": 0.20,
    "vo2_max": 0.04,
    "deep_sleep_percentage": 0.20,
    "rem_sleep_percentage": 0.15,
    "sleep_consistency": 0.10,
    "monthly_training_time": 0.35,
    "training_intensity": 0.15,
    "daily_steps": 0.30,
}


@dataclass(frozen=True)
class HistoryEntry:
    """A dated fitness score."""

    date: date
    result: FitnessScoreResult

    def __repr__(self) -> str:
        return f"HistoryEntry({self.date.isoformat()}: {self.result.total_score})"


@dataclass(frozen=True)
class LegacyDay:
    """Older per-day history record carrying only steps and sleep."""

    date: date
    steps_data: tuple[HealthSample, ...] = ()
    sleep_data: tuple[SleepSample, ...] = ()


def convert_historical_data_to_history_items(
    historical_data: Sequence[LegacyDay],
    score_fn: ScoreFn,
) -> list[HistoryEntry]:
    """Score each legacy day and return dated entries, newest first."""
    entries = []
    for day in historical_data:
        samples = DaySamples(
            date=day.date,
            steps=tuple(day.steps_data),
            sleep=tuple(day.sleep_data),
        )
        entries.append(HistoryEntry(
            date=day.date,
            result=score_fn(day_metrics_from_samples(samples)),
        ))

    logger.debug("Converted %d legacy days", len(entries))
    return sorted(entries, key=lambda e: e.date, reverse=True)


def calculate_monthly_average(
    history_items: Sequence[HistoryEntry],
    current_metrics: HealthMetrics,
    score_fn: ScoreFn,
    window_days: int = 30,
    today: date | None = None,
) -> MonthlyAverage:
    """Average today's live score with the preceding history window.

    Args:
        history_items: Dated scores, any order.
        current_metrics: Today's metrics, scored with *score_fn*.
        score_fn: The scoring function.
        window_days: Length of the window including today.
        today: Reference date (default: today).

    Returns:
        MonthlyAverage over today plus history entries within the window.
        History entries dated *today* are superseded by the live score.
    """
    today = today or date.today()
    start = today - timedelta(days=window_days - 1)

    scores = [score_fn(current_metrics)]
    skipped = 0
    for entry in history_items:
        if start <= entry.date < today:
            scores.append(entry.result)
        else:
            skipped += 1

    if skipped:
        logger.debug("Ignored %d history entries outside %s..%s", skipped, start, today)
    return calculate_monthly_average_from_daily_scores(scores)


def generate_sample_history_data(
    score_fn: ScoreFn,
    days: int = 30,
    seed: int | None = None,
    end: date | None = None,
) -> list[HistoryEntry]:
    """Synthesize a run of daily scores around the mock profile.

    Each field of :func:`get_mock_health_metrics` is jittered with a
    normal draw (see ``SAMPLE_JITTER``) and floored at 0.  The same seed
    always yields the same history.

    Returns:
        *days* entries ending at *end* (default: today), newest first.
    """
    rng = np.random.default_rng(seed)
    end = end or date.today()
    base = get_mock_health_metrics()

    entries = []
    for offset in range(days):
        changes = {}
        for name, spread in SAMPLE_JITTER.items():
            value = getattr(base, name)
            drawn = float(rng.normal(value, value * spread))
            changes[name] = round(max(drawn, 0.0), 1)
        metrics = replace(base, **changes)
        entries.append(HistoryEntry(
            date=end - timedelta(days=offset),
            result=score_fn(metrics),
        ))

    logger.debug("Generated %d sample history days (seed=%s)", days, seed)
    return entries
