"""Shared fixtures and helpers for the fitscore test suite."""

from __future__ import annotations

import json
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

from fitscore.scoring.metrics import HealthMetrics, get_mock_health_metrics
from fitscore.scoring.samples import (
    DaySamples,
    HealthSample,
    SleepSample,
    SleepStage,
    WorkoutSample,
)


# ---------------------------------------------------------------------------
# Metrics fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def perfect_metrics() -> HealthMetrics:
    """Every sub-metric in its top band (100/100)."""
    return HealthMetrics(
        resting_heart_rate=48.0,
        heart_rate_variability=90.0,
        vo2_max=58.0,
        deep_sleep_percentage=22.0,
        rem_sleep_percentage=24.0,
        sleep_consistency=95.0,
        monthly_training_time=2400.0,  # 80 min/day
        training_intensity=85.0,
        daily_steps=13000.0,
    )


@pytest.fixture
def mock_metrics() -> HealthMetrics:
    """The built-in mock profile (70/100, recovery only above 75 %)."""
    return get_mock_health_metrics()


# ---------------------------------------------------------------------------
# Sample-building helpers
# ---------------------------------------------------------------------------


def at(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute)


def make_sleep(day: date, stages: list[tuple[str, float]], start_hour: int = 0) -> tuple[SleepSample, ...]:
    """Consecutive sleep samples starting at *start_hour* on *day*."""
    samples = []
    cursor = at(day, start_hour)
    for stage, hours in stages:
        end = cursor + timedelta(hours=hours)
        samples.append(SleepSample(stage=SleepStage(stage), start=cursor, end=end))
        cursor = end
    return tuple(samples)


def make_day(
    day: date = date(2026, 10, 1),
    steps: list[float] | None = None,
    heart_rate: list[float] | None = None,
    hrv: list[float] | None = None,
    sleep: list[tuple[str, float]] | None = None,
    workouts: list[tuple[float, float]] | None = None,
    vo2_max: float = 0.0,
) -> DaySamples:
    """Build a DaySamples with hourly step / HR / HRV samples."""
    return DaySamples(
        date=day,
        steps=tuple(HealthSample(v, at(day, 8 + i)) for i, v in enumerate(steps or [])),
        heart_rate=tuple(
            HealthSample(v, at(day, i // 60, i % 60)) for i, v in enumerate(heart_rate or [])
        ),
        hrv=tuple(HealthSample(v, at(day, 3, i)) for i, v in enumerate(hrv or [])),
        sleep=make_sleep(day, sleep or []),
        workouts=tuple(
            WorkoutSample(at(day, 18), duration_min=m, intensity=i)
            for m, i in (workouts or [])
        ),
        vo2_max=vo2_max,
    )


def fit_day(day: date = date(2026, 10, 1)) -> DaySamples:
    """A day that reduces to top-band metrics in every sub-metric."""
    return make_day(
        day,
        steps=[7000, 6500],
        heart_rate=[48.0] * 10,
        hrv=[85.0, 95.0],
        sleep=[("CORE", 2.0), ("DEEP", 2.0), ("REM", 2.0), ("CORE", 2.0)],
        workouts=[(70, 85)],
        vo2_max=56.0,
    )


# ---------------------------------------------------------------------------
# JSONL file helpers
# ---------------------------------------------------------------------------


def write_jsonl(path: Path, entries: list[dict]) -> Path:
    """Write a list of dicts as JSONL to the given path."""
    with open(path, "w") as f:
        for entry in entries:
            f.write(json.dumps(entry) + "\n")
    return path


def make_day_entry(day: str = "2026-10-01") -> dict:
    """A JSON history record equivalent to :func:`fit_day`."""
    return {
        "date": day,
        "steps": [
            {"value": 7000, "start": f"{day}T08:00:00"},
            {"value": 6500, "start": f"{day}T09:00:00"},
        ],
        "heart_rate": [
            {"value": 48, "start": f"{day}T00:{m:02d}:00"} for m in range(10)
        ],
        "hrv": [
            {"value": 85, "start": f"{day}T03:00:00"},
            {"value": 95, "start": f"{day}T03:01:00"},
        ],
        "sleep": [
            {"stage": "CORE", "start": f"{day}T00:00:00", "end": f"{day}T02:00:00"},
            {"stage": "DEEP", "start": f"{day}T02:00:00", "end": f"{day}T04:00:00"},
            {"stage": "rem", "start": f"{day}T04:00:00", "end": f"{day}T06:00:00"},
            {"stage": "CORE", "start": f"{day}T06:00:00", "end": f"{day}T08:00:00"},
        ],
        "workouts": [
            {"start": f"{day}T18:00:00", "duration_min": 70, "intensity": 85},
        ],
        "vo2_max": 56.0,
    }
