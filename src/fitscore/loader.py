"""Load metrics and daily history files for offline scoring.

Two formats are understood:

* a metrics file: one JSON object with the nine :class:`HealthMetrics`
  fields (camelCase or snake_case);
* a history file: JSONL, one day per line, e.g.::

    {"date": "2026-10-01",
     "steps": [{"value": 4200, "start": "2026-10-01T09:00:00"}],
     "heart_rate": [...], "hrv": [...],
     "sleep": [{"stage": "DEEP", "start": "...", "end": "..."}],
     "workouts": [{"start": "...", "duration_min": 40, "intensity": 70}],
     "vo2_max": 44.0}

Timestamps are ISO 8601.  Offset-aware ones are normalised to naive UTC,
so a file may mix ``Z``-suffixed and naive values.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from fitscore.scoring.metrics import HealthMetrics
from fitscore.scoring.samples import (
    DaySamples,
    HealthSample,
    SleepSample,
    SleepStage,
    WorkoutSample,
)

logger = logging.getLogger(__name__)


class LoaderError(ValueError):
    """An input file could not be read or holds a malformed record."""


def _parse_datetime(raw: str) -> datetime:
    """Parse an ISO 8601 timestamp into a naive UTC datetime.

    Offset-aware values (including a trailing ``Z``) are converted to UTC
    and stripped of their tzinfo so they compare with naive timestamps.
    """
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be a string, got {raw!r}")
    # fromisoformat() rejects a trailing "Z" before Python 3.11
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def _require_object(entry: Any, kind: str) -> dict[str, Any]:
    if not isinstance(entry, dict):
        raise ValueError(f"{kind} sample must be an object, got {entry!r}")
    return entry


def _health_sample(entry: dict[str, Any]) -> HealthSample:
    entry = _require_object(entry, "health")
    end = entry.get("end")
    return HealthSample(
        value=float(entry["value"]),
        start=_parse_datetime(entry["start"]),
        end=_parse_datetime(end) if end else None,
    )


def _sleep_sample(entry: dict[str, Any]) -> SleepSample:
    entry = _require_object(entry, "sleep")
    return SleepSample(
        stage=SleepStage(str(entry["stage"]).upper()),
        start=_parse_datetime(entry["start"]),
        end=_parse_datetime(entry["end"]),
    )


def _workout_sample(entry: dict[str, Any]) -> WorkoutSample:
    entry = _require_object(entry, "workout")
    return WorkoutSample(
        start=_parse_datetime(entry["start"]),
        duration_min=float(entry["duration_min"]),
        intensity=float(entry.get("intensity", 0.0)),
    )


def parse_day(entry: dict[str, Any]) -> DaySamples:
    """Build a :class:`DaySamples` from one decoded history record.

    Raises:
        KeyError, ValueError, TypeError: On missing or malformed fields.
    """
    return DaySamples(
        date=date.fromisoformat(entry["date"]),
        steps=tuple(_health_sample(s) for s in entry.get("steps", [])),
        heart_rate=tuple(_health_sample(s) for s in entry.get("heart_rate", [])),
        hrv=tuple(_health_sample(s) for s in entry.get("hrv", [])),
        sleep=tuple(_sleep_sample(s) for s in entry.get("sleep", [])),
        workouts=tuple(_workout_sample(s) for s in entry.get("workouts", [])),
        vo2_max=float(entry.get("vo2_max", 0.0)),
    )


def load_metrics(path: str | Path) -> HealthMetrics:
    """Read a single JSON metrics object."""
    path = Path(path)
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise LoaderError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise LoaderError(f"{path.name}: invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise LoaderError(f"{path.name}: expected a JSON object")
    try:
        return HealthMetrics.from_dict(data)
    except (TypeError, ValueError) as e:
        raise LoaderError(f"{path.name}: {e}") from e


def load_history(path: str | Path) -> list[DaySamples]:
    """Read a JSONL history file, one :class:`DaySamples` per line.

    Blank lines are skipped.  Days are returned in file order.
    """
    path = Path(path)
    days: list[DaySamples] = []
    try:
        f = open(path)
    except OSError as e:
        raise LoaderError(f"Cannot read {path}: {e}") from e

    with f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                days.append(parse_day(json.loads(line)))
            except json.JSONDecodeError as e:
                raise LoaderError(f"{path.name} line {line_num}: invalid JSON") from e
            except KeyError as e:
                raise LoaderError(
                    f"{path.name} line {line_num}: missing field {e}"
                ) from e
            except (TypeError, ValueError) as e:
                raise LoaderError(f"{path.name} line {line_num}: {e}") from e

    logger.debug("Loaded %d days from %s", len(days), path)
    return days
