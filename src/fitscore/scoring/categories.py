"""Category point calculators.

Three categories, each a fixed set of sub-metrics mapped to points through
monotonic threshold tables:

    Cardiovascular (30)  -- resting HR 10, HRV 10, VO2 Max 10
    Recovery (35)        -- deep sleep 15, REM sleep 12, sleep consistency 8
    Activity (30)        -- daily training time 12, intensity 12, steps 6

A value of 0 (or anything negative / NaN) means "no data" and scores 0.
"""

from __future__ import annotations

from typing import Sequence

from fitscore.scoring.metrics import CategoryResult, HistoryItem


CARDIOVASCULAR = "Cardiovascular"
RECOVERY = "Recovery"
ACTIVITY = "Activity"

CATEGORY_MAX_POINTS = {
    CARDIOVASCULAR: 30,
    RECOVERY: 35,
    ACTIVITY: 30,
}


# ---------------------------------------------------------------------------
# Threshold tables: (threshold, points), best band first
# ---------------------------------------------------------------------------

# Lower is better: first row with value <= threshold wins
RHR_MAX = 10
RHR_TABLE = [(50, 10), (55, 9), (60, 8), (65, 7), (70, 5), (75, 4), (80, 2), (90, 1)]

# Higher is better: first row with value >= threshold wins
HRV_MAX = 10
HRV_TABLE = [(80, 10), (65, 9), (50, 8), (40, 6), (30, 4), (20, 2), (10, 1)]

VO2_MAX_MAX = 10
VO2_MAX_TABLE = [(55, 10), (50, 9), (45, 8), (40, 6), (35, 4), (30, 2), (25, 1)]

DEEP_SLEEP_MAX = 15
DEEP_SLEEP_TABLE = [(20, 15), (17, 13), (15, 11), (13, 9), (10, 6), (5, 3), (1, 1)]

REM_SLEEP_MAX = 12
REM_SLEEP_TABLE = [(22, 12), (20, 11), (18, 9), (15, 7), (12, 5), (8, 3), (3, 1)]

SLEEP_CONSISTENCY_MAX = 8
SLEEP_CONSISTENCY_TABLE = [(90, 8), (80, 7), (70, 5), (60, 4), (50, 2), (30, 1)]

TRAINING_TIME_MAX = 12
TRAINING_TIME_TABLE = [(60, 12), (45, 10), (30, 8), (20, 6), (10, 4), (5, 2), (1, 1)]

TRAINING_INTENSITY_MAX = 12
TRAINING_INTENSITY_TABLE = [(80, 12), (70, 10), (60, 8), (50, 6), (40, 4), (20, 2), (10, 1)]

DAILY_STEPS_MAX = 6
DAILY_STEPS_TABLE = [
    (12000, 6), (10000, 5), (8000, 4), (6000, 3), (4000, 2), (2000, 1),
]


def _clamp(points: int, max_points: int) -> int:
    return max(0, min(max_points, points))


def _table_points(
    value: float,
    table: Sequence[tuple[float, int]],
    max_points: int,
    lower_is_better: bool = False,
) -> tuple[int, float | None]:
    """Look up *value* in a threshold table.

    Returns:
        (points, matched threshold).  The threshold is None when no band
        was reached or the value is unavailable.
    """
    # Also rejects NaN, which fails every comparison
    if not value > 0:
        return 0, None

    for threshold, points in table:
        if lower_is_better:
            if value <= threshold:
                return _clamp(points, max_points), threshold
        elif value >= threshold:
            return _clamp(points, max_points), threshold
    return 0, None


def _score_item(
    category: str,
    metric: str,
    value: float,
    unit: str,
    table: Sequence[tuple[float, int]],
    max_points: int,
    lower_is_better: bool = False,
) -> HistoryItem:
    points, threshold = _table_points(value, table, max_points, lower_is_better)

    if not value > 0:
        explanation = f"No {metric.lower()} data available: 0/{max_points} points"
    elif threshold is None:
        limit = table[-1][0]
        side = "above" if lower_is_better else "below"
        explanation = (
            f"{metric} {value:g}{unit} is {side} {limit:g}{unit}: "
            f"0/{max_points} points"
        )
    else:
        side = "at or below" if lower_is_better else "at or above"
        explanation = (
            f"{metric} {value:g}{unit} is {side} {threshold:g}{unit}: "
            f"{points}/{max_points} points"
        )

    return HistoryItem(
        category=category,
        metric=metric,
        value=float(value),
        points=points,
        max_points=max_points,
        explanation=explanation,
    )


def _category(category: str, items: list[HistoryItem]) -> CategoryResult:
    max_points = CATEGORY_MAX_POINTS[category]
    total = _clamp(sum(item.points for item in items), max_points)
    return CategoryResult(
        category=category,
        total=total,
        max_points=max_points,
        items=tuple(items),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_cardiovascular_points(
    rhr: float,
    hrv: float,
    vo2_max: float,
) -> CategoryResult:
    """Cardiovascular health: resting HR, HRV and VO2 Max, 10 points each.

    Args:
        rhr: Resting heart rate (bpm), lower is better.
        hrv: Heart rate variability (ms), higher is better.
        vo2_max: VO2 Max (ml/kg/min), higher is better.
    """
    return _category(CARDIOVASCULAR, [
        _score_item(CARDIOVASCULAR, "Resting Heart Rate", rhr, " bpm",
                    RHR_TABLE, RHR_MAX, lower_is_better=True),
        _score_item(CARDIOVASCULAR, "Heart Rate Variability", hrv, " ms",
                    HRV_TABLE, HRV_MAX),
        _score_item(CARDIOVASCULAR, "VO2 Max", vo2_max, " ml/kg/min",
                    VO2_MAX_TABLE, VO2_MAX_MAX),
    ])


def calculate_recovery_points(
    deep_sleep_pct: float,
    rem_sleep_pct: float,
    sleep_consistency: float,
) -> CategoryResult:
    """Recovery: deep sleep (15), REM sleep (12) and sleep consistency (8)."""
    return _category(RECOVERY, [
        _score_item(RECOVERY, "Deep Sleep", deep_sleep_pct, "%",
                    DEEP_SLEEP_TABLE, DEEP_SLEEP_MAX),
        _score_item(RECOVERY, "REM Sleep", rem_sleep_pct, "%",
                    REM_SLEEP_TABLE, REM_SLEEP_MAX),
        _score_item(RECOVERY, "Sleep Consistency", sleep_consistency, "/100",
                    SLEEP_CONSISTENCY_TABLE, SLEEP_CONSISTENCY_MAX),
    ])


def calculate_activity_points(
    daily_training_minutes: float,
    training_intensity: float,
    daily_steps: float,
) -> CategoryResult:
    """Activity & training: training time (12), intensity (12), steps (6).

    Args:
        daily_training_minutes: Average training minutes per day (the
            monthly total divided by 30).
        training_intensity: Normalized 0-100 intensity.
        daily_steps: Step count for the day.
    """
    return _category(ACTIVITY, [
        _score_item(ACTIVITY, "Monthly Training Time", daily_training_minutes,
                    " min/day", TRAINING_TIME_TABLE, TRAINING_TIME_MAX),
        _score_item(ACTIVITY, "Training Intensity", training_intensity, "/100",
                    TRAINING_INTENSITY_TABLE, TRAINING_INTENSITY_MAX),
        _score_item(ACTIVITY, "Daily Steps", daily_steps, " steps",
                    DAILY_STEPS_TABLE, DAILY_STEPS_MAX),
    ])
