"""Fitness scoring engine.

Modules:
    metrics     -- HealthMetrics input record and explanation records
    categories  -- Cardiovascular / Recovery / Activity point calculators
    bonus       -- Bonus-consistency rule and fitness level classifier
    summary     -- Score result records and the monthly average reducer
    fitness     -- Orchestrator combining categories, bonus and level
    samples     -- Raw per-day samples and their reduction to HealthMetrics
    daily       -- Per-day scoring and the daily-based monthly trend
    legacy      -- Adapters for older history shapes (injected scorer)
"""

from fitscore.scoring.metrics import (
    HealthMetrics,
    HistoryItem,
    CategoryResult,
    get_mock_health_metrics,
    get_zero_health_metrics,
)
from fitscore.scoring.categories import (
    calculate_cardiovascular_points,
    calculate_recovery_points,
    calculate_activity_points,
    CATEGORY_MAX_POINTS,
)
from fitscore.scoring.bonus import (
    calculate_bonus_points,
    create_bonus_history_item,
    determine_fitness_level,
    BonusResult,
    FitnessLevel,
)
from fitscore.scoring.summary import (
    calculate_monthly_average_from_daily_scores,
    BonusBreakdown,
    FitnessScoreResult,
    MonthlyAverage,
)
from fitscore.scoring.fitness import (
    calculate_fitness_score,
    calculate_monthly_average,
    convert_historical_data_to_history_items,
    generate_sample_history_data,
)
from fitscore.scoring.samples import (
    day_metrics_from_samples,
    group_samples_by_day,
    sleep_metrics_from_samples,
    DaySamples,
    HealthSample,
    SleepSample,
    SleepStage,
    WorkoutSample,
)
from fitscore.scoring.daily import (
    calculate_daily_fitness_score,
    calculate_daily_scores_from_historical_data,
    calculate_daily_based_monthly_average,
)
from fitscore.scoring.legacy import HistoryEntry, LegacyDay

__all__ = [
    # metrics
    "HealthMetrics",
    "HistoryItem",
    "CategoryResult",
    "get_mock_health_metrics",
    "get_zero_health_metrics",
    # categories
    "calculate_cardiovascular_points",
    "calculate_recovery_points",
    "calculate_activity_points",
    "CATEGORY_MAX_POINTS",
    # bonus
    "calculate_bonus_points",
    "create_bonus_history_item",
    "determine_fitness_level",
    "BonusResult",
    "FitnessLevel",
    # summary
    "calculate_monthly_average_from_daily_scores",
    "BonusBreakdown",
    "FitnessScoreResult",
    "MonthlyAverage",
    # fitness
    "calculate_fitness_score",
    "calculate_monthly_average",
    "convert_historical_data_to_history_items",
    "generate_sample_history_data",
    # samples
    "day_metrics_from_samples",
    "group_samples_by_day",
    "sleep_metrics_from_samples",
    "DaySamples",
    "HealthSample",
    "SleepSample",
    "SleepStage",
    "WorkoutSample",
    # daily
    "calculate_daily_fitness_score",
    "calculate_daily_scores_from_historical_data",
    "calculate_daily_based_monthly_average",
    # legacy
    "HistoryEntry",
    "LegacyDay",
]
