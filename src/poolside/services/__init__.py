"""Services built on the swim time codec and training log models."""

from poolside.services.performance_stats import (
    Period,
    TimeRange,
    filter_logs,
    group_logs,
    personal_bests,
    progress_rates,
    stroke_series,
)
from poolside.services.time_batch import TimeBatchResult, TimeBatchRow, normalize_batch

__all__ = [
    # Performance stats
    "Period",
    "TimeRange",
    "filter_logs",
    "group_logs",
    "personal_bests",
    "progress_rates",
    "stroke_series",
    # Batch normalization
    "TimeBatchResult",
    "TimeBatchRow",
    "normalize_batch",
]
