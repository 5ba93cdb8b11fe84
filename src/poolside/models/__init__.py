"""Pydantic models for training logs and performances."""

from poolside.models.performance import (
    PerformanceEntry,
    PerformanceEntryInput,
    TimingMethod,
    TrainingLog,
)

__all__ = [
    "PerformanceEntry",
    "PerformanceEntryInput",
    "TimingMethod",
    "TrainingLog",
]
