"""Data Access Objects for database operations."""

from poolside.dao.base import BaseDAO, SupabaseClient
from poolside.dao.performance_entry_dao import PerformanceEntryDAO
from poolside.dao.training_log_dao import TrainingLogDAO

__all__ = [
    "BaseDAO",
    "PerformanceEntryDAO",
    "SupabaseClient",
    "TrainingLogDAO",
]
