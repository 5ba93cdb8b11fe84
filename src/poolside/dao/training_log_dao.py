"""Data Access Object for training logs."""

from datetime import date
from uuid import UUID

from supabase import Client

from poolside.dao.base import BaseDAO
from poolside.dao.performance_entry_dao import PerformanceEntryDAO
from poolside.logging import get_logger
from poolside.models.performance import PerformanceEntry, TrainingLog

logger = get_logger(__name__)

# Embed entries through the performance_entries.log_id foreign key
SELECT_WITH_ENTRIES = "*, performance_entries(*)"


class TrainingLogDAO(BaseDAO[TrainingLog]):
    """DAO for TrainingLog rows (``training_logs``)."""

    table_name = "training_logs"
    model_class = TrainingLog
    exclude_on_write = frozenset({"id", "created_at", "performance_entries"})

    def __init__(self, client: Client | None = None, entry_dao: PerformanceEntryDAO | None = None):
        super().__init__(client)
        self.entry_dao = entry_dao or PerformanceEntryDAO(self.client)

    def get_with_entries(self, id: UUID) -> TrainingLog | None:
        """Get a log with its performance entries embedded."""
        result = self.table.select(SELECT_WITH_ENTRIES).eq("id", str(id)).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def find_by_athlete(self, athlete_id: UUID, since: date | None = None) -> list[TrainingLog]:
        """Find an athlete's logs with entries, newest first.

        Args:
            athlete_id: The athlete's UUID
            since: Only logs dated strictly after this day

        Returns:
            List of TrainingLogs
        """
        query = self.table.select(SELECT_WITH_ENTRIES).eq("athlete_id", str(athlete_id))
        if since is not None:
            query = query.gt("date", since.isoformat())
        result = query.order("date", desc=True).execute()
        return [self._to_model(row) for row in result.data]

    def create_with_entries(self, log: TrainingLog, entries: list[PerformanceEntry]) -> TrainingLog:
        """Insert a log, then its entries.

        Returns:
            The stored log with the stored entries embedded
        """
        created = self.create(log)
        created.performance_entries = self.entry_dao.insert_many(created.id, entries)

        logger.info(
            "training_log_created",
            log_id=str(created.id),
            athlete_id=str(created.athlete_id),
            entries=len(created.performance_entries),
        )
        return created

    def update_with_entries(
        self, id: UUID, log: TrainingLog, entries: list[PerformanceEntry]
    ) -> TrainingLog | None:
        """Update a log and replace all of its entries.

        Returns:
            The updated log with new entries, or None if the log does not exist
        """
        updated = self.update(id, log)
        if updated is None:
            return None

        updated.performance_entries = self.entry_dao.replace_for_log(id, entries)
        logger.info("training_log_updated", log_id=str(id), entries=len(updated.performance_entries))
        return updated
