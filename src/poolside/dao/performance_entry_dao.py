"""Data Access Object for performance entries."""

from uuid import UUID

from supabase import Client

from poolside.dao.base import BaseDAO
from poolside.logging import get_logger
from poolside.models.performance import PerformanceEntry

logger = get_logger(__name__)


class PerformanceEntryDAO(BaseDAO[PerformanceEntry]):
    """DAO for PerformanceEntry rows (``performance_entries``)."""

    table_name = "performance_entries"
    model_class = PerformanceEntry
    exclude_on_write = frozenset({"id", "created_at"})

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def find_by_log(self, log_id: UUID) -> list[PerformanceEntry]:
        """All entries of a training log, in insertion order."""
        result = (
            self.table.select("*")
            .eq("log_id", str(log_id))
            .order("created_at")
            .execute()
        )
        return [self._to_model(row) for row in result.data]

    def find_by_stroke(self, stroke: str, log_ids: list[UUID]) -> list[PerformanceEntry]:
        """Entries for one stroke across the given logs, fastest first."""
        if not log_ids:
            return []
        result = (
            self.table.select("*")
            .eq("stroke", stroke)
            .in_("log_id", [str(log_id) for log_id in log_ids])
            .order("time_seconds")
            .execute()
        )
        return [self._to_model(row) for row in result.data]

    def insert_many(self, log_id: UUID, entries: list[PerformanceEntry]) -> list[PerformanceEntry]:
        """Insert entries under a log in one request.

        Entries without a stroke or time are dropped before insert.
        """
        rows = []
        for entry in entries:
            if not entry.stroke or entry.time_seconds <= 0:
                continue
            row = self._to_db(entry)
            row["log_id"] = str(log_id)
            rows.append(row)

        if not rows:
            return []

        result = self.table.insert(rows).execute()
        return [self._to_model(row) for row in result.data]

    def delete_by_log(self, log_id: UUID) -> int:
        """Delete every entry of a log; returns how many went."""
        result = self.table.delete().eq("log_id", str(log_id)).execute()
        return len(result.data)

    def replace_for_log(self, log_id: UUID, entries: list[PerformanceEntry]) -> list[PerformanceEntry]:
        """Swap a log's entries for a new set (delete, then insert)."""
        removed = self.delete_by_log(log_id)
        inserted = self.insert_many(log_id, entries)
        logger.info(
            "performance_entries_replaced",
            log_id=str(log_id),
            removed=removed,
            inserted=len(inserted),
        )
        return inserted
