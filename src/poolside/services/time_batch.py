"""Batch normalization of raw time strings.

Feeds candidate strings (pasted spreadsheet columns, import pipeline
output) through the codec and the form rules, and reports per row.
"""

from collections.abc import Iterable

from pydantic import BaseModel

from poolside.codec import SwimTimeCodec, default_codec
from poolside.logging import get_logger
from poolside.validation import DEFAULT_MAX_SECONDS, TimeEntryError, validate_time_entry

logger = get_logger(__name__)


class TimeBatchRow(BaseModel):
    """Outcome for one raw string."""

    row_number: int
    raw: str
    formatted: str
    time_seconds: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TimeBatchResult(BaseModel):
    """Outcome for a whole batch."""

    valid: bool
    row_count: int = 0
    rows: list[TimeBatchRow] = []

    @property
    def failed(self) -> list[TimeBatchRow]:
        return [row for row in self.rows if not row.ok]


def normalize_batch(
    raws: Iterable[str],
    max_seconds: float = DEFAULT_MAX_SECONDS,
    codec: SwimTimeCodec = default_codec,
) -> TimeBatchResult:
    """Normalize and validate each raw string.

    Blank strings are skipped; row numbers still follow input positions
    (1-based) so they line up with the source lines.
    """
    rows: list[TimeBatchRow] = []
    for row_number, raw in enumerate(raws, start=1):
        text = raw.strip()
        if not text:
            continue

        row = TimeBatchRow(row_number=row_number, raw=text, formatted=codec.format(text))
        try:
            row.time_seconds = validate_time_entry(text, max_seconds=max_seconds, codec=codec)
        except TimeEntryError as e:
            row.error = str(e)
        rows.append(row)

    result = TimeBatchResult(
        valid=all(row.ok for row in rows),
        row_count=len(rows),
        rows=rows,
    )
    logger.info(
        "time_batch_normalized",
        row_count=result.row_count,
        failed=len(result.failed),
    )
    return result
