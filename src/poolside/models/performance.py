"""Training log and performance entry models."""

from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, Field, computed_field, field_validator

from poolside.codec import SwimTimeCodec, default_codec, is_canonical, seconds_to_display
from poolside.validation import (
    DEFAULT_MAX_SECONDS,
    TimeEntryError,
    TimeEntryErrorCode,
    validate_time_entry,
)


class TimingMethod(StrEnum):
    """How a performance was timed."""

    MANUAL = "manual"
    ELECTRONIC = "electronic"
    VIDEO = "video"


def _normalize_splits(splits: list[str], codec: SwimTimeCodec) -> list[str]:
    normalized = []
    for raw in splits:
        if not str(raw).strip():
            continue
        formatted = codec.format(raw)
        if not is_canonical(formatted):
            raise TimeEntryError(TimeEntryErrorCode.MALFORMED, raw, f"Invalid split time: '{raw}'")
        normalized.append(formatted)
    return normalized


class PerformanceEntry(BaseModel):
    """A timed swim recorded within a training log.

    ``time_seconds`` is what gets stored; ``time_display`` re-renders it
    as MM:SS.cc. Split times are read back exactly as stored.
    """

    id: UUID | None = None
    log_id: UUID | None = None  # Foreign key to TrainingLog

    stroke: str = Field(min_length=1)  # e.g. "100米自由泳"
    time_seconds: float = Field(ge=0)

    timing_method: TimingMethod | None = None
    split_times: list[str] = []
    reaction_time: float | None = Field(default=None, ge=0)  # seconds off the block

    created_at: datetime | None = None

    @computed_field
    @property
    def time_display(self) -> str:
        """Stored time as MM:SS.cc."""
        return seconds_to_display(self.time_seconds)


class PerformanceEntryInput(BaseModel):
    """A performance row as submitted from the entry form.

    ``time_input`` and ``split_times`` hold the raw text of the form fields
    ("2635", "1:05.2", ...). The time rules depend on the configured marker
    table and upper bound, so they are applied by ``to_entry`` rather than
    on construction.
    """

    stroke: str = Field(min_length=1)
    time_input: str
    timing_method: TimingMethod | None = None
    split_times: list[str] = []
    reaction_time: float | None = Field(default=None, ge=0)

    @field_validator("time_input")
    @classmethod
    def strip_time_input(cls, v: str) -> str:
        return v.strip()

    def time_seconds(
        self,
        codec: SwimTimeCodec = default_codec,
        max_seconds: float = DEFAULT_MAX_SECONDS,
    ) -> float:
        """Seconds to store for ``time_input``.

        Raises:
            TimeEntryError: If the time is empty, malformed or out of range
        """
        return validate_time_entry(self.time_input, max_seconds=max_seconds, codec=codec)

    def to_entry(
        self,
        log_id: UUID | None = None,
        codec: SwimTimeCodec = default_codec,
        max_seconds: float = DEFAULT_MAX_SECONDS,
    ) -> PerformanceEntry:
        """Build the entry to persist under a training log.

        Raises:
            TimeEntryError: If the time or a split time is refused
        """
        return PerformanceEntry(
            log_id=log_id,
            stroke=self.stroke,
            time_seconds=self.time_seconds(codec, max_seconds),
            timing_method=self.timing_method,
            split_times=_normalize_splits(self.split_times, codec),
            reaction_time=self.reaction_time,
        )


class TrainingLog(BaseModel):
    """One training session for an athlete.

    Performance entries live in their own table; they are embedded here
    when a log is read with its entries.
    """

    id: UUID | None = None
    athlete_id: UUID

    date: date
    distance_km: float = Field(default=0, ge=0)

    status_score: int | None = None  # 1-10 self-reported condition
    status_note: str | None = None

    test_type: str | None = None  # e.g. "专项技术测试"
    pool_info: str | None = None
    recorder: str | None = None
    rpe: int | None = None  # Rate of perceived exertion 1-10
    stroke_rate: float | None = Field(default=None, ge=0)  # strokes per minute
    stroke_length: float | None = Field(default=None, ge=0)  # meters per stroke

    created_at: datetime | None = None

    performance_entries: list[PerformanceEntry] = []

    @field_validator("status_score", "rpe")
    @classmethod
    def validate_one_to_ten(cls, v: int | None) -> int | None:
        if v is not None and (v < 1 or v > 10):
            raise ValueError("Must be between 1 and 10")
        return v

    def entry_for(self, stroke: str) -> PerformanceEntry | None:
        """First entry recorded for a stroke in this log."""
        for entry in self.performance_entries:
            if entry.stroke == stroke:
                return entry
        return None

    @property
    def strokes(self) -> list[str]:
        seen: list[str] = []
        for entry in self.performance_entries:
            if entry.stroke not in seen:
                seen.append(entry.stroke)
        return seen
