"""Swim time entry endpoints.

Server-side counterparts of the time field on the entry forms: normalize
on blur, parse at submit, render stored seconds, and normalize a pasted
column of times in one go. None of these touch the database.
"""

import math

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from poolside.api.dependencies import CodecDep, SettingsDep
from poolside.codec import is_canonical, seconds_to_display
from poolside.services.time_batch import TimeBatchResult, normalize_batch
from poolside.validation import TimeEntryError, validate_time_entry

router = APIRouter(prefix="/swim-times", tags=["swim-times"])

MAX_BATCH_ITEMS = 500


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================


class RawTimeRequest(BaseModel):
    """A time exactly as typed."""

    raw: str = ""


class FormatResponse(BaseModel):
    raw: str
    formatted: str
    canonical: bool


class ParseResponse(BaseModel):
    """Parsed time plus the form-rule verdict."""

    raw: str
    formatted: str
    time_seconds: float
    valid: bool
    error: str | None = None


class DisplayResponse(BaseModel):
    seconds: float
    display: str


class BatchRequest(BaseModel):
    items: list[str] = Field(max_length=MAX_BATCH_ITEMS)


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.post("/format", response_model=FormatResponse)
def format_time(data: RawTimeRequest, codec: CodecDep) -> FormatResponse:
    """Normalize typed text to MM:SS.cc (unparseable text comes back unchanged)."""
    formatted = codec.format(data.raw)
    return FormatResponse(raw=data.raw, formatted=formatted, canonical=is_canonical(formatted))


@router.post("/parse", response_model=ParseResponse)
def parse_time(data: RawTimeRequest, codec: CodecDep, settings: SettingsDep) -> ParseResponse:
    """Parse typed text to seconds and report whether it may be stored."""
    error = None
    try:
        validate_time_entry(data.raw, max_seconds=settings.max_time_seconds, codec=codec)
    except TimeEntryError as e:
        error = str(e)

    return ParseResponse(
        raw=data.raw,
        formatted=codec.format(data.raw),
        time_seconds=codec.parse_seconds(data.raw),
        valid=error is None,
        error=error,
    )


@router.get("/display", response_model=DisplayResponse)
def display_time(seconds: float = Query(..., description="Stored time in seconds")) -> DisplayResponse:
    """Render stored seconds as MM:SS.cc."""
    if not math.isfinite(seconds):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="seconds must be a finite number",
        )
    return DisplayResponse(seconds=seconds, display=seconds_to_display(seconds))


@router.post("/batch", response_model=TimeBatchResult)
def batch_times(data: BatchRequest, codec: CodecDep, settings: SettingsDep) -> TimeBatchResult:
    """Normalize a list of typed times, reporting each row."""
    return normalize_batch(data.items, max_seconds=settings.max_time_seconds, codec=codec)
