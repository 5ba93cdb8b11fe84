"""Training log API endpoints.

Logs are created and edited together with their performance entries; the
time of each entry arrives as the raw text of the form field and is
validated with the form rules before anything is written.
"""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from poolside import get_logger
from poolside.api.dependencies import CodecDep, SettingsDep, TrainingLogDAODep
from poolside.codec import SwimTimeCodec
from poolside.config import Settings
from poolside.models import PerformanceEntry, PerformanceEntryInput, TrainingLog
from poolside.services.performance_stats import (
    Period,
    TimeRange,
    group_logs,
    personal_bests,
    progress_rates,
    range_start,
    total_distance,
)
from poolside.validation import TimeEntryError

logger = get_logger(__name__)

router = APIRouter(prefix="/training-logs", tags=["training-logs"])
athletes_router = APIRouter(prefix="/athletes", tags=["athletes"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================


class TrainingLogWrite(BaseModel):
    """Request body for creating or replacing a training log."""

    athlete_id: UUID
    date: date
    distance_km: float = Field(default=0, ge=0)
    status_score: int | None = None
    status_note: str | None = None
    test_type: str | None = None
    pool_info: str | None = None
    recorder: str | None = None
    rpe: int | None = None
    stroke_rate: float | None = Field(default=None, ge=0)
    stroke_length: float | None = Field(default=None, ge=0)
    performances: list[PerformanceEntryInput] = []

    def to_log(self) -> TrainingLog:
        return TrainingLog(**self.model_dump(exclude={"performances"}))


class PersonalBest(BaseModel):
    stroke: str
    time_seconds: float
    time_display: str
    log_id: UUID | None = None


class PeriodSummary(BaseModel):
    period: str
    log_count: int
    distance_km: float


class AthleteProgress(BaseModel):
    """Summary behind the athlete detail charts."""

    athlete_id: UUID
    time_range: TimeRange
    log_count: int
    personal_bests: list[PersonalBest]
    progress_rates: dict[str, float | None]
    periods: list[PeriodSummary]


# =============================================================================
# CREATE
# =============================================================================


def _build_entries(
    data: TrainingLogWrite,
    codec: SwimTimeCodec,
    settings: Settings,
    log_id: UUID | None = None,
) -> list[PerformanceEntry]:
    """Apply the configured time rules to every submitted performance."""
    entries = []
    for index, performance in enumerate(data.performances):
        try:
            entries.append(
                performance.to_entry(log_id, codec=codec, max_seconds=settings.max_time_seconds)
            )
        except TimeEntryError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=[
                    {
                        "loc": ["body", "performances", index],
                        "msg": str(e),
                        "type": f"time_entry.{e.code.value}",
                    }
                ],
            ) from e
    return entries


@router.post("", response_model=TrainingLog, status_code=status.HTTP_201_CREATED)
def create_training_log(
    data: TrainingLogWrite,
    dao: TrainingLogDAODep,
    codec: CodecDep,
    settings: SettingsDep,
) -> TrainingLog:
    """Record a training session and its performances."""
    entries = _build_entries(data, codec, settings)
    try:
        return dao.create_with_entries(data.to_log(), entries)
    except ValueError as e:
        logger.warning("training_log_create_validation_failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error("training_log_create_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to record training log: {e}",
        ) from e


# =============================================================================
# READ
# =============================================================================


@router.get("", response_model=list[TrainingLog])
def list_training_logs(
    dao: TrainingLogDAODep,
    athlete_id: UUID = Query(..., description="Athlete whose logs to list"),
    time_range: TimeRange = Query(TimeRange.ALL, description="Look-back window"),
) -> list[TrainingLog]:
    """List an athlete's logs with entries, newest first."""
    return dao.find_by_athlete(athlete_id, since=range_start(time_range))


@router.get("/{log_id}", response_model=TrainingLog)
def get_training_log(log_id: UUID, dao: TrainingLogDAODep) -> TrainingLog:
    """Get one log with its entries."""
    log = dao.get_with_entries(log_id)
    if not log:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training log not found")
    return log


# =============================================================================
# UPDATE / DELETE
# =============================================================================


@router.put("/{log_id}", response_model=TrainingLog)
def replace_training_log(
    log_id: UUID,
    data: TrainingLogWrite,
    dao: TrainingLogDAODep,
    codec: CodecDep,
    settings: SettingsDep,
) -> TrainingLog:
    """Update a log and replace all of its performances."""
    entries = _build_entries(data, codec, settings, log_id)
    try:
        updated = dao.update_with_entries(log_id, data.to_log(), entries)
    except ValueError as e:
        logger.warning("training_log_update_validation_failed", log_id=str(log_id), error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error("training_log_update_error", log_id=str(log_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update training log: {e}",
        ) from e

    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training log not found")
    return updated


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_training_log(log_id: UUID, dao: TrainingLogDAODep) -> None:
    """Delete a log (entries go with it via the foreign key)."""
    if not dao.delete(log_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training log not found")
    logger.info("training_log_deleted", log_id=str(log_id))


# =============================================================================
# ATHLETE PROGRESS
# =============================================================================


@athletes_router.get("/{athlete_id}/progress", response_model=AthleteProgress)
def get_athlete_progress(
    athlete_id: UUID,
    dao: TrainingLogDAODep,
    time_range: TimeRange = Query(TimeRange.ALL, description="Look-back window"),
    period: Period = Query(Period.MONTH, description="Grouping for the period summary"),
) -> AthleteProgress:
    """Personal bests, latest progress per stroke and per-period volume."""
    logs = dao.find_by_athlete(athlete_id, since=range_start(time_range))

    bests = [
        PersonalBest(
            stroke=stroke,
            time_seconds=entry.time_seconds,
            time_display=entry.time_display,
            log_id=entry.log_id,
        )
        for stroke, entry in sorted(personal_bests(logs).items())
    ]
    periods = [
        PeriodSummary(period=key, log_count=len(group), distance_km=total_distance(group))
        for key, group in group_logs(logs, period).items()
    ]

    return AthleteProgress(
        athlete_id=athlete_id,
        time_range=time_range,
        log_count=len(logs),
        personal_bests=bests,
        progress_rates=progress_rates(logs),
        periods=periods,
    )
