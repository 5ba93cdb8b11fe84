"""Shared fixtures."""

from datetime import date
from uuid import UUID, uuid4

import pytest

from poolside.config import get_settings
from poolside.models import PerformanceEntry, TrainingLog


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so env tweaks do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def athlete_id() -> UUID:
    return uuid4()


@pytest.fixture
def make_log(athlete_id: UUID):
    """Build a TrainingLog with (stroke, seconds) entries."""

    def _make(day: date, *entries: tuple[str, float], distance_km: float = 3.0) -> TrainingLog:
        log_id = uuid4()
        return TrainingLog(
            id=log_id,
            athlete_id=athlete_id,
            date=day,
            distance_km=distance_km,
            performance_entries=[
                PerformanceEntry(id=uuid4(), log_id=log_id, stroke=stroke, time_seconds=seconds)
                for stroke, seconds in entries
            ],
        )

    return _make
