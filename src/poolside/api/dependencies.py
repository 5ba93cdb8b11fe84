"""FastAPI dependencies for dependency injection.

Usage in routes:
    from poolside.api.dependencies import CodecDep, TrainingLogDAODep

    @router.get("/training-logs/{log_id}")
    def get_training_log(log_id: UUID, dao: TrainingLogDAODep):
        return dao.get_with_entries(log_id)
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from supabase import Client, create_client

from poolside.codec import SwimTimeCodec
from poolside.config import Settings, get_settings
from poolside.dao.training_log_dao import TrainingLogDAO


def get_settings_dep() -> Settings:
    """Get application settings (dependency wrapper)."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]


@lru_cache
def get_supabase_client(supabase_url: str, supabase_key: str) -> Client:
    """Create cached Supabase client."""
    return create_client(supabase_url, supabase_key)


def get_supabase(settings: SettingsDep) -> Client:
    """Get Supabase client for database operations."""
    if not settings.has_supabase_credentials:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database is not configured",
        )
    return get_supabase_client(settings.supabase_url, settings.supabase_client_key)


SupabaseDep = Annotated[Client, Depends(get_supabase)]


@lru_cache
def _codec_for(markers: tuple[tuple[str, str], ...]) -> SwimTimeCodec:
    return SwimTimeCodec(dict(markers))


def get_codec(settings: SettingsDep) -> SwimTimeCodec:
    """Codec using the configured marker table."""
    return _codec_for(tuple(sorted(settings.time_markers.items())))


CodecDep = Annotated[SwimTimeCodec, Depends(get_codec)]


def get_training_log_dao(client: SupabaseDep) -> TrainingLogDAO:
    """Get TrainingLogDAO instance."""
    return TrainingLogDAO(client)


TrainingLogDAODep = Annotated[TrainingLogDAO, Depends(get_training_log_dao)]
