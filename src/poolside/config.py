"""Application configuration with environment validation.

Usage:
    from poolside.config import get_settings

    settings = get_settings()
    print(settings.supabase_url)
    print(settings.max_time_seconds)

Values come from environment variables or a .env file in the working
directory or project root. ``TIME_MARKERS`` takes a JSON object, e.g.
``TIME_MARKERS='{"分": ":", "秒": ".", "min": ":"}'``.
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_env_file() -> Path | None:
    """Find .env file, checking both current dir and project root."""
    if Path(".env").exists():
        return Path(".env")
    # config.py -> poolside -> src -> project_root
    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        return env_file
    return None


class Environment(StrEnum):
    """Application environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.LOCAL

    # Supabase (defaults point at `supabase start`)
    supabase_url: str = Field(default="http://127.0.0.1:54321", description="Supabase project URL")
    supabase_key: SecretStr = Field(default=SecretStr(""), description="Supabase anon/public key")
    supabase_service_role_key: SecretStr | None = Field(
        default=None, description="Supabase service role key (bypasses RLS, for tests/admin)"
    )

    # Swim time entry
    max_time_seconds: float = Field(
        default=3600.0, gt=0, description="Exclusive upper bound for a recorded swim time"
    )
    time_markers: dict[str, str] = Field(
        default_factory=lambda: {"分": ":", "秒": "."},
        description="Marker substring -> ':' or '.' replacements for written times",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, description="Log output format")

    @field_validator("time_markers")
    @classmethod
    def validate_time_markers(cls, v: dict[str, str]) -> dict[str, str]:
        for marker, separator in v.items():
            if not marker:
                raise ValueError("Time markers must be non-empty strings")
            if separator not in (":", "."):
                raise ValueError(f"Marker '{marker}' must map to ':' or '.'")
        return v

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.environment == Environment.LOCAL

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def has_supabase_credentials(self) -> bool:
        return bool(self.supabase_key.get_secret_value())

    @property
    def supabase_client_key(self) -> str:
        """Key the server connects with: the service role key when set, else the anon key."""
        key = self.supabase_service_role_key or self.supabase_key
        return key.get_secret_value()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
        get_settings.cache_clear()
    """
    return Settings()
