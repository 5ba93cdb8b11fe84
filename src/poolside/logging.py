"""Structured logging for poolside.

Usage:
    from poolside.logging import configure_logging, get_logger

    configure_logging()            # once, at API/CLI startup
    logger = get_logger(__name__)
    logger.info("training_log_created", athlete_id="...", entries=3)

Level and renderer come from Settings (LOG_LEVEL, LOG_FORMAT, ENVIRONMENT).
Production defaults to JSON lines; everything else gets the console renderer.
"""

import logging
import sys
from typing import Any

import structlog

from poolside.config import Environment, LogFormat, Settings, get_settings

# Chatty client libraries pinned to WARNING
QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "supabase", "postgrest")


def _resolve_format(settings: Settings) -> LogFormat:
    if "log_format" in settings.model_fields_set:
        return settings.log_format
    if settings.environment == Environment.PRODUCTION:
        return LogFormat.JSON
    return settings.log_format


def _environment_processor(environment: str) -> structlog.typing.Processor:
    def add_environment(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_environment


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Settings to read level/format from. Defaults to the
            cached application settings.
    """
    settings = settings or get_settings()
    log_format = _resolve_format(settings)
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _environment_processor(settings.environment.value),
    ]

    if log_format == LogFormat.JSON:
        renderer: list[structlog.typing.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        renderer = [
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=[*shared_processors, *renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values (request_id, athlete_id, ...) onto every following log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all bound context; call at the end of each request."""
    structlog.contextvars.clear_contextvars()
