"""Swim club coaching dashboard backend: smart swim-time entry and training logs."""

__version__ = "0.1.0"

from poolside.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
