"""Form-layer rules for swim time entry.

The codec is best-effort and never rejects anything. These helpers are
what a form calls: ``normalize_on_blur`` to tidy the visible text field,
``validate_time_entry`` at submit to decide whether a value may be stored.
"""

from enum import StrEnum

from poolside.codec import SwimTimeCodec, default_codec, is_canonical
from poolside.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_SECONDS = 3600.0


class TimeEntryErrorCode(StrEnum):
    """Why a typed time was refused."""

    EMPTY = "empty"
    MALFORMED = "malformed"
    OUT_OF_RANGE = "out_of_range"


class TimeEntryError(ValueError):
    """A typed time that must not be persisted."""

    def __init__(self, code: TimeEntryErrorCode, value: object, message: str):
        self.code = code
        self.value = value
        super().__init__(message)


def normalize_on_blur(raw: str | float | None, codec: SwimTimeCodec = default_codec) -> str:
    """Text to show in the field after the user leaves it."""
    return codec.format(raw)


def try_parse_time(raw: str | float | None, codec: SwimTimeCodec = default_codec) -> float | None:
    """Parse a typed time, keeping "nothing usable" apart from zero.

    Returns:
        Seconds, or None when the input is empty or cannot be normalized
    """
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        # A numeric zero is a value, not an empty field
        raw = str(raw)
    formatted = codec.format(raw)
    if not is_canonical(formatted):
        return None
    return codec.parse_seconds(formatted)


def validate_time_entry(
    raw: str | float | None,
    max_seconds: float = DEFAULT_MAX_SECONDS,
    codec: SwimTimeCodec = default_codec,
) -> float:
    """Validate a typed time at submit and return the seconds to store.

    Args:
        raw: Text from the time field (or a number)
        max_seconds: Exclusive upper bound
        codec: Codec carrying the marker table to use

    Returns:
        Time in seconds, ``0 < seconds < max_seconds``

    Raises:
        TimeEntryError: If the input is empty, malformed or out of range
    """
    if raw is None or not str(raw).strip():
        raise TimeEntryError(TimeEntryErrorCode.EMPTY, raw, "Time is required")

    seconds = try_parse_time(raw, codec)
    if seconds is None:
        logger.info("time_entry_rejected", raw=str(raw), code=TimeEntryErrorCode.MALFORMED.value)
        raise TimeEntryError(
            TimeEntryErrorCode.MALFORMED,
            raw,
            f"Invalid time format: '{str(raw).strip()}'. Expected e.g. '2635', '50.5' or '1:05.20'",
        )

    if seconds <= 0 or seconds >= max_seconds:
        logger.info(
            "time_entry_rejected",
            raw=str(raw),
            seconds=seconds,
            code=TimeEntryErrorCode.OUT_OF_RANGE.value,
        )
        raise TimeEntryError(
            TimeEntryErrorCode.OUT_OF_RANGE,
            raw,
            f"Time must be greater than 0 and less than {max_seconds:g} seconds",
        )

    return seconds
