"""Swim time smart-input codec.

Converts the loosely formatted times coaches type poolside into canonical
seconds and the fixed-width ``MM:SS.cc`` display string.

Usage:
    from poolside.codec import format_user_input, parse_user_input

    format_user_input("10235")   # "01:02.35"  (keypad entry, no punctuation)
    format_user_input("50.5")    # "00:50.50"  (plain seconds)
    format_user_input("1分05秒2")  # "01:05.20"  (marker characters)
    parse_user_input("2635")     # 26.35

Unparseable input never raises: ``format`` hands it back trimmed and
unchanged, ``parse_seconds`` falls back to the leading number or 0.
"""

import math
import re
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Marker substring -> separator replacements for written times ("1分50秒23")
DEFAULT_MARKERS: dict[str, str] = {
    "分": ":",
    "秒": ".",
}

# Full-width separators copied from CJK input methods
FULL_WIDTH_SEPARATORS: dict[str, str] = {
    "：": ":",
    "。": ".",
    "．": ".",
}

MAX_MINUTES = 59
MAX_SECONDS = 59

# Significant digits a minutes or seconds field may carry; anything longer is
# an hour or more and passes through without conversion
MAX_FIELD_DIGITS = 4

CANONICAL_PATTERN = re.compile(r"^([0-9]{2}):([0-9]{2})\.([0-9]{2})\Z")
KEYPAD_PATTERN = re.compile(r"^[0-9]+\Z")
DECIMAL_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)?\Z")
LEADING_NUMBER_PATTERN = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _compose(minutes: int, seconds: int, centiseconds: int) -> str | None:
    """Carry overflow upwards and render MM:SS.cc, or None past 59:59.99."""
    seconds += centiseconds // 100
    centiseconds %= 100
    minutes += seconds // 60
    seconds %= 60

    if minutes > MAX_MINUTES:
        return None
    return f"{minutes:02d}:{seconds:02d}.{centiseconds:02d}"


def _is_digits(value: str) -> bool:
    return value == "" or KEYPAD_PATTERN.match(value) is not None


def _field_value(digits: str) -> int | None:
    """Value of an ASCII digit field, or None when it is an hour or more."""
    significant = digits.lstrip("0")
    if len(significant) > MAX_FIELD_DIGITS:
        return None
    return int(significant or "0")


def is_canonical(text: str) -> bool:
    """Check whether text is a canonical ``MM:SS.cc`` string."""
    match = CANONICAL_PATTERN.match(text or "")
    if not match:
        return False
    return int(match.group(1)) <= MAX_MINUTES and int(match.group(2)) <= MAX_SECONDS


def seconds_to_display(seconds: float) -> str:
    """Render stored seconds as ``MM:SS.cc``.

    Stored values are already unambiguous, so this is plain divide/mod
    arithmetic. Negative values clamp to zero; minutes are not capped.

    Raises:
        ValueError: If seconds is NaN or infinite
    """
    if not math.isfinite(seconds):
        raise ValueError(f"Cannot display non-finite time: {seconds}")

    value = Decimal(repr(float(seconds)))
    with localcontext() as ctx:
        # Room for every integer digit of the largest finite float
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        total_cs = int((value * 100).quantize(Decimal(1), ROUND_HALF_UP))
    total_cs = max(total_cs, 0)

    minutes, remainder = divmod(total_cs, 6000)
    secs, centiseconds = divmod(remainder, 100)
    return f"{minutes:02d}:{secs:02d}.{centiseconds:02d}"


class SwimTimeCodec:
    """Bidirectional converter between typed swim times and canonical forms.

    Args:
        markers: Substring -> separator table applied to natural-language
            input. Defaults to ``DEFAULT_MARKERS``.
    """

    def __init__(self, markers: Mapping[str, str] | None = None):
        table = DEFAULT_MARKERS if markers is None else markers
        for separator in table.values():
            if separator not in (":", "."):
                raise ValueError(f"Marker separator must be ':' or '.', got {separator!r}")
        self._markers: tuple[tuple[str, str], ...] = tuple(
            (marker, separator) for marker, separator in table.items() if marker
        )

    @property
    def markers(self) -> dict[str, str]:
        return dict(self._markers)

    def format(self, raw: str | float | int | None) -> str:
        """Normalize raw input into a canonical ``MM:SS.cc`` string.

        Precedence: keypad digits (3+ digits, last two are hundredths),
        then plain seconds ("50.5"), then marker/punctuated forms
        ("1:05.2", "1分05秒2").

        Returns:
            The canonical string, "" for empty input, or the trimmed input
            unchanged when it cannot be interpreted
        """
        if not raw:
            return ""

        original = str(raw).strip()
        text = original

        if KEYPAD_PATTERN.match(text) and len(text) >= 3:
            centiseconds = int(text[-2:])
            rest = text[:-2]
            if len(rest) <= 2:
                minutes, seconds = 0, int(rest)
            else:
                minutes, seconds = _field_value(rest[:-2]), int(rest[-2:])
            if minutes is None:
                return original
            return _compose(minutes, seconds, centiseconds) or original

        if DECIMAL_PATTERN.match(text):
            whole, _, _ = text.partition(".")
            if _field_value(whole) is None:
                return original
            total_cs = int(Decimal(text).quantize(Decimal("0.01"), ROUND_HALF_UP) * 100)
            return _compose(0, 0, total_cs) or original

        for marker, separator in self._markers:
            text = text.replace(marker, separator)
        for full_width, ascii_char in FULL_WIDTH_SEPARATORS.items():
            text = text.replace(full_width, ascii_char)

        if not any(ch.isdigit() for ch in text):
            return original

        parts = text.split(":")
        if len(parts) == 1:
            minutes_part, seconds_part = "", parts[0]
        elif len(parts) == 2:
            minutes_part, seconds_part = parts
        else:
            return original

        minutes_part = minutes_part.strip()
        whole, _, fraction = seconds_part.strip().partition(".")
        if not (_is_digits(minutes_part) and _is_digits(whole) and _is_digits(fraction)):
            return original

        minutes, seconds = _field_value(minutes_part), _field_value(whole)
        if minutes is None or seconds is None:
            return original

        centiseconds = int(fraction.ljust(2, "0")[:2])
        return _compose(minutes, seconds, centiseconds) or original

    def parse_seconds(self, raw: str | float | int | None) -> float:
        """Convert raw input to seconds.

        Input of an hour or more is not normalized by ``format`` and lands in
        the leading-number fallback, so ``"60:00"`` reads as 60.0 and
        ``"75:00.00"`` as 75.0. Callers that must refuse such values use
        ``validation.try_parse_time`` or ``validate_time_entry``.

        Returns:
            Seconds rounded to hundredths; for input ``format`` cannot
            normalize, the leading number of the raw text, else 0.0
        """
        if not raw:
            return 0.0

        formatted = self.format(raw)
        match = CANONICAL_PATTERN.match(formatted)
        if match:
            minutes = int(match.group(1))
            seconds = float(f"{match.group(2)}.{match.group(3)}")
            return round(minutes * 60 + seconds, 2)

        leading = LEADING_NUMBER_PATTERN.match(str(raw).strip())
        if not leading:
            return 0.0
        value = float(leading.group(0))
        return value if math.isfinite(value) else 0.0


default_codec = SwimTimeCodec()


def format_user_input(raw: str | float | int | None) -> str:
    """Normalize a typed time with the default marker table."""
    return default_codec.format(raw)


def parse_user_input(raw: str | float | int | None) -> float:
    """Parse a typed time to seconds with the default marker table."""
    return default_codec.parse_seconds(raw)
