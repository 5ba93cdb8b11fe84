"""Tests for the swim time smart-input codec."""

import math

import pytest

from poolside.codec import (
    CANONICAL_PATTERN,
    SwimTimeCodec,
    format_user_input,
    is_canonical,
    parse_user_input,
    seconds_to_display,
)


class TestKeypadEntry:
    """Digit-only input of three or more digits: last two are hundredths."""

    def test_seconds_and_hundredths(self):
        """'2635' -> 26.35s."""
        assert format_user_input("2635") == "00:26.35"

    def test_minutes_seconds_hundredths(self):
        """'10235' -> 1:02.35."""
        assert format_user_input("10235") == "01:02.35"

    def test_six_digits(self):
        assert format_user_input("123456") == "12:34.56"

    def test_three_digits(self):
        """'535' -> 5.35s."""
        assert format_user_input("535") == "00:05.35"

    def test_seconds_overflow_carries_into_minutes(self):
        """'6500' decodes to 0:65.00 and normalizes to 1:05.00."""
        assert format_user_input("6500") == "01:05.00"
        assert format_user_input("19900") == "02:39.00"

    def test_boundary_below_an_hour(self):
        assert format_user_input("5959") == "00:59.59"
        assert format_user_input("595999") == "59:59.99"

    def test_an_hour_or_more_passes_through(self):
        assert format_user_input("600000") == "600000"
        assert format_user_input("596000") == "596000"

    def test_surrounding_whitespace_ignored(self):
        assert format_user_input("  2635 ") == "00:26.35"

    def test_integer_input(self):
        assert format_user_input(10235) == "01:02.35"

    @pytest.mark.parametrize("step", [37, 101])
    def test_fields_never_exceed_maximum(self, step: int):
        """Every canonical output for up-to-6-digit input stays in range."""
        for value in range(0, 1_000_000, step):
            for raw in {str(value), f"{value:03d}", f"{value:06d}"}:
                formatted = format_user_input(raw)
                match = CANONICAL_PATTERN.match(formatted)
                if match is None:
                    assert formatted == raw
                    continue
                minutes, seconds, centi = (int(g) for g in match.groups())
                assert minutes <= 59
                assert seconds <= 59
                assert centi <= 99


class TestDecimalEntry:
    """Plain numbers with fewer than three digits, or with a decimal point."""

    def test_single_digit_is_seconds(self):
        assert format_user_input("5") == "00:05.00"

    def test_two_digits_over_a_minute(self):
        assert format_user_input("75") == "01:15.00"

    def test_fractional_seconds(self):
        assert format_user_input("50.5") == "00:50.50"

    def test_large_seconds_value(self):
        assert format_user_input("62.35") == "01:02.35"

    def test_rounding_carries(self):
        """59.999 rounds to a whole minute."""
        assert format_user_input("59.999") == "01:00.00"

    def test_float_input(self):
        assert format_user_input(62.35) == "01:02.35"

    def test_an_hour_or_more_passes_through(self):
        assert format_user_input("3600.5") == "3600.5"


class TestPunctuatedEntry:
    """Colon/period and marker-character forms."""

    def test_minutes_and_seconds(self):
        assert format_user_input("1:05.2") == "01:05.20"

    def test_minutes_without_fraction(self):
        assert format_user_input("1:50") == "01:50.00"

    def test_fraction_is_truncated_not_rounded(self):
        assert format_user_input("1:05.239") == "01:05.23"

    def test_single_digit_seconds_padded(self):
        assert format_user_input("1:5") == "01:05.00"

    def test_seconds_overflow_carries(self):
        assert format_user_input("1:75") == "02:15.00"

    def test_leading_period(self):
        assert format_user_input(".5") == "00:00.50"

    def test_trailing_colon(self):
        assert format_user_input("2:") == "02:00.00"

    def test_marker_characters(self):
        assert format_user_input("1分50秒") == "01:50.00"
        assert format_user_input("1分50秒23") == "01:50.23"
        assert format_user_input("50秒5") == "00:50.50"

    def test_full_width_separators(self):
        assert format_user_input("1：05。2") == "01:05.20"
        assert format_user_input("1：05．2") == "01:05.20"

    def test_too_many_minutes_passes_through(self):
        assert format_user_input("75:00.00") == "75:00.00"


class TestUnparseableInput:
    def test_empty(self):
        assert format_user_input("") == ""
        assert format_user_input(None) == ""
        assert format_user_input(0) == ""

    def test_garbage_passes_through(self):
        assert format_user_input("abc") == "abc"

    def test_garbage_is_trimmed(self):
        assert format_user_input("  abc ") == "abc"

    def test_three_colon_parts(self):
        assert format_user_input("1:2:3") == "1:2:3"

    def test_mixed_text(self):
        assert format_user_input("12abc") == "12abc"

    def test_negative(self):
        assert format_user_input("-5") == "-5"

    def test_marker_only(self):
        assert format_user_input("分") == "分"


class TestLongInput:
    """Digit runs far past an hour pass through instead of raising."""

    def test_long_keypad_entry(self):
        raw = "9" * 4400
        assert format_user_input(raw) == raw

    def test_long_decimal_entry(self):
        raw = "1" * 27 + ".5"
        assert format_user_input(raw) == raw

    def test_long_minutes_field(self):
        raw = "1" * 4400 + ":00"
        assert format_user_input(raw) == raw

    def test_long_seconds_field(self):
        raw = "1:" + "2" * 4400
        assert format_user_input(raw) == raw

    def test_long_fraction_still_formats(self):
        assert format_user_input("50." + "4" * 5000) == "00:50.44"
        assert format_user_input("1:05." + "9" * 5000) == "01:05.99"

    def test_leading_zeros_do_not_count(self):
        assert format_user_input("0" * 40 + "2635") == "00:26.35"
        assert format_user_input("0" * 40 + "50.5") == "00:50.50"

    def test_parse_seconds_does_not_raise(self):
        assert parse_user_input("9" * 4400) == 0.0
        assert parse_user_input("1" * 27 + ".5") == pytest.approx(1.111111111111111e26)


class TestCanonicalIdempotence:
    @pytest.mark.parametrize("canonical", ["00:00.00", "00:26.35", "01:02.35", "59:59.99", "10:00.01"])
    def test_format_keeps_canonical_strings(self, canonical: str):
        assert format_user_input(canonical) == canonical

    def test_is_canonical(self):
        assert is_canonical("00:26.35")
        assert not is_canonical("60:00.00")
        assert not is_canonical("00:60.00")
        assert not is_canonical("0:26.35")
        assert not is_canonical("")

    def test_only_ascii_digits_are_canonical(self):
        assert not is_canonical("\u0660\u0661:\u0660\u0662.\u0663\u0664")
        assert parse_user_input("\u0660\u0661:\u0660\u0662.\u0663\u0664") == 0.0

    def test_trailing_newline_is_not_canonical(self):
        assert not is_canonical("01:02.35\n")


class TestParseSeconds:
    def test_keypad(self):
        assert parse_user_input("2635") == pytest.approx(26.35)
        assert parse_user_input("10235") == pytest.approx(62.35)

    def test_punctuated(self):
        assert parse_user_input("1:05.2") == pytest.approx(65.2)
        assert parse_user_input("1分50秒") == pytest.approx(110.0)

    def test_just_under_an_hour(self):
        assert parse_user_input("59:59.99") == pytest.approx(3599.99)

    def test_empty_is_zero(self):
        assert parse_user_input("") == 0
        assert parse_user_input(None) == 0

    def test_garbage_is_zero(self):
        assert parse_user_input("abc") == 0

    def test_falls_back_to_leading_number(self):
        assert parse_user_input("12abc") == pytest.approx(12.0)
        assert parse_user_input("-5") == pytest.approx(-5.0)
        assert parse_user_input("600000") == pytest.approx(600000.0)

    def test_an_hour_or_more_reads_the_leading_number(self):
        """Values past 59:59.99 are not normalized, so only the minutes survive."""
        assert parse_user_input("60:00") == pytest.approx(60.0)
        assert parse_user_input("75:00.00") == pytest.approx(75.0)

    def test_result_is_rounded_to_hundredths(self):
        assert parse_user_input("10235") == 62.35


class TestSecondsToDisplay:
    def test_basic(self):
        assert seconds_to_display(62.35) == "01:02.35"
        assert seconds_to_display(26.35) == "00:26.35"

    def test_zero(self):
        assert seconds_to_display(0) == "00:00.00"

    def test_negative_clamps_to_zero(self):
        assert seconds_to_display(-3) == "00:00.00"

    def test_rounds_half_up(self):
        assert seconds_to_display(26.345) == "00:26.35"

    def test_minutes_not_capped(self):
        assert seconds_to_display(3662.5) == "61:02.50"

    def test_non_finite_raises(self):
        with pytest.raises(ValueError, match="non-finite"):
            seconds_to_display(math.nan)
        with pytest.raises(ValueError):
            seconds_to_display(math.inf)

    def test_huge_values(self):
        assert seconds_to_display(1e30).endswith(":40.00")
        assert seconds_to_display(-1e30) == "00:00.00"


class TestRoundTrip:
    def test_display_then_parse(self):
        """Seconds -> MM:SS.cc -> seconds within a hundredth."""
        for centiseconds in range(0, 360_000, 997):
            seconds = centiseconds / 100
            display = seconds_to_display(seconds)
            assert format_user_input(display) == display
            assert parse_user_input(display) == pytest.approx(seconds, abs=0.01)


class TestCustomMarkers:
    def test_english_markers(self):
        codec = SwimTimeCodec({"m": ":", "s": "."})
        assert codec.format("1m05s2") == "01:05.20"
        assert codec.parse_seconds("1m05s2") == pytest.approx(65.2)

    def test_default_markers_replaced(self):
        codec = SwimTimeCodec({"m": ":"})
        assert codec.format("1分05") == "1分05"

    def test_markers_property(self):
        assert SwimTimeCodec().markers == {"分": ":", "秒": "."}

    def test_invalid_separator_rejected(self):
        with pytest.raises(ValueError, match="separator"):
            SwimTimeCodec({"m": "-"})
