"""Tests for batch normalization of typed times."""

import pytest

from poolside.codec import SwimTimeCodec
from poolside.services.time_batch import normalize_batch


class TestNormalizeBatch:
    def test_all_valid(self):
        result = normalize_batch(["2635", "1:05.2", "50.5"])

        assert result.valid
        assert result.row_count == 3
        assert [row.formatted for row in result.rows] == ["00:26.35", "01:05.20", "00:50.50"]
        assert result.rows[1].time_seconds == pytest.approx(65.2)

    def test_blank_lines_skipped_but_numbered(self):
        result = normalize_batch(["2635", "", "   ", "abc"])

        assert not result.valid
        assert result.row_count == 2
        assert [row.row_number for row in result.rows] == [1, 4]

    def test_failed_rows_report_reason(self):
        result = normalize_batch(["abc", "0", "10235"])

        failed = result.failed
        assert [row.raw for row in failed] == ["abc", "0"]
        assert "Invalid time format" in failed[0].error
        assert failed[0].formatted == "abc"
        assert failed[0].time_seconds is None
        assert "greater than 0" in failed[1].error

    def test_max_seconds(self):
        result = normalize_batch(["1:30.00"], max_seconds=60)
        assert not result.valid

    def test_custom_codec(self):
        result = normalize_batch(["1m05"], codec=SwimTimeCodec({"m": ":"}))
        assert result.rows[0].formatted == "01:05.00"

    def test_empty(self):
        result = normalize_batch([])
        assert result.valid
        assert result.row_count == 0
