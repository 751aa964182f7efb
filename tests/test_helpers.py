"""Tests for leaderboard_stats.utils.helpers module."""

import pytest

from leaderboard_stats.utils.errors import ParseError
from leaderboard_stats.utils.helpers import (
    parse_elapsed_seconds,
    day_range,
    format_elapsed,
)


class TestParseElapsedSeconds:
    """Tests for parse_elapsed_seconds function."""

    def test_minutes_and_seconds(self):
        """Test basic minutes/seconds conversion."""
        assert parse_elapsed_seconds("00:01:00") == 60
        assert parse_elapsed_seconds("00:02:30") == 150
        assert parse_elapsed_seconds("00:59:59") == 3599

    def test_hours_ignored(self):
        """Test that the hour field does not affect the result."""
        assert parse_elapsed_seconds("01:02:03") == 123
        assert parse_elapsed_seconds("23:02:03") == 123
        assert parse_elapsed_seconds("00:02:03") == 123

    def test_midnight(self):
        """Test zero time."""
        assert parse_elapsed_seconds("00:00:00") == 0

    @pytest.mark.parametrize("bad", [
        "",
        "1:02:03",
        "00:02",
        "00:60:00",
        "00:00:60",
        "24:00:00",
        "00:02:03 ",
        "ab:cd:ef",
        "00-02-03",
    ])
    def test_malformed(self, bad):
        """Test that anything other than HH:MM:SS raises ParseError."""
        with pytest.raises(ParseError):
            parse_elapsed_seconds(bad)

    def test_non_string(self):
        """Test that non-string input raises ParseError."""
        with pytest.raises(ParseError, match="Expected time string"):
            parse_elapsed_seconds(123)

    def test_parse_error_is_value_error(self):
        """Test that ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_elapsed_seconds("nope")


class TestDayRange:
    """Tests for day_range function."""

    def test_inclusive(self):
        assert day_range(1, 3) == [1, 2, 3]

    def test_single_day(self):
        assert day_range(5, 5) == [5]

    def test_inverted(self):
        with pytest.raises(ValueError, match="after end day"):
            day_range(4, 2)

    def test_zero_start(self):
        with pytest.raises(ValueError, match=">= 1"):
            day_range(0, 2)


class TestFormatElapsed:
    """Tests for format_elapsed function."""

    def test_format(self):
        assert format_elapsed(0) == "0:00"
        assert format_elapsed(123) == "2:03"
        assert format_elapsed(3599) == "59:59"
