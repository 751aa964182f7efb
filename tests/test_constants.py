"""Tests for leaderboard_stats.utils.constants module."""

from leaderboard_stats.utils.constants import (
    _resolve_base_url,
    CLOCK_TIME_RE,
    DAY_URL_TEMPLATE,
    FIRST_EVENT_YEAR,
    DEFAULT_TOP,
)


class TestResolveBaseUrl:
    """Tests for the base URL environment override."""

    def test_default(self, monkeypatch):
        """Test the public site is used without an override."""
        monkeypatch.delenv("AOC_BASE_URL", raising=False)
        assert _resolve_base_url() == "https://adventofcode.com"

    def test_env_override(self, monkeypatch):
        """Test that AOC_BASE_URL wins and loses its trailing slash."""
        monkeypatch.setenv("AOC_BASE_URL", "http://localhost:8000/")
        assert _resolve_base_url() == "http://localhost:8000"


class TestDefaults:
    """Sanity checks on default values."""

    def test_first_year(self):
        assert FIRST_EVENT_YEAR == 2015

    def test_default_top(self):
        assert DEFAULT_TOP == 10

    def test_url_template(self):
        url = DAY_URL_TEMPLATE.format(base_url="https://example.com", year=2020, day=7)
        assert url == "https://example.com/2020/leaderboard/day/7"

    def test_clock_regex(self):
        assert CLOCK_TIME_RE.match("12:34:56")
        assert not CLOCK_TIME_RE.match("12:34")
