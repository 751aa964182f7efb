"""Tests for leaderboard_stats.scrapers module."""

from unittest.mock import MagicMock

import pytest
import requests

from leaderboard_stats.scrapers import (
    get_day_url,
    fetch_leaderboard_html,
    LeaderboardFetcher,
)
from leaderboard_stats.utils.constants import USER_AGENT
from leaderboard_stats.utils.errors import FetchError


def _session_returning(text="<html></html>", status_error=None):
    response = MagicMock()
    response.text = text
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    session = MagicMock()
    session.get.return_value = response
    return session


class TestGetDayUrl:
    """Tests for get_day_url function."""

    def test_default_site(self):
        assert get_day_url(2023, 5) == "https://adventofcode.com/2023/leaderboard/day/5"

    def test_custom_site(self):
        assert get_day_url(2015, 25, "http://mirror") == "http://mirror/2015/leaderboard/day/25"


class TestFetchLeaderboardHtml:
    """Tests for fetch_leaderboard_html function."""

    def test_returns_body(self):
        session = _session_returning("<html>ok</html>")
        assert fetch_leaderboard_html(2020, 1, session=session, base_url="http://x") == "<html>ok</html>"

        session.get.assert_called_once_with(
            "http://x/2020/leaderboard/day/1",
            headers={'User-Agent': USER_AGENT},
            timeout=30,
        )

    def test_http_error(self):
        """Test that a non-2xx status raises FetchError."""
        session = _session_returning(status_error=requests.HTTPError("404 Client Error"))
        with pytest.raises(FetchError, match="404") as exc_info:
            fetch_leaderboard_html(2020, 1, session=session)
        assert isinstance(exc_info.value.__cause__, requests.HTTPError)

    def test_transport_error(self):
        """Test that connection failures raise FetchError."""
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(FetchError, match="connection refused"):
            fetch_leaderboard_html(2020, 1, session=session)

    def test_timeout(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("timed out")
        with pytest.raises(FetchError, match="timed out"):
            fetch_leaderboard_html(2020, 1, session=session, timeout=0.1)

    def test_without_session(self, monkeypatch):
        """Test the module-level requests.get fallback."""
        fake_get = MagicMock(return_value=_session_returning("body").get.return_value)
        monkeypatch.setattr(requests, 'get', fake_get)
        assert fetch_leaderboard_html(2021, 2) == "body"
        assert fake_get.call_args[0][0].endswith("/2021/leaderboard/day/2")


class TestLeaderboardFetcher:
    """Tests for the LeaderboardFetcher callable."""

    def test_call(self):
        session = _session_returning("page")
        fetcher = LeaderboardFetcher(base_url="http://mirror/", timeout=5, session=session)
        assert fetcher(2019, 3) == "page"
        session.get.assert_called_once_with(
            "http://mirror/2019/leaderboard/day/3",
            headers={'User-Agent': USER_AGENT},
            timeout=5,
        )

    def test_context_manager_closes_session(self):
        session = _session_returning()
        with LeaderboardFetcher(session=session) as fetcher:
            fetcher(2020, 1)
        session.close.assert_called_once()
