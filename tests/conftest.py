"""Shared fixtures for leaderboard stats tests."""

from typing import List

import pytest


def make_leaderboard_html(times: List[str], month: str = 'Dec', day: int = 1) -> str:
    """Build a leaderboard page listing the given times, fastest first."""
    entries = []
    for position, time_str in enumerate(times, start=1):
        entries.append(
            f'<div class="leaderboard-entry">'
            f'<span class="leaderboard-position">{position:3d})</span> '
            f'<span class="leaderboard-time">{month} {day:02d}  {time_str}</span> '
            f'<span class="leaderboard-anon">(anonymous user #{position})</span>'
            f'</div>'
        )
    return (
        '<!DOCTYPE html><html><head><title>Day Leaderboard</title></head><body>'
        '<main><article><p>First hundred users to get <span class="leaderboard-daydesc-both">both stars</span></p>'
        + ''.join(entries) +
        '</article></main></body></html>'
    )


@pytest.fixture
def leaderboard_page():
    """Factory fixture building leaderboard markup from a list of times."""
    return make_leaderboard_html


@pytest.fixture
def fake_fetch(leaderboard_page):
    """Fetch stand-in whose day pages average to (year - 2000) * 60 + day seconds."""
    calls = []

    def fetch(year: int, day: int) -> str:
        calls.append((year, day))
        minute = year - 2000
        times = [f"00:{minute:02d}:{day:02d}"] * 10
        return leaderboard_page(times, day=day)

    fetch.calls = calls
    return fetch
