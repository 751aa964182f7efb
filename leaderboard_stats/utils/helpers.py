"""
Helper utility functions for leaderboard stats.
"""

from typing import List

from .constants import CLOCK_TIME_RE
from .errors import ParseError


def parse_elapsed_seconds(time_str: str) -> int:
    """
    Parse a leaderboard clock time into elapsed seconds.

    Only minutes and seconds count: leaderboard times are same-day offsets
    from puzzle unlock, so the hour field is dropped.

    Args:
        time_str: Time string in HH:MM:SS format (24h, zero padded)

    Returns:
        minutes * 60 + seconds (e.g., 123 for "01:02:03")

    Raises:
        ParseError: If the string is not HH:MM:SS
    """
    if not isinstance(time_str, str):
        raise ParseError(f"Expected time string, got {type(time_str).__name__}")

    match = CLOCK_TIME_RE.match(time_str)
    if not match:
        raise ParseError(f"Invalid leaderboard time: {time_str!r}")

    minutes = int(match.group(2))
    seconds = int(match.group(3))
    return minutes * 60 + seconds


def day_range(start_day: int, end_day: int) -> List[int]:
    """Inclusive list of days, validating the bounds."""
    if start_day < 1:
        raise ValueError(f"start day must be >= 1, got {start_day}")
    if start_day > end_day:
        raise ValueError(f"start day {start_day} is after end day {end_day}")
    return list(range(start_day, end_day + 1))


def format_elapsed(seconds: int) -> str:
    """Format elapsed seconds as M:SS for display."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"
