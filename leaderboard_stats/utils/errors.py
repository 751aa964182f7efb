"""
Exception types raised by the leaderboard stats pipeline.

Every error is fatal: nothing in the pipeline recovers locally, substitutes a
default value or retries.
"""


class LeaderboardStatsError(Exception):
    """Base class for all pipeline errors."""


class FetchError(LeaderboardStatsError):
    """Transport or HTTP failure while fetching a leaderboard page."""


class ParseError(LeaderboardStatsError, ValueError):
    """Malformed leaderboard markup or time string."""


class EmptyInputError(LeaderboardStatsError):
    """A day had no leaderboard entries to average."""
