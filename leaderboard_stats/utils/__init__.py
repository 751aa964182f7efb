"""Utility modules for constants, errors, helpers, and console logging."""

from .errors import LeaderboardStatsError, FetchError, ParseError, EmptyInputError
from .helpers import parse_elapsed_seconds, day_range
from .log import debug, info, warn, error, success, set_verbosity

__all__ = [
    'LeaderboardStatsError',
    'FetchError',
    'ParseError',
    'EmptyInputError',
    'parse_elapsed_seconds',
    'day_range',
    'debug',
    'info',
    'warn',
    'error',
    'success',
    'set_verbosity',
]
