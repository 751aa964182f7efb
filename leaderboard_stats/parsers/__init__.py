"""HTML parsing modules for leaderboard pages."""

from .leaderboard_parser import (
    parse_leaderboard_html,
    is_time_span,
    iter_time_spans,
    parse_time_span,
    extract_leaderboard_times,
)

__all__ = [
    'parse_leaderboard_html',
    'is_time_span',
    'iter_time_spans',
    'parse_time_span',
    'extract_leaderboard_times',
]
