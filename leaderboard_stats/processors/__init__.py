"""Processors for averaging leaderboard times into tables."""

from .stats_processor import (
    StatsConfig,
    time_average,
    day_stats,
    year_stats,
    build_stats_table,
    format_stats_csv,
    generate_stats,
)

__all__ = [
    'StatsConfig',
    'time_average',
    'day_stats',
    'year_stats',
    'build_stats_table',
    'format_stats_csv',
    'generate_stats',
]
