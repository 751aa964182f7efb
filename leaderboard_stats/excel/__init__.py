"""Excel output for leaderboard stats tables."""

from .workbook_generator import write_stats_workbook

__all__ = ['write_stats_workbook']
