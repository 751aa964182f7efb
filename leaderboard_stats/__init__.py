"""
Advent of Code Leaderboard Stats

Fetch daily leaderboard pages, average the top-N completion times per day and
emit a CSV table with one row per day and one column per year.
"""

__version__ = "1.0.0"
