"""Scrapers for the event's leaderboard pages."""

from .leaderboard_scraper import (
    get_day_url,
    fetch_leaderboard_html,
    LeaderboardFetcher,
)

__all__ = [
    'get_day_url',
    'fetch_leaderboard_html',
    'LeaderboardFetcher',
]
