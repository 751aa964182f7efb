"""
HTML template components for the leaderboard chart page.
"""

from .chart import get_css, get_javascript, get_page

__all__ = [
    'get_css',
    'get_javascript',
    'get_page',
]
