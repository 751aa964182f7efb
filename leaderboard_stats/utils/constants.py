"""
Leaderboard constants and runtime defaults.
"""

import os
import re


# === Event site ===
def _resolve_base_url() -> str:
    """Base URL of the event site.

    The AOC_BASE_URL environment variable overrides the public site, which is
    handy for pointing the tool at a local mirror.
    """
    env_url = os.environ.get("AOC_BASE_URL")
    if env_url:
        return env_url.rstrip('/')
    return "https://adventofcode.com"


BASE_URL = _resolve_base_url()
DAY_URL_TEMPLATE = "{base_url}/{year}/leaderboard/day/{day}"

USER_AGENT = "Mozilla/5.0 (compatible; LeaderboardStats/1.0)"
REQUEST_TIMEOUT = 30  # seconds


# === Defaults ===
FIRST_EVENT_YEAR = 2015
DEFAULT_START_DAY = 1
DEFAULT_TOP = 10


# === Leaderboard markup ===
TIME_SPAN_TAG = 'span'
TIME_SPAN_CLASS = 'leaderboard-time'

# Clock times on the leaderboard, e.g. "00:04:17"
CLOCK_TIME_RE = re.compile(r'^([01]\d|2[0-3]):([0-5]\d):([0-5]\d)$')


# === Chart output ===
D3_CDN_URL = "https://d3js.org/d3.v7.min.js"

EXCEL_COLORS = {
    'header_blue': '#0F0F23',
    'header_gold': '#FFFF66',
    'alt_row': '#F5F5F5',
    'white': '#FFFFFF',
}
