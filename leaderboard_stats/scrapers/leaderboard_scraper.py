"""
Leaderboard page fetcher.

Issues exactly one GET per (year, day). There is no retry, backoff or rate
limiting: a failed request fails the whole run.
"""

from typing import Optional
import requests

from ..utils.constants import BASE_URL, DAY_URL_TEMPLATE, USER_AGENT, REQUEST_TIMEOUT
from ..utils.errors import FetchError
from ..utils.log import debug


def get_day_url(year: int, day: int, base_url: str = BASE_URL) -> str:
    """Get the leaderboard URL for one day of one year's event.

    Args:
        year: Event year, e.g. 2023
        day: Day of the event (1-based)
        base_url: Site root, without trailing slash

    Returns:
        URL string
    """
    return DAY_URL_TEMPLATE.format(base_url=base_url, year=year, day=day)


def fetch_leaderboard_html(
    year: int,
    day: int,
    session: Optional[requests.Session] = None,
    base_url: str = BASE_URL,
    timeout: float = REQUEST_TIMEOUT,
) -> str:
    """
    Fetch the raw HTML of a daily leaderboard page.

    Args:
        year: Event year
        day: Day of the event
        session: Optional session to reuse connections
        base_url: Site root
        timeout: Request timeout in seconds

    Returns:
        Response body as text

    Raises:
        FetchError: On transport failure or a non-2xx status
    """
    url = get_day_url(year, day, base_url)
    debug(f"Fetching: {url}")

    http = session if session is not None else requests
    try:
        headers = {'User-Agent': USER_AGENT}
        response = http.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Error fetching {url}: {e}") from e

    return response.text


class LeaderboardFetcher:
    """Callable fetch collaborator sharing one session across day tasks."""

    def __init__(self, base_url: str = BASE_URL, timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def __call__(self, year: int, day: int) -> str:
        return fetch_leaderboard_html(
            year, day,
            session=self.session,
            base_url=self.base_url,
            timeout=self.timeout,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> 'LeaderboardFetcher':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
