"""
Leaderboard statistics processor.

Turns leaderboard pages into one average completion time per (year, day) and
assembles the averages into a day-by-year table.
"""

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, List, Optional, TextIO

import pandas as pd

from ..parsers.leaderboard_parser import parse_leaderboard_html, extract_leaderboard_times
from ..utils.constants import FIRST_EVENT_YEAR, DEFAULT_START_DAY, DEFAULT_TOP
from ..utils.errors import EmptyInputError
from ..utils.helpers import parse_elapsed_seconds, day_range, format_elapsed
from ..utils.log import debug, info

# (year, day) -> raw page markup
FetchFunc = Callable[[int, int], str]


@dataclass(frozen=True)
class StatsConfig:
    """Year/day ranges and sampling options for one table build."""
    start_year: int
    end_year: int
    start_day: int
    end_day: int
    top: int = DEFAULT_TOP
    header: bool = True

    @classmethod
    def defaults(cls, now: Optional[datetime] = None) -> 'StatsConfig':
        """Every event year so far, days 1 through today's day of month."""
        now = now or datetime.now()
        return cls(
            start_year=FIRST_EVENT_YEAR,
            end_year=now.year,
            start_day=DEFAULT_START_DAY,
            end_day=now.day,
        )

    def with_latest(self) -> 'StatsConfig':
        """Restrict to the last configured day and drop the header."""
        return replace(self, start_day=self.end_day, header=False)

    @property
    def years(self) -> List[int]:
        return list(range(self.start_year, self.end_year + 1))

    @property
    def days(self) -> List[int]:
        return day_range(self.start_day, self.end_day)

    def validate(self) -> None:
        """Raise ValueError for empty ranges or a non-positive top."""
        if self.start_year > self.end_year:
            raise ValueError(f"start year {self.start_year} is after end year {self.end_year}")
        day_range(self.start_day, self.end_day)
        if self.top < 1:
            raise ValueError(f"top must be positive, got {self.top}")


def time_average(times: List[str]) -> int:
    """
    Average leaderboard times in elapsed seconds.

    Args:
        times: HH:MM:SS strings

    Returns:
        Integer mean, truncated

    Raises:
        EmptyInputError: If there are no times (e.g. the day has not unlocked)
        ParseError: If any time is malformed
    """
    if not times:
        raise EmptyInputError("No leaderboard times to average")

    total = sum(parse_elapsed_seconds(t) for t in times)
    return total // len(times)


def day_stats(year: int, day: int, top: int, fetch: FetchFunc) -> int:
    """Fetch one day's leaderboard and average its top times."""
    soup = parse_leaderboard_html(fetch(year, day))
    times = extract_leaderboard_times(soup, top)
    if not times:
        raise EmptyInputError(f"No leaderboard times for {year} day {day}")

    average = time_average(times)
    debug(f"  {year} day {day}: {len(times)} times, avg {format_elapsed(average)}")
    return average


def year_stats(year: int, start_day: int, end_day: int, top: int,
               fetch: FetchFunc) -> List[int]:
    """
    Average every day of one year concurrently.

    One task per day; each task owns slot (day - start_day) of a pre-sized
    list, so results never depend on completion order. The first failure is
    raised as soon as it is seen. Tasks still running are left to finish and
    their results are dropped.

    Args:
        year: Event year
        start_day: First day (inclusive)
        end_day: Last day (inclusive)
        top: Number of top times per day
        fetch: Callable returning a day's page markup

    Returns:
        Averages indexed by day offset
    """
    days = day_range(start_day, end_day)
    averages: List[Optional[int]] = [None] * len(days)

    def run_day(index: int, day: int) -> None:
        averages[index] = day_stats(year, day, top, fetch)

    executor = ThreadPoolExecutor(max_workers=len(days), thread_name_prefix=f"aoc-{year}")
    try:
        futures = [executor.submit(run_day, index, day) for index, day in enumerate(days)]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        for future in done:
            error = future.exception()
            if error is not None:
                raise error
    finally:
        executor.shutdown(wait=False)

    return averages


def build_stats_table(config: StatsConfig, fetch: FetchFunc) -> pd.DataFrame:
    """
    Build the day-by-year table of average times.

    Years are processed one after another; any failure aborts the build.

    Returns:
        DataFrame indexed by day (named 'day'), one int column per year
    """
    config.validate()

    series_by_year = {}
    for year in config.years:
        series_by_year[year] = year_stats(year, config.start_day, config.end_day, config.top, fetch)
        info(f"Processed {year} (days {config.start_day}-{config.end_day})")

    index = pd.Index(config.days, name='day')
    return pd.DataFrame(series_by_year, index=index, columns=config.years)


def format_stats_csv(table: pd.DataFrame, header: bool = True) -> str:
    """Serialize the table as CSV: ',' delimited, '\\n' terminated."""
    return table.to_csv(header=header, lineterminator='\n')


def generate_stats(config: StatsConfig, writer: TextIO, fetch: FetchFunc) -> pd.DataFrame:
    """
    Build the whole table, then write it as CSV in one go.

    Nothing is written if any year fails.

    Returns:
        The table that was written
    """
    table = build_stats_table(config, fetch)
    writer.write(format_stats_csv(table, header=config.header))
    return table


def stats_records(table: pd.DataFrame) -> List[dict]:
    """Rows of {'day': d, 'values': [avg per year]} for chart output."""
    return [
        {'day': int(day), 'values': [int(v) for v in row]}
        for day, row in zip(table.index, table.itertuples(index=False))
    ]


def table_years(table: pd.DataFrame) -> List[int]:
    return [int(year) for year in table.columns]
