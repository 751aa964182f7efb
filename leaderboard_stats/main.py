"""
Main entry point for Leaderboard Stats.

Writes the day-by-year CSV table of average top finish times to stdout.
"""

import sys
import argparse
from datetime import datetime
from typing import List, Optional

from .excel.workbook_generator import write_stats_workbook
from .processors.stats_processor import StatsConfig, generate_stats
from .scrapers.leaderboard_scraper import LeaderboardFetcher
from .utils.constants import BASE_URL, REQUEST_TIMEOUT
from .utils.errors import LeaderboardStatsError
from .utils.log import info, error, success, set_verbosity
from .website.generator import generate_chart_html


def build_parser(defaults: StatsConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Average the top leaderboard finish times per day and year, as CSV"
    )
    parser.add_argument(
        '--start-year',
        type=int,
        default=defaults.start_year,
        help=f'First event year (default: {defaults.start_year})'
    )
    parser.add_argument(
        '--end-year',
        type=int,
        default=defaults.end_year,
        help=f'Last event year (default: {defaults.end_year})'
    )
    parser.add_argument(
        '--start-day',
        type=int,
        default=defaults.start_day,
        help=f'First day (default: {defaults.start_day})'
    )
    parser.add_argument(
        '--end-day',
        type=int,
        default=defaults.end_day,
        help=f'Last day (default: {defaults.end_day})'
    )
    parser.add_argument(
        '--top',
        type=int,
        default=defaults.top,
        help=f'Number of top times to consider (default: {defaults.top})'
    )
    parser.add_argument(
        '--no-header',
        action='store_true',
        help='Omit the CSV header row'
    )
    parser.add_argument(
        '--latest',
        action='store_true',
        help='Only compute stats for the end day, without a header'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=REQUEST_TIMEOUT,
        help=f'HTTP timeout in seconds (default: {REQUEST_TIMEOUT})'
    )
    parser.add_argument(
        '--output-excel',
        help='Also write the table and a line chart to this .xlsx file'
    )
    parser.add_argument(
        '--output-html',
        help='Also write an interactive chart page to this .html file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable extra debug output'
    )
    return parser


def config_from_args(args: argparse.Namespace) -> StatsConfig:
    """Build the run configuration, applying --latest last."""
    config = StatsConfig(
        start_year=args.start_year,
        end_year=args.end_year,
        start_day=args.start_day,
        end_day=args.end_day,
        top=args.top,
        header=not args.no_header,
    )
    if args.latest:
        config = config.with_latest()
    return config


def main(argv: Optional[List[str]] = None, now: Optional[datetime] = None) -> None:
    parser = build_parser(StatsConfig.defaults(now))
    args = parser.parse_args(argv)

    set_verbosity(args.verbose)

    config = config_from_args(args)
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    info(f"Fetching {config.start_year}-{config.end_year}, days {config.start_day}-{config.end_day}, top {config.top}")

    try:
        with LeaderboardFetcher(base_url=BASE_URL, timeout=args.timeout) as fetcher:
            table = generate_stats(config, sys.stdout, fetcher)
    except LeaderboardStatsError as e:
        error(str(e))
        sys.exit(1)

    sys.stdout.flush()

    if args.output_excel:
        write_stats_workbook(table, args.output_excel)
    if args.output_html:
        generate_chart_html(table, args.output_html)

    success("Done")


if __name__ == '__main__':
    main()
