"""
Download window CLI for opal-downloader.

Resolves the start and end dates of a download run against the allowed
window and reports the days to fetch. The retrieval itself is performed by a
separate step.

Usage:
    python -m opal_downloader.cli [--start YYYY-MM-DD] [--end YYYY-MM-DD]

Examples:
    # Everything from the origin up to the latest published day
    python -m opal_downloader.cli

    # A single month, listing each planned day
    python -m opal_downloader.cli --start 2023-02-01 --end 2023-02-28 --list-days
"""

import argparse
import sys
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError

from opal_downloader.cli.exit_codes import exit_code_for
from opal_downloader.config import get_settings
from opal_downloader.constants import EX_CONFIG, EXIT_OK
from opal_downloader.dates import (
    ParseError,
    WindowError,
    compute_bounds,
    iter_download_days,
    resolve,
)
from opal_downloader.utils.logging import bind_context, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opal-downloader",
        description="Resolve the date window for a download run",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Everything from the origin up to the latest published day
  opal-downloader

  # A single month, listing each planned day
  opal-downloader --start 2023-02-01 --end 2023-02-28 --list-days

Dates outside the allowed window are clamped to its nearest edge.
        """,
    )
    parser.add_argument(
        "-s",
        "--start",
        type=str,
        default=None,
        help="First day to download, YYYY-MM-DD (default: earliest available)",
    )
    parser.add_argument(
        "-e",
        "--end",
        type=str,
        default=None,
        help="Last day to download, YYYY-MM-DD (default: latest published)",
    )
    parser.add_argument(
        "--list-days",
        action="store_true",
        help="Print every planned day after the summary line",
    )
    return parser


def main(argv: Optional[List[str]] = None, now: Optional[datetime] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        now: Current instant; read from the clock when omitted

    Returns:
        Exit code (0 for success, sysexits.h code on failure)
    """
    args = build_parser().parse_args(argv)
    run_logger = bind_context(requested_start=args.start, requested_end=args.end)

    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("settings_invalid", error_count=exc.error_count())
        print(f"Error: invalid settings\n{exc}", file=sys.stderr)
        return EX_CONFIG
    tz = settings.tzinfo
    if now is None:
        now = datetime.now(timezone.utc)

    window = compute_bounds(
        now, tz=tz, origin=settings.origin_date, lag_days=settings.publication_lag_days
    )
    run_logger.info(
        "bounds_computed", min=window.min.isoformat(), max=window.max.isoformat()
    )

    try:
        if window.is_empty:
            raise WindowError(window.min, window.max)
        start = window.min if args.start is None else resolve(*window, args.start, tz)
        end = window.max if args.end is None else resolve(*window, args.end, tz)
    except ParseError as exc:
        run_logger.warning("date_resolution_failed", **exc.to_dict())
        print(f"Error: {exc}", file=sys.stderr)
        return exit_code_for(exc)
    except WindowError as exc:
        run_logger.error("bounding_window_empty", message=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return exit_code_for(exc)

    run_logger.info(
        "download_window_resolved", start=start.isoformat(), end=end.isoformat()
    )
    print(f"Downloading files between {start.isoformat()} and {end.isoformat()}")

    if args.list_days:
        days = list(iter_download_days(start, end, tz))
        if not days:
            run_logger.warning("download_window_empty", start=start.isoformat())
        for day in days:
            print(day.date().isoformat())

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
