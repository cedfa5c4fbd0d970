"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import ValidationError

from day_schedule import __version__
from day_schedule.compute import compute_day_schedule
from day_schedule.config import get_settings
from day_schedule.datasources.astronomy import HttpAstronomyProvider
from day_schedule.serialization import schedule_record_to_dict

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")
_OFFSET_RE = re.compile(r"^[+-]\d+$")
_OFFSET_WORDS = {"yesterday": -1, "today": 0, "tomorrow": 1}

#: A date without a time refers to noon.
DEFAULT_TIME = time(12, 0, 0)


def parse_when(tokens: list[str], timezone: str, now: datetime | None = None) -> datetime:
    """
    Parse ``[YYYY-MM-DD] [HH:MM[:SS]] [-N|+N|yesterday|tomorrow]``.

    A date alone means 12:00:00, a time alone means today. Without any
    date or time the current moment is used.

    Raises:
        ValueError: For tokens that match none of the forms.
    """
    zone = ZoneInfo(timezone)
    now = now or datetime.now(zone)
    day: date | None = None
    clock: time | None = None
    offset = 0

    for token in tokens:
        if m := _DATE_RE.match(token):
            day = date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        elif m := _TIME_RE.match(token):
            clock = time(int(m.group(1)), int(m.group(2)), int(m.group(3) or 0))
        elif _OFFSET_RE.match(token):
            offset = int(token)
        elif token.lower() in _OFFSET_WORDS:
            offset = _OFFSET_WORDS[token.lower()]
        else:
            raise ValueError(f"Cannot parse time argument: {token!r}")

    if day is None and clock is None:
        when = now
    else:
        clock = clock or (DEFAULT_TIME if day is not None else now.time().replace(microsecond=0))
        when = datetime.combine(day or now.date(), clock, tzinfo=zone)
    return when + timedelta(days=offset)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="day-schedule",
        description="Seasonal hours, seasons and daily event timeline for an observer",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    compute_parser = subparsers.add_parser("compute", help="Compute the schedule of a day")
    compute_parser.add_argument(
        "when",
        nargs="*",
        help="[YYYY-MM-DD] [HH:MM[:SS]] [-N|+N|yesterday|tomorrow] (default: now)",
    )
    compute_parser.add_argument(
        "--no-timeline",
        action="store_true",
        help="Leave the event timeline out of the output",
    )

    return parser


def _configure_logging(debug: bool) -> None:
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Observer: {settings.latitude}, {settings.longitude} ({settings.timezone})")
    print(f"Astronomy provider: {settings.astronomy_url}")
    return 0


def cmd_compute(args: argparse.Namespace) -> int:
    """Handle the 'compute' command: print the day's readings as JSON."""
    settings = get_settings()
    try:
        config = settings.schedule_config()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        when = parse_when(args.when, config.timezone)
    except (ValueError, ZoneInfoNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = compute_day_schedule(config, HttpAstronomyProvider(settings.astronomy_url), when)
    output = schedule_record_to_dict(result.today, include_timeline=not args.no_timeline)
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "compute": cmd_compute,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
