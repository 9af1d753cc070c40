"""Command-line entry for ical_lite.

Parses a local ICS file and prints the result tree as JSON.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

from dateutil.rrule import rrule
from pydantic import BaseModel, ValidationError

from .config import load_settings
from .exceptions import ICalError
from .lite_logging import configure_lite_logging
from .lite_parser import parse_ics, parse_ics_async

logger = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the ical_lite CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="ical_lite",
        description="ical_lite - tolerant iCalendar (RFC 5545) parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ical_lite calendar.ics              # Print the parsed tree as JSON
  python -m ical_lite calendar.ics --chunked    # Parse in batches on an event loop
        """,
    )
    parser.add_argument("file", metavar="FILE", help="ICS file to parse")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--chunked",
        action="store_true",
        help="Parse in batches, yielding to the event loop between them",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        metavar="LINES",
        help="Lines per batch in chunked mode (default: from settings)",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="YAML settings file (ICAL_LITE_* environment variables take precedence)",
    )
    return parser


def to_jsonable(value: Any) -> Any:
    """``json.dumps`` default hook for parsed values."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, rrule):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the ical_lite CLI.

    Returns:
        Process exit code
    """
    args = _create_parser().parse_args(argv)
    configure_lite_logging(debug_mode=args.debug)

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    try:
        text = Path(args.file).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    try:
        if args.chunked:
            tree = asyncio.run(parse_ics_async(text, settings, args.chunk_size))
        else:
            tree = parse_ics(text, settings)
    except ICalError as e:
        logger.debug("Parse of %s failed", args.file, exc_info=True)
        print(f"Failed to parse {args.file}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(tree, default=to_jsonable, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
