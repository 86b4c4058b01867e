#!/usr/bin/env python3
"""CLI entry point for Release Cadence."""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from . import __version__
from .config import DEFAULT_SCHEME, TagScheme
from .ledger import build_ledger
from .report import render_table

# Exit codes
EXIT_INVALID_INPUT = 1
EXIT_IO_ERROR = 5
EXIT_INTERRUPTED = 130


# ANSI color codes for terminal output
class Colors:
    YELLOW = '\033[93m'
    RED = '\033[91m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        """Disable colors (for non-TTY output)."""
        cls.YELLOW = ''
        cls.RED = ''
        cls.END = ''


def supports_color() -> bool:
    """Check if the terminal supports color output."""
    if not hasattr(sys.stderr, 'isatty'):
        return False
    if not sys.stderr.isatty():
        return False
    return True


# Messages go to stderr; stdout carries the report.
def print_warning(message: str):
    """Print a warning message."""
    print(f"{Colors.YELLOW}⚠ {message}{Colors.END}", file=sys.stderr)


def print_error(message: str):
    """Print an error message."""
    print(f"{Colors.RED}✗ {message}{Colors.END}", file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-cadence",
        description="Show how many days each beta, release candidate and GA release was current",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:

  # Days each Go release candidate and beta was current
  git tag --format '%%(refname)%%09%%(authordate)' --sort=authordate | %(prog)s --show-rc --show-beta

  # GA releases only, from a saved listing
  %(prog)s --show-ga --input tags.txt

  # Comma-separated listing, as printed by --format '%%(refname),%%(authordate)'
  %(prog)s --show-ga --delimiter ,

  # Reproducible report for a fixed reference time
  %(prog)s --show-ga --now 2016-11-01T00:00:00+00:00

Input:
  One tag per line, followed by its date in git's default format
  (Thu Jun 2 10:00:23 2016 +1000), sorted oldest first.
""",
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Phase selection
    phase_group = parser.add_argument_group('Phase Selection')
    phase_group.add_argument(
        "--show-ga",
        action="store_true",
        help="Show GA releases",
    )
    phase_group.add_argument(
        "--show-beta",
        action="store_true",
        help="Show Beta releases",
    )
    phase_group.add_argument(
        "--show-rc",
        action="store_true",
        help="Show RC releases",
    )

    # Input options
    input_group = parser.add_argument_group('Input Options')
    input_group.add_argument(
        "--input", "-i",
        metavar="FILE",
        default="-",
        help="Tag listing to read. Default: stdin",
    )
    input_group.add_argument(
        "--prefix",
        metavar="PREFIX",
        default=None,
        help=f"Literal tag prefix before the version. Default: {DEFAULT_SCHEME.prefix}",
    )
    input_group.add_argument(
        "--delimiter",
        metavar="DELIM",
        default=None,
        help="Separator between tag and date. Default: tab",
    )
    input_group.add_argument(
        "--strict",
        action="store_true",
        help="Reject listings that are not in chronological order",
    )
    input_group.add_argument(
        "--now",
        metavar="TIMESTAMP",
        default=None,
        help="Reference time for still-current releases (ISO 8601 or git date). Default: current time",
    )

    # Output options
    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument(
        "--format",
        choices=["csv", "table"],
        default="csv",
        help="Output format (default: csv)",
    )
    output_group.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    output_group.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    output_group.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    return parser


def parse_now(value: Optional[str], scheme: TagScheme) -> datetime:
    """Resolve the reference time. Read from the wall clock when not given."""
    if value is None:
        return datetime.now(timezone.utc)

    try:
        now = datetime.fromisoformat(value)
    except ValueError:
        try:
            now = datetime.strptime(value, scheme.timestamp_format)
        except ValueError:
            raise ValueError(f"could not parse --now value: {value!r}") from None

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None):
    if '--no-color' in (argv if argv is not None else sys.argv) or not supports_color():
        Colors.disable()

    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.quiet:
        log_level = logging.WARNING
    elif args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    scheme = DEFAULT_SCHEME.with_overrides(prefix=args.prefix, delimiter=args.delimiter)

    if not (args.show_ga or args.show_beta or args.show_rc) and not args.quiet:
        print_warning("No phase selected; use --show-ga, --show-beta or --show-rc")

    try:
        now = parse_now(args.now, scheme)
        text = read_input(args.input)

        releases = build_ledger(text, scheme=scheme, strict=args.strict)
        if not len(releases):
            print_warning(f"No {scheme.display_name} release tags found in input")
        releases.assign_durations(now)

        if args.format == "table":
            from rich.console import Console

            console = Console(no_color=args.no_color)
            console.print(render_table(
                releases,
                show_ga=args.show_ga,
                show_beta=args.show_beta,
                show_rc=args.show_rc,
            ))
        else:
            sys.stdout.write(releases.render(args.show_ga, args.show_beta, args.show_rc))

    except OSError as e:
        print_error(f"Could not read input: {e}")
        sys.exit(EXIT_IO_ERROR)
    except ValueError as e:
        print_error(f"Invalid input: {e}")
        sys.exit(EXIT_INVALID_INPUT)
    except KeyboardInterrupt:
        print_warning("Interrupted by user")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print_error(f"Unexpected error: {e}")
        sys.exit(EXIT_INVALID_INPUT)


if __name__ == "__main__":
    main()
