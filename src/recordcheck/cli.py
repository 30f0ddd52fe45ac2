"""CLI entry point for recordcheck."""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from recordcheck import __version__
from recordcheck.allowlist import AllowListChecker
from recordcheck.config import Config
from recordcheck.text.anagram import is_anagram
from recordcheck.vehicles.csvio import import_and_export

logger = logging.getLogger(__name__)

# Exit code for a check that ran cleanly but answered "no"
EXIT_NEGATIVE = 3


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list to parse (defaults to sys.argv[1:]).
    """
    parser = argparse.ArgumentParser(
        prog="recordcheck",
        description="IP allow-list checks, vehicle CSV imports and anagram checks",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_ip = subparsers.add_parser(
        "check-ip",
        help="Check an IPv4 address against the allow-list",
    )
    check_ip.add_argument("ip", help="IPv4 address to check")
    check_ip.add_argument(
        "--range",
        dest="ranges",
        action="append",
        metavar="RANGE",
        help="Allow-list entry to use instead of the database (repeatable)",
    )

    import_vehicles = subparsers.add_parser(
        "import-vehicles",
        help="Import a vehicle CSV and export it by fuel type",
    )
    import_vehicles.add_argument("csv_path", help="Vehicle CSV file with a header row")
    import_vehicles.add_argument(
        "--export-dir",
        help="Directory for per-fuel exports (overrides EXPORT_DIR)",
    )
    import_vehicles.add_argument(
        "--dry-run",
        action="store_true",
        help="Run in dry-run mode (no files will be written)",
    )

    anagram = subparsers.add_parser(
        "anagram",
        help="Check whether two strings are anagrams",
    )
    anagram.add_argument("first")
    anagram.add_argument("second")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for recordcheck CLI."""
    args = parse_args(argv)

    if args.command == "anagram":
        result = is_anagram(args.first, args.second)
        print("true" if result else "false")
        sys.exit(0 if result else EXIT_NEGATIVE)

    load_dotenv()

    try:
        config = Config.from_env(
            dry_run=getattr(args, "dry_run", False),
            require_database=args.command == "check-ip" and not args.ranges,
        )
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    config.setup_logging()
    logger.debug("Config: %s", config)

    if args.command == "check-ip":
        checker = AllowListChecker(config)
        try:
            allowed = checker.check(args.ip, ranges=args.ranges)
        except Exception:
            logger.exception("Allow-list check failed")
            sys.exit(1)
        finally:
            checker.close()
        print("allowed" if allowed else "denied")
        sys.exit(0 if allowed else EXIT_NEGATIVE)

    if args.export_dir:
        config.export_dir = args.export_dir

    try:
        summary = import_and_export(args.csv_path, config)
    except Exception:
        logger.exception("Vehicle import failed")
        sys.exit(1)
    print(json.dumps(summary, indent=2))
