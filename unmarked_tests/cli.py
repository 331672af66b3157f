"""
Collect Python tests that don't carry any of the excluded markers.

Quick usage:
    collect-unmarked-tests tests --exclude-markers unit,integration
    collect-unmarked-tests --packages pkg_a/tests,pkg_b/tests
"""

import argparse
import logging
import sys
from pathlib import Path

from unmarked_tests.collector import UnmarkedTest, collect_unmarked_tests, collect_unmarked_tests_for_packages
from unmarked_tests.config import load_config, parse_comma_separated, resolve_settings
from unmarked_tests.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_EXCLUDE_MARKERS,
    DEFAULT_TEST_DIR,
    MAX_WORKERS,
    NO_UNMARKED_TESTS_MESSAGE,
)
from unmarked_tests.exceptions import ConfigFileError, EmptyListError
from unmarked_tests.logger import setup_logging

LOGGER = logging.getLogger(__name__)


def comma_separated(value: str) -> list[str]:
    try:
        return parse_comma_separated(value=value)
    except EmptyListError as exp:
        raise argparse.ArgumentTypeError(str(exp)) from exp


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value}")
    return number


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="collect-unmarked-tests",
        description="Collect Python tests that don't have specific markers",
    )
    parser.add_argument(
        "test_dir",
        nargs="?",
        help=f"Test directory to scan (default: {DEFAULT_TEST_DIR})",
    )
    parser.add_argument(
        "--exclude-markers",
        type=comma_separated,
        action="extend",
        help=f"Comma-separated markers to exclude (default: {','.join(sorted(DEFAULT_EXCLUDE_MARKERS))})",
    )
    parser.add_argument(
        "--packages",
        type=comma_separated,
        action="extend",
        help="Comma-separated package directories to scan instead of test_dir (for monorepo support)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILE),
        help=f"INI config file with defaults for the options above (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--workers",
        type=positive_int,
        default=MAX_WORKERS,
        help=f"Number of files analyzed in parallel (default: {MAX_WORKERS})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file",
    )
    return parser


def report(unmarked_tests: list[UnmarkedTest]) -> int:
    if not unmarked_tests:
        print(NO_UNMARKED_TESTS_MESSAGE)
        return 0

    print(f"Found {len(unmarked_tests)} unmarked test(s):", file=sys.stderr)
    for unmarked_test in unmarked_tests:
        print(f"  {unmarked_test.node_id}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = get_parser()
    args = parser.parse_args(args=argv)

    setup_logging(log_level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        settings = resolve_settings(args=args, file_config=load_config(config_file=args.config))
    except (ConfigFileError, EmptyListError) as exp:
        parser.error(str(exp))

    LOGGER.info(f"Excluded markers: {', '.join(sorted(settings.exclude_markers))}")

    if settings.packages:
        unmarked_tests = collect_unmarked_tests_for_packages(
            packages=settings.packages,
            excluded_markers=settings.exclude_markers,
            max_workers=args.workers,
        )
    else:
        unmarked_tests = collect_unmarked_tests(
            test_dir=settings.test_dir,
            excluded_markers=settings.exclude_markers,
            max_workers=args.workers,
        )

    return report(unmarked_tests=unmarked_tests)


if __name__ == "__main__":
    sys.exit(main())
