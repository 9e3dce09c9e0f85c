"""
Command-line entry point.

Run from the repository root::

    python -m worstcase.cli path/to/data --ignore-stated-year
"""

import argparse
import logging
import sys

from worstcase.config import configure_logging, settings
from worstcase.engine.worst_case import analyze_directory
from worstcase.errors import WorstCaseError

log = logging.getLogger("worstcase.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute worst-case 1/3/5/7-day irradiance and temperature windows."
    )
    parser.add_argument(
        "data_directory",
        nargs="?",
        default=settings.DATA_DIRECTORY,
        help="Directory of hourly CSV files (default: WORSTCASE_DATA_DIRECTORY)",
    )
    parser.add_argument(
        "--ignore-stated-year",
        action="store_true",
        default=settings.IGNORE_STATED_YEAR,
        help="Place every row on one reference year (typical-year datasets)",
    )
    parser.add_argument(
        "--reference-year",
        type=int,
        metavar="YYYY",
        default=settings.REFERENCE_YEAR,
        help="Year used with --ignore-stated-year (default: current year)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.MAX_WORKERS,
        help="Threads used to read input files",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    if not args.data_directory:
        print("A data directory is required (argument or WORSTCASE_DATA_DIRECTORY).", file=sys.stderr)
        return 2

    try:
        result = analyze_directory(
            args.data_directory,
            ignore_stated_year=args.ignore_stated_year,
            reference_year=args.reference_year,
            max_workers=args.workers,
        )
    except WorstCaseError as exc:
        log.error("Analysis failed: %s", exc)
        return 1

    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
