#!/usr/bin/env python3
"""Report which phone numbers can be migrated by a recipes table.

Examples:
    python -m migrator --region GB --recipes recipes.csv --number +447100000001
    python -m migrator --region GB --recipes recipes.csv --file numbers.txt --raw
    python -m migrator --region GB --recipes recipes.csv --file numbers.txt \\
        --recipe-prefix 4471 --recipe-length 12

Exit codes:
    0  success (also when nothing is migratable)
    2  invalid input or unknown recipe
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from migrator.core import config
from migrator.core.exceptions import MigratorError
from migrator.core.logging import configure_logging
from migrator.job import MigrationJob, create_migration_job
from migrator.numbers import read_numbers_file
from migrator.ranges.range_key import RangeKey
from migrator.recipes.loader import load_recipes_csv

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="migrator",
        description="List phone numbers covered by the migration recipes of a region",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--region",
        default=config.DEFAULT_REGION or None,
        required=not config.DEFAULT_REGION,
        help="Two-letter region code of the recipes to use (default: $MIGRATOR_DEFAULT_REGION)",
    )
    parser.add_argument(
        "--recipes",
        required=True,
        help="Path of the recipes CSV file",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--number",
        action="append",
        help="Number to check; may be repeated",
    )
    source.add_argument(
        "--file",
        help="Text file with one number per line",
    )
    parser.add_argument(
        "--recipe-prefix",
        help="Only use the recipe with this prefix (requires --recipe-length)",
    )
    parser.add_argument(
        "--recipe-length",
        type=int,
        action="append",
        help="Total length of the recipe range; may be repeated",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print numbers as entered instead of E.164",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output a JSON summary instead of one number per line",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $MIGRATOR_LOG_LEVEL or INFO)",
    )
    return parser


def _select_numbers(job: MigrationJob, args) -> list:
    if args.recipe_prefix:
        key = RangeKey.from_prefix(args.recipe_prefix, args.recipe_length)
        return list(job.migratable_numbers(key))
    return list(job.all_migratable_numbers())


def _format(job: MigrationJob, number, raw: bool) -> str:
    return job.raw_number(number) if raw else f"+{number}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.recipe_prefix and not args.recipe_length:
        parser.error("--recipe-prefix requires --recipe-length")

    configure_logging(log_level=args.log_level)

    try:
        recipes = load_recipes_csv(args.recipes)
        raws = args.number if args.number else list(read_numbers_file(args.file))
        job = create_migration_job(raws, args.region, recipes)
        migratable = _select_numbers(job, args)
    except (MigratorError, ValueError, OSError) as e:
        log.debug("Migration check failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    if args.json_output:
        print(json.dumps({
            "region": str(job.region_code),
            "total": len(job.number_range_map),
            "migratable": [_format(job, n, args.raw) for n in migratable],
        }, indent=2))
    else:
        for number in migratable:
            print(_format(job, number, args.raw))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
