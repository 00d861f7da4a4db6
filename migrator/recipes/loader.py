"""Recipes CSV loader.

Reads a recipes table from CSV. Each data row describes one recipe range
either by prefix and length(s):

    Old Prefix,Old Length,Region Code,Old Format,New Format,Is Final Migration,Description
    4471,12,GB,4471xxxxxxxx,44771xxxxxxxx,true,Mobile range move

or by an explicit inclusive interval, using "Range Start" and "Range End"
in place of "Old Prefix" and "Old Length".
"""

import csv
import logging
from pathlib import Path
from typing import IO, Dict, Iterable, List, Tuple, Union

from migrator.core import config
from migrator.core.exceptions import (
    DigitSequenceError,
    DuplicateRecipeKeyError,
    RecipeTableError,
    RegionCodeError,
)
from migrator.ranges.range_key import RangeKey
from migrator.recipes.region import RegionCode
from migrator.recipes.table import RecipeRow, RecipeTable

log = logging.getLogger(__name__)

OLD_PREFIX = "Old Prefix"
OLD_LENGTH = "Old Length"
RANGE_START = "Range Start"
RANGE_END = "Range End"
REGION_CODE = "Region Code"
OLD_FORMAT = "Old Format"
NEW_FORMAT = "New Format"
IS_FINAL_MIGRATION = "Is Final Migration"
DESCRIPTION = "Description"

_TRUE_VALUES = {"true", "yes", "y", "1"}
_FALSE_VALUES = {"false", "no", "n", "0"}


def _field(row: Dict[str, str], name: str) -> str:
    value = row.get(name)
    return value.strip() if value else ""


def _parse_bool(value: str) -> bool:
    if not value:
        return True
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid {IS_FINAL_MIGRATION} value: {value!r}")


def _parse_lengths(value: str) -> List[int]:
    parts = [p.strip() for p in value.replace(";", ",").split(",") if p.strip()]
    if not parts:
        raise ValueError(f"Missing {OLD_LENGTH}")
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Invalid {OLD_LENGTH} value: {value!r}") from None


def parse_recipe_key(row: Dict[str, str]) -> RangeKey:
    """Build the range key of one CSV row.

    Raises:
        ValueError: If neither key form is complete or a value is malformed.
    """
    start, end = _field(row, RANGE_START), _field(row, RANGE_END)
    if start or end:
        if not (start and end):
            raise ValueError(f"{RANGE_START} and {RANGE_END} must be given together")
        return RangeKey.of(start, end)

    prefix = _field(row, OLD_PREFIX)
    if not prefix:
        raise ValueError(f"Missing {OLD_PREFIX} (or {RANGE_START}/{RANGE_END})")
    return RangeKey.from_prefix(prefix, _parse_lengths(_field(row, OLD_LENGTH)))


def parse_recipe_row(row: Dict[str, str]) -> Tuple[RangeKey, RecipeRow]:
    """Convert one CSV row into its key and recipe metadata."""
    region = _field(row, REGION_CODE)
    if not region:
        raise ValueError(f"Missing {REGION_CODE}")
    recipe = RecipeRow(
        region_code=RegionCode.parse(region),
        old_format=_field(row, OLD_FORMAT) or None,
        new_format=_field(row, NEW_FORMAT) or None,
        is_final_migration=_parse_bool(_field(row, IS_FINAL_MIGRATION)),
        description=_field(row, DESCRIPTION) or None,
    )
    return parse_recipe_key(row), recipe


def parse_recipes(rows: Iterable[Dict[str, str]]) -> RecipeTable:
    """Build a RecipeTable from already-split rows (e.g. a csv.DictReader).

    Raises:
        RecipeTableError: On a malformed row, with the 1-based data line.
        DuplicateRecipeKeyError: When two rows produce the same key.
    """
    entries = []
    seen = {}
    for line, row in enumerate(rows, start=1):
        if not any(v and v.strip() for v in row.values() if isinstance(v, str)):
            continue
        try:
            key, recipe = parse_recipe_row(row)
        except (ValueError, DigitSequenceError, RegionCodeError) as e:
            raise RecipeTableError(str(e), line=line) from e
        if key in seen:
            raise DuplicateRecipeKeyError(
                f"Duplicate recipe key {key} (first defined on line {seen[key]})", line=line
            )
        seen[key] = line
        entries.append((key, recipe))

    log.info(f"Loaded {len(entries)} recipes")
    return RecipeTable(entries)


def load_recipes_csv(source: Union[str, Path, IO[str]], delimiter: str = None) -> RecipeTable:
    """Load a recipes table from a CSV file path or an open text stream."""
    delimiter = delimiter or config.CSV_DELIMITER
    if isinstance(source, (str, Path)):
        log.debug(f"Reading recipes from {source}")
        with open(source, newline="", encoding="utf-8") as f:
            return _load(f, delimiter)
    return _load(source, delimiter)


def _load(stream: IO[str], delimiter: str) -> RecipeTable:
    reader = csv.DictReader(stream, delimiter=delimiter)
    fieldnames = reader.fieldnames or []
    if REGION_CODE not in fieldnames:
        raise RecipeTableError(f"Recipes CSV has no {REGION_CODE!r} column")
    has_prefix = OLD_PREFIX in fieldnames and OLD_LENGTH in fieldnames
    has_range = RANGE_START in fieldnames and RANGE_END in fieldnames
    if not (has_prefix or has_range):
        raise RecipeTableError(
            f"Recipes CSV needs {OLD_PREFIX!r}/{OLD_LENGTH!r} or {RANGE_START!r}/{RANGE_END!r} columns"
        )
    return parse_recipes(reader)
