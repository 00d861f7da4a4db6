"""Migration jobs.

A MigrationJob holds the numbers to be migrated, the target region and the
recipes table, and answers which numbers fall inside which recipe ranges.
Only recipes of the job's region take part in region-wide queries.

The job never performs migrations: a number reported as migratable is inside
a recipe range, nothing more.
"""

import logging
from types import MappingProxyType
from typing import Collection, Dict, Iterable, Iterator, List, Mapping

from migrator.core.exceptions import InvalidRecipeKey
from migrator.numbers import build_number_range_map
from migrator.ranges.digit_sequence import DigitSequence
from migrator.ranges.range_key import RangeKey
from migrator.ranges.range_set import RangeSet
from migrator.recipes.region import RegionCode
from migrator.recipes.table import RecipeTable

log = logging.getLogger(__name__)


class MigrationJob:
    """Numbers, region and recipes of one migration request.

    All state is fixed at construction and queries recompute from it, so a
    job can be queried repeatedly and from several threads. Inputs are
    assumed to be validated by whoever built them.
    """

    __slots__ = ("_number_range_map", "_region_code", "_recipes_table")

    def __init__(
        self,
        number_range_map: Mapping[DigitSequence, str],
        region_code: RegionCode,
        recipes_table: RecipeTable,
    ):
        object.__setattr__(self, "_number_range_map", MappingProxyType(dict(number_range_map)))
        object.__setattr__(self, "_region_code", region_code)
        object.__setattr__(self, "_recipes_table", recipes_table)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def number_range_map(self) -> Mapping[DigitSequence, str]:
        return self._number_range_map

    @property
    def region_code(self) -> RegionCode:
        return self._region_code

    @property
    def recipes_table(self) -> RecipeTable:
        return self._recipes_table

    def number_range(self) -> RangeSet:
        """Range set with one single-number interval per input number."""
        return RangeSet.of_singletons(self._number_range_map.keys())

    def raw_number_range(self) -> Collection[str]:
        """The input numbers exactly as they were entered."""
        return self._number_range_map.values()

    def raw_number(self, number: DigitSequence) -> str:
        return self._number_range_map[number]

    def all_migratable_numbers(self) -> Iterator[DigitSequence]:
        """Numbers covered by any recipe of the job's region.

        Every interval of the number range is a single number, so each
        interval of the intersection is one of the input numbers and its
        lower endpoint is that number. Returns a fresh iterator per call.
        """
        region_ranges = self._recipes_table.ranges_for_region(self._region_code)
        matches = region_ranges.intersection(self.number_range())
        log.debug(
            f"{len(matches)} of {len(self._number_range_map)} numbers in region recipes",
            extra={"region": self._region_code},
        )
        return matches.lower_endpoints()

    def migratable_numbers(self, recipe_key: RangeKey) -> Iterator[DigitSequence]:
        """Numbers covered by the recipe with exactly this key.

        The recipe is not required to belong to the job's region.

        Args:
            recipe_key: Key of a row of the recipes table.

        Raises:
            InvalidRecipeKey: If no row has this key. Raised by this call,
                not when the returned iterator is consumed.
        """
        if recipe_key not in self._recipes_table:
            raise InvalidRecipeKey(recipe_key)
        matches = recipe_key.as_range_set().intersection(self.number_range())
        log.debug(f"{len(matches)} numbers in recipe", extra={"recipe_key": recipe_key})
        return matches.lower_endpoints()

    def migratable_numbers_by_recipe(self) -> Dict[RangeKey, List[DigitSequence]]:
        """Migratable numbers of each recipe of the job's region."""
        return {
            key: list(self.migratable_numbers(key))
            for key in self._recipes_table.keys_for_region(self._region_code)
        }

    def __repr__(self) -> str:
        return (
            f"MigrationJob(region={self._region_code}, numbers={len(self._number_range_map)}, "
            f"recipes={len(self._recipes_table)})"
        )


def create_migration_job(
    numbers: Iterable[str],
    region,
    recipes_table: RecipeTable,
) -> MigrationJob:
    """Build a job from raw number strings.

    Args:
        numbers: Raw numbers, international or national to region.
        region: RegionCode or its two-letter text.
        recipes_table: Loaded recipes.

    Raises:
        RegionCodeError: If region is not a known region code.
        NumberParseError: If a number cannot be parsed.
    """
    region = RegionCode.parse(region)
    number_range_map = build_number_range_map(numbers, region)
    log.info(
        f"Created migration job with {len(number_range_map)} numbers",
        extra={"region": region},
    )
    return MigrationJob(number_range_map, region, recipes_table)
