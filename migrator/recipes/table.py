"""Recipe rows and the recipes table.

The table maps each RangeKey to the metadata of one recipe. Only the key and
the region code matter for eligibility; the format and description fields
are carried for whatever performs the transform downstream.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, InstanceOf, field_validator

from migrator.core.exceptions import DuplicateRecipeKeyError
from migrator.ranges.range_key import RangeKey
from migrator.ranges.range_set import RangeSet
from migrator.recipes.region import RegionCode

log = logging.getLogger(__name__)


class RecipeRow(BaseModel):
    """Metadata of one recipe."""
    model_config = ConfigDict(frozen=True)

    region_code: InstanceOf[RegionCode]
    old_format: Optional[str] = None
    new_format: Optional[str] = None
    is_final_migration: bool = True
    description: Optional[str] = None

    @field_validator("region_code", mode="before")
    @classmethod
    def parse_region(cls, value):
        return RegionCode.parse(value)


class RecipeTable(Mapping):
    """Read-only mapping of RangeKey -> RecipeRow.

    Lookup by key is a hash lookup. Rows keep the order they were given in,
    although nothing depends on it.
    """

    def __init__(self, rows: Iterable[Tuple[RangeKey, RecipeRow]] = ()):
        entries: Dict[RangeKey, RecipeRow] = {}
        for key, row in rows:
            if key in entries:
                raise DuplicateRecipeKeyError(f"Duplicate recipe key {key}")
            entries[key] = row
        self._rows = MappingProxyType(entries)

    def __getitem__(self, key: RangeKey) -> RecipeRow:
        return self._rows[key]

    def __iter__(self) -> Iterator[RangeKey]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, key) -> bool:
        return key in self._rows

    def keys_for_region(self, region) -> List[RangeKey]:
        """Keys of the rows whose region equals region, in table order."""
        region = RegionCode.parse(region)
        return [key for key, row in self._rows.items() if row.region_code == region]

    def ranges_for_region(self, region) -> RangeSet:
        """Union of the ranges of every recipe belonging to region.

        Rows from other regions never contribute, even when their ranges
        cover the same digits.
        """
        keys = self.keys_for_region(region)
        ranges = RangeSet(interval for key in keys for interval in key.as_range_set())
        log.debug(f"Region {region}: {len(keys)} recipes, {len(ranges)} merged ranges")
        return ranges

    def __repr__(self) -> str:
        return f"RecipeTable({len(self._rows)} rows)"
