"""Region codes.

Two-letter region identifiers (CLDR/BCP-47 style, e.g. "GB", "US"),
validated against the regions the phonenumbers metadata knows about.
"""

from dataclasses import dataclass

import phonenumbers

from migrator.core.exceptions import RegionCodeError


@dataclass(frozen=True)
class RegionCode:
    """Validated, upper-case two-letter region code."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise RegionCodeError(f"Region code must be a string: {self.value!r}")
        normalized = self.value.strip().upper()
        if len(normalized) != 2 or not normalized.isalpha():
            raise RegionCodeError(f"Region code must be two letters: {self.value!r}")
        if normalized not in phonenumbers.SUPPORTED_REGIONS:
            raise RegionCodeError(f"Unknown region code: {normalized}")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def parse(cls, value) -> "RegionCode":
        if isinstance(value, RegionCode):
            return value
        return cls(value)

    @property
    def country_code(self) -> int:
        """Country calling code of the region (44 for GB)."""
        return phonenumbers.country_code_for_region(self.value)

    def __str__(self) -> str:
        return self.value
