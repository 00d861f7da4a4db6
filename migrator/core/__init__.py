# Migrator Core - configuration, exceptions, and logging

from migrator.core.exceptions import (
    ErrorCode,
    MigratorError,
    InvalidRecipeKey,
    DigitSequenceError,
    NumberParseError,
    RegionCodeError,
    RecipeTableError,
    DuplicateRecipeKeyError,
)
from migrator.core.logging import configure_logging, JsonFormatter

__all__ = [
    "ErrorCode",
    "MigratorError",
    "InvalidRecipeKey",
    "DigitSequenceError",
    "NumberParseError",
    "RegionCodeError",
    "RecipeTableError",
    "DuplicateRecipeKeyError",
    "configure_logging",
    "JsonFormatter",
]
