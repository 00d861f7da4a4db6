"""Migrator exception hierarchy.

Every error carries a code from ErrorCode so callers (the CLI, or any
reporting layer built on top) can map failures without string matching.

- MigratorError is the base for everything raised by this package
- InvalidRecipeKey is the only error a query on a MigrationJob can raise
- the remaining classes belong to the collaborators that build job inputs
"""


class ErrorCode:
    """Error code registry."""
    # Query layer
    RECIPE_KEY_INVALID = "RECIPE_KEY_INVALID"

    # Input layer
    DIGIT_SEQUENCE_INVALID = "DIGIT_SEQUENCE_INVALID"
    NUMBER_PARSE_FAILED = "NUMBER_PARSE_FAILED"
    REGION_CODE_INVALID = "REGION_CODE_INVALID"

    # Recipe table layer
    RECIPE_TABLE_INVALID = "RECIPE_TABLE_INVALID"
    RECIPE_KEY_DUPLICATE = "RECIPE_KEY_DUPLICATE"


class MigratorError(Exception):
    """Base exception for all migrator errors."""

    code: str = "MIGRATOR_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# =============================================================================
# Query Exceptions
# =============================================================================

class InvalidRecipeKey(MigratorError, ValueError):
    """Recipe key does not match any row of the recipes table.

    Raised before any range computation happens. The offending key is kept
    on the exception so callers can report it.
    """

    code = ErrorCode.RECIPE_KEY_INVALID

    def __init__(self, recipe_key):
        self.recipe_key = recipe_key
        super().__init__(
            f"{recipe_key} does not match any recipe row in the given recipes table"
        )


# =============================================================================
# Input Exceptions
# =============================================================================

class DigitSequenceError(MigratorError, ValueError):
    """Text is not a non-empty sequence of decimal digits."""

    code = ErrorCode.DIGIT_SEQUENCE_INVALID


class NumberParseError(MigratorError):
    """Raw phone number input could not be turned into a digit sequence."""

    code = ErrorCode.NUMBER_PARSE_FAILED

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Cannot parse number {raw!r}: {reason}")


class RegionCodeError(MigratorError, ValueError):
    """Region code is malformed or not a known region."""

    code = ErrorCode.REGION_CODE_INVALID


# =============================================================================
# Recipe Table Exceptions
# =============================================================================

class RecipeTableError(MigratorError):
    """Recipe table source is malformed.

    When raised by the CSV loader, line is the 1-based data line number.
    """

    code = ErrorCode.RECIPE_TABLE_INVALID

    def __init__(self, message: str, line: int = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class DuplicateRecipeKeyError(RecipeTableError):
    """Two recipe rows share an identical range key."""

    code = ErrorCode.RECIPE_KEY_DUPLICATE
