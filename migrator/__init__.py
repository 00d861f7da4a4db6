# Phone number migrator - decides which numbers fall inside migration recipes

from migrator.core.exceptions import InvalidRecipeKey, MigratorError
from migrator.job import MigrationJob, create_migration_job
from migrator.ranges import DigitSequence, Interval, RangeKey, RangeSet
from migrator.recipes import RecipeRow, RecipeTable, RegionCode, load_recipes_csv

__all__ = [
    "InvalidRecipeKey",
    "MigratorError",
    "MigrationJob",
    "create_migration_job",
    "DigitSequence",
    "Interval",
    "RangeKey",
    "RangeSet",
    "RecipeRow",
    "RecipeTable",
    "RegionCode",
    "load_recipes_csv",
]
