# Migrator Recipes - region codes, recipe rows, and the recipes table

from migrator.recipes.region import RegionCode
from migrator.recipes.table import RecipeRow, RecipeTable
from migrator.recipes.loader import (
    load_recipes_csv,
    parse_recipes,
    parse_recipe_key,
    parse_recipe_row,
)

__all__ = [
    "RegionCode",
    "RecipeRow",
    "RecipeTable",
    "load_recipes_csv",
    "parse_recipes",
    "parse_recipe_key",
    "parse_recipe_row",
]
