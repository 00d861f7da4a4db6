"""Root conftest for all tests - provides shared fixtures."""

import logging

import pytest

from migrator.job import MigrationJob
from migrator.ranges.digit_sequence import DigitSequence
from migrator.ranges.range_key import RangeKey
from migrator.recipes.region import RegionCode
from migrator.recipes.table import RecipeRow, RecipeTable

GB_MOBILE_KEY = RangeKey.of("447100000000", "447100999999")
GB_LANDLINE_KEY = RangeKey.of("442070000000", "442079999999")
US_KEY = RangeKey.of("12125550000", "12125559999")

RECIPES_CSV = """Old Prefix,Old Length,Region Code,Old Format,New Format,Is Final Migration,Description
4471,12,GB,4471xxxxxxxx,44771xxxxxxxx,true,Mobile range move
44207,12,GB,44207xxxxxxx,442030xxxxxxx,false,London split
1212555,11,US,1212555xxxx,1646555xxxx,yes,Manhattan overlay
"""


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def gb():
    return RegionCode("GB")


@pytest.fixture
def recipes_table():
    """Two GB recipes and one US recipe."""
    return RecipeTable([
        (GB_MOBILE_KEY, RecipeRow(region_code="GB", description="Mobile")),
        (GB_LANDLINE_KEY, RecipeRow(region_code="GB", description="London")),
        (US_KEY, RecipeRow(region_code="US", description="Manhattan")),
    ])


@pytest.fixture
def number_map():
    return {
        DigitSequence("447100000001"): "+447100000001",
        DigitSequence("447200000001"): "+447200000001",
        DigitSequence("442071234567"): "020 7123 4567",
        DigitSequence("12125551234"): "+1 212 555 1234",
    }


@pytest.fixture
def job(number_map, gb, recipes_table):
    return MigrationJob(number_map, gb, recipes_table)


@pytest.fixture
def recipes_csv(tmp_path):
    path = tmp_path / "recipes.csv"
    path.write_text(RECIPES_CSV)
    return path
