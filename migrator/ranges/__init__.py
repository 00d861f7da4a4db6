# Migrator Ranges - digit sequences, interval algebra, and recipe keys

from migrator.ranges.digit_sequence import DigitSequence
from migrator.ranges.range_set import Interval, RangeSet
from migrator.ranges.range_key import RangeKey

__all__ = [
    "DigitSequence",
    "Interval",
    "RangeSet",
    "RangeKey",
]
