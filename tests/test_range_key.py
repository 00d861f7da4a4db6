"""Tests for recipe range keys."""

import pytest

from migrator.core.exceptions import DigitSequenceError
from migrator.ranges.digit_sequence import DigitSequence
from migrator.ranges.range_key import RangeKey
from migrator.ranges.range_set import Interval, RangeSet


class TestConstruction:
    """Tests for the RangeKey constructors."""

    def test_of_range(self):
        key = RangeKey.of("447100000000", "447100999999")
        assert key.as_range_set().intervals == (
            Interval(DigitSequence("447100000000"), DigitSequence("447100999999")),
        )

    def test_of_single(self):
        key = RangeKey.of("447100000001")
        assert key.as_range_set() == RangeSet.of_singletons([DigitSequence("447100000001")])

    def test_of_accepts_formatting(self):
        assert RangeKey.of("+44 7100", "+44 7199") == RangeKey.of("447100", "447199")

    def test_from_prefix(self):
        key = RangeKey.from_prefix("4471", [6])
        assert key == RangeKey.of("447100", "447199")

    def test_from_prefix_same_length_is_single(self):
        assert RangeKey.from_prefix("4471", [4]) == RangeKey.of("4471")

    def test_from_prefix_multiple_lengths(self):
        key = RangeKey.from_prefix("55", [3, 5])
        assert key == RangeKey.from_intervals([("550", "559"), ("55000", "55999")])

    def test_from_prefix_lengths_bound_endpoints_only(self):
        """Sequences of other lengths sorting between the endpoints are inside."""
        key = RangeKey.from_prefix("4471", [6])
        assert key.contains(DigitSequence("4471005"))
        assert key.contains(DigitSequence("4471000"))
        assert not key.contains(DigitSequence("4472"))

    def test_from_prefix_no_lengths(self):
        with pytest.raises(ValueError, match="No lengths"):
            RangeKey.from_prefix("4471", [])

    def test_from_prefix_length_too_short(self):
        with pytest.raises(ValueError, match="shorter than prefix"):
            RangeKey.from_prefix("4471", [3])

    def test_reversed_range_rejected(self):
        with pytest.raises(ValueError):
            RangeKey.of("447199", "447100")

    def test_bad_digits_rejected(self):
        with pytest.raises(DigitSequenceError):
            RangeKey.of("44x")

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="at least one"):
            RangeKey(RangeSet())

    def test_non_digit_endpoints_rejected(self):
        with pytest.raises(TypeError):
            RangeKey(RangeSet([Interval(1, 2)]))


class TestEquality:
    """Keys compare by their normalized interval set."""

    def test_structural_equality(self):
        a = RangeKey.from_intervals([("100", "199"), ("150", "299")])
        b = RangeKey.of("100", "299")
        assert a == b
        assert hash(a) == hash(b)

    def test_different_ranges_differ(self):
        assert RangeKey.of("100", "199") != RangeKey.of("100", "198")

    def test_usable_as_dict_key(self):
        mapping = {RangeKey.of("100", "199"): "recipe"}
        assert mapping[RangeKey.from_prefix("1", [3])] == "recipe"


class TestBehaviour:
    """Tests for contains() and the textual form."""

    def test_contains(self):
        key = RangeKey.of("447100000000", "447100999999")
        assert key.contains(DigitSequence("447100000001"))
        assert not key.contains(DigitSequence("447200000001"))

    def test_str(self):
        key = RangeKey.from_intervals([("100", "199"), ("5", "5")])
        assert str(key) == "RangeKey[100-199, 5]"
