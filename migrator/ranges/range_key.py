"""Recipe range keys.

A RangeKey identifies exactly one recipe row: the set of digit sequences
the recipe applies to. Keys are compared by their normalized interval set,
so two keys built differently but covering the same sequences are equal.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from migrator.ranges.digit_sequence import DigitSequence
from migrator.ranges.range_set import Interval, RangeSet

DigitsLike = Union[str, DigitSequence]


def _as_digits(value: DigitsLike) -> DigitSequence:
    if isinstance(value, DigitSequence):
        return value
    return DigitSequence.parse(value)


@dataclass(frozen=True)
class RangeKey:
    """Immutable, hashable key made of one or more disjoint digit intervals."""
    ranges: RangeSet

    def __post_init__(self):
        if not isinstance(self.ranges, RangeSet):
            object.__setattr__(self, "ranges", RangeSet(self.ranges))
        if self.ranges.is_empty():
            raise ValueError("RangeKey must cover at least one digit sequence")
        for interval in self.ranges:
            if not isinstance(interval.lo, DigitSequence) or not isinstance(interval.hi, DigitSequence):
                raise TypeError(f"RangeKey endpoints must be DigitSequence: {interval!r}")

    @classmethod
    def of(cls, lo: DigitsLike, hi: DigitsLike = None) -> "RangeKey":
        """Key for the closed range [lo, hi], or the single sequence lo."""
        lo = _as_digits(lo)
        hi = lo if hi is None else _as_digits(hi)
        return cls(RangeSet([Interval(lo, hi)]))

    @classmethod
    def from_intervals(cls, pairs: Iterable[Tuple[DigitsLike, DigitsLike]]) -> "RangeKey":
        """Key for the union of several (lo, hi) ranges."""
        return cls(RangeSet(Interval(_as_digits(lo), _as_digits(hi)) for lo, hi in pairs))

    @classmethod
    def from_prefix(cls, prefix: DigitsLike, lengths: Iterable[int]) -> "RangeKey":
        """Key whose intervals are bounded by the prefix padded to each length.

        For each length the interval runs from the prefix padded with 0s to
        the prefix padded with 9s ("4471", 6 -> [447100, 447199]). Lengths only
        fix the endpoints: under the lexicographic order the interval also
        holds shorter and longer sequences sorting between them (4471005 and
        4471000 lie in [447100, 447199]), and intervals of several lengths
        overlap and merge into one.

        Raises:
            ValueError: If no length is given or a length is shorter than the prefix.
        """
        prefix = _as_digits(prefix)
        lengths = sorted(set(lengths))
        if not lengths:
            raise ValueError(f"No lengths given for prefix {prefix}")
        intervals = []
        for length in lengths:
            pad = length - len(prefix)
            if pad < 0:
                raise ValueError(f"Length {length} is shorter than prefix {prefix}")
            intervals.append(Interval(
                DigitSequence(prefix.digits + "0" * pad),
                DigitSequence(prefix.digits + "9" * pad),
            ))
        return cls(RangeSet(intervals))

    def as_range_set(self) -> RangeSet:
        return self.ranges

    def contains(self, number: DigitSequence) -> bool:
        return self.ranges.contains(number)

    def __str__(self) -> str:
        parts = []
        for interval in self.ranges:
            if interval.is_singleton:
                parts.append(str(interval.lo))
            else:
                parts.append(f"{interval.lo}-{interval.hi}")
        return f"RangeKey[{', '.join(parts)}]"
