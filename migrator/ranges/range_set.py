"""Closed-interval algebra.

Provides:
- Interval: a closed [lo, hi] interval over any totally ordered type
- RangeSet: an immutable, normalized set of disjoint intervals
- Union and intersection of range sets

Intervals are always merged when they overlap. By default they are also
merged when adjacent, i.e. when the value type defines successor() and the
next interval starts at the successor of the previous upper endpoint. Sets of
individual values (see RangeSet.of_singletons) turn adjacency merging off so
that every value keeps its own interval.
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple


@dataclass(frozen=True)
class Interval:
    """Closed interval [lo, hi]. A single value has lo == hi."""
    lo: Any
    hi: Any

    def __post_init__(self):
        if self.hi < self.lo:
            raise ValueError(f"Interval lower bound {self.lo} is greater than upper bound {self.hi}")

    @classmethod
    def singleton(cls, value) -> "Interval":
        return cls(value, value)

    @property
    def is_singleton(self) -> bool:
        return self.lo == self.hi

    def contains(self, value) -> bool:
        """Check if a value is within this interval."""
        return self.lo <= value <= self.hi

    def __repr__(self) -> str:
        if self.is_singleton:
            return f"[{self.lo}]"
        return f"[{self.lo}..{self.hi}]"


def _touches(left: Interval, right: Interval, merge_adjacent: bool) -> bool:
    """True when right (which starts at or after left) overlaps, or abuts, left."""
    if right.lo <= left.hi:
        return True
    if not merge_adjacent:
        return False
    successor = getattr(left.hi, "successor", None)
    return successor is not None and successor() == right.lo


def _normalize(intervals: Iterable[Interval], merge_adjacent: bool) -> Tuple[Interval, ...]:
    merged = []
    for interval in sorted(intervals, key=lambda i: (i.lo, i.hi)):
        if merged and _touches(merged[-1], interval, merge_adjacent):
            last = merged[-1]
            if interval.hi > last.hi:
                merged[-1] = Interval(last.lo, interval.hi)
        else:
            merged.append(interval)
    return tuple(merged)


class RangeSet:
    """Immutable set of disjoint closed intervals, sorted by lower bound.

    Any iterable of intervals is accepted; overlapping intervals, and unless
    merge_adjacent is False adjacent ones, are merged, so two range sets
    covering the same values compare equal.

    Results of union and intersection only merge adjacent intervals when
    both operands do.
    """

    __slots__ = ("_intervals", "_lows", "_merge_adjacent")

    def __init__(self, intervals: Iterable[Interval] = (), merge_adjacent: bool = True):
        object.__setattr__(self, "_merge_adjacent", merge_adjacent)
        object.__setattr__(self, "_intervals", _normalize(intervals, merge_adjacent))
        object.__setattr__(self, "_lows", [i.lo for i in self._intervals])

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def of_singletons(cls, values: Iterable) -> "RangeSet":
        """Range set holding one single-value interval per distinct value.

        Values are never merged with their neighbours, so s and its
        successor stay two intervals.
        """
        return cls((Interval.singleton(v) for v in values), merge_adjacent=False)

    @property
    def intervals(self) -> Tuple[Interval, ...]:
        return self._intervals

    def is_empty(self) -> bool:
        return not self._intervals

    def contains(self, value) -> bool:
        """Check if a value lies in any interval of the set."""
        idx = bisect_right(self._lows, value) - 1
        return idx >= 0 and self._intervals[idx].contains(value)

    def union(self, other: "RangeSet") -> "RangeSet":
        return RangeSet(
            self._intervals + other._intervals,
            merge_adjacent=self._merge_adjacent and other._merge_adjacent,
        )

    def intersection(self, other: "RangeSet") -> "RangeSet":
        """Sub-intervals present in both sets.

        Walks both sorted interval lists once, advancing whichever interval
        ends first.
        """
        result = []
        left, right = self._intervals, other._intervals
        i = j = 0
        while i < len(left) and j < len(right):
            lo = max(left[i].lo, right[j].lo)
            hi = min(left[i].hi, right[j].hi)
            if lo <= hi:
                result.append(Interval(lo, hi))
            if left[i].hi < right[j].hi:
                i += 1
            else:
                j += 1
        return RangeSet(result, merge_adjacent=self._merge_adjacent and other._merge_adjacent)

    def lower_endpoints(self) -> Iterator:
        """Lazily yield the lower bound of each interval, in order."""
        for interval in self._intervals:
            yield interval.lo

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RangeSet):
            return NotImplemented
        return self._intervals == other._intervals

    def __hash__(self) -> int:
        return hash(self._intervals)

    def __repr__(self) -> str:
        return f"RangeSet({', '.join(repr(i) for i in self._intervals)})"
