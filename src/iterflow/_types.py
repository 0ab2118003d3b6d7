from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple


class Enumerated[T](NamedTuple):
    """Represents an item with its associated index in an enumeration.

    See `Iter.enumerate()` for details.
    """

    idx: int
    """The index of the item in the enumeration."""
    value: T
    """The value of the item."""

    def __repr__(self) -> str:
        return f"({self.idx}, {self.value!r})"


class Partitioned[T](NamedTuple):
    """The two sides of a `partition()` call, in source order.

    See `Iter.partition()` for details.
    """

    matching: list[T]
    """Elements for which the predicate held."""
    non_matching: list[T]
    """Elements for which the predicate did not hold."""


class Quartiles(NamedTuple):
    """First, second and third quartiles of a numeric sequence.

    See `Iter.quartiles()` for details.
    """

    q1: float
    """25th percentile."""
    q2: float
    """50th percentile, equal to the median."""
    q3: float
    """75th percentile."""


type Comparator[T] = Callable[[T, T], int]
"""A three-way comparison: negative if a < b, zero if equal, positive if a > b."""
