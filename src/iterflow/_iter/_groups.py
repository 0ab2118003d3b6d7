from __future__ import annotations

from collections.abc import Callable

import cytoolz as cz

from .._types import Partitioned
from .._validation import validate_callable
from ._common import BaseIterable


class BaseGroups[T](BaseIterable[T]):
    __slots__ = ()

    def partition(self, predicate: Callable[[T], bool]) -> Partitioned[T]:
        """Split the elements in a single pass into those satisfying **predicate** and the others.

        Relative order is preserved on both sides.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Partitioned[T]: `(matching, non_matching)` lists.

        Example:
        ```python
        >>> import iterflow as itf
        >>> evens, odds = itf.Iter(range(7)).partition(lambda x: x % 2 == 0)
        >>> evens, odds
        ([0, 2, 4, 6], [1, 3, 5])

        ```
        """
        validate_callable(predicate, "predicate", "partition")
        matching: list[T] = []
        non_matching: list[T] = []
        for item in self._inner:
            (matching if predicate(item) else non_matching).append(item)
        return Partitioned(matching, non_matching)

    def group_by[K](self, key: Callable[[T], K]) -> dict[K, list[T]]:
        """Group elements into a `dict` of lists, keyed by `key(element)`.

        Unlike `itertools.groupby`, the input does not need to be sorted.

        Keys appear in order of first occurrence, and each list keeps the source order.

        Args:
            key (Callable[[T], K]): Function computing the group key of each element.

        Returns:
            dict[K, list[T]]: The groups.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter(["apple", "bob", "avocado", "cat"]).group_by(lambda s: s[0])
        {'a': ['apple', 'avocado'], 'b': ['bob'], 'c': ['cat']}

        ```
        """
        validate_callable(key, "key", "group_by")
        return cz.itertoolz.groupby(key, self._inner)
