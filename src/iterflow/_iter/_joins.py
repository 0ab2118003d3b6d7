from __future__ import annotations

import functools
import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

import cytoolz as cz

from .._validation import validate_callable, validate_iterable
from ._common import BaseIterable

if TYPE_CHECKING:
    from .._types import Comparator
    from ._main import Iter


def _check_others(others: tuple[Iterable[Any], ...], operation: str) -> None:
    for idx, other in enumerate(others):
        validate_iterable(other, f"others[{idx}]", operation)


class BaseJoins[T](BaseIterable[T]):
    __slots__ = ()

    def concat(self, *others: Iterable[T]) -> Iter[T]:
        """Yield every element of **self**, then of each of **others**, in argument order.

        Each source is fully exhausted before the next one is started.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2]).concat([3], (4, 5)).to_list()
        [1, 2, 3, 4, 5]

        ```
        """
        _check_others(others, "concat")
        return self._iter(itertools.chain, *others)

    def zip[U](self, other: Iterable[U]) -> Iter[tuple[T, U]]:
        """Pair elements of **self** and **other**, stopping as soon as either is exhausted.

        **self** is pulled before **other**, so if **other** is shorter, one extra element of **self** is consumed.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).zip("ab").to_list()
        [(1, 'a'), (2, 'b')]

        ```
        """
        validate_iterable(other, "other", "zip")
        return self._iter(zip, other)

    def zip_with[U, R](self, other: Iterable[U], func: Callable[[T, U], R]) -> Iter[R]:
        """Combine elements of **self** and **other** pairwise with **func**.

        Equivalent to `zip()` followed by a `map()` unpacking each pair.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).zip_with([10, 20, 30], lambda a, b: a + b).to_list()
        [11, 22, 33]

        ```
        """
        validate_iterable(other, "other", "zip_with")
        validate_callable(func, "func", "zip_with")

        def _zip_with(data: Iterable[T]) -> Iterator[R]:
            return itertools.starmap(func, zip(data, other))

        return self._iter(_zip_with)

    def interleave(self, *others: Iterable[T]) -> Iter[T]:
        """Take one element from each source in turn.

        Exhausted sources are dropped from the rotation, and iteration goes on until all are exhausted.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).interleave("ab", [None]).to_list()
        [1, 'a', None, 2, 'b', 3]

        ```
        """
        _check_others(others, "interleave")

        def _interleave(data: Iterable[T]) -> Iterator[T]:
            return cz.itertoolz.interleave((data, *others))

        return self._iter(_interleave)

    def merge(
        self, *others: Iterable[T], comparator: Comparator[T] | None = None
    ) -> Iter[T]:
        """Merge already sorted sources into one sorted `Iter`.

        Only one pending element per source is held at a time, and each element costs O(log k) comparisons for k sources.

        If **comparator** is given, it is a three-way comparison used instead of the natural ordering.

        Note:
            Sources are not checked for sortedness.
            If one of them is not sorted under the same ordering, the output is not sorted either, but no error is raised.

        Args:
            *others (Iterable[T]): Other sorted sources.
            comparator (Comparator[T] | None): Optional three-way comparison function.

        Returns:
            Iter[T]: An iterator over every element of every source, in sorted order.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 3, 5]).merge([2, 4, 6]).to_list()
        [1, 2, 3, 4, 5, 6]
        >>> itf.Iter([5, 1]).merge([4, 2], comparator=lambda a, b: b - a).to_list()
        [5, 4, 2, 1]

        ```
        """
        _check_others(others, "merge")
        if comparator is not None:
            validate_callable(comparator, "comparator", "merge")
        key = None if comparator is None else functools.cmp_to_key(comparator)

        def _merge(data: Iterable[T]) -> Iterator[T]:
            yield from cz.itertoolz.merge_sorted(data, *others, key=key)

        return self._iter(_merge)
