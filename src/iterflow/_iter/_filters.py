from __future__ import annotations

import itertools
from collections.abc import Callable, Hashable
from functools import partial
from typing import TYPE_CHECKING

import cytoolz as cz

from .._validation import validate_callable, validate_non_negative_int
from ._common import BaseIterable

if TYPE_CHECKING:
    from ._main import Iter


class BaseFilter[T](BaseIterable[T]):
    __slots__ = ()

    def filter(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Creates an `Iter` which uses a closure to determine if an element should be yielded.

        The **predicate** is called at most once per element, and only when that element is pulled.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterable of the items that satisfy the predicate.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).filter(lambda x: x > 1).to_list()
        [2, 3]
        >>> itf.Iter([1, 2, 3]).filter(lambda x: x > 1).next()
        Some(2)

        ```
        """
        validate_callable(predicate, "predicate", "filter")
        return self._iter(partial(filter, predicate))

    def take(self, n: int) -> Iter[T]:
        """Creates an iterator that yields the first n elements, or fewer if the underlying iterator ends sooner.

        Once n elements are yielded, the upstream is never pulled again.

        This makes `take` the way to bound an infinite `Iter`.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterable of the first n items.

        Example:
        ```python
        >>> import iterflow as itf
        >>> data = [1, 2, 3]
        >>> itf.Iter(data).take(2).to_list()
        [1, 2]
        >>> itf.Iter(data).take(5).to_list()
        [1, 2, 3]
        >>> itf.Iter.from_count().take(3).to_list()
        [0, 1, 2]

        ```
        """
        validate_non_negative_int(n, "n", "take")
        return self._iter(partial(cz.itertoolz.take, n))

    def drop(self, n: int) -> Iter[T]:
        """Discard the first n elements.

        Args:
            n (int): Number of elements to discard.

        Returns:
            Iter[T]: An iterable of the items after the first n items.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter((1, 2, 3)).drop(1).to_list()
        [2, 3]
        >>> itf.Iter((1, 2, 3)).drop(5).to_list()
        []

        ```
        """
        validate_non_negative_int(n, "n", "drop")
        return self._iter(partial(cz.itertoolz.drop, n))

    def take_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Take items while predicate holds.

        Stops for good at the first failing element, even if later ones would pass.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter((1, 2, 0, 3)).take_while(lambda x: x > 0).to_list()
        [1, 2]

        ```
        """
        validate_callable(predicate, "predicate", "take_while")
        return self._iter(partial(itertools.takewhile, predicate))

    def drop_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Drop items while predicate holds.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter((1, 2, 0, 3)).drop_while(lambda x: x > 0).to_list()
        [0, 3]

        ```
        """
        validate_callable(predicate, "predicate", "drop_while")
        return self._iter(partial(itertools.dropwhile, predicate))

    def distinct(self) -> Iter[T]:
        """Return only the first occurrence of each element.

        Elements must be hashable. Memory grows with the number of distinct elements seen.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 1, 3, 2]).distinct().to_list()
        [1, 2, 3]

        ```
        """
        return self._iter(cz.itertoolz.unique)

    def distinct_by(self, key: Callable[[T], Hashable]) -> Iter[T]:
        """Return only the first element for each distinct `key(element)`.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter(["cat", "mouse", "dog", "hen"]).distinct_by(len).to_list()
        ['cat', 'mouse']

        ```
        """
        validate_callable(key, "key", "distinct_by")
        return self._iter(cz.itertoolz.unique, key=key)
