from __future__ import annotations

import functools
import logging
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Concatenate

import cytoolz as cz
import more_itertools as mit

from .._config import get_config
from .._core import CommonBase
from .._option import NONE, Option, Some
from .._validation import (
    validate_callable,
    validate_non_empty,
    validate_non_negative_int,
)

if TYPE_CHECKING:
    from ._main import Iter, Seq

logger = logging.getLogger(__name__)

_MISSING: Any = object()


def log_buffered(operation: str, count: int) -> None:
    if get_config().log_materialization:
        logger.debug("%s buffered %d elements", operation, count)


class BaseIterable[T](CommonBase[Iterable[T]]):
    """Root of every wrapper: iteration protocol, stage factories and basic terminal operations."""

    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._main import Iter

        def _(data: Iterable[T]) -> Iter[U]:
            return Iter(factory(data, *args, **kwargs))

        return self.into(_)

    def _seq[U](self, values: list[U], operation: str) -> Seq[U]:
        from ._main import Seq

        log_buffered(operation, len(values))
        return Seq(tuple(values))

    def to_list(self) -> list[T]:
        """Drain the sequence into a new `list`.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter(range(3)).map(str).to_list()
        ['0', '1', '2']

        ```
        """
        return list(self._inner)

    def collect(self) -> Seq[T]:
        """Drain the sequence into a re-iterable `Seq`.

        Use `Seq.iter()` to go back to a lazy `Iter`.

        Returns:
            Seq[T]: A materialized, immutable sequence.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter(range(5)).collect()
        Seq(0, 1, 2, 3, 4)
        >>> itf.Iter([]).collect()
        Seq()

        ```
        """
        from ._main import Seq

        return Seq(tuple(self._inner))

    def count(self) -> int:
        """Count the elements, draining the sequence.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter("hello").distinct().count()
        4

        ```
        """
        return cz.itertoolz.count(self._inner)

    def reduce(self, func: Callable[[T, T], T], initial: T = _MISSING) -> T:
        """Fold the elements from left to right with **func**.

        Without **initial**, the first element seeds the accumulator and the sequence must not be empty.

        Args:
            func (Callable[[T, T], T]): Function taking the accumulator and the next element.
            initial (T): Optional seed of the accumulator.

        Returns:
            T: The final accumulator.

        Raises:
            ValidationError: If the sequence is empty and no **initial** was given.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).reduce(lambda acc, x: acc * 10 + x)
        123
        >>> itf.Iter([]).reduce(lambda acc, x: acc + x, 0)
        0
        >>> itf.Iter([]).reduce(lambda acc, x: acc + x)
        Traceback (most recent call last):
            ...
        iterflow._errors.ValidationError: reduce: sequence cannot be empty

        ```
        """
        validate_callable(func, "func", "reduce")
        if initial is not _MISSING:
            return functools.reduce(func, self._inner, initial)
        head, values = mit.spy(self._inner)
        validate_non_empty(head, "reduce")
        return functools.reduce(func, values)

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return the first element satisfying **predicate**.

        Stops pulling as soon as a match is found.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 4, 6]).find(lambda x: x % 2 == 0)
        Some(4)
        >>> itf.Iter([1, 3]).find(lambda x: x % 2 == 0)
        NONE

        ```
        """
        validate_callable(predicate, "predicate", "find")
        for item in self._inner:
            if predicate(item):
                return Some(item)
        return NONE

    def first(self) -> Option[T]:
        """Return the first element, pulling only that one."""
        for item in self._inner:
            return Some(item)
        return NONE

    def last(self) -> Option[T]:
        """Return the last element, draining the sequence.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).last()
        Some(3)
        >>> itf.Iter([]).last()
        NONE

        ```
        """
        tail = deque(self._inner, maxlen=1)
        return Some(tail[0]) if tail else NONE

    def nth(self, index: int) -> Option[T]:
        """Return the element at **index**, pulling only up to it.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter.from_count().nth(5)
        Some(5)
        >>> itf.Iter([1]).nth(3)
        NONE

        ```
        """
        validate_non_negative_int(index, "index", "nth")
        value = mit.nth(self._inner, index, _MISSING)
        return NONE if value is _MISSING else Some(value)

    def all(self, predicate: Callable[[T], bool] = bool) -> bool:
        """Check if every element satisfies **predicate**, stopping at the first failure.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([2, 4]).all(lambda x: x % 2 == 0)
        True
        >>> itf.Iter([]).all()
        True

        ```
        """
        validate_callable(predicate, "predicate", "all")
        return all(map(predicate, self._inner))

    def any(self, predicate: Callable[[T], bool] = bool) -> bool:
        """Check if any element satisfies **predicate**, stopping at the first success.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter.from_count().any(lambda x: x > 10)
        True

        ```
        """
        validate_callable(predicate, "predicate", "any")
        return any(map(predicate, self._inner))

    def contains(self, value: object) -> bool:
        """Check if **value** is one of the elements, stopping at the first match."""
        return value in self._inner

    def is_empty(self) -> bool:
        """Check if the sequence has no element.

        Note:
            On an `Iter`, this pulls (and discards) at most one element.
        """
        return mit.ilen(cz.itertoolz.take(1, self._inner)) == 0

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the sequence by applying a function to each element.

        Is a terminal operation, and is useful for functions that have side effects, or when you want to force evaluation of a lazy pipeline.

        Args:
            func (Callable[Concatenate[T, P], Any]): Function to apply to each element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).for_each(lambda x: print(x + 1))
        2
        3
        4

        ```
        """
        validate_callable(func, "func", "for_each")
        for item in self._inner:
            func(item, *args, **kwargs)
