from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import overload, override

from .._config import get_config
from .._option import Option
from .._validation import validate_iterable
from ._eager import BaseEager
from ._filters import BaseFilter
from ._groups import BaseGroups
from ._joins import BaseJoins
from ._maps import BaseMap
from ._rolling import BaseRolling
from ._stats import BaseStats


class Terminals[T](BaseStats[T], BaseGroups[T], BaseEager[T]):
    __slots__ = ()


class Iter[T](
    BaseFilter[T],
    BaseMap[T],
    BaseRolling[T],
    BaseJoins[T],
    Terminals[T],
    Iterator[T],
):
    """A wrapper around Python's `Iterator` protocol, providing chainable lazy operations and terminal reducers.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used as a standard iterator.

    - Lazy methods (`map`, `filter`, `window`, `take`, ...) return a new `Iter` and pull nothing when called.
    - Terminal methods (`to_list`, `sum`, `mean`, `group_by`, ...) drain the `Iter` and return a concrete value.
    - Materializing methods (`sort`, `sort_by`, `reverse`) buffer everything and return a `Seq`.

    Once an `Iter` is exhausted, it cannot be reused or reset.

    Every stage pulls from the one it was built from, so deriving two pipelines from the same `Iter` makes them compete for the same elements.

    If you need to reuse the data, collect it first with `.collect()`, and go back to an `Iter` with `Seq.iter()`.

    Args:
        data (Iterable[T]): Any object that can be iterated over.

    Raises:
        ValidationError: If **data** is not iterable.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.Iter([1, 2, 3, 4, 5]).filter(lambda x: x % 2 == 0).map(lambda x: x * 2).to_list()
    [4, 8]

    ```
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        validate_iterable(data, "data", "Iter")
        self._inner = iter(data)  # pyright: ignore[reportIncompatibleVariableOverride]

    def __next__(self) -> T:
        return next(self._inner)

    @override
    def __iter__(self) -> Iterator[T]:
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._inner!r})"

    def next(self) -> Option[T]:
        """Return the next element in the iterator, wrapped in an `Option`.

        Returns:
            Option[T]: `Some(element)`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import iterflow as itf
        >>> it = itf.Iter([1, 2])
        >>> it.next()
        Some(1)
        >>> it.next(), it.next()
        (Some(2), NONE)

        ```
        """
        return self.first()

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` or `Iter.take_while()` to bound it.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter.from_count(10, 2).take(3).to_list()
        [10, 12, 14]

        ```
        """
        return Iter(itertools.count(start, step))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Prefer using the standard constructor, as this method involves extra checks.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if **data** is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter.from_(1, 2, 3).to_list()
        [1, 2, 3]
        >>> itf.Iter.from_([1, 2]).to_list()
        [1, 2]

        ```
        """
        if isinstance(data, Iterable) and not more_data:
            return Iter(data)  # pyright: ignore[reportUnknownArgumentType]
        return Iter((data, *more_data))  # pyright: ignore[reportUnknownArgumentType]


class Seq[T](Terminals[T]):
    """An immutable, re-iterable sequence, returned by materializing operations.

    Terminal methods are shared with `Iter`, and can be called any number of times on the same `Seq`.

    Use `Seq.iter()` to build a new lazy pipeline.

    Args:
        data (Sequence[T]): The elements, usually a `tuple`.

    Example:
    ```python
    >>> import iterflow as itf
    >>> ranked = itf.Iter([3, 1, 2]).sort()
    >>> ranked.sum(), ranked.mean()
    (6, Some(2.0))
    >>> ranked.iter().window(2).to_list()
    [[1, 2], [2, 3]]

    ```
    """

    _inner: Sequence[T]

    __slots__ = ()

    def __init__(self, data: Sequence[T]) -> None:
        self._inner = data

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        return self._inner[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def iter(self) -> Iter[T]:
        """Get an `Iter` over the elements, leaving the `Seq` untouched."""
        return Iter(self._inner)
