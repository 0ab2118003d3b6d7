from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any

import cytoolz as cz

from .._types import Enumerated
from .._validation import validate_callable
from ._common import BaseIterable

if TYPE_CHECKING:
    from ._main import Iter


class BaseMap[T](BaseIterable[T]):
    __slots__ = ()

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element of the iterable.

        map() is lazy: **func** is only called when the resulting `Iter` is pulled, once per element, in order.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2]).map(lambda x: x + 1).to_list()
        [2, 3]

        ```
        """
        validate_callable(func, "func", "map")
        return self._iter(partial(map, func))

    def flat_map[R](self, func: Callable[[T], Iterable[R]]) -> Iter[R]:
        """Map each element to an iterable and flatten the result by one level.

        All elements of `func(x)` are yielded before the next `x` is pulled.

        Args:
            func (Callable[[T], Iterable[R]]): Function returning an iterable for each element.

        Returns:
            Iter[R]: An iterator over the concatenated results.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).flat_map(lambda x: [x] * x).to_list()
        [1, 2, 2, 3, 3, 3]
        >>> itf.Iter(["ab", "c"]).flat_map(lambda s: [list(s)]).to_list()
        [['a', 'b'], ['c']]

        ```
        """
        validate_callable(func, "func", "flat_map")

        def _flat_map(data: Iterable[T]) -> Iterator[R]:
            return itertools.chain.from_iterable(map(func, data))

        return self._iter(_flat_map)

    def scan[U](self, func: Callable[[U, T], U], initial: U) -> Iter[U]:
        """Yield every intermediate value of a left fold, starting with **initial**.

        The accumulator is updated as `acc = func(acc, x)` for each element, so the output has one more element than the input.

        Args:
            func (Callable[[U, T], U]): Function taking the accumulator and the next element.
            initial (U): Seed of the accumulator, yielded first.

        Returns:
            Iter[U]: An iterator of running accumulators.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).scan(lambda acc, x: acc + x, 0).to_list()
        [0, 1, 3, 6]
        >>> itf.Iter([]).scan(lambda acc, x: acc + x, 10).to_list()
        [10]

        ```
        """
        validate_callable(func, "func", "scan")

        def _scan(data: Iterable[T]) -> Iterator[U]:
            return itertools.accumulate(data, func, initial=initial)  # pyright: ignore[reportArgumentType, reportCallIssue]

        return self._iter(_scan)

    def enumerate(self) -> Iter[Enumerated[T]]:
        """Pair each element with its index, starting at 0.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter(["a", "b"]).enumerate().to_list()
        [(0, 'a'), (1, 'b')]
        >>> itf.Iter(["a", "b"]).enumerate().map(lambda e: e.idx).to_list()
        [0, 1]

        ```
        """

        def _enumerate(data: Iterable[T]) -> Iterator[Enumerated[T]]:
            return itertools.starmap(Enumerated, enumerate(data))

        return self._iter(_enumerate)

    def tap(self, func: Callable[[T], Any]) -> Iter[T]:
        """Call **func** on each element as it passes through, for side effects.

        Elements are yielded unchanged, in order.

        Example:
        ```python
        >>> import iterflow as itf
        >>> seen = []
        >>> itf.Iter([1, 2, 3]).tap(seen.append).take(2).to_list()
        [1, 2]
        >>> seen
        [1, 2]

        ```
        """
        validate_callable(func, "func", "tap")

        def _tap(data: Iterable[T]) -> Iterator[T]:
            for item in data:
                func(item)
                yield item

        return self._iter(_tap)

    def intersperse(self, separator: T) -> Iter[T]:
        """Insert **separator** between each pair of consecutive elements.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).intersperse(0).to_list()
        [1, 0, 2, 0, 3]

        ```
        """
        return self._iter(partial(cz.itertoolz.interpose, separator))
