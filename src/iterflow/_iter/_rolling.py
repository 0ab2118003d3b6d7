from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import more_itertools as mit

from .._validation import validate_positive_int
from ._common import BaseIterable

if TYPE_CHECKING:
    from ._main import Iter


class BaseRolling[T](BaseIterable[T]):
    __slots__ = ()

    def window(self, size: int) -> Iter[list[T]]:
        """Yield sliding windows of **size** consecutive elements, advancing by one element per step.

        The first window is yielded once **size** elements have been pulled, so a source of n elements produces `max(0, n - size + 1)` windows.

        No more than **size** elements are held in memory at any time, and each window is an independent `list`.

        Args:
            size (int): Number of elements in each window.

        Returns:
            Iter[list[T]]: An iterator of windows, oldest element first.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3, 4, 5]).window(3).to_list()
        [[1, 2, 3], [2, 3, 4], [3, 4, 5]]
        >>> itf.Iter([1, 2]).window(3).to_list()
        []
        >>> # moving average
        >>> itf.Iter([2, 4, 6, 8]).window(2).map(lambda w: sum(w) / len(w)).to_list()
        [3.0, 5.0, 7.0]

        ```
        """
        validate_positive_int(size, "size", "window")

        def _window(data: Iterable[T]) -> Iterator[list[T]]:
            buffer: deque[T] = deque(maxlen=size)
            for item in data:
                buffer.append(item)
                if len(buffer) == size:
                    yield list(buffer)

        return self._iter(_window)

    def chunk(self, size: int) -> Iter[list[T]]:
        """Split the elements into consecutive, non-overlapping lists of **size** elements.

        The last chunk is shorter if there are not enough elements.

        Args:
            size (int): Number of elements in each chunk.

        Returns:
            Iter[list[T]]: An iterator of chunks.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3, 4, 5]).chunk(2).to_list()
        [[1, 2], [3, 4], [5]]
        >>> itf.Iter.from_count().chunk(3).take(2).to_list()
        [[0, 1, 2], [3, 4, 5]]

        ```
        """
        validate_positive_int(size, "size", "chunk")
        return self._iter(mit.chunked, size)

    def pairwise(self) -> Iter[tuple[T, T]]:
        """Return an iterator over pairs of consecutive elements.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).pairwise().to_list()
        [(1, 2), (2, 3)]

        ```
        """
        return self._iter(itertools.pairwise)
