from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from .._validation import ensure_sortable, validate_callable
from ._common import BaseIterable

if TYPE_CHECKING:
    from .._types import Comparator
    from ._main import Seq


class BaseEager[T](BaseIterable[T]):
    """Operations that must buffer the whole sequence before producing anything.

    They return a `Seq` rather than an `Iter`, so the memory cost is visible at the call site.
    """

    __slots__ = ()

    def sort(self) -> Seq[T]:
        """Sort the elements in their natural order.

        Only numbers, or only strings, are accepted.

        Returns:
            Seq[T]: A new `Seq` with the sorted elements.

        Raises:
            ElementTypeError: If the elements are not all numbers, or not all strings.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([3, 1, 2]).sort()
        Seq(1, 2, 3)
        >>> itf.Iter(["b", "a"]).sort().iter().map(str.upper).to_list()
        ['A', 'B']
        >>> itf.Iter([1, "a"]).sort()
        Traceback (most recent call last):
            ...
        iterflow._errors.ElementTypeError: sort: elements must be all numbers or all strings, got str 'a'

        ```
        """
        values = list(self._inner)
        ensure_sortable(values, "sort")
        values.sort()  # pyright: ignore[reportCallIssue]
        return self._seq(values, "sort")

    def sort_by(self, comparator: Comparator[T]) -> Seq[T]:
        """Sort the elements with a three-way **comparator**.

        The sort is stable.

        Args:
            comparator (Comparator[T]): Returns a negative number, zero, or a positive number.

        Returns:
            Seq[T]: A new `Seq` with the sorted elements.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 3, 2]).sort_by(lambda a, b: b - a)
        Seq(3, 2, 1)

        ```
        """
        validate_callable(comparator, "comparator", "sort_by")
        values = sorted(self._inner, key=functools.cmp_to_key(comparator))
        return self._seq(values, "sort_by")

    def reverse(self) -> Seq[T]:
        """Return the elements in reverse order.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter(range(3)).reverse()
        Seq(2, 1, 0)

        ```
        """
        values = list(self._inner)
        values.reverse()
        return self._seq(values, "reverse")
