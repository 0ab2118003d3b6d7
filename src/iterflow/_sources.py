"""Free functions building an `Iter` without a prior source, or from several sources at once.

These names shadow builtins (`range`, `zip`), like `cytoolz` does for its own helpers,
so prefer `import iterflow as itf` and `itf.range(...)` over star imports.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, overload

from ._iter import Iter
from ._validation import (
    validate_finite,
    validate_iterable,
    validate_non_negative_int,
    validate_non_zero,
)

if TYPE_CHECKING:
    from ._types import Comparator


@overload
def range(stop: float, /) -> Iter[int | float]: ...
@overload
def range(start: float, stop: float, step: float = 1, /) -> Iter[int | float]: ...
def range(  # noqa: A001
    start: float, stop: float | None = None, step: float = 1, /
) -> Iter[int | float]:
    """Create an arithmetic sequence from **start** (inclusive) to **stop** (exclusive).

    Called with a single argument, it is the **stop** and the sequence starts at 0.

    Unlike the builtin, floats are accepted. Each value is computed as `start + i * step`, so errors do not accumulate.

    Args:
        start (float): First value, or the stop if it is the only argument.
        stop (float | None): Exclusive bound.
        step (float): Difference between consecutive values. Negative for a descending sequence.

    Returns:
        Iter[int | float]: A lazy iterator over the sequence.

    Raises:
        ValidationError: If **step** is zero, or if any argument is not a finite number.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.range(5).to_list()
    [0, 1, 2, 3, 4]
    >>> itf.range(2, 5).to_list()
    [2, 3, 4]
    >>> itf.range(5, 0, -2).to_list()
    [5, 3, 1]
    >>> itf.range(0, 1, 0.25).to_list()
    [0.0, 0.25, 0.5, 0.75]
    >>> itf.range(0, 5, 0)
    Traceback (most recent call last):
        ...
    iterflow._errors.ValidationError: range: step cannot be zero

    ```
    """
    if stop is None:
        start, stop = 0, start
    validate_finite(start, "start", "range")
    validate_finite(stop, "stop", "range")
    validate_finite(step, "step", "range")
    validate_non_zero(step, "step", "range")

    def _range() -> Iterator[int | float]:
        for idx in itertools.count():
            value = start + idx * step
            if (step > 0 and value >= stop) or (step < 0 and value <= stop):
                return
            yield value

    return Iter(_range())


def repeat[T](value: T, times: int | None = None) -> Iter[T]:
    """Yield **value** **times** times, or forever if **times** is omitted.

    **Warning** ⚠️
        Without **times**, this creates an infinite iterator.
        Be sure to use `Iter.take()` to bound it.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.repeat("x", 3).to_list()
    ['x', 'x', 'x']
    >>> itf.repeat(1).take(2).to_list()
    [1, 1]

    ```
    """
    if times is None:
        return Iter(itertools.repeat(value))
    validate_non_negative_int(times, "times", "repeat")
    return Iter(itertools.repeat(value, times))


def zip[T, U](first: Iterable[T], second: Iterable[U]) -> Iter[tuple[T, U]]:  # noqa: A001
    """Pair elements of two iterables, stopping when the shorter one is exhausted.

    See `Iter.zip()`.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.zip([1, 2, 3], ["a", "b", "c"]).to_list()
    [(1, 'a'), (2, 'b'), (3, 'c')]

    ```
    """
    validate_iterable(first, "first", "zip")
    return Iter(first).zip(second)


def zip_with[T, U, R](
    first: Iterable[T], second: Iterable[U], func: Callable[[T, U], R]
) -> Iter[R]:
    """Combine two iterables pairwise with **func**.

    See `Iter.zip_with()`.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.zip_with([1, 2, 3], [10, 20, 30], lambda a, b: a + b).to_list()
    [11, 22, 33]

    ```
    """
    validate_iterable(first, "first", "zip_with")
    return Iter(first).zip_with(second, func)


def chain[T](*sources: Iterable[T]) -> Iter[T]:
    """Yield every element of each source, one source after the other.

    See `Iter.concat()`.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.chain([1, 2], [3], []).to_list()
    [1, 2, 3]

    ```
    """
    head, *rest = sources or ((),)
    validate_iterable(head, "sources[0]", "chain")
    return Iter(head).concat(*rest)


def interleave[T](*sources: Iterable[T]) -> Iter[T]:
    """Take one element of each source in turn, dropping exhausted sources.

    See `Iter.interleave()`.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.interleave([1, 2, 3], [4, 5], [6]).to_list()
    [1, 4, 6, 2, 5, 3]

    ```
    """
    head, *rest = sources or ((),)
    validate_iterable(head, "sources[0]", "interleave")
    return Iter(head).interleave(*rest)


def merge[T](*sources: Iterable[T], comparator: Comparator[T] | None = None) -> Iter[T]:
    """Merge individually sorted sources into one sorted `Iter`.

    See `Iter.merge()`.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.merge([1, 4, 7], [2, 5, 8], [3, 6, 9]).to_list()
    [1, 2, 3, 4, 5, 6, 7, 8, 9]

    ```
    """
    head, *rest = sources or ((),)
    validate_iterable(head, "sources[0]", "merge")
    return Iter(head).merge(*rest, comparator=comparator)
