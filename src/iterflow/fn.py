"""Curried, data-last versions of every `Iter` operation.

Each function takes its configuration first and the data last, and is wrapped with `cytoolz.curry`,
so it can be partially applied and composed:

```python
>>> from iterflow import fn
>>> moving_avg = fn.compose_left(fn.window(2), fn.map(fn.mean), fn.map(lambda m: m.unwrap()), fn.to_list)
>>> moving_avg([1, 3, 5, 7])
[2.0, 4.0, 6.0]
>>> fn.pipe(fn.range(10), fn.filter(lambda x: x % 3 == 0), fn.sum)
18

```

Every function builds an `Iter` over the data and calls the method of the same name,
so both styles share one implementation.
Operations without configuration are applied to the data directly: `fn.distinct(data)`.

Arguments are checked as soon as they are supplied, so a bad configuration fails where the pipeline is written:

```python
>>> fn.window(0)
Traceback (most recent call last):
    ...
iterflow._errors.ValidationError: window: size must be at least 1, got 0

```

The method variants taking `*others` take a single iterable of sources here, e.g. `fn.concat([b, c], a)`.
"""

from __future__ import annotations

import builtins
import functools
import inspect
from collections.abc import Callable, Collection, Hashable, Iterable
from typing import Any

import cytoolz as cz
from cytoolz.functoolz import compose, compose_left, pipe

from ._iter import Iter, Seq
from ._iter._common import _MISSING
from ._option import Option
from ._sources import range, repeat  # noqa: A004
from ._types import Comparator, Enumerated, Partitioned, Quartiles
from ._validation import (
    validate_callable,
    validate_iterable,
    validate_non_negative_int,
    validate_positive_int,
    validate_range,
)

type _Guard = Callable[[Any, str, str], None]


def _percentage(value: float, param: str, operation: str) -> None:
    validate_range(value, 0, 100, param, operation)


def _optional_callable(value: object, param: str, operation: str) -> None:
    if value is not None:
        validate_callable(value, param, operation)


def _each_iterable(value: object, param: str, operation: str) -> None:
    validate_iterable(value, param, operation)
    # only collections are walked, so a one-shot iterator is not consumed here
    if isinstance(value, Collection):
        for idx, source in builtins.enumerate(value):
            validate_iterable(source, f"{param}[{idx}]", operation)


def _configured[F: Callable[..., Any]](**guards: _Guard) -> Callable[[F], F]:
    """Curry the decorated function like `cytoolz.curry`, running **guards** on the arguments supplied at each call.

    Each guard receives the argument, its parameter name and the function name,
    so the error matches the one raised by the `Iter` method of the same name.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        curried = cz.curry(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            supplied = signature.bind_partial(*args, **kwargs).arguments
            for param, guard in guards.items():
                if param in supplied:
                    guard(supplied[param], param, func.__name__)
            return curried(*args, **kwargs)

        return wrapper  # pyright: ignore[reportReturnType]

    return decorator


__all__ = [
    "all",
    "any",
    "chunk",
    "collect",
    "compose",
    "compose_left",
    "concat",
    "contains",
    "correlation",
    "count",
    "covariance",
    "distinct",
    "distinct_by",
    "drop",
    "drop_while",
    "enumerate",
    "filter",
    "find",
    "first",
    "flat_map",
    "for_each",
    "group_by",
    "interleave",
    "intersperse",
    "is_empty",
    "last",
    "map",
    "max",
    "mean",
    "median",
    "merge",
    "min",
    "mode",
    "nth",
    "pairwise",
    "partition",
    "percentile",
    "pipe",
    "product",
    "quartiles",
    "range",
    "reduce",
    "repeat",
    "reverse",
    "scan",
    "sort",
    "sort_by",
    "span",
    "std_dev",
    "sum",
    "take",
    "take_while",
    "tap",
    "to_list",
    "variance",
    "window",
    "zip",
    "zip_with",
]

# lazy -----------------------------------------------------------------


@_configured(func=validate_callable)
def map[T, R](func: Callable[[T], R], data: Iterable[T]) -> Iter[R]:  # noqa: A001
    """See `Iter.map()`.

    Example:
    ```python
    >>> from iterflow import fn
    >>> fn.map(str)([1, 2]).to_list()
    ['1', '2']

    ```
    """
    return Iter(data).map(func)


@_configured(predicate=validate_callable)
def filter[T](predicate: Callable[[T], bool], data: Iterable[T]) -> Iter[T]:  # noqa: A001
    """See `Iter.filter()`."""
    return Iter(data).filter(predicate)


@_configured(func=validate_callable)
def flat_map[T, R](func: Callable[[T], Iterable[R]], data: Iterable[T]) -> Iter[R]:
    """See `Iter.flat_map()`."""
    return Iter(data).flat_map(func)


@_configured(n=validate_non_negative_int)
def take[T](n: int, data: Iterable[T]) -> Iter[T]:
    """See `Iter.take()`.

    Example:
    ```python
    >>> import itertools
    >>> from iterflow import fn
    >>> fn.take(3, itertools.count()).to_list()
    [0, 1, 2]

    ```
    """
    return Iter(data).take(n)


@_configured(n=validate_non_negative_int)
def drop[T](n: int, data: Iterable[T]) -> Iter[T]:
    """See `Iter.drop()`."""
    return Iter(data).drop(n)


@_configured(predicate=validate_callable)
def take_while[T](predicate: Callable[[T], bool], data: Iterable[T]) -> Iter[T]:
    """See `Iter.take_while()`."""
    return Iter(data).take_while(predicate)


@_configured(predicate=validate_callable)
def drop_while[T](predicate: Callable[[T], bool], data: Iterable[T]) -> Iter[T]:
    """See `Iter.drop_while()`."""
    return Iter(data).drop_while(predicate)


@_configured(func=validate_callable)
def scan[T, U](func: Callable[[U, T], U], initial: U, data: Iterable[T]) -> Iter[U]:
    """See `Iter.scan()`."""
    return Iter(data).scan(func, initial)


@cz.curry
def enumerate[T](data: Iterable[T]) -> Iter[Enumerated[T]]:  # noqa: A001
    """See `Iter.enumerate()`."""
    return Iter(data).enumerate()


@_configured(func=validate_callable)
def tap[T](func: Callable[[T], Any], data: Iterable[T]) -> Iter[T]:
    """See `Iter.tap()`."""
    return Iter(data).tap(func)


@cz.curry
def intersperse[T](separator: T, data: Iterable[T]) -> Iter[T]:
    """See `Iter.intersperse()`."""
    return Iter(data).intersperse(separator)


@cz.curry
def distinct[T](data: Iterable[T]) -> Iter[T]:
    """See `Iter.distinct()`."""
    return Iter(data).distinct()


@_configured(key=validate_callable)
def distinct_by[T](key: Callable[[T], Hashable], data: Iterable[T]) -> Iter[T]:
    """See `Iter.distinct_by()`."""
    return Iter(data).distinct_by(key)


@_configured(size=validate_positive_int)
def window[T](size: int, data: Iterable[T]) -> Iter[list[T]]:
    """See `Iter.window()`.

    Example:
    ```python
    >>> from iterflow import fn
    >>> fn.window(3)([1, 2, 3, 4, 5]).to_list()
    [[1, 2, 3], [2, 3, 4], [3, 4, 5]]

    ```
    """
    return Iter(data).window(size)


@_configured(size=validate_positive_int)
def chunk[T](size: int, data: Iterable[T]) -> Iter[list[T]]:
    """See `Iter.chunk()`."""
    return Iter(data).chunk(size)


@cz.curry
def pairwise[T](data: Iterable[T]) -> Iter[tuple[T, T]]:
    """See `Iter.pairwise()`."""
    return Iter(data).pairwise()


@_configured(others=_each_iterable)
def concat[T](others: Iterable[Iterable[T]], data: Iterable[T]) -> Iter[T]:
    """See `Iter.concat()`."""
    return Iter(data).concat(*others)


@_configured(other=validate_iterable)
def zip[T, U](other: Iterable[U], data: Iterable[T]) -> Iter[tuple[T, U]]:  # noqa: A001
    """See `Iter.zip()`. Elements of **data** come first in each pair.

    Example:
    ```python
    >>> from iterflow import fn
    >>> fn.zip("ab")([1, 2, 3]).to_list()
    [(1, 'a'), (2, 'b')]

    ```
    """
    return Iter(data).zip(other)


@_configured(other=validate_iterable, func=validate_callable)
def zip_with[T, U, R](
    other: Iterable[U], func: Callable[[T, U], R], data: Iterable[T]
) -> Iter[R]:
    """See `Iter.zip_with()`."""
    return Iter(data).zip_with(other, func)


@_configured(others=_each_iterable)
def interleave[T](others: Iterable[Iterable[T]], data: Iterable[T]) -> Iter[T]:
    """See `Iter.interleave()`."""
    return Iter(data).interleave(*others)


@_configured(others=_each_iterable, comparator=_optional_callable)
def merge[T](
    others: Iterable[Iterable[T]],
    data: Iterable[T],
    *,
    comparator: Comparator[T] | None = None,
) -> Iter[T]:
    """See `Iter.merge()`.

    Example:
    ```python
    >>> from iterflow import fn
    >>> fn.merge([[2, 4, 6]])([1, 3, 5]).to_list()
    [1, 2, 3, 4, 5, 6]

    ```
    """
    return Iter(data).merge(*others, comparator=comparator)


# materializing ----------------------------------------------------------


@cz.curry
def sort[T](data: Iterable[T]) -> Seq[T]:
    """See `Iter.sort()`."""
    return Iter(data).sort()


@_configured(comparator=validate_callable)
def sort_by[T](comparator: Comparator[T], data: Iterable[T]) -> Seq[T]:
    """See `Iter.sort_by()`."""
    return Iter(data).sort_by(comparator)


@cz.curry
def reverse[T](data: Iterable[T]) -> Seq[T]:
    """See `Iter.reverse()`."""
    return Iter(data).reverse()


# terminal ---------------------------------------------------------------


@cz.curry
def to_list[T](data: Iterable[T]) -> list[T]:
    """See `Iter.to_list()`."""
    return Iter(data).to_list()


@cz.curry
def collect[T](data: Iterable[T]) -> Seq[T]:
    """See `Iter.collect()`."""
    return Iter(data).collect()


@cz.curry
def count(data: Iterable[Any]) -> int:
    """See `Iter.count()`."""
    return Iter(data).count()


@_configured(func=validate_callable)
def reduce[T](func: Callable[[T, T], T], data: Iterable[T], *, initial: T = _MISSING) -> T:
    """See `Iter.reduce()`. The seed is passed by keyword: `fn.reduce(add, initial=0)`."""
    return Iter(data).reduce(func, initial)


@_configured(predicate=validate_callable)
def find[T](predicate: Callable[[T], bool], data: Iterable[T]) -> Option[T]:
    """See `Iter.find()`."""
    return Iter(data).find(predicate)


@cz.curry
def first[T](data: Iterable[T]) -> Option[T]:
    """See `Iter.first()`."""
    return Iter(data).first()


@cz.curry
def last[T](data: Iterable[T]) -> Option[T]:
    """See `Iter.last()`."""
    return Iter(data).last()


@_configured(index=validate_non_negative_int)
def nth[T](index: int, data: Iterable[T]) -> Option[T]:
    """See `Iter.nth()`."""
    return Iter(data).nth(index)


@_configured(predicate=validate_callable)
def all[T](predicate: Callable[[T], bool], data: Iterable[T]) -> bool:  # noqa: A001
    """See `Iter.all()`."""
    return Iter(data).all(predicate)


@_configured(predicate=validate_callable)
def any[T](predicate: Callable[[T], bool], data: Iterable[T]) -> bool:  # noqa: A001
    """See `Iter.any()`."""
    return Iter(data).any(predicate)


@cz.curry
def contains(value: object, data: Iterable[Any]) -> bool:
    """See `Iter.contains()`."""
    return Iter(data).contains(value)


@cz.curry
def is_empty(data: Iterable[Any]) -> bool:
    """See `Iter.is_empty()`."""
    return Iter(data).is_empty()


@_configured(func=validate_callable)
def for_each[T](func: Callable[[T], Any], data: Iterable[T]) -> None:
    """See `Iter.for_each()`."""
    return Iter(data).for_each(func)


@_configured(predicate=validate_callable)
def partition[T](predicate: Callable[[T], bool], data: Iterable[T]) -> Partitioned[T]:
    """See `Iter.partition()`."""
    return Iter(data).partition(predicate)


@_configured(key=validate_callable)
def group_by[T, K](key: Callable[[T], K], data: Iterable[T]) -> dict[K, list[T]]:
    """See `Iter.group_by()`."""
    return Iter(data).group_by(key)


# statistics -------------------------------------------------------------


@cz.curry
def sum(data: Iterable[float]) -> float:  # noqa: A001
    """See `Iter.sum()`."""
    return Iter(data).sum()


@cz.curry
def product(data: Iterable[float]) -> float:
    """See `Iter.product()`."""
    return Iter(data).product()


@cz.curry
def mean(data: Iterable[float]) -> Option[float]:
    """See `Iter.mean()`."""
    return Iter(data).mean()


@cz.curry
def min(data: Iterable[float]) -> Option[float]:  # noqa: A001
    """See `Iter.min()`."""
    return Iter(data).min()


@cz.curry
def max(data: Iterable[float]) -> Option[float]:  # noqa: A001
    """See `Iter.max()`."""
    return Iter(data).max()


@cz.curry
def span(data: Iterable[float]) -> Option[float]:
    """See `Iter.span()`."""
    return Iter(data).span()


@cz.curry
def median(data: Iterable[float]) -> Option[float]:
    """See `Iter.median()`."""
    return Iter(data).median()


@cz.curry
def variance(data: Iterable[float]) -> Option[float]:
    """See `Iter.variance()`."""
    return Iter(data).variance()


@cz.curry
def std_dev(data: Iterable[float]) -> Option[float]:
    """See `Iter.std_dev()`."""
    return Iter(data).std_dev()


@_configured(p=_percentage)
def percentile(p: float, data: Iterable[float]) -> Option[float]:
    """See `Iter.percentile()`.

    Example:
    ```python
    >>> from iterflow import fn
    >>> fn.percentile(75)([1, 2, 3, 4, 5])
    Some(4)

    ```
    """
    return Iter(data).percentile(p)


@cz.curry
def quartiles(data: Iterable[float]) -> Option[Quartiles]:
    """See `Iter.quartiles()`."""
    return Iter(data).quartiles()


@cz.curry
def mode(data: Iterable[float]) -> Option[list[float]]:
    """See `Iter.mode()`."""
    return Iter(data).mode()


@_configured(other=validate_iterable)
def covariance(other: Iterable[float], data: Iterable[float]) -> Option[float]:
    """See `Iter.covariance()`."""
    return Iter(data).covariance(other)


@_configured(other=validate_iterable)
def correlation(other: Iterable[float], data: Iterable[float]) -> Option[float]:
    """See `Iter.correlation()`."""
    return Iter(data).correlation(other)
