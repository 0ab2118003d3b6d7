"""Numeric reducers.

Every method here drains the sequence and is only defined over real numbers.

`self` is narrowed to numeric element types for static checkers, and each element is checked at runtime,
so that a stray string raises an `ElementTypeError` instead of being coerced.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Literal

import cytoolz as cz
import more_itertools as mit

from .._option import NONE, Option, Some
from .._types import Quartiles
from .._validation import numeric, validate_iterable, validate_range
from ._common import BaseIterable, log_buffered


def _interpolate[U: int | float](values: Sequence[U], p: float) -> U | float:
    """Linear interpolation between the two nearest ranks of sorted **values** at fractional index `(p / 100) * (n - 1)`."""
    index = (p / 100) * (len(values) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return values[lower]
    weight = index - lower
    return values[lower] * (1 - weight) + values[upper] * weight


def _mean(values: Sequence[float]) -> float:
    return math.fsum(values) / len(values)


def _pvariance(values: Sequence[float]) -> float:
    avg = _mean(values)
    return math.fsum((x - avg) ** 2 for x in values) / len(values)


def _pcovariance(xs: Sequence[float], ys: Sequence[float]) -> float:
    x_avg = _mean(xs)
    y_avg = _mean(ys)
    return math.fsum((x - x_avg) * (y - y_avg) for x, y in zip(xs, ys)) / len(xs)


class BaseStats[T](BaseIterable[T]):
    __slots__ = ()

    def _numbers[U: int | float](self: BaseStats[U], operation: str) -> list[U]:
        return list(numeric(self._inner, operation))

    def _sorted_numbers[U: int | float](
        self: BaseStats[U], operation: str
    ) -> list[U]:
        values = sorted(self._numbers(operation))
        log_buffered(operation, len(values))
        return values

    def sum[U: int | float](self: BaseStats[U]) -> U | Literal[0]:
        """Return the sum of the elements, `0` if there is none.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).sum()
        6
        >>> itf.Iter([]).sum()
        0
        >>> itf.Iter(["a"]).sum()
        Traceback (most recent call last):
            ...
        iterflow._errors.ElementTypeError: sum: expected a real number, got str 'a'

        ```
        """
        return sum(numeric(self._inner, "sum"))

    def product[U: int | float](self: BaseStats[U]) -> U | Literal[1]:
        """Return the product of the elements, `1` if there is none.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([2, 3, 4]).product()
        24

        ```
        """
        return math.prod(numeric(self._inner, "product"))

    def mean[U: int | float](self: BaseStats[U]) -> Option[float]:
        """Return the arithmetic mean of the elements.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3, 4, 5]).mean()
        Some(3.0)
        >>> itf.Iter([]).mean()
        NONE

        ```
        """
        values = self._numbers("mean")
        return Some(_mean(values)) if values else NONE

    def min[U: int | float](self: BaseStats[U]) -> Option[U]:
        """Return the smallest element, found by a single linear scan.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([3, 1, 4, 1, 5]).min()
        Some(1)

        ```
        """
        return Option.from_(min(numeric(self._inner, "min"), default=None))

    def max[U: int | float](self: BaseStats[U]) -> Option[U]:
        """Return the largest element, found by a single linear scan."""
        return Option.from_(max(numeric(self._inner, "max"), default=None))

    def span[U: int | float](self: BaseStats[U]) -> Option[U]:
        """Return the difference between the largest and the smallest element.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([4, 9, 2]).span()
        Some(7)

        ```
        """
        bounds = mit.minmax(numeric(self._inner, "span"), default=None)
        if bounds is None:
            return NONE
        low, high = bounds
        return Some(high - low)

    def median[U: int | float](self: BaseStats[U]) -> Option[U | float]:
        """Return the middle element once sorted, or the mean of the two middle elements for an even count.

        Note:
            The whole sequence is buffered and sorted.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([3, 1, 2]).median()
        Some(2)
        >>> itf.Iter([4, 1, 3, 2]).median()
        Some(2.5)

        ```
        """
        values = self._sorted_numbers("median")
        if not values:
            return NONE
        mid = len(values) // 2
        if len(values) % 2 == 0:
            return Some((values[mid - 1] + values[mid]) / 2)
        return Some(values[mid])

    def variance[U: int | float](self: BaseStats[U]) -> Option[float]:
        """Return the population variance: the mean of squared deviations from the mean, divided by n.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([2, 4, 4, 4, 5, 5, 7, 9]).variance()
        Some(4.0)

        ```
        """
        values = self._numbers("variance")
        return Some(_pvariance(values)) if values else NONE

    def std_dev[U: int | float](self: BaseStats[U]) -> Option[float]:
        """Return the population standard deviation, the square root of `variance()`.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([2, 4, 4, 4, 5, 5, 7, 9]).std_dev()
        Some(2.0)

        ```
        """
        values = self._numbers("std_dev")
        return Some(math.sqrt(_pvariance(values))) if values else NONE

    def percentile[U: int | float](self: BaseStats[U], p: float) -> Option[U | float]:
        """Return the **p**-th percentile, interpolating linearly between the two nearest ranks.

        The rank is the fractional index `(p / 100) * (n - 1)` into the sorted elements.

        Args:
            p (float): Percentile to compute, between 0 and 100 inclusive.

        Returns:
            Option[U | float]: The percentile, or `NONE` if there is no element.

        Raises:
            ValidationError: If **p** is outside `[0, 100]`. This is checked before anything is pulled.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3, 4, 5]).percentile(75)
        Some(4)
        >>> itf.Iter([1, 2, 3, 4]).percentile(50)
        Some(2.5)
        >>> itf.Iter([1, 2]).percentile(101)
        Traceback (most recent call last):
            ...
        iterflow._errors.ValidationError: percentile: p must be between 0 and 100, got 101

        ```
        """
        validate_range(p, 0, 100, "p", "percentile")
        values = self._sorted_numbers("percentile")
        return Some(_interpolate(values, p)) if values else NONE

    def quartiles[U: int | float](self: BaseStats[U]) -> Option[Quartiles]:
        """Return the 25th, 50th and 75th percentiles, computed like `percentile()`.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3, 4, 5]).quartiles()
        Some(Quartiles(q1=2, q2=3, q3=4))

        ```
        """
        values = self._sorted_numbers("quartiles")
        if not values:
            return NONE
        return Some(
            Quartiles(
                _interpolate(values, 25),
                _interpolate(values, 50),
                _interpolate(values, 75),
            )
        )

    def mode[U: int | float](self: BaseStats[U]) -> Option[list[U]]:
        """Return the most frequent element(s).

        Several elements are returned when they share the highest frequency, in order of first occurrence.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 2, 3]).mode()
        Some([2])
        >>> itf.Iter([3, 1, 3, 1, 2]).mode()
        Some([3, 1])

        ```
        """
        frequencies = cz.itertoolz.frequencies(numeric(self._inner, "mode"))
        if not frequencies:
            return NONE
        highest = max(frequencies.values())
        return Some([value for value, count in frequencies.items() if count == highest])

    def covariance[U: int | float](
        self: BaseStats[U], other: Iterable[int | float]
    ) -> Option[float]:
        """Return the population covariance between the elements and **other**, paired by position.

        Both sequences are drained.

        Args:
            other (Iterable[int | float]): The second numeric sequence.

        Returns:
            Option[float]: The covariance, or `NONE` if either sequence is empty or their lengths differ.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3]).covariance([1, 2, 3])
        Some(0.6666666666666666)
        >>> itf.Iter([1, 2, 3]).covariance([1, 2])
        NONE

        ```
        """
        validate_iterable(other, "other", "covariance")
        xs = self._numbers("covariance")
        ys = list(numeric(other, "covariance"))
        if not xs or len(xs) != len(ys):
            return NONE
        return Some(_pcovariance(xs, ys))

    def correlation[U: int | float](
        self: BaseStats[U], other: Iterable[int | float]
    ) -> Option[float]:
        """Return the Pearson correlation coefficient between the elements and **other**.

        Computed as `covariance / (std_dev(x) * std_dev(y))`.

        Args:
            other (Iterable[int | float]): The second numeric sequence.

        Returns:
            Option[float]: The coefficient, or `NONE` if either sequence is empty, their lengths differ, or either is constant.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1, 2, 3, 4, 5]).correlation([2, 4, 6, 8, 10])
        Some(1.0)
        >>> itf.Iter([1, 2, 3]).correlation([5, 5, 5])
        NONE

        ```
        """
        validate_iterable(other, "other", "correlation")
        xs = self._numbers("correlation")
        ys = list(numeric(other, "correlation"))
        if not xs or len(xs) != len(ys):
            return NONE
        x_var = _pvariance(xs)
        y_var = _pvariance(ys)
        if x_var == 0 or y_var == 0:
            return NONE
        return Some(_pcovariance(xs, ys) / math.sqrt(x_var * y_var))
