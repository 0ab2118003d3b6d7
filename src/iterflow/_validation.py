"""Argument guards shared by every operation.

Each guard names the parameter and the operation it protects, so that errors read like
`window: size must be at least 1, got 0`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Sized
from numbers import Real
from typing import Any, NoReturn

from ._errors import ElementTypeError, ValidationError

logger = logging.getLogger(__name__)


def _fail(message: str, operation: str | None, **context: Any) -> NoReturn:  # noqa: ANN401
    logger.debug("rejected argument for %s: %s", operation, context)
    raise ValidationError(message, operation, context)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: object) -> bool:
    """Check if **value** is a real number, `bool` excluded."""
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_positive_int(value: int, param: str, operation: str | None = None) -> None:
    if not _is_int(value):
        _fail(f"{param} must be an integer, got {value!r}", operation, param=param, value=value)
    if value < 1:
        _fail(f"{param} must be at least 1, got {value}", operation, param=param, value=value)


def validate_bool(value: bool, param: str, operation: str | None = None) -> None:  # noqa: FBT001
    if not isinstance(value, bool):
        _fail(f"{param} must be a boolean, got {value!r}", operation, param=param, value=value)


def validate_non_negative_int(
    value: int, param: str, operation: str | None = None
) -> None:
    if not _is_int(value):
        _fail(f"{param} must be an integer, got {value!r}", operation, param=param, value=value)
    if value < 0:
        _fail(f"{param} must be non-negative, got {value}", operation, param=param, value=value)


def validate_finite(value: float, param: str, operation: str | None = None) -> None:
    if not is_number(value) or not math.isfinite(value):
        _fail(
            f"{param} must be a finite number, got {value!r}",
            operation,
            param=param,
            value=value,
        )


def validate_range(
    value: float,
    low: float,
    high: float,
    param: str,
    operation: str | None = None,
) -> None:
    validate_finite(value, param, operation)
    if value < low or value > high:
        _fail(
            f"{param} must be between {low} and {high}, got {value}",
            operation,
            param=param,
            value=value,
            min=low,
            max=high,
        )


def validate_non_zero(value: float, param: str, operation: str | None = None) -> None:
    if value == 0:
        _fail(f"{param} cannot be zero", operation, param=param, value=value)


def validate_callable(value: object, param: str, operation: str | None = None) -> None:
    if not callable(value):
        _fail(
            f"{param} must be callable, got {type(value).__name__}",
            operation,
            param=param,
            value=value,
        )


def validate_iterable(value: object, param: str, operation: str | None = None) -> None:
    """Check that **value** supports `iter()`.

    Strings are iterables too, and are accepted.
    """
    if isinstance(value, Iterable):
        return
    try:
        iter(value)  # pyright: ignore[reportArgumentType]
    except TypeError:
        _fail(
            f"{param} must be iterable, got {type(value).__name__}",
            operation,
            param=param,
            value=value,
        )


def validate_non_empty(data: Sized, operation: str | None = None) -> None:
    if len(data) == 0:
        _fail("sequence cannot be empty", operation)


def ensure_numeric[U](value: U, operation: str) -> U:
    """Return **value** unchanged if it is a real number, raise `ElementTypeError` otherwise."""
    if not is_number(value):
        msg = f"expected a real number, got {type(value).__name__} {value!r}"
        raise ElementTypeError(msg, operation, {"element": value})
    return value


def numeric[U](data: Iterable[U], operation: str) -> Iterable[U]:
    """Lazily check each element of **data** with `ensure_numeric`."""
    return (ensure_numeric(x, operation) for x in data)


def ensure_sortable(values: list[Any], operation: str) -> None:
    """Check that **values** are all numbers, or all strings."""
    check: Callable[[object], bool] = (
        (lambda x: isinstance(x, str)) if values and isinstance(values[0], str) else is_number
    )
    for value in values:
        if not check(value):
            msg = (
                "elements must be all numbers or all strings, "
                f"got {type(value).__name__} {value!r}"
            )
            raise ElementTypeError(msg, operation, {"element": value})
