from __future__ import annotations

from typing import Any


class IterFlowError(Exception):
    """Base class for every error raised by iterflow itself.

    Errors raised by user supplied callbacks are never wrapped into this type.

    Args:
        message (str): Human readable description of the failure.
        operation (str | None): Name of the operation that rejected its input.
        context (dict[str, Any] | None): Extra metadata about the failure.
    """

    operation: str | None
    context: dict[str, Any]

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.operation = operation
        self.context = context if context is not None else {}
        super().__init__(message if operation is None else f"{operation}: {message}")


class ValidationError(IterFlowError, ValueError):
    """Raised when an operation receives a malformed argument.

    Always raised when the offending stage or terminal call is made, never lazily during iteration.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.Iter([1, 2, 3]).window(0)
    Traceback (most recent call last):
        ...
    iterflow._errors.ValidationError: window: size must be at least 1, got 0

    ```
    """

    @property
    def param(self) -> str | None:
        """Name of the offending parameter, if any."""
        return self.context.get("param")

    @property
    def value(self) -> Any:  # noqa: ANN401
        """The rejected value, if any."""
        return self.context.get("value")


class ElementTypeError(IterFlowError, TypeError):
    """Raised when an element has a type the operation is not defined for.

    Numeric reducers (`sum`, `mean`, `variance`, ...) only accept real numbers, and `sort` only accepts numbers or strings.
    Values are never coerced.

    A real number is an instance of `numbers.Real` other than `bool`, so `fractions.Fraction` is accepted
    while `decimal.Decimal` is not. Convert decimals with `float` before reducing them.

    Example:
    ```python
    >>> import iterflow as itf
    >>> from decimal import Decimal
    >>> itf.Iter([Decimal("1.5")]).sum()
    Traceback (most recent call last):
        ...
    iterflow._errors.ElementTypeError: sum: expected a real number, got Decimal Decimal('1.5')
    >>> itf.Iter([Decimal("1.5")]).map(float).sum()
    1.5

    ```
    """

    @property
    def element(self) -> Any:  # noqa: ANN401
        """The rejected element."""
        return self.context.get("element")
