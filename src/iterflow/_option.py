from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """The "no value" sentinel returned by reducers that are undefined on empty input.

    An `Option` is either `Some(value)` or `NONE`.

    Example:
    ```python
    >>> import iterflow as itf
    >>> itf.Iter([1, 2, 3]).mean()
    Some(2.0)
    >>> itf.Iter([]).mean()
    NONE

    ```
    """

    __slots__ = ()

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Wrap a possibly `None` value.

        Args:
            value (U | None): The value to wrap.

        Returns:
            Option[U]: `NONE` if **value** is `None`, `Some(value)` otherwise.
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> bool: ...

    @abstractmethod
    def is_none(self) -> bool: ...

    @abstractmethod
    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([4, 8]).max().unwrap()
        8
        >>> itf.Iter([]).max().unwrap()
        Traceback (most recent call last):
            ...
        iterflow._option.OptionUnwrapError: called `unwrap` on a `NONE`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Return the contained value, or raise with **msg** if there is none.

        Args:
            msg (str): Message of the raised error.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `NONE`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Return the contained value or **default**.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([]).median().unwrap_or(0.0)
        0.0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        return self.unwrap() if self.is_some() else func()

    def map[U](self, func: Callable[[T], U]) -> Option[U]:
        """Apply **func** to the contained value, leaving `NONE` untouched.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([1.0, 4.0]).max().map(lambda x: x * 2)
        Some(8.0)

        ```
        """
        if self.is_some():
            return Some(func(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class _None(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Never:
        msg = "called `unwrap` on a `NONE`"
        raise OptionUnwrapError(msg)


NONE: Option[Any] = _None()
