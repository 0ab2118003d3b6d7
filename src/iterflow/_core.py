from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Lets any wrapper be handed to a plain function without breaking a method chain."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Call `func(self, *args, **kwargs)` and return whatever it returns.

        `it.into(f)` reads left to right where `f(it)` would not.
        Since every function of `iterflow.fn` takes the data last, a partially applied one can be passed directly.

        Args:
            func (Callable[Concatenate[Self, P], R]): Receives the wrapper as first argument.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            R: The result of **func**.

        Example:
        ```python
        >>> import iterflow as itf
        >>> from iterflow import fn
        >>> itf.Iter([1, 2, 3, 4]).into(fn.window(2)).to_list()
        [[1, 2], [2, 3], [3, 4]]
        >>> itf.Iter("abc").into(list)
        ['a', 'b', 'c']

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call **func** on the wrapper for a side effect, then return the wrapper itself.

        The return value of **func** is ignored.
        On an `Iter`, **func** must not consume it, or the rest of the chain sees fewer elements.

        Example:
        ```python
        >>> import iterflow as itf
        >>> itf.Iter([3, 1, 2]).sort().inspect(print).last()
        Seq(1, 2, 3)
        Some(3)

        ```
        """
        func(self, *args, **kwargs)
        return self


class CommonBase[T](ABC, Pipeable):
    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Return the wrapped object: the live iterator of an `Iter`, the tuple of a `Seq`."""
        return self._inner
