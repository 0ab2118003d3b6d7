from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ._errors import ValidationError
from ._validation import validate_bool, validate_positive_int


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings.

    Args:
        repr_max_items (int): Number of elements shown by `Seq.__repr__` before an ellipsis.
        log_materialization (bool): Log, at DEBUG level, how many elements each materializing operation buffered.
    """

    repr_max_items: int = 20
    log_materialization: bool = False

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Render the elements of **data**, truncated to `repr_max_items`.

        Example:
        ```python
        >>> from iterflow import Config
        >>> Config(repr_max_items=3).iter_repr(range(10))
        '0, 1, 2, ...'

        ```
        """
        shown: list[str] = []
        for idx, item in enumerate(data):
            if idx == self.repr_max_items:
                shown.append("...")
                break
            shown.append(repr(item))
        return ", ".join(shown)


_CONFIG = Config()


def get_config() -> Config:
    """Return the current `Config`."""
    return _CONFIG


def set_config(**changes: Any) -> Config:  # noqa: ANN401
    """Replace fields of the current `Config` and return the new one.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        Config: The new current configuration.

    Example:
    ```python
    >>> import iterflow as itf
    >>> previous = itf.get_config()
    >>> itf.set_config(repr_max_items=2).repr_max_items
    2
    >>> itf.Iter(range(5)).collect()
    Seq(0, 1, ...)
    >>> itf.set_config(repr_max_items=previous.repr_max_items).repr_max_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    fields = {f.name for f in dataclasses.fields(Config)}
    for name in changes:
        if name not in fields:
            msg = f"unknown configuration field {name!r}"
            raise ValidationError(msg, "set_config", {"param": name})
    if "repr_max_items" in changes:
        validate_positive_int(changes["repr_max_items"], "repr_max_items", "set_config")
    if "log_materialization" in changes:
        validate_bool(changes["log_materialization"], "log_materialization", "set_config")
    _CONFIG = dataclasses.replace(_CONFIG, **changes)
    return _CONFIG
