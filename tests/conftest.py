"""Shared fixtures for the iterflow test suite."""

from collections.abc import Iterator

import pytest

import iterflow as itf


class CountingSource:
    """Infinite source of consecutive integers that records how many were pulled."""

    def __init__(self, start: int = 0, step: int = 1) -> None:
        self.pulled = 0
        self._next = start
        self._step = step

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        value = self._next
        self._next += self._step
        self.pulled += 1
        return value


@pytest.fixture
def source() -> CountingSource:
    return CountingSource()


@pytest.fixture(autouse=True)
def _restore_config() -> Iterator[None]:
    previous = itf.get_config()
    yield
    itf.set_config(
        repr_max_items=previous.repr_max_items,
        log_materialization=previous.log_materialization,
    )
