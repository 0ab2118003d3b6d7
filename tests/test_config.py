"""Tests for process-wide configuration and materialization logging."""

import dataclasses
import logging

import pytest

import iterflow as itf


def test_defaults() -> None:
    config = itf.get_config()
    assert config.repr_max_items == 20
    assert config.log_materialization is False


def test_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        itf.get_config().repr_max_items = 3  # type: ignore[misc]


def test_set_config_replaces_fields() -> None:
    before = itf.get_config()
    after = itf.set_config(repr_max_items=3)
    assert after.repr_max_items == 3
    assert itf.get_config() is after
    assert before.repr_max_items == 20


def test_repr_is_truncated() -> None:
    itf.set_config(repr_max_items=3)
    assert repr(itf.Iter(range(10)).collect()) == "Seq(0, 1, 2, ...)"
    assert repr(itf.Iter(range(3)).collect()) == "Seq(0, 1, 2)"


def test_set_config_rejects_unknown_fields() -> None:
    with pytest.raises(itf.ValidationError) as excinfo:
        itf.set_config(max_items=3)
    assert excinfo.value.param == "max_items"
    assert excinfo.value.operation == "set_config"


def test_set_config_validates_values() -> None:
    with pytest.raises(itf.ValidationError):
        itf.set_config(repr_max_items=0)
    assert itf.get_config().repr_max_items == 20


@pytest.mark.parametrize("flag", ["no", 0, 1, None])
def test_set_config_requires_a_boolean_flag(flag: object) -> None:
    with pytest.raises(itf.ValidationError) as excinfo:
        itf.set_config(log_materialization=flag)
    assert excinfo.value.param == "log_materialization"
    assert excinfo.value.operation == "set_config"
    assert itf.get_config().log_materialization is False


def _buffered(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [r.getMessage() for r in caplog.records if "buffered" in r.getMessage()]


def test_materialization_is_not_logged_by_default(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="iterflow")
    itf.Iter([3, 1, 2]).sort()
    assert _buffered(caplog) == []


def test_materialization_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="iterflow")
    itf.set_config(log_materialization=True)
    itf.Iter([3, 1, 2]).sort()
    itf.Iter(range(5)).reverse()
    itf.Iter([4, 1]).median()
    assert _buffered(caplog) == [
        "sort buffered 3 elements",
        "reverse buffered 5 elements",
        "median buffered 2 elements",
    ]


def test_library_logger_has_a_null_handler() -> None:
    handlers = logging.getLogger("iterflow").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
