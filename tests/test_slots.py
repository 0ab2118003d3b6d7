"""Tests for slot usage in iterflow classes."""

import iterflow as itf


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(itf.Iter(()))
    assert _check_slots(itf.Iter(()).map(str).window(2))
    assert _check_slots(itf.Seq(()))
    assert _check_slots(itf.Some(42))
    assert _check_slots(itf.NONE)
    assert _check_slots(itf.get_config())
