"""Tests for sources and multi-source combinators."""

import functools
import random

import pytest

import iterflow as itf


def test_range_forms() -> None:
    assert itf.range(4).to_list() == [0, 1, 2, 3]
    assert itf.range(2, 6, 2).to_list() == [2, 4]
    assert itf.range(3, 0, -1).to_list() == [3, 2, 1]
    assert itf.range(0).to_list() == []
    assert itf.range(3, 3).to_list() == []
    assert itf.range(5, 0).to_list() == []


def test_range_with_float_step_does_not_drift() -> None:
    values = itf.range(0, 1, 0.1).to_list()
    assert len(values) == 10
    assert values[3] == pytest.approx(0.3)
    assert values[-1] < 1


def test_range_rejects_bad_arguments() -> None:
    with pytest.raises(itf.ValidationError) as excinfo:
        itf.range(0, 10, 0)
    assert excinfo.value.param == "step"
    with pytest.raises(itf.ValidationError) as excinfo:
        itf.range(float("inf"))
    assert excinfo.value.param == "stop"
    with pytest.raises(itf.ValidationError):
        itf.range(0, float("nan"))


def test_repeat() -> None:
    assert itf.repeat("a", 3).to_list() == ["a", "a", "a"]
    assert itf.repeat("a", 0).to_list() == []
    assert itf.repeat(7).take(4).to_list() == [7, 7, 7, 7]
    with pytest.raises(itf.ValidationError):
        itf.repeat("a", -1)


def test_zip_stops_at_shorter_source() -> None:
    assert itf.zip([1, 2, 3], "ab").to_list() == [(1, "a"), (2, "b")]
    assert itf.zip([], [1, 2]).to_list() == []
    assert itf.Iter.from_count().zip("xyz").to_list() == [(0, "x"), (1, "y"), (2, "z")]


def test_zip_with() -> None:
    assert itf.zip_with([1, 2, 3], [4, 5], lambda a, b: a * b).to_list() == [4, 10]
    assert itf.Iter("ab").zip_with([1, 2], lambda s, n: s * n).to_list() == ["a", "bb"]


def test_chain() -> None:
    assert itf.chain([1, 2], [], [3], (4, 5)).to_list() == [1, 2, 3, 4, 5]
    assert itf.chain().to_list() == []
    assert itf.chain("ab").to_list() == ["a", "b"]


def test_interleave_drops_exhausted_sources() -> None:
    result = itf.interleave([1, 2, 3, 4], "ab", [None]).to_list()
    assert result == [1, "a", None, 2, "b", 3, 4]
    assert itf.interleave().to_list() == []
    assert itf.interleave([], [1, 2]).to_list() == [1, 2]


def test_merge_two_sorted_sources() -> None:
    assert itf.merge([1, 3, 5], [2, 4, 6]).to_list() == [1, 2, 3, 4, 5, 6]


def test_merge_with_empty_and_uneven_sources() -> None:
    assert itf.merge([], [1, 2], [], [0, 5, 9]).to_list() == [0, 1, 2, 5, 9]
    assert itf.merge().to_list() == []
    assert itf.merge([], []).to_list() == []


def test_merge_matches_sorting_the_concatenation() -> None:
    rng = random.Random(42)
    for _ in range(25):
        sources = [
            sorted(rng.randint(-50, 50) for _ in range(rng.randint(0, 12)))
            for _ in range(rng.randint(1, 5))
        ]
        expected = sorted(x for src in sources for x in src)
        assert itf.merge(*sources).to_list() == expected


def test_merge_with_comparator() -> None:
    def descending(a: int, b: int) -> int:
        return b - a

    result = itf.merge([9, 4, 1], [8, 2], comparator=descending).to_list()
    assert result == [9, 8, 4, 2, 1]


def test_merge_with_comparator_on_records() -> None:
    def by_age(a: tuple[str, int], b: tuple[str, int]) -> int:
        return a[1] - b[1]

    left = [("ann", 20), ("cid", 40)]
    right = [("bob", 30), ("dan", 50)]
    result = itf.Iter(left).merge(right, comparator=by_age).map(lambda p: p[0]).to_list()
    assert result == ["ann", "bob", "cid", "dan"]


def test_merge_of_strings() -> None:
    assert itf.merge(["a", "c"], ["b", "d"]).to_list() == ["a", "b", "c", "d"]


def test_merge_does_not_check_sortedness() -> None:
    """Unsorted input gives an unspecified order, but every element is still yielded once."""
    result = itf.merge([3, 1], [2]).to_list()
    assert sorted(result) == [1, 2, 3]


def test_merge_consistent_with_sort_by() -> None:
    def cmp(a: int, b: int) -> int:
        return (a % 10) - (b % 10)

    a = itf.Iter([21, 5, 13, 7]).sort_by(cmp)
    b = itf.Iter([32, 14, 9]).sort_by(cmp)
    merged = itf.merge(a, b, comparator=cmp).to_list()
    keys = [x % 10 for x in merged]
    assert keys == sorted(keys)
    assert sorted(merged) == sorted([21, 5, 13, 7, 32, 14, 9])
    assert merged == sorted(merged, key=functools.cmp_to_key(cmp))
