"""Tests for the lazy one-to-one and filtering stages."""

import iterflow as itf


def test_map_preserves_order_and_length() -> None:
    assert itf.Iter([3, 1, 2]).map(lambda x: x * 10).to_list() == [30, 10, 20]
    assert itf.Iter([]).map(str).to_list() == []


def test_filter_preserves_relative_order() -> None:
    data = [5, 2, 8, 1, 6, 3]
    result = itf.Iter(data).filter(lambda x: x > 2).to_list()
    assert result == [5, 8, 6, 3]


def test_flat_map_flattens_one_level() -> None:
    result = itf.Iter([1, 2, 3]).flat_map(lambda x: [[x]] * 2).to_list()
    assert result == [[1], [1], [2], [2], [3], [3]]
    assert itf.Iter([1, 2]).flat_map(lambda _: []).to_list() == []


def test_take_and_drop_split_the_sequence() -> None:
    data = list(range(10))
    for n in (0, 3, 10, 15):
        head = itf.Iter(data).take(n).to_list()
        tail = itf.Iter(data).drop(n).to_list()
        assert head + tail == data
        assert len(head) == min(n, len(data))


def test_take_while_stops_for_good() -> None:
    """Elements after the first failure are never yielded, even if they pass."""
    result = itf.Iter([1, 2, 5, 1, 2]).take_while(lambda x: x < 3).to_list()
    assert result == [1, 2]


def test_drop_while_keeps_everything_after_first_failure() -> None:
    result = itf.Iter([1, 2, 5, 1, 2]).drop_while(lambda x: x < 3).to_list()
    assert result == [5, 1, 2]


def test_scan_yields_seed_and_running_values() -> None:
    result = itf.Iter([1, 2, 3, 4]).scan(lambda acc, x: acc * x, 1).to_list()
    assert result == [1, 1, 2, 6, 24]


def test_scan_with_different_accumulator_type() -> None:
    result = itf.Iter("abc").scan(lambda acc, ch: [*acc, ch], []).to_list()
    assert result == [[], ["a"], ["a", "b"], ["a", "b", "c"]]


def test_enumerate_yields_named_pairs() -> None:
    pairs = itf.Iter(["x", "y"]).enumerate().to_list()
    assert pairs == [(0, "x"), (1, "y")]
    assert isinstance(pairs[0], itf.Enumerated)
    assert pairs[1].idx == 1
    assert pairs[1].value == "y"


def test_tap_sees_elements_in_order_without_changing_them() -> None:
    seen: list[int] = []
    result = itf.Iter([3, 1, 2]).tap(seen.append).map(lambda x: -x).to_list()
    assert result == [-3, -1, -2]
    assert seen == [3, 1, 2]


def test_distinct_keeps_first_occurrences() -> None:
    data = [3, 1, 3, 2, 1, 4, 2]
    result = itf.Iter(data).distinct().to_list()
    assert result == [3, 1, 2, 4]
    assert len(result) == len(set(data))


def test_distinct_on_strings() -> None:
    assert itf.Iter("mississippi").distinct().to_list() == ["m", "i", "s", "p"]


def test_distinct_by_keeps_first_element_per_key() -> None:
    people = [("ann", 30), ("bob", 25), ("cid", 30), ("dan", 40), ("eve", 25)]
    result = itf.Iter(people).distinct_by(lambda p: p[1]).to_list()
    assert result == [("ann", 30), ("bob", 25), ("dan", 40)]


def test_distinct_by_with_unhashable_elements() -> None:
    """Only the key has to be hashable."""
    rows = [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}, {"id": 1, "v": "c"}]
    result = itf.Iter(rows).distinct_by(lambda r: r["id"]).to_list()
    assert result == [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}]


def test_intersperse() -> None:
    assert itf.Iter("abc").intersperse("-").to_list() == ["a", "-", "b", "-", "c"]
    assert itf.Iter([1]).intersperse(0).to_list() == [1]
    assert itf.Iter([]).intersperse(0).to_list() == []


def test_pairwise() -> None:
    assert itf.Iter([1, 2, 3, 4]).pairwise().to_list() == [(1, 2), (2, 3), (3, 4)]
    assert itf.Iter([1]).pairwise().to_list() == []


def test_concat_preserves_argument_order() -> None:
    result = itf.Iter([1]).concat([], [2, 3], (4,)).to_list()
    assert result == [1, 2, 3, 4]


def test_from_constructors() -> None:
    assert itf.Iter.from_(1, 2, 3).to_list() == [1, 2, 3]
    assert itf.Iter.from_([4, 5]).to_list() == [4, 5]
    assert itf.Iter.from_count(5, -1).take(3).to_list() == [5, 4, 3]


def test_into_and_inspect() -> None:
    seen: list[object] = []
    total = itf.Iter([1, 2, 3]).inspect(seen.append).into(lambda it: it.sum())
    assert total == 6
    assert len(seen) == 1
    assert isinstance(seen[0], itf.Iter)
