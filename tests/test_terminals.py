"""Tests for terminal, grouping and materializing operations."""

import operator

import pytest

import iterflow as itf


def test_to_list_and_collect() -> None:
    assert itf.Iter((1, 2)).to_list() == [1, 2]
    seq = itf.Iter((1, 2)).collect()
    assert isinstance(seq, itf.Seq)
    assert len(seq) == 2
    assert seq[1] == 2
    assert seq[::-1] == (2, 1)


def test_count() -> None:
    assert itf.Iter("hello").count() == 5
    assert itf.Iter([]).count() == 0


def test_reduce() -> None:
    assert itf.Iter([1, 2, 3, 4]).reduce(operator.add) == 10
    assert itf.Iter([1, 2, 3]).reduce(operator.add, 100) == 106
    assert itf.Iter([7]).reduce(operator.mul) == 7
    assert itf.Iter([]).reduce(operator.add, 0) == 0


def test_reduce_without_seed_on_empty_input() -> None:
    with pytest.raises(itf.ValidationError, match="reduce: sequence cannot be empty"):
        itf.Iter([]).reduce(operator.add)


def test_first_last_nth() -> None:
    assert itf.Iter([5, 6, 7]).first() == itf.Some(5)
    assert itf.Iter([5, 6, 7]).last() == itf.Some(7)
    assert itf.Iter([5, 6, 7]).nth(1) == itf.Some(6)
    assert itf.Iter([5, 6, 7]).nth(3) == itf.NONE
    assert itf.Iter([]).first() == itf.NONE
    assert itf.Iter([]).last() == itf.NONE


def test_none_elements_are_values() -> None:
    assert itf.Iter([None]).first() == itf.Some(None)
    assert itf.Iter([1, None]).last().is_some()


def test_all_and_any() -> None:
    assert itf.Iter([2, 4]).all(lambda x: x % 2 == 0)
    assert not itf.Iter([2, 3]).all(lambda x: x % 2 == 0)
    assert itf.Iter([]).all(lambda _: False)
    assert not itf.Iter([]).any(lambda _: True)
    assert itf.Iter([0, "", 3]).any()
    assert not itf.Iter([0, ""]).any()


def test_contains_and_is_empty() -> None:
    assert itf.Iter([1, 2, 3]).contains(2)
    assert not itf.Iter([1, 2, 3]).contains(4)
    assert itf.Iter([]).is_empty()
    assert not itf.Iter([None]).is_empty()


def test_for_each() -> None:
    seen: list[int] = []
    result = itf.Iter([1, 2, 3]).for_each(seen.append)
    assert result is None
    assert seen == [1, 2, 3]


def test_next() -> None:
    it = itf.Iter([1])
    assert it.next() == itf.Some(1)
    assert it.next() == itf.NONE


def test_partition_keeps_order_on_both_sides() -> None:
    result = itf.Iter([5, 2, 7, 4, 1, 8]).partition(lambda x: x > 4)
    assert result == ([5, 7, 8], [2, 4, 1])
    assert result.matching == [5, 7, 8]
    assert result.non_matching == [2, 4, 1]


def test_partition_of_empty_input() -> None:
    assert itf.Iter([]).partition(bool) == ([], [])


def test_partition_calls_predicate_once_per_element() -> None:
    calls: list[int] = []

    def odd(x: int) -> bool:
        calls.append(x)
        return x % 2 == 1

    itf.Iter([1, 2, 3]).partition(odd)
    assert calls == [1, 2, 3]


def test_group_by_keeps_first_occurrence_and_source_order() -> None:
    words = ["beta", "alpha", "bravo", "charlie", "apple"]
    groups = itf.Iter(words).group_by(lambda w: w[0])
    assert list(groups) == ["b", "a", "c"]
    assert groups == {
        "b": ["beta", "bravo"],
        "a": ["alpha", "apple"],
        "c": ["charlie"],
    }


def test_group_by_of_empty_input() -> None:
    assert itf.Iter([]).group_by(len) == {}


def test_sort() -> None:
    assert itf.Iter([3, 1.5, 2]).sort().to_list() == [1.5, 2, 3]
    assert itf.Iter(["b", "c", "a"]).sort().to_list() == ["a", "b", "c"]
    assert itf.Iter([]).sort().to_list() == []


def test_sort_rejects_mixed_elements() -> None:
    with pytest.raises(itf.ElementTypeError) as excinfo:
        itf.Iter(["a", 1]).sort()
    assert excinfo.value.element == 1
    with pytest.raises(itf.ElementTypeError):
        itf.Iter([(1, 2), (0, 1)]).sort()


def test_sort_by_is_stable() -> None:
    records = [("b", 1), ("a", 2), ("c", 1), ("d", 2)]
    result = itf.Iter(records).sort_by(lambda x, y: x[1] - y[1]).to_list()
    assert result == [("b", 1), ("c", 1), ("a", 2), ("d", 2)]


def test_reverse() -> None:
    assert itf.Iter(range(4)).reverse().to_list() == [3, 2, 1, 0]
    assert itf.Iter([]).reverse().to_list() == []


def test_materializing_operations_return_seq() -> None:
    for seq in (
        itf.Iter([2, 1]).sort(),
        itf.Iter([2, 1]).sort_by(lambda a, b: a - b),
        itf.Iter([2, 1]).reverse(),
    ):
        assert isinstance(seq, itf.Seq)
        assert seq.count() == 2
        assert seq.iter().window(2).count() == 1


def test_seq_repr() -> None:
    assert repr(itf.Iter([1, "a"]).collect()) == "Seq(1, 'a')"
    assert repr(itf.Iter([]).collect()) == "Seq()"


def test_seq_iter_does_not_consume_seq() -> None:
    seq = itf.Iter([3, 1, 2]).sort()
    assert seq.iter().take(1).to_list() == [1]
    assert seq.to_list() == [1, 2, 3]
    assert seq.median() == itf.Some(2)


def test_inner_exposes_the_wrapped_data() -> None:
    assert itf.Iter([2, 1]).sort().inner() == (1, 2)
