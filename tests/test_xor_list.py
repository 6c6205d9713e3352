import pytest
from hypothesis import given, strategies as st

from dsakit.xor_list import XorLinkedList

SOURCE_VALUES = [10, 20, 30, 40]


def _build(values):
    lst = XorLinkedList()
    ids = [lst.insert(v) for v in values]
    return lst, ids


def test_source_example_forward_from_head():
    lst, _ = _build(SOURCE_VALUES)
    assert list(lst) == list(reversed(SOURCE_VALUES))


def test_source_example_from_first_inserted():
    lst, ids = _build(SOURCE_VALUES)
    assert list(lst.iter_from(ids[0])) == SOURCE_VALUES


def test_iter_from_head_matches_iter():
    lst, ids = _build(SOURCE_VALUES)
    assert list(lst.iter_from(ids[-1])) == list(lst)


def test_empty_list():
    lst = XorLinkedList()
    assert list(lst) == []
    assert len(lst) == 0


def test_middle_node_rejected():
    lst, ids = _build(SOURCE_VALUES)
    with pytest.raises(ValueError):
        lst.iter_from(ids[1])


def test_unknown_node_rejected():
    lst, _ = _build(SOURCE_VALUES)
    with pytest.raises(ValueError):
        lst.iter_from(999)


@given(st.lists(st.integers(), min_size=1, max_size=50))
def test_both_directions(values):
    lst, ids = _build(values)
    assert len(lst) == len(values)
    assert list(lst) == values[::-1]
    assert list(lst.iter_from(ids[0])) == values