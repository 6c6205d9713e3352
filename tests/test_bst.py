import pytest
from hypothesis import given, strategies as st

from dsakit.bst import BinarySearchTree, BSTNode

SAMPLE_KEYS = [5, 6, 4, 7, 3, 8, 2, 15, 16, 14, 17, 13, 18, 12]


def _sample_tree(recursive=True):
    tree = BinarySearchTree(10)
    for key in SAMPLE_KEYS:
        if recursive:
            assert tree.insert_recursive(key) is True
        else:
            assert tree.insert(key) is True
    return tree


def _is_search_tree(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.data <= low:
        return False
    if high is not None and node.data >= high:
        return False
    return _is_search_tree(node.left, low, node.data) and _is_search_tree(
        node.right, node.data, high
    )


@pytest.mark.parametrize("recursive", [True, False])
def test_sample_in_order(recursive):
    tree = _sample_tree(recursive)
    assert tree.in_order() == sorted(SAMPLE_KEYS + [10])
    assert _is_search_tree(tree.root)


def test_min_and_max_agree():
    tree = _sample_tree()
    assert tree.find_max() == 18
    assert tree.find_min() == 2
    assert tree.find_max_recursive() == 18
    assert tree.find_min_recursive() == 2


@pytest.mark.parametrize("key,expected", [(18, 18), (8, 8), (15, 15), (1, None)])
def test_find(key, expected):
    tree = _sample_tree()
    assert tree.find(key) == expected
    assert tree.find_recursive(key) == expected


def test_delete_sample_keys():
    tree = _sample_tree()
    tree.delete(15)
    assert tree.find_recursive(15) is None
    assert tree.in_order() == sorted(k for k in SAMPLE_KEYS + [10] if k != 15)
    tree.delete(5)
    assert 5 not in tree
    assert tree.in_order() == sorted(k for k in SAMPLE_KEYS + [10] if k not in (5, 15))
    assert _is_search_tree(tree.root)


def test_duplicate_insert_rejected():
    tree = _sample_tree()
    assert tree.insert(7) is False
    assert tree.insert_recursive(10) is False
    assert tree.in_order().count(7) == 1


def test_delete_missing_raises():
    tree = _sample_tree()
    with pytest.raises(KeyError):
        tree.delete(99)


def test_emptied_tree():
    tree = BinarySearchTree(1)
    tree.delete(1)
    assert tree.in_order() == []
    with pytest.raises(ValueError):
        tree.find_min()
    with pytest.raises(ValueError):
        tree.find_max_recursive()
    assert tree.insert(4) is True
    assert tree.in_order() == [4]


def test_root_node_type():
    tree = BinarySearchTree(3)
    assert isinstance(tree.root, BSTNode) and tree.root.data == 3


@given(
    st.lists(st.integers(-50, 50), min_size=1),
    st.lists(st.integers(-50, 50)),
)
def test_matches_set(inserts, deletes):
    tree = BinarySearchTree(inserts[0])
    model = {inserts[0]}
    for key in inserts[1:]:
        assert tree.insert(key) == (key not in model)
        model.add(key)
    for key in deletes:
        if key in model:
            tree.delete(key)
            model.remove(key)
        else:
            with pytest.raises(KeyError):
                tree.delete(key)
    assert tree.in_order() == sorted(model)
    assert _is_search_tree(tree.root)
    if model:
        assert tree.find_min() == min(model)
        assert tree.find_max_recursive() == max(model)