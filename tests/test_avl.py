from hypothesis import given
from hypothesis import strategies as st

from dsakit.avl import AVLTree


def _check(node):
    """Return the subtree height, asserting stored heights and AVL balance."""
    if node is None:
        return -1
    left = _check(node.left)
    right = _check(node.right)
    assert abs(left - right) <= 1
    assert node.height == max(left, right) + 1
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    return node.height


def test_sample_keys_in_order():
    tree = AVLTree()
    keys = [10, 8, 9, 5, 6, 11, 4, 3, 2, 1]
    for key in keys:
        tree.insert(key)
    assert tree.in_order() == sorted(keys)
    assert len(tree) == len(keys)
    _check(tree.root)


def test_ascending_inserts_rotate_to_middle():
    tree = AVLTree()
    for key in (1, 2, 3):
        tree.insert(key)
    assert tree.root.key == 2
    assert tree.root.height == 1


def test_left_right_case():
    tree = AVLTree()
    for key in (3, 1, 2):
        tree.insert(key)
    assert tree.root.key == 2
    _check(tree.root)


def test_duplicates_ignored():
    tree = AVLTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1
    assert list(tree) == [5]


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert tree.in_order() == []


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
def test_balanced_and_sorted(keys):
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    assert list(tree) == sorted(set(keys))
    assert len(tree) == len(set(keys))
    height = _check(tree.root)
    if keys:
        assert 2 ** height <= len(tree) * 2