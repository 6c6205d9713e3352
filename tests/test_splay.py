from hypothesis import given
from hypothesis import strategies as st

from dsakit.splay import SplayNode, pre_order, search, splay


def _driver_tree():
    root = SplayNode(100)
    root.left = SplayNode(50)
    root.right = SplayNode(200)
    root.left.left = SplayNode(40)
    root.left.left.left = SplayNode(30)
    root.left.left.left.left = SplayNode(20)
    return root


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.key] + _in_order(node.right)


def _build(keys):
    root = None
    for key in keys:
        if root is None:
            root = SplayNode(key)
            continue
        node = root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = SplayNode(key)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = SplayNode(key)
                    break
                node = node.right
            else:
                break
    return root


def test_driver_search_preorder():
    root = search(_driver_tree(), 20)
    assert pre_order(root) == [20, 50, 30, 40, 100, 200]


def test_pre_order_of_driver_tree():
    assert pre_order(_driver_tree()) == [100, 50, 40, 30, 20, 200]


def test_splay_empty_tree():
    assert splay(None, 5) is None
    assert pre_order(None) == []


def test_splay_key_at_root_is_unchanged():
    root = _driver_tree()
    assert splay(root, 100) is root


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=30), st.data())
def test_present_key_moves_to_root(keys, data):
    root = _build(keys)
    target = data.draw(st.sampled_from(keys))
    new_root = splay(root, target)
    assert new_root.key == target
    assert _in_order(new_root) == sorted(set(keys))


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=30), st.integers(-60, 60))
def test_splay_preserves_order(keys, target):
    root = _build(keys)
    new_root = search(root, target)
    assert _in_order(new_root) == sorted(set(keys))
    assert sorted(pre_order(new_root)) == sorted(set(keys))