from hypothesis import given
from hypothesis import strategies as st

from dsakit.binary_tree import BinaryTreeNode, in_order, pre_order
from dsakit.threaded_tree import ThreadedBinaryTree


def _sample_tree():
    tree = ThreadedBinaryTree(1)
    start = tree.root
    tree.insert_left(start, 5)
    tree.insert_right(start, 11)
    tree.insert_left(start.left, 2)
    tree.insert_right(start.left, 3)
    tree.insert_right(start.right, 31)
    tree.insert_left(start.right, 16)
    return tree


def test_sample_in_order():
    assert _sample_tree().in_order() == [2, 5, 3, 1, 16, 11, 31]


def test_sample_pre_order():
    assert _sample_tree().pre_order() == [1, 5, 2, 3, 11, 16, 31]


def test_single_node():
    tree = ThreadedBinaryTree("x")
    assert tree.in_order() == ["x"]
    assert tree.pre_order() == ["x"]


def test_insert_returns_child_and_sets_tags():
    tree = ThreadedBinaryTree(1)
    left = tree.insert_left(tree.root, 0)
    assert tree.root.left is left
    assert tree.root.left_tag is True
    assert left.right is tree.root
    assert left.right_tag is False


def test_right_spine_with_left_leaf_in_pre_order():
    tree = ThreadedBinaryTree(1)
    right = tree.insert_right(tree.root, 3)
    tree.insert_left(right, 2)
    assert tree.pre_order() == [1, 3, 2]
    assert tree.in_order() == [1, 2, 3]


_operations = st.lists(
    st.tuples(st.integers(min_value=0, max_value=1000), st.booleans()),
    max_size=40,
)


@given(_operations)
def test_matches_plain_binary_tree(operations):
    tree = ThreadedBinaryTree(0)
    threaded = [tree.root]
    mirror = [BinaryTreeNode(0)]
    for value, (pick, to_left) in enumerate(operations, start=1):
        index = pick % len(threaded)
        if to_left:
            threaded.append(tree.insert_left(threaded[index], value))
            node = BinaryTreeNode(value, left=mirror[index].left)
            mirror[index].left = node
        else:
            threaded.append(tree.insert_right(threaded[index], value))
            node = BinaryTreeNode(value, right=mirror[index].right)
            mirror[index].right = node
        mirror.append(node)
    assert tree.in_order() == in_order(mirror[0])
    assert tree.pre_order() == pre_order(mirror[0])
    assert len(tree.in_order()) == len(operations) + 1