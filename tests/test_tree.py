import pytest

from bintree.tree import (
    Node,
    balance,
    height,
    inorder,
    is_full,
    is_perfect,
    leaves,
    nodes,
    postorder,
    preorder,
    size,
)


@pytest.fixture
def perfect():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    right.insert_left(256)
    right.insert_right(512)
    return root


def _chain(count):
    root = Node(0)
    current = root
    for value in range(1, count):
        current = current.insert_left(value)
    return root, current


def test_new_node_links():
    root = Node(98)
    assert root.parent is None
    assert root.left is None and root.right is None
    assert root.value == 98


def test_insert_left_on_empty_slot():
    root = Node(98)
    child = root.insert_left(12)
    assert root.left is child
    assert child.parent is root
    assert child.value == 12


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.parent is root


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.parent is root


def test_is_leaf_and_is_root(perfect):
    assert perfect.is_root()
    assert not perfect.is_leaf()
    assert perfect.left.left.is_leaf()
    assert not perfect.left.is_root()


def test_depth_follows_chain_length():
    root, deepest = _chain(6)
    assert root.depth() == 0
    assert deepest.depth() == 6 - 1


def test_sibling_and_uncle(perfect):
    left, right = perfect.left, perfect.right
    assert left.sibling() is right
    assert right.sibling() is left
    assert perfect.sibling() is None
    assert left.left.uncle() is right
    assert right.right.uncle() is left
    assert left.uncle() is None
    assert perfect.uncle() is None


def test_sibling_missing_returns_none():
    root = Node(98)
    only = root.insert_left(12)
    assert only.sibling() is None


def test_traversal_orders(perfect):
    assert list(preorder(perfect)) == [98, 12, 6, 56, 402, 256, 512]
    assert list(inorder(perfect)) == [6, 12, 56, 98, 256, 402, 512]
    assert list(postorder(perfect)) == [6, 56, 12, 256, 512, 402, 98]


def test_inorder_of_search_tree_is_sorted(perfect):
    values = list(inorder(perfect))
    assert values == sorted(values)


def test_traversals_of_empty_tree():
    assert list(preorder(None)) == []
    assert list(inorder(None)) == []
    assert list(postorder(None)) == []


def test_height():
    root, _ = _chain(5)
    assert height(root) == 5 - 1
    assert height(Node(98)) == height(None)


def test_size_matches_traversal(perfect):
    assert size(perfect) == len(list(preorder(perfect)))
    assert size(None) == len(list(preorder(None)))


def test_leaves_and_nodes_partition_size(perfect):
    perfect.left.left.insert_left(1)
    assert leaves(perfect) + nodes(perfect) == size(perfect)


def test_full_tree_leaf_count(perfect):
    assert is_full(perfect)
    assert leaves(perfect) == nodes(perfect) + 1


def test_leaf_counts_for_single_node():
    single = Node(98)
    assert leaves(single) == size(single)
    assert nodes(single) == leaves(None)


def test_balance():
    root, _ = _chain(4)
    assert balance(root) == 4 - 1
    lopsided = Node(98)
    lopsided.insert_right(402)
    assert balance(lopsided) == -size(lopsided.right)


def test_balance_of_perfect_tree(perfect):
    assert balance(perfect) == balance(None)
    assert balance(perfect.left) == balance(perfect.right)


def test_is_full_cases(perfect):
    assert not is_full(None)
    assert is_full(Node(98))
    perfect.left.left.insert_left(1)
    assert not is_full(perfect)


def test_is_perfect_cases(perfect):
    assert is_perfect(perfect)
    assert is_perfect(Node(98))
    assert not is_perfect(None)
    perfect.right.right.insert_right(1024)
    assert not is_perfect(perfect)


def test_full_but_not_perfect():
    root = Node(98)
    root.insert_left(12)
    right = root.insert_right(402)
    right.insert_left(256)
    right.insert_right(512)
    assert is_full(root)
    assert not is_perfect(root)