"""Binary tree nodes and the measurements and traversals defined on them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        child = Node(value, self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        child = Node(value, self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        count = 0
        ancestor = self.parent
        while ancestor is not None:
            count += 1
            ancestor = ancestor.parent
        return count

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of the tree in pre-order."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of the tree in in-order."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of the tree in post-order."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for a leaf or None."""
    if tree is None or tree.is_leaf():
        return 0
    return max(height(tree.left), height(tree.right)) + 1


def _levels(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    return max(_levels(tree.left), _levels(tree.right)) + 1


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return size(tree.left) + size(tree.right) + 1


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in the tree."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return nodes(tree.left) + nodes(tree.right) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right subtree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    return is_full(tree.left) and is_full(tree.right)


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves are on the same level."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if _levels(tree.left) != _levels(tree.right):
        return False
    return is_perfect(tree.left) and is_perfect(tree.right)