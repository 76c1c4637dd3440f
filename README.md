# bintree

A small library of binary trees of integers. Every node holds an integer
value and links to its parent, its left child and its right child. The
package provides node insertion, traversals, tree measurements and a
plain-text drawing of a tree.

It has two modules:

- `bintree.tree`: the `Node` class and the functions that traverse and
  measure a tree.
- `bintree.render`: `format_tree` and `print_tree`.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.tree import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`Node(value, parent=None)` creates a node. Its attributes `value`,
`parent`, `left` and `right` can be read and set directly.

`insert_left(value)` and `insert_right(value)` create a child, attach it
to the node and return it. If the node already has a child on that side,
the existing child moves down and becomes the new node's child on the
same side.

## Node methods

- `node.is_leaf()`: `True` if the node has no children.
- `node.is_root()`: `True` if the node has no parent.
- `node.depth()`: number of edges from the node up to the root; `0` for
  the root.
- `node.sibling()`: the parent's other child, or `None` if there is no
  parent or no other child.
- `node.uncle()`: the sibling of the node's parent, or `None`.

## Whole-tree functions

All of these are in `bintree.tree` and accept `None` for an empty tree.

- `preorder(tree)`, `inorder(tree)`, `postorder(tree)`: generators that
  yield the node values in the named order; nothing for `None`.
- `height(tree)`: number of edges on the longest path from the root down
  to a leaf; `0` for a single node and for `None`.
- `size(tree)`: number of nodes.
- `leaves(tree)`: number of nodes without children.
- `nodes(tree)`: number of nodes with at least one child.
- `balance(tree)`: the number of levels of the left subtree minus that of
  the right subtree; `0` for `None`.
- `is_full(tree)`: `True` if every node has zero or two children;
  `False` for `None`.
- `is_perfect(tree)`: `True` if the tree is full and every leaf is on the
  same level; `False` for `None`.

```python
from bintree.tree import inorder, size, height

list(inorder(root))   # [12, 54, 98, 128, 402]
size(root)            # 5
height(root)          # 2
```

## Drawing a tree

```python
from bintree.render import format_tree, print_tree

print_tree(root)
```

prints

```
  .-------(098)-------.
(012)--.         .--(402)
     (054)     (128)
```

Each value is written as `(%03d)`, one line per level, with trailing
spaces removed. `format_tree(tree)` returns the same drawing as a string,
every line ending in a newline; for `None` it returns an empty string and
`print_tree(None)` prints nothing.

## What the package does not do

There is no command-line program; the package is used from Python code.
Trees are not kept ordered or balanced: values go exactly where
`insert_left` and `insert_right` put them, and there is no search or
removal of single values.

## Running the tests

```
pip install .[test]
pytest
```