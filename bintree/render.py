"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

from typing import Optional

from .tree import Node, height

_ROW_WIDTH = 255


class _Canvas:
    def __init__(self, rows: int) -> None:
        self._rows = [[" "] * _ROW_WIDTH for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self._rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> list[str]:
        result = []
        for line in self._rows:
            text = "".join(line)
            stripped = text.rstrip(" ")
            result.append(stripped if len(stripped) >= 2 else text[:2])
        return result


def _draw(node: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, depth + 1, canvas)
    right = _draw(node.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        above = depth - 1
        if is_left:
            start = offset + left + width // 2
            for i in range(width + right):
                canvas.put(above, start + i, "-")
        else:
            start = offset - width // 2
            for i in range(left + width):
                canvas.put(above, start + i, "-")
        canvas.put(above, offset + left + width // 2, ".")
    return left + width + right


def format_tree(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, each line ending in a newline; empty for None."""
    if tree is None:
        return ""
    canvas = _Canvas(height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node]) -> None:
    """Print the drawing of the tree to standard output."""
    print(format_tree(tree), end="")