"""Text rendering of binary trees as ASCII diagrams."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .node import Node


def _label(node: Node) -> str:
    return f"({node.value:03d})"


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


class _Canvas:
    """Rows of characters that grow to the right as they are written."""

    def __init__(self, rows: int) -> None:
        self.rows: List[List[str]] = [[] for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        line = self.rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def lines(self) -> List[str]:
        result = []
        for row in self.rows:
            text = "".join(row).ljust(2)
            # The first two columns are kept even when blank.
            result.append(text[:2] + text[2:].rstrip(" "))
        return result


def _draw(tree: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    """Draw ``tree`` at ``offset`` on row ``depth``; return the width used."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = _label(tree)
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, canvas)
    right = _draw(tree.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        if is_left:
            start = offset + left + width // 2
            for i in range(width + right):
                canvas.put(depth - 1, start + i, "-")
        else:
            start = offset - width // 2
            for i in range(left + width):
                canvas.put(depth - 1, start + i, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return an ASCII diagram of ``tree``, one line per level.

    Every line ends with a newline; an empty tree renders as "".
    """
    if tree is None:
        return ""
    canvas = _Canvas(_height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(line + "\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the diagram of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))