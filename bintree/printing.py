"""Text rendering of binary trees as boxed values joined by branch lines."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.tree import Node, height

_MIN_LINE = 2


class _Canvas:
    """Rows of characters that grow to the right as they are written."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        if column < 0:
            return
        line = self._rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def lines(self) -> list[str]:
        result = []
        for row in self._rows:
            full = "".join(row)
            text = full.rstrip(" ")
            if len(text) < _MIN_LINE:
                text = full[:_MIN_LINE].ljust(_MIN_LINE)
            result.append(text)
        return result


def _layout(tree: Optional[Node], offset: int, level: int, canvas: _Canvas) -> int:
    """Draw ``tree`` at ``offset`` on row ``level``; return the width it takes."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _layout(tree.left, offset, level + 1, canvas)
    right = _layout(tree.right, offset + left + width, level + 1, canvas)

    for i, char in enumerate(label):
        canvas.put(level, offset + left + i, char)

    if level:
        above = level - 1
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for column in range(start, start + count):
            canvas.put(above, column, "-")
        canvas.put(above, offset + left + width // 2, ".")

    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, one newline-terminated line per level.

    An empty tree renders as the empty string.
    """
    if tree is None:
        return ""
    canvas = _Canvas(height(tree) + 1)
    _layout(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))