"""ASCII drawing of a binary tree, one text line per level."""

from __future__ import annotations

import sys
from typing import Optional

from bintree.metrics import height
from bintree.node import Node


def _put(row: list[str], col: int, char: str) -> None:
    if col >= len(row):
        row.extend(" " * (col - len(row) + 1))
    row[col] = char


def _draw(tree: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``tree`` into ``rows`` and return the width its subtree spans."""
    if tree is None:
        return 0
    parent = tree.parent
    is_left = parent is not None and parent.left is tree
    box = f"({tree.value:03d})"
    width = len(box)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(box):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for col in range(start, start + count):
            _put(above, col, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _finish(row: list[str]) -> str:
    text = "".join(row).rstrip(" ")
    return text.ljust(2)


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, each line ending in a newline; '' if empty."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    return "".join(_finish(row) + "\n" for row in rows)


def print_tree(tree: Optional[Node]) -> None:
    """Write the drawing of ``tree`` to standard output."""
    sys.stdout.write(render(tree))