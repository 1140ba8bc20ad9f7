"""ASCII rendering of binary trees."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintrees_kit.node import Node


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(row: List[str], index: int, char: str) -> None:
    if index >= len(row):
        row.extend(" " * (index + 1 - len(row)))
    row[index] = char


def _draw(tree: Optional[Node], offset: int, depth: int, rows: List[List[str]]) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start = offset + left + width // 2
            span = width + right
        else:
            start = offset - width // 2
            span = left + width
        for i in range(span):
            _put(above, start + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: List[List[str]] = [[] for _ in range(_height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        if len(text) < 2:
            text = text.ljust(2)
        trimmed = text.rstrip(" ")
        lines.append(trimmed if len(trimmed) >= 2 else text[:2])
    return "".join(line + "\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))