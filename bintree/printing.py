"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.node import Node


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _place(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    label = f"({node.value:03d})"
    width = len(label)
    is_left = node.parent is not None and node.parent.left is node
    left = _place(node.left, offset, depth + 1, rows)
    right = _place(node.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        joint = offset + left + width // 2
        if is_left:
            _write(above, joint, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, joint, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of a tree, each level on its own newline-terminated line."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _place(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of a tree to a stream, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))