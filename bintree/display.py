"""Sideways text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.node import Node

_INDENT = "    "


def render(tree: Node | None) -> str:
    """Render the tree sideways: right subtree above, left below, one node per line."""
    lines: list[str] = []
    stack: list[tuple[Node, int, bool]] = [(tree, 0, False)] if tree is not None else []
    while stack:
        node, level, ready = stack.pop()
        if ready:
            lines.append(f"{_INDENT * level}{node.value}\n")
            continue
        if node.left is not None:
            stack.append((node.left, level + 1, False))
        stack.append((node, level, True))
        if node.right is not None:
            stack.append((node.right, level + 1, False))
    return "".join(lines)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the rendered tree to file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))