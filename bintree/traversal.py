"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from bintree.node import Node

_PRE = "pre"
_IN = "in"
_POST = "post"


def _walk(tree: Node | None, order: str) -> Iterator[int]:
    stack: list[tuple[Node, bool]] = [(tree, False)] if tree is not None else []
    while stack:
        node, ready = stack.pop()
        if ready:
            yield node.value
            continue
        right = [(node.right, False)] if node.right is not None else []
        left = [(node.left, False)] if node.left is not None else []
        here = [(node, True)]
        # Pushed in reverse of visiting order.
        if order == _PRE:
            stack.extend(right + left + here)
        elif order == _IN:
            stack.extend(right + here + left)
        else:
            stack.extend(here + right + left)


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values root first, then the left subtree, then the right."""
    return _walk(tree, _PRE)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values of the left subtree, then the root, then the right."""
    return _walk(tree, _IN)


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values of the left subtree, then the right, then the root."""
    return _walk(tree, _POST)


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue: deque[Node] = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)