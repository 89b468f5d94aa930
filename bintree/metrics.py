"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.node import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _levels(tree: Node | None) -> int:
    """Number of levels, counting nodes on the longest root-to-leaf path."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return count


def height(tree: Node | None) -> int:
    """Edges on the longest downward path; 0 for a leaf or an empty tree."""
    return max(_levels(tree) - 1, 0)


def size(tree: Node | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def inner_nodes(tree: Node | None) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Node | None) -> int:
    """Left subtree height minus right subtree height; 0 for an empty tree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """True if every node has zero or two children; False for an empty tree."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Node | None) -> bool:
    """True if every level is completely filled; False for an empty tree."""
    if tree is None:
        return False
    return size(tree) == 2 ** _levels(tree) - 1