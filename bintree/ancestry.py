"""Relations between a node and the nodes above it."""

from __future__ import annotations

from bintree.node import Node


def depth(node: Node | None) -> int:
    """Number of edges from the node up to its root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    grandparent = parent.parent
    if grandparent is None:
        return None
    return grandparent.right if parent is grandparent.left else grandparent.left


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both (or either itself)."""
    above_second = set()
    node = second
    while node is not None:
        above_second.add(id(node))
        node = node.parent
    node = first
    while node is not None:
        if id(node) in above_second:
            return node
        node = node.parent
    return None