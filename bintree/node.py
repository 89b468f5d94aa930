"""Binary tree nodes with links to parent and children."""

from __future__ import annotations


class Node:
    """A binary tree node holding an integer value.

    Creating a node with a parent only records the parent; the parent's
    child links are left untouched, so the caller decides where it goes.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves below it."""
        node = Node(value, self)
        node.left = self.left
        if node.left is not None:
            node.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves below it."""
        node = Node(value, self)
        node.right = self.right
        if node.right is not None:
            node.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = None
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None