"""Binary tree nodes, traversals, metrics, ancestry queries and text rendering."""

__version__ = "0.1.0"

__all__ = ["node", "traversal", "metrics", "ancestry", "display"]