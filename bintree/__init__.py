"""Linked binary trees with traversals, metrics, ASCII rendering and demos."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "metrics", "render", "demo"]