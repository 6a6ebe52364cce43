"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from bintree.node import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Optional[Node]) -> Iterator[list[Node]]:
    level = [tree] if tree is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _level_count(tree: Optional[Node]) -> int:
    return sum(1 for _ in _levels(tree))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 if empty."""
    return max(_level_count(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's level count minus the right's; 0 if empty."""
    if tree is None:
        return 0
    return _level_count(tree.left) - _level_count(tree.right)


def _has_zero_or_two_children(node: Node) -> bool:
    return (node.left is None) == (node.right is None)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has zero or two children; False if empty."""
    if tree is None:
        return False
    return all(_has_zero_or_two_children(node) for node in _walk(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one level."""
    if tree is None:
        return False
    leftmost_levels = 0
    node: Optional[Node] = tree
    while node is not None:
        leftmost_levels += 1
        node = node.left
    leaf_level = leftmost_levels - 1
    for level, nodes in enumerate(_levels(tree)):
        for current in nodes:
            if not _has_zero_or_two_children(current):
                return False
            if current.is_leaf() and level != leaf_level:
                return False
    return True