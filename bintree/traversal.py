"""Depth-first traversals yielding node values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Optional

from bintree.node import Node

# A plan lists, in visiting order, what to do around a node: a pair whose
# flag is True means "emit this node", False means "walk this subtree".
_Plan = Callable[[Node], tuple[tuple[Optional[Node], bool], ...]]


def _walk(tree: Optional[Node], plan: _Plan) -> Iterator[int]:
    pending: list[tuple[Optional[Node], bool]] = [(tree, False)]
    while pending:
        node, emit = pending.pop()
        if node is None:
            continue
        if emit:
            yield node.value
        else:
            pending.extend(reversed(plan(node)))


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    return _walk(tree, lambda n: ((n, True), (n.left, False), (n.right, False)))


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    return _walk(tree, lambda n: ((n.left, False), (n, True), (n.right, False)))


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    return _walk(tree, lambda n: ((n.left, False), (n.right, False), (n, True)))