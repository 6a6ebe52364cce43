"""Sample programs exercising the tree operations, selectable by number."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from typing import Optional, TextIO, Union

from bintree.metrics import (
    balance,
    height,
    internal_nodes,
    is_full,
    is_perfect,
    leaves,
    size,
)
from bintree.node import Node
from bintree.render import render
from bintree.traversal import inorder, preorder

# A tree shape: a value, or (value, left shape, right shape); None is empty.
Spec = Union[int, tuple, None]
Demo = Callable[[TextIO], None]

_SAMPLE: Spec = (98, (12, None, 54), (128, None, 402))
_SEVEN: Spec = (98, (12, 6, 56), (402, 256, 512))
_FAMILY: Spec = (98, (12, 10, 54), (128, 110, (402, 200, 512)))


def _build(spec: Spec, parent: Optional[Node] = None) -> Optional[Node]:
    if spec is None:
        return None
    value, left, right = spec if isinstance(spec, tuple) else (spec, None, None)
    node = Node(value, parent)
    node.left = _build(left, node)
    node.right = _build(right, node)
    return node


def _value_or_nil(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.value)


def _report(
    spec: Spec,
    pick: Callable[[Node], Iterable[Node]],
    describe: Callable[[Node], str],
) -> Demo:
    """Draw the tree, then write one line about each picked node."""

    def demo(out: TextIO) -> None:
        root = _build(spec)
        out.write(render(root))
        for node in pick(root):
            out.write(describe(node) + "\n")

    return demo


def _measured(label: str, measure: Callable[[Node], int]) -> Demo:
    return _report(
        _SAMPLE,
        lambda r: (r, r.right, r.left.right),
        lambda n: f"{label} {n.value}: {measure(n)}",
    )


def _flagged(label: str, check: Callable[[Node], bool]) -> Demo:
    return _report(
        _SAMPLE,
        lambda r: (r, r.right, r.right.right),
        lambda n: f"Is {n.value} {label}: {int(check(n))}",
    )


def _demo_insertion(*steps: Callable[[Node], object]) -> Demo:
    def demo(out: TextIO) -> None:
        root = _build((98, 12, 402))
        out.write(render(root) + "\n")
        for step in steps:
            step(root)
        out.write(render(root))

    return demo


def _demo_traversal(order: Callable[[Optional[Node]], Iterable[int]]) -> Demo:
    def demo(out: TextIO) -> None:
        root = _build(_SEVEN)
        out.write(render(root))
        out.writelines(f"{value}\n" for value in order(root))

    return demo


def _demo_is_perfect(out: TextIO) -> None:
    root = _build((98, (12, 10, 54), (128, 10, 402)))
    tip = root.right.right

    def report(end: str) -> None:
        out.write(render(root))
        out.write(f"Perfect: {int(is_perfect(root))}\n{end}")

    report("\n")
    tip.left = Node(10, tip)
    report("\n")
    tip.right = Node(10, tip)
    report("")


DEMOS: dict[int, Demo] = {
    0: lambda out: out.write(render(_build((98, (12, 6, 16), (402, 256, 512))))),
    1: _demo_insertion(lambda r: r.right.insert_left(128), lambda r: r.insert_left(54)),
    2: _demo_insertion(lambda r: r.left.insert_right(54), lambda r: r.insert_right(128)),
    3: lambda out: out.write(render(_build(_SAMPLE))),
    4: _flagged("a leaf", Node.is_leaf),
    5: _flagged("a root", Node.is_root),
    6: _demo_traversal(preorder),
    7: _demo_traversal(inorder),
    9: _measured("Height from", height),
    10: _measured("Depth of", Node.depth),
    11: _measured("Size of", size),
    12: _measured("Leaves in", leaves),
    13: _measured("Nodes in", internal_nodes),
    14: _report(
        (98, (45, (12, (10, 8, None), 54), 50), (128, None, 402)),
        lambda r: (r, r.right, r.left.left.right),
        lambda n: f"Balance of {n.value}: {balance(n):+d}",
    ),
    15: _report(
        (98, (12, 10, 54), (128, None, 402)),
        lambda r: (r, r.left, r.right),
        lambda n: f"Is {n.value} full: {int(is_full(n))}",
    ),
    16: _demo_is_perfect,
    17: _report(
        _FAMILY,
        lambda r: (r.left, r.right.left, r.left.right, r),
        lambda n: f"Sibling of {n.value}: {_value_or_nil(n.sibling())}",
    ),
    18: _report(
        _FAMILY,
        lambda r: (r.right.left, r.left.right, r.left),
        lambda n: f"Uncle of {n.value}: {_value_or_nil(n.uncle())}",
    ),
}


def run_demo(number: int, out: TextIO) -> None:
    """Run the sample program ``number``, writing its output to ``out``."""
    try:
        demo = DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number}") from None
    demo(out)


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point: run one numbered demo."""
    parser = argparse.ArgumentParser(description="Run a binary tree demo.")
    parser.add_argument("number", type=int, choices=sorted(DEMOS), help="demo number")
    args = parser.parse_args(argv)
    run_demo(args.number, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())