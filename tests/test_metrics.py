import random

import pytest

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
from bintree.traversal import preorder


def _grown_at_random(seed, count):
    rng = random.Random(seed)
    grown = [Node(0)]
    for value in range(1, count):
        grow = rng.choice((Node.insert_left, Node.insert_right))
        grown.append(grow(rng.choice(grown), value))
    return grown[0], grown


def _perfect(levels):
    top = Node(0)
    frontier = [top]
    counter = 1
    for _ in range(levels - 1):
        next_frontier = []
        for node in frontier:
            next_frontier.extend(
                (node.insert_left(counter), node.insert_right(counter + 1))
            )
            counter += 2
        frontier = next_frontier
    return top, frontier


def _chain(count, grow=Node.insert_left):
    top = tip = Node(0)
    for value in range(1, count):
        tip = grow(tip, value)
    return top, tip


def _sample():
    """98 with 12 (children 10 and 54) on the left, 128 (right child 402)."""
    top = Node(98)
    twelve = top.insert_left(12)
    twelve.insert_left(10)
    twelve.insert_right(54)
    top.insert_right(128).insert_right(402)
    return top


@pytest.mark.parametrize(
    "measure", [height, size, leaves, internal_nodes, balance]
)
def test_empty_tree_measures_zero(measure):
    assert measure(None) == 0


@pytest.mark.parametrize("check", [is_full, is_perfect])
def test_empty_tree_is_neither_full_nor_perfect(check):
    assert not check(None)


def test_single_node():
    single = Node(98)
    assert [height(single), size(single), leaves(single)] == [0, 1, 1]
    assert [internal_nodes(single), balance(single)] == [0, 0]
    assert is_full(single)
    assert is_perfect(single)


@pytest.mark.parametrize("count", [2, 5, 30])
def test_chain_height_and_depth(count):
    top, tip = _chain(count)
    assert height(top) == count - 1
    assert height(top) == tip.depth()
    assert size(top) == count
    assert leaves(top) == 1
    assert internal_nodes(top) == count - 1


@pytest.mark.parametrize("count", [2, 6, 12])
@pytest.mark.parametrize("grow, sign", [(Node.insert_left, 1), (Node.insert_right, -1)])
def test_chain_balance_sign(count, grow, sign):
    top, _ = _chain(count, grow)
    assert balance(top) == sign * (count - 1)


@pytest.mark.parametrize("seed", range(8))
def test_random_tree_invariants(seed):
    top, grown = _grown_at_random(seed, 50)
    assert size(top) == len(grown)
    assert size(top) == len(list(preorder(top)))
    assert leaves(top) + internal_nodes(top) == size(top)
    assert height(top) == max(node.depth() for node in grown)
    assert leaves(top) == sum(1 for node in grown if node.is_leaf())


@pytest.mark.parametrize("levels", [1, 2, 3, 5])
def test_perfect_tree(levels):
    top, bottom = _perfect(levels)
    assert is_perfect(top)
    assert is_full(top)
    assert balance(top) == 0
    assert height(top) == levels - 1
    assert size(top) == 2 ** levels - 1
    assert leaves(top) == len(bottom)


def test_perfect_broken_by_one_extra_leaf():
    top, bottom = _perfect(3)
    bottom[0].insert_left(10)
    assert not is_perfect(top)
    assert not is_full(top)
    bottom[0].insert_right(11)
    assert is_full(top)
    assert not is_perfect(top)


def test_perfect_sequence_from_example():
    top = _sample()
    top.right.insert_left(10)
    assert is_perfect(top)
    top.right.right.insert_left(10)
    assert not is_perfect(top)
    top.right.right.insert_right(10)
    assert not is_perfect(top)


def test_perfect_rejects_deeper_right_side():
    top = Node(1)
    top.insert_left(2)
    right = top.insert_right(3)
    right.insert_left(4)
    right.insert_right(5)
    assert is_full(top)
    assert not is_perfect(top)


def test_full_example():
    top = _sample()
    assert not is_full(top)
    assert is_full(top.left)
    assert not is_full(top.right)


def test_balance_is_left_minus_right():
    top = Node(1)
    left = top.insert_left(2)
    left.insert_left(3)
    right = top.insert_right(4)
    assert balance(top) == height(left) - height(right)
    assert balance(right) == 0


def test_deep_tree_measures_without_recursion_limit():
    top, tip = _chain(5000)
    assert height(top) == tip.depth()
    assert size(top) == 5000
    assert not is_perfect(top)