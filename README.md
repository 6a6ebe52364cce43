# bintree

This package provides plain binary trees made of linked `Node` objects. Each node stores an
integer value and links to its parent and its two children. The package also provides
traversals, structural metrics and an ASCII drawing of a tree.

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # 128 becomes the right child; 402 moves down to its right
```

`insert_left` and `insert_right` create a node, put it in the left or right slot and
return it. If the slot already holds a child, that child becomes the same-side child of the
new node.

`Node(value, parent)` records only the parent link. It leaves the parent's child slots
unchanged, so you must assign `parent.left` or `parent.right` yourself.

A node can tell you about its place in the tree:

- `is_leaf()` is true when the node has no children.
- `is_root()` is true when the node has no parent.
- `depth()` counts the edges from the node up to its root.
- `sibling()` returns the other child of the node's parent, or `None`.
- `uncle()` returns the sibling of the node's parent, or `None`.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each function returns an iterator over the node values in its order. An empty tree
(`None`) yields no values.

## Metrics

Every function in `bintree.metrics` takes a root node or `None`.

```python
from bintree.metrics import (
    height, size, leaves, internal_nodes, balance, is_full, is_perfect,
)

height(root)          # edges on the longest downward path; 0 for a single node or None
size(root)            # number of nodes
leaves(root)          # nodes with no children
internal_nodes(root)  # nodes with at least one child
balance(root)         # levels in the left subtree minus levels in the right; 0 for None
is_full(root)         # every node has zero or two children; False for None
is_perfect(root)      # full, with every leaf on the same level; False for None
```

## Drawing

```python
from bintree.render import render, print_tree

text = render(root)   # the whole drawing as one string, each line ending in "\n"
print_tree(root)      # writes the same text to standard output
```

Each value appears zero-padded to three digits, for example `(098)`. Dots and dashes link
every parent to its children. The drawing has one line for each level of the tree, and
trailing spaces are removed from every line. `render(None)` returns an empty string.

The tree `98 -> (12 -> 10, 54), (128 -> 110, 402)` is drawn like this:

```
       .-------(098)-------.
  .--(012)--.         .--(128)--.
(010)     (054)     (110)     (402)
```

## Demonstrations

The `bintree-demo` command runs one of the built-in example scenarios. Pass the number of
the scenario you want:

```
bintree-demo 14
```

The scenarios are numbered 0–7 and 9–18. Each one builds a tree, prints its drawing and
then prints what one operation reports about certain nodes. The operations include
insertion, traversal, the metrics and the family lookups. From Python,
`bintree.demo.run_demo(number, out)` writes a scenario to any text stream. An unknown
number raises `ValueError`.