# bintree

A small library of binary tree building blocks. It has nodes that link to their
parent, the four standard traversals, shape metrics, ancestry queries and a
plain-text rendering of a tree.

## Installation

```
pip install .
```

## Building a tree

`bintree.node.Node` holds an integer `value` and links to its `parent`, `left`
and `right`. Passing `parent=` to the constructor only records the parent. The
parent's child links are not changed, so you attach the node yourself.

`insert_left(value)` and `insert_right(value)` create a new child and return
it. If that side already had a child, the old child moves down under the new
node, on the same side.

```python
from bintree.node import Node

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)

root.left.insert_right(54)
root.insert_right(128)   # 402 becomes the right child of 128

root.is_root()           # True: no parent
root.right.is_leaf()     # False: 128 has 402 below it
```

`delete()` detaches a node's subtree from its parent. It also clears the
`parent`, `left` and `right` links of every node in that subtree.

## Traversals

Each traversal is a generator over the values in the tree. An empty tree
(`None`) yields nothing.

```python
from bintree.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))     # root, left subtree, right subtree
list(inorder(root))      # left subtree, root, right subtree
list(postorder(root))    # left subtree, right subtree, root
list(levelorder(root))   # breadth first, left to right
```

## Metrics

```python
from bintree.metrics import (
    height, size, leaves, inner_nodes, balance, is_full, is_perfect,
)

height(root)       # edges on the longest downward path; 0 for a leaf or None
size(root)         # number of nodes
leaves(root)       # nodes with no children
inner_nodes(root)  # nodes with at least one child
balance(root)      # left subtree height minus right subtree height; 0 for None
is_full(root)      # every node has zero or two children; False for None
is_perfect(root)   # every level completely filled; False for None
```

## Ancestry

```python
from bintree.ancestry import depth, uncle, lowest_common_ancestor

depth(root.left.right)                          # 2
uncle(root.left.right)                          # the node holding 128
lowest_common_ancestor(root.left, root.right)   # root
```

`depth(None)` is 0. `uncle` and `lowest_common_ancestor` return `None` when
there is no such node. A node counts as its own ancestor, so
`lowest_common_ancestor(root, root.left)` is `root`.

## Rendering

`render` returns the tree as text turned on its side, one node per line. The
right subtree is drawn above its parent and the left subtree below it. Each
level is indented by four more spaces. `print_tree` writes the same text to a
file, or to standard output if no file is given. An empty tree renders as an
empty string.

```python
import sys
from bintree.display import render, print_tree

text = render(root)
print_tree(root, sys.stdout)
```

## What it does not do

This is a library only. It has no command-line tool. It does not keep trees
ordered as search trees, balance them or rotate them. Trees live in memory and
are not saved anywhere.

## Running the tests

```
pip install .[test]
pytest
```