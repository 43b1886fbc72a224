# bintree

A small library of binary tree nodes. Each node keeps a link to its parent.
It provides insertion, traversals, structural measures and a plain-text
renderer.

## Installing

```
pip install .
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place; 402 becomes its right child
```

`Node(value, parent=None)` records its parent but does not attach itself to
it. To attach it, assign it to `parent.left` or `parent.right`, or use
`insert_left` / `insert_right`. These two create the child and attach it.

When `insert_left` or `insert_right` finds a child already in that position,
the new node takes its place. The old child then becomes the new node's child
on the same side.

Relations between nodes:

```python
left.is_leaf()      # False (it has the child 54)
root.is_root()      # True
left.depth()        # 1, the number of edges up to the root
left.sibling()      # the node holding 128
root.sibling()      # None
left.right.uncle()  # the node holding 128, the sibling of its parent
```

`delete()` detaches a node from its parent. It then takes apart the node's
whole subtree and clears every parent and child link in it.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each traversal is a generator that yields the node values in its order. An
empty tree (`None`) yields nothing.

## Measures

```python
from bintree.measures import height, size, leaves, nodes, balance, is_full, is_perfect

height(root)      # edges on the longest downward path; 0 for None or a single node
size(root)        # number of nodes
leaves(root)      # nodes with no children
nodes(root)       # nodes with children (see below)
balance(root)     # height of the left subtree minus height of the right
is_full(root)     # every node has zero or two children
is_perfect(root)  # full, with all leaves at one depth
```

`nodes` counts nodes that have at least one child. It counts a node with only
one child as 1 and does not look further into that node's subtree.
`is_full(None)` and `is_perfect(None)` return `False`.

## Rendering

```python
from bintree.render import render, print_tree

print(render(root), end="")
print_tree(root)                 # writes to standard output
print_tree(root, file=some_file) # or to any text stream
```

`render` returns the diagram as a string with one line for each level of the
tree. Every line ends with a newline, and an empty tree gives `""`. Each node
appears as its value padded to three digits in parentheses, for example
`(098)`. Dotted connector lines join each node to its children.

## What it does not do

This package is a library only. It has no command-line tool and does not
store trees anywhere. It does not keep its nodes in any order, so it is not a
search tree.