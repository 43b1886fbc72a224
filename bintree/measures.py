"""Size, shape and balance measurements of binary trees."""

from __future__ import annotations

from typing import Optional

from .node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path down to a leaf.

    An empty tree and a single node both have height 0.
    """
    if tree is None or tree.is_leaf():
        return 0
    return max(height(tree.left), height(tree.right)) + 1


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return size(tree.left) + size(tree.right) + 1


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in the tree."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def nodes(tree: Optional[Node]) -> int:
    """Count nodes that have at least one child.

    A node with a single child counts as one and its subtree is not
    examined further.
    """
    if tree is None or tree.is_leaf():
        return 0
    if tree.left is None or tree.right is None:
        return 1
    return nodes(tree.left) + nodes(tree.right) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right."""
    if tree is None:
        return 0
    return height(tree.left) - height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one level."""
    if tree is None:
        return False
    if height(tree.left) != height(tree.right):
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_perfect(tree.left) and is_perfect(tree.right)
    return False