"""Binary tree node with parent links and structural queries."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it to that
    parent; assign it to ``parent.left`` or ``parent.right``, or use
    :meth:`insert_left` / :meth:`insert_right`.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        new_node = Node(value, self)
        if self.left is not None:
            new_node.left = self.left
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        new_node = Node(value, self)
        if self.right is not None:
            new_node.right = self.right
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def delete(self) -> None:
        """Detach this node from its parent and dismantle its whole subtree."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = node.left = node.right = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges from this node up to the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        return grandparent.right if grandparent.left is parent else grandparent.left