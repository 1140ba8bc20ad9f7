"""Binary tree node with parent links and basic structural operations."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def _replace_in_parent(self, old_parent: Optional[Node], pivot: Node) -> None:
        pivot.parent = old_parent
        if old_parent is not None:
            if old_parent.left is self:
                old_parent.left = pivot
            else:
                old_parent.right = pivot

    def rotate_left(self) -> Node:
        """Rotate left around this node and return the new subtree root."""
        pivot = self.right
        if pivot is None:
            raise ValueError("cannot rotate left: node has no right child")
        moved = pivot.left
        pivot.left = self
        self.right = moved
        if moved is not None:
            moved.parent = self
        old_parent = self.parent
        self.parent = pivot
        self._replace_in_parent(old_parent, pivot)
        return pivot

    def rotate_right(self) -> Node:
        """Rotate right around this node and return the new subtree root."""
        pivot = self.left
        if pivot is None:
            raise ValueError("cannot rotate right: node has no left child")
        moved = pivot.right
        pivot.right = self
        self.left = moved
        if moved is not None:
            moved.parent = self
        old_parent = self.parent
        self.parent = pivot
        self._replace_in_parent(old_parent, pivot)
        return pivot