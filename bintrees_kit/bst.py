"""Binary search tree operations on parent-linked nodes."""

from __future__ import annotations

from typing import Iterable, Optional

from bintrees_kit.node import Node


def _within(tree: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if tree is None:
        return True
    if low is not None and tree.value < low:
        return False
    if high is not None and tree.value > high:
        return False
    return _within(tree.left, low, tree.value - 1) and _within(
        tree.right, tree.value + 1, high
    )


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree without duplicates; False for None."""
    return tree is not None and _within(tree, None, None)


def insert(root: Optional[Node], value: int) -> Optional[Node]:
    """Insert value and return the new node, or None if the value is already present.

    When root is None the returned node is the root of a new tree.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, node)
                return node.right
            node = node.right
        else:
            return None


def from_array(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting values in order, skipping repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        node = insert(root, value)
        if root is None:
            root = node
    return root


def search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding value, or None if it is absent."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if node.value > value else node.right
    return None


def _minimum(tree: Node) -> Node:
    while tree.left is not None:
        tree = tree.left
    return tree


def remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value from the tree and return the new root.

    A node with two children takes the value of its in-order successor,
    which is removed instead. Raises KeyError if the value is absent.
    """
    node = search(root, value)
    if node is None:
        raise KeyError(value)
    if node.left is not None and node.right is not None:
        successor = _minimum(node.right)
        node.value = successor.value
        node = successor
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    node.parent = node.left = node.right = None
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root