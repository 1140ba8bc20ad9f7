"""AVL tree operations on parent-linked nodes."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from bintrees_kit import bst
from bintrees_kit.node import Node
from bintrees_kit.properties import balance


def _valid(tree: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if tree is None:
        return True
    if low is not None and tree.value < low:
        return False
    if high is not None and tree.value > high:
        return False
    if abs(balance(tree)) > 1:
        return False
    return _valid(tree.left, low, tree.value - 1) and _valid(
        tree.right, tree.value + 1, high
    )


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a height-balanced search tree; False for None."""
    return tree is not None and _valid(tree, None, None)


def _insert(
    node: Optional[Node], parent: Optional[Node], value: int
) -> Tuple[Node, Optional[Node]]:
    if node is None:
        new = Node(value, parent)
        return new, new
    if value < node.value:
        node.left, new = _insert(node.left, node, value)
    elif value > node.value:
        node.right, new = _insert(node.right, node, value)
    else:
        return node, None
    if new is None:
        return node, None

    factor = balance(node)
    if factor > 1 and value < node.left.value:
        node = node.rotate_right()
    elif factor < -1 and value > node.right.value:
        node = node.rotate_left()
    elif factor > 1 and value > node.left.value:
        node.left = node.left.rotate_left()
        node = node.rotate_right()
    elif factor < -1 and value < node.right.value:
        node.right = node.right.rotate_right()
        node = node.rotate_left()
    return node, new


def insert(root: Optional[Node], value: int) -> Tuple[Node, Optional[Node]]:
    """Insert value, rebalancing on the way up.

    Returns (new_root, new_node); new_node is None if the value was already present.
    """
    return _insert(root, None, value)


def from_array(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting values in order, skipping repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        root, _ = insert(root, value)
    return root


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    if node is None:
        return None
    node.left = _rebalance(node.left)
    node.right = _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        if balance(node.left) < 0:
            node.left.rotate_left()
        node = node.rotate_right()
    elif factor < -1:
        if balance(node.right) > 0:
            node.right.rotate_right()
        node = node.rotate_left()
    return node


def remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value and rebalance; return the new root.

    Raises KeyError if the value is absent.
    """
    return _rebalance(bst.remove(root, value))


def _build(parent: Optional[Node], values: Sequence[int], begin: int, last: int) -> Optional[Node]:
    if begin > last:
        return None
    mid = (begin + last) // 2
    node = Node(values[mid], parent)
    node.left = _build(node, values, begin, mid - 1)
    node.right = _build(node, values, mid + 1, last)
    return node


def from_sorted(values: Sequence[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values by taking middles recursively."""
    if not values:
        return None
    return _build(None, values, 0, len(values) - 1)