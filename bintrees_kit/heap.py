"""Max binary heap operations on parent-linked nodes."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from bintrees_kit.node import Node
from bintrees_kit.properties import is_complete, size


def _ordered(tree: Optional[Node]) -> bool:
    if tree is None:
        return True
    if tree.parent is not None and tree.value > tree.parent.value:
        return False
    return _ordered(tree.left) and _ordered(tree.right)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and no child exceeds its parent; False for None."""
    if not is_complete(tree):
        return False
    return _ordered(tree.left) and _ordered(tree.right)


def _node_at(root: Node, position: int) -> Node:
    """Return the node at a 1-based level-order position of a complete tree."""
    node = root
    for bit in bin(position)[3:]:
        node = node.right if bit == "1" else node.left
    return node


def insert(root: Optional[Node], value: int) -> Tuple[Node, Node]:
    """Insert value and sift it up.

    Returns (root, node) where node is the one that ends up holding value.
    """
    if root is None:
        new = Node(value)
        return new, new
    position = size(root) + 1
    parent = _node_at(root, position // 2)
    node = Node(value, parent)
    if position & 1:
        parent.right = node
    else:
        parent.left = node
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return root, node


def from_array(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting values in order."""
    root: Optional[Node] = None
    for value in values:
        root, _ = insert(root, value)
    return root


def extract(root: Optional[Node]) -> Tuple[int, Optional[Node]]:
    """Remove the largest value; return (value, new_root).

    Raises IndexError if the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    top = root.value
    count = size(root)
    if count == 1:
        return top, None
    last = _node_at(root, count)
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    root.value = last.value

    node = root
    while True:
        child = node.left
        if node.right is not None and (child is None or node.right.value > child.value):
            child = node.right
        if child is None or child.value <= node.value:
            break
        node.value, child.value = child.value, node.value
        node = child
    return top, root


def to_sorted_list(heap: Optional[Node]) -> List[int]:
    """Empty the heap and return its values in descending order."""
    result: List[int] = []
    while heap is not None:
        value, heap = extract(heap)
        result.append(value)
    return result