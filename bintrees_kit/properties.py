"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from bintrees_kit.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _levels(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def inner_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + inner_nodes(tree.left) + inner_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right; 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def _full(tree: Optional[Node]) -> bool:
    if tree is None:
        return True
    if (tree.left is None) != (tree.right is None):
        return False
    return _full(tree.left) and _full(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has zero or two children; False for None."""
    return tree is not None and _full(tree)


def _first_leaf_level(tree: Node) -> int:
    level = 0
    node = tree
    while not node.is_leaf():
        node = node.left if node.left is not None else node.right
        level += 1
    return level


def _perfect(tree: Node, leaf_level: int, level: int) -> bool:
    if tree.is_leaf():
        return level == leaf_level
    if tree.left is None or tree.right is None:
        return False
    return _perfect(tree.left, leaf_level, level + 1) and _perfect(
        tree.right, leaf_level, level + 1
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all inner nodes have two children and all leaves share a level."""
    if tree is None:
        return False
    return _perfect(tree, _first_leaf_level(tree), 0)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both (a node is its own ancestor).

    Returns None if either node is None or they belong to different trees.
    """
    if first is None or second is None:
        return None
    ancestors = set()
    node: Optional[Node] = first
    while node is not None:
        ancestors.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in ancestors:
            return node
        node = node.parent
    return None