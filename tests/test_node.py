import pytest

from bintrees_kit.node import Node


def _check_links(node):
    """Every child must point back to its parent."""
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            _check_links(child)


def _sample():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    ll = left.insert_left(6)
    lr = left.insert_right(56)
    rl = right.insert_left(256)
    return root, left, right, ll, lr, rl


def test_new_node_fields():
    parent = Node(1)
    child = Node(2, parent)
    assert child.value == 2
    assert child.parent is parent
    assert child.left is None and child.right is None


def test_insert_left_on_empty_slot():
    root = Node(98)
    new = root.insert_left(12)
    assert root.left is new
    assert new.parent is root
    assert new.value == 12


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    _check_links(root)


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    _check_links(root)


def test_is_leaf_and_is_root():
    root, left, _, ll, _, _ = _sample()
    assert root.is_root() is True
    assert left.is_root() is False
    assert ll.is_leaf() is True
    assert left.is_leaf() is False


def test_depth():
    root, left, _, ll, _, _ = _sample()
    assert root.depth() == 0
    assert left.depth() == 1
    assert ll.depth() == 2


def test_sibling():
    root, left, right, ll, lr, rl = _sample()
    assert left.sibling() is right
    assert right.sibling() is left
    assert ll.sibling() is lr
    assert rl.sibling() is None
    assert root.sibling() is None


def test_uncle():
    root, left, right, ll, lr, rl = _sample()
    assert ll.uncle() is right
    assert rl.uncle() is left
    assert left.uncle() is None
    assert root.uncle() is None


def test_rotate_left_at_root():
    root = Node(98)
    mid = root.insert_right(128)
    top = mid.insert_right(402)
    new_root = root.rotate_left()
    assert new_root is mid
    assert mid.parent is None
    assert mid.left is root
    assert mid.right is top
    assert root.right is None
    _check_links(new_root)


def test_rotate_left_moves_inner_subtree():
    root = Node(98)
    pivot = root.insert_right(128)
    inner = pivot.insert_left(110)
    new_root = root.rotate_left()
    assert new_root is pivot
    assert root.right is inner
    assert inner.parent is root
    _check_links(new_root)


def test_rotate_right_at_root():
    root = Node(98)
    mid = root.insert_left(64)
    low = mid.insert_left(32)
    inner = mid.insert_right(80)
    new_root = root.rotate_right()
    assert new_root is mid
    assert mid.parent is None
    assert mid.left is low
    assert mid.right is root
    assert root.left is inner
    _check_links(new_root)


def test_rotation_updates_parent_link():
    top = Node(50)
    sub = top.insert_left(20)
    sub.insert_right(30)
    pivot = sub.right
    result = sub.rotate_left()
    assert result is pivot
    assert top.left is pivot
    assert pivot.parent is top
    _check_links(top)


def test_rotations_are_inverse():
    root = Node(10)
    root.insert_left(5)
    root.insert_right(20)
    root.right.insert_left(15)
    root.right.insert_right(25)
    rotated = root.rotate_left()
    restored = rotated.rotate_right()
    assert restored is root
    assert root.left.value == 5
    assert root.right.value == 20
    assert root.right.left.value == 15
    _check_links(root)


def test_rotate_without_child_raises():
    with pytest.raises(ValueError):
        Node(1).rotate_left()
    with pytest.raises(ValueError):
        Node(1).rotate_right()