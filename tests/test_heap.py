import pytest

from bintrees_kit import heap
from bintrees_kit.node import Node
from bintrees_kit.properties import is_complete, size
from bintrees_kit.traversal import levelorder

SAMPLE = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def test_insert_into_empty_creates_root():
    root, node = heap.insert(None, 98)
    assert root is node
    assert root.value == 98
    assert root.parent is None


def test_insert_returns_node_holding_value():
    root = heap.from_array([10, 5, 3])
    root, node = heap.insert(root, 7)
    assert node.value == 7
    assert heap.is_heap(root)
    assert size(root) == 4


def test_insert_larger_value_rises_to_root():
    root = heap.from_array([10, 5, 3])
    root, node = heap.insert(root, 50)
    assert node is root
    assert root.value == 50
    assert heap.is_heap(root)


def test_from_array_small_layout():
    root = heap.from_array([1, 2, 3])
    assert list(levelorder(root)) == [3, 1, 2]


def test_from_array_builds_heap():
    root = heap.from_array(SAMPLE)
    assert heap.is_heap(root)
    assert size(root) == len(SAMPLE)
    assert root.value == max(SAMPLE)
    assert sorted(levelorder(root)) == sorted(SAMPLE)


def test_from_array_empty():
    assert heap.from_array([]) is None


def test_is_heap_none_is_false():
    assert heap.is_heap(None) is False


def test_is_heap_single_node():
    assert heap.is_heap(Node(5)) is True


def test_is_heap_child_greater_than_parent():
    root = Node(5)
    root.insert_left(9)
    assert heap.is_heap(root) is False


def test_is_heap_incomplete_tree():
    root = Node(50)
    root.insert_right(10)
    assert heap.is_heap(root) is False


def test_is_heap_equal_values_allowed():
    root = Node(5)
    root.insert_left(5)
    root.insert_right(5)
    assert heap.is_heap(root) is True


def test_extract_empty_raises():
    with pytest.raises(IndexError):
        heap.extract(None)


def test_extract_single_node():
    value, root = heap.extract(Node(42))
    assert value == 42
    assert root is None


def test_extract_keeps_heap_property():
    root = heap.from_array(SAMPLE)
    remaining = sorted(SAMPLE, reverse=True)
    while root is not None:
        value, root = heap.extract(root)
        assert value == remaining.pop(0)
        if root is not None:
            assert heap.is_heap(root)
            assert is_complete(root)
            assert size(root) == len(remaining)
    assert remaining == []


def test_to_sorted_list_descending():
    root = heap.from_array(SAMPLE)
    assert heap.to_sorted_list(root) == sorted(SAMPLE, reverse=True)


def test_to_sorted_list_with_duplicates():
    values = [4, 4, 1, 9, 1, 9, 0]
    assert heap.to_sorted_list(heap.from_array(values)) == sorted(values, reverse=True)


def test_to_sorted_list_empty():
    assert heap.to_sorted_list(None) == []