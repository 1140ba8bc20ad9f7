# bintrees_kit

This package provides linked binary trees with parent pointers. It also
provides three structures built on those trees: binary search trees, AVL
trees and max binary heaps.

Every tree is made of `Node` objects. A node holds an integer `value` and
references to its `parent`, `left` child and `right` child. Functions that
may change the root return the new root, so keep using what they return.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building trees by hand

```python
from bintrees_kit.node import Node
from bintrees_kit.printing import print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.right.insert_left(128)

print_tree(root)
```

`insert_left` and `insert_right` return the new node. If the node already
had a child on that side, the old child moves down below the new node on the
same side.

`Node` has these other methods:

- `is_leaf()` returns whether the node has no children.
- `is_root()` returns whether the node has no parent.
- `depth()` returns the number of edges up to the root.
- `sibling()` returns the other child of the parent, or `None`.
- `uncle()` returns the sibling of the parent, or `None`.
- `rotate_left()` and `rotate_right()` rotate the tree around the node and
  return the node that takes its place. They raise `ValueError` when the
  child they need is missing.

`print_tree(tree, file=None)` draws the tree as text, one line per level,
with each value shown as `(NNN)`. It writes to standard output unless you
pass a file. `render(tree)` returns the same drawing as a string. For `None`
it returns an empty string.

## Walking and measuring

```python
from bintrees_kit import traversal, properties

list(traversal.preorder(root))
list(traversal.inorder(root))
list(traversal.postorder(root))
list(traversal.levelorder(root))

properties.height(root)          # edges on the longest downward path
properties.size(root)            # number of nodes
properties.leaves(root)          # nodes without children
properties.inner_nodes(root)     # nodes with at least one child
properties.balance(root)         # left subtree height minus right
properties.is_full(root)
properties.is_perfect(root)
properties.is_complete(root)
properties.lowest_common_ancestor(root.left, root.right)
```

The traversals are generators that yield node values. For an empty tree
(`None`), the measurements return `0` and the shape checks return `False`.
`lowest_common_ancestor` counts a node as its own ancestor. It returns `None`
if either node is `None` or if the two nodes are in different trees.

## Search trees

```python
from bintrees_kit import bst, avl

tree = bst.from_array([98, 402, 12, 46, 128, 256, 512, 50])
bst.search(tree, 128)            # the node, or None
bst.insert(tree, 7)              # the new node, or None if 7 is already present
tree = bst.remove(tree, 98)
bst.is_bst(tree)

balanced = avl.from_array([98, 402, 12, 46, 128, 256, 512, 50])
balanced, new_node = avl.insert(balanced, 7)
balanced = avl.remove(balanced, 128)
avl.is_avl(balanced)
avl.from_sorted([1, 2, 3, 4, 5, 6, 7])
```

Functions that build a tree from a sequence ignore duplicate values.

When you call `bst.insert(None, value)`, the node it returns is the root of a
new tree.

`avl.insert` returns a pair `(new_root, new_node)`. `new_node` is `None` if
the value was already present.

Both `bst.remove` and `avl.remove` raise `KeyError` when the value is absent.
When a node with two children is removed, it takes the value of its in-order
successor, and the successor node is removed in its place.

## Max binary heaps

```python
from bintrees_kit import heap

h = heap.from_array([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
heap.is_heap(h)
h, node = heap.insert(h, 100)    # node ends up holding 100
top, h = heap.extract(h)         # largest value and the new root
heap.to_sorted_list(h)           # empties the heap, values in descending order
```

`heap.extract` raises `IndexError` when the heap is empty (`None`).

## What it does not do

This package is a library only. It has no command-line tool. It also has no
way to save trees to disk or load them back.