"""Binary trees, search trees, AVL trees and max heaps on linked nodes."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "printing", "properties", "bst", "avl", "heap"]