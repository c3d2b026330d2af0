"""
Red-black tree with a shared sentinel node.

This package provides an insert-only ordered container with:
- add(value) - O(log N) insertion, duplicates allowed
- rotate_left/rotate_right - constant-time local restructuring
- Node.successor() - in-order successor lookup
- validate() - structural check of the red-black properties
"""

from rbtree.models.node import Color, Node
from rbtree.models.sortedcontainers import RedBlackTree

__all__ = ["RedBlackTree", "Node", "Color"]
