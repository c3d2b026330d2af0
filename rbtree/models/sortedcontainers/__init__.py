"""
Sorted container implementations.
"""

from rbtree.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["RedBlackTree"]
