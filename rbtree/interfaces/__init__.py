"""
Abstract base classes for ordered containers.
"""

from rbtree.interfaces.ordered_container import OrderedContainer

__all__ = ["OrderedContainer"]
