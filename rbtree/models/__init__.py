"""
Data models for the red-black tree.
"""

from rbtree.models.exceptions import InvariantViolationError, RotationError
from rbtree.models.node import Color, Node

__all__ = [
    "Color",
    "Node",
    "RotationError",
    "InvariantViolationError",
]
