"""
OrderedContainer abstract base class for insert-only ordered containers.
"""

from abc import ABC, abstractmethod
from typing import Any


class OrderedContainer(ABC):
    """
    Abstract base class for ordered containers that accept duplicates.

    Provides O(log N) insertion. Values must support a total order.
    Traversal is left to callers: containers expose their extreme nodes and
    each node knows its successor.

    Implementations:
    - RedBlackTree: sentinel-based red-black tree
    """

    @abstractmethod
    def add(self, value: Any) -> Any:
        """
        Insert a value. Equal values are kept side by side.

        Args:
            value: The value to insert.

        Returns:
            The node holding the inserted value.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored values.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def minimum(self) -> Any:
        """
        Return the node holding the smallest value.

        Returns:
            The leftmost node, or the container's sentinel when empty.
        """
        pass

    @abstractmethod
    def maximum(self) -> Any:
        """
        Return the node holding the largest value.

        Returns:
            The rightmost node, or the container's sentinel when empty.
        """
        pass
