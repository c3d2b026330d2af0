"""
Node and Color for the Red-Black Tree.

Every node keeps a reference to the sentinel of the tree it belongs to, so
free-checks never need to look at the tree itself.
"""

import copy as _copy
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1
    NONE = 2  # Default-constructed, not yet linked


@dataclass(eq=False, repr=False)
class Node:
    """
    Node in the Red-Black Tree.

    Attributes:
        value: The stored element (None for the sentinel and an empty root).
        color: Node color.
        parent: Parent node, the sentinel, or None when unset.
        left: Left child, the sentinel, or None when unset.
        right: Right child, the sentinel, or None when unset.
        nil: Sentinel of the owning tree.
    """

    value: Any = None
    color: Color = Color.NONE
    parent: "Node | None" = None
    left: "Node | None" = None
    right: "Node | None" = None
    nil: "Node | None" = None

    def __repr__(self) -> str:
        if self.is_sentinel():
            return "Node(nil)"
        return f"Node({self.value!r}, {self.color.name})"

    def is_sentinel(self) -> bool:
        return self.nil is self

    def is_free(self) -> bool:
        return self.value is None or self.is_sentinel()

    def is_left_free(self) -> bool:
        return self.left is None or self.left is self.nil

    def is_right_free(self) -> bool:
        return self.right is None or self.right is self.nil

    def is_parent_free(self) -> bool:
        return self.parent is None or self.parent is self.nil

    def set_value(self, value: Any) -> None:
        self.value = value

    def set_parent(self, node: "Node | None") -> None:
        self.parent = node

    def set_left(self, node: "Node | None") -> None:
        """Attach a left child and point its parent link back here."""
        self.left = node
        if node is not None and node is not self.nil:
            node.parent = self

    def set_right(self, node: "Node | None") -> None:
        """Attach a right child and point its parent link back here."""
        self.right = node
        if node is not None and node is not self.nil:
            node.parent = self

    def set_color(self, color: Color) -> None:
        self.color = color

    def is_red(self) -> bool:
        return self.color == Color.RED

    def is_black(self) -> bool:
        return self.color == Color.BLACK

    def make_red(self) -> None:
        self.color = Color.RED

    def make_black(self) -> None:
        self.color = Color.BLACK

    def color_name(self) -> str:
        return "B" if self.is_black() else "R"

    def grandparent(self) -> "Node | None":
        """Return the parent's parent, or None if there is no real parent."""
        if self.is_parent_free():
            return None
        return self.parent.parent

    def uncle(self) -> "Node | None":
        """Return the sibling of this node's parent, or None."""
        grand = self.grandparent()
        if grand is None:
            return None
        if grand.left is self.parent:
            return grand.right
        if grand.right is self.parent:
            return grand.left
        return None

    def successor(self) -> "Node | None":
        """
        Return the node holding the next value in sorted order.

        Returns:
            The successor node, or the sentinel if this is the maximum.
        """
        if not self.is_right_free():
            current = self.right
            while not current.is_left_free():
                current = current.left
            return current

        node = self
        ancestor = self.parent
        while ancestor is not None and ancestor is not self.nil and node is ancestor.right:
            node = ancestor
            ancestor = ancestor.parent
        return self.nil if ancestor is None else ancestor

    def copy(self) -> "Node":
        """Shallow copy sharing value, color, links and sentinel."""
        return _copy.copy(self)
