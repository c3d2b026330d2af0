"""
Red-Black Tree implementation for ordered, insert-only storage.

Uses one shared sentinel node for every missing child and for the parent of
the root, so rotations and fixup never branch on None.
"""

import logging
from collections.abc import Callable
from typing import Any

from rbtree.interfaces.ordered_container import OrderedContainer
from rbtree.models.exceptions import InvariantViolationError, RotationError
from rbtree.models.node import Color, Node

logger = logging.getLogger(__name__)


class RedBlackTree(OrderedContainer):
    """
    Red-Black Tree implementation of OrderedContainer.

    Properties maintained:
    1. The sentinel is black and holds no value
    2. Root is always black
    3. Red nodes cannot have red parents
    4. Every path from a node to a sentinel has the same number of black nodes
    5. In-order traversal yields non-decreasing values

    Equal values go to the right, so duplicates are kept in insertion order.
    """

    def __init__(self, compare: Callable[[Any, Any], int] | None = None) -> None:
        """
        Initialize an empty tree.

        Args:
            compare: Optional three-way comparison returning a negative number,
                     zero or a positive number. Defaults to the values' own `<`.
        """
        if compare is not None and not callable(compare):
            raise TypeError(f"compare must be callable, got {type(compare).__name__}")

        self._compare = compare
        self._size: int = 0

        self.nil = Node(color=Color.BLACK)
        self.nil.nil = self.nil

        # Empty placeholder, filled in place by the first add()
        self.root = Node(
            color=Color.BLACK, parent=self.nil, left=self.nil, right=self.nil, nil=self.nil
        )

    def add(self, value: Any) -> Node:
        """Insert a value. O(log N)"""
        if value is None:
            raise ValueError("value cannot be None")

        parent = self.nil
        current = self.root
        while current is not None and current is not self.nil and not current.is_free():
            parent = current
            if self._less(value, current.value):
                current = current.left
            else:
                current = current.right

        if parent is self.nil:
            self.root.set_value(value)
            self.root.make_black()
            self._size += 1
            logger.debug("Populated empty root with %r", value)
            return self.root

        new_node = Node(
            value=value,
            color=Color.RED,
            left=self.nil,
            right=self.nil,
            nil=self.nil,
        )
        if self._less(value, parent.value):
            parent.set_left(new_node)
        else:
            parent.set_right(new_node)

        self._size += 1
        self._fix_insert(new_node)
        return new_node

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root.is_free()

    def minimum(self) -> Node:
        if self.is_empty():
            return self.nil
        node = self.root
        while not node.is_left_free():
            node = node.left
        return node

    def maximum(self) -> Node:
        if self.is_empty():
            return self.nil
        node = self.root
        while not node.is_right_free():
            node = node.right
        return node

    def rotate_left(self, node: Node) -> None:
        """
        Left rotation around node.

        The right child takes node's place and node becomes its left child.
        Colors are left untouched.
        """
        if node.is_right_free():
            raise RotationError("left", node.value)

        pivot = node.right
        parent = node.parent
        if not node.is_parent_free():
            if parent.left is node:
                parent.set_left(pivot)
            else:
                parent.set_right(pivot)
        else:
            self.root = pivot
            pivot.set_parent(self.nil)

        node.set_right(pivot.left)
        pivot.set_left(node)
        logger.debug("Rotated left around %r", node.value)

    def rotate_right(self, node: Node) -> None:
        """Right rotation around node, mirror of rotate_left."""
        if node.is_left_free():
            raise RotationError("right", node.value)

        pivot = node.left
        parent = node.parent
        if not node.is_parent_free():
            if parent.left is node:
                parent.set_left(pivot)
            else:
                parent.set_right(pivot)
        else:
            self.root = pivot
            pivot.set_parent(self.nil)

        node.set_left(pivot.right)
        pivot.set_right(node)
        logger.debug("Rotated right around %r", node.value)

    def height(self) -> int:
        """Edges on the longest root-to-leaf path, 0 for an empty tree."""
        if self.is_empty():
            return 0
        return self._subtree_height(self.root) - 1

    def black_height(self) -> int:
        """
        Black nodes from the root down to any sentinel, excluding the root.

        Raises:
            InvariantViolationError: If two paths disagree.
        """
        if self.is_empty():
            return 0
        root_height = self._check_subtree(self.root)
        return root_height - (1 if self.root.is_black() else 0)

    def validate(self) -> None:
        """
        Verify that every red-black property holds.

        Raises:
            InvariantViolationError: On the first broken property found.
        """
        if not self.nil.is_black():
            raise InvariantViolationError("sentinel is not black")
        if self.nil.value is not None:
            raise InvariantViolationError("sentinel holds a value", self.nil.value)
        if not self.root.is_black():
            raise InvariantViolationError("root is not black", self.root.value)
        if self.root.parent is not self.nil:
            raise InvariantViolationError("root parent is not the sentinel", self.root.value)
        if self.is_empty():
            return

        self._check_subtree(self.root)

        previous = self.minimum()
        current = previous.successor()
        while current is not self.nil:
            if self._less(current.value, previous.value):
                raise InvariantViolationError(
                    f"in-order value follows larger {previous.value!r}", current.value
                )
            previous, current = current, current.successor()

    def to_tuple(self, node: Node | None = None) -> tuple | None:
        """
        Snapshot the structure as nested (value, color, left, right) tuples.

        Sentinels become None. Two trees are structurally identical iff their
        snapshots are equal.
        """
        if node is None:
            if self.is_empty():
                return None
            node = self.root
        if node is self.nil:
            return None
        return (node.value, node.color, self.to_tuple(node.left), self.to_tuple(node.right))

    def _less(self, a: Any, b: Any) -> bool:
        if self._compare is not None:
            return self._compare(a, b) < 0
        return a < b

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while not node.is_parent_free() and node.parent.is_red():
            parent = node.parent
            grandparent = node.grandparent()

            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.is_red():
                    # Case 1: Uncle is red
                    parent.make_black()
                    uncle.make_black()
                    grandparent.make_red()
                    node = grandparent
                    logger.debug("Recolored under %r", grandparent.value)
                else:
                    if node is parent.right:
                        # Case 2: Node is inner child
                        node = parent
                        self.rotate_left(node)

                    # Case 3: Node is outer child
                    node.parent.make_black()
                    node.grandparent().make_red()
                    self.rotate_right(node.grandparent())
            else:
                uncle = grandparent.left
                if uncle.is_red():
                    parent.make_black()
                    uncle.make_black()
                    grandparent.make_red()
                    node = grandparent
                    logger.debug("Recolored under %r", grandparent.value)
                else:
                    if node is parent.left:
                        node = parent
                        self.rotate_right(node)

                    node.parent.make_black()
                    node.grandparent().make_red()
                    self.rotate_left(node.grandparent())

        self.root.make_black()

    def _subtree_height(self, node: Node) -> int:
        if node is self.nil:
            return 0
        return 1 + max(self._subtree_height(node.left), self._subtree_height(node.right))

    def _check_subtree(self, node: Node) -> int:
        """Check colors and links below node; return its black height."""
        if node is self.nil:
            return 1

        if node.color not in (Color.RED, Color.BLACK):
            raise InvariantViolationError("node is uncolored", node.value)
        if node.is_red() and node.parent.is_red():
            raise InvariantViolationError("red node has a red parent", node.value)

        for child in (node.left, node.right):
            if child is None:
                raise InvariantViolationError("child link is unset", node.value)
            if child is not self.nil and child.parent is not node:
                raise InvariantViolationError("child does not point back to parent", child.value)

        left_height = self._check_subtree(node.left)
        right_height = self._check_subtree(node.right)
        if left_height != right_height:
            raise InvariantViolationError(
                f"black height mismatch (left={left_height}, right={right_height})", node.value
            )
        return left_height + (1 if node.is_black() else 0)
