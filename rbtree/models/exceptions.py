"""
Custom exceptions for the red-black tree.
"""

from typing import Any


class RotationError(ValueError):
    """
    Raised when a rotation is requested around a missing child.

    Rotating left needs a real right child and rotating right needs a real
    left child. Anything else is a caller bug.
    """

    def __init__(self, direction: str, value: Any):
        """
        Initialize rotation error.

        Args:
            direction: "left" or "right".
            value: Value held by the node the rotation was requested on.
        """
        self.direction = direction
        self.value = value
        child = "right" if direction == "left" else "left"
        super().__init__(
            f"Cannot rotate {direction} around {value!r}: {child} child is the sentinel"
        )


class InvariantViolationError(AssertionError):
    """Raised when a structural check finds a broken red-black property."""

    def __init__(self, rule: str, value: Any = None):
        self.rule = rule
        self.value = value
        super().__init__(f"Red-black invariant violated at {value!r}: {rule}")
