"""
Read-only views over a RedBlackTree built on node accessors.
"""

from collections.abc import Iterator
from typing import Any

from rbtree.models.node import Node
from rbtree.models.sortedcontainers import RedBlackTree


def in_order(tree: RedBlackTree) -> Iterator[Any]:
    """
    Yield stored values in sorted order by following successor links.

    The tree must not be modified while the generator is live.
    """
    node = tree.minimum()
    while node is not tree.nil:
        yield node.value
        node = node.successor()


def render(tree: RedBlackTree) -> list[str]:
    """
    Render the tree one node per line, children indented under parents.

    Left subtrees are listed before right subtrees. Each line reads
    "<color>:<value>", e.g. "B:20".
    """
    if tree.is_empty():
        return ["(empty)"]

    lines: list[str] = []
    stack: list[tuple[Node, int]] = [(tree.root, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(f"{'  ' * depth}{node.color_name()}:{node.value}")
        if not node.is_right_free():
            stack.append((node.right, depth + 1))
        if not node.is_left_free():
            stack.append((node.left, depth + 1))
    return lines
