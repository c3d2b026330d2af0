"""
Shared pytest fixtures for red-black tree tests.
"""

import logging

import pytest

from rbtree import RedBlackTree


@pytest.fixture
def tree():
    """Provide an empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def make_tree():
    """Provide a factory building a tree from a sequence of values."""

    def _make(values, compare=None):
        built = RedBlackTree(compare=compare)
        for value in values:
            built.add(value)
        return built

    return _make


@pytest.fixture
def ascending_tree(make_tree):
    """
    Provide the tree built from 1..7 inserted in increasing order.

    Shape: 2B(1B, 4R(3B, 6B(5R, 7R)))
    """
    return make_tree(range(1, 8))


@pytest.fixture
def rotation_log(caplog):
    """Capture DEBUG records from the rbtree package."""
    caplog.set_level(logging.DEBUG, logger="rbtree")
    return caplog


@pytest.fixture
def find_node():
    """Provide a lookup returning the first node holding a value."""

    def _find(tree, value):
        node = tree.minimum()
        while node is not tree.nil:
            if node.value == value:
                return node
            node = node.successor()
        raise LookupError(value)

    return _find
