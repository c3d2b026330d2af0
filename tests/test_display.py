"""
Tests for the display helpers and the show_tree script.
"""

import pytest

import show_tree
from rbtree.display import in_order, render


class TestInOrder:
    """Tests for the successor-based walk."""

    def test_empty_tree(self, tree):
        assert list(in_order(tree)) == []

    def test_sorted_output(self, make_tree):
        tree = make_tree([8, 3, 10, 1, 6, 14, 4, 7, 13])
        assert list(in_order(tree)) == [1, 3, 4, 6, 7, 8, 10, 13, 14]

    def test_is_lazy(self, ascending_tree):
        walk = in_order(ascending_tree)
        assert next(walk) == 1
        assert next(walk) == 2


class TestRender:
    """Tests for the indented text rendering."""

    def test_empty_tree(self, tree):
        assert render(tree) == ["(empty)"]

    def test_three_nodes(self, make_tree):
        assert render(make_tree([10, 20, 30])) == ["B:20", "  R:10", "  R:30"]

    def test_ascending_tree(self, ascending_tree):
        assert render(ascending_tree) == [
            "B:2",
            "  B:1",
            "  R:4",
            "    B:3",
            "    B:6",
            "      R:5",
            "      R:7",
        ]


class TestShowTree:
    """Tests for the command-line entry point."""

    def test_prints_tree_and_values(self, capsys):
        assert show_tree.main(["30", "10", "20"]) == 0
        out = capsys.readouterr().out
        assert out == "B:20\n  R:10\n  R:30\n10 20 30\n"

    def test_words(self, capsys):
        assert show_tree.main(["pear", "apple"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "apple pear"

    def test_usage_without_arguments(self, capsys):
        assert show_tree.main([]) == 2
        assert "usage" in capsys.readouterr().err

    def test_mixed_types_fail(self):
        assert show_tree.main(["1", "one"]) == 1

    @pytest.mark.parametrize("raw,expected", [("7", 7), ("-3", -3), ("x", "x")])
    def test_parse_value(self, raw, expected):
        assert show_tree.parse_value(raw) == expected
