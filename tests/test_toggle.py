"""Tests for the mode-aware ToggleEngine."""

import pytest

from dazzletreeselect import SelectionMode, TreeNode
from dazzletreeselect.index import TreeIndex
from dazzletreeselect.toggle import ToggleEngine

CASCADE = SelectionMode.CASCADE
TOP = SelectionMode.TOP_LEVEL_ONLY


@pytest.fixture
def engine():
    return ToggleEngine()


def node(tree, node_id):
    return TreeIndex.build(tree).get(node_id)


class TestCascadeToggle:

    def test_check_adds_subtree(self, engine, fruits):
        result = engine.toggle(node(fruits, "citrus"), True, frozenset(), CASCADE, fruits)
        assert result == {"citrus", "orange", "lemon"}

    def test_uncheck_removes_subtree(self, engine, fruits):
        start = frozenset({"citrus", "orange", "lemon", "apple"})
        result = engine.toggle(node(fruits, "citrus"), False, start, CASCADE, fruits)
        assert result == {"apple"}

    def test_uncheck_child_leaves_parent(self, engine, fruits):
        """Ancestors are not touched; closure is only restored downward."""
        start = frozenset({"citrus", "orange", "lemon"})
        result = engine.toggle(node(fruits, "orange"), False, start, CASCADE, fruits)
        assert result == {"citrus", "lemon"}

    def test_check_restores_partial_subtree(self, engine, fruits):
        start = frozenset({"citrus", "lemon"})
        result = engine.toggle(node(fruits, "citrus"), True, start, CASCADE, fruits)
        assert result == {"citrus", "orange", "lemon"}


class TestTopLevelOnlyToggle:

    def test_check_drops_selected_descendants(self, engine, produce):
        start = frozenset({"orange", "pink-grapefruit", "carrot"})
        result = engine.toggle(node(produce, "citrus"), True, start, TOP, produce)
        assert result == {"citrus", "carrot"}

    def test_check_under_selected_ancestor_is_noop(self, engine, produce):
        start = frozenset({"fruits"})
        result = engine.toggle(node(produce, "lemon"), True, start, TOP, produce)
        assert result == {"fruits"}

    def test_uncheck_keeps_descendants(self, engine, fruits):
        # Not canonical for TOP_LEVEL_ONLY, but uncheck must only remove the node
        start = frozenset({"citrus", "orange"})
        result = engine.toggle(node(fruits, "citrus"), False, start, TOP, fruits)
        assert result == {"orange"}

    def test_uncheck_unselected_is_harmless(self, engine, fruits):
        start = frozenset({"apple"})
        assert engine.toggle(node(fruits, "banana"), False, start, TOP, fruits) == {"apple"}


class TestToggleContract:

    @pytest.mark.parametrize("mode", list(SelectionMode))
    def test_input_not_mutated(self, engine, fruits, mode):
        start = {"apple"}
        engine.toggle(node(fruits, "citrus"), True, start, mode, fruits)
        assert start == {"apple"}

    @pytest.mark.parametrize("mode", list(SelectionMode))
    @pytest.mark.parametrize("node_id", ["apple", "citrus", "fruits", "lemon"])
    def test_round_trip(self, engine, produce, mode, node_id):
        """Check then uncheck a node with no selected relatives restores the set."""
        start = frozenset({"carrot", "dairy"})
        target = node(produce, node_id)
        checked = engine.toggle(target, True, start, mode, produce)
        assert target.id in checked
        assert engine.toggle(target, False, checked, mode, produce) == start

    @pytest.mark.parametrize("mode", list(SelectionMode))
    def test_accepts_identifier(self, engine, fruits, mode):
        by_node = engine.toggle(node(fruits, "citrus"), True, frozenset(), mode, fruits)
        by_id = engine.toggle("citrus", True, frozenset(), mode, fruits)
        assert by_node == by_id

    @pytest.mark.parametrize("mode", list(SelectionMode))
    def test_unknown_identifier_is_standalone_leaf(self, engine, fruits, mode):
        result = engine.toggle("ghost", True, frozenset({"apple"}), mode, fruits)
        assert result == {"apple", "ghost"}
        assert engine.toggle("ghost", False, result, mode, fruits) == {"apple"}

    def test_label_is_ignored(self, engine, fruits):
        relabeled = TreeNode("citrus", "Something Else", [TreeNode("orange"), TreeNode("lemon")])
        assert engine.toggle(relabeled, True, frozenset(), CASCADE, fruits) == {
            "citrus", "orange", "lemon"
        }
