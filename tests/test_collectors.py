"""Unit tests for data collectors."""

import unittest

from dazzletreeselect import TreeNode
from dazzletreeselect.core.collector import (
    DescendantCollector,
    IdentifierCollector,
)
from dazzletreeselect.index import TreeIndex
from dazzletreeselect.testing import produce_tree


class TestDescendantCollector(unittest.TestCase):
    """Test collection of descendant identifiers."""

    def setUp(self):
        self.tree = produce_tree()
        self.index = TreeIndex.build(self.tree)
        self.collector = DescendantCollector()

    def test_excludes_node_itself(self):
        ids = self.collector.collect(self.index.get("citrus"))
        self.assertNotIn("citrus", ids)

    def test_pre_order(self):
        ids = self.collector.collect(self.index.get("citrus"))
        self.assertEqual(ids, [
            "orange", "lemon", "grapefruit", "pink-grapefruit", "white-grapefruit"
        ])

    def test_leaf_has_no_descendants(self):
        self.assertEqual(self.collector.collect(self.index.get("dairy")), [])
        self.assertEqual(self.collector.collect(TreeNode("ghost")), [])

    def test_whole_branch(self):
        ids = self.collector.collect(self.index.get("fruits"))
        self.assertEqual(len(ids), 8)
        self.assertEqual(set(ids), {
            "apple", "banana", "citrus", "orange", "lemon",
            "grapefruit", "pink-grapefruit", "white-grapefruit",
        })

    def test_requires_children(self):
        self.assertTrue(self.collector.requires_children())


class TestOtherCollectors(unittest.TestCase):

    def test_identifier_collector(self):
        collector = IdentifierCollector()
        self.assertEqual(collector.collect(TreeNode("apple")), "apple")
        self.assertFalse(collector.requires_children())


if __name__ == '__main__':
    unittest.main()
