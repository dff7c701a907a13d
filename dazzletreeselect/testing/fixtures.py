"""Test fixtures for DazzleTreeSelect consumers.

These helpers give test suites a known tree to work with and checkers for
the invariants each selection mode promises, without reaching into engine
internals.
"""

from typing import AbstractSet, Iterable, List, Optional, Tuple

from ..ancestry import AncestorResolver
from ..config import SelectionMode
from ..core.collector import DescendantCollector
from ..core.node import Tree, TreeNode, build_tree
from ..index import TreeIndex

FRUITS_TREE_DATA = [
    {
        "id": "fruits",
        "label": "Fruits",
        "children": [
            {"id": "apple", "label": "Apple"},
            {"id": "banana", "label": "Banana"},
            {
                "id": "citrus",
                "label": "Citrus",
                "children": [
                    {"id": "orange", "label": "Orange"},
                    {"id": "lemon", "label": "Lemon"},
                ],
            },
        ],
    },
]

PRODUCE_TREE_DATA = [
    {
        "id": "fruits",
        "label": "Fruits",
        "children": [
            {"id": "apple", "label": "Apple"},
            {"id": "banana", "label": "Banana"},
            {
                "id": "citrus",
                "label": "Citrus",
                "children": [
                    {"id": "orange", "label": "Orange"},
                    {"id": "lemon", "label": "Lemon"},
                    {
                        "id": "grapefruit",
                        "label": "Grapefruit",
                        "children": [
                            {"id": "pink-grapefruit", "label": "Pink Grapefruit"},
                            {"id": "white-grapefruit", "label": "White Grapefruit"},
                        ],
                    },
                ],
            },
        ],
    },
    {
        "id": "vegetables",
        "label": "Vegetables",
        "children": [
            {"id": "carrot", "label": "Carrot"},
            {"id": "broccoli", "label": "Broccoli"},
            {"id": "spinach", "label": "Spinach"},
        ],
    },
    {"id": "dairy", "label": "Dairy (No Children)"},
]


def fruits_tree() -> List[TreeNode]:
    """fruits{apple, banana, citrus{orange, lemon}}"""
    return build_tree(FRUITS_TREE_DATA)


def produce_tree() -> List[TreeNode]:
    """Three roots, four levels deep, with a childless root."""
    return build_tree(PRODUCE_TREE_DATA)


def make_chain(depth: int, prefix: str = "n") -> List[TreeNode]:
    """Build a single-path tree ``n0 -> n1 -> ... -> n{depth-1}``."""
    node: Optional[TreeNode] = None
    for level in reversed(range(depth)):
        node = TreeNode(f"{prefix}{level}", children=[node] if node is not None else [])
    return [node] if node is not None else []


def ancestor_pairs(tree: Tree, ids: Iterable[str]) -> List[Tuple[str, str]]:
    """Return (ancestor, descendant) pairs where both ids are in ``ids``."""
    members = set(ids)
    resolver = AncestorResolver()
    pairs = []
    for node_id in sorted(members):
        for ancestor in sorted(resolver.ancestors_of((node_id,), tree)):
            if ancestor in members:
                pairs.append((ancestor, node_id))
    return pairs


def cascade_violations(tree: Tree, selection: AbstractSet[str]) -> List[Tuple[str, str]]:
    """Return (selected, missing descendant) pairs breaking closure under descent."""
    index = TreeIndex.build(tree)
    collector = DescendantCollector()
    missing = []
    for node_id in sorted(selection):
        node = index.get(node_id)
        if node is None:
            continue
        for descendant in collector.collect(node):
            if descendant not in selection:
                missing.append((node_id, descendant))
    return missing


def assert_canonical(tree: Tree, selection: AbstractSet[str], mode: SelectionMode) -> None:
    """Assert that ``selection`` satisfies the invariant of ``mode``.

    Raises:
        AssertionError: Listing the offending ids
    """
    if mode is SelectionMode.CASCADE:
        violations = cascade_violations(tree, selection)
        assert not violations, f"Selection not closed under descent: {violations}"
    else:
        pairs = ancestor_pairs(tree, selection)
        assert not pairs, f"Selection is not an antichain: {pairs}"
