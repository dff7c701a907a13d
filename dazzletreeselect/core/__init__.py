"""Core abstractions for DazzleTreeSelect.

This package contains the tree data structure and the generic walking and
collection machinery the selection engine is built on.
"""

from .node import TreeNode, Tree, build_tree, tree_to_dicts
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    IdentifierCollector,
    DescendantCollector,
)

__all__ = [
    "TreeNode",
    "Tree",
    "build_tree",
    "tree_to_dicts",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "create_traverser",
    "DataCollector",
    "IdentifierCollector",
    "DescendantCollector",
]
