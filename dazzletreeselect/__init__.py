"""DazzleTreeSelect - Hierarchical Multi-Selection Engine.

DazzleTreeSelect keeps a tree-checkbox selection canonical under one of two
selection modes and tells a renderer how each node should look.

Choose your level:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Pure functions:
    from dazzletreeselect import normalize_selection, toggle_selection, node_state

Stateful host (controlled value, mode switches, expansion):
    from dazzletreeselect import TreeSelector
━━━━━━━━━━━━━━━━━━━━━━━━━━

Selection modes:
    SelectionMode.CASCADE         selecting a node selects its whole subtree
    SelectionMode.TOP_LEVEL_ONLY  only the highest selected node of a branch counts
"""

__version__ = "0.3.1"

from .config import CheckState, SelectionMode, SelectorConfig, TraversalStrategy
from .exceptions import DuplicateIdWarning, SelectorConfigError
from .core import (
    TreeNode,
    Tree,
    build_tree,
    tree_to_dicts,
    DescendantCollector,
)
from .index import DuplicateId, TreeIndex, TreeIndexCache
from .ancestry import AncestorResolver
from .normalize import SelectionNormalizer
from .toggle import ToggleEngine
from .state import IndeterminacyEvaluator, NodeState
from .expansion import ExpansionTracker
from .selector import TreeSelector
from .api import (
    build_index,
    descendant_ids,
    ancestors_of,
    normalize_selection,
    toggle_selection,
    node_state,
    iter_node_states,
    all_ids,
    find_node,
)

__all__ = [
    "__version__",
    # Config
    "CheckState",
    "SelectionMode",
    "SelectorConfig",
    "TraversalStrategy",
    "DuplicateIdWarning",
    "SelectorConfigError",
    # Data model
    "TreeNode",
    "Tree",
    "build_tree",
    "tree_to_dicts",
    # Components
    "DescendantCollector",
    "DuplicateId",
    "TreeIndex",
    "TreeIndexCache",
    "AncestorResolver",
    "SelectionNormalizer",
    "ToggleEngine",
    "IndeterminacyEvaluator",
    "NodeState",
    "ExpansionTracker",
    "TreeSelector",
    # API
    "build_index",
    "descendant_ids",
    "ancestors_of",
    "normalize_selection",
    "toggle_selection",
    "node_state",
    "iter_node_states",
    "all_ids",
    "find_node",
]
