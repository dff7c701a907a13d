"""High-level API for DazzleTreeSelect.

This module provides simple, functional interfaces to the selection engine.
These functions wrap the class-based components for the common case where
no customization (collectors, resolvers, walk order) is needed.
"""

from typing import AbstractSet, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple, Union

from .ancestry import AncestorResolver
from .config import SelectionMode, TraversalStrategy
from .core.collector import DescendantCollector, IdentifierCollector
from .core.node import Tree, TreeNode
from .core.traverser import create_traverser
from .index import TreeIndex
from .normalize import SelectionNormalizer
from .state import IndeterminacyEvaluator, NodeState
from .toggle import ToggleEngine

_resolver = AncestorResolver()
_collector = DescendantCollector()
_normalizer = SelectionNormalizer(_collector, _resolver)
_toggler = ToggleEngine(_collector, _resolver)
_evaluator = IndeterminacyEvaluator()


def build_index(tree: Tree,
                strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE) -> TreeIndex:
    """Index a tree by identifier and detect duplicate ids.

    Example:
        >>> index = build_index(tree)
        >>> for dup in index.diagnostics():
        ...     print(f"{dup.identifier} appears {dup.count} times")
    """
    return TreeIndex.build(tree, strategy)


def descendant_ids(node: TreeNode) -> List[str]:
    """Return every identifier below ``node`` (excluding ``node``)."""
    return _collector.collect(node)


def ancestors_of(target_ids: Iterable[str], tree: Tree) -> Set[str]:
    """Return every identifier strictly above any of ``target_ids``.

    Used to seed or update an expansion set, e.g. when a deep-linked leaf
    must have its ancestor chain opened.
    """
    return _resolver.ancestors_of(target_ids, tree)


def normalize_selection(tree: Tree,
                        raw_ids: Iterable[str],
                        mode: Union[SelectionMode, str] = SelectionMode.CASCADE) -> FrozenSet[str]:
    """Compute the canonical selection for ``raw_ids`` under ``mode``.

    Example:
        >>> sorted(normalize_selection(tree, ["citrus"], "cascade"))
        ['citrus', 'lemon', 'orange']
    """
    return _normalizer.normalize(tree, raw_ids, mode)


def toggle_selection(node: Union[TreeNode, str],
                     checked: bool,
                     canonical: AbstractSet[str],
                     mode: Union[SelectionMode, str],
                     tree: Tree) -> FrozenSet[str]:
    """Apply one check/uncheck and return the next canonical selection."""
    return _toggler.toggle(node, checked, canonical, mode, tree)


def node_state(node: TreeNode,
               canonical: AbstractSet[str],
               ancestor_selected: bool = False,
               mode: Optional[Union[SelectionMode, str]] = None) -> NodeState:
    """Return the tri-state value and disabled flag for ``node``."""
    return _evaluator.state_of(node, canonical, ancestor_selected, mode)


def iter_node_states(tree: Tree,
                     canonical: AbstractSet[str],
                     mode: Union[SelectionMode, str],
                     expanded: Optional[AbstractSet[str]] = None) -> Iterator[Tuple[TreeNode, int, NodeState]]:
    """Yield (node, depth, state) for every node in display order."""
    return _evaluator.iter_states(tree, canonical, mode, expanded)


def all_ids(tree: Tree,
            strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
            max_depth: Optional[int] = None) -> List[str]:
    """List every node identifier (duplicates included) in walk order."""
    collector = IdentifierCollector()
    return [collector.collect(node)
            for node, _ in create_traverser(strategy).traverse(tree, max_depth)]


def find_node(tree: Tree, node_id: str) -> Optional[TreeNode]:
    """Return the first node with ``node_id`` in display order, or None."""
    for node, _ in create_traverser(TraversalStrategy.DEPTH_FIRST_PRE).traverse(tree):
        if node.id == node_id:
            return node
    return None
