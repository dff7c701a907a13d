"""Toggle handling for DazzleTreeSelect.

ToggleEngine applies one user-driven check or uncheck to the current
canonical set and returns the next canonical set. Inputs are never mutated.

Mode behavior:

=============== ============================== ===========================
Mode            check                          uncheck
=============== ============================== ===========================
CASCADE         add node + all descendants     remove node + descendants
TOP_LEVEL_ONLY  add node, drop descendants;    remove node only
                no-op if an ancestor is
                already selected
=============== ============================== ===========================
"""

import logging
from typing import AbstractSet, FrozenSet, Optional, Union

from .ancestry import AncestorResolver
from .config import SelectionMode
from .core.collector import DescendantCollector
from .core.node import Tree, TreeNode
from .index import TreeIndex

logger = logging.getLogger(__name__)


class ToggleEngine:
    """Mode-aware incremental update of a canonical selection set."""

    def __init__(self,
                 collector: Optional[DescendantCollector] = None,
                 resolver: Optional[AncestorResolver] = None):
        self.collector = collector or DescendantCollector()
        self.resolver = resolver or AncestorResolver()

    def toggle(self,
               node: Union[TreeNode, str],
               checked: bool,
               canonical: AbstractSet[str],
               mode: Union[SelectionMode, str],
               tree: Tree,
               index: Optional[TreeIndex] = None) -> FrozenSet[str]:
        """Apply a check/uncheck of ``node``.

        Args:
            node: The toggled node, or its identifier
            checked: New checkbox value (True = check)
            canonical: Current canonical selection (not modified)
            mode: Selection mode (enum member or its string value)
            tree: Ordered sequence of root nodes
            index: Prebuilt index, used only to resolve an identifier

        Returns:
            Next canonical selection set
        """
        mode = SelectionMode.parse(mode)
        node = self._resolve(node, tree, index)
        descendant_ids = self.collector.collect(node)
        result = set(canonical)

        if mode is SelectionMode.CASCADE:
            if checked:
                result.add(node.id)
                result.update(descendant_ids)
            else:
                result.discard(node.id)
                result.difference_update(descendant_ids)

        elif checked:
            if self.resolver.ancestors_of((node.id,), tree) & result:
                # A selected ancestor already covers this node
                logger.debug("Ignoring check of %r: ancestor already selected", node.id)
                return frozenset(canonical)
            result.add(node.id)
            result.difference_update(descendant_ids)

        else:
            # Independently selected descendants stay selected
            result.discard(node.id)

        logger.debug(
            "Toggled %r to %s in %s mode: %d -> %d selected",
            node.id, checked, mode.value, len(canonical), len(result),
        )
        return frozenset(result)

    def _resolve(self, node: Union[TreeNode, str], tree: Tree, index: Optional[TreeIndex]) -> TreeNode:
        if isinstance(node, TreeNode):
            return node

        if index is None:
            index = TreeIndex.build(tree)
        found = index.get(node)
        if found is None:
            # Unknown ids act as standalone leaves
            return TreeNode(node)
        return found
