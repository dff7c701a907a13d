"""Selection normalization for DazzleTreeSelect.

SelectionNormalizer turns a raw list of selected ids into the canonical set
for a mode:

- CASCADE: every selected node brings its whole subtree along
  (closure under descent).
- TOP_LEVEL_ONLY: a node is dropped if one of its ancestors is also
  selected (antichain of branch roots).

Unknown ids are never discarded in either mode. They are treated as
childless, ancestor-less leaves.

Normalization runs on mount and whenever the mode changes. Across a mode
switch the canonical set is always recomputed from the raw ids, never
patched.
"""

import logging
from typing import FrozenSet, Iterable, Optional, Set, Union

from .ancestry import AncestorResolver
from .config import SelectionMode, TraversalStrategy
from .core.collector import DescendantCollector
from .core.node import Tree
from .index import TreeIndex

logger = logging.getLogger(__name__)


class SelectionNormalizer:
    """Produces canonical selection sets from raw id lists."""

    def __init__(self,
                 collector: Optional[DescendantCollector] = None,
                 resolver: Optional[AncestorResolver] = None,
                 strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE):
        """Initialize normalizer.

        Args:
            collector: Descendant collector (default DescendantCollector)
            resolver: Ancestor resolver (default AncestorResolver)
            strategy: Walk order used when the index has to be built here
        """
        self.collector = collector or DescendantCollector()
        self.resolver = resolver or AncestorResolver()
        self.strategy = strategy

    def normalize(self,
                  tree: Tree,
                  raw_ids: Iterable[str],
                  mode: Union[SelectionMode, str],
                  index: Optional[TreeIndex] = None) -> FrozenSet[str]:
        """Compute the canonical selection for ``raw_ids`` under ``mode``.

        The result depends only on the membership of ``raw_ids``; order and
        repetition are irrelevant.

        Args:
            tree: Ordered sequence of root nodes
            raw_ids: Raw selected identifiers
            mode: Selection mode (enum member or its string value)
            index: Prebuilt index for ``tree``; built here when omitted

        Returns:
            Canonical selection set
        """
        mode = SelectionMode.parse(mode)
        if isinstance(raw_ids, str):
            raw_ids = (raw_ids,)

        raw: Set[str] = set(raw_ids)
        if not raw:
            return frozenset()

        if mode is SelectionMode.CASCADE:
            if index is None:
                index = TreeIndex.build(tree, self.strategy)
            canonical = self._cascade(raw, index)
        else:
            canonical = self._top_level_only(raw, tree)

        logger.debug(
            "Normalized %d raw id(s) to %d canonical id(s) in %s mode",
            len(raw), len(canonical), mode.value,
        )
        return frozenset(canonical)

    def _cascade(self, raw: Set[str], index: TreeIndex) -> Set[str]:
        result: Set[str] = set()
        for node_id in raw:
            result.add(node_id)
            node = index.get(node_id)
            if node is not None:
                result.update(self.collector.collect(node))
        return result

    def _top_level_only(self, raw: Set[str], tree: Tree) -> Set[str]:
        result: Set[str] = set()
        for node_id in raw:
            ancestors = self.resolver.ancestors_of((node_id,), tree)
            # Subsumed by a selected ancestor
            if ancestors & raw:
                continue
            result.add(node_id)
        return result
