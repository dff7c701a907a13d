"""Identifier index for DazzleTreeSelect.

TreeIndex maps node identifiers to nodes in a single pass over the tree and
detects identifiers that occur more than once. Detection is returned as a
value; nothing here logs or warns, so the host decides how (and whether) to
surface it.
"""

from typing import Dict, FrozenSet, Iterator, List, NamedTuple, Optional, Union

from .config import TraversalStrategy
from .core.node import Tree, TreeNode
from .core.traverser import create_traverser


class DuplicateId(NamedTuple):
    """One duplicate-identifier diagnostic."""
    identifier: str
    count: int  # Total occurrences in the tree, including the kept one


class TreeIndex:
    """Mapping from identifier to node for one tree snapshot.

    When an identifier occurs more than once, the first node encountered is
    kept and later occurrences are shadowed. The walk order is the one given
    by ``strategy`` (depth-first pre-order by default, so "first" means
    first in display order).
    """

    def __init__(self,
                 nodes: Optional[Dict[str, TreeNode]] = None,
                 duplicates: Optional[Dict[str, int]] = None):
        self.nodes: Dict[str, TreeNode] = nodes if nodes is not None else {}
        self.duplicates: Dict[str, int] = duplicates if duplicates is not None else {}

    @classmethod
    def build(cls,
              tree: Tree,
              strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE) -> 'TreeIndex':
        """Index every node of ``tree``.

        Args:
            tree: Ordered sequence of root nodes
            strategy: Walk order; only affects which duplicate wins

        Returns:
            TreeIndex for the tree (empty for an empty tree)
        """
        nodes: Dict[str, TreeNode] = {}
        duplicates: Dict[str, int] = {}

        for node, _ in create_traverser(strategy).traverse(tree):
            if node.id in nodes:
                # First occurrence stays; count includes it
                duplicates[node.id] = duplicates.get(node.id, 1) + 1
                continue
            nodes[node.id] = node

        return cls(nodes, duplicates)

    @property
    def duplicate_ids(self) -> FrozenSet[str]:
        """Identifiers that occur more than once."""
        return frozenset(self.duplicates)

    def has_duplicates(self) -> bool:
        return bool(self.duplicates)

    def diagnostics(self) -> List[DuplicateId]:
        """Return duplicate-id diagnostics, sorted by identifier."""
        return [DuplicateId(node_id, count)
                for node_id, count in sorted(self.duplicates.items())]

    def get(self, node_id: str) -> Optional[TreeNode]:
        """Return the indexed node for ``node_id`` or None."""
        return self.nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    def __repr__(self) -> str:
        return f"TreeIndex(nodes={len(self.nodes)}, duplicates={len(self.duplicates)})"


class TreeIndexCache:
    """Memoizes one TreeIndex per tree reference.

    The cache holds the most recent tree it was asked about and compares by
    identity (``is``), not by content: re-supplying a different tree object
    rebuilds the index even when the contents are equal. Trees are treated
    as immutable, so mutating a cached tree in place is not detected.
    """

    def __init__(self, strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE):
        self.strategy = strategy
        self._tree: Optional[Tree] = None
        self._index: Optional[TreeIndex] = None
        self.builds = 0

    def get(self, tree: Tree) -> TreeIndex:
        """Return the index for ``tree``, building it if needed."""
        if self._index is None or self._tree is not tree:
            self._index = TreeIndex.build(tree, self.strategy)
            self._tree = tree
            self.builds += 1
        return self._index

    def invalidate(self) -> None:
        """Drop the cached index."""
        self._tree = None
        self._index = None
