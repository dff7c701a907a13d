"""Expand/collapse state for DazzleTreeSelect.

The one piece of UI state the engine seeds: which nodes have their
children visible. It starts as the ancestors of the initial selection so
every selected node is revealed, and afterwards only changes through
explicit expand/collapse calls.
"""

from typing import FrozenSet, Iterable, Iterator, Optional, Set

from .ancestry import AncestorResolver
from .core.node import Tree


class ExpansionTracker:
    """Mutable set of expanded node identifiers."""

    def __init__(self, expanded: Iterable[str] = (), resolver: Optional[AncestorResolver] = None):
        self._expanded: Set[str] = set(expanded)
        self.resolver = resolver or AncestorResolver()

    @classmethod
    def seeded(cls,
               tree: Tree,
               selection: Iterable[str],
               resolver: Optional[AncestorResolver] = None) -> 'ExpansionTracker':
        """Create a tracker with the ancestor chains of ``selection`` expanded."""
        tracker = cls(resolver=resolver)
        tracker.expand_to(selection, tree)
        return tracker

    def expand_to(self, node_ids: Iterable[str], tree: Tree) -> Set[str]:
        """Expand every ancestor of ``node_ids`` so they become visible.

        Returns:
            Identifiers that were newly expanded
        """
        ancestors = self.resolver.ancestors_of(node_ids, tree)
        added = ancestors - self._expanded
        self._expanded.update(ancestors)
        return added

    def expand(self, node_id: str) -> None:
        self._expanded.add(node_id)

    def collapse(self, node_id: str) -> None:
        self._expanded.discard(node_id)

    def toggle(self, node_id: str) -> bool:
        """Flip a node between expanded and collapsed.

        Returns:
            True if the node is expanded afterwards
        """
        if node_id in self._expanded:
            self._expanded.discard(node_id)
            return False
        self._expanded.add(node_id)
        return True

    def is_expanded(self, node_id: str) -> bool:
        return node_id in self._expanded

    @property
    def expanded(self) -> FrozenSet[str]:
        """Snapshot of the expanded identifiers."""
        return frozenset(self._expanded)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._expanded

    def __iter__(self) -> Iterator[str]:
        return iter(set(self._expanded))

    def __len__(self) -> int:
        return len(self._expanded)

    def __repr__(self) -> str:
        return f"ExpansionTracker(expanded={sorted(self._expanded)!r})"
