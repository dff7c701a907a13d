"""Data collection strategies for DazzleTreeSelect.

DataCollectors define what information to extract from a node. The
selection engine mostly needs one thing - the identifiers below a node -
but the same interface lets callers plug in their own extraction.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from .node import TreeNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: TreeNode) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from

        Returns:
            Collected data (type depends on collector)
        """
        pass

    @abstractmethod
    def requires_children(self) -> bool:
        """Check if this collector needs to look below the node.

        Returns:
            True if collector walks into the node's subtree
        """
        pass


class IdentifierCollector(DataCollector):
    """Collects only the node's own identifier."""

    def collect(self, node: TreeNode) -> str:
        """Return node identifier."""
        return node.identifier()

    def requires_children(self) -> bool:
        """No child access needed."""
        return False


class DescendantCollector(DataCollector):
    """Collects the identifiers of every descendant of a node.

    The node itself is excluded. Ids come out in pre-order (each child
    before its own subtree), though callers only rely on membership.
    Nothing is memoized: one call costs O(subtree size) and is made once
    per toggle or normalization step, not per render.
    """

    def collect(self, node: TreeNode) -> List[str]:
        """Return every descendant id of ``node``."""
        ids: List[str] = []
        # Reversed so the first child is popped first
        stack: List[TreeNode] = list(reversed(node.children))
        while stack:
            child = stack.pop()
            ids.append(child.id)
            stack.extend(reversed(child.children))
        return ids

    def requires_children(self) -> bool:
        """Walks the full subtree."""
        return True

