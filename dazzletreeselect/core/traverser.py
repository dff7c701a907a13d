"""Tree traversal strategies for DazzleTreeSelect.

Traversers walk a whole tree (a sequence of roots) and yield every node
occurrence with its depth. Unlike a general graph walk they do not skip
already-seen identifiers: a duplicated id must be visited once per
occurrence so the index can report it.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy
from .node import Tree, TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders. Results of the selection engine never depend on the
    order chosen.
    """

    @abstractmethod
    def traverse(self,
                 roots: Tree,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse every root in turn.

        Args:
            roots: Ordered sequence of root nodes
            max_depth: Maximum depth to traverse (None = unlimited)

        Yields:
            Tuples of (node, depth) where roots are at depth 0
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of a node at the given depth should be visited."""
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 roots: Tree,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse tree breadth-first using a queue."""
        queue: Deque[Tuple[TreeNode, int]] = deque((root, 0) for root in roots)

        while queue:
            node, depth = queue.popleft()
            yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children:
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, in display order. Uses an explicit
    stack so very deep trees do not hit the recursion limit.
    """

    def traverse(self,
                 roots: Tree,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse tree depth-first, pre-order."""
        # Reversed so the first root/child is popped first
        stack: List[Tuple[TreeNode, int]] = [(root, 0) for root in reversed(roots)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in reversed(node.children):
                    stack.append((child, depth + 1))


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or name (bfs, dfs_pre, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
    }

    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
