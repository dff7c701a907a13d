"""Tri-state display evaluation for DazzleTreeSelect.

Each node renders as CHECKED, UNCHECKED or INDETERMINATE, plus a disabled
flag. State is recomputed from the canonical set on every pass and never
tracked per node.

``ancestor_selected`` is threaded top-down: it is true once any strict
ancestor of the node is in the canonical set. A node is INDETERMINATE when
it is not selected itself but either

- some descendant is selected with no selected node in between (only the
  first selected node on a path "claims" the subtree), or
- an ancestor is selected, so the node is covered without being a member
  (the TOP_LEVEL_ONLY picture).

Disabling only happens in TOP_LEVEL_ONLY mode: a covered node cannot be
toggled on its own while its ancestor stays selected. In CASCADE mode the
descendants of a checked node are real members and stay togglable.
"""

from dataclasses import dataclass
from typing import AbstractSet, Iterator, List, Optional, Tuple, Union

from .config import CheckState, SelectionMode
from .core.node import Tree, TreeNode


@dataclass(frozen=True)
class NodeState:
    """Render state for one node."""
    check_state: CheckState
    disabled: bool = False

    @property
    def checked(self) -> bool:
        return self.check_state is CheckState.CHECKED

    @property
    def indeterminate(self) -> bool:
        return self.check_state is CheckState.INDETERMINATE


class IndeterminacyEvaluator:
    """Computes NodeState values from a canonical selection set."""

    def state_of(self,
                 node: TreeNode,
                 canonical: AbstractSet[str],
                 ancestor_selected: bool = False,
                 mode: Optional[Union[SelectionMode, str]] = None) -> NodeState:
        """Compute the render state of ``node``.

        Args:
            node: Node to evaluate
            canonical: Current canonical selection
            ancestor_selected: True if any strict ancestor is selected
            mode: Active mode; disabling only applies to TOP_LEVEL_ONLY.
                When omitted nothing is disabled.

        Returns:
            NodeState with the tri-state value and disabled flag
        """
        disabled = False
        if mode is not None and SelectionMode.parse(mode) is SelectionMode.TOP_LEVEL_ONLY:
            disabled = ancestor_selected

        if node.id in canonical:
            return NodeState(CheckState.CHECKED, disabled)

        if ancestor_selected or self.has_unshadowed_selected_descendant(node, canonical):
            return NodeState(CheckState.INDETERMINATE, disabled)

        return NodeState(CheckState.UNCHECKED, disabled)

    def has_unshadowed_selected_descendant(self,
                                           node: TreeNode,
                                           canonical: AbstractSet[str],
                                           ancestor_selected: bool = False) -> bool:
        """Check for a selected descendant not covered by a selected node in between.

        Args:
            node: Root of the subtree to inspect (not itself considered)
            canonical: Current canonical selection
            ancestor_selected: True if a node between the original query
                node and ``node`` is selected

        Returns:
            True if the subtree holds a genuinely partial selection
        """
        stack: List[Tuple[TreeNode, bool]] = [(child, ancestor_selected) for child in node.children]
        while stack:
            child, covered = stack.pop()
            child_selected = child.id in canonical
            if child_selected and not covered:
                return True
            covered = covered or child_selected
            stack.extend((grandchild, covered) for grandchild in child.children)
        return False

    def iter_states(self,
                    tree: Tree,
                    canonical: AbstractSet[str],
                    mode: Union[SelectionMode, str],
                    expanded: Optional[AbstractSet[str]] = None) -> Iterator[Tuple[TreeNode, int, NodeState]]:
        """Walk the tree in display order yielding each node's state.

        Args:
            tree: Ordered sequence of root nodes
            canonical: Current canonical selection
            mode: Active selection mode
            expanded: If given, children of nodes not in this set are
                skipped (only visible rows are produced)

        Yields:
            Tuples of (node, depth, NodeState)
        """
        mode = SelectionMode.parse(mode)

        # Reversed so the first root/child is popped first
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False) for root in reversed(tree)]
        while stack:
            node, depth, ancestor_selected = stack.pop()
            yield (node, depth, self.state_of(node, canonical, ancestor_selected, mode))

            if expanded is not None and node.id not in expanded:
                continue

            # Pass down if this node OR an ancestor is selected
            child_ancestor_selected = ancestor_selected or node.id in canonical
            for child in reversed(node.children):
                stack.append((child, depth + 1, child_ancestor_selected))
