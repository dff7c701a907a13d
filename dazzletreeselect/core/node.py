"""TreeNode data structure for DazzleTreeSelect.

The TreeNode is intentionally kept simple - it's a read-only data container
built from the root down. There are no parent back-references; ancestor
questions are answered by searching from the roots (see ancestry.py).
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple


class TreeNode:
    """A labeled node in a selectable tree.

    Nodes are owned by their parent through ``children``; a tree is just an
    ordered sequence of root nodes. Identifiers are expected to be unique
    across the whole tree, but the engine tolerates duplicates (they are
    reported by TreeIndex, first occurrence wins).

    Equality is object identity, not identifier: two distinct nodes that
    share an id must stay distinguishable so duplicates can be detected.
    """

    __slots__ = ('id', 'label', 'children')

    def __init__(self,
                 id: str,
                 label: Optional[str] = None,
                 children: Iterable['TreeNode'] = ()):
        """Create a node.

        Args:
            id: Identifier, unique within the tree
            label: Display text (defaults to the id)
            children: Child nodes in display order
        """
        self.id = id
        self.label = id if label is None else label
        self.children: Tuple['TreeNode', ...] = tuple(children)

    def identifier(self) -> str:
        """Return the node identifier."""
        return self.id

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight display information about this node.

        Returns:
            Dict with ``label`` and ``child_count``
        """
        return {
            'label': self.label,
            'child_count': len(self.children),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'TreeNode':
        """Build a node (and its subtree) from nested mappings.

        Accepts the plain ``{"id": ..., "label": ..., "children": [...]}``
        shape. ``children`` may be missing or None; ``label`` defaults to
        the id.

        Args:
            data: Mapping describing the node

        Returns:
            TreeNode with all descendants built

        Raises:
            TypeError: If ``id`` is missing or not a string
        """
        node_id = data.get('id')
        if not isinstance(node_id, str):
            raise TypeError(f"TreeNode id must be a string, got {node_id!r}")

        children = data.get('children') or ()
        return cls(
            node_id,
            data.get('label'),
            [cls.from_dict(child) for child in children],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to nested mappings.

        Leaf nodes are emitted without a ``children`` key.
        """
        result: Dict[str, Any] = {'id': self.id, 'label': self.label}
        if self.children:
            result['children'] = [child.to_dict() for child in self.children]
        return result

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.id

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(id={self.id!r}, children={len(self.children)})"


# A tree is an ordered sequence of root nodes
Tree = Sequence[TreeNode]


def build_tree(data: Iterable[Mapping[str, Any]]) -> List[TreeNode]:
    """Build a tree (list of roots) from a list of nested mappings."""
    return [TreeNode.from_dict(item) for item in data]


def tree_to_dicts(tree: Tree) -> List[Dict[str, Any]]:
    """Inverse of build_tree."""
    return [root.to_dict() for root in tree]
