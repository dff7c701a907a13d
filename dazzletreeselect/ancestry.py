"""Ancestor resolution for DazzleTreeSelect.

Trees carry no parent back-references, so "which nodes are above X" is
answered by a depth-first path search from the roots. The result seeds the
expansion set and, in TOP_LEVEL_ONLY normalization, tells whether a
candidate sits below another candidate.
"""

from typing import Iterable, List, Optional, Set, Tuple

from .core.node import Tree, TreeNode


class AncestorResolver:
    """Finds ancestor identifiers by depth-first search from the roots.

    Identifiers that are not in the tree have no ancestors; they are
    skipped silently rather than treated as errors.
    """

    def ancestors_of(self, target_ids: Iterable[str], roots: Tree) -> Set[str]:
        """Return the union of the ancestor paths of every target.

        Args:
            target_ids: Identifiers to resolve (a bare string counts as one id)
            roots: Ordered sequence of root nodes

        Returns:
            Set of identifiers strictly above at least one target
        """
        if isinstance(target_ids, str):
            target_ids = (target_ids,)

        ancestors: Set[str] = set()
        for target_id in set(target_ids):
            path = self.path_to(target_id, roots)
            if path:
                ancestors.update(path)
        return ancestors

    def path_to(self, target_id: str, roots: Tree) -> Optional[List[str]]:
        """Return the ids strictly above ``target_id``, outermost first.

        The search stops at the first root whose subtree contains the
        target; ids are unique by contract so later roots are not checked.

        Returns:
            Ancestor path ([] for a root) or None if the id is not in the tree
        """
        for root in roots:
            path = self._search(root, target_id)
            if path is not None:
                return path
        return None

    def _search(self, root: TreeNode, target_id: str) -> Optional[List[str]]:
        # Each entry carries the ids leading to its node
        stack: List[Tuple[TreeNode, List[str]]] = [(root, [])]
        while stack:
            node, current_path = stack.pop()
            if node.id == target_id:
                return current_path

            if node.children:
                child_path = current_path + [node.id]
                # Reversed so the first child is popped first
                for child in reversed(node.children):
                    stack.append((child, child_path))

        return None
