"""Stateful selection host for DazzleTreeSelect.

TreeSelector ties the pure engine pieces together the way a tree-checkbox
widget uses them, minus any rendering:

1. On construction the controlled value is normalized for the mode, the
   expansion set is seeded from the ancestors of the result, and the
   canonical set is reported once through ``on_change`` so the caller's
   value matches what is displayed.
2. A mode change normalizes the current selection from scratch under the
   new mode and reports the result.
3. A checkbox toggle produces the next canonical set and reports it.

The canonical set is the state of record. Callers are expected to feed each
reported list back as their controlled value, so the host keeps no separate
copy of the raw input.

The host is single-threaded by contract: each call fully resolves before
the next one is made.
"""

import logging
import warnings
from dataclasses import replace
from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from .ancestry import AncestorResolver
from .config import SelectionMode, SelectorConfig
from .core.collector import DescendantCollector
from .core.node import Tree, TreeNode
from .exceptions import DuplicateIdWarning, SelectorConfigError
from .expansion import ExpansionTracker
from .index import DuplicateId, TreeIndex, TreeIndexCache
from .normalize import SelectionNormalizer
from .state import IndeterminacyEvaluator, NodeState
from .toggle import ToggleEngine

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[List[str]], None]


class TreeSelector:
    """Controlled multi-selection over a tree of labeled nodes.

    Example:
        >>> selector = TreeSelector(tree, value=["citrus"], on_change=print)
        ['citrus', 'lemon', 'orange']
        >>> selector.toggle("citrus", False)
        []
        True
    """

    def __init__(self,
                 tree: Tree,
                 value: Iterable[str] = (),
                 mode: Optional[Union[SelectionMode, str]] = None,
                 on_change: Optional[ChangeCallback] = None,
                 config: Optional[SelectorConfig] = None):
        """Create a selector and report its initial canonical selection.

        Args:
            tree: Ordered sequence of root nodes (read only)
            value: Initial raw selection
            mode: Selection mode; overrides ``config.mode`` when given
            on_change: Called with the sorted canonical ids on every report
            config: Selector configuration

        Raises:
            SelectorConfigError: If the configuration is invalid
        """
        # Private copy; mode changes must not leak into a shared config
        self.config = replace(config) if config is not None else SelectorConfig()
        if mode is not None:
            try:
                self.config.mode = SelectionMode.parse(mode)
            except ValueError as e:
                raise SelectorConfigError(str(e)) from e

        config_errors = self.config.validate()
        if config_errors:
            raise SelectorConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.on_change = on_change

        resolver = AncestorResolver()
        collector = DescendantCollector()
        self._resolver = resolver
        self._normalizer = SelectionNormalizer(collector, resolver, self.config.index_strategy)
        self._toggler = ToggleEngine(collector, resolver)
        self._evaluator = IndeterminacyEvaluator()
        self._index_cache = TreeIndexCache(self.config.index_strategy)
        self._warned: set = set()

        self._tree = tree
        self._selected = self._normalize(value)

        self.expansion = ExpansionTracker.seeded(tree, self._selected, resolver)

        # Initial mount: bring the caller's value in line with the canonical set
        self._report()

    # Read-only views

    @property
    def tree(self) -> Tree:
        return self._tree

    @property
    def mode(self) -> SelectionMode:
        return self.config.mode

    @property
    def selected(self) -> FrozenSet[str]:
        """The canonical selection set."""
        return self._selected

    @property
    def value(self) -> List[str]:
        """The canonical selection as a sorted list, as reported to callers."""
        return sorted(self._selected)

    @property
    def index(self) -> TreeIndex:
        return self._index_cache.get(self._tree)

    @property
    def diagnostics(self) -> List[DuplicateId]:
        """Duplicate-id diagnostics for the current tree."""
        return self.index.diagnostics()

    # Controlled inputs

    def set_mode(self, mode: Union[SelectionMode, str]) -> bool:
        """Switch selection mode.

        The current selection is normalized again from scratch under the
        new mode (never patched) and the result is reported.

        Returns:
            True if the mode changed
        """
        mode = SelectionMode.parse(mode)
        if mode is self.config.mode:
            return False

        logger.debug("Selection mode %s -> %s", self.config.mode.value, mode.value)
        self.config.mode = mode
        self._selected = self._normalize(self._selected)
        self._report()
        return True

    def set_value(self, raw_ids: Iterable[str]) -> FrozenSet[str]:
        """Replace the controlled value from outside.

        The caller already owns the new value, so nothing is reported. When
        ``config.expand_on_external_change`` is set, the ancestors of the
        new selection are expanded so deep-linked nodes become visible.

        Returns:
            The new canonical selection
        """
        self._selected = self._normalize(raw_ids)
        if self.config.expand_on_external_change:
            self.expansion.expand_to(self._selected, self._tree)
        return self._selected

    def set_tree(self, tree: Tree) -> FrozenSet[str]:
        """Replace the tree and re-normalize the current value against it."""
        if tree is not self._tree:
            self._tree = tree
            self._index_cache.invalidate()
            self._warned.clear()
        self._selected = self._normalize(self._selected)
        return self._selected

    # User interaction

    def toggle(self, node: Union[TreeNode, str], checked: bool) -> bool:
        """Apply a checkbox interaction on ``node``.

        Disabled nodes (TOP_LEVEL_ONLY, with a selected ancestor) are not
        independently togglable; the call is refused without a report.

        Args:
            node: The toggled node or its identifier
            checked: New checkbox value

        Returns:
            True if the toggle was applied and reported
        """
        node = self._resolve(node)
        if self.state_of(node).disabled:
            logger.debug("Refusing toggle of disabled node %r", node.id)
            return False

        self._selected = self._toggler.toggle(
            node, checked, self._selected, self.config.mode, self._tree, self.index
        )
        self._report()
        return True

    def toggle_expanded(self, node_id: str) -> bool:
        """Flip expansion of ``node_id``; returns True if now expanded."""
        return self.expansion.toggle(node_id)

    # Rendering support

    def state_of(self, node: Union[TreeNode, str]) -> NodeState:
        """Return the render state of one node."""
        node = self._resolve(node)
        ancestor_selected = bool(
            self._resolver.ancestors_of((node.id,), self._tree) & self._selected
        )
        return self._evaluator.state_of(node, self._selected, ancestor_selected, self.config.mode)

    def visible_states(self) -> Iterator[Tuple[TreeNode, int, NodeState]]:
        """Yield (node, depth, state) for every row visible under the expansion set."""
        return self._evaluator.iter_states(
            self._tree, self._selected, self.config.mode, self.expansion.expanded
        )

    def all_states(self) -> Iterator[Tuple[TreeNode, int, NodeState]]:
        """Yield (node, depth, state) for every node regardless of expansion."""
        return self._evaluator.iter_states(self._tree, self._selected, self.config.mode)

    # Internals

    def _normalize(self, raw_ids: Iterable[str]) -> FrozenSet[str]:
        index = self._index_cache.get(self._tree)
        self._check_duplicates(index)
        return self._normalizer.normalize(self._tree, raw_ids, self.config.mode, index)

    def _resolve(self, node: Union[TreeNode, str]) -> TreeNode:
        if isinstance(node, TreeNode):
            return node
        found = self.index.get(node)
        # Unknown ids behave as standalone leaves
        return found if found is not None else TreeNode(node)

    def _check_duplicates(self, index: TreeIndex) -> None:
        if not self.config.warn_on_duplicates:
            return

        for diagnostic in index.diagnostics():
            if diagnostic.identifier in self._warned:
                continue
            self._warned.add(diagnostic.identifier)
            message = (
                f"Duplicate TreeNode id detected: {diagnostic.identifier!r} "
                f"({diagnostic.count} occurrences). The first occurrence is used."
            )
            logger.warning(message)
            warnings.warn(message, DuplicateIdWarning, stacklevel=4)

    def _report(self) -> None:
        if self.on_change is not None:
            self.on_change(self.value)

    def __repr__(self) -> str:
        return (f"TreeSelector(mode={self.config.mode.value}, "
                f"selected={len(self._selected)}, roots={len(self._tree)})")
