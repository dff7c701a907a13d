"""Configuration system for DazzleTreeSelect.

This module defines the enums that every engine operation is parameterized
by, plus the SelectorConfig dataclass used by the stateful TreeSelector host.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .exceptions import SelectorConfigError


class SelectionMode(Enum):
    """How a selection relates to the subtree below it.

    The two modes are deliberately an explicit enum rather than a boolean:
    historical versions of the selector used a flag whose polarity flipped
    between releases (``topLevelOnly`` vs ``includeChildren``).
    """
    CASCADE = "cascade"                 # Selecting a node selects its subtree
    TOP_LEVEL_ONLY = "top_level_only"   # Only branch roots are reported

    @classmethod
    def parse(cls, value: Union['SelectionMode', str]) -> 'SelectionMode':
        """Convert a mode name or enum member to a SelectionMode.

        Args:
            value: SelectionMode member or its string value (case-insensitive)

        Returns:
            SelectionMode member

        Raises:
            ValueError: If the string does not name a mode
        """
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower().replace('-', '_')
        for mode in cls:
            if normalized in (mode.value, mode.name.lower()):
                return mode

        raise ValueError(
            f"Unknown selection mode: {value}. "
            f"Choose from: {', '.join(m.value for m in cls)}"
        )

    @classmethod
    def from_flags(cls,
                   *,
                   top_level_only: Optional[bool] = None,
                   include_children: Optional[bool] = None) -> 'SelectionMode':
        """Translate either legacy boolean flag into a SelectionMode.

        ``top_level_only=True`` and ``include_children=False`` both mean
        TOP_LEVEL_ONLY. Passing neither flag gives CASCADE.

        Raises:
            SelectorConfigError: If both flags are given and disagree
        """
        from_top = None
        if top_level_only is not None:
            from_top = cls.TOP_LEVEL_ONLY if top_level_only else cls.CASCADE

        from_include = None
        if include_children is not None:
            from_include = cls.CASCADE if include_children else cls.TOP_LEVEL_ONLY

        if from_top is not None and from_include is not None and from_top is not from_include:
            raise SelectorConfigError(
                f"Contradictory mode flags: top_level_only={top_level_only!r} "
                f"and include_children={include_children!r}"
            )

        return from_top or from_include or cls.CASCADE


class CheckState(Enum):
    """Tri-state checkbox value for a single node."""
    UNCHECKED = 0
    INDETERMINATE = 1
    CHECKED = 2


class TraversalStrategy(Enum):
    """Order in which whole-tree walks visit nodes.

    Order never affects engine results; it only matters to callers who
    consume the walk itself (e.g. listing every id).
    """
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children


@dataclass
class SelectorConfig:
    """Complete configuration for a TreeSelector.

    The pure engine functions take their mode as an argument; this config
    only exists for the stateful host, which also needs to know how loudly
    to report duplicate identifiers and whether external value changes
    should reveal the newly selected nodes.
    """

    mode: SelectionMode = SelectionMode.CASCADE

    # Diagnostics
    warn_on_duplicates: bool = True  # warnings.warn once per duplicate id

    # Expansion behavior
    expand_on_external_change: bool = True  # Deep-link: reveal new selections

    # Walk order used when building indexes and listing ids
    index_strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE

    @classmethod
    def from_flags(cls,
                   *,
                   top_level_only: Optional[bool] = None,
                   include_children: Optional[bool] = None,
                   **kwargs) -> 'SelectorConfig':
        """Create config from a legacy boolean mode flag.

        Args:
            top_level_only: Legacy flag where True means TOP_LEVEL_ONLY
            include_children: Legacy flag where True means CASCADE
            **kwargs: Remaining SelectorConfig fields

        Returns:
            SelectorConfig with the resolved mode
        """
        mode = SelectionMode.from_flags(
            top_level_only=top_level_only,
            include_children=include_children,
        )
        return cls(mode=mode, **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, SelectionMode):
            errors.append(f"mode must be a SelectionMode, got {self.mode!r}")

        if not isinstance(self.index_strategy, TraversalStrategy):
            errors.append(
                f"index_strategy must be a TraversalStrategy, got {self.index_strategy!r}"
            )

        return errors
