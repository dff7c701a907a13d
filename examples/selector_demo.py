#!/usr/bin/env python3
"""
Tree selector walkthrough for DazzleTreeSelect.

This example demonstrates:
- Mounting a selector with a pre-selected, partly nested value
- Switching between CASCADE and TOP_LEVEL_ONLY
- Rendering visible rows as text checkboxes
"""

from dazzletreeselect import CheckState, SelectionMode, TreeSelector
from dazzletreeselect.testing import produce_tree

MARKS = {
    CheckState.CHECKED: "[x]",
    CheckState.UNCHECKED: "[ ]",
    CheckState.INDETERMINATE: "[-]",
}


def render(selector):
    """Print the visible rows of the selector."""
    for node, depth, state in selector.visible_states():
        chevron = " "
        if node.children:
            chevron = "v" if selector.expansion.is_expanded(node.id) else ">"
        disabled = " (disabled)" if state.disabled else ""
        print(f"{'    ' * depth}{chevron} {MARKS[state.check_state]} {node.label}{disabled}")


def main():
    initial = ["apple", "lemon", "carrot", "grapefruit", "pink-grapefruit"]

    selector = TreeSelector(
        produce_tree(),
        initial,
        mode=SelectionMode.CASCADE,
        on_change=lambda ids: print(f"Selected IDs: {ids}"),
    )
    print("-" * 50)
    render(selector)

    print("\nSwitching to top-level only")
    print("-" * 50)
    selector.set_mode(SelectionMode.TOP_LEVEL_ONLY)
    render(selector)

    print("\nChecking 'Citrus'")
    print("-" * 50)
    selector.toggle("citrus", True)
    render(selector)


if __name__ == "__main__":
    main()
