"""Testing utilities for DazzleTreeSelect consumers."""

from .fixtures import (
    FRUITS_TREE_DATA,
    PRODUCE_TREE_DATA,
    fruits_tree,
    produce_tree,
    make_chain,
    ancestor_pairs,
    cascade_violations,
    assert_canonical,
)

__all__ = [
    'FRUITS_TREE_DATA',
    'PRODUCE_TREE_DATA',
    'fruits_tree',
    'produce_tree',
    'make_chain',
    'ancestor_pairs',
    'cascade_violations',
    'assert_canonical',
]
