"""Shared pytest fixtures for DazzleTreeSelect tests."""

import pytest

from dazzletreeselect.testing import fruits_tree, produce_tree


@pytest.fixture
def fruits():
    """fruits{apple, banana, citrus{orange, lemon}}"""
    return fruits_tree()


@pytest.fixture
def produce():
    """Three roots including a grapefruit branch four levels deep."""
    return produce_tree()
