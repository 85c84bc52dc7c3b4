"""
Shared pytest fixtures for red-black tree tests.
"""

import random

import pytest

from rbtree.engine.validator import TreeValidator
from rbtree.models.sortedcontainers import RedBlackTree
from rbtree.models.stats import OperationStats


@pytest.fixture
def tree():
    """Provide a fresh empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def sample_keys():
    """Provide the seven-key sample used across tests."""
    return [5, 3, 8, 1, 4, 7, 9]


@pytest.fixture
def sample_tree(sample_keys):
    """Provide a tree populated with the sample keys."""
    tree = RedBlackTree()
    for key in sample_keys:
        tree.insert(key)
    return tree


@pytest.fixture
def stats():
    """Provide fresh operation counters."""
    return OperationStats()


@pytest.fixture
def shuffled_keys():
    """Provide a reproducible permutation of 500 distinct keys."""
    keys = list(range(500))
    random.Random(1234).shuffle(keys)
    return keys


@pytest.fixture
def validate():
    """Provide a helper that checks all invariants and returns the black height."""

    def _validate(tree: RedBlackTree) -> int:
        return TreeValidator(tree).validate()

    return _validate
