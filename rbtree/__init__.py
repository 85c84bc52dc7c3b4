"""
Red-black tree based ordered key container.

This package provides:
- insert(key) - O(log N), rejects duplicates with False
- search(key) - O(log N), hides removed keys
- remove(key) - O(log N) tombstone-based logical deletion
- Ordered iteration (sync and async) over live keys, optionally bounded
- TreeValidator - checks the red-black invariants
"""

from rbtree.engine import TreeValidator
from rbtree.models import Color, InvariantViolationError, Node, OperationStats
from rbtree.models.sortedcontainers import RedBlackTree

__all__ = [
    "RedBlackTree",
    "Node",
    "Color",
    "OperationStats",
    "InvariantViolationError",
    "TreeValidator",
]
