"""
Data models for the red-black tree.
"""

from rbtree.models.exceptions import InvariantViolationError
from rbtree.models.node import Color, Node, is_red
from rbtree.models.stats import OperationStats

__all__ = [
    "Color",
    "Node",
    "is_red",
    "OperationStats",
    "InvariantViolationError",
]
