"""
Helpers that operate on a whole tree.
"""

from rbtree.engine.validator import TreeValidator

__all__ = ["TreeValidator"]
