"""
Abstract base classes for ordered containers.
"""

from rbtree.interfaces.range_iterable import RangeIterable
from rbtree.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
