"""
SortedContainer abstract base class for ordered key containers.
"""

from abc import abstractmethod
from typing import Any

from rbtree.interfaces.range_iterable import RangeIterable
from rbtree.models.node import Node
from rbtree.models.stats import OperationStats


class SortedContainer(RangeIterable):
    """
    Abstract base class for ordered containers of unique keys.

    Provides O(log N) insert, search and logical removal.
    Inherits ordered traversal from RangeIterable.

    Implementations:
    - RedBlackTree: recursive insert with bottom-up repair, tombstone removal
    """

    @abstractmethod
    def insert(self, key: Any, stats: OperationStats | None = None) -> bool:
        """
        Insert a new key.

        Args:
            key: The key to insert.
            stats: Optional caller-owned counters to update.

        Returns:
            True if the key was added, False if it already exists
            (live or removed). The container is unchanged on False.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, key: Any, stats: OperationStats | None = None) -> Node | None:
        """
        Look up the node holding a key.

        Args:
            key: The key to look up.
            stats: Optional caller-owned counters to update.

        Returns:
            The node if the key is present and not removed, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, key: Any, stats: OperationStats | None = None) -> bool:
        """
        Logically remove a key.

        Args:
            key: The key to remove.
            stats: Optional caller-owned counters to update.

        Returns:
            True if a live key was marked removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a live key exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of live keys.

        Time complexity: O(1)
        """
        pass
