"""
Red-Black Tree implementation for ordered key storage.

Insertion is a recursive descent that repairs the tree on the way back up
(four rotation cases, then a colour flip). Removal only sets a tombstone.
"""

import logging
from collections.abc import AsyncIterator, Callable, Iterator
from typing import Any

from rbtree.interfaces.sorted_container import SortedContainer
from rbtree.models.node import Color, Node, is_red
from rbtree.models.stats import OperationStats

logger = logging.getLogger(__name__)


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the keys' own ordering."""
    return (a > b) - (a < b)


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained after every insert:
    1. Keys are in binary-search-tree order
    2. Red nodes cannot have red children
    3. Every path from root to an absent child has the same number of black nodes
    4. Root is always black

    Removed keys stay in the tree as tombstones. They still count for the
    properties above and still block re-insertion of the same key.
    """

    def __init__(self, compare: Callable[[Any, Any], int] | None = None) -> None:
        """
        Initialize an empty tree.

        Args:
            compare: Three-way comparison returning a negative number, zero or
                a positive number. Defaults to the keys' natural ordering.
        """
        if compare is not None and not callable(compare):
            raise TypeError(f"compare must be callable, got {type(compare).__name__}")

        self._compare = compare or natural_compare
        self._root: Node | None = None
        self._size: int = 0

    @property
    def root(self) -> Node | None:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def compare(self, a: Any, b: Any) -> int:
        return self._compare(a, b)

    def insert(self, key: Any, stats: OperationStats | None = None) -> bool:
        """Insert a new key. O(log N)"""
        if self._find_node(key) is not None:
            logger.debug("Rejected insert of duplicate key %r", key)
            return False

        self._root = self._put(self._root, key, stats)
        self._root.color = Color.BLACK
        self._size += 1
        return True

    def search(self, key: Any, stats: OperationStats | None = None) -> Node | None:
        """Find the live node holding key. O(log N)"""
        node = self._find_node(key, stats)
        if node is None or node.tombstone:
            return None
        return node

    def remove(self, key: Any, stats: OperationStats | None = None) -> bool:
        """Mark a key as removed without restructuring. O(log N)"""
        node = self.search(key, stats)
        if node is None:
            logger.debug("Rejected removal of missing key %r", key)
            return False

        node.tombstone = True
        self._size -= 1
        return True

    def has(self, key: Any) -> bool:
        return self.search(key) is not None

    def size(self) -> int:
        return self._size

    def node_count(self) -> int:
        """Count physical nodes, tombstones included."""
        count = 0
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            count += 1
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        return count

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        best = 0
        stack = [(self._root, 1)] if self._root else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left:
                stack.append((node.left, depth + 1))
            if node.right:
                stack.append((node.right, depth + 1))
        return best

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        return _RangeIterator(self._root, self._compare, start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(self, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
        return _AsyncRangeIterator(self._root, self._compare, start, end)

    def __repr__(self) -> str:
        return f"RedBlackTree(size={self._size}, nodes={self.node_count()})"

    def _find_node(self, key: Any, stats: OperationStats | None = None) -> Node | None:
        """Find node by key, tombstoned or not."""
        current = self._root
        while current is not None:
            if stats is not None:
                stats.visits += 1
            cmp = self._compare(key, current.key)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return current
        return None

    def _put(self, node: Node | None, key: Any, stats: OperationStats | None) -> Node:
        """Insert below node and return the repaired subtree root."""
        if node is None:
            return Node(key=key)

        if stats is not None:
            stats.visits += 1

        if self._compare(key, node.key) < 0:
            node.left = self._put(node.left, key, stats)
        else:
            node.right = self._put(node.right, key, stats)

        # Outside grandchild on the left
        if is_red(node.left) and is_red(node.left.left):
            node.color = Color.RED
            node.left.color = Color.BLACK
            node = self._rotate_right(node, stats)

        # Outside grandchild on the right
        if is_red(node.right) and is_red(node.right.right):
            node.color = Color.RED
            node.right.color = Color.BLACK
            node = self._rotate_left(node, stats)

        # Inside grandchild, left-right
        if is_red(node.left) and is_red(node.left.right):
            node.color = Color.RED
            node.left.right.color = Color.BLACK
            node.left = self._rotate_left(node.left, stats)
            node = self._rotate_right(node, stats)

        # Inside grandchild, right-left
        if is_red(node.right) and is_red(node.right.left):
            node.color = Color.RED
            node.right.left.color = Color.BLACK
            node.right = self._rotate_right(node.right, stats)
            node = self._rotate_left(node, stats)

        self._color_flip(node, stats)
        return node

    def _color_flip(self, node: Node, stats: OperationStats | None) -> None:
        """Push a black node's colour down onto its two red children."""
        if node.left is None or node.right is None:
            return

        if node.color == Color.BLACK and is_red(node.left) and is_red(node.right):
            # The root keeps its colour
            if node is not self._root:
                node.color = Color.RED
            node.left.color = Color.BLACK
            node.right.color = Color.BLACK
            if stats is not None:
                stats.color_flips += 1

    def _rotate_right(self, node: Node, stats: OperationStats | None) -> Node:
        """Right rotation. Returns the node now in place of the original."""
        left_child = node.left
        node.left = left_child.right
        left_child.right = node

        if stats is not None:
            stats.rotations += 1
        logger.debug("Rotated right at key %r", node.key)
        return left_child

    def _rotate_left(self, node: Node, stats: OperationStats | None) -> Node:
        """Left rotation. Returns the node now in place of the original."""
        right_child = node.right
        node.right = right_child.left
        right_child.left = node

        if stats is not None:
            stats.rotations += 1
        logger.debug("Rotated left at key %r", node.key)
        return right_child


class _RangeIterator(Iterator[Any]):
    """Iterator over live keys in [start, end) on a Red-Black Tree."""

    def __init__(
        self,
        root: Node | None,
        compare: Callable[[Any, Any], int],
        start: Any,
        end: Any,
    ) -> None:
        self._stack: list[Node] = []
        self._compare = compare
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        while self._stack:
            node = self._stack.pop()

            # Check end bound
            if self._end is not None and self._compare(node.key, self._end) >= 0:
                self._stack.clear()
                break

            # Push right subtree's left path
            self._push_left_path(node.right, None)

            if not node.tombstone:
                return node.key

        raise StopIteration

    def _push_left_path(self, node: Node | None, start: Any) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and self._compare(node.key, start) < 0:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[Any]):
    """Async iterator over live keys on a Red-Black Tree (in-memory, no I/O)."""

    def __init__(
        self,
        root: Node | None,
        compare: Callable[[Any, Any], int],
        start: Any,
        end: Any,
    ) -> None:
        self._inner = _RangeIterator(root, compare, start, end)

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
