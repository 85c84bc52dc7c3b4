"""
TreeValidator - Check red-black invariants on a live tree.
"""

import logging
from typing import Any

from rbtree.models.exceptions import InvariantViolationError
from rbtree.models.node import Color, Node, is_red
from rbtree.models.sortedcontainers import RedBlackTree

logger = logging.getLogger(__name__)


class TreeValidator:
    """
    Verifies the structural invariants of a RedBlackTree.

    Checks, for tombstoned and live nodes alike:
    - keys are unique and in binary-search-tree order
    - no red node has a red child
    - every root-to-absent path has the same black count
    - the root is black
    """

    def __init__(self, tree: RedBlackTree) -> None:
        """
        Initialize validator.

        Args:
            tree: The tree to inspect. It is never modified.
        """
        self._tree = tree

    def validate(self) -> int:
        """
        Walk the whole tree and check every invariant.

        Returns:
            The black height of the tree (0 for an empty tree).

        Raises:
            InvariantViolationError: On the first violation found.
        """
        root = self._tree.root
        if root is None:
            return 0

        if root.color != Color.BLACK:
            self._fail("black-root", root.key)

        return self._check(root, None, None)

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvariantViolationError:
            return False
        return True

    def black_height(self) -> int:
        """Count black nodes on the leftmost root-to-absent path."""
        height = 0
        node = self._tree.root
        while node is not None:
            if node.color == Color.BLACK:
                height += 1
            node = node.left
        return height

    def _check(self, node: Node | None, low: Any, high: Any) -> int:
        """Return the black height below node, checking bounds on the way."""
        if node is None:
            return 0

        if low is not None:
            cmp = self._tree.compare(node.key, low)
            if cmp == 0:
                self._fail("duplicate-key", node.key)
            if cmp < 0:
                self._fail("bst-order", node.key, f"not greater than {low!r}")
        if high is not None:
            cmp = self._tree.compare(node.key, high)
            if cmp == 0:
                self._fail("duplicate-key", node.key)
            if cmp > 0:
                self._fail("bst-order", node.key, f"not less than {high!r}")

        if is_red(node) and (is_red(node.left) or is_red(node.right)):
            self._fail("red-red", node.key)

        left_height = self._check(node.left, low, node.key)
        right_height = self._check(node.right, node.key, high)
        if left_height != right_height:
            self._fail(
                "black-height",
                node.key,
                f"left subtree has {left_height}, right subtree has {right_height}",
            )

        return left_height + (1 if node.color == Color.BLACK else 0)

    def _fail(self, invariant: str, key: Any, detail: str = "") -> None:
        error = InvariantViolationError(invariant, key, detail)
        logger.warning(str(error))
        raise error
