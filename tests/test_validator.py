"""
Tests for TreeValidator.
"""

import logging

import pytest

from rbtree.engine.validator import TreeValidator
from rbtree.models.exceptions import InvariantViolationError
from rbtree.models.node import Color, Node
from rbtree.models.sortedcontainers import RedBlackTree


def tree_with_root(root: Node) -> RedBlackTree:
    """Build a tree around a hand-made node structure."""
    tree = RedBlackTree()
    tree._root = root
    return tree


class TestValidTrees:
    """Tests for trees that satisfy every invariant."""

    def test_empty_tree(self, tree):
        """Test an empty tree is valid with black height 0."""
        validator = TreeValidator(tree)
        assert validator.validate() == 0
        assert validator.black_height() == 0
        assert validator.is_valid()

    def test_sample_tree(self, sample_tree):
        """Test the sample tree has black height 3."""
        validator = TreeValidator(sample_tree)
        assert validator.validate() == 3
        assert validator.black_height() == 3

    def test_tombstones_still_checked(self, sample_tree):
        """Test a tree of tombstones keeps its black height."""
        for key in (1, 3, 4, 5):
            sample_tree.remove(key)
        assert TreeValidator(sample_tree).validate() == 3

    def test_black_height_matches_validate(self, shuffled_keys):
        """Test both black height paths agree on a large tree."""
        tree = RedBlackTree()
        for key in shuffled_keys:
            tree.insert(key)

        validator = TreeValidator(tree)
        assert validator.validate() == validator.black_height()


class TestBrokenTrees:
    """Tests that hand-built broken trees are rejected."""

    def test_red_root(self):
        """Test a red root is reported."""
        tree = tree_with_root(Node(key=2, color=Color.RED))

        with pytest.raises(InvariantViolationError) as exc_info:
            TreeValidator(tree).validate()
        assert exc_info.value.invariant == "black-root"
        assert exc_info.value.key == 2

    def test_red_red(self):
        """Test consecutive red nodes are reported."""
        root = Node(
            key=2,
            color=Color.BLACK,
            left=Node(key=1, left=Node(key=0)),
            right=Node(key=3),
        )
        tree = tree_with_root(root)

        with pytest.raises(InvariantViolationError) as exc_info:
            TreeValidator(tree).validate()
        assert exc_info.value.invariant == "red-red"
        assert exc_info.value.key == 1

    def test_black_height_mismatch(self):
        """Test unequal black counts are reported."""
        root = Node(key=2, color=Color.BLACK, left=Node(key=1, color=Color.BLACK))
        tree = tree_with_root(root)

        with pytest.raises(InvariantViolationError) as exc_info:
            TreeValidator(tree).validate()
        assert exc_info.value.invariant == "black-height"
        assert exc_info.value.key == 2

    def test_bst_order(self):
        """Test a misplaced key is reported."""
        root = Node(key=2, color=Color.BLACK, left=Node(key=3), right=Node(key=4))
        tree = tree_with_root(root)

        with pytest.raises(InvariantViolationError) as exc_info:
            TreeValidator(tree).validate()
        assert exc_info.value.invariant == "bst-order"
        assert exc_info.value.key == 3

    def test_bst_order_deep(self):
        """Test a key violating a grandparent bound is reported."""
        root = Node(
            key=5,
            color=Color.BLACK,
            left=Node(key=3, color=Color.BLACK, right=Node(key=6)),
            right=Node(key=8, color=Color.BLACK),
        )
        tree = tree_with_root(root)

        with pytest.raises(InvariantViolationError) as exc_info:
            TreeValidator(tree).validate()
        assert exc_info.value.invariant == "bst-order"
        assert exc_info.value.key == 6

    def test_duplicate_key(self):
        """Test a repeated key is reported."""
        root = Node(key=2, color=Color.BLACK, left=Node(key=2))
        tree = tree_with_root(root)

        assert not TreeValidator(tree).is_valid()
        with pytest.raises(InvariantViolationError) as exc_info:
            TreeValidator(tree).validate()
        assert exc_info.value.invariant == "duplicate-key"

    def test_violation_logged(self, caplog):
        """Test violations are logged as warnings before raising."""
        caplog.set_level(logging.WARNING, logger="rbtree")
        tree = tree_with_root(Node(key=1, color=Color.RED))

        assert not TreeValidator(tree).is_valid()
        assert "black-root" in caplog.text
