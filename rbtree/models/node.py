"""
Node and Color for the red-black tree.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """
    Node in the Red-Black Tree.

    Each node exclusively owns its children; there are no parent links.
    A tombstoned node stays in the structure but is hidden from lookups.
    """

    key: Any
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None
    tombstone: bool = False

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def is_red(node: Node | None) -> bool:
    """Absent children count as black."""
    return node is not None and node.color == Color.RED
