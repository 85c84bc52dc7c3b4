"""
OperationStats - caller-owned counters for tree operations.
"""

from dataclasses import dataclass, fields


@dataclass
class OperationStats:
    """
    Counters updated by tree operations when passed in by the caller.

    Attributes:
        rotations: Single rotations performed (a double rotation counts two).
        visits: Nodes visited while descending.
        color_flips: Colour flips applied during insert repair.
    """

    rotations: int = 0
    visits: int = 0
    color_flips: int = 0

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, 0)

    def merge(self, other: "OperationStats") -> "OperationStats":
        """Add another instance's counters into this one."""
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))
        return self
