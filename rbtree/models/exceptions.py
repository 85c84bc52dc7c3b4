"""
Custom exceptions for the red-black tree.
"""

from typing import Any


class InvariantViolationError(Exception):
    """
    Raised when a red-black tree invariant does not hold.

    Only raised by explicit validation; normal operations report
    failures through their return values.
    """

    def __init__(self, invariant: str, key: Any = None, detail: str = ""):
        """
        Initialize violation error.

        Args:
            invariant: Short name of the broken invariant
                ("bst-order", "red-red", "black-height", "black-root", "duplicate-key").
            key: Key of the node where the violation was found, if any.
            detail: Extra human-readable context.
        """
        self.invariant = invariant
        self.key = key
        self.detail = detail
        message = f"Red-black invariant '{invariant}' violated"
        if key is not None:
            message += f" at key {key!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
