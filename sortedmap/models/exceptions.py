"""
Custom exceptions for the sorted map.
"""

from typing import Any


class SortedMapError(Exception):
    """Base class for all sorted map errors."""


class UncomparableKeyError(SortedMapError, TypeError):
    """
    Raised when a key cannot be ordered against the other keys of a map.

    Either the map was built without a comparator and the key supplies no
    ordering of its own, or comparing the key raised a TypeError.
    """

    def __init__(self, key: Any, reason: str | None = None):
        """
        Initialize the error.

        Args:
            key: The offending key.
            reason: Optional detail about why the comparison failed.
        """
        self.key = key
        self.reason = reason
        message = (
            f"key {key!r} of type {type(key).__name__} has no ordering: "
            f"supply a comparator or implement compare_to()"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvariantViolationError(SortedMapError, AssertionError):
    """
    Raised when a tree invariant check fails.

    This is a fail-fast error indicating a defect in the tree engine.
    """

    def __init__(self, invariant: str, key: Any, detail: str):
        """
        Initialize the violation error.

        Args:
            invariant: Name of the broken invariant (order, height, balance, count).
            key: Key of the node where the violation was found.
            detail: Human-readable description of the mismatch.
        """
        self.invariant = invariant
        self.key = key
        self.detail = detail
        super().__init__(
            f"{invariant} invariant violated at key {key!r}: {detail}"
        )
