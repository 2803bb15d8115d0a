"""
Data models for the sorted map.
"""

from sortedmap.models.entry import Entry
from sortedmap.models.exceptions import (
    InvariantViolationError,
    SortedMapError,
    UncomparableKeyError,
)
from sortedmap.models.ordering import Comparable, Comparator

__all__ = [
    "Comparable",
    "Comparator",
    "Entry",
    "InvariantViolationError",
    "SortedMapError",
    "UncomparableKeyError",
]
