"""
Ordered key-value map backed by an AVL tree.

This package provides an in-memory sorted map with:
- set(key, value) - O(log N) insert or update
- get(key) - O(log N) lookup returning (value, found)
- delete(key) - O(log N) removal via tree split and merge
- entries() - all entries in key order, materialized
- stream() / async_stream() - lazy, cancelable in-order traversal
- iterator(start, end) - range queries over sorted keys
"""

from sortedmap.models.entry import Entry
from sortedmap.models.exceptions import (
    InvariantViolationError,
    SortedMapError,
    UncomparableKeyError,
)
from sortedmap.models.ordering import Comparable, Comparator
from sortedmap.sorted_map import SortedMap

__all__ = [
    "Comparable",
    "Comparator",
    "Entry",
    "InvariantViolationError",
    "SortedMap",
    "SortedMapError",
    "UncomparableKeyError",
]
