"""
Abstract base classes and protocols for sorted containers.
"""

from sortedmap.interfaces.range_iterable import RangeIterable
from sortedmap.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
