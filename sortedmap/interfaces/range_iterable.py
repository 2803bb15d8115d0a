"""
RangeIterable protocol for data structures that support range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any

from sortedmap.models.entry import Entry


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of keys.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Entry]:
        """Return an iterator over all entries in sorted order."""
        pass

    @abstractmethod
    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Entry]:
        """
        Return an iterator over entries in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding entries in sorted order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Entry]:
        """Return an async iterator over all entries in sorted order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: Any = None, end: Any = None
    ) -> AsyncIterator[Entry]:
        """
        Return an async iterator over entries in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            AsyncIterator yielding entries in sorted order.
        """
        pass
