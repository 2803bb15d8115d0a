"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any

from sortedmap.interfaces.range_iterable import RangeIterable
from sortedmap.models.entry import Entry


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key-value containers.

    Provides O(log N) operations for set, get, and delete.
    Inherits range iteration capabilities from RangeIterable.
    """

    @abstractmethod
    def set(self, key: Any, value: Any) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> tuple[Any, bool]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            (value, True) if found, (None, False) otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def entries(self) -> list[Entry]:
        """Return all entries in sorted order, fully materialized."""
        pass

    @abstractmethod
    def stream(self) -> Iterator[Entry]:
        """
        Return a lazy iterator over all entries in sorted order.

        Each entry is produced only when requested. Closing the iterator
        releases it before exhaustion.
        """
        pass

    @abstractmethod
    def async_stream(self) -> AsyncIterator[Entry]:
        """Async counterpart of stream()."""
        pass

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def size(self) -> int:
        return len(self)
