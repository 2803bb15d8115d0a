"""
SortedMap - ordered key-value container backed by an AVL tree.
"""

import logging
from collections.abc import AsyncIterator, Generator, Iterator
from typing import Any

from sortedmap.interfaces.sorted_container import SortedContainer
from sortedmap.models.entry import Entry
from sortedmap.models.exceptions import InvariantViolationError, UncomparableKeyError
from sortedmap.models.ordering import Comparator, has_intrinsic_order, make_compare
from sortedmap.models.sortedcontainers import avl_tree
from sortedmap.models.sortedcontainers.avl_tree import Node

logger = logging.getLogger(__name__)


class SortedMap(SortedContainer):
    """
    Ordered map with O(log N) get, set and delete.

    Keys are ordered either by a comparator supplied at construction or,
    when none is given, by the keys themselves (a compare_to() method or
    native < / > comparison). The strategy is fixed for the map's lifetime.

    Not thread-safe: callers sharing a map across threads or tasks must
    serialize access to it.
    """

    def __init__(
        self, comparator: Comparator | None = None, *, validate: bool = False
    ) -> None:
        """
        Initialize an empty map.

        Args:
            comparator: Three-way compare function (a, b) -> int. If None,
                every key must supply its own ordering.
            validate: Check the tree invariants after every mutation.
                Intended for debugging; makes each mutation O(N).
        """
        if comparator is not None and not callable(comparator):
            raise TypeError(
                f"comparator must be callable, got {type(comparator).__name__}"
            )

        self._comparator = comparator
        self._compare = make_compare(comparator)
        self._validate = validate
        self._root: Node | None = None
        self._size: int = 0

    def set(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(log N)"""
        self._check_key(key)
        self._root, created = avl_tree.insert(self._root, key, value, self._compare)
        if created:
            self._size += 1
        if self._validate:
            self.validate()

    def get(self, key: Any) -> tuple[Any, bool]:
        """Retrieve value by key. O(log N)"""
        self._check_key(key)
        return avl_tree.find(self._root, key, self._compare)

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair. O(log N)"""
        self._check_key(key)
        self._root, removed = avl_tree.delete(self._root, key, self._compare)
        if removed:
            self._size -= 1
        else:
            logger.debug(f"delete of absent key {key!r}, rebuilt tree unchanged")
        if self._validate:
            self.validate()
        return removed

    def has(self, key: Any) -> bool:
        _, found = self.get(key)
        return found

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def entries(self) -> list[Entry]:
        return avl_tree.in_order_list(self._root)

    def stream(self) -> Iterator[Entry]:
        return self._stream(avl_tree.in_order(self._root))

    def async_stream(self) -> AsyncIterator[Entry]:
        return self._async_stream(avl_tree.in_order(self._root))

    def __iter__(self) -> Iterator[Entry]:
        return self.stream()

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Entry]:
        self._check_bounds(start, end)
        return self._stream(
            avl_tree.range_entries(self._root, start, end, self._compare)
        )

    def __aiter__(self) -> AsyncIterator[Entry]:
        return self.async_stream()

    def async_iterator(
        self, start: Any = None, end: Any = None
    ) -> AsyncIterator[Entry]:
        self._check_bounds(start, end)
        return self._async_stream(
            avl_tree.range_entries(self._root, start, end, self._compare)
        )

    def validate(self) -> None:
        """
        Check every tree invariant and the tracked element count.

        Raises:
            InvariantViolationError: If the tree or the count is inconsistent.
        """
        try:
            count = avl_tree.check_invariants(self._root, self._compare)
            if count != self._size:
                raise InvariantViolationError(
                    "count",
                    self._root.key if self._root else None,
                    f"tracked size {self._size}, tree holds {count} nodes",
                )
        except InvariantViolationError as e:
            logger.critical(f"Sorted map corrupted: {e}")
            raise

    def __repr__(self) -> str:
        items = ", ".join(f"{e.key!r}: {e.value!r}" for e in self.stream())
        return f"{type(self).__name__}({{{items}}})"

    def _check_key(self, key: Any) -> None:
        """Fail before touching the tree if key cannot be ordered."""
        if self._comparator is None and not has_intrinsic_order(key):
            raise UncomparableKeyError(key)

    def _check_bounds(self, start: Any, end: Any) -> None:
        if start is not None:
            self._check_key(start)
        if end is not None:
            self._check_key(end)

    def _stream(self, entries: Generator[Entry, None, None]) -> Iterator[Entry]:
        """
        Walk the tree one entry at a time.

        The walk is suspended at every yield until the consumer asks for
        the next entry. Closing the generator unwinds the walk.
        """
        delivered = 0
        exhausted = False
        try:
            for entry in entries:
                delivered += 1
                yield entry
            exhausted = True
        finally:
            entries.close()
            if not exhausted:
                logger.debug(f"stream closed after {delivered} entries")

    async def _async_stream(
        self, entries: Generator[Entry, None, None]
    ) -> AsyncIterator[Entry]:
        delivered = 0
        exhausted = False
        try:
            for entry in entries:
                delivered += 1
                yield entry
            exhausted = True
        finally:
            entries.close()
            if not exhausted:
                logger.debug(f"async stream closed after {delivered} entries")
