"""
Entry - immutable key/value pair produced by traversal.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Entry:
    """
    A key/value pair read out of the tree.

    Attributes:
        key: The entry key.
        value: The value stored under the key.
    """

    key: Any
    value: Any

    def __iter__(self) -> Iterator[Any]:
        """Allow unpacking as ``key, value = entry``."""
        yield self.key
        yield self.value
