"""
Key ordering: external comparators and intrinsic key comparison.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from sortedmap.models.exceptions import UncomparableKeyError

# Three-way compare: negative when a < b, zero when equal, positive when a > b.
Comparator = Callable[[Any, Any], int]


@runtime_checkable
class Comparable(Protocol):
    """
    Protocol for keys that know how to order themselves.

    compare_to() must return a negative number, zero or a positive number
    when self is less than, equal to or greater than other.
    """

    def compare_to(self, other: Any) -> int: ...


def has_intrinsic_order(key: Any) -> bool:
    """
    Check whether a key can be ordered without an external comparator.

    A key qualifies if it implements compare_to() or if its own < actually
    orders it. Types whose __lt__ only returns NotImplemented (object, dict,
    complex) do not qualify.
    """
    if isinstance(key, Comparable):
        return True
    try:
        return key.__lt__(key) is not NotImplemented
    except TypeError:
        return False


def intrinsic_compare(a: Any, b: Any) -> int:
    """Three-way compare using the key's own ordering."""
    compare_to = getattr(a, "compare_to", None)
    if compare_to is not None:
        return compare_to(b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def make_compare(comparator: Comparator | None = None) -> Comparator:
    """
    Build the compare function a map uses for its whole lifetime.

    Args:
        comparator: External three-way comparator. If None, keys are
            compared with intrinsic_compare().

    Returns:
        A three-way compare function that raises UncomparableKeyError
        instead of TypeError when two keys cannot be ordered.
    """
    base = comparator if comparator is not None else intrinsic_compare

    def compare(a: Any, b: Any) -> int:
        try:
            return base(a, b)
        except UncomparableKeyError:
            raise
        except TypeError as e:
            raise UncomparableKeyError(a, f"cannot compare with {b!r}: {e}") from e

    return compare
