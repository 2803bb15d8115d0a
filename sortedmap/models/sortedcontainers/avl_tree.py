"""
AVL tree engine for sorted key-value storage.

Every function takes a subtree root and returns the (possibly new) root of
the rebuilt subtree. Nothing here holds state between calls; the owning
container keeps the root and the element count.

Deletion does not splice out a successor. The tree is split around the key
into two balanced halves (the matching node is dropped) and the halves are
merged back together.
"""

from collections.abc import Generator
from dataclasses import dataclass
from typing import Any

from sortedmap.models.entry import Entry
from sortedmap.models.exceptions import InvariantViolationError
from sortedmap.models.ordering import Comparator


@dataclass
class Node:
    """Node in the AVL tree."""

    key: Any
    value: Any
    height: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def height(node: Node | None) -> int:
    if node is None:
        return 0
    return node.height


def balance_factor(node: Node | None) -> int:
    if node is None:
        return 0
    return height(node.right) - height(node.left)


def fix_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_left(node: Node) -> Node:
    """Left rotation. The right child becomes the subtree root."""
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    fix_height(node)
    fix_height(pivot)
    return pivot


def rotate_right(node: Node) -> Node:
    """Right rotation. The left child becomes the subtree root."""
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    fix_height(node)
    fix_height(pivot)
    return pivot


def balance(node: Node) -> Node:
    """
    Restore the AVL property at node.

    Assumes both children are balanced and differ in height by at most 2.

    Returns:
        The new subtree root (node itself when no rotation was needed).
    """
    fix_height(node)
    bf = balance_factor(node)

    if bf == 2:
        if balance_factor(node.right) < 0:
            # Right-left case
            node.right = rotate_right(node.right)
        return rotate_left(node)

    if bf == -2:
        if balance_factor(node.left) > 0:
            # Left-right case
            node.left = rotate_left(node.left)
        return rotate_right(node)

    return node


def insert(
    node: Node | None, key: Any, value: Any, compare: Comparator
) -> tuple[Node, bool]:
    """
    Insert or update a key-value pair. O(log N)

    Args:
        node: Subtree root.
        key: Key to insert.
        value: Value to store under key.
        compare: Three-way compare function.

    Returns:
        (new subtree root, True if a node was created / False if an
        existing value was overwritten).
    """
    if node is None:
        return Node(key=key, value=value), True

    cmp = compare(key, node.key)
    if cmp < 0:
        node.left, created = insert(node.left, key, value, compare)
    elif cmp > 0:
        node.right, created = insert(node.right, key, value, compare)
    else:
        # Key exists, update value
        node.value = value
        return node, False

    return balance(node), created


def find(node: Node | None, key: Any, compare: Comparator) -> tuple[Any, bool]:
    """Look up key. Returns (value, True) or (None, False). O(log N)"""
    while node is not None:
        cmp = compare(key, node.key)
        if cmp < 0:
            node = node.left
        elif cmp > 0:
            node = node.right
        else:
            return node.value, True
    return None, False


def find_min(node: Node) -> Node:
    """Return the leftmost node of a non-empty subtree without removing it."""
    while node.left is not None:
        node = node.left
    return node


def remove_min(node: Node) -> Node | None:
    """Detach the leftmost node, rebalancing every ancestor on the way up."""
    if node.left is None:
        return node.right
    node.left = remove_min(node.left)
    return balance(node)


def merge(left: Node | None, right: Node | None) -> Node | None:
    """
    Join two balanced trees into one balanced tree.

    Every key in left must compare less than every key in right. The taller
    side is descended along its inner spine until the heights are within one,
    where the minimum of right is lifted out and used as the joining root.
    """
    if left is None:
        return right
    if right is None:
        return left

    if left.height > right.height:
        left.right = merge(left.right, right)
        return balance(left)

    if left.height + 1 < right.height:
        right.left = merge(left, right.left)
        return balance(right)

    root = find_min(right)
    right = remove_min(right)
    root.left = left
    root.right = right
    return balance(root)


def split(
    node: Node | None, key: Any, compare: Comparator
) -> tuple[Node | None, Node | None, bool]:
    """
    Partition a tree around key.

    Returns:
        (less, greater, removed): less holds every key strictly below key,
        greater every key strictly above it. A node matching key is in
        neither, and removed tells whether such a node was dropped.
    """
    if node is None:
        return None, None, False

    cmp = compare(node.key, key)
    if cmp < 0:
        less, greater, removed = split(node.right, key, compare)
        less = merge(node.left, less)
        less, _ = insert(less, node.key, node.value, compare)
        return less, greater, removed

    less, greater, removed = split(node.left, key, compare)
    greater = merge(greater, node.right)
    if cmp != 0:
        greater, _ = insert(greater, node.key, node.value, compare)
    else:
        removed = True
    return less, greater, removed


def delete(
    node: Node | None, key: Any, compare: Comparator
) -> tuple[Node | None, bool]:
    """
    Remove key from the tree via split and merge. O(log N)

    An absent key still goes through the full split/merge round trip and
    yields an equivalent, rebuilt tree.

    Returns:
        (new root, True if a node was removed).
    """
    if node is None:
        return None, False
    less, greater, removed = split(node, key, compare)
    return merge(less, greater), removed


def in_order(node: Node | None) -> Generator[Entry, None, None]:
    """Lazily yield entries in ascending key order."""
    if node is None:
        return
    yield from in_order(node.left)
    yield Entry(node.key, node.value)
    yield from in_order(node.right)


def in_order_list(node: Node | None, result: list[Entry] | None = None) -> list[Entry]:
    """Collect entries in ascending key order into a list."""
    if result is None:
        result = []
    if node is None:
        return result
    in_order_list(node.left, result)
    result.append(Entry(node.key, node.value))
    in_order_list(node.right, result)
    return result


def range_entries(
    node: Node | None, start: Any, end: Any, compare: Comparator
) -> Generator[Entry, None, None]:
    """
    Lazily yield entries with start <= key < end in ascending order.

    Either bound may be None for an open range. Subtrees entirely outside
    the range are never visited.
    """
    if node is None:
        return

    after_start = start is None or compare(node.key, start) >= 0
    before_end = end is None or compare(node.key, end) < 0

    if after_start:
        yield from range_entries(node.left, start, end, compare)
    if after_start and before_end:
        yield Entry(node.key, node.value)
    if before_end:
        yield from range_entries(node.right, start, end, compare)


def check_invariants(node: Node | None, compare: Comparator) -> int:
    """
    Verify BST order, height consistency and AVL balance of a tree.

    Raises:
        InvariantViolationError: On the first violation found.

    Returns:
        Number of nodes in the tree.
    """
    return _check_subtree(node, compare, None, None)


def _check_subtree(
    node: Node | None, compare: Comparator, low: Node | None, high: Node | None
) -> int:
    if node is None:
        return 0

    if low is not None and compare(node.key, low.key) <= 0:
        raise InvariantViolationError(
            "order", node.key, f"not greater than ancestor key {low.key!r}"
        )
    if high is not None and compare(node.key, high.key) >= 0:
        raise InvariantViolationError(
            "order", node.key, f"not less than ancestor key {high.key!r}"
        )

    count = 1
    count += _check_subtree(node.left, compare, low, node)
    count += _check_subtree(node.right, compare, node, high)

    expected = 1 + max(height(node.left), height(node.right))
    if node.height != expected:
        raise InvariantViolationError(
            "height", node.key, f"stored {node.height}, computed {expected}"
        )

    bf = balance_factor(node)
    if bf < -1 or bf > 1:
        raise InvariantViolationError("balance", node.key, f"balance factor {bf}")

    return count
