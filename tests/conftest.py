"""
Shared pytest fixtures for sorted map tests.
"""

import pytest

from sortedmap import SortedMap


def int_comparator(a, b):
    return a - b


@pytest.fixture
def int_map():
    """Provide an empty map ordered by an external int comparator."""
    return SortedMap(int_comparator)


@pytest.fixture
def checked_map():
    """Provide an empty map that validates its invariants after every mutation."""
    return SortedMap(int_comparator, validate=True)


@pytest.fixture
def scenario_keys():
    """Provide the insertion order used by the end-to-end traversal tests."""
    return [10, 1, 2, 7, 5, 12, 11, 15, 4]


@pytest.fixture
def scenario_map(int_map, scenario_keys):
    """Provide a map holding scenario_keys, each mapped to twice its value."""
    for key in scenario_keys:
        int_map.set(key, key * 2)
    return int_map
