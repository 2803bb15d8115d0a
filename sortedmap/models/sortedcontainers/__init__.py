"""
Sorted container engines for the sorted map.
"""

from sortedmap.models.sortedcontainers import avl_tree

__all__ = ["avl_tree"]
