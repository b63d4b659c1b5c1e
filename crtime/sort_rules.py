"""
sort_rules.py - Sorting Rules Module
"""

from typing import List

from .models_fs import RenameItem


def sort_by_created(items: List[RenameItem]) -> List[RenameItem]:
    """
    Sort items by creation time, oldest first

    Python's sort is stable, so items with equal timestamps keep
    their scan order.

    Args:
        items: Item list

    Returns:
        Sorted item list (new list)
    """
    return sorted(items, key=lambda item: item.created)
