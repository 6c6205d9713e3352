"""Linear, binary and interpolation search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["linear_search", "binary_search", "interpolation_search"]


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Index of the first item equal to ``target``, or None."""
    return next((i for i, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in an ascending sequence, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if target < items[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def interpolation_search(items: Sequence[int], target: int) -> int | None:
    """Index of ``target`` in an ascending numeric sequence, probing by value, or None."""
    low, high = 0, len(items) - 1
    while low <= high and items[low] <= target <= items[high]:
        if items[high] == items[low]:
            return low
        mid = low + int((target - items[low]) * (high - low) // (items[high] - items[low]))
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None