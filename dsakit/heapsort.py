"""Heap sort and inversion counting."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["heapify", "heap_sort", "count_inversions"]


def heapify(items: list[Any], size: int, index: int) -> None:
    """Sift ``items[index]`` down within the first ``size`` items of a max-heap, in place."""
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted with a max-heap."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        heapify(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result


def _sort_and_count(values: list[Any]) -> tuple[list[Any], int]:
    if len(values) <= 1:
        return values, 0
    middle = (len(values) - 1) // 2 + 1
    left, left_count = _sort_and_count(values[:middle])
    right, right_count = _sort_and_count(values[middle:])
    merged: list[Any] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(items: Iterable[Any]) -> int:
    """Number of pairs ``i < j`` with ``items[i] > items[j]``, via merge sort."""
    return _sort_and_count(list(items))[1]