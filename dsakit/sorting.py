"""Classic comparison and counting sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "counting_sort",
    "counting_sort_by_tally",
    "merge_sort",
    "quick_sort",
    "shell_sort",
]


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops early once a pass makes no swap."""
    result = list(items)
    for step in range(len(result) - 1):
        swapped = False
        for i in range(len(result) - step - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Selection sort: repeatedly move the smallest remaining item forward."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Insertion sort: shift larger items right to make room for each new one."""
    result = list(items)
    for i in range(1, len(result)):
        store = result[i]
        j = i - 1
        while j >= 0 and store < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = store
    return result


def _tally(items: list[int], max_value: int) -> list[int]:
    count = [0] * (max_value + 1)
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside 0..{max_value}")
        count[value] += 1
    return count


def counting_sort(items: Iterable[int], max_value: int) -> list[int]:
    """Stable counting sort of integers in ``0..max_value`` using prefix sums."""
    source = list(items)
    count = _tally(source, max_value)
    for i in range(1, max_value + 1):
        count[i] += count[i - 1]
    result = [0] * len(source)
    for value in reversed(source):
        count[value] -= 1
        result[count[value]] = value
    return result


def counting_sort_by_tally(items: Iterable[int], max_value: int) -> list[int]:
    """Counting sort of integers in ``0..max_value`` by expanding the tally."""
    count = _tally(list(items), max_value)
    return [value for value, times in enumerate(count) for _ in range(times)]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(result, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps halving from half the length down to one."""
    result = list(items)
    interval = len(result) // 2
    while interval:
        for i in range(interval, len(result)):
            temp = result[i]
            j = i
            while j >= interval and result[j - interval] > temp:
                result[j] = result[j - interval]
                j -= interval
            result[j] = temp
        interval //= 2
    return result