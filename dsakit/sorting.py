"""Classic comparison sorts and inversion counting.

Every function returns a new list and leaves its input untouched.
"""

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent elements that are out of order."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def dutch_flag_sort(values: Iterable[int]) -> list:
    """Sort a sequence of 0s, 1s and 2s in a single pass.

    Values other than 0 and 1 are treated as 2.
    """
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition_last(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def _partition_first(items: list, low: int, high: int) -> int:
    pivot = items[low]
    left, right = low, high
    while left < right:
        while items[left] <= pivot and left < high:
            left += 1
        while right > low and items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[low], items[right] = items[right], items[low]
    return right


def _quick_sort(values: Iterable[Any], partition) -> list:
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        p = partition(items, low, high)
        ranges.append((low, p - 1))
        ranges.append((p + 1, high))
    return items


def quick_sort(values: Iterable[Any]) -> list:
    """Quick sort partitioning around the last element of each range."""
    return _quick_sort(values, _partition_last)


def quick_sort_first_pivot(values: Iterable[Any]) -> list:
    """Quick sort partitioning around the first element of each range."""
    return _quick_sort(values, _partition_first)


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _sort_and_count(items: list) -> tuple[list, int]:
    if len(items) < 2:
        return items, 0
    mid = (len(items) - 1) // 2 + 1
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged = []
    cross = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            cross += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, left_count + right_count + cross


def count_inversions(values: Iterable[Any]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]`` using merge sort."""
    return _sort_and_count(list(values))[1]