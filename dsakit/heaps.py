"""Binary max-heaps stored in lists, heap construction and heap sort."""

from collections.abc import Iterable, Iterator
from typing import Any


def sift_down(values: list, size: int, index: int) -> None:
    """Restore the max-heap property below ``index`` within ``values[:size]``.

    The list is changed in place.
    """
    if not 0 <= size <= len(values):
        raise ValueError("heap size is out of range")
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def _sift_up(values: list, index: int) -> None:
    item = values[index]
    while index > 0:
        parent = (index - 1) // 2
        if item <= values[parent]:
            break
        values[index] = values[parent]
        index = parent
    values[index] = item


def build_max_heap(values: Iterable[Any]) -> list:
    """Return a new list holding ``values`` arranged as a max-heap."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        sift_down(items, len(items), index)
    return items


def heap_sort(values: Iterable[Any]) -> list:
    """Return ``values`` sorted in ascending order by heap sort."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(items, end, 0)
    return items


class MaxHeap:
    """A max-heap supporting insertion, root removal and removal by key."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._data = build_max_heap(values)

    def push(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        self._data.append(key)
        _sift_up(self._data, len(self._data) - 1)

    def pop_root(self) -> Any:
        """Remove and return the largest element."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            sift_down(self._data, len(self._data), 0)
        return root

    def remove(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise ValueError if it is absent."""
        try:
            index = self._data.index(key)
        except ValueError:
            raise ValueError(f"{key!r} is not in the heap") from None
        last = self._data.pop()
        if index == len(self._data):
            return
        self._data[index] = last
        parent = (index - 1) // 2
        if index > 0 and last > self._data[parent]:
            _sift_up(self._data, index)
        else:
            sift_down(self._data, len(self._data), index)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements in their array order."""
        return iter(list(self._data))