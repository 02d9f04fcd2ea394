"""Sliding-window computations over sequences of numbers."""

from collections.abc import Iterable


def max_window_sum(values: Iterable[int], size: int) -> int:
    """Return the largest sum of ``size`` consecutive elements of ``values``.

    The sum is kept up to date as the window slides, so the work is linear
    in the number of values.
    """
    items = list(values)
    if size < 1:
        raise ValueError("window size must be at least 1")
    if size > len(items):
        raise ValueError("window size exceeds the number of values")

    window = sum(items[:size])
    best = window
    for leaving, entering in zip(items, items[size:]):
        window += entering - leaving
        best = max(best, window)
    return best