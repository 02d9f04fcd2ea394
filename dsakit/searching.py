"""Linear and binary search over sequences."""

import bisect
from collections.abc import Sequence
from typing import Any, Optional


def linear_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Return the index of the first element equal to ``key``, or None."""
    return next((i for i, value in enumerate(values) if value == key), None)


def lower_bound(values: Sequence[Any], key: Any) -> int:
    """Return the first index of sorted ``values`` whose element is not below ``key``."""
    return bisect.bisect_left(values, key)


def upper_bound(values: Sequence[Any], key: Any) -> int:
    """Return the first index of sorted ``values`` whose element is above ``key``."""
    return bisect.bisect_right(values, key)


def binary_search(values: Sequence[Any], key: Any) -> bool:
    """Tell whether sorted ``values`` contains ``key``."""
    index = lower_bound(values, key)
    return index < len(values) and values[index] == key


def count_occurrences(values: Sequence[Any], key: Any) -> int:
    """Count how often ``key`` appears in sorted ``values``."""
    return upper_bound(values, key) - lower_bound(values, key)