"""Greedy algorithms for scheduling and fractional packing."""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Optional


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the most non-overlapping ``(start, end)`` intervals one can pick.

    An interval may start exactly when the previous one ends.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            finish = end
            count += 1
    return count


@dataclass(frozen=True)
class Item:
    """An item that may be packed whole or in part."""

    profit: float
    weight: float

    @property
    def ratio(self) -> float:
        """Profit per unit of weight."""
        if self.weight == 0:
            return float("inf")
        return self.profit / self.weight


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Return the best profit when items may be split to fill ``capacity``."""
    total = 0.0
    remaining = capacity
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if item.weight <= remaining:
            total += item.profit
            remaining -= item.weight
        elif remaining > 0:
            fraction = remaining / item.weight
            total += fraction * item.profit
            remaining = 0
    return total


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by slot ``deadline``."""

    label: Hashable
    deadline: int
    profit: int


def sequence_jobs(jobs: Iterable[Job]) -> tuple[list[Job], int]:
    """Schedule the most profitable jobs, each as late as its deadline allows.

    Returns the scheduled jobs in slot order and their total profit. There
    are as many slots as jobs.
    """
    pending = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: list[Optional[Job]] = [None] * len(pending)
    total = 0
    for job in pending:
        for slot in range(min(len(slots), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                total += job.profit
                break
    return [job for job in slots if job is not None], total