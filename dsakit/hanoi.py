"""Tower of Hanoi move generation."""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """A single disk moved from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Disk {self.disk} is moved from {self.source} to {self.target}"


def _moves(disks: int, source: str, helper: str, target: str) -> Iterator[Move]:
    if disks == 0:
        return
    yield from _moves(disks - 1, source, target, helper)
    yield Move(disks, source, target)
    yield from _moves(disks - 1, helper, source, target)


def hanoi_moves(
    disks: int, source: str = "A", helper: str = "B", target: str = "C"
) -> list[Move]:
    """Return the moves that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    return list(_moves(disks, source, helper, target))