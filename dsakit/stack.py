"""A stack with a fixed capacity."""

from typing import Any


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise StackOverflow if the stack is full."""
        if self.is_full():
            raise StackOverflow("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackUnderflow if empty."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items[-1]

    def is_full(self) -> bool:
        """Tell whether no more items fit."""
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)