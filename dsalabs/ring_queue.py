"""FIFO queues of (angle, sine) pairs: a bounded one and an unbounded one."""

from __future__ import annotations

from collections import deque
from typing import Iterator


class QueueFull(Exception):
    """Raised when writing to a bounded queue that has no free cell."""


class QueueEmpty(Exception):
    """Raised when reading from an empty queue."""


class BoundedQueue:
    """Queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[tuple[int, float]] = deque()

    def put(self, angle: int, sine: float) -> None:
        """Append an item at the tail; raise QueueFull when at capacity."""
        if len(self._items) >= self.capacity:
            raise QueueFull("queue is full")
        self._items.append((angle, sine))

    def get(self) -> tuple[int, float]:
        """Remove and return the item at the head."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[int, float]]:
        return iter(self._items)


class LinkedQueue:
    """Unbounded queue; ``capacity`` is accepted only for a uniform signature."""

    def __init__(self, capacity: int = 0) -> None:
        self.capacity = capacity
        self._items: deque[tuple[int, float]] = deque()

    def put(self, angle: int, sine: float) -> None:
        """Append an item at the tail."""
        self._items.append((angle, sine))

    def get(self) -> tuple[int, float]:
        """Remove and return the item at the head."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[int, float]]:
        return iter(self._items)