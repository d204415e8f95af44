"""First-in first-out queue and last-in first-out stack used by graph walks."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class FifoQueue(Generic[T]):
    """Unbounded queue: items come out in the order they went in."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def put(self, item: T) -> None:
        """Append ``item`` at the tail."""
        self._items.append(item)

    def get(self) -> T:
        """Remove and return the head item; IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class LifoStack(Generic[T]):
    """Unbounded stack: the last item pushed is the first popped."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)