"""Host and worker nodes of the sine-table simulation, and the Taylor sine."""

from __future__ import annotations

import math
from typing import Callable

from dsalabs.ring_queue import BoundedQueue

QueueFactory = Callable[[int], BoundedQueue]


def factorial(n: int) -> int:
    """Return n!, with 1 for any n below 2."""
    return math.prod(range(2, n + 1))


def taylor_sine(angle: int, terms: int = 15) -> float:
    """Sine of an angle in degrees from the first ``terms`` Taylor terms."""
    while angle < -90:
        angle += 360
    while angle > 270:
        angle -= 360
    if angle > 90:
        angle = 180 - angle
    rad = angle * 2 * math.pi / 360
    return sum(
        (-1) ** (n + 1) * rad ** (2 * n - 1) / factorial(2 * n - 1)
        for n in range(1, terms + 1)
    )


class SineTable:
    """Table of sine values keyed by every angle in [low, high]."""

    def __init__(self, low: int, high: int) -> None:
        if low > high:
            raise ValueError("low boundary exceeds high boundary")
        self.low = low
        self.high = high
        self.values: dict[int, float] = {angle: 0.0 for angle in range(low, high + 1)}

    def write(self, angle: int, value: float) -> None:
        """Store the sine of ``angle``."""
        if angle not in self.values:
            raise KeyError(angle)
        self.values[angle] = value

    def format(self) -> str:
        """Render every row as ``sin <angle> = <value>``."""
        return "".join(f"\nsin {angle} = {value:.6f}" for angle, value in self.values.items())


class Host:
    """Node that hands out angles and collects answers into the table."""

    def __init__(
        self,
        size_queue: int,
        count_nodes: int,
        low: int,
        high: int,
        p1: float,
        p3: float,
        queue_factory: QueueFactory = BoundedQueue,
    ) -> None:
        self.count_nodes = count_nodes
        self.p1 = p1
        self.p3 = p3
        self.table = SineTable(low, high)
        self.answers = [queue_factory(size_queue) for _ in range(count_nodes)]


class Slave:
    """Worker node with its own task queue."""

    def __init__(
        self, size_queue: int, p2: float, queue_factory: QueueFactory = BoundedQueue
    ) -> None:
        self.p2 = p2
        self.queue = queue_factory(size_queue)