"""Randomised host/worker simulation that fills a sine table."""

from __future__ import annotations

import argparse
import math
import random
import string
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from dsalabs.ring_queue import BoundedQueue, LinkedQueue, QueueEmpty, QueueFull
from dsalabs.server import Host, QueueFactory, SineTable, Slave, taylor_sine

_INT_MAX = 2**31 - 1
_SEPARATORS = (" ", "\n")
_TERMS = 15
_QUEUES = {"vector": BoundedQueue, "list": LinkedQueue}


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run."""

    size_queue: int
    count_nodes: int
    low: int
    high: int
    p1: float
    p2: float
    p3: float


class _Scanner:
    """Reads numbers from a text stream one character at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushback: list[str] = []

    def getc(self) -> str:
        if self._pushback:
            return self._pushback.pop()
        return self._stream.read(1)

    def _ungetc(self, char: str) -> None:
        if char:
            self._pushback.append(char)

    def _first_significant(self) -> str:
        char = self.getc()
        while char and char.isspace():
            char = self.getc()
        if not char:
            raise EOFError("end of input")
        return char

    def read_int(self) -> int | None:
        char = self._first_significant()
        text = ""
        if char in "+-":
            text = char
            char = self.getc()
        while char and char in string.digits:
            text += char
            char = self.getc()
        self._ungetc(char)
        if not text.lstrip("+-"):
            return None
        return int(text)

    def read_float(self) -> float | None:
        char = self._first_significant()
        text = ""
        seen_digit = seen_dot = seen_exp = False
        while char:
            if char in string.digits:
                seen_digit = True
            elif char in "+-" and (not text or text[-1] in "eE"):
                pass
            elif char == "." and not seen_dot and not seen_exp:
                seen_dot = True
            elif char in "eE" and seen_digit and not seen_exp:
                seen_exp = True
            else:
                break
            text += char
            char = self.getc()
        self._ungetc(char)
        while text:
            try:
                return float(text)
            except ValueError:
                self._ungetc(text[-1])
                text = text[:-1]
        return None

    def skip_line(self) -> None:
        char = self.getc()
        while char and char != "\n":
            char = self.getc()
        self._ungetc(char)


def _read_bounded_int(scanner: _Scanner, out: TextIO, what: str, low: int, high: int) -> int:
    while True:
        number = scanner.read_int()
        if number is not None and low <= number <= high:
            if scanner.getc() in _SEPARATORS:
                return number
        out.write(f"\nRepeat number of {what} correctly ->\n")
        scanner.skip_line()


def _read_probability(scanner: _Scanner, out: TextIO, name: str) -> float:
    while True:
        value = scanner.read_float()
        if value is None or not 0.0 < value <= 1.0:
            out.write(f"Write {name}  correctly ->")
        elif scanner.getc() not in _SEPARATORS:
            out.write(f"Write {name} correctly ->")
        else:
            return value
        scanner.skip_line()
        scanner.getc()


def read_settings(stream: TextIO, out: TextIO) -> Settings:
    """Prompt for simulation settings; raise EOFError if input ends early."""
    scanner = _Scanner(stream)
    out.write("\nprint size of queues ->\n")
    size_queue = _read_bounded_int(scanner, out, "items in queues", 1, _INT_MAX)
    out.write("\nprint number of nodes ->\n")
    count_nodes = _read_bounded_int(scanner, out, "nodes", 1, _INT_MAX)

    out.write("\nprint boundaries ->\n")
    low, high = 1, 0
    while low > high:
        low = _read_bounded_int(scanner, out, "low boundary", -_INT_MAX, _INT_MAX)
        high = _read_bounded_int(scanner, out, "high boundary", -_INT_MAX, _INT_MAX)
        if low > high:
            out.write("\nrepeat range within [low, high] ->\n")

    out.write("\nprint probabilities ->\n")
    p1 = _read_probability(scanner, out, "p1")
    p2 = _read_probability(scanner, out, "p2")
    p3 = _read_probability(scanner, out, "p3")

    out.write(
        f"\ncount_nodes = {count_nodes},\nlow boundary = {low}, \nhigh boundary = {high},\n"
    )
    out.write(f"\np1 = {p1:.6f},\np2 =  {p2:.6f},\np3 = {p3:.6f},")
    return Settings(size_queue, count_nodes, low, high, p1, p2, p3)


def simulate(
    settings: Settings,
    rng: random.Random | None = None,
    queue_factory: QueueFactory = BoundedQueue,
    out: TextIO | None = None,
) -> SineTable:
    """Run the simulation until every angle's sine is in the host table."""
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    low, high = settings.low, settings.high
    host = Host(
        settings.size_queue, settings.count_nodes, low, high,
        settings.p1, settings.p3, queue_factory,
    )
    workers = [
        Slave(settings.size_queue, settings.p2, queue_factory)
        for _ in range(settings.count_nodes)
    ]
    task = calculated = done = low

    while done <= high:
        if task <= high:
            for worker in workers:
                if task > high:
                    break
                if rng.random() <= host.p1:
                    try:
                        worker.queue.put(task, math.nan)
                    except QueueFull:
                        continue
                    task += 1

        if calculated <= high:
            for worker, answers in zip(workers, host.answers):
                if calculated > high:
                    break
                if rng.random() <= worker.p2:
                    try:
                        angle, sine = worker.queue.get()
                    except QueueEmpty:
                        continue
                    if math.isnan(sine):
                        sine = taylor_sine(angle, _TERMS)
                    try:
                        answers.put(angle, sine)
                    except QueueFull:
                        worker.queue.put(angle, sine)
                    else:
                        calculated += 1

        for answers in host.answers:
            if done > high:
                break
            if rng.random() <= host.p3:
                try:
                    angle, sine = answers.get()
                except QueueEmpty:
                    continue
                out.write(f"{angle:5d}")
                host.table.write(angle, sine)
                done += 1

    out.write(host.table.format())
    return host.table


def main(argv: Sequence[str] | None = None) -> int:
    """Read settings from standard input and run the simulation."""
    parser = argparse.ArgumentParser(description="Fill a sine table with simulated workers.")
    parser.add_argument("--queue", choices=sorted(_QUEUES), default="vector")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    out = sys.stdout
    try:
        settings = read_settings(sys.stdin, out)
    except EOFError:
        out.write("\n\nEOF\n")
        return 0
    out.write("\n")
    simulate(settings, random.Random(args.seed), _QUEUES[args.queue], out)
    return 0


if __name__ == "__main__":
    sys.exit(main())