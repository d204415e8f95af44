"""Timing of threaded-tree operations on randomly filled trees."""

from __future__ import annotations

import random
import time
from collections import deque

from dsalabs.threaded_tree import ThreadedTree

LETTERS = "123456789abcdefghijklmnopqrstuvwxyz"
_UINT_MAX = 2**32 - 1
_MICROSECONDS = 1_000_000


def generate_word(length: int, rng: random.Random | None = None) -> str:
    """Return a random word of ``length`` characters drawn from LETTERS."""
    rng = rng if rng is not None else random.Random()
    return "".join(rng.choice(LETTERS) for _ in range(length))


def _random_key(rng: random.Random) -> str:
    return generate_word(4 + rng.randrange(15), rng)


def _fill(tree: ThreadedTree, size: int, rng: random.Random) -> None:
    tree.clean()
    for _ in range(size):
        tree.insert(_random_key(rng), rng.randrange(_UINT_MAX))


def _elapsed(start: float) -> int:
    return int((time.perf_counter() - start) * _MICROSECONDS)


def time_insert(
    tree: ThreadedTree, size: int, count: int, rng: random.Random | None = None
) -> int:
    """Microseconds to insert ``count`` random keys into a tree of ``size``."""
    rng = rng if rng is not None else random.Random()
    _fill(tree, size, rng)
    start = time.perf_counter()
    for _ in range(count):
        tree.insert(_random_key(rng), rng.randrange(_UINT_MAX))
    elapsed = _elapsed(start)
    tree.clean()
    return elapsed


def time_delete(
    tree: ThreadedTree, size: int, count: int, rng: random.Random | None = None
) -> int:
    """Microseconds to delete ``count`` random keys from a tree of ``size``."""
    rng = rng if rng is not None else random.Random()
    _fill(tree, size, rng)
    start = time.perf_counter()
    for _ in range(count):
        try:
            tree.delete(_random_key(rng))
        except KeyError:
            pass
    elapsed = _elapsed(start)
    tree.clean()
    return elapsed


def time_search(
    tree: ThreadedTree, size: int, count: int, rng: random.Random | None = None
) -> int:
    """Microseconds to search ``count`` random keys in a tree of ``size``."""
    rng = rng if rng is not None else random.Random()
    _fill(tree, size, rng)
    start = time.perf_counter()
    for _ in range(count):
        tree.search(_random_key(rng))
    elapsed = _elapsed(start)
    tree.clean()
    return elapsed


def time_maximum(
    tree: ThreadedTree, size: int, count: int, rng: random.Random | None = None
) -> int:
    """Microseconds to collect the maximum nodes ``count`` times."""
    rng = rng if rng is not None else random.Random()
    _fill(tree, size, rng)
    start = time.perf_counter()
    for _ in range(count):
        tree.max_nodes()
    elapsed = _elapsed(start)
    tree.clean()
    return elapsed


def time_traversal(
    tree: ThreadedTree, size: int, rng: random.Random | None = None
) -> int:
    """Microseconds to walk a tree of ``size`` along its threads."""
    rng = rng if rng is not None else random.Random()
    _fill(tree, size, rng)
    start = time.perf_counter()
    deque(tree.reverse(), maxlen=0)
    elapsed = _elapsed(start)
    tree.clean()
    return elapsed