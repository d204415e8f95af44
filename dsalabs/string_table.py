"""Open-addressing hash table keyed by strings, each key carrying a value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from dsalabs.hash_table import LOAD_FACTOR, PRIMES, CellState

_MASK64 = 2**64 - 1


def hash1(key: str) -> int:
    """Primary 64-bit hash of a string key."""
    value = 5381
    for byte in key.encode("utf-8"):
        value = ((value << 5) + value + byte) & _MASK64
    return (value * 2654435761) & _MASK64


def hash2(key: str) -> int:
    """Probe-step 64-bit hash of a string key."""
    value = 0
    for byte in key.encode("utf-8"):
        value = ((value << 16) - value - byte) & _MASK64
    return (value * 7340033) & _MASK64


class DuplicateKey(Exception):
    """Raised when inserting a key that is already present."""


class TableOverflow(Exception):
    """Raised when no free slot can be found and the table cannot grow."""


@dataclass
class Slot:
    """One place of the table: its state, key and stored value."""

    state: CellState = CellState.EMPTY
    key: str | None = None
    value: Any = None


class StringTable:
    """Double-hashing table; deleted slots stay marked and are reused on insert."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.slots = [Slot() for _ in range(capacity)]
        self._count = 0

    def _probe(self, key: str) -> Iterator[int]:
        index = hash1(key) % self.capacity
        step = hash2(key)
        for _ in range(self.capacity):
            yield index
            index = ((index + step) & _MASK64) % self.capacity

    def search(self, key: str) -> int:
        """Return the index of the slot holding ``key``; KeyError if absent."""
        for index in self._probe(key):
            slot = self.slots[index]
            if slot.state is CellState.EMPTY:
                break
            if slot.state is CellState.OCCUPIED and slot.key == key:
                return index
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True

    def _expand(self) -> None:
        try:
            position = PRIMES.index(self.capacity)
        except ValueError:
            raise TableOverflow("table size cannot grow") from None
        if position == len(PRIMES) - 1:
            raise TableOverflow("table size cannot grow")
        bigger = StringTable(PRIMES[position + 1])
        for slot in self.occupied():
            assert slot.key is not None
            bigger.insert(slot.key, slot.value)
        self.capacity = bigger.capacity
        self.slots = bigger.slots
        self._count = bigger._count

    def insert(self, key: str, value: Any = None) -> int:
        """Store ``value`` under ``key`` and return the slot index used."""
        if key in self:
            raise DuplicateKey(key)
        if self._count > LOAD_FACTOR * self.capacity:
            self._expand()
        for index in self._probe(key):
            if self.slots[index].state is not CellState.OCCUPIED:
                self.slots[index] = Slot(CellState.OCCUPIED, key, value)
                self._count += 1
                return index
        raise TableOverflow("hash function couldn't find place")

    def delete(self, key: str) -> Any:
        """Mark the slot of ``key`` deleted and return the value it held."""
        slot = self.slots[self.search(key)]
        value = slot.value
        slot.state = CellState.DELETED
        slot.key = None
        slot.value = None
        self._count -= 1
        return value

    def clean(self) -> None:
        """Empty every occupied slot."""
        for slot in self.slots:
            if slot.state is CellState.OCCUPIED:
                slot.state = CellState.EMPTY
                slot.key = None
                slot.value = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def occupied(self) -> Iterator[Slot]:
        """Yield the occupied slots in index order."""
        return (slot for slot in self.slots if slot.state is CellState.OCCUPIED)