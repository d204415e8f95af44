"""Fixed-capacity table of records kept ordered by their parent key."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from itertools import takewhile
from typing import Iterator


class TableError(Exception):
    """Base class for table errors."""


class TableFull(TableError):
    """Raised when inserting into a table that has no free place."""


class InvalidKey(TableError):
    """Raised when the key 0 is used for a record."""


class DuplicateKey(TableError):
    """Raised when a record with the same key is already present."""


class MissingParent(TableError):
    """Raised when the named parent key is not in the table."""


class HasChildren(TableError):
    """Raised when deleting a record that is the parent of others."""


class KeyNotFound(TableError):
    """Raised when no record carries the requested key."""


@dataclass(frozen=True)
class Record:
    """One row of the table."""

    key: int
    par: int
    info: int


class ParentTable:
    """Records sorted by parent key; parent 0 marks a top-level record."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.records: list[Record] = []

    def clear(self) -> None:
        """Remove every record."""
        self.records.clear()

    def search_key(self, key: int) -> int:
        """Return the position of the record with ``key``."""
        if key != 0:
            for index, record in enumerate(self.records):
                if record.key == key:
                    return index
        raise KeyNotFound(key)

    def search_child(self, par: int) -> int:
        """Return the position of the first record whose parent is ``par``."""
        pars = [record.par for record in self.records]
        index = bisect_left(pars, par)
        if index < len(pars) and pars[index] == par:
            return index
        raise KeyNotFound(par)

    def children(self, par: int) -> ParentTable:
        """Return a new table holding exactly the children of ``par``."""
        start = self.search_child(par)
        kids = list(takewhile(lambda record: record.par == par, self.records[start:]))
        table = ParentTable(len(kids))
        table.records = kids
        return table

    def _contains(self, key: int) -> bool:
        try:
            self.search_key(key)
        except KeyNotFound:
            return False
        return True

    def _has_children(self, key: int) -> bool:
        try:
            self.search_child(key)
        except KeyNotFound:
            return False
        return True

    def insert(self, key: int, par: int, info: int) -> int:
        """Insert a record after all records with a parent not above ``par``.

        Returns the position of the new record.
        """
        if len(self.records) >= self.capacity:
            raise TableFull("table is full")
        if key == 0:
            raise InvalidKey("key can't be 0")
        if self._contains(key):
            raise DuplicateKey(key)
        if par != 0 and not self._contains(par):
            raise MissingParent(par)
        position = bisect_right([record.par for record in self.records], par)
        self.records.insert(position, Record(key, par, info))
        return position

    def delete(self, key: int) -> Record:
        """Remove and return the record with ``key``.

        The hole is filled by the last record of each following parent group
        in turn, so the table stays ordered by parent.
        """
        if self._has_children(key):
            raise HasChildren(key)
        hole = self.search_key(key)
        records = self.records
        removed = records[hole]
        last = len(records) - 1
        scan = hole
        while scan != last:
            par = records[scan + 1].par
            while scan != last and records[scan + 1].par == par:
                scan += 1
            records[hole] = records[scan]
            hole = scan
        records.pop()
        return removed

    def format(self) -> str:
        """Render the table with its size header."""
        if not self.records:
            raise TableError("table is empty")
        header = (
            f"\nTABLE: size = {len(self.records)}, max size = {self.capacity}\n"
            "\nkey\t\tinfo\t\tparent\n"
        )
        return header + "".join(self.format_record(index) for index in range(len(self.records)))

    def format_record(self, index: int) -> str:
        """Render the record at ``index`` as key, info and parent columns."""
        if not 0 <= index < len(self.records):
            raise IndexError(index)
        record = self.records[index]
        return f"{record.key:<15} {record.info:<15} {record.par:<15}\n"

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)