"""Open-addressing hash table of unsigned keys with a binary file format."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

_MASK = 0xFFFFFFFF
MAGIC = 0xB5F1A359
PRIMES = (23, 43, 101, 211, 401, 601, 997, 1999, 4001, 8009, 12007)
LOAD_FACTOR = 0.7

_HEADER = struct.Struct("<IIiI")
_ELEM = struct.Struct("<iII")

_WIDE_RULE = "_" * 108 + "\n"
_RULE = "_" * 79 + "\n"
_COLUMNS = "          index          |            key           |\t       info\n"
_WIDE_COLUMNS = (
    "          index          | \t       busy\t     |"
    "            key           |\t       info\n"
)


def hash1(key: int) -> int:
    """Primary 32-bit hash of an unsigned key."""
    k = key & _MASK
    mixed = ((k * 0x9E3779B9) & _MASK) ^ (k >> 12) ^ ((k << 4) & _MASK)
    return ((mixed * 0x85EBCA6B) & _MASK) ^ (((k * 0x9E2679B9) & _MASK) >> 10)


def hash2(key: int) -> int:
    """Probe-step hash of an unsigned key."""
    return (key * 0xB5F1A359) & _MASK


class CellState(IntEnum):
    """State of one slot of the table."""

    EMPTY = 0
    OCCUPIED = 1
    DELETED = 2


@dataclass
class Cell:
    """One slot: its state, key and information string."""

    state: CellState = CellState.EMPTY
    key: int = 0
    info: str | None = None


class DuplicateKey(Exception):
    """Raised when inserting a key that is already present."""


class TableOverflow(Exception):
    """Raised when no free slot can be found and the table cannot grow."""


class KeyNotFound(LookupError):
    """Raised when a key or occupied slot is not present."""


class FormatError(ValueError):
    """Raised when a binary table file cannot be read.

    ``foreign`` is true when the file does not carry the table's magic number.
    """

    def __init__(self, message: str, *, foreign: bool = False) -> None:
        super().__init__(message)
        self.foreign = foreign


class HashTable:
    """Double-hashing table whose deleted slots stay marked until cleaned."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.cells = [Cell() for _ in range(capacity)]
        self._count = 0

    def _probe(self, key: int):
        index = hash1(key) % self.capacity
        step = hash2(key)
        for _ in range(self.capacity):
            yield index
            index = ((index + step) & _MASK) % self.capacity

    def search_index(self, key: int) -> int:
        """Return the slot that holds ``key``."""
        for index in self._probe(key):
            cell = self.cells[index]
            if cell.state is CellState.EMPTY:
                break
            if cell.key == key and cell.state is not CellState.DELETED:
                return index
        raise KeyNotFound(key)

    def _expand(self) -> None:
        try:
            position = PRIMES.index(self.capacity)
        except ValueError:
            raise TableOverflow("table size cannot grow") from None
        if position == len(PRIMES) - 1:
            raise TableOverflow("table size cannot grow")
        bigger = HashTable(PRIMES[position + 1])
        for cell in self.cells:
            if cell.state is CellState.OCCUPIED:
                bigger.insert(cell.key, cell.info)
        self.capacity = bigger.capacity
        self.cells = bigger.cells
        self._count = bigger._count

    def insert(self, key: int, info: str) -> int:
        """Insert ``key`` with ``info``, growing the table when too full.

        Returns the slot used.
        """
        try:
            self.search_index(key)
        except KeyNotFound:
            pass
        else:
            raise DuplicateKey(key)
        if self._count > LOAD_FACTOR * self.capacity:
            self._expand()
        for index in self._probe(key):
            if self.cells[index].state is not CellState.OCCUPIED:
                self.cells[index] = Cell(CellState.OCCUPIED, key, info)
                self._count += 1
                return index
        raise TableOverflow("hash function couldn't find place")

    def delete(self, key: int) -> None:
        """Mark the slot holding ``key`` as deleted."""
        cell = self.cells[self.search_index(key)]
        cell.state = CellState.DELETED
        cell.info = None
        self._count -= 1

    def clean(self) -> None:
        """Empty every slot that holds information."""
        for cell in self.cells:
            if cell.info is not None:
                cell.state = CellState.EMPTY
                cell.info = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _header(self) -> str:
        if self._count == 0:
            raise ValueError("table is empty")
        return f"\nTABLE: size = {self._count}, max size = {self.capacity}\n"

    @staticmethod
    def _row(index: int, cell: Cell) -> str:
        return f"{index:<25}| {cell.key:<25}| {cell.info:<25}\n"

    def format(self) -> str:
        """Render the occupied slots."""
        parts = [self._header(), _RULE, _COLUMNS, _RULE]
        for index, cell in enumerate(self.cells):
            if cell.state is CellState.OCCUPIED:
                parts.append(self._row(index, cell))
                parts.append(_RULE)
        return "".join(parts)

    def format_all(self) -> str:
        """Render every slot with its state."""
        parts = [self._header(), _WIDE_RULE, _WIDE_COLUMNS, _WIDE_RULE]
        for index, cell in enumerate(self.cells):
            info = "(null)" if cell.info is None else cell.info
            parts.append(
                f"{index:<25}| {int(cell.state):<25} | {cell.key:<25}| {info:<25}\n"
            )
        parts.append(_RULE)
        return "".join(parts)

    def format_cell(self, index: int) -> str:
        """Render one occupied slot."""
        cell = self.cells[index]
        if cell.state is not CellState.OCCUPIED:
            raise KeyNotFound(index)
        return "".join([_RULE, _COLUMNS, _RULE, self._row(index, cell), _RULE])

    def export(self, stream: BinaryIO) -> None:
        """Write the table: header, one record per slot, then the info bytes."""
        base = _HEADER.size + self.capacity * _ELEM.size + 1
        blobs = []
        elements = []
        offset = 0
        for cell in self.cells:
            blob = cell.info.encode("utf-8") if cell.info is not None else b""
            elements.append(_ELEM.pack(int(cell.state), cell.key, base + offset))
            blobs.append(blob)
            offset += len(blob)
        stream.write(_HEADER.pack(self.capacity, self._count, offset, MAGIC))
        stream.write(b"".join(elements))
        stream.write(b"".join(blobs))

    @classmethod
    def load(cls, stream: BinaryIO) -> HashTable:
        """Read a table written by :meth:`export`."""
        header = stream.read(_HEADER.size)
        if len(header) < _HEADER.size:
            raise FormatError("import error")
        msize, csize, length, magic = _HEADER.unpack(header)
        if magic != MAGIC:
            raise FormatError("inapropriate file", foreign=True)
        if msize == 0 or length < 0:
            raise FormatError("import error")
        raw = stream.read(msize * _ELEM.size)
        if len(raw) < msize * _ELEM.size:
            raise FormatError("import error")
        info = stream.read(length)
        if len(info) < length:
            raise FormatError("import error")

        elements = [_ELEM.unpack_from(raw, i * _ELEM.size) for i in range(msize)]
        end = _HEADER.size + msize * _ELEM.size + length + 1
        table = cls(msize)
        table._count = csize
        position = 0
        for index, (state, key, offset) in enumerate(elements):
            following = elements[index + 1][2] if index < msize - 1 else end
            size = following - offset
            try:
                cell = Cell(CellState(state), key, None)
            except ValueError:
                raise FormatError("import error") from None
            if size > 0:
                if position + size > length:
                    raise FormatError("import error")
                try:
                    cell.info = info[position:position + size].decode("utf-8")
                except UnicodeDecodeError:
                    raise FormatError("import error") from None
                position += size
            table.cells[index] = cell
        return table