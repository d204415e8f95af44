"""Cursor over a parent table and table operations expressed with cursors."""

from __future__ import annotations

from dsalabs.parent_table import (
    DuplicateKey,
    HasChildren,
    InvalidKey,
    KeyNotFound,
    MissingParent,
    ParentTable,
    Record,
    TableError,
    TableFull,
)


class TableCursor:
    """Position on one record of a table."""

    def __init__(self, table: ParentTable, index: int = 0) -> None:
        if not 0 <= index < len(table):
            raise IndexError("cursor out of range")
        self.table = table
        self.index = index

    def advance(self) -> bool:
        """Move to the next record; False if already on the last one."""
        if self.index == len(self.table) - 1:
            return False
        self.index += 1
        return True

    def retreat(self) -> bool:
        """Move to the previous record; False if already on the first one."""
        if self.index == 0:
            return False
        self.index -= 1
        return True

    def record(self) -> Record:
        """Return the record under the cursor."""
        return self.table.records[self.index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableCursor):
            return NotImplemented
        return self.table is other.table and self.index == other.index

    def __repr__(self) -> str:
        return f"TableCursor(index={self.index})"


def cursor_search_key(table: ParentTable, key: int) -> TableCursor:
    """Return a cursor on the record with ``key``."""
    if key == 0 or not table:
        raise KeyNotFound(key)
    cursor = TableCursor(table, 0)
    while True:
        if cursor.record().key == key:
            return cursor
        if not cursor.advance():
            raise KeyNotFound(key)


def cursor_search_child(table: ParentTable, par: int) -> TableCursor:
    """Return a cursor on the first record whose parent is ``par``."""
    return TableCursor(table, table.search_child(par))


def _found(table: ParentTable, key: int) -> bool:
    try:
        cursor_search_key(table, key)
    except KeyNotFound:
        return False
    return True


def cursor_insert(table: ParentTable, key: int, par: int, info: int) -> TableCursor:
    """Insert a record in parent order and return a cursor on it."""
    records = table.records
    if len(records) >= table.capacity:
        raise TableFull("table is full")
    if key == 0:
        raise InvalidKey("key can't be 0")
    if _found(table, key):
        raise DuplicateKey(key)
    if par != 0 and not _found(table, par):
        raise MissingParent(par)

    record = Record(key, par, info)
    if not records:
        records.append(record)
        return TableCursor(table, 0)
    cursor = TableCursor(table, len(records) - 1)
    while cursor.record().par > par:
        if not cursor.retreat():
            records.insert(0, record)
            return TableCursor(table, 0)
    records.insert(cursor.index + 1, record)
    return TableCursor(table, cursor.index + 1)


def cursor_delete(table: ParentTable, key: int) -> Record:
    """Remove and return the record with ``key``, keeping parent order."""
    try:
        cursor_search_child(table, key)
    except KeyNotFound:
        pass
    else:
        raise HasChildren(key)

    hole = cursor_search_key(table, key).index
    records = table.records
    removed = records[hole]
    scan = TableCursor(table, hole)
    scan.advance()
    while True:
        par = scan.record().par
        at_end = False
        while par == scan.record().par:
            if not scan.advance():
                at_end = True
                break
        if at_end:
            records[hole] = scan.record()
            break
        records[hole] = records[scan.index - 1]
        hole = scan.index - 1
    records.pop()
    return removed


def cursor_format(table: ParentTable) -> str:
    """Render the table by walking a cursor over it."""
    if not table:
        raise TableError("table is empty")
    parts = [
        f"\nTABLE: size = {len(table)}, max size = {table.capacity}\n",
        "\nkey\t\tinfo\t\tparent\n",
    ]
    cursor = TableCursor(table, 0)
    while True:
        parts.append(table.format_record(cursor.index))
        if not cursor.advance():
            break
    return "".join(parts)