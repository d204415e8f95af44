import pytest

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
from dsalabs.table_iterator import (
    TableCursor,
    cursor_delete,
    cursor_format,
    cursor_insert,
    cursor_search_child,
    cursor_search_key,
)

ROWS = [(1, 0, 100), (2, 1, 200), (3, 0, 300), (4, 1, 400), (5, 2, 500)]


def build_plain():
    table = ParentTable(10)
    for row in ROWS:
        table.insert(*row)
    return table


def build_cursor():
    table = ParentTable(10)
    for row in ROWS:
        cursor_insert(table, *row)
    return table


def test_cursor_bounds():
    table = build_plain()
    cursor = TableCursor(table, 0)
    assert cursor.retreat() is False
    assert cursor.advance() is True
    assert cursor.index == 1
    end = TableCursor(table, len(table) - 1)
    assert end.advance() is False


def test_cursor_out_of_range():
    with pytest.raises(IndexError):
        TableCursor(ParentTable(2), 0)
    with pytest.raises(IndexError):
        TableCursor(build_plain(), len(ROWS))


def test_cursor_equality():
    table = build_plain()
    first = TableCursor(table, 2)
    second = TableCursor(table, 1)
    second.advance()
    assert first == second
    assert first != TableCursor(build_plain(), 2)


def test_cursor_insert_matches_table_insert():
    assert build_cursor().records == build_plain().records


def test_cursor_insert_returns_cursor_on_record():
    table = build_plain()
    cursor = cursor_insert(table, 6, 0, 600)
    assert cursor.record() == Record(6, 0, 600)


def test_cursor_insert_at_front():
    table = ParentTable(5)
    cursor_insert(table, 1, 0, 0)
    cursor_insert(table, 2, 1, 0)
    cursor = cursor_insert(table, 3, 0, 0)
    assert cursor.record().key == 3
    assert [record.par for record in table] == sorted(record.par for record in table)


def test_cursor_insert_errors():
    table = build_plain()
    with pytest.raises(InvalidKey):
        cursor_insert(table, 0, 0, 0)
    with pytest.raises(DuplicateKey):
        cursor_insert(table, 2, 0, 0)
    with pytest.raises(MissingParent):
        cursor_insert(table, 9, 8, 0)
    full = ParentTable(0)
    with pytest.raises(TableFull):
        cursor_insert(full, 1, 0, 0)


def test_cursor_search():
    table = build_plain()
    assert cursor_search_key(table, 4).index == table.search_key(4)
    assert cursor_search_child(table, 1).index == table.search_child(1)
    with pytest.raises(KeyNotFound):
        cursor_search_key(table, 0)
    with pytest.raises(KeyNotFound):
        cursor_search_child(table, 5)


def test_cursor_delete_errors():
    table = build_plain()
    with pytest.raises(HasChildren):
        cursor_delete(table, 1)
    with pytest.raises(KeyNotFound):
        cursor_delete(table, 42)


def test_cursor_format():
    table = build_plain()
    assert cursor_format(table) == table.format()
    with pytest.raises(TableError):
        cursor_format(ParentTable(1))