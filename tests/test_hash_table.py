import io
import struct

import pytest

from dsalabs.hash_table import (
    MAGIC,
    CellState,
    DuplicateKey,
    FormatError,
    HashTable,
    KeyNotFound,
    TableOverflow,
    hash1,
    hash2,
)


def test_hash_values_fixed_by_constants():
    assert hash1(0) == 0
    assert hash2(0) == 0
    assert hash2(1) == 0xB5F1A359


def test_hashes_stay_within_32_bits():
    for key in (1, 12345, 2**32 - 1, 987654321):
        assert 0 <= hash1(key) < 2**32
        assert 0 <= hash2(key) < 2**32


def test_insert_and_search():
    table = HashTable(23)
    index = table.insert(7, "seven")
    assert table.search_index(7) == index
    assert table.cells[index].info == "seven"
    assert len(table) == 1


def test_duplicate_key_rejected():
    table = HashTable(23)
    table.insert(3, "a")
    with pytest.raises(DuplicateKey):
        table.insert(3, "b")
    assert len(table) == 1


def test_delete_marks_slot():
    table = HashTable(23)
    index = table.insert(9, "nine")
    table.delete(9)
    assert table.cells[index].state is CellState.DELETED
    assert table.cells[index].info is None
    with pytest.raises(KeyNotFound):
        table.search_index(9)
    with pytest.raises(KeyNotFound):
        table.delete(9)
    assert len(table) == 0


def test_deleted_slot_can_be_reused_for_same_key():
    table = HashTable(23)
    table.insert(4, "x")
    table.delete(4)
    table.insert(4, "y")
    assert table.cells[table.search_index(4)].info == "y"


def test_non_prime_table_cannot_grow():
    table = HashTable(10)
    with pytest.raises(TableOverflow):
        for key in range(30):
            table.insert(key, "x")
    assert len(table) <= 10


def test_clean_removes_everything():
    table = HashTable(23)
    for key in (1, 2, 3):
        table.insert(key, "v")
    table.delete(2)
    table.clean()
    assert len(table) == 0
    assert all(cell.state is not CellState.OCCUPIED for cell in table.cells)
    with pytest.raises(KeyNotFound):
        table.search_index(1)


def test_format_empty_and_cell_errors():
    table = HashTable(23)
    with pytest.raises(ValueError):
        table.format()
    with pytest.raises(ValueError):
        table.format_all()
    with pytest.raises(KeyNotFound):
        table.format_cell(0)


def test_format_contains_rows():
    table = HashTable(23)
    index = table.insert(11, "eleven")
    text = table.format()
    assert "TABLE: size = 1, max size = 23" in text
    assert "eleven" in text
    assert table.format_cell(index) in table.format() or "eleven" in table.format_cell(index)
    assert table.format_all().count("(null)") == 22


def test_export_header():
    table = HashTable(23)
    table.insert(1, "ab")
    table.insert(2, "cde")
    buffer = io.BytesIO()
    table.export(buffer)
    data = buffer.getvalue()
    msize, csize, length, magic = struct.unpack("<IIiI", data[:16])
    assert (msize, csize, length, magic) == (23, 2, 5, MAGIC)
    assert len(data) == 16 + 23 * 12 + length


def test_export_load_round_trip():
    table = HashTable(23)
    for key, info in ((5, "five"), (6, "six"), (70, "seventy")):
        table.insert(key, info)
    table.delete(6)
    buffer = io.BytesIO()
    table.export(buffer)
    buffer.seek(0)
    loaded = HashTable.load(buffer)
    assert loaded.capacity == table.capacity
    assert len(loaded) == len(table)
    assert loaded.cells == table.cells
    assert loaded.cells[loaded.search_index(70)].info == "seventy"


def test_load_rejects_foreign_file():
    buffer = io.BytesIO(struct.pack("<IIiI", 23, 0, 0, 1234))
    with pytest.raises(FormatError) as caught:
        HashTable.load(buffer)
    assert caught.value.foreign


def test_load_rejects_truncated_file():
    table = HashTable(23)
    table.insert(1, "a")
    buffer = io.BytesIO()
    table.export(buffer)
    with pytest.raises(FormatError) as caught:
        HashTable.load(io.BytesIO(buffer.getvalue()[:40]))
    assert not caught.value.foreign