import pytest

from dsalabs.hash_table import CellState
from dsalabs.string_table import (
    DuplicateKey,
    StringTable,
    TableOverflow,
    hash1,
    hash2,
)


def test_hash2_of_empty_string_is_zero():
    assert hash2("") == 0


def test_hashes_fit_in_64_bits():
    for key in ["", "a", "node", "x" * 50]:
        assert 0 <= hash1(key) < 2**64
        assert 0 <= hash2(key) < 2**64


def test_hash1_differs_for_different_keys():
    assert hash1("a") != hash1("b")


def test_insert_then_search_round_trip():
    table = StringTable(23)
    index = table.insert("alpha", [1])
    assert table.search("alpha") == index
    assert table.slots[index].value == [1]
    assert table.slots[index].state is CellState.OCCUPIED
    assert len(table) == 1


def test_duplicate_key_rejected():
    table = StringTable(23)
    table.insert("alpha")
    with pytest.raises(DuplicateKey):
        table.insert("alpha")
    assert len(table) == 1


def test_search_missing_raises_key_error():
    table = StringTable(23)
    with pytest.raises(KeyError):
        table.search("nothing")


def test_delete_marks_slot_and_returns_value():
    table = StringTable(23)
    index = table.insert("alpha", "payload")
    assert table.delete("alpha") == "payload"
    assert table.slots[index].state is CellState.DELETED
    assert len(table) == 0
    with pytest.raises(KeyError):
        table.search("alpha")


def test_deleted_key_can_be_inserted_again():
    table = StringTable(23)
    table.insert("alpha")
    table.delete("alpha")
    table.insert("alpha", 7)
    assert table.slots[table.search("alpha")].value == 7


def test_table_grows_past_load_factor():
    table = StringTable(23)
    keys = [f"k{i}" for i in range(18)]
    for key in keys:
        table.insert(key, key.upper())
    assert table.capacity == 43
    assert len(table) == 18
    for key in keys:
        assert table.slots[table.search(key)].value == key.upper()


def test_table_that_cannot_grow_overflows():
    table = StringTable(7)
    for i in range(5):
        table.insert(f"k{i}")
    with pytest.raises(TableOverflow):
        table.insert("k5")


def test_clean_empties_table():
    table = StringTable(23)
    for key in ["a", "b", "c"]:
        table.insert(key)
    table.clean()
    assert len(table) == 0
    assert list(table.occupied()) == []
    with pytest.raises(KeyError):
        table.search("a")


def test_occupied_yields_every_key_once():
    table = StringTable(23)
    keys = {"a", "bb", "ccc", "dddd"}
    for key in keys:
        table.insert(key)
    assert sorted(slot.key for slot in table.occupied()) == sorted(keys)


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        StringTable(0)