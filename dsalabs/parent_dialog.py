"""Console dialog over a parent table, with import from a text file."""

from __future__ import annotations

import argparse
import string
import sys
from pathlib import Path
from typing import Sequence, TextIO

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

_UINT_MAX = 2**32 - 1
_CONSOLE_SEPARATORS = (" ", "\n")
_FILE_SEPARATORS = ("\n", "\t")

_HELP = (
    "\nChoose one of them:"
    "\n1: insert element\n2: delete element by key\n3: search element by key\n"
    "4: print table\n5: search childrens by key\n6: import from the file\n"
    "7: clear the table\n8: help\n9: exit\n\n"
)


class _Scanner:
    """Reads numbers and words from a text stream one character at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushback: list[str] = []

    def read(self, size: int = 1) -> str:
        """Stream-like access so a scanner can be wrapped by another one."""
        return "".join(self.getc() for _ in range(size))

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

    def read_word(self) -> str:
        char = self._first_significant()
        word = ""
        while char and not char.isspace():
            word += char
            char = self.getc()
        self._ungetc(char)
        return word

    def skip_line(self) -> None:
        char = self.getc()
        while char and char != "\n":
            char = self.getc()
        self._ungetc(char)


def _read_uint(scanner: _Scanner, out: TextIO, what: str, low: int, high: int) -> int:
    while True:
        number = scanner.read_int()
        if number is not None:
            number %= 2**32
            if low <= number <= high and scanner.getc() in _CONSOLE_SEPARATORS:
                return number
        out.write(f"\nRepeat {what} value correctly -> ")
        scanner.skip_line()


def _file_number(scanner: _Scanner, low: int) -> int:
    number = scanner.read_int()
    if number is None:
        raise ValueError("incorrect format of data")
    number %= 2**32
    if number < low or scanner.getc() not in _FILE_SEPARATORS:
        raise ValueError("incorrect format of data")
    return number


def read_records(stream: TextIO) -> list[Record]:
    """Parse key, parent and info triples, each number ending in a tab or newline."""
    scanner = _Scanner(stream)
    records = []
    while True:
        try:
            key = _file_number(scanner, 1)
        except EOFError:
            return records
        try:
            par = _file_number(scanner, 0)
            info = _file_number(scanner, 0)
        except EOFError:
            raise ValueError("incorrect format of data") from None
        records.append(Record(key, par, info))


_IMPORT_ERRORS = {
    DuplicateKey: "keys are dubbed\n",
    MissingParent: "some parent doesn't exist, you can use '0' parent\n",
    InvalidKey: "key cann't be '0'\n",
    TableFull: "exceeding size of the table\n",
}

_INSERT_ERRORS = {
    DuplicateKey: "keys are dubbed\n",
    MissingParent: "such parent doesn't exist, you can use '0' parent\n",
    InvalidKey: "key cann't be '0'\n",
    TableFull: "table is full, delete some elements at first\n",
}


def import_file(table: ParentTable, path: str | Path, out: TextIO) -> bool:
    """Replace the table's contents with the records of a file.

    On any error the table is left empty and False is returned.
    """
    table.clear()
    try:
        with open(path, encoding="utf-8") as stream:
            records = read_records(stream)
    except OSError:
        out.write("\nerror opening file\n")
        return False
    except ValueError:
        out.write("\nincorrect format of data")
        return False

    for record in records:
        try:
            table.insert(record.key, record.par, record.info)
        except TableError as error:
            out.write(_IMPORT_ERRORS.get(type(error), "unknown error\n"))
            table.clear()
            return False
    out.write("the recording from the file has been complited\n")
    return True


def _case_insert(table: ParentTable, scanner: _Scanner, out: TextIO) -> None:
    out.write("for insertion enter key value -> ")
    key = _read_uint(scanner, out, "key", 1, _UINT_MAX)
    out.write("enter par value -> ")
    par = _read_uint(scanner, out, "par", 0, _UINT_MAX)
    out.write("enter info value -> ")
    info = _read_uint(scanner, out, "info", 0, _UINT_MAX)
    out.write("\n")
    try:
        table.insert(key, par, info)
    except TableError as error:
        out.write(_INSERT_ERRORS.get(type(error), "unknown error\n"))
    else:
        out.write("insertion complited\n")


def _case_delete(table: ParentTable, scanner: _Scanner, out: TextIO) -> None:
    out.write("for deletion enter key value -> ")
    key = _read_uint(scanner, out, "key", 1, _UINT_MAX)
    try:
        table.delete(key)
    except HasChildren:
        out.write("this element have children, delete them at first\n")
    except KeyNotFound:
        out.write("element with such key doesn't exist\n")
    else:
        out.write("element was deleted\n")


def _case_search(table: ParentTable, scanner: _Scanner, out: TextIO) -> None:
    out.write("for serching enter key value -> ")
    key = _read_uint(scanner, out, "key", 1, _UINT_MAX)
    try:
        index: int | None = table.search_key(key)
    except KeyNotFound:
        out.write("element with such key doesn't exist\n")
        index = None
    out.write("\nkey\t\t*info\t\tparent\n")
    if index is not None:
        out.write(table.format_record(index))


def _print_table(table: ParentTable, out: TextIO) -> None:
    try:
        out.write(table.format())
    except TableError:
        out.write("table is empty\n")


def _case_children(table: ParentTable, scanner: _Scanner, out: TextIO) -> None:
    out.write("for serching children enter par value -> ")
    par = _read_uint(scanner, out, "par", 1, _UINT_MAX)
    try:
        kids = table.children(par)
    except KeyNotFound:
        out.write("There are no children for this key\n")
    else:
        out.write(kids.format())


def run_dialog(table: ParentTable, stream: TextIO, out: TextIO) -> bool:
    """Run the menu loop; True when the user exits, False at end of input."""
    scanner = _Scanner(stream)
    out.write(_HELP)
    try:
        while True:
            choice = _read_uint(scanner, out, "action", 1, 9)
            if choice == 1:
                _case_insert(table, scanner, out)
            elif choice == 2:
                _case_delete(table, scanner, out)
            elif choice == 3:
                _case_search(table, scanner, out)
            elif choice == 4:
                _print_table(table, out)
            elif choice == 5:
                _case_children(table, scanner, out)
            elif choice == 6:
                out.write("\nenter name of file -> ")
                import_file(table, scanner.read_word(), out)
            elif choice == 7:
                table.clear()
            elif choice == 8:
                out.write(_HELP)
            else:
                return True
    except EOFError:
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the table size and run the dialog on standard input."""
    parser = argparse.ArgumentParser(description="Interactive table of records with parents.")
    parser.parse_args(argv)
    out = sys.stdout
    scanner = _Scanner(sys.stdin)
    out.write("\nEnter size of table -> ")
    try:
        size = scanner.read_int()
    except EOFError:
        return 0
    if size is None or size < 0:
        return 0
    run_dialog(ParentTable(size), scanner, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())