"""Console dialog over the hash table with binary import and export."""

from __future__ import annotations

import argparse
import string
import sys
from typing import Sequence, TextIO

from dsalabs.hash_table import (
    DuplicateKey,
    FormatError,
    HashTable,
    KeyNotFound,
    TableOverflow,
)

_UINT_MAX = 2**32 - 1
_WIDTH = 255
_INITIAL_SIZE = 23

_HELP = (
    "options:\nh - help\ni - insert element into the table\n"
    "d - delete element from the table\np - print the table\n"
    "s - search for an element by key\nimp - import the table from binary file\n"
    "exp - export the table to binary file\nc - clean\nq - quite\n\n"
)

_OPTIONS = frozenset({
    "help", "h", "insert", "i", "delete", "d", "clean", "c", "print", "p",
    "search", "s", "imp", "import", "exp", "export", "quite", "q",
})


class _Scanner:
    """Reads numbers and words from a text stream one character at a time."""

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

    def read_word(self, width: int = _WIDTH) -> str:
        char = self._first_significant()
        word = ""
        while char and not char.isspace() and len(word) < width:
            word += char
            char = self.getc()
        self._ungetc(char)
        return word

    def skip_line(self) -> None:
        char = self.getc()
        while char and char != "\n":
            char = self.getc()
        self._ungetc(char)


def _read_uint(scanner: _Scanner, out: TextIO, what: str) -> int:
    while True:
        number = scanner.read_int()
        if number is not None:
            number %= 2**32
            if 0 <= number <= _UINT_MAX and scanner.getc() in (" ", "\n"):
                return number
        out.write(f"\nRepeat {what} value correctly -> ")
        scanner.skip_line()


def _get_word(scanner: _Scanner) -> str | None:
    word = scanner.read_word()
    char = scanner.getc()
    if not char:
        raise EOFError("end of input")
    if char not in (" ", "\n", "\t"):
        return None
    return word


def _read_word(scanner: _Scanner, out: TextIO) -> str:
    while True:
        word = _get_word(scanner)
        if word is not None:
            return word
        out.write("\nRepeat action correctly -> ")
        scanner.skip_line()


def _read_choice(scanner: _Scanner, out: TextIO) -> str:
    while True:
        word = _get_word(scanner)
        if word is None:
            out.write("\nRepeat action correctly -> ")
            scanner.skip_line()
        elif word in _OPTIONS:
            return word
        else:
            out.write("\nRepeat action correctly -> ")


def _case_insert(table: HashTable, scanner: _Scanner, out: TextIO) -> None:
    out.write("for insertion enter key value -> ")
    key = _read_uint(scanner, out, "key")
    out.write("enter info -> ")
    info = _read_word(scanner, out)
    try:
        table.insert(key, info)
    except DuplicateKey:
        out.write("keys are dubbed\n")
    except TableOverflow:
        out.write("hash function couldn't find place\n")
    else:
        out.write("insertion completed\n")


def _case_delete(table: HashTable, scanner: _Scanner, out: TextIO) -> None:
    out.write("for deletion enter key value -> ")
    key = _read_uint(scanner, out, "key")
    try:
        table.delete(key)
    except KeyNotFound:
        out.write("element with such key doesn't exist\n")
    else:
        out.write("element was deleted\n")


def _case_search(table: HashTable, scanner: _Scanner, out: TextIO) -> None:
    out.write("for searching enter key value -> ")
    key = _read_uint(scanner, out, "key")
    try:
        index = table.search_index(key)
    except KeyNotFound:
        out.write("element with such key doesn't exist\n")
    else:
        out.write(table.format_cell(index))


def _case_print(table: HashTable, out: TextIO) -> None:
    try:
        out.write(table.format_all())
    except ValueError:
        out.write("table is empty\n")


def _case_export(table: HashTable, scanner: _Scanner, out: TextIO) -> None:
    out.write("\nenter file name -> ")
    name = scanner.read_word()
    try:
        stream = open(name, "wb")
    except OSError as error:
        out.write(f"file opening error\n: {error.strerror}\n")
        return
    with stream:
        try:
            table.export(stream)
        except OSError:
            out.write("export error")
        else:
            out.write("export complited successfully\n")


def _case_import(table: HashTable, scanner: _Scanner, out: TextIO) -> HashTable:
    out.write("\nenter file name -> ")
    name = scanner.read_word()
    try:
        stream = open(name, "rb")
    except OSError as error:
        out.write(f"file opening error\n: {error.strerror}\n")
        return table
    with stream:
        try:
            loaded = HashTable.load(stream)
        except FormatError as error:
            out.write("inapropriate file\n" if error.foreign else "import error\n")
            return table
    out.write("import complited successfully\n")
    return loaded


def run_dialog(table: HashTable, stream: TextIO, out: TextIO) -> HashTable:
    """Run the menu loop and return the table in use when it ends."""
    scanner = _Scanner(stream)
    out.write(_HELP)
    try:
        while True:
            choice = _read_choice(scanner, out)
            if choice in ("help", "h"):
                out.write(_HELP)
            elif choice in ("insert", "i"):
                _case_insert(table, scanner, out)
            elif choice in ("delete", "d"):
                _case_delete(table, scanner, out)
            elif choice in ("print", "p"):
                _case_print(table, out)
            elif choice in ("search", "s"):
                _case_search(table, scanner, out)
            elif choice in ("import", "imp"):
                table = _case_import(table, scanner, out)
            elif choice in ("export", "exp"):
                _case_export(table, scanner, out)
            elif choice in ("clean", "c"):
                table.clean()
                out.write("table has been cleaned\n")
            else:
                return table
    except EOFError:
        return table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dialog on standard input with a fresh table."""
    parser = argparse.ArgumentParser(description="Interactive hash table of keyed words.")
    parser.parse_args(argv)
    run_dialog(HashTable(_INITIAL_SIZE), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())