"""Jagged integer matrix: console input, output and the row-comparison vector."""

from __future__ import annotations

import argparse
import string
import sys
from typing import Sequence, TextIO

_SEPARATORS = (" ", "\n")


class _Scanner:
    """Reads integers from a text stream one character at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushback: list[str] = []

    def getc(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if self._pushback:
            return self._pushback.pop()
        return self._stream.read(1)

    def _ungetc(self, char: str) -> None:
        if char:
            self._pushback.append(char)

    def read_int(self) -> int | None:
        """Read an integer; None when the input does not start with one.

        Raises EOFError when only whitespace is left.
        """
        char = self.getc()
        while char and char.isspace():
            char = self.getc()
        if not char:
            raise EOFError("end of input")
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

    def skip_line(self) -> None:
        """Discard everything up to, but not including, the next newline."""
        char = self.getc()
        while char and char != "\n":
            char = self.getc()
        self._ungetc(char)


def _read_number(scanner: _Scanner, positive: bool) -> int | None:
    number = scanner.read_int()
    if number is None or (positive and number <= 0):
        return None
    if scanner.getc() not in _SEPARATORS:
        return None
    return number


def _read_count(scanner: _Scanner, out: TextIO, what: str) -> int:
    while True:
        number = _read_number(scanner, positive=True)
        if number is not None:
            return number
        out.write(f"\nRepeat number of {what} correctly ->\n")
        scanner.skip_line()


def _read_line(scanner: _Scanner, out: TextIO) -> list[int]:
    count = _read_count(scanner, out, "items")
    out.write("Enter items for line:\n")
    items: list[int] = []
    while len(items) < count:
        number = _read_number(scanner, positive=False)
        if number is None:
            scanner.skip_line()
            out.write("\nWrite only numbers, repeat string correctly please -> \n")
            items = []
        else:
            items.append(number)
    return items


def read_matrix(stream: TextIO, out: TextIO) -> list[list[int]]:
    """Prompt for and read a jagged matrix; raise EOFError if input ends early."""
    scanner = _Scanner(stream)
    out.write("Enter number of lines: --> ")
    lines = _read_count(scanner, out, "lines")
    rows = []
    for number in range(1, lines + 1):
        out.write(f"Enter number of items in line {number}: --> ")
        rows.append(_read_line(scanner, out))
    return rows


def count_common(line: Sequence[int], other: Sequence[int]) -> int:
    """Count the elements of ``line`` that also occur in ``other``."""
    members = set(other)
    return sum(1 for item in line if item in members)


def individual(matrix: Sequence[Sequence[int]]) -> list[int]:
    """For each row, count its elements missing from the next row (cyclically)."""
    if not matrix:
        raise ValueError("It's void matrix")
    size = len(matrix)
    return [
        len(row) - count_common(row, matrix[(index + 1) % size])
        for index, row in enumerate(matrix)
    ]


def format_line(line: Sequence[int]) -> str:
    """Render one row with each element right-aligned in five columns."""
    return "".join(f"{item:5d}" for item in line) + "\n"


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render the whole matrix, one row per line."""
    if not matrix:
        return "It's void matrix\n"
    return "\n" + "".join(format_line(row) for row in matrix)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a matrix from standard input and print it with its vector b."""
    parser = argparse.ArgumentParser(
        description="Read a jagged matrix and print the row-comparison vector."
    )
    parser.parse_args(argv)
    out = sys.stdout
    try:
        matrix = read_matrix(sys.stdin, out)
    except EOFError:
        out.write("\nIncorrect input of matrix\n")
        return 0
    out.write("Matrix: ")
    out.write(format_matrix(matrix))
    out.write("Vector b:\n")
    out.write(format_line(individual(matrix)))
    return 0


if __name__ == "__main__":
    sys.exit(main())