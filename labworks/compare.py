"""Compare two text files word by word."""

from __future__ import annotations

import sys
from itertools import zip_longest
from typing import Iterator, Sequence, TextIO

NO_FIRST = "Первый файл пустой"
NO_SECOND = "Второй файл пустой"
FIRST_NOT_OPEN = "Первый файл не открыт"
SECOND_NOT_OPEN = "Второй файл не открыт"
EQUAL = "Files are equal"
DIFFERENT = "Files are different. Line number is {}"


def _words(source: TextIO) -> Iterator[str]:
    for line in source:
        yield from line.split()


def first_difference(first: TextIO, second: TextIO) -> int | None:
    """Return the 1-based position of the first differing word, or None if the words match."""
    pairs = zip_longest(_words(first), _words(second))
    for position, (left, right) in enumerate(pairs, start=1):
        if left != right:
            return position
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Compare <first file> and <second file>; exit with 2 when they differ."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(NO_FIRST)
        return 2
    if len(args) < 2:
        print(NO_SECOND)
        return 2
    try:
        first = open(args[0], encoding="utf-8")
    except OSError:
        print(FIRST_NOT_OPEN)
        return 2
    with first:
        try:
            second = open(args[1], encoding="utf-8")
        except OSError:
            print(SECOND_NOT_OPEN)
            return 2
        with second:
            position = first_difference(first, second)
    if position is not None:
        print(DIFFERENT.format(position))
        return 2
    print(EQUAL)
    return 0


if __name__ == "__main__":
    sys.exit(main())