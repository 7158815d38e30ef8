"""Copy the words of a text file, one word per line."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence, TextIO

NO_INPUT = "Входной файл пустой"
NO_OUTPUT = "Выходной файл пустой"
INPUT_NOT_OPEN = "Входной файл не открыт"


def _words(source: TextIO) -> Iterator[str]:
    for line in source:
        yield from line.split()


def copy_words(source: TextIO, target: TextIO) -> int:
    """Write each whitespace-separated word of source on its own line; return the count."""
    count = 0
    for word in _words(source):
        target.write(f"{word}\n")
        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Copy the words of <input file> into <output file>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(NO_INPUT)
        return 1
    if len(args) < 2:
        print(NO_OUTPUT)
        return 1
    input_path, output_path = args[0], args[1]
    try:
        source = open(input_path, encoding="utf-8")
    except OSError:
        print(INPUT_NOT_OPEN)
        source = None
    with open(output_path, "w", encoding="utf-8") as target:
        if source is not None:
            with source:
                copy_words(source, target)
    return 0


if __name__ == "__main__":
    sys.exit(main())