"""Replace every occurrence of a string in the lines of a text file."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

USAGE = (
    "Error, enter the argumets: <input file> <output file> "
    "<search string> <replace string>"
)
FILES_NOT_OPEN = "File(-s) not open"
EMPTY_SEARCH = "search string must not be empty"


def _check(search: str, replacement: str) -> None:
    if replacement and not search:
        raise ValueError(EMPTY_SEARCH)


def replace_in_line(line: str, search: str, replacement: str) -> str:
    """Replace search with replacement, left to right; an empty replacement leaves the line as it is."""
    if not replacement:
        return line
    _check(search, replacement)
    return line.replace(search, replacement)


def replace_stream(source: TextIO, target: TextIO, search: str, replacement: str) -> None:
    """Copy source to target line by line, replacing search in every line."""
    _check(search, replacement)
    for line in source:
        text = line[:-1] if line.endswith("\n") else line
        target.write(replace_in_line(text, search, replacement) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Copy <input file> to <output file>, replacing <search string> with <replace string>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(USAGE)
        return 1
    input_path, output_path, search, replacement = args
    try:
        with open(input_path, encoding="utf-8") as source, open(
            output_path, "w", encoding="utf-8"
        ) as target:
            replace_stream(source, target, search, replacement)
    except OSError:
        print(FILES_NOT_OPEN)
        return 1
    except ValueError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())