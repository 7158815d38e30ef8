"""Reverse the order of the bits in a byte."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Sequence

NOT_A_NUMBER = "Введённое значение не число"
OUT_OF_RANGE = "Число не входит в диапозон от 0 до 255"
USAGE = "Eror, please enter: flipbyte.exe <input byte>"

_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


def parse_byte(text: str) -> int:
    """Parse a decimal number in the range 0..255; raise ValueError otherwise."""
    if text and not _INTEGER.fullmatch(text):
        raise ValueError(NOT_A_NUMBER)
    value = int(text) if text else 0
    if not 0 <= value <= 255:
        raise ValueError(OUT_OF_RANGE)
    return value


def reverse_byte(value: int) -> int:
    """Return the byte whose bits are those of value in reverse order."""
    if not 0 <= value <= 255:
        raise ValueError(OUT_OF_RANGE)
    return int(f"{value:08b}"[::-1], 2)


def main(argv: Sequence[str] | None = None) -> int:
    """Flip <input byte> and write it to [output file], or print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 1
    try:
        value = parse_byte(args[0])
    except ValueError as error:
        print(error)
        return 1
    flipped = reverse_byte(value)
    if len(args) > 1:
        Path(args[1]).write_text(str(flipped), encoding="utf-8")
    else:
        print(flipped)
    return 0


if __name__ == "__main__":
    sys.exit(main())