"""Invert a 3x3 matrix read from a text file."""

from __future__ import annotations

import math
import re
import sys
from itertools import islice
from typing import Sequence, TextIO

SIZE = 3

Matrix = list[list[float]]

USAGE = "Error, enter the argumets : <input file> <output file>"
FILE_NOT_OPEN = "File(-s) not open"
NOT_FILLED = "The matrix is not filled completely"
NO_DETERMINANT = "Нельзя получить определитель"

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class SingularMatrixError(ValueError):
    """Raised when a matrix has a zero determinant."""


def read_matrix(stream: TextIO) -> Matrix:
    """Read nine numbers from stream into a 3x3 matrix."""
    tokens = list(islice(stream.read().split(), SIZE * SIZE))
    if len(tokens) < SIZE * SIZE or not all(map(_NUMBER.fullmatch, tokens)):
        raise ValueError(NOT_FILLED)
    values = [float(token) for token in tokens]
    return [values[row * SIZE : (row + 1) * SIZE] for row in range(SIZE)]


def _check_shape(matrix: Sequence[Sequence[float]]) -> None:
    if len(matrix) != SIZE or any(len(row) != SIZE for row in matrix):
        raise ValueError("a 3x3 matrix is required")


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Return the determinant of a 3x3 matrix by the rule of Sarrus."""
    _check_shape(matrix)
    (a11, a12, a13), (a21, a22, a23), (a31, a32, a33) = matrix
    positive = a11 * a22 * a33 + a12 * a23 * a31 + a13 * a21 * a32
    negative = a13 * a22 * a31 + a12 * a21 * a33 + a11 * a23 * a32
    return positive - negative


def _minor(matrix: Sequence[Sequence[float]], row: int, column: int) -> float:
    (a, b), (c, d) = (
        [value for j, value in enumerate(line) if j != column]
        for i, line in enumerate(matrix)
        if i != row
    )
    return a * d - b * c


def invert(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the inverse matrix; raise SingularMatrixError if there is none."""
    det = determinant(matrix)
    if det == 0:
        raise SingularMatrixError(NO_DETERMINANT)
    cofactors = [
        [(-1) ** (row + column) * _minor(matrix, row, column) for column in range(SIZE)]
        for row in range(SIZE)
    ]
    scale = 1 / det
    return [[cofactors[column][row] * scale for column in range(SIZE)] for row in range(SIZE)]


def _round_thousandths(value: float) -> float:
    return math.copysign(math.floor(abs(value) * 1000 + 0.5), value) / 1000


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render the matrix rounded to thousandths, one row per line."""
    return "".join(
        "".join(f"{_round_thousandths(value):g} " for value in row) + "\n"
        for row in matrix
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the inverse of the matrix stored in <input file>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    try:
        with open(args[0], encoding="utf-8") as source:
            matrix = read_matrix(source)
    except OSError:
        print(FILE_NOT_OPEN)
        return 1
    except ValueError as error:
        print(error)
        return 1
    try:
        inverse = invert(matrix)
    except SingularMatrixError as error:
        print(error)
        return 1
    print(format_matrix(inverse), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())