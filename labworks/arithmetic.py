"""Binary arithmetic with error-compensating addition, subtraction, multiplication and division."""

from __future__ import annotations

import math
import sys
from enum import Enum
from typing import Callable

_DBL_MIN = sys.float_info.min

UNKNOWN_OPERATION = "Internal error: unknown function operation recieved."


class Operation(Enum):
    """The four operations a function may apply to its operands."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operation":
        """Return the operation written as symbol; raise ValueError for an unknown one."""
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(UNKNOWN_OPERATION) from None


def _add(first: float, second: float) -> float:
    total = first + second
    correction = first - total + second
    return total + correction


def _subtract(first: float, second: float) -> float:
    difference = first - second
    correction = first - difference - second
    return difference + correction


def _multiply(first: float, second: float) -> float:
    product = first * second
    if first == 0 or second == 0 or abs(product) >= _DBL_MIN:
        return product
    first_high = first / 2
    second_high = second / 2
    first_low = first - first_high
    second_low = second - second_high
    high = first_high * second_high
    middle = (first_high + first_low) * (second_high + second_low) - high
    return 2 * (high - middle) + product


def _divide(first: float, second: float) -> float:
    if second == 0:
        return math.nan
    quotient = first / second
    if second in (1, -1) or abs(quotient) >= _DBL_MIN:
        return quotient
    remainder = first - quotient * second
    return quotient + (remainder + second) / second


_OPERATIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: _add,
    Operation.SUB: _subtract,
    Operation.MUL: _multiply,
    Operation.DIV: _divide,
}


def calculate(first: float, second: float, operation: Operation) -> float:
    """Apply operation to the operands; division by zero gives NaN."""
    action = _OPERATIONS.get(operation)
    if action is None:
        return math.nan
    return action(first, second)