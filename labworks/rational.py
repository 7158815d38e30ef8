"""Rational numbers kept in lowest terms with a positive denominator."""

from __future__ import annotations

import math
import operator
import re
from fractions import Fraction
from typing import Union

ZERO_DENOMINATOR = "denominator cannot be 0"
INVALID_TEXT = "Unable to parse rational number: {!r}"

_RATIONAL = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)\s*")

_Operand = Union["Rational", int]


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Rational:
    """A fraction numerator/denominator, always normalized."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            raise ValueError(ZERO_DENOMINATOR)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Parse text of the form 'numerator/denominator'."""
        match = _RATIONAL.fullmatch(text)
        if match is None:
            raise ValueError(INVALID_TEXT.format(text))
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def numerator(self) -> int:
        """The numerator, carrying the sign."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """The denominator, always positive."""
        return self._denominator

    def to_float(self) -> float:
        """Return the integer part of the quotient as a float."""
        return float(_truncating_div(self._numerator, self._denominator))

    def to_compound_fraction(self) -> tuple[int, "Rational"]:
        """Split into a whole part and a proper fraction of the same sign."""
        whole = _truncating_div(self._numerator, self._denominator)
        remainder = self._numerator - whole * self._denominator
        return whole, Rational(remainder, self._denominator)

    @staticmethod
    def _coerce(value: object) -> "Rational | None":
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        return None

    def __pos__(self) -> "Rational":
        return Rational(self._numerator, self._denominator)

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __add__(self, other: _Operand) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator + rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __radd__(self, other: _Operand) -> "Rational":
        return self.__add__(other)

    def __sub__(self, other: _Operand) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator - rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __rsub__(self, other: _Operand) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: _Operand) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator, self._denominator * rhs._denominator
        )

    def __rmul__(self, other: _Operand) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: _Operand) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator, self._denominator * rhs._numerator
        )

    def __rtruediv__(self, other: _Operand) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def _cross(self, other: object) -> "tuple[int, int] | None":
        rhs = self._coerce(other)
        if rhs is None:
            return None
        return self._numerator * rhs._denominator, rhs._numerator * self._denominator

    def __eq__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __lt__(self, other: _Operand) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: _Operand) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: _Operand) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: _Operand) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __hash__(self) -> int:
        return hash(Fraction(self._numerator, self._denominator))

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"