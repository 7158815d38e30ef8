"""A calculator of variables and functions built from previously declared identifiers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Sequence, TextIO

from labworks.arithmetic import Operation, calculate

FUNCTION_EXISTS = "This function is exist"
VARIABLE_EXISTS = "This variable is exist"
VARIABLE_MISSING = "This variable is not exist"
VALUE_MISSING = "This value does not exist"
EMPTY = "Empty"


class Command(Enum):
    """The statements the calculator executes."""

    DECLARE_VARIABLE = auto()
    ASSIGN_VARIABLE = auto()
    DECLARE_FUNCTION = auto()
    PRINT_VALUE = auto()
    PRINT_ALL_VARIABLES = auto()
    PRINT_ALL_FUNCTIONS = auto()


@dataclass
class Expression:
    """A parsed statement: its command, identifiers, literal value and operation symbol."""

    command: Command
    identifiers: list[str] = field(default_factory=list)
    value: Optional[float] = None
    operation: Optional[str] = None


class CalculatorError(Exception):
    """Raised when a statement cannot be executed."""


@dataclass(frozen=True)
class FunctionDefinition:
    """A function: an alias of one identifier, or an operation on two."""

    name: str
    operands: tuple[str, ...]
    operation: Optional[Operation] = None


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:g}"


class Calculator:
    """Holds variables and functions and writes requested values to output."""

    def __init__(self, output: TextIO) -> None:
        self._output = output
        self._variables: dict[str, float] = {}
        self._functions: list[FunctionDefinition] = []

    def execute(self, expression: Expression) -> None:
        """Execute one parsed statement."""
        ids = expression.identifiers
        command = expression.command
        if command is Command.DECLARE_FUNCTION:
            self.declare_function(ids[0], ids[1:3], expression.operation)
        elif command is Command.DECLARE_VARIABLE:
            self.declare_variable(ids[0])
        elif command is Command.ASSIGN_VARIABLE:
            source = ids[1] if len(ids) > 1 else None
            self.assign(ids[0], expression.value, source)
        elif command is Command.PRINT_VALUE:
            self.print_value(ids[0])
        elif command is Command.PRINT_ALL_FUNCTIONS:
            self.print_functions()
        elif command is Command.PRINT_ALL_VARIABLES:
            self.print_variables()

    def declare_variable(self, name: str) -> None:
        """Declare a variable whose value is not yet defined (NaN)."""
        if name in self._variables:
            raise CalculatorError(VARIABLE_EXISTS)
        self._variables[name] = math.nan

    def assign(self, name: str, value: Optional[float], source: Optional[str]) -> None:
        """Set a variable to a number, or to the current value of a variable or function."""
        if value is not None:
            self._variables[name] = float(value)
            return
        if source is not None and source in self._variables:
            self._variables[name] = self._variables[source]
            return
        if source is not None and self._find_function(source) is not None:
            self._variables[name] = self.evaluate_functions().get(source, 0.0)
            return
        raise CalculatorError(VARIABLE_MISSING)

    def declare_function(
        self, name: str, operands: Sequence[str], operation: Optional[str]
    ) -> None:
        """Declare a function of one identifier, or of two joined by an operation symbol."""
        if self._find_function(name) is not None:
            raise CalculatorError(FUNCTION_EXISTS)
        operands = tuple(operands)
        if not 1 <= len(operands) <= 2:
            raise CalculatorError(VALUE_MISSING)
        if len(operands) == 2:
            try:
                parsed = Operation.from_symbol(operation or "")
            except ValueError as error:
                raise CalculatorError(str(error)) from None
            self._functions.append(FunctionDefinition(name, operands, parsed))
        else:
            self._functions.append(FunctionDefinition(name, operands))

    def evaluate_functions(self) -> dict[str, float]:
        """Compute functions in declaration order.

        Evaluation stops at an alias whose variable does not exist; a function
        whose operands cannot be resolved is left without a value.
        """
        values: dict[str, float] = {}
        variables = self._variables
        for function in self._functions:
            if len(function.operands) == 1:
                (operand,) = function.operands
                if operand not in variables:
                    break
                values[function.name] = variables[operand]
                continue
            first, second = function.operands
            operation = function.operation
            assert operation is not None
            if first in variables and second in variables:
                pair = (variables[first], variables[second])
            elif second in values and first in variables:
                pair = (variables[first], values[second])
            elif first in values and second in variables:
                pair = (values[first], variables[second])
            elif first in values and second in values:
                pair = (values[first], values[second])
            else:
                continue
            values[function.name] = calculate(pair[0], pair[1], operation)
        return values

    def print_value(self, name: str) -> None:
        """Write the value of a variable or function."""
        if name in self._variables:
            self._write(_format_number(self._variables[name]))
            return
        if self._find_function(name) is not None:
            self._write(_format_number(self.evaluate_functions().get(name, 0.0)))
            return
        raise CalculatorError(VALUE_MISSING)

    def print_variables(self) -> None:
        """Write every variable as name=value, sorted by name."""
        if not self._variables:
            self._write(EMPTY)
            return
        for name in sorted(self._variables):
            self._write(f"{name}={_format_number(self._variables[name])}")

    def print_functions(self) -> None:
        """Write every evaluated function as name=value, sorted by name."""
        if not self._functions:
            self._write(EMPTY)
            return
        values = self.evaluate_functions()
        for name in sorted(values):
            self._write(f"{name}={_format_number(values[name])}")

    def _find_function(self, name: str) -> Optional[FunctionDefinition]:
        return next((f for f in self._functions if f.name == name), None)

    def _write(self, text: str) -> None:
        self._output.write(f"{text}\n")