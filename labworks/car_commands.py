"""Drive a car with text commands read line by line."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TextIO

from labworks.car import Car, CarError, Direction

UNKNOWN_COMMAND = "This command does not exist."
INVALID_ARGUMENT = "Unable to parse argument: {!r}"

_INTEGER_PREFIX = re.compile(r"\s*[+-]?\d+")


class Status(Enum):
    """The outcome of reading one command."""

    OK = 0
    EXIT = 1
    ERROR = 2


class Command(Enum):
    """The commands the controller understands."""

    ENGINE_ON = "engineon"
    ENGINE_OFF = "engineoff"
    SET_GEAR = "setgear"
    SET_SPEED = "setspeed"
    INFO = "info"
    EXIT = "exit"
    ERROR = "error"


_KNOWN = {command.value: command for command in Command if command is not Command.ERROR}


@dataclass(frozen=True)
class StepResult:
    """What one step did: its status, whether the car accepted it, and why not."""

    status: Status
    succeeded: bool = True
    message: str = ""


def parse_command(text: str) -> Command:
    """Return the command named by text, ignoring case; Command.ERROR if unknown."""
    return _KNOWN.get(text.lower(), Command.ERROR)


def _parse_argument(text: str) -> int:
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        raise ValueError(INVALID_ARGUMENT.format(text))
    return int(match.group())


class CarController:
    """Reads commands from source, applies them to car and writes reports to output."""

    def __init__(self, car: Car, source: TextIO, output: TextIO) -> None:
        self._car = car
        self._source = source
        self._output = output

    def step(self) -> StepResult:
        """Read and execute one command."""
        line = self._source.readline()
        if not line:
            return StepResult(Status.EXIT)
        name, has_argument, argument_text = line.rstrip("\r\n").partition(" ")
        command = parse_command(name)
        if command is Command.ERROR:
            return StepResult(Status.ERROR)
        if command is Command.EXIT:
            return StepResult(Status.EXIT)
        if command is Command.INFO:
            self.print_info()
            return StepResult(Status.OK)
        try:
            if command is Command.ENGINE_ON:
                self._car.turn_on_engine()
            elif command is Command.ENGINE_OFF:
                self._car.turn_off_engine()
            else:
                argument = _parse_argument(argument_text) if has_argument else 0
                if command is Command.SET_GEAR:
                    self._car.set_gear(argument)
                else:
                    self._car.set_speed(argument)
        except (CarError, ValueError) as error:
            return StepResult(Status.OK, False, str(error))
        return StepResult(Status.OK)

    def print_info(self) -> None:
        """Write the state of the car."""
        gear = self._car.gear
        gear_text = {-1: "R", 0: "N"}.get(gear, str(gear))
        direction: Direction = self._car.direction
        self._output.write(
            f"Engine: {'On' if self._car.is_turned_on else 'Off'}\n"
            f"Direction: {direction.value}\n"
            f"Gear: {gear_text}\n"
            f"Speed: {self._car.speed}\n"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Drive a car with commands from standard input until Exit or end of input."""
    car = Car()
    controller = CarController(car, sys.stdin, sys.stdout)
    while (result := controller.step()).status is not Status.EXIT:
        if result.status is Status.ERROR:
            print(UNKNOWN_COMMAND)
        if not result.succeeded:
            print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())