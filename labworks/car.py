"""A car with an engine, a gearbox and a speed that must suit the gear."""

from __future__ import annotations

from enum import Enum

REVERSE = -1
NEUTRAL = 0

GEAR_SPEED_RANGES: dict[int, tuple[int, int]] = {
    -1: (-20, 0),
    0: (0, 150),
    1: (0, 30),
    2: (20, 50),
    3: (30, 60),
    4: (40, 90),
    5: (50, 150),
}


class Direction(Enum):
    """Where the car is moving."""

    FORWARD = "Forward"
    BACKWARD = "Backward"
    IMMOBILE = "Immobile"


class CarError(Exception):
    """Raised when the car refuses a command."""


def _in_range(speed: int, gear: int) -> bool:
    low, high = GEAR_SPEED_RANGES[gear]
    return low <= speed <= high


class Car:
    """A car; speed is signed internally, negative when moving backward."""

    def __init__(self) -> None:
        self._engine_on = False
        self._gear = NEUTRAL
        self._speed = 0

    def turn_on_engine(self) -> None:
        """Start the engine."""
        self._engine_on = True

    def turn_off_engine(self) -> None:
        """Stop the engine; the car must stand still in neutral."""
        if self._gear != NEUTRAL or self._speed != 0:
            raise CarError("Stop and shift to neutral to turn off the engine.")
        self._engine_on = False

    def set_gear(self, gear: int) -> None:
        """Shift to gear if the engine runs and the current speed allows it."""
        if not self._engine_on:
            raise CarError("Unable to set gear: Engine is turned off.")
        if gear not in GEAR_SPEED_RANGES:
            raise CarError("Unable to set gear: invalid gear argument")
        if gear == REVERSE:
            if self._speed != 0:
                if self._gear != gear:
                    raise CarError("Unable to set reverse gear while moving.")
                return
        elif gear != NEUTRAL and not _in_range(self._speed, gear):
            raise CarError("Unable to set gear: unsuitable current speed")
        self._gear = gear

    def set_speed(self, speed: int) -> None:
        """Change speed within the limits of the current gear."""
        if speed < 0:
            raise CarError("Unable to set speed: speed cannot be negative value.")
        if not self._engine_on:
            raise CarError("Unable to set speed: engine is turned off.")
        if self._gear == REVERSE:
            if -speed < GEAR_SPEED_RANGES[REVERSE][0]:
                raise CarError("Unable to set speed: exceed reverse speed limit")
            self._speed = -speed
        elif self._gear == NEUTRAL:
            if speed > abs(self._speed):
                raise CarError(
                    "Unable to set speed: impossible to accelerate at neutral gear"
                )
            self._speed = -speed if self._speed < 0 else speed
        else:
            if not _in_range(speed, self._gear):
                raise CarError(
                    "Unable to set speed: speed does not suite currently selected gear."
                )
            self._speed = speed

    @property
    def is_turned_on(self) -> bool:
        """Whether the engine runs."""
        return self._engine_on

    @property
    def direction(self) -> Direction:
        """The direction of motion."""
        if self._speed > 0:
            return Direction.FORWARD
        if self._speed == 0:
            return Direction.IMMOBILE
        return Direction.BACKWARD

    @property
    def speed(self) -> int:
        """The absolute speed."""
        return abs(self._speed)

    @property
    def gear(self) -> int:
        """The selected gear, -1 for reverse and 0 for neutral."""
        return self._gear