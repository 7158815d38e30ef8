import io

import pytest

from labworks.car import Car, Direction
from labworks.car_commands import (
    CarController,
    Command,
    Status,
    main,
    parse_command,
)


def make_controller(text):
    car = Car()
    output = io.StringIO()
    return car, CarController(car, io.StringIO(text), output), output


def car_state(car):
    return car.is_turned_on, car.gear, car.speed, car.direction


@pytest.mark.parametrize(
    "text, status",
    [
        ("dsjkks", Status.ERROR),
        ("\n", Status.ERROR),
        ("Exit\n", Status.EXIT),
        ("", Status.EXIT),
    ],
)
def test_step_status(text, status):
    car, controller, _ = make_controller(text)
    assert controller.step().status is status
    assert car_state(car) == (False, 0, 0, Direction.IMMOBILE)


def test_incorrect_argument():
    _, controller, _ = make_controller("SetGear 10")
    result = controller.step()
    assert result.succeeded is False
    assert "Engine is turned off" in result.message


BACKWARD = Direction.BACKWARD
IMMOBILE = Direction.IMMOBILE

CORRECT_COMMANDS = [
    ("EngineOn", True, (True, 0, 0, IMMOBILE)),
    ("SetGear -1", True, (True, -1, 0, IMMOBILE)),
    ("SetSpeed 20", True, (True, -1, 20, BACKWARD)),
    ("SetGear 0", True, (True, 0, 20, BACKWARD)),
    ("SetSpeed 10", True, (True, 0, 10, BACKWARD)),
    ("SetSpeed 15", False, (True, 0, 10, BACKWARD)),
    ("SetGear 1", False, (True, 0, 10, BACKWARD)),
    ("EngineOff", False, (True, 0, 10, BACKWARD)),
    ("SetSpeed 0", True, (True, 0, 0, IMMOBILE)),
    ("EngineOff", True, (False, 0, 0, IMMOBILE)),
]


def test_correct_commands():
    script = "".join(f"{line}\n" for line, _, _ in CORRECT_COMMANDS)
    car, controller, _ = make_controller(script)
    for line, succeeded, expected in CORRECT_COMMANDS:
        result = controller.step()
        assert result.status is Status.OK, line
        assert result.succeeded is succeeded, line
        assert car_state(car) == expected, line


@pytest.mark.parametrize(
    "script, expected",
    [
        ("Info\n", "Engine: Off\nDirection: Immobile\nGear: N\nSpeed: 0\n"),
        (
            "EngineOn\nSetGear 1\nSetSpeed 10\nInfo\n",
            "Engine: On\nDirection: Forward\nGear: 1\nSpeed: 10\n",
        ),
        (
            "EngineOn\nSetGear -1\nSetSpeed 5\nInfo\n",
            "Engine: On\nDirection: Backward\nGear: R\nSpeed: 5\n",
        ),
    ],
)
def test_info(script, expected):
    _, controller, output = make_controller(script)
    statuses = [controller.step().status for _ in script.splitlines()]
    assert statuses == [Status.OK] * len(statuses)
    assert output.getvalue() == expected


def test_unparsable_argument():
    car, controller, _ = make_controller("EngineOn\nSetGear abc\n")
    controller.step()
    result = controller.step()
    assert (result.status, result.succeeded) == (Status.OK, False)
    assert car.gear == 0


@pytest.mark.parametrize(
    "text, command",
    [
        ("EngineOn", Command.ENGINE_ON),
        ("ENGINEOFF", Command.ENGINE_OFF),
        ("setgear", Command.SET_GEAR),
        ("SetSpeed", Command.SET_SPEED),
        ("Info", Command.INFO),
        ("Exit", Command.EXIT),
        ("drive", Command.ERROR),
        ("", Command.ERROR),
    ],
)
def test_parse_command(text, command):
    assert parse_command(text) is command


def test_main_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("SetSpeed 10\nfoo\nInfo\nExit\nInfo\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "Unable to set speed: engine is turned off.\n"
        "This command does not exist.\n"
        "Engine: Off\nDirection: Immobile\nGear: N\nSpeed: 0\n"
    )