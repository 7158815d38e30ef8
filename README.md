# labworks

A collection of small console tools and reusable Python building blocks.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Most tools print a short message and exit with status 1 when they get the
wrong number of arguments or cannot open their files; `labworks-compare`
uses status 2 instead.

### labworks-bmpinfo

Reads the headers of a BMP file and writes a description of it to a text
file: width, height, bits per pixel, palette size (for fewer than 16 bits
per pixel with no explicit colour count), compression (RLE, JPEG or PNG)
and image size. A file too short to hold the headers is reported as not a
bitmap.

```
labworks-bmpinfo picture.bmp info.txt
```

### labworks-copyfile

Copies the whitespace-separated words of a file into another file, one
word per line. If the input file cannot be opened, a message is printed
and the output file is left empty.

```
labworks-copyfile input.txt output.txt
```

### labworks-flipbyte

Takes a number from 0 to 255 and reverses the order of its eight bits.
The result is written to the file given as the second argument, or
printed when no file is given.

```
labworks-flipbyte 6 result.txt
```

For 6 (`00000110`) the result is 96 (`01100000`).

### labworks-invert

Reads a 3×3 matrix of numbers from a file and prints its inverse, each
value rounded to three decimal places. A matrix whose determinant is zero
has no inverse and is reported as an error.

```
labworks-invert matrix.txt
```

### labworks-replace

Copies a text file line by line, replacing every occurrence of a search
string with a replacement string. An empty replacement leaves the text
unchanged; an empty search string with a non-empty replacement is an
error.

```
labworks-replace input.txt output.txt cat dog
```

### labworks-compare

Compares two files word by word and prints either `Files are equal`
(status 0) or `Files are different. Line number is N`, where N is the
position of the first differing word (status 2).

```
labworks-compare first.txt second.txt
```

### labworks-car

A car simulator driven by commands on standard input, until `Exit` or the
end of input:

| Command        | Effect                                      |
|----------------|---------------------------------------------|
| `EngineOn`     | turn the engine on                          |
| `EngineOff`    | turn the engine off (only stopped, neutral) |
| `SetGear <n>`  | select gear -1 (reverse), 0 (neutral) … 5   |
| `SetSpeed <n>` | change speed within the current gear range  |
| `Info`         | print engine, direction, gear and speed     |
| `Exit`         | leave the simulator                         |

Command names are case-insensitive. An unknown command prints
`This command does not exist.`; a refused command prints the reason.

```
$ labworks-car
EngineOn
SetGear 1
SetSpeed 10
Info
Engine: On
Direction: Forward
Gear: 1
Speed: 10
Exit
```

## Library

### Rational numbers

`labworks.rational.Rational` keeps fractions in lowest terms with a
positive denominator and supports arithmetic and comparison with other
rationals and with integers.

```python
from labworks.rational import Rational

print(Rational(1, 2) + Rational(1, 6))         # 2/3
print(Rational.parse("7/15"))                  # 7/15
whole, rest = Rational(9, 4).to_compound_fraction()
print(whole, rest)                             # 2 1/4
```

A zero denominator, or division by a zero rational, raises `ValueError`.
`to_float()` returns the whole part of the quotient as a float.

### Car model

`labworks.car.Car` models an engine, a gearbox with a speed range per gear
and the direction of travel. A refused command raises `labworks.car.CarError`.

```python
from labworks.car import Car, Direction

car = Car()
car.turn_on_engine()
car.set_gear(1)
car.set_speed(20)
assert car.direction is Direction.FORWARD
car.set_gear(3)        # raises CarError: 20 is outside the 30–60 range
```

`labworks.car_commands.CarController` reads text commands from a stream
and applies them to a car; its `step()` returns a `StepResult`.

### Calculator

`labworks.calculator.Calculator` keeps variables and functions built from
them and writes requested values to an output stream. A function is either
an alias of one identifier or an operation (`+`, `-`, `*`, `/`) on two.
Statements can be given as `Expression` objects to `execute()`, or through
the methods directly:

```python
import sys
from labworks.calculator import Calculator

calc = Calculator(sys.stdout)
calc.declare_variable("x")
calc.assign("x", 3, None)
calc.declare_function("double", ["x", "x"], "+")
calc.print_value("double")     # 6
calc.print_variables()         # x=3
```

Failures raise `CalculatorError`. The arithmetic itself lives in
`labworks.arithmetic.calculate` with `labworks.arithmetic.Operation`;
division by zero gives NaN.

### Finding the maximum

`labworks.find_max.find_max(items, less)` returns the greatest item
according to a "less than" function you supply; an empty sequence raises
`ValueError`.

```python
from labworks.find_max import find_max

find_max(["ea", "ba", "ca"], lambda a, b: a < b)   # "ea"
```

### Linked list

`labworks.linked_list.LinkedList` is a doubly linked list. `begin()` and
`end()` return `Position` objects that move with `next()` and `prev()` and
read or write the element through `value`; `insert()` and `erase()` work
at any position.

```python
from labworks.linked_list import LinkedList

items = LinkedList(["b", "c"])
items.push_front("a")
items.push_back("d")
print(list(items))            # ['a', 'b', 'c', 'd']
print(list(reversed(items)))  # ['d', 'c', 'b', 'a']
```

### URL errors

`labworks.url_errors.UrlParsingError` (a `ValueError`) offers ready-made
errors such as `UrlParsingError.invalid_port()`.

## What is not included

- The calculator has no text parser and no command: statements must be
  built as `Expression` objects or made through `Calculator` methods.
- There is no URL parser; only the `UrlParsingError` error type is provided.