import io

import pytest

from labworks.calculator import (
    Calculator,
    CalculatorError,
    Command,
    Expression,
)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def calc(output):
    return Calculator(output)


def _with_xy(calc):
    calc.assign("x", 4.0, None)
    calc.assign("y", 5.0, None)


def _alias_value(calc, name):
    calc.declare_function(f"alias_of_{name}", [name], None)
    return calc.evaluate_functions()[f"alias_of_{name}"]


def test_declared_variable_is_nan(calc, output):
    calc.declare_variable("x")
    calc.print_variables()
    assert output.getvalue() == "x=nan\n"
    assert repr(_alias_value(calc, "x")) == "nan"


def test_declare_variable_twice_fails(calc):
    calc.declare_variable("x")
    with pytest.raises(CalculatorError, match="This variable is exist"):
        calc.declare_variable("x")


def test_assign_number_and_print(calc, output):
    calc.assign("b", 6.0, None)
    assert _alias_value(calc, "b") == 6.0
    calc.print_value("b")
    assert output.getvalue() == "6\n"


def test_assign_from_variable(calc, output):
    calc.assign("b", 6.0, None)
    calc.assign("another_variable", None, "b")
    assert _alias_value(calc, "another_variable") == 6.0
    calc.print_value("another_variable")
    assert output.getvalue() == "6\n"


def test_assign_from_unknown_fails(calc):
    with pytest.raises(CalculatorError, match="This variable is not exist"):
        calc.assign("a", None, "missing")


def test_print_unknown_value_fails(calc):
    with pytest.raises(CalculatorError, match="This value does not exist"):
        calc.print_value("nothing")


def test_empty_listings(calc, output):
    assert calc.evaluate_functions() == {}
    calc.print_variables()
    calc.print_functions()
    assert output.getvalue() == "Empty\nEmpty\n"


def test_functions_of_two_variables(calc):
    _with_xy(calc)
    calc.declare_function("mul", ["x", "y"], "*")
    calc.declare_function("div", ["x", "y"], "/")
    calc.declare_function("add", ["x", "y"], "+")
    calc.declare_function("sub", ["x", "y"], "-")
    values = calc.evaluate_functions()
    assert values == {"mul": 20, "div": 0.8, "add": 9, "sub": -1}


def test_alias_function(calc):
    calc.assign("x", 4.0, None)
    calc.declare_function("alias_for_x", ["x"], None)
    assert calc.evaluate_functions()["alias_for_x"] == 4.0


def test_function_of_function_and_variable(calc):
    _with_xy(calc)
    calc.declare_function("f", ["x", "y"], "*")
    calc.declare_function("g", ["f", "x"], "+")
    calc.declare_function("h", ["y", "f"], "-")
    values = calc.evaluate_functions()
    assert values == {"f": 20.0, "g": 24.0, "h": -15.0}


def test_function_of_two_functions(calc):
    _with_xy(calc)
    calc.declare_function("f", ["x", "y"], "*")
    calc.declare_function("g", ["x", "y"], "+")
    calc.declare_function("h", ["f", "g"], "*")
    values = calc.evaluate_functions()
    assert values == {"f": 20.0, "g": 9.0, "h": 180.0}


def test_duplicate_function_fails(calc):
    calc.declare_function("f", ["x"], None)
    with pytest.raises(CalculatorError, match="This function is exist"):
        calc.declare_function("f", ["y"], None)


def test_unknown_operation_fails(calc):
    with pytest.raises(CalculatorError, match="unknown function operation"):
        calc.declare_function("f", ["x", "y"], "%")


def test_division_by_zero_is_nan(calc):
    calc.assign("x", 4.0, None)
    calc.assign("zero", 0.0, None)
    calc.declare_function("f", ["x", "zero"], "/")
    result = calc.evaluate_functions()["f"]
    assert repr(result) == "nan"


def test_evaluation_stops_at_missing_alias(calc):
    _with_xy(calc)
    calc.declare_function("a", ["missing"], None)
    calc.declare_function("b", ["x", "y"], "*")
    assert calc.evaluate_functions() == {}


def test_print_value_of_function(calc, output):
    _with_xy(calc)
    calc.declare_function("product", ["x", "y"], "*")
    assert calc.evaluate_functions() == {"product": 20.0}
    calc.print_value("product")
    assert output.getvalue() == "20\n"


def test_assign_from_function_keeps_snapshot(calc, output):
    _with_xy(calc)
    calc.declare_function("sum", ["x", "y"], "+")
    calc.assign("s", None, "sum")
    calc.assign("x", 10.0, None)
    calc.declare_function("alias_of_s", ["s"], None)
    values = calc.evaluate_functions()
    assert values == {"sum": 15.0, "alias_of_s": 9.0}
    calc.print_value("s")
    assert output.getvalue() == "9\n"


def test_print_functions_sorted(calc, output):
    _with_xy(calc)
    calc.declare_function("zeta", ["x", "y"], "*")
    calc.declare_function("alpha", ["x", "y"], "+")
    assert calc.evaluate_functions() == {"zeta": 20.0, "alpha": 9.0}
    calc.print_functions()
    assert output.getvalue() == "alpha=9\nzeta=20\n"


def test_print_variables_sorted(calc, output):
    calc.assign("y", 5.0, None)
    calc.assign("x", 4.0, None)
    calc.print_variables()
    assert output.getvalue() == "x=4\ny=5\n"
    assert _alias_value(calc, "x") == 4.0
    assert _alias_value(calc, "y") == 5.0


def test_execute_dispatches_expressions(calc, output):
    calc.execute(Expression(Command.DECLARE_VARIABLE, ["x"]))
    calc.execute(Expression(Command.ASSIGN_VARIABLE, ["x"], value=4.0))
    calc.execute(Expression(Command.ASSIGN_VARIABLE, ["y"], value=5.0))
    calc.execute(
        Expression(Command.DECLARE_FUNCTION, ["product_of_x_and_y", "x", "y"], operation="*")
    )
    assert calc.evaluate_functions() == {"product_of_x_and_y": 20.0}
    calc.execute(Expression(Command.PRINT_VALUE, ["product_of_x_and_y"]))
    calc.execute(Expression(Command.PRINT_ALL_VARIABLES))
    calc.execute(Expression(Command.PRINT_ALL_FUNCTIONS))
    assert output.getvalue() == "20\nx=4\ny=5\nproduct_of_x_and_y=20\n"


def test_execute_raises_on_error(calc):
    calc.execute(Expression(Command.DECLARE_VARIABLE, ["abc"]))
    with pytest.raises(CalculatorError, match="This variable is exist"):
        calc.execute(Expression(Command.DECLARE_VARIABLE, ["abc"]))