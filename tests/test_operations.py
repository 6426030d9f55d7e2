import math

import pytest

from scicalc.engine.operations import (
    BINARY_OPERATIONS,
    UNARY_OPERATIONS,
    ErrorKind,
    Failure,
    cube_root,
    divide,
    factorial,
    sin,
    sinh,
    square,
)
from scicalc.engine.state import AngleMode

RAD = AngleMode.RADIAN
DEG = AngleMode.DEGREE


def test_binary_table():
    assert BINARY_OPERATIONS["+"](2, 3) == 5
    assert BINARY_OPERATIONS["-"](2, 3) == -1
    assert BINARY_OPERATIONS["×"](2, 3) == 6
    assert BINARY_OPERATIONS["÷"](3, 2) == 1.5


def test_divide_by_zero_is_a_failure():
    result = divide(8, 0)
    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.DIVISION_BY_ZERO
    assert result.message == "Division by zero"


def test_trig_respects_angle_mode():
    assert sin(math.pi / 2, RAD) == pytest.approx(1.0)
    assert sin(90, DEG) == pytest.approx(1.0)
    assert UNARY_OPERATIONS["cos"](0, DEG) == 1.0
    assert UNARY_OPERATIONS["tan"](45, DEG) == pytest.approx(1.0)


def test_trig_never_fails():
    assert math.isnan(sin(math.inf, RAD))
    assert math.isnan(UNARY_OPERATIONS["tan"](math.inf, DEG))


def test_hyperbolic_overflow_is_infinite():
    assert sinh(1000, RAD) == math.inf
    assert sinh(-1000, RAD) == -math.inf
    assert UNARY_OPERATIONS["cosh"](1000, RAD) == math.inf
    assert UNARY_OPERATIONS["tanh"](1000, RAD) == 1.0


@pytest.mark.parametrize("symbol", ["ln", "log"])
@pytest.mark.parametrize("value", [0, -5])
def test_logarithms_reject_non_positive(symbol, value):
    result = UNARY_OPERATIONS[symbol](value, RAD)
    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.INVALID_DOMAIN


def test_logarithms():
    assert UNARY_OPERATIONS["ln"](math.e, RAD) == pytest.approx(1.0)
    assert UNARY_OPERATIONS["log"](1000, RAD) == pytest.approx(3.0)


def test_roots():
    assert UNARY_OPERATIONS["√"](16, RAD) == 4.0
    assert isinstance(UNARY_OPERATIONS["√"](-1, RAD), Failure)
    assert cube_root(-27, RAD) == pytest.approx(-3.0)


def test_powers_overflow_to_infinity():
    assert square(1e200, RAD) == math.inf
    assert UNARY_OPERATIONS["x³"](-2, RAD) == -8


def test_factorial():
    assert factorial(5, RAD) == 120
    assert factorial(0, RAD) == 1
    assert factorial(1, RAD) == 1
    assert math.isfinite(factorial(170, RAD))


@pytest.mark.parametrize("value, kind", [
    (171, ErrorKind.OVERFLOW),
    (2.5, ErrorKind.INVALID_DOMAIN),
    (-1, ErrorKind.INVALID_DOMAIN),
    (math.nan, ErrorKind.INVALID_DOMAIN),
    (math.inf, ErrorKind.INVALID_DOMAIN),
])
def test_factorial_failures(value, kind):
    result = factorial(value, RAD)
    assert isinstance(result, Failure)
    assert result.kind == kind


def test_factorial_accepts_int_and_float_operands():
    assert factorial(6, RAD) == 720
    assert factorial(6.0, RAD) == 720
    assert UNARY_OPERATIONS["x!"](5, RAD) == 120
