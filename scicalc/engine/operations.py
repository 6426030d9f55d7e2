"""
Operation table for the calculator.
Every entry returns either a float or a Failure describing why it refused
the input; nothing in here raises for bad operands.
"""

import math
from collections.abc import Callable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from .state import AngleMode

FACTORIAL_LIMIT = 170


class ErrorKind(StrEnum):
    DIVISION_BY_ZERO = "DivisionByZero"
    INVALID_DOMAIN = "InvalidDomain"
    OVERFLOW = "Overflow"
    INVALID_MEMORY_OPERATION = "InvalidMemoryOperation"


class Failure(BaseModel):
    """A refused operation, tagged with its kind and a user-facing message."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str


Outcome = float | Failure
BinaryOperation = Callable[[float, float], Outcome]
UnaryOperation = Callable[[float, AngleMode], Outcome]


def _ieee(func: Callable[[float], float], x: float, overflow: float = math.inf) -> float:
    """Call a math function with IEEE results instead of exceptions."""
    try:
        return func(x)
    except ValueError:
        return math.nan
    except OverflowError:
        return overflow


def _to_radians(x: float, mode: AngleMode) -> float:
    return x * math.pi / 180 if mode == AngleMode.DEGREE else x


# Binary operations

def add(a: float, b: float) -> Outcome:
    return a + b


def subtract(a: float, b: float) -> Outcome:
    return a - b


def multiply(a: float, b: float) -> Outcome:
    return a * b


def divide(a: float, b: float) -> Outcome:
    if b == 0:
        return Failure(kind=ErrorKind.DIVISION_BY_ZERO, message="Division by zero")
    return a / b


# Unary operations

def sin(x: float, mode: AngleMode) -> Outcome:
    return _ieee(math.sin, _to_radians(x, mode))


def cos(x: float, mode: AngleMode) -> Outcome:
    return _ieee(math.cos, _to_radians(x, mode))


def tan(x: float, mode: AngleMode) -> Outcome:
    return _ieee(math.tan, _to_radians(x, mode))


def sinh(x: float, mode: AngleMode) -> Outcome:
    return _ieee(math.sinh, x, overflow=math.copysign(math.inf, x))


def cosh(x: float, mode: AngleMode) -> Outcome:
    return _ieee(math.cosh, x)


def tanh(x: float, mode: AngleMode) -> Outcome:
    return math.tanh(x)


def ln(x: float, mode: AngleMode) -> Outcome:
    if x <= 0:
        return Failure(kind=ErrorKind.INVALID_DOMAIN, message="Invalid input for logarithm")
    return math.log(x)


def log10(x: float, mode: AngleMode) -> Outcome:
    if x <= 0:
        return Failure(kind=ErrorKind.INVALID_DOMAIN, message="Invalid input for logarithm")
    return math.log10(x)


def square(x: float, mode: AngleMode) -> Outcome:
    return x * x


def cube(x: float, mode: AngleMode) -> Outcome:
    return x * x * x


def square_root(x: float, mode: AngleMode) -> Outcome:
    if x < 0:
        return Failure(kind=ErrorKind.INVALID_DOMAIN, message="Invalid input for square root")
    return math.sqrt(x)


def cube_root(x: float, mode: AngleMode) -> Outcome:
    return math.cbrt(x)


def factorial(x: float, mode: AngleMode) -> Outcome:
    """Iterative factorial; 170! is the largest value a float can hold."""
    if not math.isfinite(x) or x < 0 or not float(x).is_integer():
        return Failure(kind=ErrorKind.INVALID_DOMAIN, message="Invalid factorial input")
    if x > FACTORIAL_LIMIT:
        return Failure(kind=ErrorKind.OVERFLOW, message="Number too large for factorial")
    result = 1.0
    for i in range(2, int(x) + 1):
        result *= i
    return result


BINARY_OPERATIONS: dict[str, BinaryOperation] = {
    "+": add,
    "-": subtract,
    "×": multiply,
    "÷": divide,
}

UNARY_OPERATIONS: dict[str, UnaryOperation] = {
    "sin": sin,
    "cos": cos,
    "tan": tan,
    "sinh": sinh,
    "cosh": cosh,
    "tanh": tanh,
    "ln": ln,
    "log": log10,
    "x²": square,
    "x³": cube,
    "√": square_root,
    "∛": cube_root,
    "x!": factorial,
}
