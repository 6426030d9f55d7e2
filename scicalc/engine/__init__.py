"""Accumulator engine: state, operations, formatting and the session host."""

from .formatter import format_display, parse_display
from .keymap import event_for_button, event_for_key
from .operations import ErrorKind, Failure
from .reducer import reduce
from .session import CalculatorSession, ManualScheduler
from .state import AngleMode, CalculatorState, Transition

__all__ = [
    "AngleMode",
    "CalculatorSession",
    "CalculatorState",
    "ErrorKind",
    "Failure",
    "ManualScheduler",
    "Transition",
    "event_for_button",
    "event_for_key",
    "format_display",
    "parse_display",
    "reduce",
]
