"""
Accumulator engine.

The calculator is driven by ``reduce(state, event)``, a pure function that
returns the next state plus the side effects the host should perform
(arming timers, saving preferences). Operators execute immediately against
a single pending operand, the classic pocket-calculator way.
"""

import math
from collections.abc import Callable

from .formatter import format_display, parse_display
from .operations import BINARY_OPERATIONS, UNARY_OPERATIONS, ErrorKind, Failure
from .state import (
    AngleMode,
    AngleModeToggled,
    BinaryOperatorPressed,
    CalculatorEvent,
    CalculatorState,
    CelebrationExpired,
    ClearPressed,
    ConstantPressed,
    DigitPressed,
    EqualsPressed,
    ErrorExpired,
    MemoryPressed,
    PreferencesLoaded,
    SavePreferences,
    SecondModeToggled,
    StartTimer,
    ThemeToggled,
    TimerKind,
    Transition,
    UnaryOperatorPressed,
)

ERROR_TIMEOUT = 3.0
CELEBRATION_TIMEOUT = 3.0
CELEBRATION_PAIR = (99.0, 33.0)

CONSTANTS = {
    "π": math.pi,
    "e": math.e,
}


def is_celebration_pair(a: float, b: float) -> bool:
    """True for the 99 and 33 easter egg, in either order."""
    return (a, b) in (CELEBRATION_PAIR, CELEBRATION_PAIR[::-1])


def _fail(state: CalculatorState, failure: Failure) -> Transition:
    return Transition(
        state=state.model_copy(update={"error": failure.message}),
        effects=(StartTimer(timer=TimerKind.ERROR, delay=ERROR_TIMEOUT),),
    )


def _celebrate(state: CalculatorState, a: float, b: float) -> Transition:
    if not is_celebration_pair(a, b):
        return Transition(state=state)
    return Transition(
        state=state.model_copy(update={"celebrating": True}),
        effects=(StartTimer(timer=TimerKind.CELEBRATION, delay=CELEBRATION_TIMEOUT),),
    )


def _save(state: CalculatorState) -> SavePreferences:
    return SavePreferences(memory=state.memory, dark_mode=state.dark_mode)


def _enter_text(state: CalculatorState, text: str) -> Transition:
    state = state.model_copy(update={"error": ""})
    if state.entering_new_number:
        return Transition(state=state.model_copy(update={"display": text, "entering_new_number": False}))
    return Transition(state=state.model_copy(update={"display": state.display + text}))


def on_digit(state: CalculatorState, event: DigitPressed) -> Transition:
    return _enter_text(state, event.text)


def on_constant(state: CalculatorState, event: ConstantPressed) -> Transition:
    return _enter_text(state, repr(CONSTANTS[event.name]))


def on_binary_operator(state: CalculatorState, event: BinaryOperatorPressed) -> Transition:
    if event.symbol not in BINARY_OPERATIONS:
        raise ValueError(f"Unknown binary operator: {event.symbol}")
    state = state.model_copy(update={"error": ""})
    current = parse_display(state.display)

    if state.pending_operand is None:
        return Transition(state=state.model_copy(update={
            "pending_operand": current,
            "pending_operator": event.symbol,
            "entering_new_number": True,
        }))

    # Chained operator: fold the pending operation first
    previous = state.pending_operand
    result = BINARY_OPERATIONS[state.pending_operator](previous, current)
    if isinstance(result, Failure):
        return _fail(state, result)

    state = state.model_copy(update={
        "pending_operand": result,
        "pending_operator": event.symbol,
        "display": format_display(result),
        "entering_new_number": True,
    })
    return _celebrate(state, previous, current)


def on_unary_operator(state: CalculatorState, event: UnaryOperatorPressed) -> Transition:
    operation = UNARY_OPERATIONS.get(event.symbol)
    if operation is None:
        raise ValueError(f"Unknown unary operator: {event.symbol}")
    state = state.model_copy(update={"error": ""})

    result = operation(parse_display(state.display), state.angle_mode)
    if isinstance(result, Failure):
        return _fail(state, result)
    return Transition(state=state.model_copy(update={
        "display": format_display(result),
        "entering_new_number": True,
    }))


def on_equals(state: CalculatorState, event: EqualsPressed) -> Transition:
    state = state.model_copy(update={"error": ""})
    if not state.has_pending_operation:
        return Transition(state=state)

    previous = state.pending_operand
    current = parse_display(state.display)
    result = BINARY_OPERATIONS[state.pending_operator](previous, current)
    if isinstance(result, Failure):
        return _fail(state, result)

    state = state.model_copy(update={
        "display": format_display(result),
        "pending_operand": None,
        "pending_operator": None,
        "entering_new_number": True,
    })
    return _celebrate(state, previous, current)


def on_clear(state: CalculatorState, event: ClearPressed) -> Transition:
    return Transition(state=state.model_copy(update={
        "display": "0",
        "pending_operand": None,
        "pending_operator": None,
        "entering_new_number": True,
        "error": "",
    }))


def on_memory(state: CalculatorState, event: MemoryPressed) -> Transition:
    if event.action == "MR":
        return Transition(state=state.model_copy(update={
            "display": format_display(state.memory),
            "entering_new_number": True,
        }))

    if event.action == "MC":
        memory = 0.0
    else:
        current = parse_display(state.display)
        if math.isnan(current):
            return _fail(state, Failure(
                kind=ErrorKind.INVALID_MEMORY_OPERATION,
                message="Invalid memory operation",
            ))
        memory = state.memory + current if event.action == "M+" else state.memory - current

    if memory == state.memory:
        return Transition(state=state)
    state = state.model_copy(update={"memory": memory})
    return Transition(state=state, effects=(_save(state),))


def on_angle_mode(state: CalculatorState, event: AngleModeToggled) -> Transition:
    mode = AngleMode.DEGREE if state.angle_mode == AngleMode.RADIAN else AngleMode.RADIAN
    return Transition(state=state.model_copy(update={"angle_mode": mode}))


def on_second_mode(state: CalculatorState, event: SecondModeToggled) -> Transition:
    # Displayed only; no operation reads it.
    return Transition(state=state.model_copy(update={"second_mode": not state.second_mode}))


def on_theme(state: CalculatorState, event: ThemeToggled) -> Transition:
    state = state.model_copy(update={"dark_mode": not state.dark_mode})
    return Transition(state=state, effects=(_save(state),))


def on_error_expired(state: CalculatorState, event: ErrorExpired) -> Transition:
    return Transition(state=state.model_copy(update={"error": ""}))


def on_celebration_expired(state: CalculatorState, event: CelebrationExpired) -> Transition:
    return Transition(state=state.model_copy(update={"celebrating": False}))


def on_preferences_loaded(state: CalculatorState, event: PreferencesLoaded) -> Transition:
    return Transition(state=state.model_copy(update={
        "memory": event.memory,
        "dark_mode": event.dark_mode,
    }))


HANDLERS: dict[type, Callable[[CalculatorState, CalculatorEvent], Transition]] = {
    DigitPressed: on_digit,
    ConstantPressed: on_constant,
    BinaryOperatorPressed: on_binary_operator,
    UnaryOperatorPressed: on_unary_operator,
    EqualsPressed: on_equals,
    ClearPressed: on_clear,
    MemoryPressed: on_memory,
    AngleModeToggled: on_angle_mode,
    SecondModeToggled: on_second_mode,
    ThemeToggled: on_theme,
    ErrorExpired: on_error_expired,
    CelebrationExpired: on_celebration_expired,
    PreferencesLoaded: on_preferences_loaded,
}


def reduce(state: CalculatorState, event: CalculatorEvent) -> Transition:
    """Apply one input event to ``state``."""
    handler = HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported calculator event: {type(event).__name__}")
    return handler(state, event)
