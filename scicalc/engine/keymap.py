"""Button labels and keyboard keys mapped to calculator events."""

from .operations import BINARY_OPERATIONS, UNARY_OPERATIONS
from .state import (
    AngleModeToggled,
    BinaryOperatorPressed,
    CalculatorEvent,
    ClearPressed,
    ConstantPressed,
    DigitPressed,
    EqualsPressed,
    MemoryPressed,
    SecondModeToggled,
    ThemeToggled,
    UnaryOperatorPressed,
)

DIGITS = "0123456789."


def _build_buttons() -> dict[str, CalculatorEvent]:
    buttons: dict[str, CalculatorEvent] = {char: DigitPressed(text=char) for char in DIGITS}
    buttons.update({symbol: BinaryOperatorPressed(symbol=symbol) for symbol in BINARY_OPERATIONS})
    buttons.update({symbol: UnaryOperatorPressed(symbol=symbol) for symbol in UNARY_OPERATIONS})
    buttons.update({action: MemoryPressed(action=action) for action in ("MC", "MR", "M+", "M-")})
    buttons.update({
        "π": ConstantPressed(name="π"),
        "e": ConstantPressed(name="e"),
        "−": BinaryOperatorPressed(symbol="-"),
        "=": EqualsPressed(),
        "AC": ClearPressed(),
        "2nd": SecondModeToggled(),
        "Rad": AngleModeToggled(),
        "Deg": AngleModeToggled(),
        "Theme": ThemeToggled(),
    })
    return buttons


BUTTONS = _build_buttons()

KEYS: dict[str, CalculatorEvent] = {
    **{char: DigitPressed(text=char) for char in DIGITS},
    "+": BinaryOperatorPressed(symbol="+"),
    "-": BinaryOperatorPressed(symbol="-"),
    "*": BinaryOperatorPressed(symbol="×"),
    "/": BinaryOperatorPressed(symbol="÷"),
    "Enter": EqualsPressed(),
    "=": EqualsPressed(),
    "Escape": ClearPressed(),
    "Delete": ClearPressed(),
}


def event_for_button(label: str) -> CalculatorEvent:
    """Look up the event a button label stands for."""
    try:
        return BUTTONS[label]
    except KeyError:
        raise ValueError(f"Unknown button: {label}") from None


def event_for_key(key: str) -> CalculatorEvent | None:
    """Look up the event for a keyboard key, or None if the key is not bound."""
    return KEYS.get(key)
