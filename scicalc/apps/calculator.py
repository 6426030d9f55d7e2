"""
Scientific calculator app.
Renders the accumulator engine's state and feeds it button presses and
mirrored keyboard input.
"""

import logging
from collections.abc import Callable

from textual import events, on
from textual.app import ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches
from textual.reactive import var
from textual.widgets import Button, Footer, Header, Static

from ..core.base import AppConfig, BaseTextualApp, StatusWidget
from ..engine.session import CalculatorSession, Cancel
from ..engine.state import AngleMode, CalculatorState
from ..storage import StateStore

logger = logging.getLogger("scicalc.apps.calculator")

CELEBRATION_TEXT = "🎉 🎊  99 & 33!  🎊 🎉"

# Textual key names that differ from the keyboard names the engine expects
TEXTUAL_KEYS = {
    "enter": "Enter",
    "escape": "Escape",
    "delete": "Delete",
}

# (label, widget id, css classes), five buttons per row
KEYPAD: list[list[tuple[str, str, str]]] = [
    [("MC", "mc", "memory"), ("MR", "mr", "memory"), ("M+", "m-plus", "memory"),
     ("M-", "m-minus", "memory"), ("AC", "ac", "clear")],
    [("2nd", "second", "function"), ("x²", "square", "function"), ("x³", "cube", "function"),
     ("√", "sqrt", "function"), ("∛", "cbrt", "function")],
    [("sin", "sin", "function"), ("cos", "cos", "function"), ("tan", "tan", "function"),
     ("ln", "ln", "function"), ("log", "log", "function")],
    [("sinh", "sinh", "function"), ("cosh", "cosh", "function"), ("tanh", "tanh", "function"),
     ("x!", "factorial", "function"), ("Theme", "theme", "function")],
    [("7", "number-7", "number"), ("8", "number-8", "number"), ("9", "number-9", "number"),
     ("÷", "divide", "operator"), ("π", "pi", "number")],
    [("4", "number-4", "number"), ("5", "number-5", "number"), ("6", "number-6", "number"),
     ("×", "multiply", "operator"), ("e", "euler", "number")],
    [("1", "number-1", "number"), ("2", "number-2", "number"), ("3", "number-3", "number"),
     ("−", "minus", "operator"), ("Rad", "angle", "function")],
    [("0", "number-0", "number"), (".", "point", "number"), ("+", "plus", "operator"),
     ("=", "equals", "equals")],
]


class KeypadButton(Button, can_focus=False):
    """Calculator key; never takes focus so Enter always means equals."""


class CalculatorApp(BaseTextualApp):
    """Scientific calculator with memory, angle modes and keyboard support."""

    APP_CONFIG = AppConfig(
        name="calculator",
        description="Scientific calculator with memory register and persisted preferences",
        version="0.1.0",
        tags=["calculator", "math", "scientific"],
    )

    TITLE = "Scientific Calculator"

    CSS = """
    Screen {
        overflow: auto;
    }

    #calculator {
        margin: 1 2;
        min-width: 40;
        height: auto;
    }

    #display {
        height: 3;
        padding: 0 1;
        background: $panel;
        color: $text;
        content-align: right middle;
        text-style: bold;
    }

    .status-widget {
        height: 1;
        padding: 0 1;
    }

    .status-error {
        color: $error;
    }

    .status-success {
        color: $success;
        text-align: center;
    }

    #keypad {
        layout: grid;
        grid-size: 5;
        grid-gutter: 1 1;
        grid-columns: 1fr;
        grid-rows: 3;
        height: auto;
        margin-top: 1;
    }

    KeypadButton {
        width: 100%;
        min-width: 6;
    }

    .function, .memory {
        background: $secondary;
    }

    .operator {
        background: $warning;
    }

    .clear {
        background: $error;
    }

    .equals {
        background: $primary;
    }

    #number-0 {
        column-span: 2;
    }

    #second.-active {
        text-style: reverse;
    }
    """

    # Reactive attributes mirrored from the engine state
    display_text = var("0")
    error_text = var("")
    celebrating = var(False)
    angle_mode = var(AngleMode.RADIAN)
    second_mode = var(False)
    dark_mode = var(False)

    def __init__(self, store: StateStore | None = None, **kwargs):
        super().__init__(**kwargs)
        self.session = CalculatorSession(store=store, schedule=self._schedule)
        self.session.subscribe(self._sync)

    def _schedule(self, delay: float, callback: Callable[[], None]) -> Cancel:
        """Arm a one-shot Textual timer; returns its canceller."""
        return self.set_timer(delay, callback).stop

    def _sync(self, state: CalculatorState) -> None:
        """Copy engine state onto the reactive attributes."""
        self.display_text = state.display
        self.error_text = state.error
        self.celebrating = state.celebrating
        self.angle_mode = state.angle_mode
        self.second_mode = state.second_mode
        self.dark_mode = state.dark_mode

    def compose(self) -> ComposeResult:
        """Display, banners and the keypad grid."""
        yield Header()
        with Container(id="calculator"):
            yield Static("0", id="display")
            yield StatusWidget(id="error")
            yield StatusWidget(id="celebration")
            with Container(id="keypad"):
                for row in KEYPAD:
                    for label, button_id, classes in row:
                        yield KeypadButton(label, id=button_id, name=label, classes=classes)
        yield Footer()

    def on_mount(self) -> None:
        self.session.load_preferences()
        self._sync(self.session.state)
        self.watch_dark_mode(self.dark_mode)

    def watch_display_text(self, value: str) -> None:
        """Update the display when the value changes."""
        try:
            self.query_one("#display", Static).update(value)
        except NoMatches:
            # Widget not yet mounted during initialization
            pass

    def watch_error_text(self, message: str) -> None:
        try:
            self.query_one("#error", StatusWidget).update_status(message, "error")
        except NoMatches:
            pass

    def watch_celebrating(self, celebrating: bool) -> None:
        try:
            banner = self.query_one("#celebration", StatusWidget)
        except NoMatches:
            return
        banner.update_status(CELEBRATION_TEXT if celebrating else "", "success")

    def watch_angle_mode(self, mode: AngleMode) -> None:
        try:
            self.query_one("#angle", Button).label = "Rad" if mode == AngleMode.RADIAN else "Deg"
        except NoMatches:
            pass

    def watch_second_mode(self, active: bool) -> None:
        try:
            self.query_one("#second", Button).set_class(active, "-active")
        except NoMatches:
            pass

    def watch_dark_mode(self, dark: bool) -> None:
        self.theme = "textual-dark" if dark else "textual-light"

    @on(Button.Pressed)
    def keypad_pressed(self, event: Button.Pressed) -> None:
        """Pressed any keypad button."""
        assert event.button.name is not None
        self.session.press(event.button.name)

    def on_key(self, event: events.Key) -> None:
        """Mirror the keyboard onto the keypad."""
        key = TEXTUAL_KEYS.get(event.key, event.character or "")
        if key:
            self.session.press_key(key)


if __name__ == "__main__":
    app = CalculatorApp()
    app.run()
