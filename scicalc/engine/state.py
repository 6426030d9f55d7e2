"""State, event and effect records for the accumulator engine."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class AngleMode(StrEnum):
    RADIAN = "radian"
    DEGREE = "degree"


class TimerKind(StrEnum):
    ERROR = "error"
    CELEBRATION = "celebration"


class Record(BaseModel):
    """Immutable record; transitions produce copies."""

    model_config = ConfigDict(frozen=True)


class CalculatorState(Record):
    """Everything the calculator knows between two input events."""
    display: str = "0"
    pending_operand: float | None = None
    pending_operator: str | None = None
    entering_new_number: bool = True
    memory: float = 0.0
    angle_mode: AngleMode = AngleMode.RADIAN
    second_mode: bool = False
    error: str = ""
    dark_mode: bool = False
    celebrating: bool = False

    @property
    def has_pending_operation(self) -> bool:
        return self.pending_operand is not None and self.pending_operator is not None


# Input events

class DigitPressed(Record):
    text: str


class ConstantPressed(Record):
    name: Literal["π", "e"]


class BinaryOperatorPressed(Record):
    symbol: str


class UnaryOperatorPressed(Record):
    symbol: str


class EqualsPressed(Record):
    pass


class ClearPressed(Record):
    pass


class MemoryPressed(Record):
    action: Literal["MC", "MR", "M+", "M-"]


class AngleModeToggled(Record):
    pass


class SecondModeToggled(Record):
    pass


class ThemeToggled(Record):
    pass


# Host events

class ErrorExpired(Record):
    pass


class CelebrationExpired(Record):
    pass


class PreferencesLoaded(Record):
    memory: float
    dark_mode: bool


CalculatorEvent = (
    DigitPressed
    | ConstantPressed
    | BinaryOperatorPressed
    | UnaryOperatorPressed
    | EqualsPressed
    | ClearPressed
    | MemoryPressed
    | AngleModeToggled
    | SecondModeToggled
    | ThemeToggled
    | ErrorExpired
    | CelebrationExpired
    | PreferencesLoaded
)


# Effects requested by a transition; the host carries them out

class StartTimer(Record):
    timer: TimerKind
    delay: float


class SavePreferences(Record):
    memory: float
    dark_mode: bool


Effect = StartTimer | SavePreferences


class Transition(Record):
    state: CalculatorState
    effects: tuple[Effect, ...] = ()
