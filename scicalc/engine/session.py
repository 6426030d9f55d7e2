"""Session host: owns the current state and carries out transition effects."""

import logging
from collections.abc import Callable

from ..storage import PersistedPreferences, StateStore
from .keymap import event_for_button, event_for_key
from .reducer import reduce
from .state import (
    CalculatorEvent,
    CalculatorState,
    CelebrationExpired,
    ErrorExpired,
    PreferencesLoaded,
    SavePreferences,
    StartTimer,
    TimerKind,
)

logger = logging.getLogger("scicalc.session")

Cancel = Callable[[], None]
Scheduler = Callable[[float, Callable[[], None]], Cancel]
Listener = Callable[[CalculatorState], None]

TIMER_EVENTS: dict[TimerKind, CalculatorEvent] = {
    TimerKind.ERROR: ErrorExpired(),
    TimerKind.CELEBRATION: CelebrationExpired(),
}


class ManualScheduler:
    """Scheduler driven by hand; time only moves when ``advance`` is called."""

    def __init__(self):
        self.now = 0.0
        self._pending: list[tuple[float, int, Callable[[], None]]] = []
        self._next_id = 0

    def __call__(self, delay: float, callback: Callable[[], None]) -> Cancel:
        timer_id = self._next_id
        self._next_id += 1
        self._pending.append((self.now + delay, timer_id, callback))

        def cancel() -> None:
            self._pending = [entry for entry in self._pending if entry[1] != timer_id]

        return cancel

    @property
    def pending(self) -> int:
        return len(self._pending)

    def advance(self, seconds: float) -> None:
        """Move time forward, firing due callbacks in order."""
        deadline = self.now + seconds
        while self._pending:
            due = min(self._pending, key=lambda entry: (entry[0], entry[1]))
            if due[0] > deadline:
                break
            self._pending.remove(due)
            self.now = due[0]
            due[2]()
        self.now = deadline


class CalculatorSession:
    """A live calculator: state plus the timers and storage it drives."""

    def __init__(self, store: StateStore | None = None, schedule: Scheduler | None = None):
        self.state = CalculatorState()
        self.store = store
        self.schedule = schedule
        self._timers: dict[TimerKind, Cancel] = {}
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with the new state after every event."""
        self._listeners.append(listener)

    def load_preferences(self) -> None:
        """Adopt persisted memory and theme, if the store has any."""
        if self.store is None:
            return
        saved = self.store.load()
        if saved is not None:
            logger.info(f"Loaded calculator state from {self.store.path}")
            self.dispatch(PreferencesLoaded(memory=saved.memory, dark_mode=saved.dark_mode))

    def dispatch(self, event: CalculatorEvent) -> CalculatorState:
        """Reduce one event, run its effects and notify listeners."""
        transition = reduce(self.state, event)
        self.state = transition.state
        for effect in transition.effects:
            if isinstance(effect, StartTimer):
                self._start_timer(effect)
            elif isinstance(effect, SavePreferences):
                self._save(effect)
        for listener in self._listeners:
            listener(self.state)
        return self.state

    def press(self, label: str) -> CalculatorState:
        """Press a button by its label, e.g. ``"7"``, ``"÷"`` or ``"MR"``."""
        return self.dispatch(event_for_button(label))

    def press_key(self, key: str) -> CalculatorState:
        """Feed a keyboard key; unbound keys leave the state alone."""
        event = event_for_key(key)
        if event is None:
            return self.state
        return self.dispatch(event)

    def close(self) -> None:
        """Cancel any armed timers."""
        for cancel in self._timers.values():
            cancel()
        self._timers.clear()

    def _start_timer(self, effect: StartTimer) -> None:
        if effect.timer == TimerKind.ERROR:
            logger.debug(f"Calculator error: {self.state.error}")
        if self.schedule is None:
            return
        previous = self._timers.pop(effect.timer, None)
        if previous is not None:
            previous()

        def expire() -> None:
            self._timers.pop(effect.timer, None)
            self.dispatch(TIMER_EVENTS[effect.timer])

        self._timers[effect.timer] = self.schedule(effect.delay, expire)

    def _save(self, effect: SavePreferences) -> None:
        if self.store is None:
            return
        self.store.save(PersistedPreferences(memory=effect.memory, dark_mode=effect.dark_mode))
