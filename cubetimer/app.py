"""Timer state machine, solve history and averages."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from .scramble import generate_scramble
from .state import Idle, Inspection, ReadyToStart, Solved, Solving, TimerState

INSPECTION_SECONDS = 20.0


class Key(Enum):
    """Keys the timer responds to."""

    SPACE = auto()
    QUIT = auto()
    UP = auto()
    DOWN = auto()


@dataclass(frozen=True)
class Solve:
    """One timed solve and the scramble it was done on."""

    duration: float
    scramble: str


class App:
    """The timer: reacts to key presses and releases and records solves."""

    def __init__(self, clock: Callable[[], float] = time.monotonic, rng=None) -> None:
        self.clock = clock
        self._rng = rng
        self.state: TimerState = Idle()
        self.times: list[Solve] = []
        self.space_pressed = False
        self.exit = False
        self.scramble = generate_scramble(rng)
        self.last_solved: float | None = None
        self.history_scroll = 0

    def on_key_press(self, key: Key) -> None:
        """Handle a key going down."""
        match key:
            case Key.QUIT:
                self.exit = True
            case Key.SPACE:
                self.space_pressed = True
                self._advance_on_press()
            case Key.UP:
                if self.history_scroll + 1 < len(self.times):
                    self.history_scroll += 1
            case Key.DOWN:
                if self.history_scroll > 0:
                    self.history_scroll -= 1

    def _advance_on_press(self) -> None:
        now = self.clock()
        match self.state:
            case Idle():
                self.state = Inspection(now)
            case Inspection():
                self.state = ReadyToStart()
            case Solving() as solving:
                elapsed = solving.elapsed(now)
                self.times.append(Solve(elapsed, self.scramble))
                self.last_solved = elapsed
                self.state = Solved(elapsed)

    def on_key_release(self, key: Key) -> None:
        """Handle a key coming up."""
        if key is not Key.SPACE:
            return
        self.space_pressed = False
        match self.state:
            case ReadyToStart():
                self.state = Solving(self.clock())
            case Solved():
                self.scramble = generate_scramble(self._rng)
                self.state = Idle()

    def tick(self) -> None:
        """Start the timer once inspection runs out while space is not held."""
        if isinstance(self.state, Inspection) and not self.space_pressed:
            now = self.clock()
            if self.state.elapsed(now) >= INSPECTION_SECONDS:
                self.state = Solving(now)

    def average(self, n: int) -> float | None:
        """Mean of the last ``n`` solves in seconds, or None if there are fewer."""
        if n < 1:
            raise ValueError("n must be positive")
        if len(self.times) < n:
            return None
        return sum(solve.duration for solve in self.times[-n:]) / n