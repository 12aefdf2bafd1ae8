"""The phases a solve goes through."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Idle:
    """Waiting for the solver to begin inspecting."""


@dataclass(frozen=True)
class Inspection:
    """Inspection countdown that began at ``start`` (clock seconds)."""

    start: float

    def elapsed(self, now: float) -> float:
        """Seconds of inspection used up at clock time ``now``."""
        return now - self.start


@dataclass(frozen=True)
class ReadyToStart:
    """Space is held; the timer starts when it is let go."""


@dataclass(frozen=True)
class Solving:
    """The timer is running since ``start`` (clock seconds)."""

    start: float

    def elapsed(self, now: float) -> float:
        """Seconds spent solving at clock time ``now``."""
        return now - self.start


@dataclass(frozen=True)
class Solved:
    """The timer has stopped at ``duration`` seconds."""

    duration: float


TimerState = Idle | Inspection | ReadyToStart | Solving | Solved