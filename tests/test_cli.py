import curses
import random
from unittest import mock

import pytest

from cubetimer.app import App, Key
from cubetimer.cli import main, run, translate_key
from cubetimer.state import Idle, Solving

SPACE = ord(" ")
NOTHING = -1


class FakeClock:
    def __init__(self, now=10.0):
        self.now = now

    def __call__(self):
        return self.now


class FakeScreen:
    def __init__(self, script, clock, step=0.05, height=40, width=120):
        self.script = list(script)
        self.clock = clock
        self.step = step
        self.height = height
        self.width = width
        self.refreshes = 0
        self.poll_ms = None
        self.erase()

    def timeout(self, ms):
        self.poll_ms = ms

    def getch(self):
        self.clock.now += self.step
        return self.script.pop(0) if self.script else ord("q")

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.grid = [[" "] * self.width for _ in range(self.height)]

    def addstr(self, y, x, text, attr=0):
        if not (0 <= y < self.height and 0 <= x + len(text) <= self.width):
            raise curses.error("out of range")
        for i, ch in enumerate(text):
            self.grid[y][x + i] = ch

    def refresh(self):
        self.refreshes += 1

    def text(self):
        return "\n".join("".join(row) for row in self.grid)


def make_app():
    clock = FakeClock()
    return App(clock=clock, rng=random.Random(11)), clock


@pytest.mark.parametrize(
    "code, key",
    [
        (ord(" "), Key.SPACE),
        (ord("q"), Key.QUIT),
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DOWN, Key.DOWN),
    ],
)
def test_translate_key(code, key):
    assert translate_key(code) is key


def test_translate_unknown_key():
    assert translate_key(ord("x")) is None


def test_run_records_a_full_solve():
    app, clock = make_app()
    script = (
        [SPACE] + [NOTHING] * 20
        + [SPACE, SPACE, SPACE] + [NOTHING] * 20
        + [NOTHING] * 40
        + [SPACE] + [NOTHING] * 20
    )
    screen = FakeScreen(script, clock)
    run(app, screen)
    assert app.exit is True
    assert app.state == Idle()
    assert len(app.times) == 1
    assert app.times[0].duration > 0
    assert app.last_solved == app.times[0].duration
    assert app.scramble != app.times[0].scramble
    assert screen.refreshes > 0
    assert "Historial de tiempos" in screen.text()


def test_run_starts_timer_when_inspection_expires():
    app, clock = make_app()
    screen = FakeScreen([SPACE] + [NOTHING] * 450, clock)
    run(app, screen)
    assert isinstance(app.state, Solving)
    assert app.times == []


def test_run_releases_space_after_pause():
    app, clock = make_app()
    screen = FakeScreen([SPACE] + [NOTHING] * 20, clock)
    run(app, screen)
    assert app.space_pressed is False


def test_run_quits_immediately_on_q():
    app, clock = make_app()
    screen = FakeScreen([ord("q")], clock)
    run(app, screen)
    assert app.exit is True
    assert screen.refreshes == 1


def test_main_runs_curses_session():
    with mock.patch("cubetimer.cli.curses.wrapper") as wrapper:
        assert main([]) == 0
    assert wrapper.call_count == 1


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0