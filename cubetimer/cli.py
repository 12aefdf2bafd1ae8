"""Terminal front end: key handling and the main loop."""

from __future__ import annotations

import argparse
import curses

from .app import App, Key
from .ui import AVERAGES_COLOR, HISTORY_COLOR, SCRAMBLE_COLOR, TIMER_COLOR, render_ui

POLL_MS = 50
# Terminals report no key releases; space counts as let go once its
# auto-repeat has stopped for this long.
RELEASE_AFTER = 0.6

_KEYS = {
    ord(" "): Key.SPACE,
    ord("q"): Key.QUIT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
}


def translate_key(code: int) -> Key | None:
    """Map a curses key code to a timer key, or None if it means nothing here."""
    return _KEYS.get(code)


def run(app: App, window) -> None:
    """Draw and handle input until the app asks to exit."""
    window.timeout(POLL_MS)
    last_space: float | None = None
    while not app.exit:
        render_ui(app, window)
        code = window.getch()
        key = translate_key(code) if code != -1 else None
        if key is not None:
            app.on_key_press(key)
            if key is Key.SPACE:
                last_space = app.clock()
        if (
            app.space_pressed
            and last_space is not None
            and app.clock() - last_space >= RELEASE_AFTER
        ):
            app.on_key_release(Key.SPACE)
            last_space = None
        app.tick()


def _init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    curses.init_pair(SCRAMBLE_COLOR, curses.COLOR_BLUE, background)
    curses.init_pair(TIMER_COLOR, curses.COLOR_GREEN, background)
    curses.init_pair(AVERAGES_COLOR, curses.COLOR_MAGENTA, background)
    curses.init_pair(HISTORY_COLOR, curses.COLOR_RED, background)


def _session(screen) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    _init_colors()
    screen.keypad(True)
    run(App(), screen)


def main(argv: list[str] | None = None) -> int:
    """Start the timer in the terminal."""
    parser = argparse.ArgumentParser(
        prog="cubetimer",
        description="Speedcubing timer: space to inspect, space again to start and stop, q to quit.",
    )
    parser.parse_args(argv)
    curses.wrapper(_session)
    return 0