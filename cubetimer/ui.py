"""Text for the timer screen and drawing it on a curses window."""

from __future__ import annotations

import curses
from itertools import islice
from typing import TYPE_CHECKING

from .app import INSPECTION_SECONDS
from .state import Idle, Inspection, ReadyToStart, Solved, Solving

if TYPE_CHECKING:
    from .app import App

SCRAMBLE_COLOR = 1
TIMER_COLOR = 2
AVERAGES_COLOR = 3
HISTORY_COLOR = 4

AVERAGE_SIZES = (5, 12, 25, 50)
HISTORY_VISIBLE = 19
SCRAMBLE_HEIGHT = 6
TIMER_HEIGHT = 10
AVERAGES_WIDTH = 80
HISTORY_MIN_WIDTH = 30

_GLYPHS = {
    "0": (" _ ", "| |", "|_|"),
    "1": ("   ", "  |", "  |"),
    "2": (" _ ", " _|", "|_ "),
    "3": (" _ ", " _|", " _|"),
    "4": ("   ", "|_|", "  |"),
    "5": (" _ ", "|_ ", " _|"),
    "6": (" _ ", "|_ ", "|_|"),
    "7": (" _ ", "  |", "  |"),
    "8": (" _ ", "|_|", "|_|"),
    "9": (" _ ", "|_|", " _|"),
    ".": (" ", " ", "."),
    ":": (" ", ".", "."),
    "-": ("   ", " _ ", "   "),
    "*": ("   ", "\\|/", "/|\\"),
    " ": ("  ", "  ", "  "),
}


def big_text(text: str) -> list[str]:
    """Render text in a three-row font; text the font cannot draw is returned as one line."""
    if not text or any(ch not in _GLYPHS for ch in text):
        return [text]
    return ["".join(_GLYPHS[ch][row] for ch in text) for row in range(3)]


def timer_text(app: App) -> str:
    """The text the big timer shows for the app's current state."""
    now = app.clock()
    match app.state:
        case Idle():
            return "00:00" if app.last_solved is None else f"{app.last_solved:.3f}"
        case Inspection() as inspection:
            remaining = max(INSPECTION_SECONDS - inspection.elapsed(now), 0.0)
            return f"-{remaining:.1f}"
        case ReadyToStart():
            return "***"
        case Solving() as solving:
            return f"{solving.elapsed(now):.3f}"
        case Solved(duration=duration):
            return f"{duration:.3f}"
    raise TypeError(f"unknown timer state: {app.state!r}")


def format_average(value: float | None) -> str:
    """Three decimals, or ``--`` when there is no average yet."""
    return "--" if value is None else f"{value:.3f}"


def averages_lines(app: App) -> list[str]:
    """One line per average size: Ao5, Ao12, Ao25 and Ao50."""
    return [f"Ao{n}: {format_average(app.average(n))}" for n in AVERAGE_SIZES]


def history_lines(app: App, visible: int = HISTORY_VISIBLE) -> list[tuple[str, str]]:
    """Newest solves first, from the scroll position on, as (label, scramble) pairs."""
    total = len(app.times)
    scroll = app.history_scroll
    shown = islice(reversed(app.times), scroll, scroll + visible)
    return [
        (f"{total - scroll - i}: {solve.duration:.3f}s - ", solve.scramble)
        for i, solve in enumerate(shown)
    ]


def _attr(pair: int, bold: bool = True) -> int:
    style = curses.A_BOLD if bold else curses.A_NORMAL
    try:
        return curses.color_pair(pair) | style
    except curses.error:
        return style


def _put(window, y: int, x: int, text: str, limit: int, attr: int = 0) -> None:
    text = text[: max(limit, 0)]
    if not text:
        return
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _draw_box(window, y: int, x: int, height: int, width: int, title: str) -> bool:
    if height < 2 or width < 2:
        return False
    edge = "+" + "-" * (width - 2) + "+"
    _put(window, y, x, edge, width)
    _put(window, y, x + 1, title, width - 2)
    for row in range(y + 1, y + height - 1):
        _put(window, row, x, "|", 1)
        _put(window, row, x + width - 1, "|", 1)
    _put(window, y + height - 1, x, edge, width)
    return True


def _draw_panel(window, y, x, height, width, title, lines, attr) -> None:
    if not _draw_box(window, y, x, height, width, title):
        return
    for row, line in enumerate(lines[: height - 2]):
        _put(window, y + 1 + row, x + 1, line, width - 2, attr)


def _draw_history(window, app: App, y: int, x: int, height: int, width: int) -> None:
    if not _draw_box(window, y, x, height, width, "Historial de tiempos"):
        return
    inner = width - 2
    scramble_attr = _attr(HISTORY_COLOR, bold=False)
    for row, (label, scramble) in enumerate(history_lines(app)[: height - 2]):
        _put(window, y + 1 + row, x + 1, label, inner)
        _put(window, y + 1 + row, x + 1 + len(label), scramble, inner - len(label), scramble_attr)
    total = len(app.times)
    if total > HISTORY_VISIBLE and height > 2:
        track = height - 2
        thumb = app.history_scroll * (track - 1) // (total - 1)
        _put(window, y + 1 + thumb, x + width - 1, "#", 1)


def render_ui(app: App, window) -> None:
    """Draw the scramble, timer, averages and history on ``window``."""
    height, width = window.getmaxyx()
    window.erase()
    top, left = 1, 1
    inner_w = max(width - 2, 0)
    inner_h = max(height - 2, 0)
    scramble_h = min(SCRAMBLE_HEIGHT, inner_h)
    timer_h = min(TIMER_HEIGHT, inner_h - scramble_h)
    rest_h = inner_h - scramble_h - timer_h

    _draw_panel(
        window, top, left, scramble_h, inner_w, "Scramble",
        big_text(app.scramble), _attr(SCRAMBLE_COLOR),
    )

    digits = big_text(timer_text(app))
    pad = max((timer_h - 2 - len(digits)) // 2, 0)
    centered = [""] * pad + [line.center(max(inner_w - 2, 0)) for line in digits]
    _draw_panel(
        window, top + scramble_h, left, timer_h, inner_w, "Timer",
        centered, _attr(TIMER_COLOR),
    )

    bottom = top + scramble_h + timer_h
    averages_w = min(AVERAGES_WIDTH, max(inner_w - HISTORY_MIN_WIDTH, 0))
    _draw_panel(
        window, bottom, left, rest_h, averages_w, "Promedios",
        averages_lines(app), _attr(AVERAGES_COLOR),
    )
    _draw_history(window, app, bottom, left + averages_w, rest_h, inner_w - averages_w)
    window.refresh()