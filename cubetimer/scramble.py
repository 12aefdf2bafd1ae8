"""Random scramble sequences for a 3x3 cube."""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

FACES = ("U", "D", "F", "B", "L", "R")
MODIFIERS = ("", "^", "2")
SCRAMBLE_LENGTH = 19

_T = TypeVar("_T")


class _Chooser(Protocol):
    def choice(self, seq: Sequence[_T]) -> _T: ...


def generate_scramble(rng: _Chooser | None = None) -> str:
    """Return a scramble of 19 moves where no face is turned twice in a row."""
    chooser = rng if rng is not None else random
    moves: list[str] = []
    last_face = ""
    while len(moves) < SCRAMBLE_LENGTH:
        face = chooser.choice(FACES)
        if face == last_face:
            continue
        moves.append(face + chooser.choice(MODIFIERS))
        last_face = face
    return "".join(moves)