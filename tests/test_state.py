import dataclasses

import pytest

from cubetimer.state import Idle, Inspection, ReadyToStart, Solved, Solving


@pytest.mark.parametrize("cls", [Inspection, Solving])
@pytest.mark.parametrize("start, delta", [(0.0, 0.0), (10.0, 2.5), (1000.0, 20.0)])
def test_elapsed_measures_from_start(cls, start, delta):
    state = cls(start)
    assert state.elapsed(start + delta) == pytest.approx(delta)


def test_solved_keeps_its_duration():
    assert Solved(3.25).duration == 3.25


def test_states_are_immutable():
    state = Inspection(1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.start = 2.0  # type: ignore[misc]
    assert state.start == 1.0
    assert state.elapsed(4.0) == pytest.approx(3.0)


def test_states_compare_by_kind_and_value():
    assert Idle() == Idle()
    assert ReadyToStart() == ReadyToStart()
    assert Solving(1.0) == Solving(1.0)
    assert not Solving(1.0) == Inspection(1.0)
    assert not Solved(1.0) == Solved(2.0)