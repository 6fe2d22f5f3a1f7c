import dataclasses

import pytest

from turtleplotter.errors import InvalidColor, InvalidOperation
from turtleplotter.state import (
    Color,
    PenState,
    PlotterState,
    Position,
    calc_new_position,
    init_state,
    normalize_angle,
    round_half_up,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, 0),
        (0.5, 1),
        (-0.5, 0),
        (1.5, 2),
        (2.5, 3),
        (-1.5, -1),
        (-2.5, -2),
        (86.60254037844386, 87),
        (50.00000000000002, 50),
        (-4.263256414560601e-14, 0),
        (0.49999999999999994, 0),
    ],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    ("angle", "expected"),
    [
        (0.0, 0.0),
        (90.0, 90.0),
        (360.0, 0.0),
        (370.0, 10.0),
        (-20.0, 340.0),
        (-360.0, 0.0),
        (720.0, 0.0),
        (-1e-20, 0.0),
    ],
)
def test_normalize_angle(angle: float, expected: float) -> None:
    result = normalize_angle(angle)
    assert result == pytest.approx(expected)
    assert 0.0 <= result < 360.0


def test_calc_new_position_axis_moves():
    origin = Position(0, 0)
    assert calc_new_position(100.0, 0.0, origin) == Position(100, 0)
    assert calc_new_position(100.0, 90.0, origin) == Position(0, 100)
    assert calc_new_position(100.0, 180.0, origin) == Position(-100, 0)
    assert calc_new_position(100.0, 270.0, origin) == Position(0, -100)


def test_calc_new_position_rounds_diagonal():
    assert calc_new_position(100.0, 120.0, Position(100, 0)) == Position(50, 87)
    assert calc_new_position(-10.0, 0.0, Position(5, 5)) == Position(-5, 5)


@pytest.mark.parametrize(
    ("distance", "position"),
    [(1e308, Position(10**308, 0)), (1.0, Position(10**400, 0))],
)
def test_calc_new_position_rejects_overflow(distance: float, position: Position) -> None:
    with pytest.raises(InvalidOperation):
        calc_new_position(distance, 0.0, position)


def test_init_state_defaults():
    state = init_state()
    assert state.position == Position(0, 0)
    assert state.heading == 0.0
    assert state.color is Color.BLACK
    assert state.pen is PenState.UP
    assert not state.pen_down
    assert state == PlotterState()


def test_init_state_explicit_values_are_coerced():
    state = init_state((3, -4), 450.0, "Red", "down")
    assert state.position == Position(3, -4)
    assert state.heading == 90.0
    assert state.color is Color.RED
    assert state.pen is PenState.DOWN
    assert state.pen_down


def test_state_is_immutable():
    state = init_state()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.heading = 10.0  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.position.x = 1  # type: ignore[misc]


def test_state_rejects_unknown_color_and_pen():
    with pytest.raises(InvalidColor):
        init_state(color="blue")
    with pytest.raises(InvalidOperation):
        init_state(pen="sideways")
    with pytest.raises(InvalidOperation):
        init_state(heading=float("nan"))


@pytest.mark.parametrize(
    "value",
    [Position(1, 2), (1, 2), [1, 2], {"x": 1, "y": 2}, (1.0, 2.0)],
)
def test_position_of_accepts_common_shapes(value) -> None:
    pos = Position.of(value)
    assert pos == Position(1, 2)
    assert tuple(pos) == (1, 2)
    assert isinstance(pos.x, int)


@pytest.mark.parametrize("value", [(1.5, 2), (1, 2, 3), "12", {"x": 1}, 5, (True, 0)])
def test_position_of_rejects_invalid(value) -> None:
    with pytest.raises(InvalidOperation):
        Position.of(value)


def test_state_dict_roundtrip():
    state = init_state((10, 10), 45.0, Color.GREEN, PenState.DOWN)
    data = state.to_dict()
    assert data == {
        "position": {"x": 10, "y": 10},
        "heading": 45.0,
        "color": "green",
        "pen": "down",
    }
    assert PlotterState.from_dict(data) == state
