import pytest

from turtleplotter.combinators import polygon, reference_program, square, times, triangle
from turtleplotter.errors import InvalidOperation, InvalidRepeatCount
from turtleplotter.executor import run
from turtleplotter.operations import PEN_DOWN, PEN_UP, Move, SetColor, SetPosition, Turn
from turtleplotter.state import Color, PenState, Position, init_state


def test_times_flattens_in_order():
    ops = [Move(1), Turn(2)]
    assert times(3, ops) == [Move(1), Turn(2), Move(1), Turn(2), Move(1), Turn(2)]
    assert times(1, ops) == ops
    assert times(1, ops) is not ops


def test_times_zero_is_empty():
    assert times(0, [Move(1)]) == []
    assert times(5, []) == []


@pytest.mark.parametrize("n", [-1, -10, 1.5, "2", None, True])
def test_times_rejects_invalid_counts(n) -> None:
    with pytest.raises(InvalidRepeatCount):
        times(n, [Move(1)])


def test_triangle_sequence():
    assert triangle(100.0) == [
        PEN_DOWN,
        Move(100.0),
        Turn(120.0),
        Move(100.0),
        Turn(120.0),
        Move(100.0),
        Turn(120.0),
        PEN_UP,
    ]


def test_square_sequence():
    assert square(80.0) == [PEN_DOWN, *[Move(80.0), Turn(90.0)] * 4, PEN_UP]


def test_polygon_uses_exterior_angle():
    hexagon = polygon(6, 10.0)
    assert len(hexagon) == 2 + 2 * 6
    assert {op for op in hexagon if isinstance(op, Turn)} == {Turn(60.0)}


@pytest.mark.parametrize("sides", [0, 1, 2, -3, 3.0])
def test_polygon_rejects_degenerate_side_counts(sides) -> None:
    with pytest.raises(InvalidOperation):
        polygon(sides, 10.0)


def test_triangle_closes_back_on_start():
    state, events = run(init_state(), triangle(100.0))
    assert state.position == Position(0, 0)
    assert state.heading == 0.0
    assert state.pen is PenState.UP
    assert len(events) == 8


def test_square_closes_back_on_start():
    state, _ = run(init_state((10, 10)), square(80.0))
    assert state.position == Position(10, 10)
    assert state.heading == 0.0


@pytest.mark.parametrize("sides", [3, 4, 5, 6, 8])
def test_polygon_returns_heading_and_stays_close(sides: int) -> None:
    state, _ = run(init_state(), polygon(sides, 50.0))
    assert min(state.heading, 360.0 - state.heading) == pytest.approx(0.0, abs=1e-9)
    assert abs(state.position.x) <= sides // 2
    assert abs(state.position.y) <= sides // 2


def test_reference_program():
    ops = reference_program()
    assert ops[:8] == triangle(100.0)
    assert ops[8:10] == [SetPosition((10, 10)), SetColor(Color.RED)]
    assert ops[10:] == square(80.0)
