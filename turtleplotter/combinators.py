"""Builders for composite operation sequences."""
from __future__ import annotations

from typing import List, Sequence

from .errors import InvalidOperation, InvalidRepeatCount
from .operations import PEN_DOWN, PEN_UP, Move, Operation, SetColor, SetPosition, Turn
from .state import Color


def times(n: int, ops: Sequence[Operation]) -> List[Operation]:
    """Repeat ``ops`` ``n`` times as one flat list; ``n == 0`` gives ``[]``."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidRepeatCount(n)
    return list(ops) * n


def polygon(sides: int, size: float) -> List[Operation]:
    """Regular polygon with ``sides`` edges of length ``size``.

    The head turns by the exterior angle ``360 / sides`` after every edge, so
    it ends where it started, facing the same way, with the pen lifted.
    """

    if isinstance(sides, bool) or not isinstance(sides, int) or sides < 3:
        raise InvalidOperation(f"A polygon needs at least 3 sides, got {sides!r}")
    return [PEN_DOWN, *times(sides, [Move(size), Turn(360.0 / sides)]), PEN_UP]


def triangle(size: float) -> List[Operation]:
    return polygon(3, size)


def square(size: float) -> List[Operation]:
    return polygon(4, size)


def reference_program() -> List[Operation]:
    """Triangle of side 100, jump to (10, 10), switch to red, square of side 80."""
    return [
        *triangle(100.0),
        SetPosition((10, 10)),
        SetColor(Color.RED),
        *square(80.0),
    ]


__all__ = ["times", "polygon", "triangle", "square", "reference_program"]
