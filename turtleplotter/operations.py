"""Primitive plotter operations.

Every operation is a small frozen dataclass describing *what* to do.
:func:`apply` interprets one operation against a :class:`PlotterState` and
returns the successor state together with the events it produced.  Arguments
are validated when the operation is built, so a constructed operation always
applies cleanly.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Tuple, Union

from .errors import InvalidOperation
from .events import (
    ColorChangeEvent,
    Event,
    LineEvent,
    MoveEvent,
    PenChangeEvent,
    PositionSetEvent,
    TurnEvent,
)
from .state import Color, PenState, PlotterState, Position, calc_new_position, normalize_angle


def _finite(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidOperation(f"{name} must be a finite number, got {value!r}")
    return float(value)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Move:
    """Travel ``distance`` units along the current heading.

    Negative distances move backwards.  With the pen down the move draws a
    line, otherwise it only repositions the head.
    """

    name: ClassVar[str] = "move"

    distance: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "distance", _finite(self.distance, "distance"))


@dataclass(frozen=True)
class Turn:
    """Rotate the heading by ``delta`` degrees (counter-clockwise positive)."""

    name: ClassVar[str] = "turn"

    delta: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "delta", _finite(self.delta, "delta"))


@dataclass(frozen=True)
class PenUp:
    name: ClassVar[str] = "pen_up"


@dataclass(frozen=True)
class PenDown:
    name: ClassVar[str] = "pen_down"


@dataclass(frozen=True)
class SetColor:
    """Switch the pen color; raises :class:`InvalidColor` for colors outside the palette."""

    name: ClassVar[str] = "set_color"

    color: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", Color.coerce(self.color))


@dataclass(frozen=True)
class SetPosition:
    """Teleport the head to ``position``; never draws, whatever the pen state."""

    name: ClassVar[str] = "set_position"

    position: Position

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Position.of(self.position))


Operation = Union[Move, Turn, PenUp, PenDown, SetColor, SetPosition]

PEN_UP = PenUp()
PEN_DOWN = PenDown()


# ---------------------------------------------------------------------------
# Interpretation
# ---------------------------------------------------------------------------


def apply(op: Operation, state: PlotterState) -> Tuple[PlotterState, List[Event]]:
    """Apply ``op`` to ``state`` and return ``(new_state, events)``."""

    if isinstance(op, Move):
        new_pos = calc_new_position(op.distance, state.heading, state.position)
        event: Event
        if state.pen is PenState.DOWN:
            event = LineEvent(state.position, new_pos, state.color)
        else:
            event = MoveEvent(state.position, new_pos, op.distance)
        return replace(state, position=new_pos), [event]
    if isinstance(op, Turn):
        heading = normalize_angle(state.heading + op.delta)
        return replace(state, heading=heading), [TurnEvent(op.delta, heading)]
    if isinstance(op, PenUp):
        return replace(state, pen=PenState.UP), [PenChangeEvent(PenState.UP)]
    if isinstance(op, PenDown):
        return replace(state, pen=PenState.DOWN), [PenChangeEvent(PenState.DOWN)]
    if isinstance(op, SetColor):
        return replace(state, color=op.color), [ColorChangeEvent(op.color)]
    if isinstance(op, SetPosition):
        return replace(state, position=op.position), [PositionSetEvent(op.position)]
    raise TypeError(f"Unsupported operation: {type(op)!r}")


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def operation_to_dict(op: Operation) -> Dict[str, Any]:
    if isinstance(op, Move):
        return {"op": op.name, "distance": op.distance}
    if isinstance(op, Turn):
        return {"op": op.name, "delta": op.delta}
    if isinstance(op, (PenUp, PenDown)):
        return {"op": op.name}
    if isinstance(op, SetColor):
        return {"op": op.name, "color": op.color.value}
    if isinstance(op, SetPosition):
        return {"op": op.name, "position": op.position.to_dict()}
    raise TypeError(f"Unsupported operation: {type(op)!r}")


def operation_from_dict(data: Mapping[str, Any]) -> Operation:
    name = data.get("op")
    try:
        if name == Move.name:
            return Move(data["distance"])
        if name == Turn.name:
            return Turn(data["delta"])
        if name == PenUp.name:
            return PEN_UP
        if name == PenDown.name:
            return PEN_DOWN
        if name == SetColor.name:
            return SetColor(data["color"])
        if name == SetPosition.name:
            return SetPosition(data["position"])
    except KeyError as exc:
        raise InvalidOperation(f"Operation {name!r} is missing field {exc.args[0]!r}") from exc
    raise InvalidOperation(f"Unsupported operation: {name!r}")


def program_to_dict(ops: Iterable[Operation]) -> Dict[str, Any]:
    return {"operations": [operation_to_dict(op) for op in ops]}


def program_from_dict(data: Mapping[str, Any]) -> List[Operation]:
    """Load a program from ``{"operations": [...]}``."""
    if not isinstance(data, Mapping):
        raise InvalidOperation("Program must be an object with an 'operations' list")
    items = data.get("operations")
    if not isinstance(items, list):
        raise InvalidOperation("Program must contain an 'operations' list")
    ops: List[Operation] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise InvalidOperation(f"Operation must be an object, got {item!r}")
        ops.append(operation_from_dict(item))
    return ops


__all__ = [
    "Operation",
    "Move",
    "Turn",
    "PenUp",
    "PenDown",
    "SetColor",
    "SetPosition",
    "PEN_UP",
    "PEN_DOWN",
    "apply",
    "operation_to_dict",
    "operation_from_dict",
    "program_to_dict",
    "program_from_dict",
]
