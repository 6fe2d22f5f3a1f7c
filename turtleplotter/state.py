"""Plotter state model.

A :class:`PlotterState` is an immutable snapshot of the plotting head:
integer position, heading in degrees, pen color and whether the pen touches
the paper.  Operations never modify a state in place; they build a new one
with :func:`dataclasses.replace`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Tuple, Union

from .errors import InvalidColor, InvalidOperation


class Color(str, Enum):
    """Closed palette of pen colors."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"

    @classmethod
    def coerce(cls, value: Union["Color", str]) -> "Color":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidColor(value)


class PenState(str, Enum):
    UP = "up"
    DOWN = "down"

    @classmethod
    def coerce(cls, value: Union["PenState", str]) -> "PenState":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidOperation(f"Unsupported pen state: {value!r}")


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidOperation(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidOperation(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class Position:
    """Integer plotter coordinates."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_int(self.x, "x"))
        object.__setattr__(self, "y", _as_int(self.y, "y"))

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))

    @classmethod
    def of(cls, value: PositionLike) -> "Position":
        """Build a position from a ``Position``, an ``(x, y)`` pair or an ``{"x", "y"}`` mapping."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(value["x"], value["y"])
            except KeyError as exc:
                raise InvalidOperation(f"Position mapping needs 'x' and 'y': {dict(value)!r}") from exc
        try:
            x, y = value  # type: ignore[misc]
        except (TypeError, ValueError) as exc:
            raise InvalidOperation(f"Cannot interpret {value!r} as a position") from exc
        return cls(x, y)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


PositionLike = Union[Position, Tuple[int, int], Mapping[str, int]]


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity.

    ``-0.5`` becomes ``0`` and ``2.5`` becomes ``3``.  Python's ``round``
    rounds ties to even, which would shift some plotted points by one unit.
    """

    base = math.floor(value)
    return int(base) + (1 if value - base >= 0.5 else 0)


def normalize_angle(angle: float) -> float:
    """Fold ``angle`` into ``[0, 360)`` with floored modulo."""
    result = angle % 360.0
    # tiny negative inputs round up to exactly 360.0
    if result >= 360.0:
        return 0.0
    return result


def calc_new_position(distance: float, heading: float, position: Position) -> Position:
    """Position reached by travelling ``distance`` along ``heading`` degrees."""
    rad = math.radians(heading)
    try:
        nx = position.x + distance * math.cos(rad)
        ny = position.y + distance * math.sin(rad)
    except OverflowError:
        nx = ny = math.inf
    if not (math.isfinite(nx) and math.isfinite(ny)):
        raise InvalidOperation(f"Move of {distance!r} from {tuple(position)} leaves the representable plane")
    return Position(round_half_up(nx), round_half_up(ny))


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlotterState:
    """Snapshot of the plotting head."""

    position: Position = field(default_factory=Position)
    heading: float = 0.0
    color: Color = Color.BLACK
    pen: PenState = PenState.UP

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Position.of(self.position))
        heading = self.heading
        if isinstance(heading, bool) or not isinstance(heading, (int, float)) or not math.isfinite(heading):
            raise InvalidOperation(f"Heading must be a finite number, got {heading!r}")
        object.__setattr__(self, "heading", normalize_angle(float(heading)))
        object.__setattr__(self, "color", Color.coerce(self.color))
        object.__setattr__(self, "pen", PenState.coerce(self.pen))

    @property
    def pen_down(self) -> bool:
        return self.pen is PenState.DOWN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position.to_dict(),
            "heading": self.heading,
            "color": self.color.value,
            "pen": self.pen.value,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "PlotterState":
        return PlotterState(
            position=Position.of(data.get("position", (0, 0))),
            heading=float(data.get("heading", 0.0)),
            color=data.get("color", Color.BLACK),
            pen=data.get("pen", PenState.UP),
        )


def init_state(
    position: PositionLike = (0, 0),
    heading: float = 0.0,
    color: Union[Color, str] = Color.BLACK,
    pen: Union[PenState, str] = PenState.UP,
) -> PlotterState:
    """Initial plotter state; defaults to the origin, heading 0, black pen, pen up."""
    return PlotterState(position=Position.of(position), heading=heading, color=color, pen=pen)  # type: ignore[arg-type]


__all__ = [
    "Color",
    "PenState",
    "Position",
    "PositionLike",
    "PlotterState",
    "init_state",
    "round_half_up",
    "normalize_angle",
    "calc_new_position",
]
