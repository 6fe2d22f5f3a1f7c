"""Event records emitted by plotter operations.

Events are plain immutable values.  Each one carries a ``kind`` tag that is
also used as the ``"event"`` key of its dictionary form, which is what the
CLI prints with ``--json``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Union

from .errors import InvalidOperation
from .state import Color, PenState, Position


@dataclass(frozen=True)
class LineEvent:
    """A segment was drawn with the pen down."""

    kind: ClassVar[str] = "line"

    start: Position
    end: Position
    color: Color

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event": self.kind,
            "from": self.start.to_dict(),
            "to": self.end.to_dict(),
            "color": self.color.value,
        }


@dataclass(frozen=True)
class MoveEvent:
    """The head travelled with the pen up."""

    kind: ClassVar[str] = "move"

    start: Position
    end: Position
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event": self.kind,
            "from": self.start.to_dict(),
            "to": self.end.to_dict(),
            "distance": self.distance,
        }


@dataclass(frozen=True)
class TurnEvent:
    kind: ClassVar[str] = "turn"

    by: float
    to: float

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.kind, "by": self.by, "to": self.to}


@dataclass(frozen=True)
class PenChangeEvent:
    kind: ClassVar[str] = "pen"

    to: PenState

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.kind, "to": self.to.value}


@dataclass(frozen=True)
class ColorChangeEvent:
    kind: ClassVar[str] = "color"

    to: Color

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.kind, "to": self.to.value}


@dataclass(frozen=True)
class PositionSetEvent:
    """The head was placed at ``to`` without drawing."""

    kind: ClassVar[str] = "position"

    to: Position

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.kind, "to": self.to.to_dict()}


Event = Union[LineEvent, MoveEvent, TurnEvent, PenChangeEvent, ColorChangeEvent, PositionSetEvent]

EVENT_KINDS = (
    LineEvent.kind,
    MoveEvent.kind,
    TurnEvent.kind,
    PenChangeEvent.kind,
    ColorChangeEvent.kind,
    PositionSetEvent.kind,
)


def event_from_dict(data: Mapping[str, Any]) -> Event:
    """Rebuild an event from the output of its ``to_dict`` method."""
    kind = data.get("event")
    try:
        if kind == LineEvent.kind:
            return LineEvent(Position.of(data["from"]), Position.of(data["to"]), Color.coerce(data["color"]))
        if kind == MoveEvent.kind:
            return MoveEvent(Position.of(data["from"]), Position.of(data["to"]), float(data["distance"]))
        if kind == TurnEvent.kind:
            return TurnEvent(float(data["by"]), float(data["to"]))
        if kind == PenChangeEvent.kind:
            return PenChangeEvent(PenState.coerce(data["to"]))
        if kind == ColorChangeEvent.kind:
            return ColorChangeEvent(Color.coerce(data["to"]))
        if kind == PositionSetEvent.kind:
            return PositionSetEvent(Position.of(data["to"]))
    except KeyError as exc:
        raise InvalidOperation(f"Event {kind!r} is missing field {exc.args[0]!r}") from exc
    raise InvalidOperation(f"Unsupported event type: {kind!r}")


__all__ = [
    "Event",
    "EVENT_KINDS",
    "LineEvent",
    "MoveEvent",
    "TurnEvent",
    "PenChangeEvent",
    "ColorChangeEvent",
    "PositionSetEvent",
    "event_from_dict",
]
