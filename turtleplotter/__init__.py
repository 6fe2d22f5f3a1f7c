"""Top-level package for the turtle plotter simulator.

Programs are plain lists of operations.  :func:`run` folds them over an
initial :class:`PlotterState` and returns the final state together with the
ordered event log, which :class:`EventRenderer` turns into text.
"""

from .state import Color, PenState, Position, PlotterState, init_state
from .events import (
    Event,
    LineEvent,
    MoveEvent,
    TurnEvent,
    PenChangeEvent,
    ColorChangeEvent,
    PositionSetEvent,
)
from .errors import PlotterError, InvalidColor, InvalidRepeatCount, InvalidOperation
from .operations import Move, Turn, PenUp, PenDown, SetColor, SetPosition, PEN_UP, PEN_DOWN, apply
from .combinators import times, polygon, triangle, square, reference_program
from .executor import run, steps, RunResult
from .rendering import EventRenderer, RenderOptions
from .session import PlotterSession

__all__ = [
    "Color",
    "PenState",
    "Position",
    "PlotterState",
    "init_state",
    "Event",
    "LineEvent",
    "MoveEvent",
    "TurnEvent",
    "PenChangeEvent",
    "ColorChangeEvent",
    "PositionSetEvent",
    "PlotterError",
    "InvalidColor",
    "InvalidRepeatCount",
    "InvalidOperation",
    "Move",
    "Turn",
    "PenUp",
    "PenDown",
    "SetColor",
    "SetPosition",
    "PEN_UP",
    "PEN_DOWN",
    "apply",
    "times",
    "polygon",
    "triangle",
    "square",
    "reference_program",
    "run",
    "steps",
    "RunResult",
    "EventRenderer",
    "RenderOptions",
    "PlotterSession",
]
