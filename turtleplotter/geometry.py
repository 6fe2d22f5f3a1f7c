"""Stroke geometry derived from an event log.

A run produces individual ``line`` events.  For summaries it is more useful
to see them as polylines: consecutive segments of one color where each starts
where the previous one ended.  Nothing here draws anything; these helpers only
measure what a run would have drawn.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .events import Event, LineEvent, MoveEvent, TurnEvent
from .state import Color

XY = Tuple[int, int]


@dataclass
class Stroke:
    """Connected pen-down path in a single color."""

    color: Color
    pts: List[XY] = field(default_factory=list)

    def length(self) -> float:
        return sum(math.hypot(b[0] - a[0], b[1] - a[1]) for a, b in zip(self.pts, self.pts[1:]))

    @property
    def closed(self) -> bool:
        return len(self.pts) > 2 and self.pts[0] == self.pts[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color.value,
            "points": [[x, y] for x, y in self.pts],
        }


def collect_strokes(events: Iterable[Event]) -> List[Stroke]:
    """Join consecutive ``line`` events into strokes.

    Any other event (pen change, teleport, color change, pen-up move) ends the
    current stroke.  Turns do not, since the pen stays on the paper.
    """

    strokes: List[Stroke] = []
    current: Optional[Stroke] = None
    for ev in events:
        if isinstance(ev, LineEvent):
            start = (ev.start.x, ev.start.y)
            end = (ev.end.x, ev.end.y)
            if current is not None and current.color is ev.color and current.pts[-1] == start:
                current.pts.append(end)
            else:
                current = Stroke(color=ev.color, pts=[start, end])
                strokes.append(current)
        elif not isinstance(ev, TurnEvent):
            current = None
    return strokes


def bounding_box(strokes: Iterable[Stroke]) -> Optional[Tuple[XY, XY]]:
    xs: List[int] = []
    ys: List[int] = []
    for st in strokes:
        for x, y in st.pts:
            xs.append(x)
            ys.append(y)
    if not xs or not ys:
        return None
    return (min(xs), min(ys)), (max(xs), max(ys))


def total_length(strokes: Iterable[Stroke]) -> float:
    return sum(st.length() for st in strokes)


def travel_length(events: Iterable[Event]) -> float:
    """Distance covered with the pen up, as requested by the moves."""
    return sum(abs(ev.distance) for ev in events if isinstance(ev, MoveEvent))


__all__ = ["XY", "Stroke", "collect_strokes", "bounding_box", "total_length", "travel_length"]
