"""Stateful driver around the pure executor.

:class:`PlotterSession` keeps the current plotter state and the event log of
every program executed so far, which is what the command line and interactive
scripts work with.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .errors import PlotterError
from .events import EVENT_KINDS, Event
from .executor import RunResult, run
from .geometry import Stroke, bounding_box, collect_strokes, total_length, travel_length
from .operations import Operation
from .rendering import StatusCallback
from .state import PlotterState, init_state


@dataclass
class PlotterSession:
    """Accumulate runs of operation programs."""

    state: PlotterState = field(default_factory=init_state)
    status_cb: Optional[StatusCallback] = None

    def __post_init__(self) -> None:
        self.initial_state = self.state
        self.events: List[Event] = []
        self.op_counts: Counter = Counter()
        self.last_error: Optional[str] = None

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def execute(self, operations: Iterable[Operation]) -> RunResult:
        """Run ``operations`` from the current state.

        The session only changes when the whole program succeeds.
        """

        try:
            ops = list(operations)
            result = run(self.state, ops)
        except PlotterError as exc:
            self.last_error = str(exc)
            self._status(f"Program failed: {exc}")
            raise
        self.state = result.state
        self.events.extend(result.events)
        self.op_counts.update(op.name for op in ops)
        self.last_error = None
        self._status(f"Executed {len(ops)} operations, {len(result.events)} events.")
        return result

    def reset(self, state: Optional[PlotterState] = None) -> None:
        self.state = state if state is not None else self.initial_state
        self.initial_state = self.state
        self.events = []
        self.op_counts = Counter()
        self.last_error = None

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def strokes(self) -> List[Stroke]:
        return collect_strokes(self.events)

    def summary(self) -> Dict[str, Any]:
        strokes = self.strokes()
        bbox = bounding_box(strokes)
        bbox_list = None
        if bbox is not None:
            (x0, y0), (x1, y1) = bbox
            bbox_list = [[x0, y0], [x1, y1]]
        kinds = Counter(ev.kind for ev in self.events)
        return {
            "operations": sum(self.op_counts.values()),
            "events": {kind: kinds.get(kind, 0) for kind in EVENT_KINDS},
            "strokes": len(strokes),
            "closed_strokes": sum(1 for st in strokes if st.closed),
            "drawn_length": total_length(strokes),
            "travel_length": travel_length(self.events),
            "bounding_box": bbox_list,
            "state": self.state.to_dict(),
            "last_error": self.last_error,
        }

    def _status(self, msg: str) -> None:
        if self.status_cb:
            self.status_cb(msg)


__all__ = ["PlotterSession"]
