"""Run operation sequences against a plotter state."""
from __future__ import annotations

from typing import Iterable, Iterator, List, NamedTuple

from .events import Event
from .operations import Operation, apply
from .state import PlotterState


class RunResult(NamedTuple):
    state: PlotterState
    events: List[Event]


class Step(NamedTuple):
    operation: Operation
    state: PlotterState
    events: List[Event]


def steps(initial: PlotterState, operations: Iterable[Operation]) -> Iterator[Step]:
    """Yield the state and events after each operation, in order."""
    state = initial
    for op in operations:
        state, events = apply(op, state)
        yield Step(op, state, events)


def run(initial: PlotterState, operations: Iterable[Operation]) -> RunResult:
    """Fold ``operations`` over ``initial``.

    Returns the final state and the events of every operation in program
    order.  Errors propagate immediately; nothing is returned for a program
    that fails part way through.
    """

    state = initial
    log: List[Event] = []
    for step in steps(initial, operations):
        state = step.state
        log.extend(step.events)
    return RunResult(state, log)


__all__ = ["RunResult", "Step", "run", "steps"]
