"""Example script that builds a square spiral program and prints its log."""
from __future__ import annotations

from typing import List

from turtleplotter import EventRenderer, Move, PEN_DOWN, PEN_UP, PlotterSession, SetColor, Turn
from turtleplotter.operations import Operation


def build_spiral(turns: int = 12, step: float = 10.0, angle: float = 90.0) -> List[Operation]:
    ops: List[Operation] = [SetColor("green"), PEN_DOWN]
    for i in range(1, turns + 1):
        ops.append(Move(step * i))
        ops.append(Turn(angle))
    ops.append(PEN_UP)
    return ops


def main() -> None:
    session = PlotterSession(status_cb=print)
    result = session.execute(build_spiral())
    renderer = EventRenderer()
    renderer.print_events(result.events)
    print()
    print(renderer.render_state(result.state))
    print(session.summary())


if __name__ == "__main__":
    main()
