"""Text rendering of plotter events.

The core only produces event records.  This module turns them into one human
readable line each, in the wording of the original Russian plotter exercise
(``ru``) or in English (``en``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from .events import (
    ColorChangeEvent,
    Event,
    LineEvent,
    MoveEvent,
    PenChangeEvent,
    PositionSetEvent,
    TurnEvent,
)
from .state import Color, PenState, PlotterState

StatusCallback = Callable[[str], None]

DEFAULT_COLOR_LABELS: Dict[str, Dict[Color, str]] = {
    "ru": {
        Color.BLACK: "чёрный",
        Color.RED: "красный",
        Color.GREEN: "зелёный",
    },
    "en": {
        Color.BLACK: "black",
        Color.RED: "red",
        Color.GREEN: "green",
    },
}

MESSAGES: Dict[str, Dict[str, str]] = {
    "ru": {
        "line": "...Чертим линию из ({x0}, {y0}) в ({x1}, {y1}) используя {color} цвет.",
        "move": "Передвигаем на {distance} от точки ({x0}, {y0})",
        "turn": "Поворачиваем на {by} градусов",
        "pen_up": "Поднимаем каретку",
        "pen_down": "Опускаем каретку",
        "color": "Устанавливаем {color} цвет линии.",
        "position": "Устанавливаем позицию каретки в ({x}, {y}).",
        "state": "Итоговое состояние: позиция ({x}, {y}), угол {heading}, цвет {color}, каретка {pen}",
        "state_up": "поднята",
        "state_down": "опущена",
    },
    "en": {
        "line": "...Drawing a line from ({x0}, {y0}) to ({x1}, {y1}) using {color} color.",
        "move": "Moving {distance} from point ({x0}, {y0})",
        "turn": "Turning by {by} degrees",
        "pen_up": "Raising the pen",
        "pen_down": "Lowering the pen",
        "color": "Setting line color to {color}.",
        "position": "Setting pen position to ({x}, {y}).",
        "state": "Final state: position ({x}, {y}), heading {heading}, color {color}, pen {pen}",
        "state_up": "up",
        "state_down": "down",
    },
}


@dataclass
class RenderOptions:
    locale: str = "ru"
    precision: int = 1
    color_labels: Optional[Dict[Color, str]] = None


class EventRenderer:
    """Format events and states as text lines."""

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        self.options = options or RenderOptions()
        if self.options.locale not in MESSAGES:
            raise ValueError(f"Unknown locale: {self.options.locale!r}")
        if self.options.precision < 0:
            raise ValueError(f"Precision must be non-negative, got {self.options.precision}")
        self.messages = MESSAGES[self.options.locale]
        self.color_labels = dict(DEFAULT_COLOR_LABELS[self.options.locale])
        if self.options.color_labels:
            self.color_labels.update(self.options.color_labels)

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def render(self, event: Event) -> str:
        msg = self.messages
        if isinstance(event, LineEvent):
            return msg["line"].format(
                x0=event.start.x,
                y0=event.start.y,
                x1=event.end.x,
                y1=event.end.y,
                color=self._label(event.color),
            )
        if isinstance(event, MoveEvent):
            return msg["move"].format(distance=self._num(event.distance), x0=event.start.x, y0=event.start.y)
        if isinstance(event, TurnEvent):
            return msg["turn"].format(by=self._num(event.by))
        if isinstance(event, PenChangeEvent):
            return msg["pen_up"] if event.to is PenState.UP else msg["pen_down"]
        if isinstance(event, ColorChangeEvent):
            return msg["color"].format(color=self._label(event.to))
        if isinstance(event, PositionSetEvent):
            return msg["position"].format(x=event.to.x, y=event.to.y)
        raise TypeError(f"Unsupported event: {type(event)!r}")

    def render_all(self, events: Iterable[Event]) -> List[str]:
        return [self.render(ev) for ev in events]

    def render_state(self, state: PlotterState) -> str:
        msg = self.messages
        return msg["state"].format(
            x=state.position.x,
            y=state.position.y,
            heading=self._num(state.heading),
            color=self._label(state.color),
            pen=msg["state_up"] if state.pen is PenState.UP else msg["state_down"],
        )

    def print_events(self, events: Iterable[Event], status_cb: Optional[StatusCallback] = None) -> None:
        """Emit one line per event through ``status_cb`` or ``print``."""
        for line in self.render_all(events):
            if status_cb:
                status_cb(line)
            else:
                print(line)

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------
    def _label(self, color: Color) -> str:
        return self.color_labels.get(color, color.value)

    def _num(self, value: float) -> str:
        return f"{float(value):.{self.options.precision}f}"


__all__ = ["EventRenderer", "RenderOptions", "DEFAULT_COLOR_LABELS", "MESSAGES", "StatusCallback"]
