"""Configuration models for the turtle plotter command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .rendering import RenderOptions
from .state import Color, PenState, PlotterState, Position


@dataclass
class PlotterDefaults:
    """Initial plotter state used when a program starts."""

    x: int = 0
    y: int = 0
    heading: float = 0.0
    color: str = Color.BLACK.value
    pen: str = PenState.UP.value

    def to_state(self) -> PlotterState:
        return PlotterState(
            position=Position(self.x, self.y),
            heading=self.heading,
            color=Color.coerce(self.color),
            pen=PenState.coerce(self.pen),
        )


@dataclass
class SVGImportSettings:
    """How SVG outlines are mapped onto plotter coordinates."""

    tolerance: float = 0.5
    scale: float = 1.0
    flip_y: bool = True


@dataclass
class AppSettings:
    """Aggregate settings for one command line invocation."""

    defaults: PlotterDefaults = field(default_factory=PlotterDefaults)
    render: RenderOptions = field(default_factory=RenderOptions)
    svg: SVGImportSettings = field(default_factory=SVGImportSettings)
    program_path: Optional[str] = None
    svg_path: Optional[str] = None
    json_output: bool = False
    trace: bool = False
    summary: bool = False
