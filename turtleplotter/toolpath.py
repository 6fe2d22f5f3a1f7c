"""Compile point polylines into turtle operation programs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .operations import PEN_DOWN, PEN_UP, Move, Operation, SetColor, SetPosition, Turn
from .state import Color, Position, calc_new_position, normalize_angle, round_half_up
from .svg_loader import PointF, SVGDocument

PALETTE_RGB: Dict[Color, Tuple[int, int, int]] = {
    Color.BLACK: (0, 0, 0),
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 128, 0),
}

NAMED_RGB: Dict[str, Tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "red": (255, 0, 0),
    "maroon": (128, 0, 0),
    "darkred": (139, 0, 0),
    "green": (0, 128, 0),
    "darkgreen": (0, 100, 0),
    "lime": (0, 255, 0),
    "blue": (0, 0, 255),
}


def _parse_rgb(value: str) -> Optional[Tuple[int, int, int]]:
    value = value.strip().lower()
    if value in NAMED_RGB:
        return NAMED_RGB[value]
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            try:
                return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
            except ValueError:
                return None
    return None


def nearest_color(svg_color: str) -> Color:
    """Closest palette color to an SVG color; unknown values map to black."""
    rgb = _parse_rgb(svg_color)
    if rgb is None:
        return Color.BLACK

    def dist(color: Color) -> int:
        ref = PALETTE_RGB[color]
        return sum((a - b) ** 2 for a, b in zip(rgb, ref))

    return min(PALETTE_RGB, key=dist)


@dataclass
class Transform:
    """Map SVG user units onto plotter units.

    SVG's y axis grows downwards while the plotter's grows upwards, hence
    ``flip_y`` defaults to ``True``.
    """

    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    flip_y: bool = True

    def apply(self, x: float, y: float) -> PointF:
        if self.flip_y:
            y = -y
        return x * self.scale + self.offset_x, y * self.scale + self.offset_y


@dataclass
class PenToolpath:
    color: Color
    polylines: List[List[PointF]] = field(default_factory=list)


def generate_toolpaths(
    document: SVGDocument,
    transform: Transform,
    *,
    tolerance: float = 0.5,
) -> List[PenToolpath]:
    """Group transformed polylines by palette color, in order of first use."""

    toolpaths: Dict[Color, PenToolpath] = {}
    for svg_color, pts in document.sampled_polylines(tolerance):
        color = nearest_color(svg_color)
        toolpath = toolpaths.setdefault(color, PenToolpath(color=color))
        toolpath.polylines.append([transform.apply(x, y) for x, y in pts])
    return list(toolpaths.values())


def _shortest_turn(delta: float) -> float:
    delta = delta % 360.0
    if delta > 180.0:
        delta -= 360.0
    return delta


def _snap(points: Sequence[PointF]) -> List[Position]:
    out: List[Position] = []
    for x, y in points:
        p = Position(round_half_up(x), round_half_up(y))
        if not out or out[-1] != p:
            out.append(p)
    return out


def trace_toolpaths(
    toolpaths: Iterable[PenToolpath],
    *,
    start_heading: float = 0.0,
    start_color: Optional[Color] = None,
) -> List[Operation]:
    """Compile toolpaths into operations that redraw them.

    Each polyline becomes a teleport to its first vertex, ``PenDown``, one
    relative turn plus move per vertex and ``PenUp``.  The heading and the
    rounded position are tracked exactly as the executor computes them, so
    every segment is aimed from where the head really is.
    """

    ops: List[Operation] = []
    heading = normalize_angle(start_heading)
    color = start_color
    for toolpath in toolpaths:
        for polyline in toolpath.polylines:
            pts = _snap(polyline)
            if len(pts) < 2:
                continue
            if toolpath.color is not color:
                ops.append(SetColor(toolpath.color))
                color = toolpath.color
            pos = pts[0]
            ops.append(SetPosition(pos))
            ops.append(PEN_DOWN)
            for target in pts[1:]:
                dx = target.x - pos.x
                dy = target.y - pos.y
                if dx == 0 and dy == 0:
                    continue
                delta = _shortest_turn(math.degrees(math.atan2(dy, dx)) - heading)
                if delta != 0.0:
                    ops.append(Turn(delta))
                    heading = normalize_angle(heading + delta)
                distance = math.hypot(dx, dy)
                ops.append(Move(distance))
                pos = calc_new_position(distance, heading, pos)
            ops.append(PEN_UP)
    return ops


def svg_program(
    path: Union[str, Path],
    *,
    transform: Optional[Transform] = None,
    tolerance: float = 0.5,
    start_heading: float = 0.0,
) -> List[Operation]:
    """Load an SVG file and compile its outlines into a program."""
    document = SVGDocument.from_file(path)
    toolpaths = generate_toolpaths(document, transform or Transform(), tolerance=tolerance)
    return trace_toolpaths(toolpaths, start_heading=start_heading)


__all__ = [
    "PALETTE_RGB",
    "Transform",
    "PenToolpath",
    "nearest_color",
    "generate_toolpaths",
    "trace_toolpaths",
    "svg_program",
]
