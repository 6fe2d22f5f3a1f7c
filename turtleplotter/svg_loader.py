"""Utilities for reading SVG outlines as point polylines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple, Union
from xml.etree.ElementTree import ParseError
from xml.parsers.expat import ExpatError

from svgpathtools import Line as SVGLine
from svgpathtools import Path as SVGPathObject
from svgpathtools import svg2paths2

from .errors import InvalidOperation

PointF = Tuple[float, float]


def _stroke_color(attr: Dict[str, str]) -> str:
    style = attr.get("style", "")
    for part in style.split(";"):
        key, _, value = part.partition(":")
        if key.strip() == "stroke" and value.strip():
            return value.strip()
    return attr.get("stroke") or attr.get("fill") or "#000000"


@dataclass
class SVGShape:
    """Single drawable item extracted from the SVG."""

    path: SVGPathObject
    color: str


@dataclass
class SVGDocument:
    """SVG document as a list of stroked shapes."""

    shapes: List[SVGShape] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SVGDocument":
        try:
            paths, attributes, _ = svg2paths2(str(path))
        except (ExpatError, ParseError) as exc:
            raise InvalidOperation(f"Cannot read SVG {path}: {exc}") from exc
        shapes = []
        for path_obj, attr in zip(paths, attributes):
            if len(path_obj) == 0:
                continue
            shapes.append(SVGShape(path=path_obj, color=_stroke_color(attr)))
        return cls(shapes=shapes)

    def sampled_polylines(self, tolerance: float = 0.5) -> List[Tuple[str, List[PointF]]]:
        """Approximate each shape as ``(color, points)`` polylines in document order."""

        polylines: List[Tuple[str, List[PointF]]] = []
        for shape in self.shapes:
            for pts in path_polylines(shape.path, tolerance):
                polylines.append((shape.color, pts))
        return polylines


def path_polylines(path: SVGPathObject, tolerance: float = 0.5) -> List[List[PointF]]:
    """Convert an svgpathtools Path into polylines, one per continuous subpath.

    Straight segments contribute their end points only; curves are sampled
    with chords no longer than ``tolerance``.
    """

    polylines: List[List[PointF]] = []
    current: List[PointF] = []
    for seg in path:
        start = (float(seg.start.real), float(seg.start.imag))
        if not current or math.hypot(current[-1][0] - start[0], current[-1][1] - start[1]) > 1e-9:
            if len(current) >= 2:
                polylines.append(current)
            current = [start]
        if isinstance(seg, SVGLine):
            current.append((float(seg.end.real), float(seg.end.imag)))
            continue
        steps = max(1, int(math.ceil(seg.length() / max(tolerance, 1e-3))))
        for i in range(1, steps + 1):
            point = seg.point(i / steps)
            current.append((float(point.real), float(point.imag)))
    if len(current) >= 2:
        polylines.append(current)
    return polylines


__all__ = ["SVGShape", "SVGDocument", "path_polylines", "PointF"]
