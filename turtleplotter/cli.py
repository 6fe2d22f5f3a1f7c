"""Command line entry point: run a plotter program and print its event log."""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, Sequence

from .combinators import reference_program
from .config import AppSettings, PlotterDefaults, SVGImportSettings
from .errors import InvalidColor, InvalidOperation
from .executor import steps
from .operations import Operation, program_from_dict
from .rendering import MESSAGES, EventRenderer, RenderOptions
from .session import PlotterSession
from .state import Color, PenState
from .toolpath import Transform, svg_program


def _color_arg(value: str) -> str:
    try:
        return Color.coerce(value).value
    except InvalidColor as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _pen_arg(value: str) -> str:
    try:
        return PenState.coerce(value).value
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turtleplotter",
        description="Simulate a turtle pen plotter and print what it does.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--program", "-p", dest="program_path", help="JSON program file ({\"operations\": [...]}).")
    source.add_argument("--svg", dest="svg_path", help="SVG file whose outlines are traced as a program.")
    parser.add_argument("--x", type=int, default=0, help="Initial x coordinate.")
    parser.add_argument("--y", type=int, default=0, help="Initial y coordinate.")
    parser.add_argument("--heading", type=float, default=0.0, help="Initial heading in degrees.")
    parser.add_argument("--color", type=_color_arg, default=Color.BLACK.value, help="Initial pen color.")
    parser.add_argument("--pen", type=_pen_arg, default=PenState.UP.value, help="Initial pen state (up/down).")
    parser.add_argument("--locale", choices=sorted(MESSAGES), default="ru", help="Language of the event log.")
    parser.add_argument("--precision", type=int, default=1, help="Decimals for distances and angles.")
    parser.add_argument("--scale", type=float, default=1.0, help="SVG units per plotter unit multiplier.")
    parser.add_argument("--tolerance", type=float, default=0.5, help="Chord length used to sample SVG curves.")
    parser.add_argument("--no-flip-y", dest="flip_y", action="store_false", help="Keep SVG's downward y axis.")
    parser.add_argument("--json", dest="json_output", action="store_true", help="Print events as JSON lines.")
    parser.add_argument("--trace", action="store_true", help="Print the state after every operation.")
    parser.add_argument("--summary", action="store_true", help="Print drawing statistics at the end.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Report session status on stderr.")
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        defaults=PlotterDefaults(x=args.x, y=args.y, heading=args.heading, color=args.color, pen=args.pen),
        render=RenderOptions(locale=args.locale, precision=args.precision),
        svg=SVGImportSettings(tolerance=args.tolerance, scale=args.scale, flip_y=args.flip_y),
        program_path=args.program_path,
        svg_path=args.svg_path,
        json_output=args.json_output,
        trace=args.trace,
        summary=args.summary,
    )


def load_program(settings: AppSettings) -> List[Operation]:
    if settings.program_path:
        with open(settings.program_path, encoding="utf-8") as fh:
            return program_from_dict(json.load(fh))
    if settings.svg_path:
        svg = settings.svg
        return svg_program(
            settings.svg_path,
            transform=Transform(scale=svg.scale, flip_y=svg.flip_y),
            tolerance=svg.tolerance,
            start_heading=settings.defaults.heading,
        )
    return reference_program()


def _dump(data: object) -> str:
    return json.dumps(data, ensure_ascii=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    status_cb = (lambda msg: print(msg, file=sys.stderr)) if args.verbose else None

    try:
        ops = load_program(settings)
        session = PlotterSession(settings.defaults.to_state(), status_cb=status_cb)
        renderer = EventRenderer(settings.render)
        result = session.execute(ops)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if settings.json_output:
        for ev in result.events:
            print(_dump(ev.to_dict()))
        print(_dump({"state": result.state.to_dict()}))
        if settings.summary:
            print(_dump({"summary": session.summary()}))
        return 0

    if settings.trace:
        for step in steps(session.initial_state, ops):
            for ev in step.events:
                print(renderer.render(ev))
            print(f"    {_dump(step.state.to_dict())}")
    else:
        renderer.print_events(result.events)
    print()
    print(renderer.render_state(result.state))
    if settings.summary:
        print()
        print(json.dumps(session.summary(), ensure_ascii=False, indent=2))
    return 0


__all__ = ["build_parser", "settings_from_args", "load_program", "main"]
