"""Exceptions raised by the turtle plotter core."""

from __future__ import annotations


class PlotterError(ValueError):
    """Base class for invalid plotter input."""


class InvalidColor(PlotterError):
    """Raised when a color outside the plotter palette is requested."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unsupported color: {value!r}")
        self.value = value


class InvalidRepeatCount(PlotterError):
    """Raised when an operation sequence is repeated a negative number of times."""

    def __init__(self, count: object) -> None:
        super().__init__(f"Repeat count must be a non-negative integer, got {count!r}")
        self.count = count


class InvalidOperation(PlotterError):
    """Raised for malformed operation arguments or unknown operation names."""


__all__ = ["PlotterError", "InvalidColor", "InvalidRepeatCount", "InvalidOperation"]
