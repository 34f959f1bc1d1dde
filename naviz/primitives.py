"""Instance specifications of the drawable primitives."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from naviz.state import Color

Point = tuple[float, float]


@dataclass(frozen=True)
class CircleSpec:
    """A filled circle, or a ring when ``radius_inner`` is positive."""

    center: Point
    radius: float
    radius_inner: float
    color: Color


@dataclass(frozen=True)
class LineSpec:
    """A (possibly dashed) line from ``start`` to ``end``."""

    start: Point
    end: Point
    color: Color
    width: float
    segment_length: float
    duty: float


@dataclass(frozen=True)
class RectangleSpec:
    """A rectangle outline given by its top-left point and size."""

    start: Point
    size: tuple[float, float]
    color: Color
    width: float
    segment_length: float
    duty: float


def rectangles_to_lines(rectangles: Iterable[RectangleSpec]) -> list[LineSpec]:
    """Four lines per rectangle, running around it clockwise.

    Each line is extended by half its width so that corners are closed.
    """
    lines: list[LineSpec] = []
    for rect in rectangles:
        x, y = rect.start
        w, h = rect.size
        delta = rect.width / 2.0
        style = dict(
            color=rect.color,
            width=rect.width,
            segment_length=rect.segment_length,
            duty=rect.duty,
        )
        lines.extend(
            (
                LineSpec(start=(x - delta, y), end=(x + w + delta, y), **style),
                LineSpec(start=(x + w, y + h + delta), end=(x + w, y - delta), **style),
                LineSpec(start=(x + w + delta, y + h), end=(x - delta, y + h), **style),
                LineSpec(start=(x, y - delta), end=(x, y + h + delta), **style),
            )
        )
    return lines