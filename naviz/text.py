"""Text specifications and the placement of text on screen."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from naviz.state import Color
from naviz.viewport import ViewportProjection

_log = logging.getLogger(__name__)

_MAX_SCALE_DIFF = 0.001


class HAlignment(Enum):
    """Horizontal alignment of a text relative to its anchor."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlignment(Enum):
    """Vertical alignment of a text relative to its anchor."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Alignment:
    """Horizontal and vertical alignment; centered by default."""

    horizontal: HAlignment = HAlignment.CENTER
    vertical: VAlignment = VAlignment.CENTER


TextItem = tuple[str, tuple[float, float], Alignment]


@dataclass
class TextSpec:
    """Texts to render in a viewport with one font and color.

    Each text is a ``(text, position, alignment)`` triple with its position
    given in the source coordinates of ``viewport_projection``.
    """

    viewport_projection: ViewportProjection
    font_size: float
    font_family: str
    texts: list[TextItem] = field(default_factory=list)
    color: Color = (0, 0, 0, 255)


def get_aligned_position(
    alignment: Alignment,
    position: tuple[float, float],
    width: Callable[[], float],
    height: Callable[[], float],
) -> tuple[float, float]:
    """Top-left corner of an element anchored at ``position`` with ``alignment``.

    ``width`` and ``height`` are called only when the alignment needs them.
    """
    x, y = position
    if alignment.horizontal is HAlignment.CENTER:
        x -= width() / 2.0
    elif alignment.horizontal is HAlignment.RIGHT:
        x -= width()
    if alignment.vertical is VAlignment.CENTER:
        y -= height() / 2.0
    elif alignment.vertical is VAlignment.BOTTOM:
        y -= height()
    return (x, y)


def get_scale(projection: ViewportProjection, screen_resolution: tuple[int, int]) -> float:
    """Screen pixels per source unit, averaged over the x and y directions."""
    canvas_unit_x = projection.transform_vector((1.0, 0.0))[0] / 2.0
    scale_x = canvas_unit_x * screen_resolution[0]
    canvas_unit_y = projection.transform_vector((0.0, 1.0))[1] / 2.0
    scale_y = -canvas_unit_y * screen_resolution[1]

    if abs(scale_x - scale_y) > _MAX_SCALE_DIFF:
        _log.warning("Different scale: %s != %s", scale_x, scale_y)

    return (scale_x + scale_y) / 2.0


def _map(value: float, in_start: float, in_end: float, out_start: float, out_end: float) -> float:
    return out_start + ((out_end - out_start) / (in_end - in_start)) * (value - in_start)


def to_screen_position(
    projection: ViewportProjection,
    position: tuple[float, float],
    screen_resolution: tuple[int, int],
) -> tuple[float, float]:
    """Pixel position (origin at the top-left) of a point in source coordinates."""
    x, y = projection.transform_point(position)
    width, height = screen_resolution
    return (
        _map(x, -1.0, 1.0, 0.0, float(width)),
        _map(y, -1.0, 1.0, float(height), 0.0),
    )