"""Specifications of the machine background: grid, coordinate legend, traps and zones."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from naviz.primitives import CircleSpec, LineSpec, RectangleSpec
from naviz.state import Config, HPosition, VPosition
from naviz.text import Alignment, HAlignment, TextItem, TextSpec, VAlignment
from naviz.viewport import ViewportProjection

LABEL_PADDING = 12.0
"""Padding between the grid and its legend (numbers and axis labels)."""


@dataclass
class MachineSpecs:
    """Everything needed to draw the machine background."""

    lines: list[LineSpec]
    traps: list[CircleSpec]
    labels: TextSpec
    zones: list[RectangleSpec]


def range_f32(start: float, end: float, step: float) -> Iterator[float]:
    """Values from ``start`` to ``end`` (both included) in steps of ``step``.

    A negative span yields only ``start``.
    """
    steps = (end - start) / step
    if math.isinf(steps):
        raise ValueError("range step is too small for the given span")
    count = 0 if math.isnan(steps) or steps <= 0 else int(steps)
    return (start + i * step for i in range(count + 1))


def get_v_alignment(position: VPosition) -> VAlignment:
    """Vertical alignment of labels placed at ``position``."""
    return position.get(VAlignment.BOTTOM, VAlignment.TOP)


def get_h_alignment(position: HPosition) -> HAlignment:
    """Horizontal alignment of labels placed at ``position``."""
    return position.get(HAlignment.RIGHT, HAlignment.LEFT)


def _format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def machine_specs(config: Config, viewport_projection: ViewportProjection) -> MachineSpecs:
    """Build the background specs for ``config`` within the source of ``viewport_projection``."""
    grid = config.machine.grid
    traps = config.machine.traps
    legend = grid.legend
    source = viewport_projection.source

    vp_left = source.left()
    vp_right = source.right()
    vp_top = source.top()
    vp_bottom = source.bottom()
    vp_left_grid = vp_left - math.fmod(vp_left, grid.step[0])
    vp_top_grid = vp_top - math.fmod(vp_top, grid.step[1])
    vp_left_legend = vp_left - math.fmod(vp_left, legend.step[0])
    vp_top_legend = vp_top - math.fmod(vp_top, legend.step[1])

    line_style = dict(
        color=grid.line.color,
        width=grid.line.width,
        segment_length=grid.line.segment_length,
        duty=grid.line.duty,
    )
    lines = [
        LineSpec(start=(x, vp_top), end=(x, vp_bottom), **line_style)
        for x in range_f32(vp_left_grid, vp_right, grid.step[0])
    ]
    lines.extend(
        LineSpec(start=(vp_left, y), end=(vp_right, y), **line_style)
        for y in range_f32(vp_top_grid, vp_bottom, grid.step[1])
    )

    trap_circles = [
        CircleSpec(
            center=(x, y),
            radius=traps.radius,
            radius_inner=traps.radius - traps.line_width,
            color=traps.color,
        )
        for x, y in traps.positions
    ]

    v_pos, h_pos = legend.position
    x_label_y = v_pos.get(vp_top - LABEL_PADDING, vp_bottom + LABEL_PADDING)
    y_label_x = h_pos.get(vp_left - LABEL_PADDING, vp_right + LABEL_PADDING)

    texts: list[TextItem] = [
        (_format_number(x), (x, x_label_y), Alignment(HAlignment.CENTER, get_v_alignment(v_pos)))
        for x in range_f32(vp_left_legend, vp_right, legend.step[0])
    ]
    texts.extend(
        (_format_number(y), (y_label_x, y), Alignment(get_h_alignment(h_pos), VAlignment.CENTER))
        for y in range_f32(vp_top_legend, vp_bottom, legend.step[1])
    )
    texts.append(
        (
            legend.labels[0],
            (
                h_pos.inverse().get(vp_left - LABEL_PADDING, vp_right + LABEL_PADDING),
                v_pos.get(vp_top, vp_bottom),
            ),
            Alignment(get_h_alignment(h_pos.inverse()), VAlignment.CENTER),
        )
    )
    texts.append(
        (
            legend.labels[1],
            (
                h_pos.get(vp_left, vp_right),
                v_pos.inverse().get(vp_top - LABEL_PADDING, vp_bottom + LABEL_PADDING),
            ),
            Alignment(HAlignment.CENTER, get_v_alignment(v_pos.inverse())),
        )
    )

    zones = [
        RectangleSpec(
            start=zone.start,
            size=zone.size,
            color=zone.line.color,
            width=zone.line.width,
            segment_length=zone.line.segment_length,
            duty=zone.line.duty,
        )
        for zone in config.machine.zones
    ]

    return MachineSpecs(
        lines=lines,
        traps=trap_circles,
        labels=TextSpec(
            viewport_projection=viewport_projection,
            font_size=legend.font.size,
            font_family=legend.font.family,
            texts=texts,
            color=legend.font.color,
        ),
        zones=zones,
    )