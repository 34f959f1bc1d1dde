"""Specifications of the legend: section headings and entries with colored circles."""

from __future__ import annotations

from dataclasses import dataclass

from naviz.primitives import CircleSpec
from naviz.state import Config
from naviz.text import Alignment, HAlignment, TextItem, TextSpec, VAlignment
from naviz.viewport import ViewportProjection


@dataclass
class LegendSpecs:
    """Everything needed to draw the legend."""

    text: TextSpec
    colors: list[CircleSpec]


def legend_specs(config: Config, viewport_projection: ViewportProjection) -> LegendSpecs:
    """Lay out the legend from the top of its viewport.

    Each section is its heading followed by its entries, each separated by
    ``entry_skip``; the next heading follows ``heading_skip`` after the last entry.
    """
    legend = config.legend
    radius = legend.color_circle_radius
    text_x = 2.0 * radius + legend.color_padding
    left_center = Alignment(HAlignment.LEFT, VAlignment.CENTER)

    texts: list[TextItem] = []
    colors: list[CircleSpec] = []
    y = legend.heading_skip
    for section in legend.entries:
        texts.append((section.name, (0.0, y), left_center))
        y += legend.entry_skip

        for entry in section.entries:
            texts.append((entry.text, (text_x, y), left_center))
            if entry.color is not None:
                colors.append(
                    CircleSpec(
                        center=(radius, y),
                        radius=radius,
                        radius_inner=0.0,
                        color=entry.color,
                    )
                )
            y += legend.entry_skip

        y += legend.heading_skip - legend.entry_skip

    text = TextSpec(
        viewport_projection=viewport_projection,
        font_size=legend.font.size,
        font_family=legend.font.family,
        texts=texts,
        color=legend.font.color,
    )
    return LegendSpecs(text=text, colors=colors)