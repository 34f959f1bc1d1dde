"""Text specification of the time display."""

from __future__ import annotations

from naviz.state import Config, State
from naviz.text import Alignment, HAlignment, TextSpec, VAlignment
from naviz.viewport import ViewportProjection


def time_specs(
    config: Config, state: State, viewport_projection: ViewportProjection
) -> TextSpec:
    """The time text, left-aligned and vertically centered in its viewport."""
    font = config.time.font
    return TextSpec(
        viewport_projection=viewport_projection,
        font_size=font.size,
        font_family=font.family,
        texts=[
            (
                state.time,
                (0.0, viewport_projection.source.height / 2.0),
                Alignment(HAlignment.LEFT, VAlignment.CENTER),
            )
        ],
        color=font.color,
    )