"""Screen layout of the content, the legend and the time display."""

from __future__ import annotations

from dataclasses import dataclass, replace

from naviz.viewport import ViewportProjection, ViewportSource, ViewportTarget

PADDING = 0.01
"""Padding around elements."""

PADDING_BETWEEN = 0.1
"""Padding between the content and the legend."""

CONTENT_TARGET = ViewportTarget(
    x=-1.0 + PADDING,
    y=-1.0 + PADDING,
    width=0.8 * 2.0 - 2.0 * PADDING,
    height=2.0 - 2.0 * PADDING,
)
"""Target area for the content."""

LEGEND_TARGET = ViewportTarget(
    x=0.8 * 2.0 - 1.0 + PADDING + PADDING_BETWEEN,
    y=-0.9 + PADDING,
    width=0.2 * 2.0 - 2.0 * PADDING,
    height=1.9 - 2.0 * PADDING,
)
"""Target area for the legend."""

TIME_TARGET = ViewportTarget(
    x=0.8 * 2.0 - 1.0 + PADDING + PADDING_BETWEEN,
    y=-1.0 + PADDING,
    width=0.2 * 2.0 - 2.0 * PADDING,
    height=0.1 - 2.0 * PADDING,
)
"""Target area for the time display."""


@dataclass(frozen=True)
class Layout:
    """Projections for the content, the legend and the time display."""

    content: ViewportProjection
    legend: ViewportProjection
    time: ViewportProjection

    @classmethod
    def create(
        cls,
        screen_size: tuple[int, int],
        content: ViewportSource,
        content_padding_y: float,
        legend_height: float,
        time_height: float,
    ) -> Layout:
        """Lay out the content on the left (about 80%) and legend and time on the right.

        The content is padded by ``content_padding_y`` in its viewport space,
        while its source stays the same.
        """
        content_size = get_size_keep_aspect(
            screen_size,
            (CONTENT_TARGET.width, CONTENT_TARGET.height),
            (content.width, content.height),
        )
        content_projection = shrink_target_by_source_padding(
            ViewportProjection(source=content, target=center_in(CONTENT_TARGET, content_size)),
            content_padding_y,
        )

        legend = _side_projection(
            LEGEND_TARGET, content_projection.target, legend_height, screen_size
        )
        time = _side_projection(TIME_TARGET, content_projection.target, time_height, screen_size)

        return cls(content=content_projection, legend=legend, time=time)


def _side_projection(
    base: ViewportTarget,
    content_target: ViewportTarget,
    height: float,
    screen_size: tuple[int, int],
) -> ViewportProjection:
    target = gobble_space_left_until(base, content_target, 0.0 + PADDING, 0.4)
    width = calculate_width(height, screen_size, (target.width, target.height))
    return ViewportProjection(
        source=ViewportSource(x=0.0, y=0.0, width=width, height=height),
        target=target,
    )


def get_size_keep_aspect(
    screen_size: tuple[int, int],
    max_size: tuple[float, float],
    viewport_size: tuple[float, float],
) -> tuple[float, float]:
    """Largest size within ``max_size`` that keeps the on-screen aspect ratio of the viewport."""
    x = viewport_size[0] / screen_size[0] * 2.0
    y = viewport_size[1] / screen_size[1] * 2.0

    scale_width_fit = max_size[0] / x
    x_width_fit = x * scale_width_fit
    y_width_fit = y * scale_width_fit
    if y_width_fit <= max_size[1]:
        return (x_width_fit, y_width_fit)

    scale_height_fit = max_size[1] / y
    return (x * scale_height_fit, y * scale_height_fit)


def center_in(bounds: ViewportTarget, size: tuple[float, float]) -> ViewportTarget:
    """A target of ``size`` centered in ``bounds``."""
    margin_left = (bounds.width - size[0]) / 2.0
    margin_bottom = (bounds.height - size[1]) / 2.0
    return ViewportTarget(
        x=bounds.x + margin_left,
        y=bounds.y + margin_bottom,
        width=size[0],
        height=size[1],
    )


def shrink_target_by_source_padding(
    projection: ViewportProjection, padding_y: float
) -> ViewportProjection:
    """Shrink the target by ``padding_y`` given in source space, keeping its aspect ratio."""
    source, target = projection.source, projection.target
    px = padding_y / source.width * target.width
    py = px / target.width * target.height
    return ViewportProjection(
        source=source,
        target=ViewportTarget(
            x=target.x + px / 2.0,
            y=target.y + py / 2.0,
            width=target.width - px,
            height=target.height - py,
        ),
    )


def gobble_space_left_until(
    target: ViewportTarget, left: ViewportTarget, min_x: float, ratio: float
) -> ViewportTarget:
    """Grow ``target`` to the left into ``ratio`` of the free space up to ``left`` or ``min_x``.

    The target is never moved to the right.
    """
    left_x = left.x + left.width
    possible_x = ratio * left_x + (1.0 - ratio) * target.x
    new_x = max(possible_x, min_x)
    if new_x < target.x:
        return replace(target, x=new_x, width=target.width + (target.x - new_x))
    return target


def calculate_width(
    height: float, screen_size: tuple[int, int], target_size: tuple[float, float]
) -> float:
    """Source width matching the source ``height`` for a target of ``target_size`` on screen."""
    target_width, target_height = target_size
    return height / screen_size[1] / target_height * target_width * screen_size[0]