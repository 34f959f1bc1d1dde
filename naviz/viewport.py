"""Viewports mapping content coordinates onto screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field

Matrix = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]


@dataclass(frozen=True)
class ViewportSource:
    """Source coordinates, from ``(x, y)`` at the top-left spanning ``width`` by ``height``."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_point_size(
        cls, start: tuple[float, float], size: tuple[float, float]
    ) -> ViewportSource:
        """Create a source from a start point and a size."""
        return cls(start[0], start[1], size[0], size[1])

    @classmethod
    def from_tl_br(
        cls, top_left: tuple[float, float], bottom_right: tuple[float, float]
    ) -> ViewportSource:
        """Create a source from its top-left and bottom-right corners."""
        return cls(
            top_left[0],
            top_left[1],
            bottom_right[0] - top_left[0],
            bottom_right[1] - top_left[1],
        )

    def left(self) -> float:
        """The minimum x."""
        return self.x

    def right(self) -> float:
        """The maximum x."""
        return self.x + self.width

    def top(self) -> float:
        """The minimum y."""
        return self.y

    def bottom(self) -> float:
        """The maximum y."""
        return self.y + self.height


@dataclass(frozen=True)
class ViewportTarget:
    """Target area in normalized device coordinates; fills the screen by default."""

    x: float = -1.0
    y: float = -1.0
    width: float = 2.0
    height: float = 2.0


@dataclass(frozen=True)
class ViewportProjection:
    """Maps coordinates from ``source`` into ``target``.

    The top of the source lands at the top of the target (greatest device y).
    """

    source: ViewportSource
    target: ViewportTarget = field(default_factory=ViewportTarget)

    def _scale(self) -> tuple[float, float]:
        if self.source.width == 0 or self.source.height == 0:
            raise ValueError("viewport source has zero extent")
        return (
            self.target.width / self.source.width,
            -self.target.height / self.source.height,
        )

    def matrix(self) -> Matrix:
        """The row-major 4x4 projection matrix (z is passed through)."""
        sx, sy = self._scale()
        tx = self.target.x - self.source.left() * sx
        ty = self.target.y - self.source.bottom() * sy
        return (
            (sx, 0.0, 0.0, tx),
            (0.0, sy, 0.0, ty),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    def transform_point(self, point: tuple[float, float]) -> tuple[float, float]:
        """Project a point from source into target coordinates."""
        rows = self.matrix()
        x, y = point
        return (
            rows[0][0] * x + rows[0][1] * y + rows[0][3],
            rows[1][0] * x + rows[1][1] * y + rows[1][3],
        )

    def transform_vector(self, vector: tuple[float, float]) -> tuple[float, float]:
        """Project a direction, ignoring translation."""
        rows = self.matrix()
        x, y = vector
        return (
            rows[0][0] * x + rows[0][1] * y,
            rows[1][0] * x + rows[1][1] * y,
        )