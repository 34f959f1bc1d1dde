"""Static configuration and dynamic state of a visualization."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TypeVar

Color = tuple[int, int, int, int]
Position = tuple[float, float]
Size = tuple[float, float]
Extent = tuple[Position, Position]

_T = TypeVar("_T")


class VPosition(Enum):
    """A vertical position."""

    TOP = "top"
    BOTTOM = "bottom"

    def get(self, top: _T, bottom: _T) -> _T:
        """Pick the value matching this position."""
        return top if self is VPosition.TOP else bottom

    def inverse(self) -> VPosition:
        """The opposite position."""
        return VPosition.BOTTOM if self is VPosition.TOP else VPosition.TOP


class HPosition(Enum):
    """A horizontal position."""

    LEFT = "left"
    RIGHT = "right"

    def get(self, left: _T, right: _T) -> _T:
        """Pick the value matching this position."""
        return left if self is HPosition.LEFT else right

    def inverse(self) -> HPosition:
        """The opposite position."""
        return HPosition.RIGHT if self is HPosition.LEFT else HPosition.LEFT


@dataclass(frozen=True)
class LineConfig:
    """A (possibly dashed) line."""

    width: float
    segment_length: float
    duty: float
    color: Color


@dataclass
class FontConfig:
    """Font size, color and family of a text."""

    size: float
    color: Color
    family: str


@dataclass
class GridLegendConfig:
    """The coordinate labels at the sides of the grid."""

    step: Size
    font: FontConfig
    labels: tuple[str, str]
    position: tuple[VPosition, HPosition]


@dataclass
class GridConfig:
    """The background coordinate grid."""

    step: Size
    line: LineConfig
    legend: GridLegendConfig


@dataclass
class TrapConfig:
    """The static traps of the machine."""

    positions: list[Position]
    radius: float
    line_width: float
    color: Color


@dataclass(frozen=True)
class ZoneConfig:
    """A rectangular zone given by its top-left point and size."""

    start: Position
    size: Size
    line: LineConfig


@dataclass
class MachineConfig:
    """The machine background: grid, traps and zones."""

    grid: GridConfig
    traps: TrapConfig
    zones: list[ZoneConfig] = field(default_factory=list)


@dataclass
class AtomsConfig:
    """How atoms are drawn."""

    shuttle: LineConfig
    label: FontConfig


@dataclass
class LegendEntry:
    """A legend entry; a color of ``None`` draws no circle."""

    text: str
    color: Optional[Color] = None


@dataclass
class LegendSection:
    """A legend section with its heading and entries."""

    name: str
    entries: list[LegendEntry] = field(default_factory=list)


@dataclass
class LegendConfig:
    """The legend: font, spacing and entries."""

    font: FontConfig
    heading_skip: float
    entry_skip: float
    color_circle_radius: float
    color_padding: float
    entries: list[LegendSection] = field(default_factory=list)


@dataclass
class TimeConfig:
    """The time display."""

    font: FontConfig


@dataclass
class Config:
    """Static configuration that does not usually change."""

    machine: MachineConfig
    atoms: AtomsConfig
    legend: LegendConfig
    time: TimeConfig
    content_extent: Extent

    @classmethod
    def example(cls) -> Config:
        """An example configuration."""
        font_family = "Fira Mono"
        solid = dict(width=1.0, segment_length=0.0, duty=1.0)
        blue: Color = (0, 122, 255, 255)
        orange: Color = (255, 122, 0, 255)

        ys = (
            [y * 17.0 for y in range(2)]
            + [y * 17.0 + 38.0 for y in range(3)]
            + [y * 17.0 + 85.0 for y in range(2)]
        )
        trap_positions = [(x * 14.0, y) for x in range(8) for y in ys]

        return cls(
            machine=MachineConfig(
                grid=GridConfig(
                    step=(20.0, 20.0),
                    line=LineConfig(color=(127, 127, 127, 255), **solid),
                    legend=GridLegendConfig(
                        step=(40.0, 40.0),
                        font=FontConfig(12.0, (16, 16, 16, 255), font_family),
                        labels=("x", "y"),
                        position=(VPosition.BOTTOM, HPosition.LEFT),
                    ),
                ),
                traps=TrapConfig(
                    positions=trap_positions,
                    radius=3.0,
                    line_width=0.5,
                    color=(100, 100, 130, 255),
                ),
                zones=[
                    ZoneConfig((-10.0, -10.0), (120.0, 36.0), LineConfig(color=blue, **solid)),
                    ZoneConfig((-10.0, 30.0), (120.0, 46.0), LineConfig(color=orange, **solid)),
                    ZoneConfig((-10.0, 80.0), (120.0, 36.0), LineConfig(color=blue, **solid)),
                ],
            ),
            atoms=AtomsConfig(
                shuttle=LineConfig(
                    width=1.0, segment_length=10.0, duty=0.5, color=(180, 180, 180, 255)
                ),
                label=FontConfig(5.0, (0, 0, 0, 255), font_family),
            ),
            legend=LegendConfig(
                font=FontConfig(32.0, (0, 0, 0, 255), font_family),
                heading_skip=80.0,
                entry_skip=64.0,
                color_circle_radius=16.0,
                color_padding=8.0,
                entries=[
                    LegendSection(
                        "Zones",
                        [
                            LegendEntry("Top", blue),
                            LegendEntry("Middle", orange),
                            LegendEntry("Bottom", blue),
                        ],
                    ),
                    LegendSection("Atoms", [LegendEntry("Atom", (255, 128, 32, 255))]),
                    LegendSection("Foo", [LegendEntry("Bar", None)]),
                ],
            ),
            time=TimeConfig(font=FontConfig(48.0, (0, 0, 0, 255), font_family)),
            content_extent=((0.0, 0.0), (100.0, 120.0)),
        )


@dataclass
class AtomState:
    """A single atom at one point in time."""

    position: Position
    size: float
    color: Color
    shuttle: bool
    label: str


@dataclass
class State:
    """Dynamic state that changes often."""

    atoms: list[AtomState] = field(default_factory=list)
    time: str = ""

    @classmethod
    def example(cls) -> State:
        """An example state."""
        atoms = []
        for idx in range(17):
            i = float(idx)
            atoms.append(
                AtomState(
                    position=(i * 2647.0 % 97.0, i * 6373.0 % 113.0),
                    size=3.0,
                    color=(255, 128, 32, 255),
                    shuttle=i * 5407.0 % 7.0 > 3.5,
                    label=str(idx),
                )
            )
        return cls(atoms=atoms, time="Time: 42 us")