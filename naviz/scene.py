"""The complete scene: layout and the specs of all visual components."""

from __future__ import annotations

from naviz.atoms import AtomsSpecs, atoms_specs
from naviz.layout import Layout
from naviz.legend import LegendSpecs, legend_specs
from naviz.machine import MachineSpecs, machine_specs
from naviz.state import Config, State
from naviz.text import TextSpec
from naviz.time_display import time_specs
from naviz.viewport import ViewportSource

CONTENT_PADDING_Y = 36.0
"""Padding of the content in its source space."""

LEGEND_HEIGHT = 1024.0
"""Source height of the legend viewport."""

TIME_HEIGHT_FACTOR = 1.2
"""Source height of the time viewport relative to its font size."""


def _layout(config: Config, screen_resolution: tuple[int, int]) -> Layout:
    top_left, bottom_right = config.content_extent
    return Layout.create(
        screen_resolution,
        ViewportSource.from_tl_br(top_left, bottom_right),
        CONTENT_PADDING_Y,
        LEGEND_HEIGHT,
        config.time.font.size * TIME_HEIGHT_FACTOR,
    )


class Scene:
    """The machine, atoms, legend and time display laid out for a screen."""

    def __init__(
        self, config: Config, state: State, screen_resolution: tuple[int, int]
    ) -> None:
        self.screen_resolution = screen_resolution
        self.layout = _layout(config, screen_resolution)
        self.machine: MachineSpecs = machine_specs(config, self.layout.content)
        self.atoms: AtomsSpecs = atoms_specs(config, state, self.layout.content)
        self.legend: LegendSpecs = legend_specs(config, self.layout.legend)
        self.time: TextSpec = time_specs(config, state, self.layout.time)

    def update(self, config: Config, state: State) -> None:
        """Follow a new state; the config is assumed unchanged.

        Parts that depend only on the config keep their specs.
        """
        self.atoms = atoms_specs(config, state, self.layout.content)
        self.time = time_specs(config, state, self.layout.time)

    def update_full(self, config: Config, state: State) -> None:
        """Follow a new state and config, laying out the scene anew."""
        self.layout = _layout(config, self.screen_resolution)
        self.machine = machine_specs(config, self.layout.content)
        self.atoms = atoms_specs(config, state, self.layout.content)
        self.legend = legend_specs(config, self.layout.legend)
        self.time = time_specs(config, state, self.layout.time)

    def update_viewport(self, screen_resolution: tuple[int, int]) -> None:
        """Set the screen resolution; the layout follows on the next full update."""
        self.screen_resolution = screen_resolution