"""Specifications for drawing atoms: circles, shuttle lines and labels."""

from __future__ import annotations

from dataclasses import dataclass

from naviz.primitives import CircleSpec, LineSpec
from naviz.state import Config, State
from naviz.text import Alignment, HAlignment, TextSpec, VAlignment
from naviz.viewport import ViewportProjection


@dataclass
class AtomsSpecs:
    """Everything needed to draw the atoms."""

    circles: list[CircleSpec]
    shuttles: list[LineSpec]
    labels: TextSpec


def atoms_specs(
    config: Config, state: State, viewport_projection: ViewportProjection
) -> AtomsSpecs:
    """Build the atom specs; shuttling atoms get a crosshair across the whole viewport."""
    shuttle = config.atoms.shuttle
    label = config.atoms.label
    source = viewport_projection.source

    circles = [
        CircleSpec(center=atom.position, radius=atom.size, radius_inner=0.0, color=atom.color)
        for atom in state.atoms
    ]

    style = dict(
        color=shuttle.color,
        width=shuttle.width,
        segment_length=shuttle.segment_length,
        duty=shuttle.duty,
    )
    shuttles: list[LineSpec] = []
    for atom in state.atoms:
        if not atom.shuttle:
            continue
        x, y = atom.position
        shuttles.append(LineSpec(start=(x, source.top()), end=(x, source.bottom()), **style))
        shuttles.append(LineSpec(start=(source.left(), y), end=(source.right(), y), **style))

    centered = Alignment(HAlignment.CENTER, VAlignment.CENTER)
    labels = TextSpec(
        viewport_projection=viewport_projection,
        font_size=label.size,
        font_family=label.family,
        texts=[(atom.label, atom.position, centered) for atom in state.atoms],
        color=label.color,
    )
    return AtomsSpecs(circles=circles, shuttles=shuttles, labels=labels)