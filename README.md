# naviz

`naviz` computes what is needed to draw a neutral-atom machine and the atoms
on it. It lays out the screen (content on the left, legend and time display
on the right) and turns a static `Config` and a changing `State` into plain
drawing specifications: circles, dashed lines, rectangle outlines and
positioned text. Any drawing backend can consume these.

The package has no dependencies beyond the standard library.

## Installation

```
pip install naviz
```

## Modules

- `naviz.state`: the static `Config` (machine grid, traps, zones, atom style,
  legend and time font, content extent) and the dynamic `State` (a list of
  `AtomState` and the time string). `Config.example()` and `State.example()`
  return ready-made samples. `VPosition` and `HPosition` pick values by
  position with `get(...)` and flip with `inverse()`.
- `naviz.viewport`: `ViewportSource`, `ViewportTarget` and
  `ViewportProjection`. A projection maps source coordinates into normalized
  device coordinates (`matrix()`, `transform_point()`, `transform_vector()`);
  the top of the source lands at the top of the target. A source with zero
  width or height raises `ValueError`.
- `naviz.layout`: `Layout.create(screen_size, content, content_padding_y,
  legend_height, time_height)` returns the projections for the content, the
  legend and the time display, together with the helper functions it is built
  from (`get_size_keep_aspect`, `center_in`, `shrink_target_by_source_padding`,
  `gobble_space_left_until`, `calculate_width`).
- `naviz.primitives`: `CircleSpec`, `LineSpec`, `RectangleSpec`, and
  `rectangles_to_lines`, which turns each rectangle into four lines running
  clockwise, extended by half the line width so that corners close.
- `naviz.text`: `HAlignment`, `VAlignment`, `Alignment`, `TextSpec`,
  `get_aligned_position` (width and height are passed as callables and only
  called when the alignment needs them), `get_scale` (pixels per source unit,
  logging a warning when the x and y scales differ) and `to_screen_position`
  (pixel position with the origin at the top-left).
- `naviz.machine`: `machine_specs(config, projection)` returns a
  `MachineSpecs` with grid lines, trap rings, coordinate labels and axis
  labels, and zone rectangles. `range_f32` yields evenly spaced values with
  both ends included.
- `naviz.atoms`: `atoms_specs(config, state, projection)` returns an
  `AtomsSpecs` with a circle and a label per atom, and a horizontal and a
  vertical line across the viewport for every shuttling atom.
- `naviz.legend`: `legend_specs(config, projection)` returns a `LegendSpecs`
  with section headings, entries, and a colored circle for every entry that
  has a color.
- `naviz.time_display`: `time_specs(config, state, projection)` returns the
  `TextSpec` of the time string, left-aligned and vertically centered.
- `naviz.scene`: `Scene` ties it all together. It holds `layout`, `machine`,
  `atoms`, `legend`, `time` and `screen_resolution`.

## Example

```python
from naviz.scene import Scene
from naviz.state import Config, State
from naviz.text import get_scale, to_screen_position

config = Config.example()
state = State.example()

scene = Scene(config, state, (1920, 1080))

for circle in scene.atoms.circles:
    print(circle.center, circle.radius, circle.color)

labels = scene.atoms.labels
scale = get_scale(labels.viewport_projection, scene.screen_resolution)
for text, position, alignment in labels.texts:
    pixel = to_screen_position(labels.viewport_projection, position, scene.screen_resolution)
    print(text, pixel, alignment, scale)

# The atoms moved: refresh only the atoms and the time display.
scene.update(config, state)

# The config changed: recompute the layout and every spec.
scene.update_full(config, state)

# The window was resized: the new resolution is used by the next full update.
scene.update_viewport((1280, 720))
scene.update_full(config, state)
```

## What the package does not do

`naviz` only produces layout and specifications. It does not draw anything,
open a window, shape or measure text (text sizes are supplied by the caller
to `get_aligned_position`), read configuration or input files, animate
between states, or export images or video.

## Running the tests

```
pip install -e ".[test]"
pytest
```