"""Screen layout and drawing specifications for neutral-atom machine visualizations."""

__version__ = "0.5.1"

__all__ = [
    "atoms",
    "layout",
    "legend",
    "machine",
    "primitives",
    "scene",
    "state",
    "text",
    "time_display",
    "viewport",
]