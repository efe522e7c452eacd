"""Smooth, pressure-sensitive outlines for freehand strokes, with SVG path output."""

__version__ = "0.1.0"

__all__ = [
    "vec",
    "types",
    "radius",
    "points",
    "outline",
    "stroke",
    "svg",
    "generate",
]