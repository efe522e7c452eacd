"""Outline polygon for a list of raw input points."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .outline import get_stroke_outline_points
from .points import get_stroke_points
from .types import StrokeOptions


def get_stroke(
    points: Iterable[Any],
    options: Optional[StrokeOptions] = None,
) -> list[tuple[float, float]]:
    """Return the ``(x, y)`` points of a polygon that surrounds the input points."""
    opts = options if options is not None else StrokeOptions()
    return get_stroke_outline_points(get_stroke_points(points, opts), opts)