"""Stroke radius from pressure."""

from __future__ import annotations

from typing import Callable, Optional


def get_stroke_radius(
    size: float,
    thinning: float,
    pressure: float,
    easing: Optional[Callable[[float], float]] = None,
) -> float:
    """Radius of a stroke for the given pressure, thinning and optional easing."""
    t = 0.5 - thinning * (0.5 - pressure)
    if easing is not None:
        t = easing(t)
    return size * t