"""Option and point types used by the stroke functions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

Easing = Callable[[float], float]
Taper = Union[bool, float, None]


@dataclass
class TaperOptions:
    """Cap, taper and easing for one end of a stroke.

    ``taper`` is ``True`` to taper over the whole stroke, ``False``/``None``
    for no taper, or a number giving the taper length.
    """

    cap: bool = True
    taper: Taper = None
    easing: Optional[Easing] = None


@dataclass
class StrokeOptions:
    """Options for stroke generation.

    size: base diameter of the stroke.
    thinning: effect of pressure on the stroke's size.
    smoothing: how much to soften the stroke's edges.
    streamline: how much to streamline the input points.
    easing: easing applied to each point's pressure.
    simulate_pressure: whether to derive pressure from velocity.
    start, end: cap, taper and easing for each end of the line.
    last: whether the points form a completed stroke.
    closed: whether to close the outline back to its first point.
    """

    size: float = 16.0
    thinning: float = 0.5
    smoothing: float = 0.5
    streamline: float = 0.5
    easing: Optional[Easing] = None
    simulate_pressure: bool = True
    start: Optional[TaperOptions] = None
    end: Optional[TaperOptions] = None
    last: bool = False
    closed: bool = False


@dataclass(frozen=True)
class StrokePoint:
    """An adjusted point produced by ``get_stroke_points``."""

    point: tuple[float, float]
    pressure: float
    distance: float
    vector: tuple[float, float]
    running_length: float


@dataclass(frozen=True)
class InputPoint:
    """An input point with optional pressure."""

    x: float
    y: float
    pressure: Optional[float] = None

    @property
    def point(self) -> tuple[float, float]:
        return (self.x, self.y)


def coerce_point(value: Any) -> InputPoint:
    """Turn an ``InputPoint``, ``[x, y(, pressure)]`` or ``{"x", "y"(, "pressure")}`` into an ``InputPoint``."""
    if isinstance(value, InputPoint):
        return value
    if isinstance(value, Mapping):
        try:
            x, y = value["x"], value["y"]
        except KeyError as exc:
            raise ValueError(f"point mapping lacks key {exc.args[0]!r}") from None
        pressure = value.get("pressure")
        return InputPoint(float(x), float(y), None if pressure is None else float(pressure))
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) < 2:
            raise ValueError(f"point needs at least two coordinates, got {len(value)}")
        pressure = float(value[2]) if len(value) >= 3 else None
        return InputPoint(float(value[0]), float(value[1]), pressure)
    raise TypeError(f"cannot interpret {type(value).__name__} as a point")


def resolve_taper(taper: Taper, size: float, total_length: float) -> float:
    """Length over which to taper, given a taper setting."""
    if taper is None or taper is False:
        return 0.0
    if taper is True:
        return max(size, total_length)
    return float(taper)