"""Turn raw input points into adjusted stroke points."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Optional

from .types import StrokeOptions, StrokePoint, coerce_point
from .vec import add, dist, is_equal, lrp, sub, uni


def get_stroke_points(
    points: Iterable[Any],
    options: Optional[StrokeOptions] = None,
) -> list[StrokePoint]:
    """Streamline input points into ``StrokePoint`` objects.

    Each result carries the adjusted point, its pressure, the unit vector
    back to the previous point, the distance to it and the running length.
    """
    opts = options if options is not None else StrokeOptions()
    streamline = opts.streamline
    size = opts.size
    is_complete = opts.last

    pts = []
    for raw in points:
        p = coerce_point(raw)
        pts.append((p.point, 0.5 if p.pressure is None else p.pressure))

    if not pts:
        return []

    t = 0.15 + (1.0 - streamline) * 0.85

    # Extra points between a pair help avoid "dash" lines on tapered strokes.
    if len(pts) == 2:
        first, (last_point, last_pressure) = pts
        pts = [first] + [
            (lrp(first[0], last_point, i / 4.0), last_pressure) for i in range(1, 5)
        ]

    if len(pts) == 1:
        point, pressure = pts[0]
        pts.append((add(point, (1.0, 1.0)), pressure))

    first_point, first_pressure = pts[0]
    prev = StrokePoint(
        point=(first_point[0], first_point[1]),
        pressure=first_pressure if first_pressure >= 0.0 else 0.25,
        distance=0.0,
        vector=(1.0, 1.0),
        running_length=0.0,
    )
    stroke_points = [prev]

    has_reached_minimum_length = False
    running_length = 0.0
    last_index = len(pts) - 1

    for i, (target, pressure) in enumerate(pts[1:], start=1):
        if is_complete and i == last_index:
            point = (target[0], target[1])
        else:
            point = lrp(prev.point, target, t)

        if is_equal(prev.point, point):
            continue

        distance = dist(point, prev.point)
        running_length += distance

        # Wait until the line has moved far enough from its start, to avoid noise.
        if i < last_index and not has_reached_minimum_length:
            if running_length < size:
                continue
            has_reached_minimum_length = True

        prev = StrokePoint(
            point=point,
            pressure=pressure if pressure >= 0.0 else 0.5,
            distance=distance,
            vector=uni(sub(prev.point, point)),
            running_length=running_length,
        )
        stroke_points.append(prev)

    if len(stroke_points) > 1:
        stroke_points[0] = replace(stroke_points[0], vector=stroke_points[1].vector)

    return stroke_points