"""Build the outline polygon around a list of stroke points."""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

from .radius import get_stroke_radius
from .types import StrokeOptions, StrokePoint, TaperOptions, resolve_taper
from .vec import add, dist2, dpr, mul, neg, per, rot_around

Point = tuple[float, float]

# Rate of change for simulated pressure.
RATE_OF_PRESSURE_CHANGE = 0.275

# A tiny offset on PI keeps the caps from rendering slightly off.
FIXED_PI = math.pi + 0.0001

_CAP_STEPS = 4


def _identity(t: float) -> float:
    return t


def _ease_out_quad(t: float) -> float:
    return t * (2.0 - t)


def _ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def _simulated_pressure(previous: float, distance: float, size: float) -> float:
    speed = min(1.0, distance / size)
    rate = min(1.0, 1.0 - speed)
    return min(1.0, previous + (rate - previous) * (speed * RATE_OF_PRESSURE_CHANGE))


def _cap_arc(start: Point, centre: Point, angles: Sequence[float]) -> list[Point]:
    return [rot_around(start, centre, angle) for angle in angles]


def get_stroke_outline_points(
    points: Sequence[StrokePoint],
    options: Optional[StrokeOptions] = None,
) -> list[Point]:
    """Return the ``(x, y)`` points of a polygon outlining the stroke points."""
    opts = options if options is not None else StrokeOptions()
    size = opts.size
    smoothing = opts.smoothing
    thinning = opts.thinning
    simulate_pressure = opts.simulate_pressure
    easing: Callable[[float], float] = opts.easing or _identity

    start_options = opts.start if opts.start is not None else TaperOptions()
    end_options = opts.end if opts.end is not None else TaperOptions()
    taper_start_ease = start_options.easing or _ease_out_quad
    taper_end_ease = end_options.easing or _ease_out_cubic

    if not points or size <= 0.0:
        return []

    first = points[0]
    last = points[-1]
    total_length = last.running_length
    min_distance = (size * smoothing) ** 2

    def radius_for(pressure: float) -> float:
        if thinning > 0.0:
            return get_stroke_radius(size, thinning, pressure, easing)
        return size / 2.0

    # Start from an average of the first pressures: drawn lines almost always start slow.
    prev_pressure = first.pressure
    for curr in points[:10]:
        pressure = curr.pressure
        if simulate_pressure:
            pressure = _simulated_pressure(prev_pressure, curr.distance, size)
        prev_pressure = (prev_pressure + pressure) / 2.0

    first_point_radius = radius_for(first.pressure)

    taper_start = resolve_taper(start_options.taper, size, total_length)
    taper_end = resolve_taper(end_options.taper, size, total_length)

    left_pts: list[Point] = []
    right_pts: list[Point] = []
    prev_vector = first.vector
    pl: Point = first.point
    pr: Point = first.point
    is_prev_sharp_corner = False

    for curr in points[1:]:
        point = curr.point
        vector = curr.vector
        running_length = curr.running_length

        pressure = curr.pressure
        if thinning > 0.0 and simulate_pressure:
            pressure = _simulated_pressure(prev_pressure, curr.distance, size)
        prev_pressure = pressure

        radius = radius_for(pressure)

        ts = (
            taper_start_ease(running_length / taper_start)
            if running_length < taper_start
            else 1.0
        )
        remaining = total_length - running_length
        te = taper_end_ease(remaining / taper_end) if remaining < taper_end else 1.0
        radius = max(0.01, radius * min(ts, te))

        offset = mul(per(vector), radius)
        left_point = add(point, offset)
        right_point = add(point, neg(offset))

        is_sharp_corner = dpr(prev_vector, vector) < 0.0

        if is_sharp_corner and not is_prev_sharp_corner:
            if dist2(left_point, pl) > min_distance:
                left_pts.append(left_point)
                pl = left_point
            if dist2(right_point, pr) > min_distance:
                right_pts.append(right_point)
                pr = right_point
        else:
            if not is_prev_sharp_corner:
                offset_a = mul(per(prev_vector), radius)
                tl = add(point, offset_a)
                tr = add(point, neg(offset_a))
                if dist2(pl, tl) > min_distance:
                    left_pts.append(tl)
                    pl = tl
                if dist2(pr, tr) > min_distance:
                    right_pts.append(tr)
                    pr = tr

            if dist2(pl, left_point) > min_distance:
                left_pts.append(left_point)
                pl = left_point
            if dist2(pr, right_point) > min_distance:
                right_pts.append(right_point)
                pr = right_point

        prev_vector = vector
        is_prev_sharp_corner = is_sharp_corner

    steps = [i / _CAP_STEPS for i in range(_CAP_STEPS + 1)]
    result: list[Point] = []

    if start_options.cap:
        offset = mul(per(first.vector), first_point_radius)
        start_left = add(first.point, offset)
        start_right = add(first.point, neg(offset))
        result.append(start_left)
        if len(points) > 1:
            angles = [FIXED_PI - t * FIXED_PI for t in steps]
            result.extend(_cap_arc(start_right, first.point, angles))
        else:
            result.append(start_right)

    result.extend(right_pts)

    if end_options.cap and right_pts:
        last_radius = radius_for(last.pressure) if len(points) > 1 else first_point_radius
        tapered_radius = 0.01 if taper_end > 0.0 else last_radius
        offset = mul(per(last.vector), tapered_radius)
        end_right = add(last.point, neg(offset))
        end_left = add(last.point, offset)
        if len(points) > 1:
            result.extend(_cap_arc(end_right, last.point, [t * FIXED_PI for t in steps]))
        else:
            result.append(end_left)

    result.extend(reversed(left_pts))

    if len(result) > 1 and (opts.closed or result[0] != result[-1]):
        result.append(result[0])

    return result