"""SVG path data from stroke outline points."""

from __future__ import annotations

from typing import Sequence


def _average(a: float, b: float) -> float:
    return (a + b) / 2.0


def get_svg_path_from_stroke(
    points: Sequence[Sequence[float]],
    closed: bool = True,
) -> str:
    """Turn outline points into SVG path data using quadratic curves.

    Returns an empty string when there are fewer than four points.
    """
    if len(points) < 4:
        return ""

    a, b, c = points[0], points[1], points[2]
    parts = [
        f"M{a[0]:.2f},{a[1]:.2f} Q{b[0]:.2f},{b[1]:.2f} "
        f"{_average(b[0], c[0]):.2f},{_average(b[1], c[1]):.2f} T"
    ]
    parts.extend(
        f"{_average(p[0], q[0]):.2f},{_average(p[1], q[1]):.2f} "
        for p, q in zip(points[2:-1], points[3:])
    )
    if closed:
        parts.append("Z")
    return "".join(parts)