"""Small helpers for two-dimensional vector arithmetic on ``(x, y)`` tuples."""

from __future__ import annotations

import math
from typing import Sequence

Vec = tuple[float, float]


def neg(a: Sequence[float]) -> Vec:
    """Negate a vector."""
    return (-a[0], -a[1])


def add(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Add two vectors."""
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Subtract vector ``b`` from vector ``a``."""
    return (a[0] - b[0], a[1] - b[1])


def mul(a: Sequence[float], n: float) -> Vec:
    """Multiply a vector by a scalar."""
    return (a[0] * n, a[1] * n)


def div(a: Sequence[float], n: float) -> Vec:
    """Divide a vector by a scalar."""
    return (a[0] / n, a[1] / n)


def per(a: Sequence[float]) -> Vec:
    """Rotate a vector by a right angle."""
    return (a[1], -a[0])


def dpr(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two vectors."""
    return a[0] * b[0] + a[1] * b[1]


def is_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """Whether two vectors have exactly the same components."""
    return a[0] == b[0] and a[1] == b[1]


def length(a: Sequence[float]) -> float:
    """Length of a vector."""
    return math.sqrt(a[0] ** 2 + a[1] ** 2)


def len2(a: Sequence[float]) -> float:
    """Squared length of a vector."""
    return a[0] * a[0] + a[1] * a[1]


def dist2(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared distance between two points."""
    return len2(sub(a, b))


def uni(a: Sequence[float]) -> Vec:
    """Unit vector pointing the same way as ``a``."""
    return div(a, length(a))


def dist(a: Sequence[float], b: Sequence[float]) -> float:
    """Distance between two points."""
    return math.sqrt((a[1] - b[1]) ** 2 + (a[0] - b[0]) ** 2)


def med(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Midpoint between two vectors."""
    return mul(add(a, b), 0.5)


def rot_around(a: Sequence[float], c: Sequence[float], r: float) -> Vec:
    """Rotate point ``a`` around centre ``c`` by ``r`` radians."""
    s = math.sin(r)
    co = math.cos(r)
    px = a[0] - c[0]
    py = a[1] - c[1]
    nx = px * co - py * s
    ny = px * s + py * co
    return (nx + c[0], ny + c[1])


def lrp(a: Sequence[float], b: Sequence[float], t: float) -> Vec:
    """Interpolate from ``a`` towards ``b`` by ``t``."""
    return add(a, mul(sub(b, a), t))


def prj(a: Sequence[float], b: Sequence[float], c: float) -> Vec:
    """Project point ``a`` in direction ``b`` by scalar ``c``."""
    return add(a, mul(b, c))