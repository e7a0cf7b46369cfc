"""2D point helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

from tick_cursor.types import Point


def add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def lerp(a: Point, b: Point, t: float) -> Point:
    """Linear interpolation from a (t=0) to b (t=1). t is not clamped."""
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])
