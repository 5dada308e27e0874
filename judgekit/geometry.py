"""Plane and solid geometry problems: circles, medians, balloons and pursuit."""

from __future__ import annotations

import math

_PI = 3.1415


def survives(r1: float, x1: float, y1: float, r2: float, x2: float, y2: float) -> bool:
    """Return True when the second circle lies entirely inside the first."""
    distance = math.hypot(x1 - x2, y1 - y2)
    return distance + r2 <= r1


def triangle_area_from_medians(a: float, b: float, c: float) -> float:
    """Return the area of the triangle whose medians have lengths a, b and c.

    Raises ValueError when the medians cannot form a triangle.
    """
    if a + b <= c or b + c <= a or a + c <= b:
        raise ValueError(f"medians {a}, {b}, {c} do not form a triangle")
    half = 0.5 * (a + b + c)
    median_area = math.sqrt(half * (half - a) * (half - b) * (half - c))
    return 4.0 * median_area / 3.0


def balloon_count(radius: float, volume: float) -> int:
    """Return how many spherical balloons of the given radius the volume fills."""
    sphere = (4.0 / 3.0) * _PI * radius * radius * radius
    return int(volume / sphere)


def catch_time(distance: float, speed_a: float, speed_b: float) -> float:
    """Return the time for A to close the distance to B.

    Raises ValueError when A is not faster than B.
    """
    if speed_b >= speed_a:
        raise ValueError("impossivel")
    return distance / (speed_a - speed_b)