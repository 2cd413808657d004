"""Scalar helpers shared by the scene layers. No engine imports."""

from __future__ import annotations

import math


def constrain(value: float, low: float, high: float) -> float:
    if low > high:
        low, high = high, low
    return max(low, min(high, value))


def map_range(
    value: float,
    start1: float,
    stop1: float,
    start2: float,
    stop2: float,
    clamp: bool = False,
) -> float:
    """Re-map ``value`` from one range to another, optionally clamped to the target range.

    A degenerate source range (start1 == stop1) maps everything to ``start2``.
    """
    if stop1 == start1:
        return float(start2)
    mapped = (value - start1) / (stop1 - start1) * (stop2 - start2) + start2
    if clamp:
        return constrain(mapped, start2, stop2)
    return mapped


def circles_collide(
    x1: float, y1: float, d1: float,
    x2: float, y2: float, d2: float,
) -> bool:
    """True when two discs overlap: centre distance strictly less than the sum of radii."""
    return math.hypot(x2 - x1, y2 - y1) < (d1 / 2 + d2 / 2)


def clamp_unit(value: float) -> float:
    """Clamp a modifier into [0, 1]."""
    return constrain(value, 0.0, 1.0)
