"""Pure circle-proximity tests."""
from __future__ import annotations

from vectoroids.types import Vec


def within(pos_a: Vec, pos_b: Vec, threshold: float) -> bool:
    """True when the centres are strictly closer than ``threshold``.

    Compares squared distances, so a zero threshold simply never hits.
    """
    dx = pos_a[0] - pos_b[0]
    dy = pos_a[1] - pos_b[1]
    return dx * dx + dy * dy < threshold * threshold


def circle_vs_circle(pos_a: Vec, radius_a: float, pos_b: Vec, radius_b: float) -> bool:
    """Overlap of two circles; touching is not a collision."""
    return within(pos_a, pos_b, radius_a + radius_b)


def point_in_circle(point: Vec, center: Vec, radius: float) -> bool:
    return within(point, center, radius)
