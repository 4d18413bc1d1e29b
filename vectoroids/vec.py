"""2D vector math helpers operating on (x, y) tuples."""
from __future__ import annotations

import math

from vectoroids.types import Vec


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def from_angle(angle: float, length: float = 1.0) -> Vec:
    """Vector of the given length pointing along ``angle`` (radians)."""
    return (math.cos(angle) * length, math.sin(angle) * length)


def angle_to(a: Vec, b: Vec) -> float:
    """Heading in radians from ``a`` towards ``b``."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def magnitude(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vec, b: Vec) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def wrap(position: Vec, margin: float, width: float, height: float) -> Vec:
    """Toroidal wrap. An axis leaving ``[-margin, size + margin]`` re-enters
    at the opposite edge, still ``margin`` outside the world."""
    x, y = position
    if x < -margin:
        x = width + margin
    elif x > width + margin:
        x = -margin
    if y < -margin:
        y = height + margin
    elif y > height + margin:
        y = -margin
    return (x, y)


def wrap_exact(position: Vec, width: float, height: float) -> Vec:
    """Wrap at the world edge itself, used for bullets."""
    x, y = position
    if x < 0:
        x = width
    elif x > width:
        x = 0.0
    if y < 0:
        y = height
    elif y > height:
        y = 0.0
    return (x, y)
