"""2D vector arithmetic on (x, y) tuples. No library imports."""

from __future__ import annotations

import math
from collections.abc import Sequence

from vectorpath.errors import DivisionByZero

Point2D = tuple[float, float]
Vector2D = tuple[float, float]


def add(a: Vector2D, b: Vector2D) -> Vector2D:
    return (a[0] + b[0], a[1] + b[1])


def subtract(a: Vector2D, b: Vector2D) -> Vector2D:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vector2D, k: float) -> Vector2D:
    return (v[0] * k, v[1] * k)


def rotate(v: Vector2D, angle: float) -> Vector2D:
    """Rotate by `angle` radians with the standard rotation matrix."""
    c = math.cos(angle)
    s = math.sin(angle)
    return (c * v[0] - s * v[1], s * v[0] + c * v[1])


def magnitude(v: Vector2D) -> float:
    return math.hypot(v[0], v[1])


def normalise(v: Vector2D) -> Vector2D:
    """Unit vector in the direction of v. Raises DivisionByZero for (0, 0)."""
    mag = magnitude(v)
    if mag == 0.0:
        raise DivisionByZero(f"Cannot normalise zero-length vector {v}")
    return (v[0] / mag, v[1] / mag)


def distance(a: Point2D, b: Point2D) -> float:
    return magnitude(subtract(b, a))


def point_along(a: Point2D, b: Point2D, t: float) -> Point2D:
    """Point at fraction t of the way from a to b: a + t*(b - a)."""
    return add(a, scale(subtract(b, a), t))


def as_point(p: Sequence[float]) -> Point2D:
    """Coerce any 2-sequence (list, tuple, array) into a float tuple."""
    return (float(p[0]), float(p[1]))
