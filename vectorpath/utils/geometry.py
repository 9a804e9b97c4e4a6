"""Leaf-node geometry helpers over point sequences. No path imports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from vectorpath.errors import PreconditionViolation
from vectorpath.utils.vectors import Point2D

T = TypeVar("T")


def as_array(points: Sequence[Point2D]) -> NDArray[np.float64]:
    """Nx2 float array from a point sequence."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def centroid(points: Sequence[Point2D]) -> Point2D:
    """Arithmetic mean of a point set. Raises PreconditionViolation when empty."""
    if len(points) == 0:
        raise PreconditionViolation("Centroid of an empty point set is undefined")
    pts = as_array(points)
    return (float(np.mean(pts[:, 0])), float(np.mean(pts[:, 1])))


def bbox(points: Sequence[Point2D]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    pts = as_array(points)
    if len(pts) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(pts[:, 0])),
        float(np.min(pts[:, 1])),
        float(np.max(pts[:, 0])),
        float(np.max(pts[:, 1])),
    )


def triple_wise(items: Sequence[T], looped: bool = False) -> list[tuple[T, T, T]]:
    """Consecutive (a, b, c) windows.

    Open: one window per interior item. Looped: the sequence wraps, so every
    item is the middle of exactly one window, starting with items[1].
    """
    seq = list(items)
    if looped and len(seq) >= 2:
        seq = seq + seq[:2]
    return [(seq[i], seq[i + 1], seq[i + 2]) for i in range(len(seq) - 2)]
