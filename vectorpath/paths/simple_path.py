"""SimplePath: a polyline as an ordered point sequence.

A closed SimplePath repeats its first point at the end. Every operation
returns a new SimplePath except `transform_points`, which rewrites the
points in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence

from vectorpath.errors import InvalidRange, PreconditionViolation
from vectorpath.surface.base import DrawingSurface
from vectorpath.utils import vectors as v
from vectorpath.utils.geometry import bbox, centroid, triple_wise
from vectorpath.utils.vectors import Point2D, Vector2D, as_point

logger = logging.getLogger(__name__)


class SimplePath:
    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Sequence[float]] = ()) -> None:
        self._points: list[Point2D] = [as_point(p) for p in points]

    @classmethod
    def start_at(cls, point: Sequence[float]) -> SimplePath:
        return cls([point])

    @classmethod
    def with_points(cls, points: Iterable[Sequence[float]]) -> SimplePath:
        return cls(points)

    def add_point(self, point: Sequence[float]) -> SimplePath:
        return SimplePath([*self._points, point])

    def close(self) -> SimplePath:
        """Repeat the first point at the end."""
        if not self._points:
            return SimplePath()
        return SimplePath([*self._points, self._points[0]])

    def with_appended(self, other: SimplePath) -> SimplePath:
        return SimplePath([*self._points, *other._points])

    # --- Inspection ---

    @property
    def points(self) -> list[Point2D]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimplePath):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"SimplePath({self._points!r})"

    @property
    def is_closed(self) -> bool:
        return len(self._points) > 1 and self._points[0] == self._points[-1]

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        return bbox(self._points)

    @property
    def centroid(self) -> Point2D:
        return centroid(self._points)

    # --- Smoothing ---

    def chaiken(self, n: int = 1, looped: bool = False) -> SimplePath:
        """Chaikin corner cutting, `n` passes.

        Each interior point b of a window (a, b, c) becomes the two points a
        quarter of the way from b towards a and towards c. Open paths keep
        their end points. Looped paths wrap around and finish with the first
        point equal to the last.
        """
        if len(self._points) < 3:
            raise PreconditionViolation(
                f"Smoothing requires at least 3 points, path has {len(self._points)}"
            )
        pts = list(self._points)
        for _ in range(n):
            cut = [
                q
                for a, b, c in triple_wise(pts, looped)
                for q in (v.point_along(b, a, 0.25), v.point_along(b, c, 0.25))
            ]
            pts = cut[1:] if looped else [pts[0], *cut, pts[-1]]
        if looped and n > 0:
            pts[0] = pts[-1]
        return SimplePath(pts)

    # --- Algebra ---

    def transformed(self, fn: Callable[[Point2D], Point2D]) -> SimplePath:
        return SimplePath(fn(p) for p in self._points)

    def transform_points(self, fn: Callable[[Point2D], Point2D]) -> SimplePath:
        """Warning: mutates this path in place and returns it."""
        self._points = [as_point(fn(p)) for p in self._points]
        return self

    def moved(self, delta: Vector2D) -> SimplePath:
        return self.transformed(lambda pt: v.add(pt, delta))

    def scaled(self, factor: float) -> SimplePath:
        """Scale about the centroid."""
        c = self.centroid
        return self.transformed(lambda pt: v.add(c, v.scale(v.subtract(pt, c), factor)))

    def rotated(self, angle: float) -> SimplePath:
        """Rotate `angle` radians about the centroid."""
        c = self.centroid
        return self.transformed(lambda pt: v.add(c, v.rotate(v.subtract(pt, c), angle)))

    @property
    def reversed(self) -> SimplePath:
        return SimplePath(reversed(self._points))

    def _wedges(self) -> list[SimplePath]:
        if len(self._points) < 2:
            raise PreconditionViolation(
                f"Decomposition requires at least 2 points, path has {len(self._points)}"
            )
        c = self.centroid
        return [
            SimplePath([a, b, c, a])
            for a, b in zip(self._points[:-1], self._points[1:])
        ]

    @property
    def segmented(self) -> list[SimplePath]:
        """Closed triangles joining each consecutive point pair to the centroid."""
        return self._wedges()

    def exploded(self, magnitude: float = 1.2, scale: float = 1.0) -> list[SimplePath]:
        """Triangles scaled about their own centroids and pushed away from ours."""
        c = self.centroid
        paths = []
        for wedge in self._wedges():
            scaled = wedge.scaled(scale)
            displacement = v.scale(v.subtract(scaled.centroid, c), magnitude - 1.0)
            paths.append(scaled.moved(displacement))
        return paths

    def subdivide(self, m: int, n: int) -> list[SimplePath]:
        """Cut at point indices m < n into two closed halves.

        The first half runs m..n and returns to m. The second runs from n - 1
        to the end, wraps round to m, and finishes at n.
        """
        length = len(self._points)
        if not (0 <= m < n < length):
            raise InvalidRange(
                f"Requires 0 <= m < n < {length} (point count), got m={m}, n={n}"
            )
        pts = self._points
        logger.debug("Subdividing %d points at %d, %d", length, m, n)
        return [
            SimplePath([*pts[m : n + 1], pts[m]]),
            SimplePath([*pts[n - 1 :], *pts[: m + 1], pts[n]]),
        ]

    # --- Emission ---

    def trace_in(self, surface: DrawingSurface) -> None:
        if not self._points:
            raise PreconditionViolation("Cannot trace an empty path")
        first, *rest = self._points
        surface.move_to(*first)
        for point in rest:
            surface.line_to(*point)
