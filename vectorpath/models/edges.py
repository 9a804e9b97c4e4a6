"""Edge model: the two segment kinds a Path is chained from."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from vectorpath.utils.vectors import Point2D

PointTransform = Callable[[Point2D], Point2D]


@dataclass(frozen=True)
class LineEdge:
    """Straight segment from `start` to `end`."""

    start: Point2D
    end: Point2D

    def reversed(self) -> LineEdge:
        return LineEdge(start=self.end, end=self.start)

    def transformed(self, fn: PointTransform) -> LineEdge:
        return LineEdge(start=fn(self.start), end=fn(self.end))


@dataclass(frozen=True)
class CubicEdge:
    """Cubic Bézier from `start` to `end` shaped by two control points."""

    start: Point2D
    end: Point2D
    control1: Point2D
    control2: Point2D

    def reversed(self) -> CubicEdge:
        # Walking the curve backwards swaps the control points too.
        return CubicEdge(
            start=self.end,
            end=self.start,
            control1=self.control2,
            control2=self.control1,
        )

    def transformed(self, fn: PointTransform) -> CubicEdge:
        return CubicEdge(
            start=fn(self.start),
            end=fn(self.end),
            control1=fn(self.control1),
            control2=fn(self.control2),
        )


Edge = LineEdge | CubicEdge
