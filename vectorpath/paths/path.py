"""Path: an ordered chain of line and cubic edges.

Paths are persistent values: every builder call and every algebra operation
returns a new Path, so a path handed to two callers can never be mutated
under either of them. Chaining holds by construction:
``edges[i].end == edges[i + 1].start``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, replace

from vectorpath.errors import InvalidRange, PreconditionViolation
from vectorpath.models.curve import CurveConfig
from vectorpath.models.edges import CubicEdge, Edge, LineEdge
from vectorpath.surface.base import DrawingSurface
from vectorpath.utils import vectors as v
from vectorpath.utils.geometry import bbox, centroid
from vectorpath.utils.vectors import Point2D, Vector2D, as_point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Path:
    origin: Point2D
    edges: tuple[Edge, ...] = ()

    # --- Construction ---

    @classmethod
    def start_at(cls, point: Sequence[float]) -> Path:
        """Empty path whose current point is `point`."""
        return cls(origin=as_point(point))

    @property
    def current_point(self) -> Point2D:
        return self.edges[-1].end if self.edges else self.origin

    def add_line_to(self, point: Sequence[float]) -> Path:
        edge = LineEdge(start=self.current_point, end=as_point(point))
        return replace(self, edges=self.edges + (edge,))

    def add_curve_to(
        self,
        point: Sequence[float],
        curve: CurveConfig | None = None,
        **knobs: float,
    ) -> Path:
        """Append a cubic to `point`, controls derived from the chord.

        The bulge anchor sits `curve_size * polarity` half-chords off the chord
        midpoint along the chord normal rotated by `curve_angle`. The two
        controls straddle the anchor `bulbousness` half-chords apart, along the
        anchor direction rotated by a further -90° - `twist`.
        """
        cfg = replace(curve or CurveConfig(), **knobs)
        current = self.current_point
        end = as_point(point)

        u = v.subtract(end, current)
        d = v.distance(current, end)
        m = v.add(current, v.scale(u, 0.5))
        perp = v.normalise(v.rotate(u, -math.pi / 2))
        rotated_perp = v.rotate(perp, cfg.curve_angle)
        control_mid = v.add(m, v.scale(rotated_perp, cfg.curve_size * cfg.polarity * d * 0.5))
        perp_of_rot = v.normalise(v.rotate(rotated_perp, -math.pi / 2 - cfg.twist))

        spread = cfg.bulbousness * d / 2
        edge = CubicEdge(
            start=current,
            end=end,
            control1=v.add(control_mid, v.scale(perp_of_rot, spread)),
            control2=v.add(control_mid, v.scale(perp_of_rot, -spread)),
        )
        return replace(self, edges=self.edges + (edge,))

    # --- Inspection ---

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    @property
    def points(self) -> list[Point2D]:
        """Start point of every edge."""
        return [e.start for e in self.edges]

    @property
    def is_closed(self) -> bool:
        if not self.edges:
            return False
        end = self.current_point
        return math.isclose(end[0], self.origin[0]) and math.isclose(end[1], self.origin[1])

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        """Bounds of every endpoint and control point (contains the curve)."""
        pts = [self.origin]
        for e in self.edges:
            if isinstance(e, CubicEdge):
                pts += [e.control1, e.control2]
            pts.append(e.end)
        return bbox(pts)

    @property
    def centroid(self) -> Point2D:
        if not self.edges:
            raise PreconditionViolation("Centroid requires at least one edge")
        return centroid(self.points)

    # --- Algebra ---

    def transformed(self, fn: Callable[[Point2D], Point2D]) -> Path:
        """Apply `fn` to every endpoint and control point."""

        def point_fn(pt: Point2D) -> Point2D:
            return as_point(fn(pt))

        return Path(
            origin=point_fn(self.origin),
            edges=tuple(e.transformed(point_fn) for e in self.edges),
        )

    def moved(self, delta: Vector2D) -> Path:
        return self.transformed(lambda pt: v.add(pt, delta))

    def scaled(self, factor: float) -> Path:
        """Scale about the centroid."""
        c = self.centroid
        return self.transformed(lambda pt: v.add(c, v.scale(v.subtract(pt, c), factor)))

    def rotated(self, angle: float) -> Path:
        """Rotate `angle` radians about the centroid."""
        c = self.centroid
        return self.transformed(lambda pt: v.add(c, v.rotate(v.subtract(pt, c), angle)))

    @property
    def reversed(self) -> Path:
        return Path(
            origin=self.current_point,
            edges=tuple(e.reversed() for e in reversed(self.edges)),
        )

    def _wedges(self) -> list[Path]:
        if len(self.edges) < 2:
            raise PreconditionViolation(
                f"Decomposition requires at least 2 edges, path has {len(self.edges)}"
            )
        c = self.centroid
        return [
            Path(origin=e.start, edges=(e,)).add_line_to(c).add_line_to(e.start)
            for e in self.edges
        ]

    @property
    def segmented(self) -> list[Path]:
        """One triangular wedge per edge: the edge, to the centroid, back to its start."""
        return self._wedges()

    def exploded(self, magnitude: float = 1.2, scale: float = 1.0) -> list[Path]:
        """Wedges scaled about their own centroids and pushed away from ours."""
        c = self.centroid
        paths = []
        for wedge in self._wedges():
            scaled = wedge.scaled(scale)
            displacement = v.scale(v.subtract(scaled.centroid, c), magnitude - 1.0)
            paths.append(scaled.moved(displacement))
        logger.debug("Exploded %d wedges (magnitude=%s, scale=%s)", len(paths), magnitude, scale)
        return paths

    def subdivide(self, m: int, n: int, curve: CurveConfig | None = None) -> list[Path]:
        """Split into edges [m, n) and the wrapping complement [n, m), each closed.

        Without `curve` each half is closed by a straight line across the cut.
        With `curve` the halves are closed by cubics bowing in opposite
        directions.
        """
        count = len(self.edges)
        if not (0 <= m < n < count):
            raise InvalidRange(
                f"Requires 0 <= m < n < {count} (edge count), got m={m}, n={n}"
            )
        first = self.edges[m:n]
        second = self.edges[n:] + self.edges[:m]
        logger.debug("Subdividing %d edges into %d + %d", count, len(first), len(second))

        half1 = Path(origin=first[0].start, edges=first)
        half2 = Path(origin=second[0].start, edges=second)
        if curve is None:
            return [half1.add_line_to(half1.origin), half2.add_line_to(half2.origin)]
        return [
            half1.add_curve_to(half1.origin, curve),
            half2.add_curve_to(half2.origin, curve.flipped()),
        ]

    # --- Emission ---

    def trace_in(self, surface: DrawingSurface) -> None:
        surface.move_to(*self.origin)
        for edge in self.edges:
            match edge:
                case LineEdge(end=end):
                    surface.line_to(*end)
                case CubicEdge(end=end, control1=c1, control2=c2):
                    surface.bezier_curve_to(c1[0], c1[1], c2[0], c2[1], end[0], end[1])
