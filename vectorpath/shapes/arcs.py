"""Circular arcs and annulus wedges.

Direction follows the angle order: an arc from a to a2 runs anticlockwise
exactly when a > a2, so it always sweeps through the angles between them.
"""

from __future__ import annotations

import math

from vectorpath.shapes.base import Shape
from vectorpath.surface.base import DrawingSurface

# Angle differences below this count as a zero-length arc
ARC_EPSILON = 1e-4


class Arc(Shape):
    r: float
    a: float
    a2: float

    @property
    def anticlockwise(self) -> bool:
        return self.a > self.a2

    def trace_in(self, surface: DrawingSurface) -> None:
        cx, cy = self.at
        if abs(self.a - self.a2) > ARC_EPSILON:
            surface.move_to(cx, cy)
        surface.arc(cx, cy, self.r, self.a, self.a2, self.anticlockwise)


class HollowArc(Shape):
    """Closed wedge of the annulus between radii r2 (inner) and r (outer)."""

    r: float
    r2: float
    a: float
    a2: float

    @property
    def anticlockwise(self) -> bool:
        return self.a > self.a2

    def _on_circle(self, radius: float, angle: float) -> tuple[float, float]:
        cx, cy = self.at
        return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))

    def trace_in(self, surface: DrawingSurface) -> None:
        cx, cy = self.at
        surface.move_to(*self._on_circle(self.r2, self.a))
        surface.line_to(*self._on_circle(self.r, self.a))
        surface.arc(cx, cy, self.r, self.a, self.a2, self.anticlockwise)
        surface.line_to(*self._on_circle(self.r2, self.a2))
        surface.arc(cx, cy, self.r2, self.a2, self.a, not self.anticlockwise)
