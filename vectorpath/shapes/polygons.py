"""Regular polygons and stars, both starting from the top vertex."""

from __future__ import annotations

import math

from pydantic import model_validator

from vectorpath.errors import PreconditionViolation
from vectorpath.paths.simple_path import SimplePath
from vectorpath.shapes.base import Shape, trace_simple_path
from vectorpath.surface.base import DrawingSurface


def _require_sides(n: int, what: str) -> None:
    if n < 3:
        raise PreconditionViolation(f"Must have at least 3 {what}, n was set to {n}")


class RegularPolygon(Shape):
    """n vertices on a circle of radius r; angle a=0 puts vertex 0 at the top."""

    n: int
    r: float
    a: float = 0.0

    @model_validator(mode="after")
    def _check_sides(self) -> RegularPolygon:
        _require_sides(self.n, "sides")
        return self

    def vertex(self, k: int) -> tuple[float, float]:
        x, y = self.at
        angle = self.a - math.pi / 2 + k * (2 * math.pi / self.n)
        return (x + self.r * math.cos(angle), y + self.r * math.sin(angle))

    def trace_in(self, surface: DrawingSurface) -> None:
        surface.move_to(*self.vertex(0))
        for k in range(1, self.n):
            surface.line_to(*self.vertex(k))
        surface.line_to(*self.vertex(0))

    @property
    def path(self) -> SimplePath:
        return trace_simple_path(self)


class Star(Shape):
    """n outer points at radius r alternating with n inner points at r2."""

    n: int
    r: float
    r2: float | None = None
    a: float = 0.0

    @model_validator(mode="after")
    def _check_points(self) -> Star:
        _require_sides(self.n, "points")
        return self

    @property
    def inner_radius(self) -> float:
        return self.r2 if self.r2 else self.r / 2

    def _point(self, radius: float, steps: float) -> tuple[float, float]:
        x, y = self.at
        angle = self.a - math.pi / 2 + steps * (2 * math.pi / self.n)
        return (x + radius * math.cos(angle), y + radius * math.sin(angle))

    def trace_in(self, surface: DrawingSurface) -> None:
        r2 = self.inner_radius
        surface.move_to(*self._point(self.r, 0))
        for k in range(1, self.n):
            surface.line_to(*self._point(r2, k - 0.5))
            surface.line_to(*self._point(self.r, k))
        surface.line_to(*self._point(r2, -0.5))
        surface.line_to(*self._point(self.r, 0))

    @property
    def path(self) -> SimplePath:
        return trace_simple_path(self)
