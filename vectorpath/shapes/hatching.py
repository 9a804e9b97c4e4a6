"""Parallel hatching lines clipped to a circle."""

from __future__ import annotations

import logging
import math

from pydantic import model_validator

from vectorpath.errors import PreconditionViolation
from vectorpath.shapes.base import Shape
from vectorpath.surface.base import DrawingSurface

logger = logging.getLogger(__name__)


class Hatching(Shape):
    """Chords of the circle (at, r) at angle a, spaced delta apart.

    Angles are measured from the top as for polygons, so a=0 hatches
    vertically. The first chord is the diameter; the rest come in pairs
    either side of it with half-length r·sqrt(1 - (offset/r)²).
    """

    r: float
    a: float
    delta: float

    @model_validator(mode="after")
    def _check_spacing(self) -> Hatching:
        if self.delta <= 0:
            raise PreconditionViolation(f"Hatching spacing must be positive, got {self.delta}")
        return self

    def trace_in(self, surface: DrawingSurface) -> None:
        x, y = self.at
        r = self.r
        # Half-chord along the hatch direction, and the unit step between chords
        rca = r * math.cos(self.a - math.pi / 2)
        rsa = r * math.sin(self.a - math.pi / 2)
        dx = math.cos(self.a)
        dy = math.sin(self.a)

        surface.move_to(x - rca, y - rsa)
        surface.line_to(x + rca, y + rsa)

        chords = 1
        k = 1
        while (offset := k * self.delta) < r:
            sx = offset * dx
            sy = offset * dy
            rl = math.sqrt(r * r - offset * offset) / r

            surface.move_to(x + sx - rl * rca, y + sy - rl * rsa)
            surface.line_to(x + sx + rl * rca, y + sy + rl * rsa)
            surface.move_to(x - sx - rl * rca, y - sy - rl * rsa)
            surface.line_to(x - sx + rl * rca, y - sy + rl * rsa)
            chords += 2
            k += 1
        logger.debug("Hatching emitted %d chords", chords)
