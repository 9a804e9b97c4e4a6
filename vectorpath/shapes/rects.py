"""Axis-aligned rectangles, plain and with rounded corners."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from typing import Literal, get_args

from vectorpath.errors import PreconditionViolation
from vectorpath.paths.simple_path import SimplePath
from vectorpath.shapes.base import Shape
from vectorpath.surface.base import DrawingSurface

logger = logging.getLogger(__name__)

Orientation = Literal["horizontal", "vertical"]


class Rect(Shape):
    """Box with top-left corner `at`, width w and height h (y-down)."""

    w: float
    h: float

    @property
    def path(self) -> SimplePath:
        x, y = self.at
        return SimplePath.with_points(
            [(x, y), (x + self.w, y), (x + self.w, y + self.h), (x, y + self.h)]
        ).close()

    def trace_in(self, surface: DrawingSurface) -> None:
        self.path.trace_in(surface)

    def split(
        self,
        orientation: Orientation,
        split: float | Sequence[float] = 0.5,
    ) -> list[Rect]:
        """Partition into contiguous rects.

        "horizontal" divides the width into side-by-side rects, "vertical"
        divides the height into stacked rects. A single number is the share
        of the first of two parts; a sequence gives relative sizes of n parts.
        The last part takes the remainder so the extents sum exactly.
        """
        if orientation not in get_args(Orientation):
            raise PreconditionViolation(
                f"Orientation must be one of {get_args(Orientation)}, got {orientation!r}"
            )
        if isinstance(split, numbers.Real):
            ratio = float(split)
            if not 0 < ratio < 1:
                raise PreconditionViolation(f"Split ratio must lie in (0, 1), got {split}")
            proportions = [ratio, 1.0 - ratio]
        else:
            weights = [float(s) for s in split]
            total = sum(weights)
            if not weights or total <= 0 or any(s < 0 for s in weights):
                raise PreconditionViolation(f"Split weights must be non-negative with a positive sum, got {split}")
            proportions = [s / total for s in weights]

        extent = self.w if orientation == "horizontal" else self.h
        offsets = []
        offset = 0.0
        for p in proportions[:-1]:
            offsets.append((offset, p * extent))
            offset += p * extent
        offsets.append((offset, extent - offset))

        x, y = self.at
        if orientation == "horizontal":
            return [Rect(at=(x + o, y), w=d, h=self.h) for o, d in offsets]
        return [Rect(at=(x, y + o), w=self.w, h=d) for o, d in offsets]


class RoundedRect(Shape):
    """Rect whose corners are quarter-rounds of radius r, clamped to fit."""

    w: float
    h: float
    r: float

    @property
    def radius(self) -> float:
        return min(self.r, self.h / 2, self.w / 2)

    def trace_in(self, surface: DrawingSurface) -> None:
        r = self.radius
        if r != self.r:
            logger.debug("Corner radius %s clamped to %s", self.r, r)
        x1, y1 = self.at
        x2 = x1 + self.w
        y2 = y1 + self.h

        surface.move_to(x1 + r, y1)
        surface.line_to(x2 - r, y1)
        surface.quadratic_curve_to(x2, y1, x2, y1 + r)
        surface.line_to(x2, y2 - r)
        surface.quadratic_curve_to(x2, y2, x2 - r, y2)
        surface.line_to(x1 + r, y2)
        surface.quadratic_curve_to(x1, y2, x1, y2 - r)
        surface.line_to(x1, y1 + r)
        surface.quadratic_curve_to(x1, y1, x1 + r, y1)
