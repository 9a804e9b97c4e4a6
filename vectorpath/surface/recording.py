"""RecordingSurface: a drawing surface that only remembers what it was told.

Used to replay traceables into point sequences and as the test double for
every shape. Text width is a fixed fraction of the font size per character,
so measurements are deterministic without any font files.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from vectorpath.surface.base import TextMetrics
from vectorpath.surface.fonts import parse_font
from vectorpath.utils.vectors import Point2D


@dataclass(frozen=True)
class SurfaceCommand:
    name: str
    args: tuple[Any, ...]


@dataclass
class RecordingSurface:
    """Records commands and the points each one visits, in order."""

    font: str = "normal normal normal 10px sans-serif"
    text_align: str = "start"
    # Advance width of one character as a fraction of the font size
    char_width: float = 0.5
    commands: list[SurfaceCommand] = field(default_factory=list)
    # Every on-path point visited: move/line/curve ends, arc start and end
    points: list[Point2D] = field(default_factory=list)

    def _record(self, name: str, *args: Any) -> None:
        self.commands.append(SurfaceCommand(name, args))

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)
        self.points.append((x, y))

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)
        self.points.append((x, y))

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self._record("bezier_curve_to", c1x, c1y, c2x, c2y, x, y)
        self.points.append((x, y))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._record("quadratic_curve_to", cx, cy, x, y)
        self.points.append((x, y))

    def arc(
        self,
        cx: float,
        cy: float,
        r: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        self._record("arc", cx, cy, r, start_angle, end_angle, anticlockwise)
        self.points.append((cx + r * math.cos(start_angle), cy + r * math.sin(start_angle)))
        self.points.append((cx + r * math.cos(end_angle), cy + r * math.sin(end_angle)))

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._record("fill_text", text, x, y, self.font, self.text_align)

    def stroke_text(self, text: str, x: float, y: float) -> None:
        self._record("stroke_text", text, x, y, self.font, self.text_align)

    def measure_text(self, text: str) -> TextMetrics:
        size = parse_font(self.font).size
        return TextMetrics(width=len(text) * size * self.char_width)

    # --- Queries ---

    def names(self) -> list[str]:
        return [c.name for c in self.commands]

    @property
    def first_point(self) -> Point2D | None:
        return self.points[0] if self.points else None

    @property
    def last_point(self) -> Point2D | None:
        return self.points[-1] if self.points else None

    def clear(self) -> None:
        self.commands.clear()
        self.points.clear()
