"""Drawing-surface protocol: the capability traceables emit commands into.

Mirrors the subset of a 2D canvas context the shapes need. Coordinates are
y-down, angles in radians increase clockwise on screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class TextMetrics:
    width: float


@runtime_checkable
class DrawingSurface(Protocol):
    """Anything that accepts path and text commands.

    Implemented by `SvgSurface` for real output and `RecordingSurface` for
    point replay and tests. Traceables never keep a reference to a surface.
    """

    # CSS font shorthand, e.g. "normal normal bold 12px Arial"
    font: str
    text_align: str

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None: ...

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None: ...

    def arc(
        self,
        cx: float,
        cy: float,
        r: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...

    def stroke_text(self, text: str, x: float, y: float) -> None: ...

    def measure_text(self, text: str) -> TextMetrics: ...
