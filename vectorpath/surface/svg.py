"""SvgSurface: drawing surface that builds SVG geometry via svgpathtools.

Path commands become svgpathtools segments (Line, QuadraticBezier,
CubicBezier, Arc); text calls become <text> runs. The accumulated geometry
serialises to path data or a complete SVG document.
"""

from __future__ import annotations

import html
import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier

from vectorpath.config import settings
from vectorpath.surface.base import TextMetrics
from vectorpath.surface.fonts import measure_text_width, parse_font

logger = logging.getLogger(__name__)

_TAU = 2 * math.pi

# Sweeps shorter than this draw nothing beyond the connecting line
_MIN_SWEEP = 1e-12

_TEXT_ANCHORS = {
    "start": "start",
    "left": "start",
    "center": "middle",
    "end": "end",
    "right": "end",
}


@dataclass(frozen=True)
class TextRun:
    text: str
    x: float
    y: float
    font: str
    align: str
    kind: str  # "fill" | "stroke"


def arc_sweep(start_angle: float, end_angle: float, anticlockwise: bool) -> float:
    """Signed sweep (radians) a canvas arc travels. Positive = increasing angle."""
    if not anticlockwise:
        delta = end_angle - start_angle
        if delta >= _TAU:
            return _TAU
        return delta % _TAU
    delta = start_angle - end_angle
    if delta >= _TAU:
        return -_TAU
    return -(delta % _TAU)


class SvgSurface:
    """Drawing surface rendering into SVG path data and text elements."""

    def __init__(self, width: float = 100.0, height: float = 100.0) -> None:
        self.width = width
        self.height = height
        self.font = f"normal normal normal 10px {settings.vectorpath_default_font}"
        self.text_align = "start"
        self._segments: list[Any] = []
        self._texts: list[TextRun] = []
        self._current: complex | None = None

    # --- Path commands ---

    def _ensure_subpath(self, point: complex) -> complex:
        """Current point, or `point` when no subpath has been started."""
        if self._current is None:
            self._current = point
        return self._current

    def move_to(self, x: float, y: float) -> None:
        self._current = complex(x, y)

    def line_to(self, x: float, y: float) -> None:
        end = complex(x, y)
        start = self._ensure_subpath(end)
        if start != end:
            self._segments.append(Line(start, end))
        self._current = end

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        c1 = complex(c1x, c1y)
        end = complex(x, y)
        start = self._ensure_subpath(c1)
        self._segments.append(CubicBezier(start, c1, complex(c2x, c2y), end))
        self._current = end

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        control = complex(cx, cy)
        end = complex(x, y)
        start = self._ensure_subpath(control)
        self._segments.append(QuadraticBezier(start, control, end))
        self._current = end

    def arc(
        self,
        cx: float,
        cy: float,
        r: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        if r < 0:
            raise ValueError(f"Arc radius must be non-negative, got {r}")
        center = complex(cx, cy)
        start = center + r * complex(math.cos(start_angle), math.sin(start_angle))

        # A canvas arc joins the current point to its start with a line
        self.line_to(start.real, start.imag)

        sweep = arc_sweep(start_angle, end_angle, anticlockwise)
        if r == 0 or abs(sweep) < _MIN_SWEEP:
            logger.debug("Skipping degenerate arc r=%s sweep=%s", r, sweep)
            return

        radius = complex(r, r)
        positive = sweep > 0
        if abs(sweep) >= _TAU - _MIN_SWEEP:
            # SVG arcs cannot start and end on the same point; draw two halves
            mid_angle = start_angle + sweep / 2
            mid = center + r * complex(math.cos(mid_angle), math.sin(mid_angle))
            self._segments.append(Arc(start, radius, 0.0, False, positive, mid))
            self._segments.append(Arc(mid, radius, 0.0, False, positive, start))
            self._current = start
            return

        final_angle = start_angle + sweep
        end = center + r * complex(math.cos(final_angle), math.sin(final_angle))
        self._segments.append(Arc(start, radius, 0.0, abs(sweep) > math.pi, positive, end))
        self._current = end

    # --- Text ---

    def _add_text(self, text: str, x: float, y: float, kind: str) -> None:
        self._texts.append(TextRun(text, x, y, self.font, self.text_align, kind))

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._add_text(text, x, y, "fill")

    def stroke_text(self, text: str, x: float, y: float) -> None:
        self._add_text(text, x, y, "stroke")

    def measure_text(self, text: str) -> TextMetrics:
        return TextMetrics(width=measure_text_width(text, parse_font(self.font)))

    # --- Output ---

    @property
    def path(self) -> Path:
        return Path(*self._segments)

    @property
    def texts(self) -> list[TextRun]:
        return list(self._texts)

    def sample_points(self, num_samples: int = 200) -> list[tuple[float, float]]:
        """Points spread evenly in parameter along everything drawn so far."""
        path = self.path
        if not path:
            return []
        return [(pt.real, pt.imag) for pt in (path.point(t) for t in np.linspace(0, 1, num_samples))]

    def path_data(self) -> str:
        """SVG `d` attribute for all segments, new subpaths started with M."""
        cmds: list[str] = []
        pen: complex | None = None
        for seg in self._segments:
            if pen is None or seg.start != pen:
                cmds += "M", _fmt(seg.start)
            if isinstance(seg, Line):
                cmds += "L", _fmt(seg.end)
            elif isinstance(seg, CubicBezier):
                cmds += "C", _fmt(seg.control1), _fmt(seg.control2), _fmt(seg.end)
            elif isinstance(seg, QuadraticBezier):
                cmds += "Q", _fmt(seg.control), _fmt(seg.end)
            elif isinstance(seg, Arc):
                cmds += (
                    "A",
                    _fmt(seg.radius),
                    f"{_num(seg.rotation)} {seg.large_arc:d},{seg.sweep:d}",
                    _fmt(seg.end),
                )
            pen = seg.end
        return " ".join(cmds)

    def to_svg(
        self,
        fill: str = "none",
        stroke: str = "black",
        stroke_width: float = 1.0,
        title: str = "",
    ) -> str:
        """Complete SVG document with one path element and any text runs."""
        elements: list[dict[str, Any]] = []
        if self._segments:
            elements.append(
                {
                    "tag": "path",
                    "d": self.path_data(),
                    "fill": fill,
                    "stroke": stroke,
                    "stroke-width": _num(stroke_width),
                }
            )
        for run in self._texts:
            elements.append(_text_element(run, fill, stroke, stroke_width))
        return serialize_svg(elements, self.width, self.height, title=title)


def _num(x: float) -> str:
    return f"{x:.{settings.vectorpath_svg_precision}g}"


def _fmt(p: complex) -> str:
    return f"{_num(p.real)},{_num(p.imag)}"


def _text_element(run: TextRun, fill: str, stroke: str, stroke_width: float) -> dict[str, Any]:
    spec = parse_font(run.font)
    elem: dict[str, Any] = {
        "tag": "text",
        "x": _num(run.x),
        "y": _num(run.y),
        "font-family": html.escape(", ".join(spec.family) or settings.vectorpath_default_font),
        "font-size": _num(spec.size),
        "font-style": spec.style,
        "font-variant": spec.variant,
        "font-weight": spec.weight,
        "text-anchor": _TEXT_ANCHORS.get(run.align, "start"),
        "text": html.escape(run.text),
    }
    if run.kind == "fill":
        elem["fill"] = stroke if fill == "none" else fill
    else:
        elem.update({"fill": "none", "stroke": stroke, "stroke-width": _num(stroke_width)})
    return elem


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 100.0,
    canvas_h: float = 100.0,
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_num(canvas_w)} {_num(canvas_h)}" xmlns="http://www.w3.org/2000/svg">',
    ]

    if title:
        lines.append(f"  <title>{html.escape(title)}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        text = elem.get("text")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "text")}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        if text is None:
            lines.append(f"  <{tag} {attr_str} />")
        else:
            lines.append(f"  <{tag} {attr_str}>{text}</{tag}>")

    lines.append("</svg>")
    return "\n".join(lines)
