"""vectorpath: vector path algebra and procedural shape generators."""

from vectorpath.config import configure_logging, settings
from vectorpath.errors import DivisionByZero, GeometryError, InvalidRange, PreconditionViolation
from vectorpath.models.curve import CurveConfig
from vectorpath.models.edges import CubicEdge, Edge, LineEdge
from vectorpath.paths.compound import CompoundPath
from vectorpath.paths.path import Path
from vectorpath.paths.simple_path import SimplePath
from vectorpath.shapes.arcs import Arc, HollowArc
from vectorpath.shapes.base import Textable, Traceable
from vectorpath.shapes.ellipses import Align, Circle, Ellipse
from vectorpath.shapes.hatching import Hatching
from vectorpath.shapes.polygons import RegularPolygon, Star
from vectorpath.shapes.rects import Rect, RoundedRect
from vectorpath.shapes.text import Font, Text
from vectorpath.surface.base import DrawingSurface, TextMetrics
from vectorpath.surface.recording import RecordingSurface
from vectorpath.surface.svg import SvgSurface

__all__ = [
    "Align",
    "Arc",
    "Circle",
    "CompoundPath",
    "CubicEdge",
    "CurveConfig",
    "DivisionByZero",
    "DrawingSurface",
    "Edge",
    "Ellipse",
    "Font",
    "GeometryError",
    "Hatching",
    "HollowArc",
    "InvalidRange",
    "LineEdge",
    "Path",
    "PreconditionViolation",
    "Rect",
    "RecordingSurface",
    "RegularPolygon",
    "RoundedRect",
    "SimplePath",
    "Star",
    "SvgSurface",
    "Text",
    "TextMetrics",
    "Textable",
    "Traceable",
    "configure_logging",
    "settings",
]
