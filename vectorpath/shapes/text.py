"""Text runs, vertically centred on their anchor.

Fixed sizing uses `size` as the font size in pixels. Fitted sizing treats
`size` as the target width: the text is measured at 1px and the font size
rescaled so the rendered width matches.
"""

from __future__ import annotations

import enum
import logging
from typing import Literal

from vectorpath.errors import PreconditionViolation
from vectorpath.shapes.base import Shape
from vectorpath.surface.base import DrawingSurface

logger = logging.getLogger(__name__)

TextSizing = Literal["fixed", "fitted"]
TextHorizontalAlign = Literal["start", "end", "left", "right", "center"]
TextKind = Literal["fill", "stroke"]
FontStyle = Literal["normal", "italic", "oblique"]
FontVariant = Literal["normal", "small-caps"]
FontWeight = Literal[
    "normal", "bold", "bolder", "lighter",
    "100", "200", "300", "400", "500", "600", "700", "800", "900",
]


class Font(str, enum.Enum):
    ARIAL = "Arial"
    HELVETICA = "Helvetica"
    TIMES_NEW_ROMAN = "Times New Roman"
    TIMES = "Times"
    COURIER_NEW = "Courier New"
    COURIER = "Courier"
    PALATINO = "Palatino"
    GARAMOND = "Garamond"
    BOOKMAN = "Bookman"
    AVANT_GARDE = "Avant Garde"
    SYSTEM = "-apple-system, BlinkMacSystemFont, Segoe UI, Roboto, Helvetica, Arial, sans-serif"


class Text(Shape):
    text: str
    size: float
    kind: TextKind = "fill"
    sizing: TextSizing = "fixed"
    align: TextHorizontalAlign = "center"
    font: Font = Font.SYSTEM
    style: FontStyle = "normal"
    weight: FontWeight = "normal"
    variant: FontVariant = "normal"

    def css_font(self, px: float) -> str:
        return f"{self.style} {self.variant} {self.weight} {px}px {self.font.value}"

    def font_size_in(self, surface: DrawingSurface) -> float:
        """Font size the text renders at on `surface`; measures when fitted."""
        if self.sizing == "fixed":
            return self.size
        surface.font = self.css_font(1)
        unit_width = surface.measure_text(self.text).width
        if unit_width <= 0:
            raise PreconditionViolation(f"Cannot fit text with zero measured width: {self.text!r}")
        return self.size / unit_width

    def text_in(self, surface: DrawingSurface) -> None:
        surface.text_align = self.align
        px = self.font_size_in(surface)
        surface.font = self.css_font(px)
        x, y = self.at
        y += px / 2
        logger.debug("Text %r at %.4gpx (%s)", self.text, px, self.sizing)
        if self.kind == "fill":
            surface.fill_text(self.text, x, y)
        else:
            surface.stroke_text(self.text, x, y)
