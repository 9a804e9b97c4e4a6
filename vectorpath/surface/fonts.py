"""CSS font shorthand parsing and text measurement (matplotlib font metrics)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import text_to_path

from vectorpath.config import settings

logger = logging.getLogger(__name__)

# "<style> <variant> <weight> <size>px <family list>"; only size and family are required
_FONT_RE = re.compile(
    r"^\s*(?P<prefix>.*?)\s*(?P<size>\d*\.?\d+(?:[eE][-+]?\d+)?)px\s*(?P<family>.*?)\s*$"
)

# "normal" is skipped since it may stand for the style, the variant or the weight
_STYLES = {"italic", "oblique"}
_VARIANTS = {"small-caps"}
# CSS relative weights have no matplotlib name
_WEIGHT_ALIASES = {"bolder": "bold", "lighter": "light"}


@dataclass(frozen=True)
class FontSpec:
    size: float
    family: tuple[str, ...] = ()
    style: str = "normal"
    variant: str = "normal"
    weight: str = "normal"

    def to_css(self) -> str:
        families = ", ".join(self.family) or settings.vectorpath_default_font
        return f"{self.style} {self.variant} {self.weight} {self.size}px {families}"


def parse_font(font: str) -> FontSpec:
    """Parse a canvas-style font string. Raises ValueError without a px size."""
    match = _FONT_RE.match(font)
    if match is None:
        raise ValueError(f"Font string has no pixel size: {font!r}")
    style = variant = weight = "normal"
    for token in match.group("prefix").split():
        if token == "normal":
            continue
        if token in _STYLES:
            style = token
        elif token in _VARIANTS:
            variant = token
        else:
            weight = token
    family = tuple(
        name.strip().strip("'\"")
        for name in match.group("family").split(",")
        if name.strip()
    )
    return FontSpec(
        size=float(match.group("size")),
        family=family,
        style=style,
        variant=variant,
        weight=weight,
    )


@lru_cache(maxsize=64)
def _font_properties(spec: FontSpec) -> FontProperties:
    families = list(spec.family) or [settings.vectorpath_default_font]
    return FontProperties(
        family=families,
        style=spec.style,
        variant=spec.variant,
        weight=_WEIGHT_ALIASES.get(spec.weight, spec.weight),
        size=spec.size,
    )


def measure_text_width(text: str, spec: FontSpec) -> float:
    """Advance width of `text` set in `spec`, in the same units as its size."""
    if not text:
        return 0.0
    width, _, _ = text_to_path.get_text_width_height_descent(
        text, _font_properties(spec), ismath=False
    )
    logger.debug("Measured %r at %spx: %.4f", text, spec.size, width)
    return float(width)
