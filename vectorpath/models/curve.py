"""Curve shaping knobs for Path.add_curve_to."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal


@dataclass(frozen=True)
class CurveConfig:
    """Independent knobs deriving a cubic's control points from its chord."""

    # How far the bulge anchor sits from the chord midpoint, in half-chords
    curve_size: float = 1.0
    # Which side of the chord the curve bows towards
    polarity: Literal[1, -1] = 1
    # Spread between the two control points, in half-chords
    bulbousness: float = 1.0
    # Rotation (radians) of the bulge direction away from the chord normal
    curve_angle: float = 0.0
    # Rotation (radians) of the control-point spread
    twist: float = 0.0

    def flipped(self) -> CurveConfig:
        """Same curve bowing to the opposite side."""
        return replace(self, polarity=-self.polarity)
