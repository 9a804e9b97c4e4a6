"""Shared shape protocols and the frozen model every generator builds on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from vectorpath.paths.simple_path import SimplePath
from vectorpath.surface.base import DrawingSurface
from vectorpath.surface.recording import RecordingSurface


@runtime_checkable
class Traceable(Protocol):
    def trace_in(self, surface: DrawingSurface) -> None: ...


@runtime_checkable
class Textable(Protocol):
    def text_in(self, surface: DrawingSurface) -> None: ...


class Shape(BaseModel):
    """Immutable, validated shape configuration."""

    model_config = ConfigDict(frozen=True)

    at: tuple[float, float]


def trace_simple_path(traceable: Traceable) -> SimplePath:
    """Replay a straight-edged trace into a SimplePath of the visited points."""
    surface = RecordingSurface()
    traceable.trace_in(surface)
    return SimplePath.with_points(surface.points)
