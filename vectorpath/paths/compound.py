"""CompoundPath: several traceables emitted as one sequence."""

from __future__ import annotations

from collections.abc import Iterator

from vectorpath.shapes.base import Traceable
from vectorpath.surface.base import DrawingSurface


class CompoundPath:
    __slots__ = ("_paths",)

    def __init__(self, paths: tuple[Traceable, ...]) -> None:
        self._paths = paths

    @classmethod
    def with_paths(cls, *paths: Traceable) -> CompoundPath:
        return cls(tuple(paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Traceable]:
        return iter(self._paths)

    def trace_in(self, surface: DrawingSurface) -> None:
        for path in self._paths:
            path.trace_in(surface)
