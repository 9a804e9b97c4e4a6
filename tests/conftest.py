"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from vectorpath.models.edges import CubicEdge
from vectorpath.paths.path import Path
from vectorpath.paths.simple_path import SimplePath
from vectorpath.surface.recording import RecordingSurface

SQUARE_POINTS = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


def assert_points_close(actual, expected, abs_tol: float = 1e-9) -> None:
    actual = list(actual)
    expected = list(expected)
    assert len(actual) == len(expected)
    for (ax, ay), (ex, ey) in zip(actual, expected):
        assert math.isclose(ax, ex, abs_tol=abs_tol), f"{(ax, ay)} != {(ex, ey)}"
        assert math.isclose(ay, ey, abs_tol=abs_tol), f"{(ax, ay)} != {(ex, ey)}"


def path_points(path: Path) -> list[tuple[float, float]]:
    """Every endpoint and control point, in edge order."""
    pts = [path.origin]
    for e in path.edges:
        pts.append(e.start)
        if isinstance(e, CubicEdge):
            pts += [e.control1, e.control2]
        pts.append(e.end)
    return pts


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def square_path() -> Path:
    """Closed 10x10 square of line edges."""
    path = Path.start_at(SQUARE_POINTS[0])
    for pt in SQUARE_POINTS[1:]:
        path = path.add_line_to(pt)
    return path.add_line_to(SQUARE_POINTS[0])


@pytest.fixture
def curvy_path() -> Path:
    """Closed path mixing lines and cubics."""
    return (
        Path.start_at((0, 0))
        .add_line_to((10, 0))
        .add_curve_to((10, 10), curve_size=0.5, twist=0.3)
        .add_line_to((0, 10))
        .add_curve_to((0, 0), polarity=-1, bulbousness=0.7, curve_angle=0.2)
    )


@pytest.fixture
def square_simple() -> SimplePath:
    return SimplePath.with_points(SQUARE_POINTS).close()
