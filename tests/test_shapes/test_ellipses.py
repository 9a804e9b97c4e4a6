"""Tests for Ellipse and Circle."""

from __future__ import annotations

import math

import pytest

from tests.conftest import assert_points_close
from vectorpath.shapes.ellipses import KAPPA, Align, Circle, Ellipse
from vectorpath.surface.svg import SvgSurface


def test_centered_ellipse_quadrant_points(surface):
    Ellipse(at=(0, 0), w=6, h=4).trace_in(surface)
    assert surface.names() == ["move_to"] + ["bezier_curve_to"] * 4
    assert_points_close(surface.points, [(0, -2), (3, 0), (0, 2), (-3, 0), (0, -2)])


def test_first_quadrant_controls(surface):
    Ellipse(at=(0, 0), w=6, h=4).trace_in(surface)
    args = surface.commands[1].args
    assert args == pytest.approx((KAPPA * 3, -2, 3, -KAPPA * 2, 3, 0))


def test_top_left_alignment_offsets_centre(surface):
    ellipse = Ellipse(at=(0, 0), w=6, h=4, align=Align.TOP_LEFT)
    assert ellipse.center == (3.0, 2.0)
    ellipse.trace_in(surface)
    assert_points_close([surface.first_point], [(3, 0)])


def test_align_accepts_string():
    assert Ellipse(at=(0, 0), w=1, h=1, align="top_left").align is Align.TOP_LEFT


def test_circle_sets_both_axes():
    circle = Circle(at=(1, 1), r=2.5)
    assert circle.w == circle.h == 5


def test_circle_matches_ellipse_trace(surface):
    Circle(at=(4, 4), r=3).trace_in(surface)
    expected = [c.args for c in surface.commands]
    surface.clear()
    Ellipse(at=(4, 4), w=6, h=6).trace_in(surface)
    assert [c.args for c in surface.commands] == expected


def test_circle_bezier_stays_near_radius():
    svg = SvgSurface()
    Circle(at=(0, 0), r=10).trace_in(svg)
    for x, y in svg.sample_points(100):
        assert math.hypot(x, y) == pytest.approx(10, rel=3e-4)
