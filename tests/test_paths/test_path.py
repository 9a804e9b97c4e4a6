"""Tests for the edge-chain Path."""

import math

import pytest

from tests.conftest import assert_points_close, path_points
from vectorpath.errors import DivisionByZero, InvalidRange, PreconditionViolation
from vectorpath.models.curve import CurveConfig
from vectorpath.models.edges import CubicEdge, LineEdge
from vectorpath.paths.path import Path


def test_start_at_has_no_edges():
    path = Path.start_at([3, 4])
    assert len(path) == 0
    assert path.current_point == (3.0, 4.0)


def test_builder_is_persistent():
    base = Path.start_at((0, 0))
    extended = base.add_line_to((1, 0))
    assert len(base) == 0
    assert len(extended) == 1
    assert extended.current_point == (1.0, 0.0)


def test_edges_chain(curvy_path):
    for prev, nxt in zip(curvy_path.edges, curvy_path.edges[1:]):
        assert prev.end == nxt.start
    assert curvy_path.edges[0].start == curvy_path.origin


def test_add_curve_to_default_controls():
    path = Path.start_at((0, 0)).add_curve_to((10, 0))
    edge = path.edges[0]
    assert isinstance(edge, CubicEdge)
    assert_points_close([edge.control1, edge.control2], [(0, -5), (10, -5)])


def test_add_curve_to_negative_polarity_bows_other_side():
    edge = Path.start_at((0, 0)).add_curve_to((10, 0), polarity=-1).edges[0]
    assert_points_close([edge.control1, edge.control2], [(0, 5), (10, 5)])


def test_add_curve_to_twist_rotates_spread():
    edge = Path.start_at((0, 0)).add_curve_to((10, 0), twist=math.pi / 2).edges[0]
    assert_points_close([edge.control1, edge.control2], [(5, 0), (5, -10)])


def test_add_curve_to_size_and_bulbousness():
    edge = Path.start_at((0, 0)).add_curve_to((10, 0), curve_size=0.5, bulbousness=0.2).edges[0]
    assert_points_close([edge.control1, edge.control2], [(4, -2.5), (6, -2.5)])


def test_add_curve_to_accepts_config_and_overrides():
    cfg = CurveConfig(polarity=-1)
    a = Path.start_at((0, 0)).add_curve_to((10, 0), cfg).edges[0]
    b = Path.start_at((0, 0)).add_curve_to((10, 0), cfg, polarity=1).edges[0]
    assert a.control1[1] > 0
    assert b.control1[1] < 0


def test_add_curve_to_current_point_raises():
    with pytest.raises(DivisionByZero):
        Path.start_at((1, 1)).add_curve_to((1, 1))


def test_centroid(square_path):
    assert square_path.centroid == pytest.approx((5.0, 5.0))


def test_centroid_empty_raises():
    with pytest.raises(PreconditionViolation):
        Path.start_at((0, 0)).centroid


def test_is_closed(square_path):
    assert square_path.is_closed
    assert not Path.start_at((0, 0)).add_line_to((1, 1)).is_closed


def test_bbox_includes_controls():
    path = Path.start_at((0, 0)).add_curve_to((10, 0))
    assert path.bbox == pytest.approx((0.0, -5.0, 10.0, 0.0))


def test_transformed_identity(curvy_path):
    assert curvy_path.transformed(lambda p: p) == curvy_path


def test_transformed_preserves_edge_kinds(curvy_path):
    moved = curvy_path.transformed(lambda p: (p[0] * 2, p[1] - 1))
    assert [type(e) for e in moved.edges] == [type(e) for e in curvy_path.edges]


def test_moved(square_path):
    moved = square_path.moved((1, 2))
    assert moved.origin == (1.0, 2.0)
    assert moved.centroid == pytest.approx((6.0, 7.0))


def test_rotation_round_trip(curvy_path):
    back = curvy_path.rotated(0.7).rotated(-0.7)
    assert_points_close(path_points(back), path_points(curvy_path))


def test_rotated_quarter_turn(square_path):
    rotated = square_path.rotated(math.pi / 2)
    assert rotated.origin == pytest.approx((10.0, 0.0))


def test_scaled_identity_and_centroid(curvy_path):
    assert_points_close(path_points(curvy_path.scaled(1)), path_points(curvy_path))
    assert curvy_path.scaled(2.5).centroid == pytest.approx(curvy_path.centroid)


def test_reversed(curvy_path):
    rev = curvy_path.reversed
    assert rev.origin == curvy_path.current_point
    assert rev.current_point == curvy_path.origin
    first_cubic = curvy_path.edges[-1]
    assert rev.edges[0] == CubicEdge(
        start=first_cubic.end,
        end=first_cubic.start,
        control1=first_cubic.control2,
        control2=first_cubic.control1,
    )
    assert rev.reversed == curvy_path


def test_segmented(square_path):
    wedges = square_path.segmented
    assert len(wedges) == 4
    for edge, wedge in zip(square_path.edges, wedges):
        assert len(wedge) == 3
        assert wedge.edges[0] == edge
        assert wedge.edges[1] == LineEdge(start=edge.end, end=(5.0, 5.0))
        assert wedge.edges[2] == LineEdge(start=(5.0, 5.0), end=edge.start)


def test_segmented_needs_two_edges():
    with pytest.raises(PreconditionViolation):
        Path.start_at((0, 0)).add_line_to((1, 0)).segmented


def test_exploded_defaults_push_outward(square_path):
    center = square_path.centroid
    for wedge, exploded in zip(square_path.segmented, square_path.exploded()):
        wc = wedge.centroid
        ec = exploded.centroid
        assert ec == pytest.approx((center[0] + 1.2 * (wc[0] - center[0]), center[1] + 1.2 * (wc[1] - center[1])))


def test_exploded_unit_magnitude_is_segmented(curvy_path):
    for a, b in zip(curvy_path.exploded(magnitude=1.0), curvy_path.segmented):
        assert_points_close(path_points(a), path_points(b))


def test_exploded_scale_shrinks_wedges(square_path):
    wedge = square_path.exploded(magnitude=1.0, scale=0.5)[0]
    original = square_path.segmented[0]
    cx, cy = original.centroid
    sx, sy = original.origin
    assert wedge.centroid == pytest.approx((cx, cy))
    assert wedge.origin == pytest.approx((cx + 0.5 * (sx - cx), cy + 0.5 * (sy - cy)))


def test_exploded_needs_two_edges():
    with pytest.raises(PreconditionViolation):
        Path.start_at((0, 0)).exploded()


def test_subdivide_lines(square_path):
    half1, half2 = square_path.subdivide(1, 3)
    assert len(half1) + len(half2) == len(square_path) + 2
    assert half1.edges[:2] == square_path.edges[1:3]
    assert half2.edges[:2] == (square_path.edges[3], square_path.edges[0])
    for half in (half1, half2):
        assert isinstance(half.edges[-1], LineEdge)
        assert half.is_closed


def test_subdivide_from_zero(square_path):
    half1, half2 = square_path.subdivide(0, 1)
    assert len(half1) == 2
    assert len(half2) == 4
    assert half2.edges[-1].end == half2.origin


def test_subdivide_curved_halves_share_cut(square_path):
    half1, half2 = square_path.subdivide(1, 3, curve=CurveConfig(curve_size=0.4))
    cut1 = half1.edges[-1]
    cut2 = half2.edges[-1]
    assert isinstance(cut1, CubicEdge)
    assert isinstance(cut2, CubicEdge)
    assert half1.is_closed and half2.is_closed
    # Opposite polarity over the reversed chord lands on the same curve
    assert_points_close([cut2.control1, cut2.control2], [cut1.control2, cut1.control1])


@pytest.mark.parametrize("m, n", [(2, 2), (3, 1), (-1, 2), (1, 4), (0, 7)])
def test_subdivide_invalid_range(square_path, m, n):
    with pytest.raises(InvalidRange):
        square_path.subdivide(m, n)


def test_invalid_range_is_precondition_violation(square_path):
    with pytest.raises(PreconditionViolation):
        square_path.subdivide(3, 3)


def test_trace_in(surface):
    path = Path.start_at((0, 0)).add_line_to((10, 0)).add_curve_to((10, 10))
    path.trace_in(surface)
    assert surface.names() == ["move_to", "line_to", "bezier_curve_to"]
    cubic = path.edges[1]
    assert surface.commands[2].args == (*cubic.control1, *cubic.control2, 10.0, 10.0)


def test_trace_empty_path_moves_only(surface):
    Path.start_at((2, 3)).trace_in(surface)
    assert surface.names() == ["move_to"]
