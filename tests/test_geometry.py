"""Tests for radargraph.core.geometry pure functions.

NO Kivy imports - all tests run in headless CI.
"""

import math

import pytest

from radargraph.core.geometry import (
    DEFAULT_OFFSET,
    closed,
    distance,
    exterior_angle,
    flatten,
    gradation_ratio,
    gradation_ratios,
    regular_polygon,
    scale_polygon,
    scale_toward,
    unflatten,
    vertex_for,
)
from radargraph.core.models import Point

ORIGIN = Point(0.0, 0.0)


class TestVertexFor:
    def test_axis_0_at_top(self):
        """With the default offset axis 0 is at 12 o'clock (y < center, y-down)."""
        v = vertex_for(0, 5, 100, ORIGIN)
        assert v.x == pytest.approx(0, abs=1e-9)
        assert v.y == pytest.approx(-100)

    def test_respects_center(self):
        v = vertex_for(0, 4, 50, Point(10, 20))
        assert v.x == pytest.approx(10, abs=1e-9)
        assert v.y == pytest.approx(-30)

    def test_all_vertices_equidistant(self):
        for count in range(1, 12):
            for i in range(count):
                assert distance(vertex_for(i, count, 100, ORIGIN), ORIGIN) == pytest.approx(100)

    @pytest.mark.parametrize("count", [3, 5, 6, 8])
    def test_consecutive_vertices_evenly_spaced(self, count):
        """Consecutive vertices are 360/N degrees apart, clockwise on screen."""
        pts = [vertex_for(i, count, 100, ORIGIN) for i in range(count)]
        for i in range(count):
            a1 = math.atan2(pts[i].y, pts[i].x)
            a2 = math.atan2(pts[(i + 1) % count].y, pts[(i + 1) % count].x)
            diff = (a2 - a1) % (2 * math.pi)
            assert diff == pytest.approx(2 * math.pi / count, abs=1e-9)

    def test_five_axes_second_vertex_upper_right(self):
        v = vertex_for(1, 5, 100, ORIGIN)
        assert v.x > 0
        assert v.y < 0

    def test_custom_offset(self):
        """Offset 0 puts axis 0 at 3 o'clock."""
        v = vertex_for(0, 4, 10, ORIGIN, 0.0)
        assert v.x == pytest.approx(10)
        assert v.y == pytest.approx(0, abs=1e-9)

    def test_exterior_angle(self):
        assert exterior_angle(5) == pytest.approx(math.radians(72))
        assert exterior_angle(1) == pytest.approx(2 * math.pi)


class TestRegularPolygon:
    def test_zero_edges_is_empty(self):
        assert regular_polygon(0, 100, ORIGIN) == ()

    def test_negative_edges_is_empty(self):
        assert regular_polygon(-3, 100, ORIGIN) == ()

    def test_single_edge_is_one_point_at_top(self):
        pts = regular_polygon(1, 100, ORIGIN)
        assert len(pts) == 1
        assert pts[0].y == pytest.approx(-100)

    def test_unclosed(self):
        pts = regular_polygon(5, 100, ORIGIN)
        assert len(pts) == 5
        assert pts[0] != pts[-1]

    def test_vertically_symmetric(self):
        """Vertex i and vertex N-i mirror each other across the vertical axis."""
        pts = regular_polygon(5, 100, ORIGIN, DEFAULT_OFFSET)
        for i in range(1, 5):
            assert pts[i].x == pytest.approx(-pts[5 - i].x)
            assert pts[i].y == pytest.approx(pts[5 - i].y)


class TestGradations:
    def test_three_gradations(self):
        assert gradation_ratios(3) == pytest.approx((0.25, 0.5, 0.75))

    def test_zero_gradations(self):
        assert gradation_ratios(0) == ()

    def test_negative_gradations(self):
        assert gradation_ratios(-2) == ()

    @pytest.mark.parametrize("count", range(1, 11))
    def test_ratios_strictly_inside_and_increasing(self, count):
        ratios = gradation_ratios(count)
        assert len(ratios) == count
        assert all(0 < r < 1 for r in ratios)
        assert list(ratios) == sorted(set(ratios))

    def test_gradation_ratio_single(self):
        assert gradation_ratio(0, 1) == pytest.approx(0.5)

    def test_scaled_ring_radius(self):
        outer = regular_polygon(5, 100, ORIGIN)
        ring = scale_polygon(outer, ORIGIN, gradation_ratio(1, 3))
        for p in ring:
            assert distance(p, ORIGIN) == pytest.approx(50)


class TestScaleToward:
    def test_ratio_zero_is_center(self):
        assert scale_toward(Point(1, 2), Point(11, 22), 0.0) == Point(1, 2)

    def test_ratio_one_is_target(self):
        assert scale_toward(Point(1, 2), Point(11, 22), 1.0) == pytest.approx(Point(11, 22))

    def test_ratio_half(self):
        assert scale_toward(Point(0, 0), Point(10, -20), 0.5) == pytest.approx(Point(5, -10))

    def test_ratio_above_one_overshoots(self):
        assert scale_toward(Point(0, 0), Point(0, -100), 1.5) == pytest.approx(Point(0, -150))


class TestFlatten:
    def test_flatten(self):
        assert flatten([Point(1, 2), Point(3, 4)]) == [1, 2, 3, 4]

    def test_unflatten(self):
        assert unflatten([1, 2, 3, 4]) == (Point(1, 2), Point(3, 4))

    def test_unflatten_ignores_trailing_odd_value(self):
        assert unflatten([1, 2, 3]) == (Point(1, 2),)

    def test_closed_repeats_first_point(self):
        assert closed([1, 2, 3, 4, 5, 6]) == [1, 2, 3, 4, 5, 6, 1, 2]

    def test_closed_empty(self):
        assert closed([]) == []
