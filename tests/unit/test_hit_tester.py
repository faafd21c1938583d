"""
Unit tests for hit testing.
"""

import pytest
from models.primitives import LinePrimitive, CirclePrimitive, EllipsePrimitive
from services.hit_tester import (
    stroke_tolerance, distance_to_segment,
    hit_test_line, hit_test_circle, hit_test_ellipse,
)


class TestLineHits:
    """Line tolerance is stroke_width + 2."""

    @pytest.fixture
    def line(self):
        return LinePrimitive(0, 0, 100, 0, stroke_width=1)

    def test_tolerance(self):
        assert stroke_tolerance(1) == 3
        assert stroke_tolerance(4) == 6

    def test_within_tolerance(self, line):
        assert hit_test_line(line, 50, 3)

    def test_outside_tolerance(self, line):
        assert not hit_test_line(line, 50, 3.5)

    def test_beyond_endpoint_uses_endpoint_distance(self, line):
        assert hit_test_line(line, 103, 0)
        assert not hit_test_line(line, 104, 0)

    def test_degenerate_segment(self):
        point = LinePrimitive(5, 5, 5, 5)
        assert distance_to_segment(8, 9, 5, 5, 5, 5) == pytest.approx(5.0)
        assert hit_test_line(point, 7, 5)
        assert not hit_test_line(point, 9, 5)

    def test_wider_stroke_hits_more(self):
        thin = LinePrimitive(0, 0, 100, 0, stroke_width=1)
        thick = LinePrimitive(0, 0, 100, 0, stroke_width=5)
        for y in (0, 2, 3, 4, 6, 7, 8):
            if hit_test_line(thin, 50, y):
                assert hit_test_line(thick, 50, y)
        assert hit_test_line(thick, 50, 7)


class TestCircleHits:
    """Circle hits are on the ring, not the disc."""

    @pytest.fixture
    def circle(self):
        return CirclePrimitive(0, 0, 10, stroke_width=1)

    def test_on_ring(self, circle):
        assert hit_test_circle(circle, 10, 0)
        assert hit_test_circle(circle, 0, -12)

    def test_ring_tolerance(self, circle):
        assert hit_test_circle(circle, 13, 0)
        assert not hit_test_circle(circle, 13.5, 0)

    def test_center_misses(self, circle):
        assert not hit_test_circle(circle, 0, 0)

    def test_solid_fill_does_not_widen(self):
        circle = CirclePrimitive(0, 0, 10, fill_mode="solid")
        assert not hit_test_circle(circle, 0, 0)

    def test_wider_stroke_hits_more(self):
        thin = CirclePrimitive(0, 0, 10, stroke_width=1)
        thick = CirclePrimitive(0, 0, 10, stroke_width=5)
        for x in (0, 3, 6, 9, 10, 12, 13, 14, 16, 17, 18):
            if hit_test_circle(thin, x, 0):
                assert hit_test_circle(thick, x, 0)
        assert hit_test_circle(thick, 17, 0)
        assert not hit_test_circle(thin, 17, 0)


class TestEllipseHits:
    """Ellipses use a fixed normalized tolerance of 0.2."""

    def test_on_axis(self, outline_ellipse):
        assert hit_test_ellipse(outline_ellipse, 120, 80)
        assert hit_test_ellipse(outline_ellipse, 100, 90)

    def test_center_misses(self, outline_ellipse):
        assert not hit_test_ellipse(outline_ellipse, 100, 80)

    def test_normalized_tolerance(self, outline_ellipse):
        assert hit_test_ellipse(outline_ellipse, 121, 80)
        assert not hit_test_ellipse(outline_ellipse, 122, 80)

    def test_stroke_width_ignored(self):
        wide = EllipsePrimitive(100, 80, 20, 10, stroke_width=10)
        assert not hit_test_ellipse(wide, 122, 80)

    def test_custom_tolerance(self, outline_ellipse):
        assert hit_test_ellipse(outline_ellipse, 122, 80, tolerance=0.25)

    @pytest.mark.parametrize("rx,ry", [(0, 10), (10, 0), (0, 0)])
    def test_zero_radius_never_hit(self, rx, ry):
        ellipse = EllipsePrimitive(0, 0, rx, ry)
        assert not hit_test_ellipse(ellipse, 0, 0)
        assert not hit_test_ellipse(ellipse, rx, ry)
