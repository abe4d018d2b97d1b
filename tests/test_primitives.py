"""Tests for line segment and circular arc curves."""

from math import pi, sqrt

import pytest

from arclength.curve import reference_length
from arclength.geom import dist, mag, point, vclose
from arclength.primitives import CircularArc, LineSegment


class TestLineSegment:
    def test_evaluate(self):
        seg = LineSegment(point(0, 0), point(3, 4))
        assert seg.length() == pytest.approx(5.0)
        assert vclose(seg.point_at(0.5), point(1.5, 2))
        assert seg.derivative_at(0.3) == [3, 4, 0, 0.0]
        assert seg.derivative_magnitude(0.7) == pytest.approx(5.0)

    def test_speed_bounds_exact(self):
        seg = LineSegment([1, 1], [4, 5])
        lo, hi = seg.speed_bounds()
        assert lo == hi == pytest.approx(5.0)
        assert seg.max_second_derivative_magnitude() == 0.0

    def test_bisect(self):
        seg = LineSegment(point(0, 0), point(10, 0))
        left, right = seg.bisect()
        assert vclose(left.point_at(1.0), point(5, 0))
        assert vclose(right.point_at(0.0), point(5, 0))
        assert left.length() == pytest.approx(5.0)
        assert right.length() == pytest.approx(5.0)

    def test_immutable(self):
        seg = LineSegment(point(0, 0), point(1, 0))
        with pytest.raises(AttributeError):
            seg.start = (1, 1, 0, 1)

    def test_bbox(self):
        seg = LineSegment(point(2, -1), point(-1, 3, 2))
        assert seg.bbox() == [[-1, -1, 0, 1.0], [2, 3, 2, 1.0]]


class TestCircularArc:
    def test_evaluate(self):
        arc = CircularArc(point(1, 1), 2.0, 0.0, 90.0)
        assert vclose(arc.point_at(0.0), point(3, 1))
        assert vclose(arc.point_at(1.0), point(1, 3))
        assert vclose(arc.point_at(0.5), point(1 + sqrt(2), 1 + sqrt(2)))
        assert arc.length() == pytest.approx(pi)

    def test_clockwise(self):
        arc = CircularArc(point(0, 0), 1.0, 90.0, -180.0)
        assert vclose(arc.point_at(0.5), point(1, 0))
        assert arc.length() == pytest.approx(pi)
        d = arc.derivative_at(0.5)
        assert d[1] < 0

    def test_constant_speed(self):
        arc = CircularArc(point(0, 0), 3.0, 10.0, 250.0)
        for i in range(11):
            assert mag(arc.derivative_at(i / 10)) == pytest.approx(arc.length())
        lo, hi = arc.speed_bounds()
        assert lo == hi == pytest.approx(arc.length())

    def test_second_derivative(self):
        arc = CircularArc(point(0, 0), 2.0, 0.0, 180.0)
        assert arc.max_second_derivative_magnitude() == pytest.approx(2.0 * pi * pi)

    def test_bisect(self):
        arc = CircularArc(point(0, 0), 1.0, 0.0, 270.0)
        left, right = arc.bisect()
        assert vclose(left.point_at(1.0), arc.point_at(0.5))
        assert vclose(right.point_at(0.5), arc.point_at(0.75))
        assert left.length() + right.length() == pytest.approx(arc.length())

    def test_reference_length(self):
        arc = CircularArc(point(0, 0), 3.0, 0.0, 270.0)
        assert reference_length(arc) == pytest.approx(arc.length(), abs=1e-12)
        assert reference_length(arc, 0.25, 0.5) == pytest.approx(arc.length() / 4, abs=1e-12)

    def test_bbox(self):
        arc = CircularArc(point(0, 0), 2.0, 45.0, 90.0)
        box = arc.bbox()
        assert box[1][1] == pytest.approx(2.0)
        assert box[0][0] == pytest.approx(-sqrt(2))
        assert box[1][0] == pytest.approx(sqrt(2))
        assert box[0][1] == pytest.approx(sqrt(2))

    def test_full_circle_bbox(self):
        box = CircularArc(point(1, 1), 1.0).bbox()
        assert vclose(box[0], point(0, 0))
        assert vclose(box[1], point(2, 2))

    @pytest.mark.parametrize('radius', [0, -1.0, 'x'])
    def test_bad_radius(self, radius):
        with pytest.raises(ValueError):
            CircularArc(point(0, 0), radius)


def test_reference_length_line():
    seg = LineSegment(point(0, 0), point(6, 8))
    assert reference_length(seg) == pytest.approx(10.0)
    assert reference_length(seg, 0.5, 0.5) == 0.0
    assert reference_length(seg, 1.0, 0.5) == pytest.approx(-5.0)
    assert dist(seg.point_at(0.0), seg.point_at(1.0)) == pytest.approx(10.0)
