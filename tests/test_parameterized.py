"""Tests for distance-based queries on parameterized curves."""

import dataclasses
from math import sqrt

import pytest

from arclength.bezier import cubic_bezier
from arclength.geom import dist, mag, point, vclose
from arclength.parameterization import build, length_at
from arclength.parameterized import ArcLengthParameterized, arc_length_parameterized
from arclength.primitives import CircularArc, LineSegment


class TestLine:
    def setup_method(self):
        self.param = arc_length_parameterized(LineSegment(point(0, 0), point(10, 0)), 1e-6)

    def test_total_length(self):
        assert self.param.total_length() == 10.0
        assert self.param.total_length() == length_at(self.param.parameterization, 1.0)

    def test_point_along(self):
        assert vclose(self.param.point_along(2.5), point(2.5, 0))
        assert vclose(self.param.point_along(0.0), point(0, 0))
        assert vclose(self.param.point_along(10.0), point(10, 0))
        assert self.param.point_along(-1.0) is None
        assert self.param.point_along(11.0) is None

    def test_tangent_along(self):
        assert self.param.tangent_along(3.0) == [1.0, 0.0, 0.0, 0.0]
        assert self.param.tangent_along(10.5) is None

    def test_midpoint(self):
        assert vclose(self.param.midpoint(), point(5, 0))

    def test_parameter_and_length(self):
        assert self.param.parameter_at(5.0) == 0.5
        assert self.param.length_at(0.5) == 5.0
        assert self.param.parameter_at(-0.1) is None
        assert self.param.length_at(1.5) is None


class TestArc:
    def setup_method(self):
        self.arc = CircularArc(point(0, 0), 2.0, 0.0, 90.0)
        self.param = arc_length_parameterized(self.arc, 1e-6)

    def test_point_along(self):
        half = self.param.total_length() / 2
        assert vclose(self.param.point_along(half), point(sqrt(2), sqrt(2)))

    def test_tangent_is_unit(self):
        for i in range(11):
            s = self.param.total_length() * i / 10
            tangent = self.param.tangent_along(s)
            assert mag(tangent) == pytest.approx(1.0)
            assert tangent[3] == 0.0
        start = self.param.tangent_along(0.0)
        assert start[0] == pytest.approx(0.0, abs=1e-12)
        assert start[1] == pytest.approx(1.0)

    def test_sample_along_evenly_spaced(self):
        pts = self.param.sample_along(6)
        assert len(pts) == 7
        assert vclose(pts[0], point(2, 0))
        assert vclose(pts[-1], point(0, 2))
        chords = [dist(a, b) for a, b in zip(pts, pts[1:])]
        for c in chords:
            assert c == pytest.approx(chords[0], abs=1e-9)


class TestBezier:
    def setup_method(self):
        self.curve = cubic_bezier(point(0, 0), point(1, 2), point(3, 2), point(4, 0))
        self.param = arc_length_parameterized(self.curve, 1e-2)

    def test_sample_along(self):
        pts = self.param.sample_along(8)
        assert len(pts) == 9
        assert vclose(pts[0], point(0, 0))
        assert vclose(pts[-1], point(4, 0))
        # symmetric curve: the middle sample sits on the axis of symmetry
        assert pts[4][0] == pytest.approx(2.0, abs=1e-3)

    def test_stations_match_lengths(self):
        total = self.param.total_length()
        for i in range(9):
            s = total * i / 8
            t = self.param.parameter_at(s)
            assert self.param.length_at(t) == pytest.approx(s, abs=1e-9)

    def test_tangents_along(self):
        tangents = self.param.tangents_along(4)
        assert len(tangents) == 5
        for tangent in tangents:
            assert mag(tangent) == pytest.approx(1.0)
        assert tangents[2][0] == pytest.approx(1.0, abs=1e-3)

    def test_empty_sampling(self):
        assert self.param.sample_along(0) == []
        assert self.param.tangents_along(-3) == []

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.param.curve = None


def test_cusp_has_no_tangent():
    curve = cubic_bezier(point(0, 0), point(1, 1), point(0, 1), point(1, 0))
    param = arc_length_parameterized(curve, 1e-3)
    s = param.length_at(0.5)
    assert param.parameter_at(s) == 0.5
    assert param.tangent_along(s) is None
    assert param.point_along(s) is not None
    assert param.tangent_along(s / 2) is not None


def test_wraps_existing_parameterization():
    seg = LineSegment(point(0, 0), point(0, 4))
    param = ArcLengthParameterized(seg, build(1e-6, seg))
    assert param.total_length() == 4.0
    assert vclose(param.point_along(1.0), point(0, 1))
