"""Line segments and circular arcs.

Both have constant speed, so their speed bounds are exact and a single
leaf parameterizes them to within rounding.  They are mostly useful as
curves with a closed-form length to check the builders against.

Arcs follow the yapCAD convention: they lie in the XY plane and their
angles are given in degrees, measured counter-clockwise from the
positive X axis.  A negative sweep runs clockwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, radians, sin
from typing import Tuple

from arclength.curve import Curve
from arclength.geom import dist, isgoodnum, lerp, point, pointlistbbox, sub
from arclength.interval import Interval


@dataclass(frozen=True)
class LineSegment(Curve):
    """Straight segment from ``start`` to ``end``."""

    start: tuple
    end: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", tuple(point(self.start)))
        object.__setattr__(self, "end", tuple(point(self.end)))

    def length(self) -> float:
        return dist(list(self.start), list(self.end))

    def point_at(self, t: float) -> list:
        return lerp(self.start, self.end, t)

    def derivative_at(self, t: float) -> list:
        d = sub(self.end, self.start)
        d[3] = 0.0
        return d

    def speed_bounds(self) -> Interval:
        return Interval.singleton(self.length())

    def max_second_derivative_magnitude(self) -> float:
        return 0.0

    def bisect(self) -> Tuple["LineSegment", "LineSegment"]:
        mid = self.point_at(0.5)
        return LineSegment(self.start, mid), LineSegment(mid, self.end)

    def bbox(self) -> list:
        return pointlistbbox([list(self.start), list(self.end)])


@dataclass(frozen=True)
class CircularArc(Curve):
    """
    Circular arc in the XY plane.

    ``start`` is the start angle and ``sweep`` the signed angular extent,
    both in degrees.
    """

    center: tuple
    radius: float
    start: float = 0.0
    sweep: float = 360.0

    def __post_init__(self) -> None:
        if not isgoodnum(self.radius) or self.radius <= 0:
            raise ValueError("arc radius must be a positive number: {}".format(self.radius))
        if not isgoodnum(self.start) or not isgoodnum(self.sweep):
            raise ValueError("arc angles must be numbers: {}, {}".format(self.start, self.sweep))
        object.__setattr__(self, "center", tuple(point(self.center)))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "sweep", float(self.sweep))

    def length(self) -> float:
        return self.radius * abs(radians(self.sweep))

    def _angle(self, t: float) -> float:
        return radians(self.start + self.sweep * t)

    def point_at(self, t: float) -> list:
        theta = self._angle(t)
        c = self.center
        return [c[0] + self.radius * cos(theta),
                c[1] + self.radius * sin(theta),
                c[2],
                1.0]

    def derivative_at(self, t: float) -> list:
        theta = self._angle(t)
        k = self.radius * radians(self.sweep)
        return [-k * sin(theta), k * cos(theta), 0.0, 0.0]

    def speed_bounds(self) -> Interval:
        return Interval.singleton(self.length())

    def max_second_derivative_magnitude(self) -> float:
        w = radians(self.sweep)
        return self.radius * w * w

    def bisect(self) -> Tuple["CircularArc", "CircularArc"]:
        half = self.sweep / 2.0
        return (CircularArc(self.center, self.radius, self.start, half),
                CircularArc(self.center, self.radius, self.start + half, half))

    def bbox(self) -> list:
        pts = [self.point_at(0.0), self.point_at(1.0)]
        lo = min(self.start, self.start + self.sweep)
        hi = max(self.start, self.start + self.sweep)
        # include every axis extreme (multiples of 90 degrees) inside the sweep
        k = int(lo // 90.0) + 1
        while k * 90.0 < hi:
            theta = radians(k * 90.0)
            c = self.center
            pts.append([c[0] + self.radius * cos(theta),
                        c[1] + self.radius * sin(theta),
                        c[2], 1.0])
            k += 1
        return pointlistbbox(pts)


__all__ = ["LineSegment", "CircularArc"]
