"""Bézier curves of arbitrary degree.

A Bézier curve is defined by its control points, evaluated with the de
Casteljau algorithm.  The derivative of a degree ``n`` Bézier curve is a
degree ``n-1`` Bézier curve whose control points (the *hodograph*) are
``n*(P[i+1]-P[i])``; by the convex hull property the box around those
control points bounds the velocity anywhere on the curve, which gives
the speed bounds used for arc-length parameterization.

Use :func:`quadratic_bezier` and :func:`cubic_bezier` for the common
cases. ::

    curve = cubic_bezier(point(0, 0), point(1, 2), point(3, 2), point(4, 0))
    curve.point_at(0.5)
    left, right = curve.bisect()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from arclength.curve import Curve
from arclength.geom import mag, point, pointlistbbox
from arclength.interval import Interval, VectorBounds


def _blend(a: Sequence[float], b: Sequence[float], t: float, w: float) -> list:
    return [a[0] + (b[0] - a[0]) * t,
            a[1] + (b[1] - a[1]) * t,
            a[2] + (b[2] - a[2]) * t,
            w]


def _decasteljau(ctrl: Sequence[Sequence[float]], t: float, w: float = 1.0) -> Tuple[list, List[list], List[list]]:
    """Run de Casteljau on ``ctrl`` at ``t``.

    Returns the curve value together with the control points of the
    two halves ``[0, t]`` and ``[t, 1]``.
    """

    level = [list(p) for p in ctrl]
    left = [level[0]]
    right = [level[-1]]
    while len(level) > 1:
        level = [_blend(level[i], level[i + 1], t, w) for i in range(len(level) - 1)]
        left.append(level[0])
        right.append(level[-1])
    right.reverse()
    return level[0], left, right


def _difference(ctrl: Sequence[Sequence[float]]) -> List[list]:
    """Control points of the derivative of a Bézier curve with ``ctrl``."""

    n = len(ctrl) - 1
    return [[n * (ctrl[i + 1][0] - ctrl[i][0]),
             n * (ctrl[i + 1][1] - ctrl[i][1]),
             n * (ctrl[i + 1][2] - ctrl[i][2]),
             0.0]
            for i in range(n)]


@dataclass(frozen=True)
class BezierCurve(Curve):
    """Bézier curve with two or more control points."""

    control: tuple

    def __post_init__(self) -> None:
        if len(self.control) < 2:
            raise ValueError("a Bézier curve needs at least two control points, got {}".format(len(self.control)))
        object.__setattr__(self, "control", tuple(tuple(point(p)) for p in self.control))

    @property
    def degree(self) -> int:
        return len(self.control) - 1

    def hodograph(self) -> List[list]:
        """Return the control vectors of the first derivative."""

        return _difference(self.control)

    def point_at(self, t: float) -> list:
        value, _, _ = _decasteljau(self.control, t)
        return value

    def derivative_at(self, t: float) -> list:
        value, _, _ = _decasteljau(self.hodograph(), t, w=0.0)
        return value

    def second_derivative_at(self, t: float) -> list:
        if self.degree < 2:
            return [0.0, 0.0, 0.0, 0.0]
        value, _, _ = _decasteljau(_difference(self.hodograph()), t, w=0.0)
        return value

    def speed_bounds(self) -> Interval:
        return VectorBounds.hull(self.hodograph()).magnitude_bounds()

    def max_second_derivative_magnitude(self) -> float:
        if self.degree < 2:
            return 0.0
        return max(mag(v) for v in _difference(self.hodograph()))

    def split(self, t: float) -> Tuple["BezierCurve", "BezierCurve"]:
        """Split at ``t`` into curves covering ``[0, t]`` and ``[t, 1]``."""

        if not 0.0 <= t <= 1.0:
            raise ValueError("split parameter must lie in [0, 1]: {}".format(t))
        _, left, right = _decasteljau(self.control, t)
        return BezierCurve(tuple(left)), BezierCurve(tuple(right))

    def bisect(self) -> Tuple["BezierCurve", "BezierCurve"]:
        return self.split(0.5)

    def bbox(self) -> list:
        """Bounding box of the control polygon, which contains the curve."""

        return pointlistbbox(list(self.control))


def quadratic_bezier(p0, p1, p2) -> BezierCurve:
    """Make a quadratic Bézier curve from three control points."""

    return BezierCurve((p0, p1, p2))


def cubic_bezier(p0, p1, p2, p3) -> BezierCurve:
    """Make a cubic Bézier curve from four control points."""

    return BezierCurve((p0, p1, p2, p3))


__all__ = ["BezierCurve", "quadratic_bezier", "cubic_bezier"]
