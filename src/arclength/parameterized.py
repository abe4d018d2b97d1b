"""Curves paired with their arc-length parameterization.

:class:`ArcLengthParameterized` answers questions by distance along the
curve rather than by curve parameter, e.g. "where is the point 2.5 units
from the start?" ::

    curve = cubic_bezier(point(0, 0), point(1, 2), point(3, 2), point(4, 0))
    param = arc_length_parameterized(curve, tolerance=1e-3)
    param.point_along(2.5)
    param.sample_along(10)   # 11 points evenly spaced by distance

Curves are immutable, so a parameterization can never go stale with
respect to the curve it was built from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from arclength import parameterization as alp
from arclength.curve import Curve
from arclength.geom import unit


@dataclass(frozen=True)
class ArcLengthParameterized:
    """A curve together with its :class:`~arclength.parameterization.Parameterization`."""

    curve: Curve
    parameterization: alp.Parameterization

    def total_length(self) -> float:
        return self.parameterization.total_length

    def parameter_at(self, length: float) -> Optional[float]:
        return alp.parameter_at(self.parameterization, length)

    def length_at(self, parameter: float) -> Optional[float]:
        return alp.length_at(self.parameterization, parameter)

    def point_along(self, length: float) -> Optional[list]:
        """Return the point at distance ``length`` from the start of the
        curve, or ``None`` if ``length`` is outside ``[0, total_length()]``.
        """
        t = self.parameter_at(length)
        if t is None:
            return None
        return self.curve.point_at(t)

    def tangent_along(self, length: float) -> Optional[list]:
        """Return the unit tangent direction at distance ``length``.

        Returns ``None`` if ``length`` is out of range, or if the
        derivative there is the zero vector (a cusp) and the tangent is
        undefined.
        """
        t = self.parameter_at(length)
        if t is None:
            return None
        return unit(self.curve.derivative_at(t))

    def midpoint(self) -> list:
        return self.curve.point_at(self.parameter_at(0.5 * self.total_length()))

    def _stations(self, count: int) -> List[float]:
        if count < 1:
            return []
        total = self.total_length()
        return [total if i == count else min(total * i / count, total) for i in range(count + 1)]

    def sample_along(self, count: int) -> List[list]:
        """Return ``count+1`` points evenly spaced by arc length, from
        the start of the curve to its end."""
        return [self.point_along(s) for s in self._stations(count)]

    def tangents_along(self, count: int) -> List[Optional[list]]:
        return [self.tangent_along(s) for s in self._stations(count)]


def arc_length_parameterized(curve: Curve, tolerance: float) -> ArcLengthParameterized:
    """Build the arc-length parameterization of ``curve`` to within
    ``tolerance`` and pair the two."""

    return ArcLengthParameterized(curve, alp.build(tolerance, curve))


__all__ = ["ArcLengthParameterized", "arc_length_parameterized"]
