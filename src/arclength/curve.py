"""The curve capability consumed by the arc-length builders.

Any curve that can bound its speed over its own parameter range and
split itself in half can be arc-length parameterized; the builder in
:mod:`arclength.parameterization` never looks at the curve's
representation.  Every curve is parameterized over ``0 <= t <= 1``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

import mpmath as mpm

from arclength.geom import mag
from arclength.interval import Interval


class Curve(ABC):
    """
    Base class for parametric curves over ``0 <= t <= 1``.

    Subclasses are immutable values.  ``bisect()`` returns two new
    curves covering ``[0, 0.5]`` and ``[0.5, 1]`` of this one, each
    re-parameterized over ``[0, 1]``.
    """

    @abstractmethod
    def speed_bounds(self) -> Interval:
        """
        Bound the speed ``|C'(t)|`` over the whole parameter range.

        Returns:
            An interval ``[lo, hi]`` with ``0 <= lo <= hi`` that contains
            ``|C'(t)|`` for every ``t`` in ``[0, 1]``.  The bounds must
            tighten as the curve is repeatedly bisected.
        """

    @abstractmethod
    def bisect(self) -> Tuple["Curve", "Curve"]:
        """Split the curve at ``t=0.5``."""

    @abstractmethod
    def point_at(self, t: float) -> list:
        """Return the point on the curve at parameter ``t``."""

    @abstractmethod
    def derivative_at(self, t: float) -> list:
        """Return the first derivative vector (``w=0``) at ``t``."""

    @abstractmethod
    def max_second_derivative_magnitude(self) -> float:
        """Return an upper bound on ``|C''(t)|`` over ``[0, 1]``."""

    def derivative_magnitude(self, t: float) -> float:
        """Return the speed ``|C'(t)|``."""

        return mag(self.derivative_at(t))


def reference_length(curve: Curve, t0: float = 0.0, t1: float = 1.0) -> float:
    """
    Integrate the speed of ``curve`` from ``t0`` to ``t1`` by adaptive
    quadrature.

    This is slow and is meant for checking parameterizations, not for
    building them.  The range is split into eight panels so that a
    speed cusp inside the range does not spoil convergence.
    """

    if t1 < t0:
        return -reference_length(curve, t1, t0)
    if t1 == t0:
        return 0.0
    nodes = mpm.linspace(mpm.mpf(t0), mpm.mpf(t1), 9)
    total = mpm.quad(lambda t: curve.derivative_magnitude(float(t)), nodes)
    return float(total)


__all__ = ["Curve", "reference_length"]
