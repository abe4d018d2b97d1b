"""Closed real intervals and per-axis vector bounds.

Curves report their speed over a parameter range as an :class:`Interval`.
Bézier curves derive that interval from a :class:`VectorBounds` built
around the control points of their derivative curve.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Interval:
    """Immutable closed interval ``[lo, hi]``."""

    lo: float
    hi: float

    def __post_init__(self) -> None:
        if self.lo > self.hi:
            raise ValueError(f"interval lower bound {self.lo} exceeds upper bound {self.hi}")

    @classmethod
    def singleton(cls, value: float) -> "Interval":
        return cls(float(value), float(value))

    @classmethod
    def hull(cls, values: Iterable[float]) -> "Interval":
        """Return the smallest interval containing every value."""

        vals = list(values)
        if not vals:
            raise ValueError("cannot form the hull of no values")
        return cls(float(min(vals)), float(max(vals)))

    @property
    def width(self) -> float:
        return self.hi - self.lo

    @property
    def midpoint(self) -> float:
        return self.lo + 0.5 * (self.hi - self.lo)

    def contains(self, value: float) -> bool:
        return self.lo <= value <= self.hi

    def __iter__(self):
        # allows ``lo, hi = interval``
        yield self.lo
        yield self.hi


@dataclass(frozen=True)
class VectorBounds:
    """Axis-aligned box in XYZ bounding a set of vectors."""

    x: Interval
    y: Interval
    z: Interval

    @classmethod
    def hull(cls, vectors: Sequence[Sequence[float]]) -> "VectorBounds":
        if not vectors:
            raise ValueError("cannot bound an empty vector list")
        return cls(
            Interval.hull(v[0] for v in vectors),
            Interval.hull(v[1] for v in vectors),
            Interval.hull(v[2] for v in vectors),
        )

    def magnitude_bounds(self) -> Interval:
        """Return bounds on ``|v|`` for any ``v`` inside the box.

        The lower bound is the distance from the origin to the box (zero
        if the box contains the origin); the upper bound is the distance
        to the farthest corner.
        """

        lo_sq = 0.0
        hi_sq = 0.0
        for axis in (self.x, self.y, self.z):
            if axis.lo > 0.0:
                lo_sq += axis.lo * axis.lo
            elif axis.hi < 0.0:
                lo_sq += axis.hi * axis.hi
            far = max(abs(axis.lo), abs(axis.hi))
            hi_sq += far * far
        return Interval(sqrt(lo_sq), sqrt(hi_sq))


__all__ = ["Interval", "VectorBounds"]
