"""Arc-length parameterization of curves.

====================
OVERVIEW
====================

A curve's parameter ``t`` (``0 <= t <= 1``) is not a distance.  This
module converts between ``t`` and the arc length ``s`` travelled from
the start of the curve, to within a caller-specified tolerance, for any
curve implementing :class:`arclength.curve.Curve`.

``build(tolerance, curve)`` partitions the parameter range into a
binary tree of segments.  Each leaf covers a parameter sub-interval and
records the cumulative arc length at both of its ends.  A leaf's length
is estimated as the midpoint of the curve's speed bounds over the
sub-interval; the worst-case error of that estimate is half the width
of the bounds.  Sub-intervals whose error exceeds the local tolerance
are bisected, with the tolerance halved at each level so that the
errors of all leaves sum to less than the original tolerance.

Once built, a :class:`Parameterization` is immutable and may be shared
freely.  Lookups descend the tree and interpolate linearly inside the
containing leaf:

- ``parameter_at(p, s)`` -- parameter at arc length ``s``, or ``None``
  if ``s`` is outside ``[0, total_length(p)]``
- ``length_at(p, t)`` -- arc length at parameter ``t``, or ``None`` if
  ``t`` is outside ``[0, 1]``

``build_sampled(tolerance, derivative_magnitude, max_second_derivative_magnitude)``
is a non-adaptive alternative for curves that only offer their speed
as a function and a bound on their second derivative.  It chooses the
tree height up front and samples the speed at nine evenly spaced
points in every leaf.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import ceil, isfinite, log2
from typing import Callable, Iterator, Optional, Tuple, Union

from arclength.curve import Curve

logger = logging.getLogger(__name__)

## bisection levels allowed before giving up on a curve; a parameter
## width of 2**-48 is close to double precision resolution on [0, 1]
MAX_DEPTH = 48

## sub-segments per leaf for build_sampled()
SAMPLED_SEGMENTS = 8


class ParameterizationError(RuntimeError):
    """Raised when a curve's speed bounds do not tighten under bisection."""


@dataclass(frozen=True)
class Leaf:
    """Parameter sub-interval with the arc length at both ends."""

    param_start: float
    param_end: float
    length_start: float
    length_end: float

    @property
    def segment_length(self) -> float:
        return self.length_end - self.length_start

    def parameter_at(self, length: float) -> float:
        span = self.length_end - self.length_start
        if span <= 0.0:
            return self.param_start
        if length >= self.length_end:
            return self.param_end
        fraction = (length - self.length_start) / span
        return self.param_start + fraction * (self.param_end - self.param_start)

    def length_at(self, parameter: float) -> float:
        if parameter >= self.param_end:
            return self.length_end
        span = self.param_end - self.param_start
        if span <= 0.0:
            return self.length_start
        fraction = (parameter - self.param_start) / span
        return self.length_start + fraction * (self.length_end - self.length_start)


@dataclass(frozen=True)
class SampledLeaf:
    """
    Leaf holding cumulative lengths at evenly spaced parameter samples.

    ``lengths[0]`` is the length at ``param_start`` and ``lengths[-1]``
    the length at ``param_end``.
    """

    param_start: float
    param_end: float
    lengths: Tuple[float, ...]

    @property
    def length_start(self) -> float:
        return self.lengths[0]

    @property
    def length_end(self) -> float:
        return self.lengths[-1]

    @property
    def segment_length(self) -> float:
        return self.lengths[-1] - self.lengths[0]

    def _param(self, i: int) -> float:
        n = len(self.lengths) - 1
        return self.param_start + (self.param_end - self.param_start) * i / n

    def parameter_at(self, length: float) -> float:
        n = len(self.lengths) - 1
        if self.lengths[-1] <= self.lengths[0]:
            return self.param_start
        if length >= self.lengths[-1]:
            return self.param_end
        for i in range(n):
            if length < self.lengths[i + 1] or i == n - 1:
                break
        span = self.lengths[i + 1] - self.lengths[i]
        if span <= 0.0:
            return self._param(i)
        fraction = (length - self.lengths[i]) / span
        p0 = self._param(i)
        return p0 + fraction * (self._param(i + 1) - p0)

    def length_at(self, parameter: float) -> float:
        n = len(self.lengths) - 1
        if parameter >= self.param_end:
            return self.lengths[-1]
        width = self.param_end - self.param_start
        if width <= 0.0:
            return self.lengths[0]
        x = (parameter - self.param_start) / width * n
        i = min(max(int(x), 0), n - 1)
        fraction = x - i
        return self.lengths[i] + fraction * (self.lengths[i + 1] - self.lengths[i])


@dataclass(frozen=True)
class Node:
    """Interior node owning two adjacent subtrees.

    Use :func:`join` to make one; the boundary fields repeat those of
    the subtrees so that lookups only ever look one level down.
    """

    param_start: float
    param_end: float
    length_start: float
    length_end: float
    left: "SegmentTree"
    right: "SegmentTree"


def join(left: "SegmentTree", right: "SegmentTree") -> Node:
    """Join two adjacent subtrees under a new :class:`Node`."""

    return Node(left.param_start, right.param_end, left.length_start, right.length_end, left, right)


SegmentTree = Union[Leaf, SampledLeaf, Node]


@dataclass(frozen=True)
class Parameterization:
    """Immutable segment tree together with the curve's total length."""

    tree: SegmentTree

    @property
    def total_length(self) -> float:
        return self.tree.length_end


## building
## --------

def build(tolerance: float, curve: Curve, *, max_depth: int = MAX_DEPTH) -> Parameterization:
    """
    Build an arc-length parameterization of ``curve``.

    Args:
        tolerance: maximum absolute error, in length units, of any
            length or interpolated length produced by the lookups.  A
            tolerance ``<= 0`` disables refinement and yields a single
            leaf estimated from the whole curve's speed bounds.
        curve: any :class:`Curve`
        max_depth: bisection levels allowed before the curve is judged
            malformed

    Raises:
        ValueError: if ``tolerance`` is not finite, or the curve reports
            inverted or negative speed bounds
        ParameterizationError: if refinement reaches ``max_depth``,
            which means the curve's speed bounds do not tighten under
            bisection
    """

    if not isfinite(tolerance):
        raise ValueError("tolerance must be finite: {}".format(tolerance))
    tree = _build_tree(curve, tolerance, 0.0, 1.0, 0.0, 0, max_depth)
    result = Parameterization(tree)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("built arc length tree: %d leaves, depth %d, total length %g (tolerance %g)",
                     sum(1 for _ in leaves(result)), depth(result),
                     result.total_length, tolerance)
    return result


def _build_tree(curve, tolerance, param_start, param_end, length_start, level, max_depth):
    lo, hi = curve.speed_bounds()
    if lo < 0.0 or hi < lo:
        raise ValueError("curve reported invalid speed bounds [{}, {}]".format(lo, hi))
    max_error = (hi - lo) / 2.0
    if max_error <= tolerance or tolerance <= 0.0 or param_end <= param_start:
        return Leaf(param_start, param_end, length_start, length_start + lo + max_error)
    if level >= max_depth:
        logger.error("arc length refinement exceeded depth %d on [%r, %r]: speed bounds [%g, %g]",
                     max_depth, param_start, param_end, lo, hi)
        raise ParameterizationError(
            "speed bounds did not converge after {} bisections on parameter interval [{!r}, {!r}]; "
            "the curve's speed_bounds() does not tighten under bisect()".format(
                max_depth, param_start, param_end))

    left_curve, right_curve = curve.bisect()
    param_mid = param_start + 0.5 * (param_end - param_start)
    half = tolerance / 2.0
    left = _build_tree(left_curve, half, param_start, param_mid, length_start, level + 1, max_depth)
    right = _build_tree(right_curve, half, param_mid, param_end, left.length_end, level + 1, max_depth)
    return join(left, right)


def sampled_height(tolerance: float, max_second_derivative_magnitude: float) -> int:
    """Tree height used by :func:`build_sampled`.

    Trapezoidal integration of the speed over a sub-segment of width
    ``h`` is off by at most ``M*h*h/4`` where ``M`` bounds the second
    derivative, so ``N`` sub-segments are off by at most ``M/(4*N)``.
    """

    if tolerance <= 0.0 or max_second_derivative_magnitude <= 0.0:
        return 0
    levels = log2(max_second_derivative_magnitude) - log2(4.0 * SAMPLED_SEGMENTS * tolerance)
    if levels <= 0.0:
        return 0
    return int(ceil(levels))


def build_sampled(tolerance: float,
                  derivative_magnitude: Callable[[float], float],
                  max_second_derivative_magnitude: float) -> Parameterization:
    """
    Build a parameterization from a speed function and a bound on the
    magnitude of the curve's second derivative.

    The tree is complete and balanced with ``sampled_height()`` levels;
    each leaf integrates the speed over eight equal sub-segments with
    the trapezoidal rule.
    """

    if not isfinite(tolerance):
        raise ValueError("tolerance must be finite: {}".format(tolerance))
    if not isfinite(max_second_derivative_magnitude) or max_second_derivative_magnitude < 0:
        raise ValueError("max_second_derivative_magnitude must be a finite non-negative number: {}".format(
            max_second_derivative_magnitude))
    height = sampled_height(tolerance, max_second_derivative_magnitude)
    if height > MAX_DEPTH:
        raise ParameterizationError(
            "tolerance {} needs a tree of height {}, more than {}".format(tolerance, height, MAX_DEPTH))
    tree = _build_sampled(derivative_magnitude, 0.0, 1.0, 0.0, height)
    result = Parameterization(tree)
    logger.debug("built sampled arc length tree: height %d, total length %g", height, result.total_length)
    return result


def _build_sampled(speed, param_start, param_end, length_start, height):
    if height == 0:
        n = SAMPLED_SEGMENTS
        h = (param_end - param_start) / n
        speeds = [speed(param_start + h * i) for i in range(n)]
        speeds.append(speed(param_end))
        lengths = [length_start]
        for i in range(n):
            lengths.append(lengths[-1] + h * (speeds[i] + speeds[i + 1]) / 2.0)
        return SampledLeaf(param_start, param_end, tuple(lengths))
    param_mid = param_start + 0.5 * (param_end - param_start)
    left = _build_sampled(speed, param_start, param_mid, length_start, height - 1)
    right = _build_sampled(speed, param_mid, param_end, left.length_end, height - 1)
    return join(left, right)


## lookups
## -------

def total_length(parameterization: Parameterization) -> float:
    """Return the total arc length of the parameterized curve."""

    return parameterization.total_length


def parameter_at(parameterization: Parameterization, length: float) -> Optional[float]:
    """
    Return the curve parameter at arc length ``length``, or ``None`` if
    ``length`` lies outside ``[0, total_length]``.
    """

    if not 0.0 <= length <= parameterization.total_length:
        return None
    node = parameterization.tree
    while isinstance(node, Node):
        node = node.left if length < node.right.length_start else node.right
    return node.parameter_at(length)


def length_at(parameterization: Parameterization, parameter: float) -> Optional[float]:
    """
    Return the arc length at curve parameter ``parameter``, or ``None``
    if ``parameter`` lies outside ``[0, 1]``.
    """

    if not 0.0 <= parameter <= 1.0:
        return None
    node = parameterization.tree
    while isinstance(node, Node):
        node = node.left if parameter < node.right.param_start else node.right
    return node.length_at(parameter)


## introspection
## -------------

def leaves(parameterization: Parameterization) -> Iterator[Union[Leaf, SampledLeaf]]:
    """Iterate over the leaves of the tree from left to right."""

    stack = [parameterization.tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Node):
            stack.append(node.right)
            stack.append(node.left)
        else:
            yield node


def depth(parameterization: Parameterization) -> int:
    """Return the height of the tree; a single leaf has depth 0."""

    def _depth(node):
        if isinstance(node, Node):
            return 1 + max(_depth(node.left), _depth(node.right))
        return 0

    return _depth(parameterization.tree)


__all__ = [
    "MAX_DEPTH",
    "SAMPLED_SEGMENTS",
    "Leaf",
    "Node",
    "Parameterization",
    "ParameterizationError",
    "SampledLeaf",
    "build",
    "build_sampled",
    "depth",
    "leaves",
    "length_at",
    "parameter_at",
    "sampled_height",
    "total_length",
]
