#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Curve point membership and enumeration.

Pure functions of a CurveDomain:

* is_on_curve tells if an affine point satisfies the curve equation;
* enumerate_points lazily yields the curve points whose abscissas
  are sampled from a real-valued x-range, e.g. for a scatter plot.

All field arithmetic is performed on Python int;
floats are only ever produced by display_pairs, for plotting.
"""

from fractions import Fraction
from math import ceil, isfinite
from typing import Any, Iterable, Iterator, List, Tuple

from curveoracle.alias import DisplayPoint, Integer, Point, Real
from curveoracle.ecc.domain import CurveDomain
from curveoracle.ecc.number_theory import mod_sqrt
from curveoracle.exceptions import (
    CoordinateOutOfRangeError,
    CurveOracleTypeError,
    CurveOracleValueError,
    NoSquareRootError,
    PointNotOnCurveError,
)
from curveoracle.utils import int_from_integer, int_repr


def point_from_integers(x: Integer, y: Integer) -> Point:
    """Return a Point from two integer representations.

    Typical input is a couple of hex-strings, e.g. the coordinates
    of a public key as typed at a terminal.
    The result is not checked to be on any curve.
    """
    return int_from_integer(x), int_from_integer(y)


def _is_coordinate(c: Any) -> bool:
    return isinstance(c, int) and not isinstance(c, bool)


def require_in_range(ec: CurveDomain, Q: Point) -> None:
    """Require both point coordinates to be in 0..p-1.

    An Error is raised if not.
    """
    if len(Q) != 2 or not all(_is_coordinate(c) for c in Q):
        raise CurveOracleTypeError("point must be a tuple[int, int]")
    if not 0 <= Q[0] < ec.p:
        err_msg = f"x-coordinate not in 0..p-1: {int_repr(Q[0])}"
        raise CoordinateOutOfRangeError(err_msg)
    if not 0 <= Q[1] < ec.p:
        err_msg = f"y-coordinate not in 0..p-1: {int_repr(Q[1])}"
        raise CoordinateOutOfRangeError(err_msg)


def is_on_curve(ec: CurveDomain, Q: Point) -> bool:
    """Return True if the point is on the curve.

    False is returned also for an invalid point,
    e.g. a coordinate not in 0..p-1:
    use require_in_range to tell the two cases apart.
    """
    try:
        require_in_range(ec, Q)
    except (TypeError, CoordinateOutOfRangeError):
        return False
    return ec.y2(Q[0]) == Q[1] * Q[1] % ec.p


def require_on_curve(ec: CurveDomain, Q: Point) -> None:
    """Require the input Point to be on the curve.

    An Error is raised if not.
    """
    require_in_range(ec, Q)
    if ec.y2(Q[0]) != Q[1] * Q[1] % ec.p:
        raise PointNotOnCurveError("point not on curve")


def y_candidates(ec: CurveDomain, x: int) -> Tuple[int, ...]:
    """Return the y-coordinates of the curve points with abscissa x.

    The two roots y and p - y are returned, the lower one first;
    if y is zero the root is unique.
    """
    if not 0 <= x < ec.p:
        err_msg = f"x-coordinate not in 0..p-1: {int_repr(x)}"
        raise CoordinateOutOfRangeError(err_msg)
    try:
        root = mod_sqrt(ec.y2(x), ec.p)
    except NoSquareRootError as e:
        raise NoSquareRootError(f"invalid x-coordinate: {int_repr(x)}") from e
    if root == 0:
        return (0,)
    return tuple(sorted((root, ec.p - root)))


def _fraction(bound: Real) -> Fraction:
    if isinstance(bound, float) and not isfinite(bound):
        raise CurveOracleValueError(f"not a finite x-range bound: {bound}")
    if isinstance(bound, bool) or not isinstance(bound, (int, float, Fraction)):
        raise CurveOracleTypeError(f"not a real x-range bound: {bound!r}")
    return Fraction(bound)


class PointSample:
    """Lazy sequence of curve points over a sampled x-range.

    The n + 1 abscissas x_min + i * (x_max - x_min) / n, i = 0..n,
    are computed exactly and truncated to integers;
    negative ones and the ones not lower than p are skipped,
    as are repetitions of the previous integer abscissa.
    Each distinct integer abscissa costs a single square root attempt,
    however large n is.

    For each remaining x, if x^3 + a*x + b has a square root y mod p,
    then (x, y) and (x, p - y) are yielded, in this order
    (only (x, 0) if y is zero); otherwise nothing is yielded.

    The inputs are read-only:
    each iteration starts afresh from them,
    so a PointSample can be iterated many times
    and shared between threads.
    """

    def __init__(self, ec: CurveDomain, x_min: Real, x_max: Real, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise CurveOracleTypeError(f"sample count must be an int: {n!r}")
        self._ec = ec
        self._x_min = _fraction(x_min)
        self._x_max = _fraction(x_max)
        self._n = n

    @property
    def ec(self) -> CurveDomain:
        return self._ec

    @property
    def x_min(self) -> Fraction:
        return self._x_min

    @property
    def x_max(self) -> Fraction:
        return self._x_max

    @property
    def n(self) -> int:
        "Return the number of sampling steps."
        return self._n

    def __repr__(self) -> str:
        return f"PointSample({self.ec!r}, {self.x_min}, {self.x_max}, {self.n})"

    def __iter__(self) -> Iterator[Point]:
        # degenerate ranges
        if self.n <= 0 or self.x_min > self.x_max:
            return

        p = self.ec.p
        step = (self.x_max - self.x_min) / self.n
        if step == 0:
            if self.x_min < 0:
                return
            i, last = 0, 0
        else:
            # skip at once the samples with negative abscissa
            i, last = max(0, ceil(-self.x_min / step)), self.n

        while i <= last:
            x = int(self.x_min + i * step)
            if x >= p:
                # abscissas are not decreasing
                break

            try:
                y = mod_sqrt(self.ec.y2(x), p)
            except NoSquareRootError:
                pass
            else:
                yield x, y
                if y != 0:
                    yield x, p - y

            if step == 0:
                break
            # jump to the first sample truncated to x + 1 (or more)
            i = max(i + 1, ceil((x + 1 - self.x_min) / step))


def enumerate_points(ec: CurveDomain, x_min: Real, x_max: Real, n: int) -> PointSample:
    """Return the curve points with abscissa sampled from [x_min, x_max].

    n is the number of sampling steps:
    n <= 0 or x_min > x_max result in an empty sequence.
    See PointSample for the details.
    """
    return PointSample(ec, x_min, x_max, n)


def display_pairs(points: Iterable[Point]) -> List[DisplayPoint]:
    """Return float approximations of the points, e.g. for a scatter plot.

    Precision is lost for coordinates wider than 53 bits:
    the result must never be used for membership testing.
    """
    return [(float(x), float(y)) for x, y in points]
