#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Exception classes.

These are meant to discriminate between Exceptions being raised
by curveoracle from those raised by other codebase.

Users may also just deal with the regular ValueError and TypeError
from which the curveoracle versions are derived.
"""


class CurveOracleValueError(ValueError):
    pass


class CurveOracleTypeError(TypeError):
    pass


class InvalidDomainError(CurveOracleValueError):
    "Structurally invalid curve domain parameters."


class CoordinateOutOfRangeError(CurveOracleValueError):
    "A point coordinate is not in 0..p-1."


class PointNotOnCurveError(CurveOracleValueError):
    pass


class NoSquareRootError(CurveOracleValueError):
    "The input is a quadratic non-residue: it has no modular square root."


class UnknownCurveError(CurveOracleValueError):
    pass
