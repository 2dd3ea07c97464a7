#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `curveoracle.exceptions` module."

import inspect

import pytest

from curveoracle import exceptions
from curveoracle.ecc.domain import CurveDomain
from curveoracle.ecc.oracle import require_on_curve, y_candidates
from curveoracle.exceptions import (
    CoordinateOutOfRangeError,
    CurveOracleTypeError,
    CurveOracleValueError,
    NoSquareRootError,
    PointNotOnCurveError,
)


def test_hierarchy() -> None:
    classes = {
        name
        for name, obj in inspect.getmembers(exceptions, inspect.isclass)
        if obj.__module__ == exceptions.__name__
    }
    # each error kind is raised by some operation
    assert classes == {
        "CurveOracleValueError",
        "CurveOracleTypeError",
        "InvalidDomainError",
        "CoordinateOutOfRangeError",
        "PointNotOnCurveError",
        "NoSquareRootError",
        "UnknownCurveError",
    }
    for name in classes - {"CurveOracleValueError", "CurveOracleTypeError"}:
        assert issubclass(getattr(exceptions, name), CurveOracleValueError)
    assert issubclass(CurveOracleValueError, ValueError)
    assert issubclass(CurveOracleTypeError, TypeError)


def test_builtin_catch() -> None:
    ec = CurveDomain(97, 2, 3)
    with pytest.raises(ValueError):
        require_on_curve(ec, (3, 7))
    with pytest.raises(PointNotOnCurveError):
        require_on_curve(ec, (3, 7))
    with pytest.raises(ValueError):
        y_candidates(ec, 97)
    with pytest.raises(CoordinateOutOfRangeError):
        y_candidates(ec, 97)
    # x = 2 is not the abscissa of a curve point
    with pytest.raises(NoSquareRootError):
        y_candidates(ec, 2)
    with pytest.raises(TypeError):
        require_on_curve(ec, (3.0, 6.0))  # type: ignore
