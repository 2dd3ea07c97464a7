#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `curveoracle.ecc.curves` module."

import pytest

from curveoracle.ecc.curves import (
    CURVES,
    NIST,
    SEC2,
    get_curve,
    secp224r1,
    secp256k1,
    secp256r1,
)
from curveoracle.ecc.oracle import is_on_curve
from curveoracle.exceptions import UnknownCurveError


def test_generators() -> None:
    for name, ec in CURVES.items():
        assert ec.G is not None, name
        assert is_on_curve(ec, ec.G), name
        assert is_on_curve(ec, (ec.G[0], ec.p - ec.G[1])), name


def test_registry() -> None:
    assert len(SEC2) == 6
    assert len(NIST) == 5
    assert len(CURVES) == 11
    for name, ec in SEC2.items():
        assert ec.name == name
    for ec in NIST.values():
        assert ec in SEC2.values()
    assert NIST["P-256"] is secp256r1
    assert SEC2["secp256k1"] is secp256k1


def test_get_curve() -> None:
    assert get_curve("P-256") is secp256r1
    assert get_curve("p-256") is secp256r1
    assert get_curve("secp256r1") is secp256r1
    assert get_curve(" SECP256K1\n") is secp256k1

    with pytest.raises(UnknownCurveError, match="unknown curve: 'P-255'"):
        get_curve("P-255")


def test_nist_p256() -> None:
    # FIPS 186-4 D.1.2.3
    assert secp256r1.p == 2**256 - 2**224 + 2**192 + 2**96 - 1
    assert secp256r1.a == secp256r1.p - 3
    b = "5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b"
    assert secp256r1.b == int(b, 16)
    assert secp256r1.p_size == 32


def test_square_root_flavours() -> None:
    # p = 3 (mod 4): square root by exponentiation
    for name in ("P-192", "P-256", "P-384", "P-521", "secp256k1"):
        assert get_curve(name).p_is_3_mod_4, name
    # p = 1 (mod 8): Tonelli-Shanks is required
    assert not secp224r1.p_is_3_mod_4
    assert secp224r1.p % 8 == 1
