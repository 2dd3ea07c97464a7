#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `curveoracle.utils` module."

import secrets

import pytest

from curveoracle.exceptions import CurveOracleValueError
from curveoracle.utils import hex_string, int_from_integer, int_repr


def test_int_from_integer() -> None:
    for i in (
        secrets.randbits(256 - 8),
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(hex_string(i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))

    # public key coordinate as typed at a terminal
    x = "6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
    assert int_from_integer(x) == int(x, 16)
    assert int_from_integer(x + "\n") == int(x, 16)

    with pytest.raises(CurveOracleValueError, match="not an integer: "):
        int_from_integer(True)  # type: ignore


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"

    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    a_bytes = bytes.fromhex(a_str)
    assert hex_string(a_bytes) == "01 DEADBEEF 00000000"

    # invalid hex-string: odd number of hex digits
    a_str = "1deadbeef00000000"
    with pytest.raises(ValueError, match="non-hexadecimal number found in fromhex"):
        hex_string(a_str)

    int_ = -1
    with pytest.raises(CurveOracleValueError, match="negative integer: "):
        hex_string(int_)


def test_int_repr() -> None:
    assert int_repr(97) == "97"
    assert int_repr(-97) == "-97"
    assert int_repr(0xFFFFFFFF) == "4294967295"
    assert int_repr(0x0100000000) == "'01 00000000'"
