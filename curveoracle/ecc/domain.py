#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Elliptic curve domain parameters.

CurveDomain holds the (p, a, b) parameters of a short Weierstrass curve
y^2 = x^3 + a*x + b over the prime field Fp,
optionally with a generator point and a name.

It is immutable: once validated it can be shared read-only
by any number of callers, e.g. the curveoracle.ecc.oracle functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import ceil
from typing import Optional, Tuple

from curveoracle.alias import Integer, Point
from curveoracle.ecc.number_theory import is_prime
from curveoracle.exceptions import InvalidDomainError
from curveoracle.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


@dataclass(frozen=True)
class CurveDomain:
    """Domain parameters of the elliptic curve y^2 = x^3 + a*x + b mod p.

    p must be an odd prime greater than 3;
    a and b are reduced mod p;
    the constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0 (mod p).

    The parameters of well-known curves are not trusted blindly:
    they are validated as any other input,
    primality testing a 521-bit p being cheap.
    """

    p: int
    a: int
    b: int
    G: Optional[Point] = None
    name: str = field(default="", compare=False)

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Optional[Tuple[Integer, Integer]] = None,
        name: str = "",
    ) -> None:
        p = int_from_integer(p)
        # 1) check that p is an odd prime greater than 3
        if p <= 3:
            raise InvalidDomainError(f"p not greater than 3: {p}")
        if p % 2 == 0:
            raise InvalidDomainError(f"p is even: {int_repr(p)}")
        if not is_prime(p):
            raise InvalidDomainError(f"p is not prime: {int_repr(p)}")
        object.__setattr__(self, "p", p)

        # 2) a and b are field elements in the interval [0, p−1]
        object.__setattr__(self, "a", int_from_integer(a) % p)
        object.__setattr__(self, "b", int_from_integer(b) % p)

        # 3) check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * pow(self.a, 3, p) + 27 * self.b * self.b
        if d % p == 0:
            raise InvalidDomainError("zero discriminant")

        if G is not None:
            G = int_from_integer(G[0]), int_from_integer(G[1])
            if not (0 <= G[0] < p and 0 <= G[1] < p):
                raise InvalidDomainError("generator coordinate not in 0..p-1")
            if self.y2(G[0]) != G[1] * G[1] % p:
                raise InvalidDomainError("generator is not on curve")
        object.__setattr__(self, "G", G)
        object.__setattr__(self, "name", name)

    @property
    def p_size(self) -> int:
        "Return the byte-length of p."
        return ceil(self.p.bit_length() / 8)

    @property
    def p_is_3_mod_4(self) -> bool:
        # if true, square roots are just a modular exponentiation
        return self.p % 4 == 3

    def y2(self, x: int) -> int:
        """Return the right-hand side of the curve equation for x.

        It is (x^3 + a*x + b) mod p, with no check that it has
        a square root, i.e. that x is the abscissa of a curve point.
        """
        return (pow(x, 3, self.p) + self.a * x + self.b) % self.p

    def __str__(self) -> str:
        result = f"Curve {self.name}" if self.name else "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self.a)}"
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n a   = {self.a}"
            result += f"\n b   = {self.b}"

        if self.G is not None:
            if self.p > HEX_THRESHOLD:
                result += f"\n x_G = {hex_string(self.G[0])}"
                result += f"\n y_G = {hex_string(self.G[1])}"
            else:
                result += f"\n x_G = {self.G[0]}"
                result += f"\n y_G = {self.G[1]}"

        return result

    def __repr__(self) -> str:
        result = "CurveDomain("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f", '{hex_string(self.a)}', '{hex_string(self.b)}'"
        else:
            result += f", {self.a}, {self.b}"

        if self.G is not None:
            if self.p > HEX_THRESHOLD:
                result += f", ('{hex_string(self.G[0])}', '{hex_string(self.G[1])}')"
            else:
                result += f", ({self.G[0]}, {self.G[1]})"

        if self.name:
            result += f", name='{self.name}'"

        result += ")"
        return result
