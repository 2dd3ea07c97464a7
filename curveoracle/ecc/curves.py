#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Standard elliptic curve domain parameters.

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
* Federal Information Processing Standards Publication 186-4
  (NIST) curves
  https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.186-4.pdf
"""

from typing import Dict

from curveoracle.ecc.domain import CurveDomain
from curveoracle.exceptions import UnknownCurveError

__p = 2**192 - 2**64 - 1
__a = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFC
__b = 0x64210519E59C80E70FA7E9AB72243049FEB8DEECC146B9B1
__Gx = 0x188DA80EB03090F67CBF20EB43A18800F4FF0AFD82FF1012
__Gy = 0x07192B95FFC8DA78631011ED6B24CDD573F977A11E794811
secp192r1 = CurveDomain(__p, __a, __b, (__Gx, __Gy), "secp192r1")

# p = 1 mod 8: square roots require Tonelli-Shanks
__p = 2**224 - 2**96 + 1
__a = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFE
__b = 0xB4050A850C04B3ABF54132565044B0B7D7BFD8BA270B39432355FFB4
__Gx = 0xB70E0CBD6BB4BF7F321390B94A03C1D356C21122343280D6115C1D21
__Gy = 0xBD376388B5F723FB4C22DFE6CD4375A05A07476444D5819985007E34
secp224r1 = CurveDomain(__p, __a, __b, (__Gx, __Gy), "secp224r1")

# bitcoin curve
__p = 2**256 - 2**32 - 977
__a = 0
__b = 7
__Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
__Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
secp256k1 = CurveDomain(__p, __a, __b, (__Gx, __Gy), "secp256k1")

__p = 2**256 - 2**224 + 2**192 + 2**96 - 1
__a = __p - 3
__b = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
__Gx = 0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296
__Gy = 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5
secp256r1 = CurveDomain(__p, __a, __b, (__Gx, __Gy), "secp256r1")

__p = 2**384 - 2**128 - 2**96 + 2**32 - 1
__a = __p - 3
__b = 0xB3312FA7E23EE7E4988E056BE3F82D19181D9C6EFE8141120314088F5013875AC656398D8A2ED19D2A85C8EDD3EC2AEF
__Gx = 0xAA87CA22BE8B05378EB1C71EF320AD746E1D3B628BA79B9859F741E082542A385502F25DBF55296C3A545E3872760AB7
__Gy = 0x3617DE4A96262C6F5D9E98BF9292DC29F8F41DBD289A147CE9DA3113B5F0B8C00A60B1CE1D7E819D7A431D7C90EA0E5F
secp384r1 = CurveDomain(__p, __a, __b, (__Gx, __Gy), "secp384r1")

__p = 2**521 - 1
__a = __p - 3
__b = 0x0051953EB9618E1C9A1F929A21A0B68540EEA2DA725B99B315F3B8B489918EF109E156193951EC7E937B1652C0BD3BB1BF073573DF883D2C34F1EF451FD46B503F00
__Gx = 0x00C6858E06B70404E9CD9E3ECB662395B4429C648139053FB521F828AF606B4D3DBAA14B5E77EFE75928FE1DC127A2FFA8DE3348B3C1856A429BF97E7E31C2E5BD66
__Gy = 0x011839296A789A3BC0045C8A5FB42C7D1BD998F54449579B446817AFBD17273E662C97EE72995EF42640C550B9013FAD0761353C7086A272C24088BE94769FD16650
secp521r1 = CurveDomain(__p, __a, __b, (__Gx, __Gy), "secp521r1")

SEC2: Dict[str, CurveDomain] = {
    ec.name: ec
    for ec in (secp192r1, secp224r1, secp256k1, secp256r1, secp384r1, secp521r1)
}

# FIPS 186-4 names of the SEC 2 random curves
NIST: Dict[str, CurveDomain] = {
    "P-192": secp192r1,
    "P-224": secp224r1,
    "P-256": secp256r1,
    "P-384": secp384r1,
    "P-521": secp521r1,
}

CURVES: Dict[str, CurveDomain] = {**SEC2, **NIST}

_LOWER_CURVES = {name.lower(): ec for name, ec in CURVES.items()}


def get_curve(name: str) -> CurveDomain:
    "Return the standard curve with the given (case-insensitive) name."
    try:
        return _LOWER_CURVES[name.strip().lower()]
    except KeyError:
        raise UnknownCurveError(f"unknown curve: '{name}'") from None
