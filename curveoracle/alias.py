#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from fractions import Fraction
from typing import Tuple, Union

# hex-string or bytes representation of an int, e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# "DEAD BEEF"
# b'\xde\xad\xbe\xef'
#
# use curveoracle.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates,
# with both coordinates being field elements in 0..p-1.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]

# x-range bounds for point enumeration:
# they are only used to pick the sampled abscissas,
# never as field elements
Real = Union[int, float, Fraction]

# float approximation of a Point, only meant for plotting
DisplayPoint = Tuple[float, float]
