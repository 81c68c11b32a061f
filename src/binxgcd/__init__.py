"""Binary Extended GCD in an Academic Sense.

Provides the Extended Greatest Common Divisor of two integers computed without division, through shifts,
comparisons and subtraction alone. Furthermore, provides the power-of-two extraction it relies on and utilities to
move Bézout triples around as DER/PEM.

Typical usage example:

    g, x, y = extended_gcd(48, 18)
    assert is_bezout(48, 18, (g, x, y))
    export_triple("triple.pem", (g, x, y))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from binxgcd.serialize import decode_triple
from binxgcd.serialize import encode_triple
from binxgcd.serialize import export_triple
from binxgcd.serialize import import_triple
from binxgcd.twos import factor_twos
from binxgcd.twos import trailing_zeros
from binxgcd.xgcd import BezoutTriple
from binxgcd.xgcd import extended_gcd
from binxgcd.xgcd import is_bezout

__version__ = "0.0.1"
__all__ = [
    "BezoutTriple",
    "extended_gcd",
    "is_bezout",
    "factor_twos",
    "trailing_zeros",
    "encode_triple",
    "decode_triple",
    "export_triple",
    "import_triple",
]
