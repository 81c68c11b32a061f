"""Binary Extended GCD, computing Bézout coefficients without a single division.

The reduction works purely through shifts, comparisons and subtraction on two working values, while two pairs of
coefficients are carried along so that each working value stays expressed as a combination of the (power-of-two
stripped) inputs. Once the first working value hits zero, the second one is the GCD and its pair are the Bézout
coefficients.

Typical usage example:

    g, x, y = extended_gcd(48, 18)
    assert g == 48 * x + 18 * y == 6
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from binxgcd import twos


class BezoutTriple(typing.NamedTuple):
    gcd: int
    x: int
    y: int


def _halve(w: int, x: int, y: int, a: int, b: int) -> tuple[int, int, int]:
    """Halve an even working value once, together with its coefficient pair.

    Keeps `w == x*a + y*b`. When `x` and `y` are not both even, the pair is first moved to the equivalent
    `(x + b, y - a)`, which is always even in both places since `a` and `b` are never both even here.

    Args:
        w: The working value.
        x: Coefficient of `a` for `w`.
        y: Coefficient of `b` for `w`.
        a: The first stripped input.
        b: The second stripped input.

    Returns:
        The (possibly) halved working value and its adjusted coefficient pair.
    """
    if w & 1:
        return w, x, y
    w >>= 1
    if not x & 1 and not y & 1:
        return w, x >> 1, y >> 1
    return w, (x + b) >> 1, (y - a) >> 1


class _Reduction:
    """Mutable state of the coefficient-tracking reduction.

    Attributes:
        a: The first stripped input, fixed.
        b: The second stripped input, fixed.
        u: The working value driven to zero, `u == aa*a + bb*b`.
        v: The working value ending as the GCD, `v == cc*a + dd*b`.
        aa: Coefficient of `a` for `u`.
        bb: Coefficient of `b` for `u`.
        cc: Coefficient of `a` for `v`.
        dd: Coefficient of `b` for `v`.
    """

    def __init__(self, a: int, b: int) -> None:
        self.a = a
        self.b = b
        self.u = a
        self.v = b
        self.aa, self.bb = 1, 0
        self.cc, self.dd = 0, 1

    def step(self) -> None:
        """Run a single halve-halve-subtract round."""
        self.u, self.aa, self.bb = _halve(self.u, self.aa, self.bb, self.a, self.b)
        self.v, self.cc, self.dd = _halve(self.v, self.cc, self.dd, self.a, self.b)
        if self.u >= self.v:
            self.u -= self.v
            self.aa -= self.cc
            self.bb -= self.dd
        else:
            self.v -= self.u
            self.cc -= self.aa
            self.dd -= self.bb

    def run(self) -> tuple[int, int, int]:
        while self.u != 0:
            self.step()
        return self.v, self.cc, self.dd


def _extended_gcd_natural(a: int, b: int) -> tuple[int, int, int]:
    """Binary Extended GCD over non-negative integers.

    Args:
        a: First non-negative integer.
        b: Second non-negative integer.

    Returns:
        Tuple of (gcd, x, y) with `gcd == a*x + b*y`.
    """
    if a == 0:
        return b, 0, 1
    if b == 0:
        return a, 1, 0
    shift, a, b = twos.factor_twos(a, b)
    g, x, y = _Reduction(a, b).run()
    # The coefficients already fit the unshifted inputs, only the GCD is scaled back.
    return g << shift, x, y


def extended_gcd(a: int, b: int) -> BezoutTriple:
    """Compute the GCD of two integers alongside their Bézout coefficients.

    Uses the binary (shift and subtract) variant of the Extended Euclidean Algorithm. Signs are normalized at the
    boundary: the core works on magnitudes and each coefficient is negated if its input was negative. Thus the GCD
    is never negative and `gcd == a*x + b*y` holds for the inputs as given.

    Special cases follow directly: `extended_gcd(0, b) == (|b|, 0, ±1)`, `extended_gcd(a, 0) == (|a|, ±1, 0)` and
    `extended_gcd(0, 0) == (0, 0, 1)`.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        A BezoutTriple of (gcd, x, y).

    Raises:
        TypeError: If either value is not an integer.
    """
    if not isinstance(a, int) or not isinstance(b, int):
        raise TypeError("Extended GCD is only defined for integers.")
    g, x, y = _extended_gcd_natural(abs(a), abs(b))
    if a < 0:
        x = -x
    if b < 0:
        y = -y
    return BezoutTriple(g, x, y)


def is_bezout(a: int, b: int, triple: tuple[int, int, int]) -> bool:
    """Check that a triple holds the GCD of `a` and `b` along with valid Bézout coefficients.

    A non-negative common divisor that is also an integer combination of `a` and `b` is necessarily the greatest
    one, so no GCD needs to be recomputed.

    Args:
        a: The first integer.
        b: The second integer.
        triple: The (gcd, x, y) to check.

    Returns:
        True if `gcd == a*x + b*y` and `gcd` is the GCD of `a` and `b`, False otherwise.
    """
    g, x, y = triple
    if g < 0 or g != a * x + b * y:
        return False
    if g == 0:
        return a == 0 and b == 0
    return a % g == 0 and b % g == 0
