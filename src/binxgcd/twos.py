"""Power-of-two factor extraction for the binary Extended GCD.

Strips the largest power of two dividing both operands, so the reduction loop only ever sees a pair where at least
one value is odd. Everything here is plain bit twiddling on Python's arbitrary-precision integers.

Typical usage example:

    shift, a, b = factor_twos(48, 18)
    # shift == 1, a == 24, b == 9
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


def trailing_zeros(n: int) -> int:
    """Count the trailing zero bits of a non-zero integer.

    Isolates the lowest set bit with `n & -n`, which works for negative values as well thanks to two's complement
    semantics of Python integers.

    Args:
        n: The integer to inspect. Must be non-zero.

    Returns:
        The exponent of the largest power of two dividing `n`.

    Raises:
        ValueError: If `n` is zero, as every power of two divides it.
    """
    if n == 0:
        raise ValueError("Trailing zero count is undefined for 0.")
    return (n & -n).bit_length() - 1


def factor_twos(a: int, b: int) -> tuple[int, int, int]:
    """Extract the common power-of-two factor of `a` and `b`.

    A zero operand places no constraint on the shift. Both zero yields `(0, 0, 0)`.

    Args:
        a: First non-negative integer.
        b: Second non-negative integer.

    Returns:
        Tuple of (shift, a >> shift, b >> shift), where at least one of the reduced values is odd unless both
        inputs are zero.

    Raises:
        TypeError: If either value is not an integer.
        ValueError: If either value is negative.
    """
    if not isinstance(a, int) or not isinstance(b, int):
        raise TypeError("Both operands must be integers.")
    if a < 0 or b < 0:
        raise ValueError("Both operands must be non-negative.")
    if a == 0 and b == 0:
        return 0, 0, 0
    if a == 0:
        shift = trailing_zeros(b)
    elif b == 0:
        shift = trailing_zeros(a)
    else:
        shift = min(trailing_zeros(a), trailing_zeros(b))
    return shift, a >> shift, b >> shift
