"""Modular arithmetic for the key derivation, built on the binary extended Euclidean algorithm.

Nothing in here divides: the GCD is computed with shifts and subtractions only, which keeps it friendly to very large
operands.

Typical usage example:

    g, x, y = binary_extended_gcd(240, 46)
    d = mod_inverse(65537, calculate_totient(p, q))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Sequence

from rsakit.errors import NoModularInverseError


def _sign(no: int) -> int:
    return -1 if no < 0 else 1


def binary_extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Implements the binary (Stein's) Extended Euclidean Algorithm.

    Such that a*x + b*y = g = gcd(a, b). Common powers of two are factored out first, afterward the working values and
    their Bezout co-factors are halved with parity-matched adjustments, subtracting the smaller from the larger until
    one of them reaches zero.

    Args:
        a: The first integer, any sign.
        b: The second integer, any sign.

    Returns:
        Tuple of (gcd, x, y), with the gcd always non-negative.
    """
    sign_a, sign_b = _sign(a), _sign(b)
    a, b = abs(a), abs(b)
    if a == 0 or b == 0:
        # gcd(a, 0) = |a|, and the loop below would never find an odd value.
        if a == 0 and b == 0:
            return 0, 0, 0
        if a == 0:
            return b, 0, sign_b
        return a, sign_a, 0

    shift = 0
    while (a | b) & 1 == 0:
        a >>= 1
        b >>= 1
        shift += 1

    # Invariants: a1*a + b1*b == u and a2*a + b2*b == v.
    u, v = a, b
    a1, b1, a2, b2 = 1, 0, 0, 1
    while u != 0:
        while u & 1 == 0:
            u >>= 1
            if (a1 | b1) & 1 == 0:
                a1 >>= 1
                b1 >>= 1
            else:
                a1 = (a1 + b) >> 1
                b1 = (b1 - a) >> 1
        while v & 1 == 0:
            v >>= 1
            if (a2 | b2) & 1 == 0:
                a2 >>= 1
                b2 >>= 1
            else:
                a2 = (a2 + b) >> 1
                b2 = (b2 - a) >> 1
        if u >= v:
            u -= v
            a1 -= a2
            b1 -= b2
        else:
            v -= u
            a2 -= a1
            b2 -= b1
    return v << shift, a2 * sign_a, b2 * sign_b


def mod_inverse(a: int, m: int) -> int:
    """Calculates the modular multiplicative inverse of `a` modulo `m`.

    Args:
        a: The integer to invert. May be negative.
        m: The modulus. Must be positive.

    Returns:
        The unique x in [0, m) with a*x = 1 (mod m).

    Raises:
        ValueError: If `m` is not positive.
        NoModularInverseError: If `a` and `m` are not coprime.
    """
    if m <= 0:
        raise ValueError("Modulus must be positive.")
    g, x, _ = binary_extended_gcd(a, m)
    if g != 1:
        raise NoModularInverseError(f"{a} has no inverse modulo {m}.")
    return x % m


def calculate_totient(p: int, q: int) -> int:
    """Euler's totient of p*q, for two distinct primes."""
    return (p - 1) * (q - 1)


def base_n_to_base10(digits: Sequence[int], base: int) -> int:
    """Converts a number written as base-`base` digits to an integer.

    Args:
        digits: Digits, most significant first. A digit of -1 is a placeholder and contributes nothing.
        base: The base the digits are written in. Must be >= 2.

    Returns:
        The represented integer.
    """
    if base < 2:
        raise ValueError("Base must be at least 2.")
    total = 0
    for i, digit in enumerate(reversed(digits)):
        if digit == -1:
            continue
        total += digit * base**i
    return total
