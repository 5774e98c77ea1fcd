# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

import pytest

from rsakit import mathutils
from rsakit.errors import NoModularInverseError

gcd_cases = [
    (240, 46),
    (46, 240),
    (7, 26),
    (26, 7),
    (12, 18),
    (1024, 96),
    (17, 17),
    (1, 1),
    (1, 29),
    (-7, 26),
    (7, -26),
    (-240, -46),
    (2**127 - 1, 2**61 - 1),
    (2**64, 2**32 * 3),
    (0, 5),
    (5, 0),
    (0, -5),
    (-5, 0),
    (0, 0),
]


@pytest.mark.parametrize("a,b", gcd_cases)
def test_binary_extended_gcd_bezout(a, b):
    g, x, y = mathutils.binary_extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_binary_extended_gcd_random(rng):
    for _ in range(500):
        a = rng.randrange(-2**200, 2**200)
        b = rng.randrange(-2**200, 2**200)
        g, x, y = mathutils.binary_extended_gcd(a, b)
        assert g == math.gcd(a, b)
        assert a * x + b * y == g


def test_binary_extended_gcd_shared_powers_of_two():
    g, x, y = mathutils.binary_extended_gcd(3 * 2**40, 5 * 2**37)
    assert g == 2**37
    assert 3 * 2**40 * x + 5 * 2**37 * y == g


@pytest.mark.parametrize("a,m,expected", [(7, 26, 15), (-7, 26, 11), (1, 29, 1), (3, 11, 4), (65537, 3120, 2753),
                                          (10, 17, 12)])
def test_mod_inverse(a, m, expected):
    assert mathutils.mod_inverse(a, m) == expected


def test_mod_inverse_against_builtin(rng):
    for _ in range(300):
        m = rng.randrange(2, 2**256)
        a = rng.randrange(-2**256, 2**256)
        if math.gcd(a, m) != 1:
            continue
        x = mathutils.mod_inverse(a, m)
        assert 0 <= x < m
        assert (a * x) % m == 1
        assert x == pow(a, -1, m)


@pytest.mark.parametrize("a,m", [(6, 26), (13, 26), (0, 7), (65537 * 2, 65537 * 6), (4, 4)])
def test_mod_inverse_non_coprime(a, m):
    with pytest.raises(NoModularInverseError):
        mathutils.mod_inverse(a, m)


def test_mod_inverse_non_coprime_is_value_error():
    with pytest.raises(ValueError):
        mathutils.mod_inverse(6, 26)


@pytest.mark.parametrize("m", [0, -26])
def test_mod_inverse_validates_modulus(m):
    with pytest.raises(ValueError, match="Modulus must be positive."):
        mathutils.mod_inverse(7, m)


def test_mod_inverse_modulus_one():
    assert mathutils.mod_inverse(42, 1) == 0


def test_calculate_totient():
    assert mathutils.calculate_totient(3, 11) == 20
    assert mathutils.calculate_totient(61, 53) == 3120


@pytest.mark.parametrize("digits,base,expected", [([1, 0, 1], 2, 5), ([1, 2, 3], 10, 123), ([1, 2, 3], 16, 291),
                                                  ([1, 0], 28, 28), ([1, 1, 2], 3, 14), ([], 10, 0),
                                                  ([1, -1, 3], 10, 103)])
def test_base_n_to_base10(digits, base, expected):
    assert mathutils.base_n_to_base10(digits, base) == expected


@pytest.mark.parametrize("base", [1, 0, -2])
def test_base_n_to_base10_validates(base):
    with pytest.raises(ValueError):
        mathutils.base_n_to_base10([1], base)
