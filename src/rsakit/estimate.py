"""Rough brute-force time estimates for a modulus, scaled to a human-readable unit.

Purely presentational: the estimate assumes an attacker walks the whole 2**bits(n) key space at a fixed rate and has
nothing to do with the actual hardness of factoring.

Typical usage example:

    print(format_duration(estimate_brute_force_time(pub.mod)))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import enum
import math
import typing

KEYS_PER_SECOND: int = 1_000_000
_MINUTE = 60.0
_HOUR = 60.0 * _MINUTE
_DAY = 24.0 * _HOUR
_YEAR = 365.25 * _DAY
_MILLENNIUM = 1e3 * _YEAR
_MEGAANNUM = 1e6 * _YEAR
_GIGAANNUM = 1e9 * _YEAR


class TimeUnit(enum.Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    YEARS = "years"
    MILLENNIA = "millennia"
    MEGAANNUM = "megaannum"
    GIGAANNUM = "gigaannum"


_SCIENTIFIC = {TimeUnit.MILLENNIA, TimeUnit.MEGAANNUM, TimeUnit.GIGAANNUM}


class Estimation(typing.NamedTuple):
    time: float
    unit: TimeUnit


def estimate_brute_force_time(n: int, keys_per_second: int = KEYS_PER_SECOND) -> Estimation:
    """Estimates how long trying every key below 2**bits(n) would take.

    Args:
        n: The modulus of the RSA key.
        keys_per_second: Assumed attacker throughput. Defaults to one million.

    Returns:
        The estimation in the largest fitting unit, from seconds up to gigaannum.
        Key spaces too large for a float are reported as infinite gigaannum.
    """
    if keys_per_second <= 0:
        raise ValueError("Keys per second must be positive.")
    try:
        time = 2.0**n.bit_length() / keys_per_second
    except OverflowError:
        return Estimation(math.inf, TimeUnit.GIGAANNUM)
    if time < _MINUTE:
        return Estimation(time, TimeUnit.SECONDS)
    if time < _HOUR:
        return Estimation(time / _MINUTE, TimeUnit.MINUTES)
    if time < _DAY:
        return Estimation(time / _HOUR, TimeUnit.HOURS)
    if time < _YEAR:
        return Estimation(time / _DAY, TimeUnit.DAYS)
    if time < _MILLENNIUM:
        return Estimation(time / _YEAR, TimeUnit.YEARS)
    if time < _MEGAANNUM:
        return Estimation(time / _MILLENNIUM, TimeUnit.MILLENNIA)
    if time < _GIGAANNUM:
        return Estimation(time / _MEGAANNUM, TimeUnit.MEGAANNUM)
    return Estimation(time / _GIGAANNUM, TimeUnit.GIGAANNUM)


def format_duration(estimation: Estimation) -> str:
    """Formats an estimation, e.g. "12.50 hours" or "3.20e+05 megaannum"."""
    if estimation.unit in _SCIENTIFIC:
        return f"{estimation.time:.2e} {estimation.unit.value}"
    return f"{estimation.time:.2f} {estimation.unit.value}"
