"""Core Key Generation Utility, mainly focusing on the generation of random large primes.

This module is responsible for generating textbook RSA key pairs. We will be focusing on probable primes, found by
sampling random odd candidates and filtering them through a Miller-Rabin test after a small-prime sieve.

All randomness is drawn from an explicitly passed generator handle (any `random.Random`), falling back to a fresh
`secrets.SystemRandom` per call. Passing a seeded `random.Random` makes every function here reproducible.

Typical usage example:

    miller_rabin(97)
    p = generate_prime(512)
    pub, priv = generate_keys(2048)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from concurrent.futures import ThreadPoolExecutor
import logging
import random
import secrets
import warnings

from rsakit.errors import DuplicatePrimesError
from rsakit.mathutils import calculate_totient
from rsakit.mathutils import mod_inverse
from rsakit.rsa import RSAPrivKey
from rsakit.rsa import RSAPubKey

logger = logging.getLogger(__name__)

SMALL_PRIMES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79,
                                 83, 89, 97)
PUBLIC_EXPONENT: int = 65537
DEFAULT_ROUNDS: int = 5
SECURE_KEY_SIZE: int = 2048
MINIMUM_KEY_SIZE: int = 10


def _get_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else secrets.SystemRandom()


def _trial_division(no: int) -> bool | None:
    """Check the provided `no` against the known small primes.

    Runs a fast pre-check before Miller-Rabin by using modulo division on our known frequent primes.

    Args:
         no: The number to check. Must be integer and >= 2.

    Returns:
        True if `no` is one of the small primes, False if one of them divides it, None if undecided.
    """
    for prime in SMALL_PRIMES:
        if no == prime:
            return True
        if no % prime == 0:
            return False
    return None


def miller_rabin(n: int, rounds: int = DEFAULT_ROUNDS, rng: random.Random | None = None) -> bool:
    """Perform the Miller-Rabin primality test.

    Candidates are first sieved against `SMALL_PRIMES`. The remaining ones are written as n - 1 = 2**r * d with d odd
    and put through `rounds` witness rounds.

    Witnesses are chosen in one of two explicit ways:
        * `rng` is None: deterministically cycling through `SMALL_PRIMES`. Handy for reproducible checks, but past 25
          rounds no further strength is gained.
        * `rng` given: sampled uniformly from [2, n - 2]. The chance of a composite passing is at most 4**-rounds.
    Cryptographic use should ask for at least 20 rounds.

    Args:
        n: The integer to be tested.
        rounds: Number of witness rounds to perform. Must be >= 1.
        rng: Optional random generator handle for witness sampling.

    Returns:
        True if `n` is probably prime, False if it is definitely composite.
    """
    if rounds < 1:
        raise ValueError("At least one round is required.")
    if n < 2:
        return False
    sieved = _trial_division(n)
    if sieved is not None:
        return sieved
    tw = n - 1
    r = (tw & -tw).bit_length() - 1
    d = tw >> r
    for i in range(rounds):
        if rng is None:
            a = SMALL_PRIMES[i % len(SMALL_PRIMES)]
        else:
            a = rng.randrange(2, n - 1)
        x = pow(a, d, n)
        if x == 1 or x == tw:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == tw:
                break
            if x == 1:
                return False
        else:
            return False
    return True


def generate_prime(bits: int, rounds: int = DEFAULT_ROUNDS, rng: random.Random | None = None) -> int:
    """Generate a probable prime number of the specified bit size.

    Samples a random odd integer with its top two bits set, then walks upwards in steps of two until a candidate passes
    `miller_rabin` with random witnesses. Should a walk leave the requested bit size, a fresh candidate is sampled.

    There is no iteration cap: by the prime number theorem around bits * ln(2) / 2 candidates are expected, so the loop
    terminates in practice, but not by contract.

    Args:
        bits: The size of the prime to generate in bits. Must be >= 2.
        rounds: Miller-Rabin rounds per candidate.
        rng: Optional random generator handle. Defaults to a fresh `secrets.SystemRandom`.

    Returns:
        A probable prime of exactly `bits` bits.
    """
    if bits < 2:
        raise ValueError("Primes need at least 2 bits.")
    rng = _get_rng(rng)
    # Top two bits set, so the product of two such primes has exactly 2 * bits bits.
    msk = (1 << bits - 1) | (1 << bits - 2) | 1
    tested = 0
    while True:
        candidate = rng.getrandbits(bits) | msk
        while candidate.bit_length() == bits:
            tested += 1
            if miller_rabin(candidate, rounds, rng):
                logger.debug("Found %d-bit probable prime after %d candidates.", bits, tested)
                return candidate
            candidate += 2
        logger.debug("Candidate walk left %d bits, resampling.", bits)


def _spawn(rng: random.Random | None) -> random.Random | None:
    """Derive an independent child generator, so each worker owns its own state."""
    if rng is None:
        return None
    return random.Random(rng.getrandbits(128))


def generate_primes(size: int, rng: random.Random | None = None, parallel: bool = True) -> tuple[int, int]:
    """Generates two independent primes of `size // 2` bits each.

    The two generations share nothing, so with `parallel` they are submitted as a fork-join to two worker threads.
    The big-int arithmetic holds the GIL though, so the threads interleave rather than run simultaneously and
    `parallel=True` brings no speedup over `parallel=False`; it only keeps the fork-join shape of the computation.

    Args:
        size: The key size to generate the prime pair for.
        rng: Optional random generator handle. Each prime gets its own child generator seeded from it.
        parallel: Whether to generate both primes concurrently.

    Returns:
        The pair (p, q). Not guaranteed to be distinct.
    """
    half = size // 2
    rng_p, rng_q = _spawn(rng), _spawn(rng)
    if not parallel:
        return generate_prime(half, rng=rng_p), generate_prime(half, rng=rng_q)
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="rsakit-prime") as pool:
        fut_p = pool.submit(generate_prime, half, DEFAULT_ROUNDS, rng_p)
        fut_q = pool.submit(generate_prime, half, DEFAULT_ROUNDS, rng_q)
        return fut_p.result(), fut_q.result()


def generate_keys(bits: int, rng: random.Random | None = None, parallel: bool = True) -> tuple[RSAPubKey, RSAPrivKey]:
    """Generates an RSA key pair.

    Fully generates a valid textbook RSA key: two primes, the modulus, the totient (p-1)(q-1) and the private exponent
    as the inverse of `PUBLIC_EXPONENT`. The returned private key holds the very same public key object in `.pub`.

    Args:
        bits: The modulus size in bits. Must be even and >= 10. Sizes below 2048 raise a RuntimeWarning.
        rng: Optional random generator handle, for reproducible keys.
        parallel: Whether to generate both primes concurrently.

    Returns:
        Tuple of (public key, private key).

    Raises:
        DuplicatePrimesError: If both primes came out equal. Not retried, call again.
        NoModularInverseError: If the public exponent shares a factor with the totient.
    """
    if bits < MINIMUM_KEY_SIZE:
        raise ValueError(f"Key size must be at least {MINIMUM_KEY_SIZE} bits.")
    if bits % 2 != 0:
        raise ValueError("Size must be an even number.")
    if bits < SECURE_KEY_SIZE:
        warnings.warn(f"Key size below {SECURE_KEY_SIZE} bits is unsecure! Please use with care.", RuntimeWarning)
    p, q = generate_primes(bits, rng, parallel)
    if p == q:  # (Un)Likely story.
        raise DuplicatePrimesError("Both generated primes are equal.")
    n = p * q
    d = mod_inverse(PUBLIC_EXPONENT, calculate_totient(p, q))
    del p, q
    logger.debug("Generated %d-bit modulus.", n.bit_length())
    priv = RSAPrivKey(n, PUBLIC_EXPONENT, d)
    return priv.pub, priv
