"""Textbook RSA from scratch, in an Academic Sense.

Provides probable-prime generation, RSA key pair derivation and chunked encryption/decryption of arbitrary-length text
using raw modular exponentiation. The number theory underneath (binary extended GCD, modular inverse, Miller-Rabin) is
exposed as well.

Typical usage example:

    pub, priv = generate_keys(2048)
    c = encrypt_message("Hi there!", pub)
    r = decrypt_message(c, priv)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsakit.caesar import caesar_shift
from rsakit.chunking import chunk
from rsakit.chunking import chunk_size
from rsakit.errors import DuplicatePrimesError
from rsakit.errors import MalformedChunkError
from rsakit.errors import NoModularInverseError
from rsakit.errors import NonUTF8DecodedMessageError
from rsakit.errors import RSAError
from rsakit.errors import UnencodableMessageError
from rsakit.estimate import estimate_brute_force_time
from rsakit.estimate import format_duration
from rsakit.keygen import generate_keys
from rsakit.keygen import generate_prime
from rsakit.keygen import miller_rabin
from rsakit.mathutils import base_n_to_base10
from rsakit.mathutils import binary_extended_gcd
from rsakit.mathutils import mod_inverse
from rsakit.rsa import decrypt
from rsakit.rsa import decrypt_message
from rsakit.rsa import encrypt
from rsakit.rsa import encrypt_message
from rsakit.rsa import RSAPrivKey
from rsakit.rsa import RSAPubKey

__version__ = "0.1.0"
__all__ = [
    "RSAPrivKey",
    "RSAPubKey",
    "generate_keys",
    "generate_prime",
    "miller_rabin",
    "binary_extended_gcd",
    "mod_inverse",
    "base_n_to_base10",
    "chunk",
    "chunk_size",
    "encrypt",
    "decrypt",
    "encrypt_message",
    "decrypt_message",
    "estimate_brute_force_time",
    "format_duration",
    "caesar_shift",
    "RSAError",
    "DuplicatePrimesError",
    "NoModularInverseError",
    "NonUTF8DecodedMessageError",
    "MalformedChunkError",
    "UnencodableMessageError",
]
