"""Exceptions raised by the RSA Kit.

Every error subclasses `RSAError` and a matching builtin, so callers may catch either the library-specific error or
the usual `ValueError`/`RuntimeError` family.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAError(Exception):
    """Base class for all RSA Kit errors."""


class DuplicatePrimesError(RSAError, RuntimeError):
    """Both independently sampled primes came out equal. The whole key generation has to be re-run."""


class NoModularInverseError(RSAError, ValueError):
    """The number and the modulus share a factor, so no modular inverse exists."""


class NonUTF8DecodedMessageError(RSAError, ValueError):
    """Decrypted bytes do not form valid UTF-8, usually due to a key/ciphertext mismatch."""


class MalformedChunkError(RSAError, ValueError):
    """A decrypted chunk does not fit into the chunk width derived from the modulus."""


class UnencodableMessageError(RSAError, ValueError):
    """The message text cannot be encoded as UTF-8, e.g. because it holds a lone surrogate."""
