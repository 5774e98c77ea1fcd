"""Provides core RSA functionalities, encryption and decryption of integers and whole text messages.

Facilitates core RSA, solely under "textbook" conditions: no padding and no randomization, so the same chunk under the
same key always encrypts to the same ciphertext. Handles the general key handling as well as the per-message
marshalling through `rsakit.chunking`.

Typical usage example:

    pub, priv = generate_keys(2048)
    c = pub.encrypt_message("Hi there!")
    r = priv.decrypt_message(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Iterable

from rsakit import chunking


class RSAKey:
    """The overall RSA key class implementation.

    Acts mostly as a template for the "core" components of a RSA Key that are strictly mandatory in both a public
    and a private key. Keys are read-only once constructed.

    Attributes:
        mod: The modulus of the keypair.
        expo: The exponent of the key, whether private or public.
        csize: The chunk width in bytes used for message operations.
    """
    __slots__ = ("_mod", "_expo")

    def __init__(self, mod: int, expo: int) -> None:
        if mod < 2:
            raise ValueError("Modulus must be at least 2.")
        if expo < 1:
            raise ValueError("Exponent must be positive.")
        self._mod = mod
        self._expo = expo

    @property
    def mod(self) -> int:
        return self._mod

    @property
    def expo(self) -> int:
        return self._expo

    @property
    def csize(self) -> int:
        return chunking.chunk_size(self._mod)

    def __iter__(self):
        # Unpacks like the plain (modulus, exponent) pair.
        return iter((self._mod, self._expo))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RSAKey):
            return NotImplemented
        return type(self) is type(other) and (self._mod, self._expo) == (other._mod, other._expo)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._mod, self._expo))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mod={self._mod}, expo={self._expo})"

    def c_rsa(self, message: int) -> int:
        """Performs core RSA operation. (Encrypt/Decrypt).

        Baseline RSA Primitive, message**expo mod mod.

        Args:
            message: The int-marshalled message.

        Returns:
            The transformed message.

        Raises:
            ValueError: If the message is out of range for the current key.
        """
        if not 0 <= message < self._mod:
            raise ValueError("Message representative must be in range [0, mod-1]")
        return pow(message, self._expo, self._mod)


class RSAPubKey(RSAKey):
    """A rather straightforward subclass of RSAKey, for Public Keys.

    The init is not overwritten as a Public Key consists solely of a modulus and exponent.
    But provides the general functions expected of a public key.
    """
    __slots__ = ()

    def encrypt(self, message: int) -> int:
        """Encrypts a single integer representative."""
        return self.c_rsa(message)

    def encrypt_message(self, message: str) -> list[int]:
        """Use the public key to encrypt a text message of any length.

        The message is split into `csize`-byte chunks, each read as a big-endian integer and encrypted on its own.

        Args:
            message: The message to encrypt.

        Returns:
            One ciphertext integer per chunk.
        """
        return [self.c_rsa(chunking.bytes_to_integer(group)) for group in chunking.chunk(message, self.csize)]


class RSAPrivKey(RSAKey):
    """RSA Private Key class implementation.

    Holds the private exponent and exposes its connected public key. Both share the one modulus value, so there is
    no second copy that could drift.

    Attributes:
        mod: The modulus of the keypair.
        expo: The private exponent of the key.
        pub: The public key of the key.
    """
    __slots__ = ("_pub",)

    def __init__(self, mod: int, pub_exp: int, priv_exp: int) -> None:
        """Initialize the RSA Private Key.

        Args:
            mod: The modulus of the keypair.
            pub_exp: The public exponent of the key.
            priv_exp: The private exponent of the key.
        """
        super().__init__(mod, priv_exp)
        self._pub = RSAPubKey(self._mod, pub_exp)

    @property
    def pub(self) -> RSAPubKey:
        return self._pub

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RSAPrivKey):
            return NotImplemented
        return (self._mod, self._expo, self._pub.expo) == (other._mod, other._expo, other._pub.expo)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._mod, self._expo, self._pub.expo))

    def __repr__(self) -> str:
        # Keep the private exponent out of logs and tracebacks.
        return f"RSAPrivKey(mod={self._mod}, pub_exp={self._pub.expo})"

    def decrypt(self, ciphertext: int) -> int:
        """Decrypts a single integer representative."""
        return self.c_rsa(ciphertext)

    def decrypt_message(self, ciphertexts: Iterable[int]) -> str:
        """Decrypts a chunked message using the private key.

        Every chunk is decrypted and written back at the fixed chunk width, then the text is reassembled and the null
        padding stripped.

        Args:
            ciphertexts: The ciphertext integers, in message order.

        Returns:
            The decrypted message.

        Raises:
            MalformedChunkError: If a decrypted chunk is wider than the chunk width.
            NonUTF8DecodedMessageError: If the decrypted bytes are not valid UTF-8.
        """
        return _decrypt_chunks(self, ciphertexts)


def _as_public_key(key: RSAPubKey | tuple[int, int]) -> RSAPubKey:
    if isinstance(key, RSAPrivKey):
        raise TypeError("Expected a public key, got a private key. Use its `.pub` instead.")
    if isinstance(key, RSAPubKey):
        return key
    mod, expo = key
    return RSAPubKey(mod, expo)


def _as_private_key(key: RSAPrivKey | tuple[int, int]) -> RSAKey:
    if isinstance(key, RSAPubKey):
        raise TypeError("Expected a private key, got a public key.")
    if isinstance(key, RSAKey):
        return key
    mod, expo = key
    return RSAKey(mod, expo)


def _decrypt_chunks(key: RSAKey, ciphertexts: Iterable[int]) -> str:
    size = key.csize
    return chunking.unchunk([chunking.integer_to_bytes(key.c_rsa(c), size) for c in ciphertexts])


def encrypt(message: int, public_key: RSAPubKey | tuple[int, int]) -> int:
    """Raw textbook encryption, message**e mod n.

    Args:
        message: The integer representative, in range [0, n-1].
        public_key: The public key, or a plain (n, e) pair.

    Returns:
        The ciphertext integer.

    Raises:
        TypeError: If handed a private key.
    """
    return _as_public_key(public_key).encrypt(message)


def decrypt(ciphertext: int, private_key: RSAPrivKey | tuple[int, int]) -> int:
    """Raw textbook decryption, ciphertext**d mod n.

    Args:
        ciphertext: The ciphertext integer, in range [0, n-1].
        private_key: The private key, or a plain (n, d) pair.

    Returns:
        The plaintext integer.

    Raises:
        TypeError: If handed a public key.
    """
    return _as_private_key(private_key).c_rsa(ciphertext)


def encrypt_message(message: str, public_key: RSAPubKey | tuple[int, int]) -> list[int]:
    """Chunks and encrypts a text message. See `RSAPubKey.encrypt_message`."""
    return _as_public_key(public_key).encrypt_message(message)


def decrypt_message(ciphertexts: Iterable[int], private_key: RSAPrivKey | tuple[int, int]) -> str:
    """Decrypts and reassembles a chunked message.

    Args:
        ciphertexts: The ciphertext integers, in message order.
        private_key: The private key, or a plain (n, d) pair.

    Returns:
        The decrypted message, trailing nulls stripped.

    Raises:
        TypeError: If handed a public key.
    """
    return _decrypt_chunks(_as_private_key(private_key), ciphertexts)
