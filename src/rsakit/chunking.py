"""Marshalling between text, fixed-width byte chunks and the integers RSA operates on.

Chunks are `(bits(n) - 1) // 8` bytes wide, so every chunk read as a big-endian integer is strictly smaller than the
modulus. The final chunk is right-padded with null bytes; decryption strips every trailing null, which means genuine
trailing nulls in a plaintext do not survive a round-trip.

Typical usage example:

    size = chunk_size(pub.mod)
    groups = chunk("Hello, world!", size)
    ints = [bytes_to_integer(g) for g in groups]
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsakit.errors import MalformedChunkError
from rsakit.errors import NonUTF8DecodedMessageError
from rsakit.errors import UnencodableMessageError

ENCODING = "utf-8"


def chunk_size(n: int) -> int:
    """Calculates the chunk width, in bytes, for the modulus `n`.

    The width counts the whole bytes below the top bit of `n`, so even a chunk of all 0xff bytes stays below the
    modulus. For moduli whose bit length is not a multiple of 8 this is floor(bits(n) / 8), otherwise one byte less.

    Args:
        n: The modulus.

    Returns:
        The chunk width in bytes, always narrower than the byte length of `n`.

    Raises:
        ValueError: If the modulus is too small to hold a single byte.
    """
    size = (n.bit_length() - 1) // 8
    if size < 1:
        raise ValueError("Modulus must be at least 256 to hold a single byte chunk.")
    return size


def chunk(message: str, size: int) -> list[bytes]:
    """Splits a message into groups of `size` bytes, zero padding the last one.

    Args:
        message: The text to split. Encoded as UTF-8.
        size: The width of every chunk in bytes.

    Returns:
        The chunks in message order. Empty for an empty message.

    Raises:
        UnencodableMessageError: If the message cannot be encoded as UTF-8.
    """
    if size < 1:
        raise ValueError("Chunk size must be at least 1.")
    try:
        raw = message.encode(ENCODING)
    except UnicodeEncodeError as exc:
        raise UnencodableMessageError("Message is not encodable as UTF-8.") from exc
    if len(raw) % size:
        raw += b"\x00" * (size - len(raw) % size)
    return [raw[i:i + size] for i in range(0, len(raw), size)]


def unchunk(chunks: list[bytes]) -> str:
    """Joins decrypted chunks back into text, dropping the null padding.

    Args:
        chunks: Decrypted chunks in message order.

    Returns:
        The message with all trailing null characters removed.

    Raises:
        NonUTF8DecodedMessageError: If the joined bytes are not valid UTF-8.
    """
    try:
        text = b"".join(chunks).decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise NonUTF8DecodedMessageError("Decrypted message is not valid UTF-8. Wrong key?") from exc
    return text.rstrip("\x00")


def bytes_to_integer(msg: bytes) -> int:
    """Converts a byte string to an integer in accordance to preset procedures.

    Args:
        msg: The bytes (AKA Octet String) to convert.

    Returns:
        The representative integer.
    """
    return int.from_bytes(msg, byteorder="big", signed=False)


def integer_to_bytes(msg: int, fixedlen: int) -> bytes:
    """Converts an integer to a string, using a fixed-length byte representation.

    Args:
        msg: The integer to unmarshal.
        fixedlen: The target length of the byte string.

    Returns:
        The representative bytes. (AKA Octet String)

    Raises:
        MalformedChunkError: If the integer does not fit into `fixedlen` bytes.
    """
    try:
        return msg.to_bytes(fixedlen, byteorder="big", signed=False)
    except OverflowError as exc:
        raise MalformedChunkError(f"Integer does not fit into {fixedlen} bytes.") from exc
