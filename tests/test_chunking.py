# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from rsakit import chunking
from rsakit.errors import MalformedChunkError
from rsakit.errors import NonUTF8DecodedMessageError
from rsakit.errors import RSAError
from rsakit.errors import UnencodableMessageError

moduli = [256, 257, 511, 512, 2**15, 65535, 65536, 2**61 - 1, 2**64 + 13, 3 * 2**1022 + 1, 2**2047 + 1]


@pytest.mark.parametrize("n,expected", [(256, 1), (511, 1), (512, 1), (65535, 1), (65536, 2), (2**24 - 1, 2),
                                        (2**61 - 1, 7), (2**1023 + 1, 127), (2**2047 + 1, 255), (2**2048 - 1, 255)])
def test_chunk_size(n, expected):
    assert chunking.chunk_size(n) == expected


@pytest.mark.parametrize("n", [0, 1, 33, 255])
def test_chunk_size_validates(n):
    with pytest.raises(ValueError, match="Modulus must be at least 256"):
        chunking.chunk_size(n)


def test_chunk_hello_world():
    assert chunking.chunk("Hello, world!", 5) == [
        bytes([72, 101, 108, 108, 111]),
        bytes([44, 32, 119, 111, 114]),
        bytes([108, 100, 33, 0, 0]),
    ]


@pytest.mark.parametrize("message,size,expected", [
    ("", 4, []),
    ("abcd", 4, [b"abcd"]),
    ("abcde", 4, [b"abcd", b"e\x00\x00\x00"]),
    ("abc", 1, [b"a", b"b", b"c"]),
    ("ø", 1, [b"\xc3", b"\xb8"]),
    ("ab", 8, [b"ab\x00\x00\x00\x00\x00\x00"]),
])
def test_chunk(message, size, expected):
    assert chunking.chunk(message, size) == expected


@pytest.mark.parametrize("size", [0, -3])
def test_chunk_validates(size):
    with pytest.raises(ValueError):
        chunking.chunk("abc", size)


def test_chunk_lone_surrogate():
    with pytest.raises(UnencodableMessageError) as exc:
        chunking.chunk("a\ud800b", 4)
    assert isinstance(exc.value, RSAError)
    assert isinstance(exc.value.__cause__, UnicodeEncodeError)


@pytest.mark.parametrize("n", moduli)
def test_chunks_below_modulus(n):
    # U+10FFFF encodes as f4 8f bf bf, the largest UTF-8 sequence there is.
    message = "\U0010ffff" * 100 + "~" * 7
    size = chunking.chunk_size(n)
    groups = chunking.chunk(message, size)
    assert all(len(g) == size for g in groups)
    assert all(chunking.bytes_to_integer(g) < n for g in groups)


def test_chunk_of_full_bytes_below_modulus():
    n = 2**16 + 1
    assert chunking.bytes_to_integer(b"\xff" * chunking.chunk_size(n)) < n


def test_unchunk_strips_padding():
    assert chunking.unchunk([b"Hello", b", wor", b"ld!\x00\x00"]) == "Hello, world!"
    assert chunking.unchunk([]) == ""


def test_unchunk_lossy_trailing_nulls():
    assert chunking.unchunk(chunking.chunk("abc\x00\x00", 4)) == "abc"


def test_unchunk_keeps_inner_nulls():
    assert chunking.unchunk(chunking.chunk("\x00a\x00b", 3)) == "\x00a\x00b"


def test_unchunk_split_multibyte():
    message = "Grüße, 世界!"
    assert chunking.unchunk(chunking.chunk(message, 1)) == message


def test_unchunk_non_utf8():
    with pytest.raises(NonUTF8DecodedMessageError) as exc:
        chunking.unchunk([b"\xff\xfe"])
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


@pytest.mark.parametrize("payload", [b"", b"\x00", b"\x00\x01", b"Quick!", b"\xff" * 64])
def test_bytes_integer_marshalling(payload):
    value = chunking.bytes_to_integer(payload)
    assert chunking.integer_to_bytes(value, len(payload)) == payload


def test_integer_to_bytes_pads():
    assert chunking.integer_to_bytes(1, 4) == b"\x00\x00\x00\x01"


@pytest.mark.parametrize("value,width", [(256, 1), (2**64, 8), (-1, 4)])
def test_integer_to_bytes_overflow(value, width):
    with pytest.raises(MalformedChunkError):
        chunking.integer_to_bytes(value, width)
