# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""
Web-safe base64 encoding and decoding into caller-supplied buffers.

The standard base64 alphabet uses '+', '/' and '=' which all have special
meaning inside a URL. Here they are replaced by '-', '_' and '.' respectively,
so encoded text can be used unescaped in URLs, filenames, and HTTP headers.

Examples:

    >>> dest = bytearray(encoded_capacity(3))
    >>> encode_into(dest, b'foo')
    4
    >>> bytes(dest[:4])
    b'Zm9v'

    >>> dest = bytearray(decoded_capacity(4))
    >>> decode_into(dest, 'Zm8.')
    2
    >>> bytes(dest[:2])
    b'fo'
"""


# type annotations
from __future__ import annotations
from typing import Union

# standard libs
from string import ascii_uppercase, ascii_lowercase, digits

# public interface
__all__ = ['ALPHABET', 'PADDING', 'ENCODE_TABLE', 'DECODE_TABLE', 'INVALID', 'DecodeError',
           'encode_into', 'decode_into', 'encoded_capacity', 'encoded_length', 'decoded_capacity', ]


ALPHABET: str = ascii_uppercase + ascii_lowercase + digits + '-_'
PADDING: str = '.'


# Forward table (6-bit value -> ASCII code)
ENCODE_TABLE: bytes = ALPHABET.encode('ascii')
PAD: int = ord(PADDING)


# Reverse table (ASCII code -> 6-bit value); anything above 0x3F is invalid
INVALID: int = 0x100
DECODE_TABLE: tuple = tuple(ENCODE_TABLE.find(code) if code in ENCODE_TABLE else INVALID
                            for code in range(256))


BytesLike = Union[bytes, bytearray, memoryview]


class DecodeError(ValueError):
    """Raised when text is not valid web-safe base64."""


def encoded_capacity(size: int) -> int:
    """Bytes to allocate when encoding `size` bytes (includes a terminator slot)."""
    return (size + 2) // 3 * 4 + 1


def encoded_length(size: int) -> int:
    """Exact length of the text produced by encoding `size` bytes."""
    return (size + 2) // 3 * 4


def decoded_capacity(length: int) -> int:
    """
    Bytes to allocate when decoding text of `length` characters.

    This is at least (not exactly) the number of bytes produced, with two
    bytes of slack beyond `length // 4 * 3`.
    """
    return length // 4 * 3 + 2


def encode_into(dest: Union[bytearray, memoryview], src: BytesLike) -> int:
    """
    Encode `src` into the writable buffer `dest`.

    Args:
        dest (bytearray or memoryview):
            Writable buffer of at least `encoded_length(len(src))` bytes.
        src (bytes-like):
            Raw bytes to encode.

    Returns:
        count (int): Number of bytes written to `dest` (no terminator).

    Raises:
        ValueError: `dest` is too small.
    """
    data = memoryview(src).cast('B')
    size = len(data)
    count = encoded_length(size)
    out = memoryview(dest).cast('B')
    if len(out) < count:
        raise ValueError(f'Destination too small for encoding {size} bytes '
                         f'(need {count}, given {len(out)})')

    table = ENCODE_TABLE
    tail = size % 3
    full = size - tail
    j = 0
    for i in range(0, full, 3):
        group = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        out[j] = table[group >> 18]
        out[j + 1] = table[(group >> 12) & 0x3F]
        out[j + 2] = table[(group >> 6) & 0x3F]
        out[j + 3] = table[group & 0x3F]
        j += 4

    if tail:
        group = data[full] << 16
        if tail == 2:
            group |= data[full + 1] << 8
        out[j] = table[group >> 18]
        out[j + 1] = table[(group >> 12) & 0x3F]
        out[j + 2] = table[(group >> 6) & 0x3F] if tail == 2 else PAD
        out[j + 3] = PAD
        j += 4

    return j


def _as_ascii(src: Union[str, BytesLike]) -> memoryview:
    """Coerce `src` to a memoryview over its ASCII codes."""
    if isinstance(src, str):
        try:
            return memoryview(src.encode('ascii'))
        except UnicodeEncodeError as error:
            raise DecodeError(f'Invalid character {src[error.start]!r} at position {error.start}') from error
    return memoryview(src).cast('B')


def _fail(data: memoryview, start: int, stop: int) -> DecodeError:
    """Build the error for the first bad character in `data[start:stop]`."""
    for i in range(start, stop):
        code = data[i]
        if DECODE_TABLE[code] == INVALID:
            if code == PAD:
                return DecodeError(f'Unexpected padding at position {i}')
            return DecodeError(f'Invalid character {chr(code)!r} at position {i}')
    return DecodeError(f'Invalid input at positions {start}-{stop - 1}')


def decode_into(dest: Union[bytearray, memoryview], src: Union[str, BytesLike]) -> int:
    """
    Decode web-safe base64 `src` into the writable buffer `dest`.

    Any character outside the alphabet (including whitespace) fails, as does
    padding anywhere but the end of the final group, or a length that is not
    a multiple of four.

    Args:
        dest (bytearray or memoryview):
            Writable buffer; `decoded_capacity(len(src))` bytes is always enough.
        src (str or bytes-like):
            Encoded text.

    Returns:
        count (int): Number of bytes written to `dest`.

    Raises:
        DecodeError: `src` is not valid web-safe base64.
        ValueError: `dest` is too small.
    """
    data = _as_ascii(src)
    length = len(data)
    if length == 0:
        return 0
    if length % 4:
        raise DecodeError(f'Invalid length {length} (must be a multiple of 4)')

    # strip up to two trailing padding characters; any others fail as bad characters
    stop = length
    if data[stop - 1] == PAD:
        stop -= 1
        if data[stop - 1] == PAD:
            stop -= 1

    tail = stop % 4
    full = stop - tail
    count = full // 4 * 3 + (tail - 1 if tail else 0)
    out = memoryview(dest).cast('B')
    if len(out) < count:
        raise ValueError(f'Destination too small for decoding {length} characters '
                         f'(need {count}, given {len(out)})')

    table = DECODE_TABLE
    j = 0
    for i in range(0, full, 4):
        a, b, c, d = table[data[i]], table[data[i + 1]], table[data[i + 2]], table[data[i + 3]]
        if (a | b | c | d) > 0x3F:
            raise _fail(data, i, i + 4)
        group = (a << 18) | (b << 12) | (c << 6) | d
        out[j] = group >> 16
        out[j + 1] = (group >> 8) & 0xFF
        out[j + 2] = group & 0xFF
        j += 3

    if tail:
        a, b = table[data[full]], table[data[full + 1]]
        c = table[data[full + 2]] if tail == 3 else 0
        if (a | b | c) > 0x3F:
            raise _fail(data, full, stop)
        group = (a << 18) | (b << 12) | (c << 6)
        out[j] = group >> 16
        j += 1
        if tail == 3:
            out[j] = (group >> 8) & 0xFF
            j += 1

    return j
