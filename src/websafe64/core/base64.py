# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Web-safe base64 encoding/decoding for representing raw data as URL-safe text."""


# type annotations
from __future__ import annotations
from typing import Union

# standard libs
import logging

# internal libs
from websafe64.core.codec import (encode_into, decode_into, encoded_length, decoded_capacity,
                                  DecodeError)

# public interface
__all__ = ['encode', 'decode', 'decode_sized', 'DecodeError', ]


# module level logger
log = logging.getLogger(__name__)


Text = Union[str, bytes, bytearray, memoryview]


def _length(data: Text) -> int:
    """Number of characters (or bytes) in `data`."""
    return len(data) if isinstance(data, str) else memoryview(data).nbytes


def encode(data: Text) -> str:
    """Encode raw bytes (or UTF-8 text) into a web-safe base64 string."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    buffer = bytearray(encoded_length(_length(data)))
    encode_into(buffer, data)
    return buffer.decode('ascii')


def decode(data: Text) -> bytes:
    """Decode web-safe base64 encoded `data` back to raw bytes."""
    buffer = bytearray(decoded_capacity(_length(data)))
    try:
        count = decode_into(buffer, data)
    except DecodeError as error:
        log.debug(f'Failed to decode {_length(data)} characters: {error}')
        raise
    del buffer[count:]
    return bytes(buffer)


def decode_sized(data: Text, size: int) -> bytes:
    """
    Decode `data` expected to hold exactly `size` raw bytes.

    The encoded length is checked against `size` before decoding, so that a
    fixed-size record is never filled from text of the wrong size.

    Example:
        >>> decode_sized('Zm9v', 3)
        b'foo'
        >>> decode_sized('Zm8', 2)
        Traceback (most recent call last):
        websafe64.core.codec.DecodeError: Expected 4 characters for 2 bytes, found 3
    """
    expected = encoded_length(size)
    length = _length(data)
    if length != expected:
        raise DecodeError(f'Expected {expected} characters for {size} bytes, found {length}')
    raw = decode(data)
    if len(raw) != size:
        raise DecodeError(f'Expected {size} bytes, decoded {len(raw)}')
    return raw
