# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""
Web-safe base64 encoding and decoding.

This package encodes arbitrary bytes as base64 text using '-', '_' and '.'
in place of '+', '/' and '=', so the result can be used unescaped in URLs,
filenames, and HTTP headers.
"""


# standard libs
import sys

# external libs
from rich.traceback import install as enable_rich_tracebacks

# internal libs
from websafe64.core.codec import (ALPHABET, PADDING, DecodeError, encode_into, decode_into,
                                  encoded_capacity, encoded_length, decoded_capacity)
from websafe64.core.base64 import encode, decode, decode_sized

# public interface
__all__ = ['__appname__', '__version__', '__authors__', '__developer__',
           '__license__', '__copyright__', '__description__', '__keywords__',
           'ALPHABET', 'PADDING', 'DecodeError', 'encode', 'decode', 'decode_sized',
           'encode_into', 'decode_into', 'encoded_capacity', 'encoded_length', 'decoded_capacity', ]

# project metadata
__appname__     = 'websafe64'
__version__     = '1.0.0'
__authors__     = ['WebSafe64 Developers', ]
__developer__   = 'WebSafe64 Developers'
__license__     = 'Apache License 2.0'
__copyright__   = 'WebSafe64 Developers 2022'
__description__ = 'Web-safe base64 encoding and decoding.'
__keywords__    = 'base64 encoding url web-safe codec'


# Enable rich tracebacks for interactive shells
if sys.stdout.isatty() and hasattr(sys, 'ps1'):
    enable_rich_tracebacks()
