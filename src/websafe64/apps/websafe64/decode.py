# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Decode web-safe base64 text back to raw bytes."""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
import logging
from functools import partial

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface
from cmdkit.config import ConfigurationError

# internal libs
from websafe64.core.base64 import decode, DecodeError
from websafe64.core.exceptions import log_exception, handle_exception
from websafe64.apps.websafe64.tools import read_input, write_output, get_option

# public interface
__all__ = ['DecodeApp', ]


PROGRAM = 'websafe64 decode'
USAGE = f"""\
usage: {PROGRAM} [-h] [FILE] [-o PATH]
{__doc__}\
"""

HELP = f"""\
{USAGE}

arguments:
FILE                   Path to input file (default: <stdin>).

options:
-o, --output    PATH   Path to output file (default: <stdout>).
-h, --help             Show this message and exit.

Surrounding whitespace is removed before decoding unless `cli.strip` is false.
Any other character outside the web-safe alphabet is an error.\
"""


# application logger
log = logging.getLogger('websafe64')


class DecodeApp(Application):
    """Application class for decode command."""

    interface = Interface(PROGRAM, USAGE, HELP)
    ALLOW_NOARGS = True

    source: Optional[str] = None
    interface.add_argument('source', nargs='?', default=None)

    output: Optional[str] = None
    interface.add_argument('-o', '--output', default=None)

    exceptions = {
        DecodeError: partial(log_exception, logger=log.critical,
                             status=exit_status.runtime_error),
        FileNotFoundError: partial(log_exception, logger=log.critical,
                                   status=exit_status.runtime_error),
        PermissionError: partial(log_exception, logger=log.critical,
                                 status=exit_status.runtime_error),
        IsADirectoryError: partial(log_exception, logger=log.critical,
                                   status=exit_status.runtime_error),
        ConfigurationError: partial(log_exception, logger=log.critical,
                                    status=exit_status.bad_config),
        Exception: partial(handle_exception, log),
    }

    def run(self) -> None:
        """Business logic for `websafe64 decode`."""
        text = read_input(self.source)
        if get_option('strip'):
            text = text.strip()
        data = decode(text)
        log.debug(f'Decoded {len(text)} characters ({len(data)} bytes)')
        write_output(data, self.output)
