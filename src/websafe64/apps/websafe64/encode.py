# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Encode raw bytes as web-safe base64 text."""


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
from websafe64.core.base64 import encode
from websafe64.core.exceptions import log_exception, handle_exception
from websafe64.apps.websafe64.tools import read_input, write_output, get_option

# public interface
__all__ = ['EncodeApp', ]


PROGRAM = 'websafe64 encode'
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

A trailing newline is written unless `cli.newline` is false.\
"""


# application logger
log = logging.getLogger('websafe64')


class EncodeApp(Application):
    """Application class for encode command."""

    interface = Interface(PROGRAM, USAGE, HELP)
    ALLOW_NOARGS = True

    source: Optional[str] = None
    interface.add_argument('source', nargs='?', default=None)

    output: Optional[str] = None
    interface.add_argument('-o', '--output', default=None)

    exceptions = {
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
        """Business logic for `websafe64 encode`."""
        data = read_input(self.source)
        text = encode(data)
        log.debug(f'Encoded {len(data)} bytes ({len(text)} characters)')
        if get_option('newline'):
            text += '\n'
        write_output(text.encode('ascii'), self.output)
