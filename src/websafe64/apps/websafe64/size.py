# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Compute buffer sizes for encoding or decoding."""


# type annotations
from __future__ import annotations
from typing import Dict, Callable

# standard libs
import logging
from functools import partial, cached_property

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface, ArgumentError

# internal libs
from websafe64.core.codec import encoded_length, encoded_capacity, decoded_capacity
from websafe64.core.exceptions import log_exception

# public interface
__all__ = ['SizeApp', ]


PROGRAM = 'websafe64 size'
USAGE = f"""\
usage: {PROGRAM} [-h] {{encoded | capacity | decoded}} N
{__doc__}\
"""

HELP = f"""\
{USAGE}

action:
encoded          Exact length of text from encoding N bytes.
capacity         Buffer size for encoding N bytes (with terminator).
decoded          Buffer size for decoding N characters (at least).

arguments:
N                Non-negative length.

options:
-h, --help       Show this message and exit.\
"""


# application logger
log = logging.getLogger('websafe64')


class SizeApp(Application):
    """Application class for size command."""

    interface = Interface(PROGRAM, USAGE, HELP)

    action: str
    interface.add_argument('action', choices=['encoded', 'capacity', 'decoded'])

    size: int
    interface.add_argument('size', type=int)

    exceptions = {
        ArgumentError: partial(log_exception, logger=log.critical,
                               status=exit_status.bad_argument),
    }

    def run(self) -> None:
        """Print the requested size."""
        if self.size < 0:
            raise ArgumentError(f'Expected non-negative length, given {self.size}')
        print(self.actions[self.action](self.size))

    @cached_property
    def actions(self) -> Dict[str, Callable[[int], int]]:
        """Map of names to size functions."""
        return {
            'encoded': encoded_length,
            'capacity': encoded_capacity,
            'decoded': decoded_capacity,
        }
