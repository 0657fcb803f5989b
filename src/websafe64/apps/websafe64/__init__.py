# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Entry-point for websafe64 command-line interface."""


# standard libs
import sys
import logging

# external libs
from cmdkit.app import Application, ApplicationGroup
from cmdkit.cli import Interface

# internal libs (forced initialization)
from websafe64.core.config import config
from websafe64.core import logging as _logging

# internal libs
from websafe64 import __version__, __description__, __copyright__, __developer__
from websafe64.apps.websafe64 import encode, decode, size

# public interface
__all__ = ['WebSafeApp', 'main', ]


PROGRAM = 'websafe64'
USAGE = f"""\
usage: {PROGRAM} [-h] [-v] <command> [<args>...]
{__description__}\
"""

EPILOG = f"""\
Copyright {__copyright__}
{__developer__}\
"""

HELP = f"""\
{USAGE}

commands:
encode                 {encode.__doc__}
decode                 {decode.__doc__}
size                   {size.__doc__}

options:
-h, --help             Show this message and exit.
-v, --version          Show the version and exit.

Use the -h/--help flag with the above commands to
learn more about their usage.

{EPILOG}\
"""


# initialize application logger
log = logging.getLogger('websafe64')


# logging setup for command-line interface
Application.log_critical = log.critical
Application.log_exception = log.exception


class WebSafeApp(ApplicationGroup):
    """Top-level application class for websafe64."""

    interface = Interface(PROGRAM, USAGE, HELP)
    interface.add_argument('command')
    interface.add_argument('-v', '--version', action='version', version=__version__)

    command = None
    commands = {'encode': encode.EncodeApp,
                'decode': decode.DecodeApp,
                'size': size.SizeApp,
                }


def main() -> int:
    """Entry-point for `websafe64` console application."""
    return WebSafeApp.main(sys.argv[1:])
