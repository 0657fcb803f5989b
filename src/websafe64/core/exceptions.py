# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Common exceptions and error handling."""


# type annotations
from __future__ import annotations
from typing import Callable, Optional

# standard libs
import os
import sys
import datetime
import traceback
import logging

# external libs
from cmdkit.app import exit_status

# internal libs
from websafe64.core import ansi
from websafe64.core.platform import default_path

# public interface
__all__ = ['log_exception', 'handle_exception', 'write_traceback',
           'display_critical', ]


def display_critical(message: str, module: Optional[str] = None) -> None:
    """Print critical message to stderr (logging may not be configured)."""
    label = '' if not module else ' ' + ansi.faint(f'[{module}]')
    print(f'{ansi.bold(ansi.magenta("CRITICAL"))}{label} {message}', file=sys.stderr)


def write_traceback(exc: Exception, site: Optional[str] = None, module: Optional[str] = None,
                    logger: Optional[logging.Logger] = None) -> str:
    """Write exception traceback to file and report where it went."""
    site = site or default_path.log
    os.makedirs(site, exist_ok=True)
    time = datetime.datetime.now().strftime('%Y%m%d-%H%M%S')
    path = os.path.join(site, f'exception-{time}.log')
    with open(path, mode='w') as stream:
        print(''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)), file=stream)
    msg = str(exc).replace('\n', ' - ')
    if logger is None:
        display_critical(f'{exc.__class__.__name__}: {msg}', module=module)
        display_critical(f'Exception traceback written to {path}', module=module)
    else:
        logger.critical(f'{exc.__class__.__name__}: {msg}')
        logger.critical(f'Exception traceback written to {path}')
    return path


def log_exception(exc: Exception, logger: Callable[[str], None], status: int) -> int:
    """Log the exception and exit with `status`."""
    logger(str(exc))
    return status


def handle_exception(logger: logging.Logger, exc: Exception) -> int:
    """Write exception to file and return exit code."""
    write_traceback(exc, logger=logger)
    return exit_status.uncaught_exception
