# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Input/output and configuration helpers shared by commands."""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
import sys
import logging

# internal libs
from websafe64.core import config as _config
from websafe64.core.config import ConfigurationError, blame
from websafe64.core.typing import coerce_bool

# public interface
__all__ = ['read_input', 'write_output', 'get_option', ]


# module level logger
log = logging.getLogger(__name__)


def read_input(filepath: Optional[str] = None) -> bytes:
    """Read all bytes from `filepath`, or standard input if not given or '-'."""
    if filepath is None or filepath == '-':
        log.debug('Reading from <stdin>')
        return sys.stdin.buffer.read()
    log.debug(f'Reading from {filepath}')
    with open(filepath, mode='rb') as stream:
        return stream.read()


def write_output(data: bytes, filepath: Optional[str] = None) -> None:
    """Write `data` to `filepath`, or standard output if not given or '-'."""
    if filepath is None or filepath == '-':
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    log.debug(f'Writing {len(data)} bytes to {filepath}')
    with open(filepath, mode='wb') as stream:
        stream.write(data)


def get_option(name: str) -> bool:
    """Boolean option `name` from the [cli] configuration section."""
    config = _config.config
    try:
        return coerce_bool(config.cli[name])
    except ValueError as error:
        raise ConfigurationError(f'{error} for `cli.{name}` ({blame(config, "cli", name)})') from error
