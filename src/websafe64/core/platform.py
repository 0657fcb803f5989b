# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Runtime files and folders."""


# standard libs
import os
import stat

# external libs
from cmdkit.config import Namespace

# public interface
__all__ = ['cwd', 'home', 'root', 'site', 'path', 'default_path', 'file_permissions', 'check_private']


cwd = os.getcwd()
home = os.path.expanduser('~')
root = hasattr(os, 'getuid') and os.getuid() == 0
site = 'system' if root else 'user'
path = Namespace({
    'system': {
        'log': '/var/log/websafe64',
        'config': '/etc/websafe64.toml'},
    'user': {
        'log': f'{home}/.websafe64/log',
        'config': f'{home}/.websafe64/config.toml'},
    'local': {
        'log': f'{cwd}/.websafe64/log',
        'config': f'{cwd}/.websafe64/config.toml'},
})


# NOTE: directories are created on first write, not at import
default_path = path.system if root else path.user


def file_permissions(filepath: str) -> str:
    """File permissions mask as a string."""
    return stat.filemode(os.stat(filepath).st_mode)


def check_private(filepath: str) -> bool:
    """Check that `filepath` has '-rw-------' permissions."""
    return file_permissions(filepath) == '-rw-------'
