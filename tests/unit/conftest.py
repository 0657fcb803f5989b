# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Fixtures for unit tests."""


# external libs
import pytest
from cmdkit.config import Configuration, Namespace

# internal libs
from websafe64.core import config as _config


def pytest_configure(config) -> None:
    """Register custom markers."""
    config.addinivalue_line('markers', 'unit: fast tests without external resources')


@pytest.fixture
def configure(monkeypatch):
    """Replace the global configuration with `default` merged with given sections."""
    def _configure(**sections) -> Configuration:
        new_config = Configuration(default=_config.default, test=Namespace(sections))
        monkeypatch.setattr(_config, 'config', new_config)
        return new_config
    return _configure
