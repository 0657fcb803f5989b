# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for websafe64 command-line interface."""


# type annotations
from __future__ import annotations

# standard libs
import io
import sys

# external libs
import pytest
from cmdkit.app import exit_status

# internal libs
from websafe64.apps.websafe64 import WebSafeApp
from websafe64.apps.websafe64.encode import EncodeApp
from websafe64.apps.websafe64.decode import DecodeApp
from websafe64.apps.websafe64.size import SizeApp


def write_file(path, data: bytes) -> str:
    """Write `data` to `path` and return it as a string."""
    path.write_bytes(data)
    return str(path)


@pytest.mark.unit
class TestEncodeApp:
    """Unit tests for `websafe64 encode`."""

    def test_file_to_stdout(self, tmp_path, capsys) -> None:
        source = write_file(tmp_path / 'data.bin', b'foobar\xfb\xff')
        assert EncodeApp.main([source]) == exit_status.success
        assert capsys.readouterr().out == 'Zm9vYmFy-_8.\n'

    def test_file_to_file(self, tmp_path) -> None:
        source = write_file(tmp_path / 'data.bin', b'fo')
        output = str(tmp_path / 'data.txt')
        assert EncodeApp.main([source, '-o', output]) == exit_status.success
        assert (tmp_path / 'data.txt').read_bytes() == b'Zm8.\n'

    def test_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b'foo')))
        assert EncodeApp.main([]) == exit_status.success
        assert capsys.readouterr().out == 'Zm9v\n'

    def test_no_newline(self, tmp_path, configure) -> None:
        configure(cli={'newline': False})
        source = write_file(tmp_path / 'data.bin', b'f')
        output = str(tmp_path / 'data.txt')
        assert EncodeApp.main([source, '--output', output]) == exit_status.success
        assert (tmp_path / 'data.txt').read_bytes() == b'Zg..'

    def test_bad_newline_option(self, tmp_path, configure) -> None:
        configure(cli={'newline': 'sometimes'})
        source = write_file(tmp_path / 'data.bin', b'f')
        assert EncodeApp.main([source]) == exit_status.bad_config

    def test_missing_file(self, tmp_path) -> None:
        assert EncodeApp.main([str(tmp_path / 'missing.bin')]) == exit_status.runtime_error


@pytest.mark.unit
class TestDecodeApp:
    """Unit tests for `websafe64 decode`."""

    def test_file_to_file(self, tmp_path) -> None:
        source = write_file(tmp_path / 'data.txt', b'Zm9vYmFy-_8.\n')
        output = str(tmp_path / 'data.bin')
        assert DecodeApp.main([source, '-o', output]) == exit_status.success
        assert (tmp_path / 'data.bin').read_bytes() == b'foobar\xfb\xff'

    def test_stdin_to_stdout(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b'Zm9v\n')))
        assert DecodeApp.main([]) == exit_status.success
        assert capsys.readouterr().out == 'foo'

    def test_no_strip(self, tmp_path, configure) -> None:
        configure(cli={'strip': False})
        source = write_file(tmp_path / 'data.txt', b'Zm9v\n')
        output = str(tmp_path / 'data.bin')
        assert DecodeApp.main([source, '-o', output]) == exit_status.runtime_error
        assert not (tmp_path / 'data.bin').exists()

    @pytest.mark.parametrize('text', [b'Zm 9v', b'Zm+v', b'Zm8=', b'Zm.v', b'Zm9'])
    def test_invalid(self, tmp_path, text: bytes) -> None:
        source = write_file(tmp_path / 'data.txt', text)
        output = str(tmp_path / 'data.bin')
        assert DecodeApp.main([source, '-o', output]) == exit_status.runtime_error
        assert not (tmp_path / 'data.bin').exists()

    def test_round_trip(self, tmp_path) -> None:
        data = bytes(range(256)) * 3
        source = write_file(tmp_path / 'data.bin', data)
        encoded = str(tmp_path / 'data.txt')
        decoded = str(tmp_path / 'data.out')
        assert EncodeApp.main([source, '-o', encoded]) == exit_status.success
        assert DecodeApp.main([encoded, '-o', decoded]) == exit_status.success
        assert (tmp_path / 'data.out').read_bytes() == data


@pytest.mark.unit
class TestSizeApp:
    """Unit tests for `websafe64 size`."""

    @pytest.mark.parametrize('action, size, expected', [('encoded', 0, 0), ('encoded', 4, 8),
                                                        ('capacity', 4, 9), ('capacity', 0, 1),
                                                        ('decoded', 8, 8), ('decoded', 5, 5)])
    def test_sizes(self, capsys, action: str, size: int, expected: int) -> None:
        assert SizeApp.main([action, str(size)]) == exit_status.success
        assert capsys.readouterr().out == f'{expected}\n'

    def test_negative(self) -> None:
        assert SizeApp.main(['encoded', '--', '-1']) == exit_status.bad_argument

    def test_not_a_number(self) -> None:
        assert SizeApp.main(['encoded', 'four']) == exit_status.bad_argument

    def test_unknown_action(self) -> None:
        assert SizeApp.main(['maximum', '4']) == exit_status.bad_argument


@pytest.mark.unit
class TestWebSafeApp:
    """Unit tests for top-level command group."""

    def test_dispatch(self, capsys) -> None:
        assert WebSafeApp.main(['size', 'encoded', '3']) == exit_status.success
        assert capsys.readouterr().out == '4\n'
