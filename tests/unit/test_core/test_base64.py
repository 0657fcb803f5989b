# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for allocating encode/decode functions."""


# type annotations
from __future__ import annotations

# standard libs
import os
import sys
import subprocess

# external libs
import pytest
from hypothesis import given, strategies as st

# internal libs
import websafe64
from websafe64.core.base64 import encode, decode, decode_sized, DecodeError
from websafe64.core.codec import encoded_length


@pytest.mark.unit
class TestEncode:
    """Unit tests for `encode`."""

    @pytest.mark.parametrize('data, text', [(b'', ''), (b'f', 'Zg..'), (b'fo', 'Zm8.'), (b'foo', 'Zm9v')])
    def test_vectors(self, data: bytes, text: str) -> None:
        assert encode(data) == text

    def test_text_input_is_utf8(self) -> None:
        assert encode('foo') == 'Zm9v'
        assert encode('é') == encode('é'.encode('utf-8')) == 'w6k.'

    def test_buffer_types(self) -> None:
        assert encode(bytearray(b'foo')) == 'Zm9v'
        assert encode(memoryview(b'foo')) == 'Zm9v'

    @given(data=st.binary(max_size=512))
    def test_length(self, data: bytes) -> None:
        assert len(encode(data)) == encoded_length(len(data))


@pytest.mark.unit
class TestDecode:
    """Unit tests for `decode`."""

    @pytest.mark.parametrize('text, data', [('', b''), ('Zg..', b'f'), ('Zm8.', b'fo'), ('Zm9v', b'foo')])
    def test_vectors(self, text: str, data: bytes) -> None:
        assert decode(text) == data

    def test_returns_bytes(self) -> None:
        assert isinstance(decode(b'Zm8.'), bytes)
        assert decode(bytearray(b'Zm8.')) == b'fo'

    @given(data=st.binary(max_size=512))
    def test_round_trip(self, data: bytes) -> None:
        assert decode(encode(data)) == data

    @given(text=st.text(max_size=64))
    def test_round_trip_text(self, text: str) -> None:
        assert decode(encode(text)).decode('utf-8') == text

    @pytest.mark.parametrize('text', ['Zm9v\n', ' Zm9v', 'Zm+v', 'Zm/v', 'Zm8=', 'Zg==', 'Zm.v', 'Zm9'])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(DecodeError):
            decode(text)

    def test_decode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode('Zm9v ')


@pytest.mark.unit
class TestDecodeSized:
    """Unit tests for `decode_sized`."""

    def test_exact(self) -> None:
        assert decode_sized('Zm9vYmFy', 6) == b'foobar'
        assert decode_sized('', 0) == b''

    def test_wrong_length(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_sized('Zm9vYmFy', 3)
        message, = exc_info.value.args
        assert message == 'Expected 4 characters for 3 bytes, found 8'

    def test_wrong_payload(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_sized('Zm8.', 3)
        message, = exc_info.value.args
        assert message == 'Expected 3 bytes, decoded 2'

    def test_invalid_characters(self) -> None:
        with pytest.raises(DecodeError):
            decode_sized('Zm 8', 3)


@pytest.mark.unit
def test_package_interface() -> None:
    """Top-level package re-exports the codec."""
    assert websafe64.encode(b'foo') == 'Zm9v'
    assert websafe64.decode('Zm9v') == b'foo'
    assert websafe64.encoded_length(3) == 4
    assert websafe64.encoded_capacity(3) == 5
    assert websafe64.decoded_capacity(4) == 5
    assert websafe64.DecodeError is DecodeError
    buffer = bytearray(websafe64.encoded_capacity(2))
    assert websafe64.encode_into(buffer, b'fo') == 4
    assert websafe64.decode_into(bytearray(3), bytes(buffer[:4])) == 2


def run_encode_in_subprocess(cwd: str, **environ: str) -> subprocess.CompletedProcess:
    """Import the package in a fresh interpreter and encode a short payload."""
    return subprocess.run([sys.executable, '-c', 'import websafe64; print(websafe64.encode(b"foo"))'],
                          cwd=cwd, env={**os.environ, **environ}, capture_output=True, text=True)


@pytest.mark.unit
class TestImportWithoutConfiguration:
    """Library use does not depend on runtime configuration."""

    def test_bad_logging_level(self, tmp_path) -> None:
        result = run_encode_in_subprocess(str(tmp_path), WEBSAFE64_LOGGING_LEVEL='verbose')
        assert result.returncode == 0, result.stderr
        assert result.stdout == 'Zm9v\n'

    def test_non_private_local_config(self, tmp_path) -> None:
        os.makedirs(tmp_path / '.websafe64')
        filepath = tmp_path / '.websafe64' / 'config.toml'
        filepath.write_text('[logging]\nlevel = "debug"\n')
        os.chmod(filepath, 0o644)
        result = run_encode_in_subprocess(str(tmp_path))
        assert result.returncode == 0, result.stderr
        assert result.stdout == 'Zm9v\n'

    def test_no_configuration_loaded(self, tmp_path) -> None:
        code = ('import sys, websafe64; websafe64.decode("Zm9v"); '
                'print("websafe64.core.config" in sys.modules)')
        result = subprocess.run([sys.executable, '-c', code], cwd=str(tmp_path),
                                capture_output=True, text=True)
        assert result.returncode == 0, result.stderr
        assert result.stdout == 'False\n'
