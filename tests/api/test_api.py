# topmark:header:start
#
#   project      : PipeConsole
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public `pipeconsole.api` surface."""

from __future__ import annotations

import io

import pytest

from pipeconsole import api
from pipeconsole.core.cancellation import CancellationToken
from pipeconsole.core.objects import ByteChunk, Line, Text
from pipeconsole.diagnostic.model import DiagnosticRecord
from pipeconsole.streams.handles import StreamHandle
from tests.conftest import CapturedOutput


def test_read_console_text_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """read_console yields lines from the process's standard input."""
    monkeypatch.setattr("sys.stdin", io.StringIO("x\ny\n"))
    assert list(api.read_console()) == [Line("x"), Line("y")]


def test_read_console_binary_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """read_console in binary mode borrows the binary standard input."""
    stream = io.BytesIO(b"abcde")
    monkeypatch.setattr(
        "pipeconsole.streams.reader.open_standard_input",
        lambda: StreamHandle(stream, name="<stdin>"),
    )
    chunks = list(api.read_console(as_byte_stream=True, read_count=2))
    assert chunks == [ByteChunk(b"ab"), ByteChunk(b"cd"), ByteChunk(b"e")]


def test_read_console_honors_the_token(monkeypatch: pytest.MonkeyPatch) -> None:
    """A cancelled token ends the sequence immediately."""
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    token = CancellationToken()
    token.cancel()
    assert list(api.read_console(token=token)) == []


def test_read_console_rejects_bad_read_count() -> None:
    """Invalid read counts are rejected eagerly."""
    with pytest.raises(ValueError):
        api.read_console(read_count=0)


def test_write_console_routes_each_kind(captured: CapturedOutput) -> None:
    """Text to stdout, diagnostics to stderr; the count covers every object."""
    count = api.write_console(
        [Text("a"), "b", DiagnosticRecord.warning("w")], console=captured.console
    )
    assert count == 3
    assert captured.out.getvalue() == "a\nb\n"
    assert captured.err.getvalue() == "w\n"


def test_write_console_rejects_unknown_encoding() -> None:
    """An unknown codec is reported before anything is written."""
    with pytest.raises(LookupError):
        api.write_console(["x"], encoding="no-such-codec")


def test_get_version_is_a_string() -> None:
    """The installed version is exposed."""
    assert isinstance(api.get_version(), str) and api.get_version()
