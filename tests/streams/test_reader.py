# topmark:header:start
#
#   project      : PipeConsole
#   file         : test_reader.py
#   file_relpath : tests/streams/test_reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `ConsoleReader` in text and binary mode.

Text mode reads from an injected text stream; binary mode reads through an injected
handle factory over an in-memory buffer (see `tests.conftest.binary_input`).
"""

from __future__ import annotations

import io
import math
from typing import TYPE_CHECKING

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pipeconsole.core.cancellation import CancellationToken
from pipeconsole.core.objects import ByteChunk, Line
from pipeconsole.streams.handles import StreamHandle
from pipeconsole.streams.reader import ConsoleReader
from tests.conftest import binary_input, mark_hypothesis_slow

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def _lines(text: str) -> list[str]:
    reader = ConsoleReader(stdin=io.StringIO(text))
    out: list[str] = []
    for obj in reader:
        assert isinstance(obj, Line)
        out.append(obj.text)
    return out


# --- Text mode ---


def test_text_mode_yields_one_line_per_input_line() -> None:
    """Three lines without a final newline yield three lines."""
    assert _lines("a\nb\nc") == ["a", "b", "c"]


def test_text_mode_does_not_add_a_phantom_line() -> None:
    """A trailing newline does not produce an empty final line."""
    assert _lines("a\nb\n") == ["a", "b"]


def test_text_mode_keeps_empty_lines() -> None:
    """Blank lines in the middle of the input are preserved."""
    assert _lines("a\n\nb\n") == ["a", "", "b"]


def test_text_mode_strips_crlf() -> None:
    """Windows line endings are removed."""
    stream = io.TextIOWrapper(io.BytesIO(b"x\r\ny\r\n"), encoding="utf-8", newline="")
    reader = ConsoleReader(stdin=stream)
    assert [obj.text for obj in reader if isinstance(obj, Line)] == ["x", "y"]


def test_text_mode_empty_input_yields_nothing() -> None:
    """Empty input is an empty sequence."""
    assert _lines("") == []


def test_text_mode_stop_before_start_yields_nothing() -> None:
    """A reader stopped before iteration performs no read."""
    reader = ConsoleReader(stdin=io.StringIO("a\nb\n"))
    reader.stop()
    assert list(reader) == []
    assert reader.cancelled


def test_text_mode_stop_mid_iteration() -> None:
    """Stopping after the first line ends the sequence before the next read."""
    reader = ConsoleReader(stdin=io.StringIO("a\nb\nc\n"))
    seen: list[Line | ByteChunk] = []
    for obj in reader:
        seen.append(obj)
        reader.stop()
    assert seen == [Line("a")]


# --- Binary mode ---


def test_binary_mode_chunks_are_capped_by_read_count() -> None:
    """Ten bytes read with a capacity of four yield chunks of 4, 4 and 2 bytes."""
    reader = ConsoleReader(
        as_byte_stream=True, read_count=4, open_input=binary_input(b"0123456789")
    )
    chunks = list(reader)
    assert [len(c) for c in chunks] == [4, 4, 2]
    assert b"".join(c.data for c in chunks if isinstance(c, ByteChunk)) == b"0123456789"


def test_binary_mode_relays_arbitrary_bytes() -> None:
    """Binary data (NUL bytes, invalid UTF-8, CR LF) is relayed unchanged."""
    payload = b"\x00\xff\r\n\x1b[31m\xc3"
    reader = ConsoleReader(as_byte_stream=True, read_count=3, open_input=binary_input(payload))
    assert b"".join(c.data for c in reader if isinstance(c, ByteChunk)) == payload


def test_binary_mode_empty_input_yields_nothing() -> None:
    """Empty input yields no chunk (chunks are never empty)."""
    reader = ConsoleReader(as_byte_stream=True, open_input=binary_input(b""))
    assert list(reader) == []


def test_binary_chunks_do_not_alias_the_read_buffer() -> None:
    """Earlier chunks keep their contents after later reads reuse the buffer."""
    reader = ConsoleReader(as_byte_stream=True, read_count=2, open_input=binary_input(b"abcd"))
    first, second = list(reader)
    assert first == ByteChunk(b"ab")
    assert second == ByteChunk(b"cd")


def _recording(factory: Callable[[], StreamHandle], opened: list[StreamHandle]):
    def _open() -> StreamHandle:
        handle = factory()
        opened.append(handle)
        return handle

    return _open


def test_binary_mode_stop_before_start_reads_nothing() -> None:
    """A cancelled token ends the sequence before the first read and releases the handle."""
    opened: list[StreamHandle] = []
    token = CancellationToken()
    token.cancel()
    reader = ConsoleReader(
        as_byte_stream=True, token=token, open_input=_recording(binary_input(b"abc"), opened)
    )
    assert list(reader) == []
    assert all(h.closed for h in opened)


def test_binary_handle_released_on_early_close() -> None:
    """Closing the generator early releases (and closes) the owned input handle."""
    opened: list[StreamHandle] = []
    reader = ConsoleReader(
        as_byte_stream=True,
        read_count=1,
        open_input=_recording(binary_input(b"abcdef"), opened),
    )
    gen = reader.process()
    assert next(gen) == ByteChunk(b"a")
    assert len(opened) == 1 and not opened[0].closed
    gen.close()
    assert opened[0].closed


def test_binary_handle_released_at_end_of_input() -> None:
    """The handle is released once the sequence is exhausted."""
    opened: list[StreamHandle] = []
    reader = ConsoleReader(
        as_byte_stream=True, open_input=_recording(binary_input(b"xyz"), opened)
    )
    assert list(reader) == [ByteChunk(b"xyz")]
    assert opened[0].closed


def test_borrowed_input_is_not_closed() -> None:
    """A borrowed (not owned) stream stays open after the read ends."""
    stream = io.BytesIO(b"data")

    def _open() -> StreamHandle:
        return StreamHandle(stream, name="<borrowed>", owned=False)

    assert list(ConsoleReader(as_byte_stream=True, open_input=_open)) == [ByteChunk(b"data")]
    assert not stream.closed


def test_read_errors_propagate() -> None:
    """I/O errors from the stream are not swallowed."""

    class _Failing(io.RawIOBase):
        def readable(self) -> bool:
            return True

        def readinto(self, b: object) -> int:
            raise OSError("device gone")

    def _open() -> StreamHandle:
        return StreamHandle(_Failing(), name="<failing>", owned=True)  # type: ignore[arg-type]

    with pytest.raises(OSError, match="device gone"):
        list(ConsoleReader(as_byte_stream=True, open_input=_open))


@pytest.mark.parametrize("bad", [0, -1, True, 2.5, "8"])
def test_invalid_read_count_is_rejected(bad: object) -> None:
    """read_count must be a positive integer."""
    with pytest.raises(ValueError, match="read_count"):
        ConsoleReader(read_count=bad)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("length", "capacity"), [(20000, 3000), (10000, 5000), (8193, 8192), (40000, 10000)]
)
def test_binary_chunks_are_full_across_buffer_boundaries(length: int, capacity: int) -> None:
    """Reads larger than the default I/O buffer still yield full-size chunks."""
    data = bytes(i % 251 for i in range(length))
    chunks = list(
        ConsoleReader(as_byte_stream=True, read_count=capacity, open_input=binary_input(data))
    )
    assert len(chunks) == math.ceil(length / capacity)
    assert all(len(c) == capacity for c in chunks[:-1])
    assert b"".join(c.data for c in chunks if isinstance(c, ByteChunk)) == data


def test_binary_chunks_from_a_regular_file(tmp_path: Path) -> None:
    """A file opened in buffered binary mode is read one full buffer per chunk."""
    path = tmp_path / "input.bin"
    path.write_bytes(b"x" * 20000)

    def _open() -> StreamHandle:
        return StreamHandle(path.open("rb"), name=str(path), owned=True)

    chunks = list(ConsoleReader(as_byte_stream=True, read_count=3000, open_input=_open))
    assert [len(c) for c in chunks] == [3000] * 6 + [2000]


@mark_hypothesis_slow
@settings(max_examples=200, deadline=None)
@given(data=st.binary(max_size=40000), capacity=st.integers(min_value=1, max_value=10000))
def test_binary_chunk_count_property(data: bytes, capacity: int) -> None:
    """Input that is available at once is split into ceil(L / C) full-size chunks."""
    chunks = list(
        ConsoleReader(as_byte_stream=True, read_count=capacity, open_input=binary_input(data))
    )
    assert len(chunks) == math.ceil(len(data) / capacity)
    assert all(0 < len(c) <= capacity for c in chunks)
    assert b"".join(c.data for c in chunks if isinstance(c, ByteChunk)) == data


@given(st.lists(st.text(alphabet=st.characters(blacklist_characters="\r\n"))))
def test_text_lines_property(lines: list[str]) -> None:
    """Joining lines with newline terminators reads back the same lines."""
    text = "".join(f"{line}\n" for line in lines)
    assert _lines(text) == lines
