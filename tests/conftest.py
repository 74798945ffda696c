# topmark:header:start
#
#   project      : PipeConsole
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PipeConsole test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Streams are injected rather than patched: readers take a text stream or a
    handle factory, writers take a `ClickConsole` bound to ``StringIO`` buffers and
    a handle factory over ``BytesIO``.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from pipeconsole.cli_shared.console import ClickConsole
from pipeconsole.config import logging
from pipeconsole.constants import LOG_LEVEL_ENV_VAR
from pipeconsole.streams.handles import StreamHandle
from pipeconsole.streams.writer import ConsoleWriter

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_pipeconsole_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PipeConsole's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise on stderr (which CLI tests assert on)
    when the developer has exported PIPECONSOLE_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty working directory so no config file is discovered.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class CapturedOutput:
    """Byte and text buffers standing in for the process's standard streams.

    ``raw`` receives what the writer sends to the binary output handle; ``out`` and
    ``err`` receive what the console prints. Raw and console output share no buffer,
    so ordering across them is checked through ``handles`` (every borrowed handle).
    """

    def __init__(self) -> None:
        self.raw = io.BytesIO()
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.handles: list[StreamHandle] = []
        self.console = ClickConsole(enable_color=False, out=self.out, err=self.err)

    def open_output(self) -> StreamHandle:
        """Borrow a handle on ``raw`` (the buffer stays open on release)."""
        handle = StreamHandle(self.raw, name="<raw>", owned=False)
        self.handles.append(handle)
        return handle

    def writer(self, **kwargs: Any) -> ConsoleWriter:
        """Return a `ConsoleWriter` bound to these buffers."""
        return ConsoleWriter(console=self.console, open_output=self.open_output, **kwargs)


@pytest.fixture
def captured() -> CapturedOutput:
    """Fresh output buffers for writer tests.

    Returns:
        CapturedOutput: Buffers plus a writer factory.
    """
    return CapturedOutput()


def binary_input(data: bytes) -> Callable[[], StreamHandle]:
    """Return a handle factory reading ``data`` (the stream is owned and closed on release).

    Args:
        data (bytes): The simulated standard input.

    Returns:
        Callable[[], StreamHandle]: Factory suitable for ``ConsoleReader(open_input=...)``.
    """

    def _open() -> StreamHandle:
        return StreamHandle(io.BufferedReader(io.BytesIO(data)), name="<test-stdin>", owned=True)

    return _open
