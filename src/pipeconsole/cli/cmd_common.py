# topmark:header:start
#
#   project      : PipeConsole
#   file         : cmd_common.py
#   file_relpath : src/pipeconsole/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands: resolving
the layered configuration, building the reader and writer from it, and translating
reader/writer failures into CLI errors with the right exit codes.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from click.core import ParameterSource

from pipeconsole.cli.errors import (
    ConsoleConfigError,
    ConsoleEncodingError,
    ConsoleIOError,
)
from pipeconsole.cli_shared.console import ClickConsole
from pipeconsole.config import Config, ConfigError, MutableConfig
from pipeconsole.config.logging import get_logger
from pipeconsole.streams.reader import ConsoleReader
from pipeconsole.streams.writer import ConsoleWriter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pipeconsole.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)

# Parameter sources that count as an explicit user choice.
_EXPLICIT_SOURCES = frozenset({ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT})


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def explicit_args(ctx: click.Context, names: Iterable[str]) -> dict[str, Any]:
    """Return the parameters among ``names`` that the user set explicitly.

    Defaults are left out so that they do not override values from config files.
    """
    return {
        name: ctx.params[name]
        for name in names
        if name in ctx.params and ctx.get_parameter_source(name) in _EXPLICIT_SOURCES
    }


def resolve_config(ctx: click.Context, args: dict[str, Any]) -> Config:
    """Merge defaults, config files and explicit CLI arguments into a `Config`.

    Raises:
        ConsoleConfigError: If a config file cannot be read or the result is invalid.
    """
    ctx.ensure_object(dict)
    config_paths: tuple[str, ...] = ctx.obj.get("config_paths", ())
    no_config: bool = bool(ctx.obj.get("no_config", False))
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        draft.apply_cli_args(args)
        config: Config = draft.freeze()
    except ConfigError as e:
        raise ConsoleConfigError(str(e)) from e
    logger.debug("Resolved config: %s", config)
    return config


def build_reader(config: Config) -> ConsoleReader:
    """Return a console reader configured from ``config``."""
    return ConsoleReader(read_count=config.read_count, as_byte_stream=config.as_byte_stream)


def build_writer(ctx: click.Context, config: Config) -> ConsoleWriter:
    """Return a console writer configured from ``config`` using the context console."""
    return ConsoleWriter(
        no_newline=config.no_newline,
        encoding=config.encoding,
        console=get_console(ctx),
    )


@contextmanager
def translate_errors() -> Iterator[None]:
    """Translate reader/writer failures into CLI errors.

    - ``UnicodeError`` -> `ConsoleEncodingError` (exit 65)
    - ``OSError`` (including broken pipes) -> `ConsoleIOError` (exit 74)
    """
    try:
        yield
    except UnicodeError as e:
        logger.debug("Encoding failure", exc_info=True)
        raise ConsoleEncodingError(str(e)) from e
    except OSError as e:
        logger.debug("I/O failure", exc_info=True)
        raise ConsoleIOError(e.strerror or str(e)) from e


def with_config_diagnostics(config: Config, source: Iterable[Any]) -> Iterator[Any]:
    """Yield the config warnings ahead of ``source`` so they reach stderr first.

    Closing the returned generator also closes ``source``'s iterator.
    """
    yield from config.diagnostics
    yield from source
