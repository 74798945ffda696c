# topmark:header:start
#
#   project      : PipeConsole
#   file         : options.py
#   file_relpath : src/pipeconsole/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the PipeConsole CLI.

This module centralizes reusable options (verbosity, color, config, reader and
writer settings) and their resolution logic, so the group and the commands can
stay thin. The helpers here are Click-aware.
"""

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from pipeconsole.cli.cli_types import EncodingParam
from pipeconsole.cli.errors import ConsoleUsageError
from pipeconsole.cli.keys import CliOpt
from pipeconsole.config.logging import TRACE_LEVEL, get_logger
from pipeconsole.constants import DEFAULT_READ_COUNT

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        ConsoleUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ConsoleUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        count=True,
        help="Increase log verbosity on stderr (repeat up to three times).",
    )(f)
    f = click.option(
        "-q",
        CliOpt.QUIET,
        count=True,
        help="Only log errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stderr_isatty: bool | None = None) -> bool:
    """Determine whether styled messages (errors, hints) should use color.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stderr_isatty: Whether stderr is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stderr is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stderr_isatty is None:
        isatty = getattr(sys.stderr, "isatty", None)
        stderr_isatty = bool(isatty()) if isatty is not None else False
    return stderr_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        CliOpt.COLOR_MODE,
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color for error messages: auto (default), always, or never.",
    )(f)
    f = click.option(
        CliOpt.NO_COLOR_MODE,
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config`` options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        CliOpt.NO_CONFIG,
        "no_config",
        is_flag=True,
        help="Ignore pipeconsole.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        CliOpt.CONFIG_PATHS,
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def reader_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the console reader options (``--as-byte-stream``, ``--read-count``).

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        f"{CliOpt.AS_BYTE_STREAM}/{CliOpt.NO_AS_BYTE_STREAM}",
        "as_byte_stream",
        default=None,
        help="Treat input as binary: emit byte chunks instead of lines (default: lines).",
    )(f)
    f = click.option(
        CliOpt.READ_COUNT,
        "read_count",
        type=click.IntRange(min=1),
        default=DEFAULT_READ_COUNT,
        show_default=True,
        help="Buffer length when reading in binary mode.",
    )(f)
    return f


def writer_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the console writer options (``--no-newline``, ``--encoding``).

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        f"{CliOpt.NO_NEWLINE}/{CliOpt.NEWLINE}",
        "no_newline",
        default=None,
        help="Do not write a newline after text values (default: write one).",
    )(f)
    f = click.option(
        CliOpt.ENCODING,
        "encoding",
        type=EncodingParam(),
        default=None,
        help=(
            "Encode text with this encoding and write it to the raw output stream "
            "(default: platform console encoding)."
        ),
    )(f)
    return f
