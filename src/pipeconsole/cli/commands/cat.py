# topmark:header:start
#
#   project      : PipeConsole
#   file         : cat.py
#   file_relpath : src/pipeconsole/cli/commands/cat.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeConsole `cat` command.

Copies standard input to standard output through a console reader and a console
writer. In text mode each input line is written followed by a newline; with
``--as-byte-stream`` the input is relayed byte for byte.

Input:
  - Standard input (text lines or byte chunks).

Output:
  - Standard output; configuration warnings are written to standard error.

Exit codes:
  - 0 on success; 65 for encoding errors; 74 for I/O errors; 78 for config errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pipeconsole.cli.cmd_common import (
    build_reader,
    build_writer,
    explicit_args,
    resolve_config,
    translate_errors,
    with_config_diagnostics,
)
from pipeconsole.cli.keys import ArgKey, CliCmd
from pipeconsole.cli.options import reader_options, writer_options
from pipeconsole.config.logging import get_logger
from pipeconsole.pipeline.host import cancel_on_interrupt, run_pipeline

if TYPE_CHECKING:
    from pipeconsole.config.model import Config

logger = get_logger(__name__)


@click.command(
    name=CliCmd.CAT,
    help="Copy standard input to standard output (text lines or raw bytes).",
)
@reader_options
@writer_options
def cat_command(
    *,
    read_count: int,
    as_byte_stream: bool | None,
    no_newline: bool | None,
    encoding: str | None,
) -> None:
    """Relay standard input to standard output.

    Args:
        read_count (int): Buffer length in binary mode.
        as_byte_stream (bool | None): Read byte chunks instead of lines; None defers
            to config.
        no_newline (bool | None): Do not terminate text values with a newline;
            None defers to config.
        encoding (str | None): Explicit output encoding for text values.
    """
    ctx = click.get_current_context()
    args = explicit_args(
        ctx, (ArgKey.READ_COUNT, ArgKey.AS_BYTE_STREAM, ArgKey.NO_NEWLINE, ArgKey.ENCODING)
    )
    config: Config = resolve_config(ctx, args)

    reader = build_reader(config)
    writer = build_writer(ctx, config)
    with translate_errors(), cancel_on_interrupt(reader):
        count = run_pipeline(with_config_diagnostics(config, reader), writer)
    logger.info("cat: relayed %d object(s)", count)
