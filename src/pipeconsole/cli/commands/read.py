# topmark:header:start
#
#   project      : PipeConsole
#   file         : read.py
#   file_relpath : src/pipeconsole/cli/commands/read.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeConsole `read` command.

Reads standard input and writes one description per object read: its kind, its
length and its payload (hex for byte chunks). Useful to inspect how input is split
into lines or chunks for a given ``--read-count``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pipeconsole.cli.cli_types import EnumChoiceParam
from pipeconsole.cli.cmd_common import (
    build_reader,
    explicit_args,
    get_console,
    resolve_config,
    translate_errors,
    with_config_diagnostics,
)
from pipeconsole.cli.keys import ArgKey, CliCmd, CliOpt
from pipeconsole.cli.options import reader_options
from pipeconsole.config.logging import get_logger
from pipeconsole.core.formats import OutputFormat, render_description
from pipeconsole.core.objects import Text
from pipeconsole.diagnostic.model import DiagnosticRecord
from pipeconsole.pipeline.host import cancel_on_interrupt, run_pipeline
from pipeconsole.streams.writer import ConsoleWriter

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pipeconsole.config.model import Config
    from pipeconsole.core.objects import PipelineObject

logger = get_logger(__name__)


@click.command(
    name=CliCmd.READ,
    help="Describe the objects read from standard input, one per line.",
)
@reader_options
@click.option(
    CliOpt.OUTPUT_FORMAT,
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def read_command(
    *,
    read_count: int,
    as_byte_stream: bool | None,
    output_format: OutputFormat | None = None,
) -> None:
    """Describe every object produced by the console reader.

    Args:
        read_count (int): Buffer length in binary mode.
        as_byte_stream (bool | None): Read byte chunks instead of lines; None defers
            to config.
        output_format (OutputFormat | None): ``text`` (default) or ``ndjson``.
    """
    ctx = click.get_current_context()
    args = explicit_args(ctx, (ArgKey.READ_COUNT, ArgKey.AS_BYTE_STREAM))
    config: Config = resolve_config(ctx, args)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    def describe(obj: PipelineObject) -> Iterator[PipelineObject]:
        # Config warnings pass through untouched and end up on stderr.
        if isinstance(obj, DiagnosticRecord):
            yield obj
            return
        yield Text(render_description(obj, fmt))

    reader = build_reader(config)
    # Descriptions are always newline-terminated text on the console encoding.
    writer = ConsoleWriter(console=get_console(ctx))
    with translate_errors(), cancel_on_interrupt(reader):
        count = run_pipeline(
            with_config_diagnostics(config, reader), writer, stages=(describe,)
        )
    logger.info("read: described %d object(s)", count)
