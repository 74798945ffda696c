# topmark:header:start
#
#   project      : PipeConsole
#   file         : write.py
#   file_relpath : src/pipeconsole/cli/commands/write.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeConsole `write` command.

Writes the given VALUES (or, without VALUES, the lines read from standard input)
through a console writer. Values are text by default; ``--hex`` turns them into raw
bytes and ``--diagnostic LEVEL`` turns them into diagnostic records that are written
to standard error.

Examples:
  pipeconsole write hello world
  pipeconsole write --no-newline --encoding utf-16 hello
  pipeconsole write --hex 1b5b33316d
  printf 'disk almost full\\n' | pipeconsole write --diagnostic warning
"""

from __future__ import annotations

from contextlib import nullcontext
from typing import TYPE_CHECKING

import click

from pipeconsole.cli.cli_types import EnumChoiceParam
from pipeconsole.cli.cmd_common import (
    build_writer,
    explicit_args,
    resolve_config,
    translate_errors,
    with_config_diagnostics,
)
from pipeconsole.cli.errors import ConsoleUsageError
from pipeconsole.cli.keys import ArgKey, CliCmd, CliOpt
from pipeconsole.cli.options import writer_options
from pipeconsole.config.logging import get_logger
from pipeconsole.core.objects import Line, RawBytes, Text
from pipeconsole.diagnostic.model import DiagnosticLevel, DiagnosticRecord
from pipeconsole.pipeline.host import cancel_on_interrupt, run_pipeline
from pipeconsole.streams.reader import ConsoleReader

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pipeconsole.config.model import Config
    from pipeconsole.core.objects import PipelineObject


logger = get_logger(__name__)


def _payload_text(obj: PipelineObject) -> str | None:
    if isinstance(obj, (Line, Text)):
        return obj.text
    return None


@click.command(
    name=CliCmd.WRITE,
    help="Write VALUES (or standard input lines) through the console writer.",
)
@writer_options
@click.option(
    CliOpt.HEX,
    "hex_values",
    is_flag=True,
    help="Interpret values as hexadecimal and write the decoded bytes unchanged.",
)
@click.option(
    CliOpt.DIAGNOSTIC,
    "diagnostic",
    type=EnumChoiceParam(DiagnosticLevel),
    default=None,
    metavar="LEVEL",
    help=(
        "Write values as diagnostics of this level to standard error "
        f"({', '.join(v.value for v in DiagnosticLevel)})."
    ),
)
@click.argument("values", nargs=-1)
def write_command(
    *,
    values: tuple[str, ...],
    no_newline: bool | None,
    encoding: str | None,
    hex_values: bool,
    diagnostic: DiagnosticLevel | None,
) -> None:
    """Write values through the console writer.

    Args:
        values (tuple[str, ...]): Values to write; standard input lines when empty.
        no_newline (bool | None): Do not terminate text values with a newline;
            None defers to config.
        encoding (str | None): Explicit output encoding for text values.
        hex_values (bool): Decode values from hexadecimal into raw bytes.
        diagnostic (DiagnosticLevel | None): Write values as diagnostics of this level.
    """
    if hex_values and diagnostic is not None:
        raise ConsoleUsageError(
            f"The '{CliOpt.HEX}' and '{CliOpt.DIAGNOSTIC}' options are mutually exclusive."
        )

    ctx = click.get_current_context()
    args = explicit_args(ctx, (ArgKey.NO_NEWLINE, ArgKey.ENCODING))
    config: Config = resolve_config(ctx, args)

    def convert(obj: PipelineObject) -> Iterator[PipelineObject]:
        text = _payload_text(obj)
        if text is None:
            yield obj
        elif hex_values:
            try:
                yield RawBytes(bytes.fromhex(text))
            except ValueError as e:
                raise ConsoleUsageError(f"Invalid hexadecimal value {text!r}: {e}") from e
        elif diagnostic is not None:
            yield DiagnosticRecord(level=diagnostic, message=text, source=CliCmd.WRITE)
        else:
            yield obj

    reader: ConsoleReader | None = None
    source: Iterable[PipelineObject]
    if values:
        source = [Text(v) for v in values]
    else:
        reader = ConsoleReader(read_count=config.read_count)
        source = reader

    writer = build_writer(ctx, config)
    interrupt_guard = cancel_on_interrupt(reader) if reader is not None else nullcontext()
    with translate_errors(), interrupt_guard:
        count = run_pipeline(
            with_config_diagnostics(config, source), writer, stages=(convert,)
        )
    logger.info("write: wrote %d object(s)", count)
