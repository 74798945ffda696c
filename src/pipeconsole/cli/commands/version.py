# topmark:header:start
#
#   project      : PipeConsole
#   file         : version.py
#   file_relpath : src/pipeconsole/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeConsole `version` command.

Prints the current PipeConsole version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from pipeconsole.cli.cli_types import EnumChoiceParam
from pipeconsole.cli.cmd_common import get_console
from pipeconsole.cli.keys import CliCmd, CliOpt
from pipeconsole.constants import PIPECONSOLE_VERSION
from pipeconsole.core.formats import OutputFormat

if TYPE_CHECKING:
    from pipeconsole.cli_shared.console_api import ConsoleLike


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of PipeConsole.",
)
@click.option(
    CliOpt.OUTPUT_FORMAT,
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of PipeConsole.

    Args:
        output_format (OutputFormat | None): Plain text (default) or NDJSON.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if output_format == OutputFormat.NDJSON:
        console.print(json.dumps({"version": PIPECONSOLE_VERSION}))
    else:
        console.print(console.styled(PIPECONSOLE_VERSION, bold=True))
