# topmark:header:start
#
#   project      : PipeConsole
#   file         : main.py
#   file_relpath : src/pipeconsole/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeConsole command-line entry point.

Key ideas:
- Group-level options (verbosity, color, config files) are initialized once and
  placed into ``ctx.obj``.
- Standard output carries data only; logs and diagnostics go to standard error.
- Subcommands resolve their configuration through the shared helpers in
  `pipeconsole.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pipeconsole.cli.commands.cat import cat_command
from pipeconsole.cli.commands.read import read_command
from pipeconsole.cli.commands.version import version_command
from pipeconsole.cli.commands.write import write_command
from pipeconsole.cli.keys import CliCmd
from pipeconsole.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from pipeconsole.cli_shared.console import ClickConsole
from pipeconsole.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pipeconsole.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (logging, color, config sources) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): Extra config files from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    # The environment wins over -v/-q so that test harnesses can pin the level.
    level_cli = resolve_verbosity(verbose, quiet)
    level_env = resolve_env_log_level()
    level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level

    effective_color_mode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode) if color_mode else ColorMode.AUTO
    )
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    setup_logging(level=level, color=enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_paths"] = tuple(config_paths)
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PipeConsole: relay data between standard streams and object pipelines.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the PipeConsole CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print(f"Hint: use 'pipeconsole {CliCmd.CAT}' to copy stdin to stdout.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(cat_command)

cli.add_command(read_command)

cli.add_command(write_command)

if __name__ == "__main__":
    cli()
