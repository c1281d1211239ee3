# topmark:header:start
#
#   project      : AssignMark
#   file         : main.py
#   file_relpath : src/assignmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AssignMark Click CLI.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Subcommands fetch the console from ``ctx.obj`` for program output.
- Internal logging is configured from ``ASSIGNMARK_LOG_LEVEL``, independently of ``-v``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from assignmark.cli.color import ColorMode, resolve_color_mode
from assignmark.cli.commands.build import build_command
from assignmark.cli.commands.config import config_command
from assignmark.cli.commands.example import example_command
from assignmark.cli.commands.version import version_command
from assignmark.cli.console import ClickConsole
from assignmark.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from assignmark.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from assignmark.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    effective_color_mode = ColorMode.NEVER if no_color else color_mode
    enable_color: bool = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env, color=enable_color)
    logger.debug("verbosity=%d log_level=%s", ctx.obj["verbosity_level"], level_env)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Derive assignment and solution documents from annotated -main.Rmd files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the AssignMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'assignmark build FILE-main.Rmd' to create the variants.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(build_command)

cli.add_command(example_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
