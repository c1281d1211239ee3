# topmark:header:start
#
#   project      : AssignMark
#   file         : config.py
#   file_relpath : src/assignmark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AssignMark `config` command group.

  * ``assignmark config dump FILE``: show the effective configuration that
    ``build FILE`` would use, as TOML.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from assignmark.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    render_diagnostics,
    translate_errors,
)
from assignmark.cli.options import CONTEXT_SETTINGS, common_config_options
from assignmark.config.io import to_toml
from assignmark.config.model import load_config

if TYPE_CHECKING:
    from assignmark.cli.console_api import ConsoleLike
    from assignmark.config.model import Config


@click.group(
    name="config",
    help="Inspect AssignMark configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


@config_command.command(
    name="dump",
    help="Print the merged configuration for FILE as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@common_config_options
def config_dump_command(*, file: Path, config_paths: tuple[str, ...], no_config: bool) -> None:
    """Dump the configuration that applies to FILE."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    with translate_errors():
        config: Config = load_config(
            file.parent,
            config_paths=[Path(p) for p in config_paths],
            no_config=no_config,
        )

    render_diagnostics(ctx, config.diagnostics)
    if get_effective_verbosity(ctx) > 0:
        for i, source in enumerate(config.config_files, start=1):
            console.print(f"# config {i}: {source}")
    console.print(to_toml(config.to_toml_dict()).rstrip("\n"))
