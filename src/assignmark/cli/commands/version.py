# topmark:header:start
#
#   project      : AssignMark
#   file         : version.py
#   file_relpath : src/assignmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AssignMark `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from assignmark.cli.cmd_common import get_console, get_effective_verbosity
from assignmark.constants import ASSIGNMARK_VERSION

if TYPE_CHECKING:
    from assignmark.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of AssignMark.",
)
def version_command() -> None:
    """Print the installed AssignMark version."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(f"AssignMark version: {console.styled(ASSIGNMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(ASSIGNMARK_VERSION, bold=True))
