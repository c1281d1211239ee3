# topmark:header:start
#
#   project      : AssignMark
#   file         : example.py
#   file_relpath : src/assignmark/cli/commands/example.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AssignMark `example` command: locate bundled example documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from assignmark.cli.cmd_common import get_console, translate_errors
from assignmark.cli.options import CONTEXT_SETTINGS
from assignmark.examples import DEFAULT_EXAMPLE, get_example_filepath, list_examples

if TYPE_CHECKING:
    from pathlib import Path

    from assignmark.cli.console_api import ConsoleLike


@click.command(
    name="example",
    help="Print the path of a bundled example document.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("name", required=False, default=DEFAULT_EXAMPLE)
@click.option("--list", "list_only", is_flag=True, help="List the bundled examples.")
def example_command(*, name: str, list_only: bool) -> None:
    """Print the path of example NAME (``hw00`` or ``hw00-main.Rmd``)."""
    console: ConsoleLike = get_console(click.get_current_context())
    if list_only:
        for entry in list_examples():
            console.print(entry)
        return
    with translate_errors():
        path: Path = get_example_filepath(name)
    console.print(str(path))
