# topmark:header:start
#
#   project      : AssignMark
#   file         : build.py
#   file_relpath : src/assignmark/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AssignMark `build` command.

Derives the assignment and solution variants of one ``-main.Rmd`` document.
With ``--dry-run`` nothing is written; the command reports what each variant
would remove.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from assignmark import api
from assignmark.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    render_diagnostics,
    translate_errors,
)
from assignmark.cli.options import CONTEXT_SETTINGS, common_config_options
from assignmark.config.logging import get_logger

if TYPE_CHECKING:
    from assignmark.api.types import AssignResult, VariantPlan, VariantResult
    from assignmark.cli.console_api import ConsoleLike
    from assignmark.config.logging import AssignmarkLogger

logger: AssignmarkLogger = get_logger(__name__)


def _format_lines(indices: list[int]) -> str:
    return ",".join(str(i) for i in indices) if indices else "-"


@click.command(
    name="build",
    help="Create the assignment and solution variants of a -main.Rmd document.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Parent directory of the variant directories (default: the document's base name).",
)
@click.option(
    "--assign/--no-assign",
    "assign_file",
    default=None,
    help="Build the student assignment variant.",
)
@click.option(
    "--solution/--no-solution",
    "soln_file",
    default=None,
    help="Build the instructor solution variant.",
)
@click.option(
    "--render/--no-render",
    "render_files",
    default=None,
    help="Render each derived document (requires Rscript and rmarkdown).",
)
@click.option(
    "--zip/--no-zip",
    "zip_files",
    default=None,
    help="Archive each variant directory.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Report what would be removed without writing anything.",
)
@common_config_options
def build_command(
    *,
    file: Path,
    output_dir: Path | None,
    assign_file: bool | None,
    soln_file: bool | None,
    render_files: bool | None,
    zip_files: bool | None,
    dry_run: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Build the variants of FILE.

    Args:
        file (Path): The ``-main.Rmd`` document.
        output_dir (Path | None): Output directory override.
        assign_file (bool | None): Assignment variant toggle (``None`` keeps config).
        soln_file (bool | None): Solution variant toggle (``None`` keeps config).
        render_files (bool | None): Rendering toggle (``None`` keeps config).
        zip_files (bool | None): Archive toggle (``None`` keeps config).
        dry_run (bool): Plan only.
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    extra_configs: list[Path] = [Path(p) for p in config_paths]
    logger.debug("build %s (dry_run=%s, extra configs=%s)", file, dry_run, extra_configs)

    with translate_errors():
        result: AssignResult
        if dry_run:
            result = api.plan(
                file,
                output_dir=output_dir,
                assign_file=assign_file,
                soln_file=soln_file,
                config_paths=extra_configs,
                no_config=no_config,
            )
        else:
            result = api.assign(
                file,
                output_dir=output_dir,
                assign_file=assign_file,
                soln_file=soln_file,
                render_files=render_files,
                zip_files=zip_files,
                config_paths=extra_configs,
                no_config=no_config,
            )

    render_diagnostics(ctx, result.diagnostics)

    if not result.plans:
        console.warn("Nothing to do: both variants are disabled.")
        return

    if dry_run:
        for p in result.plans:
            _print_plan(console, p, vlevel=vlevel)
        return

    for r in result.results:
        _print_result(console, r, vlevel=vlevel)


def _print_plan(console: ConsoleLike, plan: VariantPlan, *, vlevel: int) -> None:
    console.print(
        f"{console.styled(plan.name, bold=True)}: would remove {len(plan.removal)} line(s), "
        f"keep {len(plan.lines)} -> {plan.document}"
    )
    if vlevel > 0:
        console.print(f"    removed lines: {_format_lines(plan.removal.sorted())}")
        console.print(f"    auxiliary files: {len(plan.dependencies)}")


def _print_result(console: ConsoleLike, result: VariantResult, *, vlevel: int) -> None:
    if vlevel < 0:
        return
    console.print(f"{console.styled(result.plan.name, bold=True)}: {result.document}")
    if vlevel > 0:
        console.print(f"    removed lines: {_format_lines(result.plan.removal.sorted())}")
        console.print(f"    auxiliary files copied: {result.copied}")
        console.print(f"    rendered: {'yes' if result.rendered else 'no'}")
        if result.archive is not None:
            console.print(f"    archive: {result.archive} ({len(result.archived)} file(s))")
