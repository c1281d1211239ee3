# topmark:header:start
#
#   project      : AssignMark
#   file         : package.py
#   file_relpath : src/assignmark/emitter/package.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plan and emit one document variant.

For a variant named ``<base>-<variant>`` the emitter:

1. recreates ``<output_dir>/<base>-<variant>/`` from scratch;
2. copies the auxiliary files into it;
3. writes the source lines minus the variant's removal set to
   ``<base>-<variant>.Rmd``;
4. optionally renders the written document;
5. optionally zips the whole directory into ``<base>-<variant>.zip``.

`plan_variant` computes names and kept lines without touching the disk, so the
same plan serves both dry runs and real emission.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from assignmark.config.logging import get_logger
from assignmark.constants import OUTPUT_EXTENSION

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from assignmark.config.logging import AssignmarkLogger
    from assignmark.emitter.fs import FileSystem
    from assignmark.emitter.renderer import Renderer
    from assignmark.regions.composer import RemovalSet
    from assignmark.regions.types import Variant

logger: AssignmarkLogger = get_logger(__name__)

ARCHIVE_EXTENSION: str = ".zip"


@dataclass(frozen=True)
class VariantPlan:
    """Everything needed to emit one variant.

    Attributes:
        variant (Variant): The variant being produced.
        name (str): ``<base>-<variant>``; used for the directory and file stems.
        directory (Path): Variant directory, recreated on emission.
        removal (RemovalSet): Lines dropped from the source document.
        lines (tuple[str, ...]): The derived document's lines.
        dependencies (tuple[str, ...]): Auxiliary files (relative to the source directory).
    """

    variant: Variant
    name: str
    directory: Path
    removal: RemovalSet
    lines: tuple[str, ...]
    dependencies: tuple[str, ...] = ()

    @property
    def document(self) -> Path:
        """Return the path of the derived document."""
        return self.directory / f"{self.name}{OUTPUT_EXTENSION}"

    @property
    def archive(self) -> Path:
        """Return the path of the variant archive."""
        return self.directory / f"{self.name}{ARCHIVE_EXTENSION}"


@dataclass(frozen=True)
class VariantResult:
    """Outcome of emitting one variant.

    Attributes:
        plan (VariantPlan): The plan that was executed.
        bytes_written (int): Size of the derived document.
        copied (int): Number of auxiliary files copied.
        rendered (bool): Whether the renderer ran.
        archive (Path | None): The archive path, when archiving was requested.
        archived (tuple[str, ...]): Archive member names.
    """

    plan: VariantPlan
    bytes_written: int
    copied: int
    rendered: bool
    archive: Path | None = None
    archived: tuple[str, ...] = ()

    @property
    def document(self) -> Path:
        """Return the path of the derived document."""
        return self.plan.document


def plan_variant(
    *,
    variant: Variant,
    base_name: str,
    output_dir: Path,
    source_lines: Sequence[str],
    removal: RemovalSet,
    dependencies: Sequence[str] = (),
) -> VariantPlan:
    """Build the plan for one variant without touching the filesystem."""
    name: str = f"{base_name}-{variant.value}"
    return VariantPlan(
        variant=variant,
        name=name,
        directory=output_dir / name,
        removal=removal,
        lines=removal.apply(source_lines),
        dependencies=tuple(dependencies),
    )


def emit_variant(
    plan: VariantPlan,
    *,
    source_dir: Path,
    fs: FileSystem,
    renderer: Renderer | None = None,
    render_formats: Sequence[str] = (),
    archive: bool = False,
) -> VariantResult:
    """Write a planned variant to disk.

    Args:
        plan (VariantPlan): The variant to emit.
        source_dir (Path): Directory holding the main document and auxiliary files.
        fs (FileSystem): Filesystem implementation.
        renderer (Renderer | None): Renderer to run on the written document;
            ``None`` skips rendering.
        render_formats (Sequence[str]): Output formats passed to ``renderer``.
        archive (bool): Whether to zip the variant directory afterwards.

    Returns:
        VariantResult: What was written.

    Raises:
        RenderError: If the renderer fails.
        OSError: If a filesystem operation fails.
    """
    logger.info("Emitting %s into %s", plan.name, plan.directory)
    fs.reset_dir(plan.directory)
    copied: int = fs.copy_files(source_dir, plan.dependencies, plan.directory)
    bytes_written: int = fs.write_lines(plan.document, plan.lines)

    rendered: bool = False
    if renderer is not None:
        renderer.render(plan.document, render_formats)
        rendered = True

    archive_path: Path | None = None
    members: list[str] = []
    if archive:
        archive_path = plan.archive
        members = fs.make_archive(plan.directory, archive_path)
        logger.info("Archived %s (%d file(s))", archive_path.name, len(members))

    return VariantResult(
        plan=plan,
        bytes_written=bytes_written,
        copied=copied,
        rendered=rendered,
        archive=archive_path,
        archived=tuple(members),
    )
