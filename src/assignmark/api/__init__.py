# topmark:header:start
#
#   project      : AssignMark
#   file         : __init__.py
#   file_relpath : src/assignmark/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public AssignMark API (stable surface).

Derive a student assignment and an instructor solution from one annotated
main document:

```python
from assignmark import api

result = api.assign("hw00-main.Rmd", render_files=False, zip_files=False)
for variant in result.results:
    print(variant.document)
```

Notes:
-----
- ``config`` accepts a plain mapping mirroring the TOML schema, a frozen
  `assignmark.config.model.Config`, or ``None`` to discover ``assignmark.toml``
  / ``[tool.assignmark]`` next to the document.
- Keyword overrides (``assign_file``, ``soln_file``, ``render_files``,
  ``zip_files``, ``output_dir``) win over every config layer; ``None`` keeps the
  configured value.
- Every tag is resolved and validated before anything is written: a malformed
  chunk raises `MalformedChunkError` and leaves the output directory untouched.
- The filesystem, renderer and matcher are injectable for tests and embedding.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from assignmark.api.runtime import (
    enabled_variants,
    load_document_config,
    resolve_all,
    single_document,
)
from assignmark.api.types import AssignResult, VariantPlan, VariantResult
from assignmark.config.keys import Override
from assignmark.config.logging import get_logger
from assignmark.constants import ASSIGNMARK_VERSION
from assignmark.discovery import dependency_files
from assignmark.emitter.fs import LocalFileSystem
from assignmark.emitter.package import emit_variant, plan_variant
from assignmark.emitter.renderer import RscriptRenderer
from assignmark.regions.composer import compose_variant

if TYPE_CHECKING:
    from collections.abc import Sequence

    from assignmark.api.runtime import ConfigArg, DocumentArg
    from assignmark.config.logging import AssignmarkLogger
    from assignmark.config.model import Config
    from assignmark.emitter.fs import FileSystem
    from assignmark.emitter.renderer import Renderer
    from assignmark.regions.matcher import TextMatcher

__all__: list[str] = [
    "AssignResult",
    "VariantPlan",
    "VariantResult",
    "assign",
    "plan",
    "version",
]

logger: AssignmarkLogger = get_logger(__name__)


def plan(
    file: DocumentArg,
    *,
    output_dir: Path | str | None = None,
    assign_file: bool | None = None,
    soln_file: bool | None = None,
    config: ConfigArg = None,
    config_paths: Sequence[Path] = (),
    no_config: bool = False,
    fs: FileSystem | None = None,
    matcher: TextMatcher | None = None,
) -> AssignResult:
    """Compute what `assign` would write, without writing anything.

    Returns:
        AssignResult: A dry-run result (``results`` is empty).

    Raises:
        UsageError: If ``file`` is not exactly one main document.
        MalformedChunkError: If a tagged chunk is not closed by a fence line.
        ConfigError: If a configuration file cannot be loaded.
    """
    return _run(
        file,
        overrides={
            Override.OUTPUT_DIR: output_dir,
            Override.ASSIGN_FILE: assign_file,
            Override.SOLN_FILE: soln_file,
        },
        config=config,
        config_paths=config_paths,
        no_config=no_config,
        fs=fs,
        renderer=None,
        matcher=matcher,
        dry_run=True,
    )


def assign(
    file: DocumentArg,
    *,
    output_dir: Path | str | None = None,
    assign_file: bool | None = None,
    soln_file: bool | None = None,
    render_files: bool | None = None,
    zip_files: bool | None = None,
    config: ConfigArg = None,
    config_paths: Sequence[Path] = (),
    no_config: bool = False,
    fs: FileSystem | None = None,
    renderer: Renderer | None = None,
    matcher: TextMatcher | None = None,
) -> AssignResult:
    """Create the assignment and solution variants of a main document.

    Args:
        file (DocumentArg): The main document (exactly one; a one-item
            sequence is accepted).
        output_dir (Path | str | None): Parent directory of the variant
            directories; defaults to ``<base>`` in the working directory.
        assign_file (bool | None): Build the assignment variant.
        soln_file (bool | None): Build the solution variant.
        render_files (bool | None): Render each written document.
        zip_files (bool | None): Archive each variant directory.
        config (ConfigArg): Mapping, `Config`, or ``None`` for discovery.
        config_paths (Sequence[Path]): Extra config files applied after discovery.
        no_config (bool): Skip config discovery next to the document.
        fs (FileSystem | None): Filesystem implementation (local disk by default).
        renderer (Renderer | None): Renderer used when rendering is enabled
            (``Rscript`` by default).
        matcher (TextMatcher | None): Tag matching strategy (regex by default).

    Returns:
        AssignResult: The emitted variants.

    Raises:
        UsageError: If ``file`` is not exactly one main document.
        MalformedChunkError: If a tagged chunk is not closed by a fence line.
        ConfigError: If a configuration file cannot be loaded.
        RenderError: If rendering fails.
        OSError: If reading the document or writing outputs fails.
    """
    return _run(
        file,
        overrides={
            Override.OUTPUT_DIR: output_dir,
            Override.ASSIGN_FILE: assign_file,
            Override.SOLN_FILE: soln_file,
            Override.RENDER_FILES: render_files,
            Override.ZIP_FILES: zip_files,
        },
        config=config,
        config_paths=config_paths,
        no_config=no_config,
        fs=fs,
        renderer=renderer,
        matcher=matcher,
        dry_run=False,
    )


def _run(
    file: DocumentArg,
    *,
    overrides: dict[str, object],
    config: ConfigArg,
    config_paths: Sequence[Path],
    no_config: bool,
    fs: FileSystem | None,
    renderer: Renderer | None,
    matcher: TextMatcher | None,
    dry_run: bool,
) -> AssignResult:
    source: Path = single_document(file)
    source_dir: Path = source.parent
    cfg: Config
    base_name: str
    cfg, base_name = load_document_config(
        source,
        config,
        config_paths=config_paths,
        no_config=no_config,
        overrides=overrides,
    )
    out_dir: Path = cfg.output_dir or (Path.cwd() / base_name)
    filesystem: FileSystem = fs or LocalFileSystem()

    lines: list[str] = filesystem.read_lines(source)
    logger.info("Read %d line(s) from %s", len(lines), source)
    regions = resolve_all(lines, cfg, matcher=matcher)

    dependencies: list[str] = dependency_files(
        source,
        exclude_patterns=cfg.exclude_patterns,
        skip_dirs=[out_dir],
        fs=filesystem,
    )

    plans: tuple[VariantPlan, ...] = tuple(
        plan_variant(
            variant=variant,
            base_name=base_name,
            output_dir=out_dir,
            source_lines=lines,
            removal=compose_variant(variant, regions),
            dependencies=dependencies,
        )
        for variant in enabled_variants(cfg)
    )
    if not plans:
        logger.warning("Both variants are disabled; nothing to do")

    results: tuple[VariantResult, ...] = ()
    if not dry_run:
        active_renderer: Renderer | None = None
        if cfg.render_files:
            active_renderer = renderer or RscriptRenderer(cfg.render_command)
        results = tuple(
            emit_variant(
                p,
                source_dir=source_dir,
                fs=filesystem,
                renderer=active_renderer,
                render_formats=cfg.render_formats,
                archive=cfg.zip_files,
            )
            for p in plans
        )

    return AssignResult(
        source=source,
        base_name=base_name,
        output_dir=out_dir,
        regions=regions,
        plans=plans,
        results=results,
        dry_run=dry_run,
        diagnostics=cfg.diagnostics,
    )


def version() -> str:
    """Return the installed AssignMark version."""
    return ASSIGNMARK_VERSION
