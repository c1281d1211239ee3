# topmark:header:start
#
#   project      : AssignMark
#   file         : runtime.py
#   file_relpath : src/assignmark/api/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime helpers shared by the public API and the CLI.

This module normalizes user inputs (document list, configuration) and performs
the read-and-resolve phase. All region resolutions are checked here, so a
structural error always surfaces before any output is written.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from assignmark.config.logging import get_logger
from assignmark.config.model import Config, MutableConfig, load_config
from assignmark.constants import MAIN_SUFFIX
from assignmark.core.errors import ConfigError, UsageError
from assignmark.discovery import extract_base_name, is_main_document
from assignmark.regions.matcher import fence_lines
from assignmark.regions.resolver import resolve_regions
from assignmark.regions.types import Tag, Variant

if TYPE_CHECKING:
    from assignmark.config.logging import AssignmarkLogger
    from assignmark.config.model import ArgsLike
    from assignmark.regions.matcher import TextMatcher
    from assignmark.regions.types import Region, RegionResolution

logger: AssignmarkLogger = get_logger(__name__)

DocumentArg = str | Path | Sequence[str | Path]
ConfigArg = Config | Mapping[str, Any] | None


def single_document(file: DocumentArg) -> Path:
    """Return the only document of ``file``.

    Raises:
        UsageError: If ``file`` does not name exactly one document.
    """
    if isinstance(file, (str, Path)):
        return Path(file)
    items: list[str | Path] = list(file)
    if len(items) != 1:
        raise UsageError(f"Exactly one main document is required (got {len(items)})")
    return Path(items[0])


def ensure_config(
    config: ConfigArg,
    *,
    source_dir: Path,
    config_paths: Sequence[Path] = (),
    no_config: bool = False,
    overrides: ArgsLike | None = None,
) -> Config:
    """Return a frozen config for a document in ``source_dir``.

    Args:
        config (ConfigArg): ``None`` to discover and merge config files, a
            mapping mirroring the TOML schema (layered over the defaults), or a
            ready `Config`.
        source_dir (Path): Directory of the main document.
        config_paths (Sequence[Path]): Extra config files (``None`` config only).
        no_config (bool): Skip discovery (``None`` config only).
        overrides (ArgsLike | None): Overrides applied last in every case.

    Returns:
        Config: The effective configuration.
    """
    if config is None:
        return load_config(
            source_dir,
            config_paths=config_paths,
            no_config=no_config,
            overrides=overrides,
        )
    draft: MutableConfig
    if isinstance(config, Config):
        draft = config.thaw()
    else:
        draft = MutableConfig.from_defaults().merge_with(MutableConfig.from_toml_dict(dict(config)))
    if overrides:
        draft.apply_overrides(overrides)
    return draft.freeze()


def check_main_document(path: Path, suffix: str) -> str:
    """Validate the main document name and return its base name.

    Raises:
        UsageError: If the file name does not end with ``suffix``.
    """
    if not is_main_document(path, suffix=suffix):
        raise UsageError(
            f"{path.name!r} is not a main document (expected a name ending in {suffix!r})"
        )
    return extract_base_name(path, suffix=suffix)


def load_document_config(
    source: Path,
    config: ConfigArg,
    *,
    config_paths: Sequence[Path] = (),
    no_config: bool = False,
    overrides: ArgsLike | None = None,
) -> tuple[Config, str]:
    """Load the config for ``source`` and validate the document name against it.

    A config that fails to load cannot change the main suffix, so in that case
    the name is checked against the default suffix first and a misnamed
    document is reported as a usage error.

    Returns:
        tuple[Config, str]: The effective config and the document's base name.

    Raises:
        UsageError: If the file name does not end with the main suffix.
        ConfigError: If a config file cannot be loaded.
    """
    try:
        cfg: Config = ensure_config(
            config,
            source_dir=source.parent,
            config_paths=config_paths,
            no_config=no_config,
            overrides=overrides,
        )
    except ConfigError:
        check_main_document(source, MAIN_SUFFIX)
        raise
    return cfg, check_main_document(source, cfg.main_suffix)


def enabled_variants(config: Config) -> list[Variant]:
    """Return the variants to build, in output order."""
    variants: list[Variant] = []
    if config.assign_file:
        variants.append(Variant.ASSIGN)
    if config.soln_file:
        variants.append(Variant.SOLN)
    return variants


def resolve_all(
    lines: Sequence[str],
    config: Config,
    *,
    matcher: TextMatcher | None = None,
) -> dict[Tag, tuple[Region, ...]]:
    """Resolve every tag of a document, failing on the first malformed tag.

    The fence index is computed once and shared by all tags.

    Raises:
        MalformedChunkError: If a tagged chunk is not closed by a pure fence line.
    """
    fences: tuple[int, ...] = fence_lines(lines, config.fence_marker)
    logger.debug("Found %d fence line(s)", len(fences))
    resolutions: dict[Tag, RegionResolution] = {
        tag: resolve_regions(
            lines,
            config.pattern_for(tag.value),
            fences,
            marker=config.fence_marker,
            matcher=matcher,
        )
        for tag in Tag
    }
    return {tag: res.unwrap() for tag, res in resolutions.items()}
