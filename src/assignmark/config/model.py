# topmark:header:start
#
#   project      : AssignMark
#   file         : model.py
#   file_relpath : src/assignmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the API and emitter.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. Runtime defaults (`assignmark.config.io.load_defaults_dict`).
    2. ``assignmark.toml`` in the source document's directory, or else the
       ``[tool.assignmark]`` table of ``pyproject.toml`` in that directory.
    3. Extra config files given explicitly (``--config``).
    4. CLI/API overrides (`MutableConfig.apply_overrides`).

Path semantics:
    - ``[output].directory`` declared in a config file is resolved against that
      file's directory.
    - An ``output_dir`` override is resolved against the invocation CWD.
"""

from __future__ import annotations

import re

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from assignmark.config.io import (
    extract_tool_section,
    get_bool_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from assignmark.config.keys import Override, Toml
from assignmark.config.logging import get_logger
from assignmark.constants import (
    ASIS_PATTERN,
    CONFIG_FILE_NAME,
    DIRECTIONS_PATTERN,
    FENCE_MARKER,
    MAIN_SUFFIX,
    PYPROJECT_FILE_NAME,
    RENDER_COMMAND,
    RENDER_FORMATS,
    SOLUTION_PATTERN,
)
from assignmark.core.diagnostics import Diagnostic, DiagnosticLog
from assignmark.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from assignmark.config.io import TomlTable
    from assignmark.config.logging import AssignmarkLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: AssignmarkLogger = get_logger(__name__)

DEFAULT_TAG_PATTERNS: Mapping[str, str] = {
    Toml.KEY_TAG_SOLUTION: SOLUTION_PATTERN,
    Toml.KEY_TAG_DIRECTIONS: DIRECTIONS_PATTERN,
    Toml.KEY_TAG_ASIS: ASIS_PATTERN,
}


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for AssignMark.

    Attributes:
        assign_file (bool): Whether to build the student assignment variant.
        soln_file (bool): Whether to build the instructor solution variant.
        render_files (bool): Whether to hand written documents to the renderer.
        zip_files (bool): Whether to archive each variant directory.
        output_dir (Path | None): Parent directory for the variant directories;
            ``None`` derives it from the document's base name.
        fence_marker (str): Chunk fence marker.
        tag_patterns (Mapping[str, str]): Tag pattern per tag name
            (``solution``, ``directions``, ``asis``).
        main_suffix (str): Required suffix of the source document's file name.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns excluded from
            the auxiliary files copied next to each variant.
        render_command (str): Executable used to render documents.
        render_formats (tuple[str, ...]): Output formats requested from the renderer.
        config_files (tuple[Path | str, ...]): Config sources used, in merge order.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading or sanitizing.
    """

    assign_file: bool
    soln_file: bool
    render_files: bool
    zip_files: bool
    output_dir: Path | None

    fence_marker: str
    tag_patterns: Mapping[str, str]

    main_suffix: str
    exclude_patterns: tuple[str, ...]

    render_command: str
    render_formats: tuple[str, ...]

    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    def pattern_for(self, tag: str) -> str:
        """Return the configured pattern for ``tag``."""
        return self.tag_patterns[tag]

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_VARIANTS: {
                Toml.KEY_ASSIGN: self.assign_file,
                Toml.KEY_SOLUTION: self.soln_file,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_DIRECTORY: str(self.output_dir) if self.output_dir else "",
                Toml.KEY_RENDER: self.render_files,
                Toml.KEY_ARCHIVE: self.zip_files,
            },
            Toml.SECTION_TAGS: {
                Toml.KEY_FENCE: self.fence_marker,
                **dict(self.tag_patterns),
            },
            Toml.SECTION_FILES: {
                Toml.KEY_MAIN_SUFFIX: self.main_suffix,
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
            Toml.SECTION_RENDER: {
                Toml.KEY_COMMAND: self.render_command,
                Toml.KEY_FORMATS: list(self.render_formats),
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            assign_file=self.assign_file,
            soln_file=self.soln_file,
            render_files=self.render_files,
            zip_files=self.zip_files,
            output_dir=self.output_dir,
            fence_marker=self.fence_marker,
            tag_patterns=dict(self.tag_patterns),
            main_suffix=self.main_suffix,
            exclude_patterns=list(self.exclude_patterns),
            render_command=self.render_command,
            render_formats=list(self.render_formats),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Scalar fields use ``None`` to mean "not set by this layer", so that
    `merge_with` only overrides what a layer actually declares.
    """

    assign_file: bool | None = None
    soln_file: bool | None = None
    render_files: bool | None = None
    zip_files: bool | None = None
    output_dir: Path | None = None

    fence_marker: str | None = None
    tag_patterns: dict[str, str] = field(default_factory=lambda: {})

    main_suffix: str | None = None
    exclude_patterns: list[str] = field(default_factory=lambda: [])

    render_command: str | None = None
    render_formats: list[str] | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Sanitize this builder and freeze it into an immutable `Config`."""
        self.sanitize()
        return Config(
            assign_file=True if self.assign_file is None else self.assign_file,
            soln_file=True if self.soln_file is None else self.soln_file,
            render_files=True if self.render_files is None else self.render_files,
            zip_files=True if self.zip_files is None else self.zip_files,
            output_dir=self.output_dir,
            fence_marker=self.fence_marker or FENCE_MARKER,
            tag_patterns={**DEFAULT_TAG_PATTERNS, **self.tag_patterns},
            main_suffix=self.main_suffix or MAIN_SUFFIX,
            exclude_patterns=tuple(self.exclude_patterns),
            render_command=self.render_command or RENDER_COMMAND,
            render_formats=tuple(self.render_formats or RENDER_FORMATS),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    def sanitize(self) -> None:
        """Drop invalid values in place, recording a diagnostic for each."""
        for tag, pattern in list(self.tag_patterns.items()):
            if tag not in DEFAULT_TAG_PATTERNS:
                self.diagnostics.add_warning(f"Ignoring unknown tag [tags].{tag}")
                del self.tag_patterns[tag]
                continue
            try:
                re.compile(pattern)
            except re.error as exc:
                logger.error("Invalid pattern for tag %s: %r (%s)", tag, pattern, exc)
                self.diagnostics.add_error(
                    f"Invalid regular expression in [tags].{tag}: {pattern!r} ({exc}); "
                    "using the default pattern"
                )
                del self.tag_patterns[tag]

        if self.fence_marker is not None and not self.fence_marker.strip():
            self.diagnostics.add_warning("Empty [tags].fence; using the default fence marker")
            self.fence_marker = None

        if self.main_suffix is not None and not self.main_suffix.strip():
            self.diagnostics.add_warning("Empty [files].main_suffix; using the default suffix")
            self.main_suffix = None

        if self.render_formats is not None and not self.render_formats:
            self.diagnostics.add_warning("Empty [render].formats; using the default formats")
            self.render_formats = None

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a builder from a parsed TOML table.

        Args:
            data (TomlTable): The AssignMark configuration table.
            config_file (Path | None): File the table was read from; relative
                ``[output].directory`` values are resolved against its directory.

        Returns:
            MutableConfig: A builder holding only the values the table declares.
        """
        draft = cls()
        diags: DiagnosticLog = draft.diagnostics

        variants: TomlTable = get_table_value(data, Toml.SECTION_VARIANTS)
        where = f"[{Toml.SECTION_VARIANTS}]"
        draft.assign_file = get_bool_value_or_none_checked(
            variants, Toml.KEY_ASSIGN, where=where, diagnostics=diags
        )
        draft.soln_file = get_bool_value_or_none_checked(
            variants, Toml.KEY_SOLUTION, where=where, diagnostics=diags
        )

        output: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        where = f"[{Toml.SECTION_OUTPUT}]"
        draft.render_files = get_bool_value_or_none_checked(
            output, Toml.KEY_RENDER, where=where, diagnostics=diags
        )
        draft.zip_files = get_bool_value_or_none_checked(
            output, Toml.KEY_ARCHIVE, where=where, diagnostics=diags
        )
        directory: str | None = get_string_value_or_none_checked(
            output, Toml.KEY_DIRECTORY, where=where, diagnostics=diags
        )
        if directory:
            base: Path = config_file.parent if config_file else Path.cwd()
            draft.output_dir = (base / directory).resolve()

        tags: TomlTable = get_table_value(data, Toml.SECTION_TAGS)
        where = f"[{Toml.SECTION_TAGS}]"
        draft.fence_marker = get_string_value_or_none_checked(
            tags, Toml.KEY_FENCE, where=where, diagnostics=diags
        )
        for key in tags:
            if key == Toml.KEY_FENCE:
                continue
            pattern: str | None = get_string_value_or_none_checked(
                tags, key, where=where, diagnostics=diags
            )
            if pattern is not None:
                draft.tag_patterns[key] = pattern

        files: TomlTable = get_table_value(data, Toml.SECTION_FILES)
        where = f"[{Toml.SECTION_FILES}]"
        draft.main_suffix = get_string_value_or_none_checked(
            files, Toml.KEY_MAIN_SUFFIX, where=where, diagnostics=diags
        )
        draft.exclude_patterns = (
            get_string_list_value_or_none_checked(
                files, Toml.KEY_EXCLUDE_PATTERNS, where=where, diagnostics=diags
            )
            or []
        )

        render: TomlTable = get_table_value(data, Toml.SECTION_RENDER)
        where = f"[{Toml.SECTION_RENDER}]"
        draft.render_command = get_string_value_or_none_checked(
            render, Toml.KEY_COMMAND, where=where, diagnostics=diags
        )
        draft.render_formats = get_string_list_value_or_none_checked(
            render, Toml.KEY_FORMATS, where=where, diagnostics=diags
        )

        if config_file is not None:
            draft.config_files.append(config_file)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a builder from ``assignmark.toml`` or ``pyproject.toml``.

        Args:
            path (Path): The configuration file.

        Returns:
            MutableConfig | None: The loaded builder, or ``None`` for a
            ``pyproject.toml`` without a ``[tool.assignmark]`` table.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            section: TomlTable | None = extract_tool_section(data)
            if section is None:
                logger.debug("No [tool.assignmark] table in %s", path)
                return None
            data = section
        logger.info("Loaded configuration from %s", path)
        return cls.from_toml_dict(data, config_file=path.resolve())

    # ------------------------------ Merging ------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay the values set by ``other`` onto this builder.

        Scalars set in ``other`` win; tag patterns are overlaid per tag;
        exclude patterns accumulate; diagnostics and provenance are appended.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for name in (
            "assign_file",
            "soln_file",
            "render_files",
            "zip_files",
            "output_dir",
            "fence_marker",
            "main_suffix",
            "render_command",
            "render_formats",
        ):
            value: Any = getattr(other, name)
            if value is not None:
                setattr(self, name, value)
        self.tag_patterns.update(other.tag_patterns)
        self.exclude_patterns.extend(other.exclude_patterns)
        self.config_files.extend(other.config_files)
        self.diagnostics.extend(other.diagnostics)
        return self

    def apply_overrides(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI/API overrides; ``None`` values leave the setting unchanged.

        Args:
            args (ArgsLike): Mapping using the `Override` keys.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for key in (
            Override.ASSIGN_FILE,
            Override.SOLN_FILE,
            Override.RENDER_FILES,
            Override.ZIP_FILES,
        ):
            value: Any = args.get(key)
            if value is not None:
                setattr(self, key, bool(value))

        raw_dir: Any = args.get(Override.OUTPUT_DIR)
        if raw_dir:
            self.output_dir = (Path.cwd() / Path(raw_dir)).resolve()
        return self

    @classmethod
    def load_merged(
        cls,
        source_dir: Path,
        *,
        config_paths: Iterable[Path] = (),
        no_config: bool = False,
        overrides: ArgsLike | None = None,
    ) -> MutableConfig:
        """Build a merged draft from defaults, discovered files, extra files and overrides.

        Args:
            source_dir (Path): Directory of the source document (discovery root).
            config_paths (Iterable[Path]): Extra config files, applied in order.
            no_config (bool): Skip discovery in ``source_dir``.
            overrides (ArgsLike | None): CLI/API overrides applied last.

        Returns:
            MutableConfig: The merged draft (call `freeze` to obtain a `Config`).

        Raises:
            ConfigError: If an explicitly requested config file does not exist.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for discovered in discover_config_files(source_dir):
                layer: MutableConfig | None = cls.from_toml_file(discovered)
                if layer is not None:
                    draft.merge_with(layer)
                    break

        for path in config_paths:
            if not path.is_file():
                raise ConfigError(f"Configuration file not found: {path}")
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft.merge_with(layer)

        if overrides:
            draft.apply_overrides(overrides)
        return draft


def discover_config_files(source_dir: Path) -> list[Path]:
    """Return candidate config files in ``source_dir``, in lookup order."""
    candidates: list[Path] = [
        source_dir / CONFIG_FILE_NAME,
        source_dir / PYPROJECT_FILE_NAME,
    ]
    return [p for p in candidates if p.is_file()]


def load_config(
    source_dir: Path,
    *,
    config_paths: Iterable[Path] = (),
    no_config: bool = False,
    overrides: ArgsLike | None = None,
) -> Config:
    """Return the frozen, merged configuration for a document in ``source_dir``."""
    return MutableConfig.load_merged(
        source_dir,
        config_paths=config_paths,
        no_config=no_config,
        overrides=overrides,
    ).freeze()
