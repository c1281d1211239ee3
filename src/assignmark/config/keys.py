# topmark:header:start
#
#   project      : AssignMark
#   file         : keys.py
#   file_relpath : src/assignmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for AssignMark configuration.

Keys defined here represent the *external configuration API* as it appears in
``assignmark.toml`` and in ``[tool.assignmark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change. CLI override keys are
defined separately (`Override`).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by AssignMark configuration.

    The ordering mirrors the runtime defaults in `assignmark.config.io.load_defaults_dict`.
    """

    # [variants]
    SECTION_VARIANTS: Final[str] = "variants"
    KEY_ASSIGN: Final[str] = "assign"
    KEY_SOLUTION: Final[str] = "solution"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"
    KEY_DIRECTORY: Final[str] = "directory"
    KEY_RENDER: Final[str] = "render"
    KEY_ARCHIVE: Final[str] = "archive"

    # [tags]
    SECTION_TAGS: Final[str] = "tags"
    KEY_FENCE: Final[str] = "fence"
    KEY_TAG_SOLUTION: Final[str] = "solution"
    KEY_TAG_DIRECTIONS: Final[str] = "directions"
    KEY_TAG_ASIS: Final[str] = "asis"

    # [files]
    SECTION_FILES: Final[str] = "files"
    KEY_MAIN_SUFFIX: Final[str] = "main_suffix"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"

    # [render]
    SECTION_RENDER: Final[str] = "render"
    KEY_COMMAND: Final[str] = "command"
    KEY_FORMATS: Final[str] = "formats"


class Override:
    """Keys accepted by `MutableConfig.apply_overrides` (CLI and API callers)."""

    ASSIGN_FILE: Final[str] = "assign_file"
    SOLN_FILE: Final[str] = "soln_file"
    RENDER_FILES: Final[str] = "render_files"
    ZIP_FILES: Final[str] = "zip_files"
    OUTPUT_DIR: Final[str] = "output_dir"
