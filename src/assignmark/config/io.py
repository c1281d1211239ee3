# topmark:header:start
#
#   project      : AssignMark
#   file         : io.py
#   file_relpath : src/assignmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for AssignMark configuration.

This module centralizes the helpers for reading, validating, and writing TOML
used by the configuration layer. Keeping them separate from the model avoids
import cycles and keeps `MutableConfig` focused on merge policy.

TOML parsing/formatting:
    AssignMark uses `tomlkit` for parsing and rendering.

    - `load_toml_dict()` parses on-disk TOML and returns plain dicts.
    - `to_toml()` renders a dict (after stripping TOML-incompatible ``None``).

Getters:
    The *checked* getters validate the expected shape and record **warnings**
    in a `DiagnosticLog` (and also log a warning), returning the default so
    that user mistakes never change defaulting behavior.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from assignmark.config.keys import Toml
from assignmark.config.logging import get_logger
from assignmark.constants import (
    ASIS_PATTERN,
    DIRECTIONS_PATTERN,
    FENCE_MARKER,
    MAIN_SUFFIX,
    PYPROJECT_TOOL_SECTION,
    RENDER_COMMAND,
    RENDER_FORMATS,
    SOLUTION_PATTERN,
)
from assignmark.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from assignmark.config.logging import AssignmarkLogger
    from assignmark.core.diagnostics import DiagnosticLog

TomlTable = dict[str, Any]

logger: AssignmarkLogger = get_logger(__name__)


# --- Runtime defaults ---


def load_defaults_dict() -> TomlTable:
    """Return AssignMark's **runtime defaults** as a Python dict.

    Returns:
        A new TOML-table-compatible dict, safe for callers to mutate.
    """
    return {
        Toml.SECTION_VARIANTS: {
            Toml.KEY_ASSIGN: True,
            Toml.KEY_SOLUTION: True,
        },
        Toml.SECTION_OUTPUT: {
            # An empty directory means "derive from the document's base name".
            Toml.KEY_DIRECTORY: "",
            Toml.KEY_RENDER: True,
            Toml.KEY_ARCHIVE: True,
        },
        Toml.SECTION_TAGS: {
            Toml.KEY_FENCE: FENCE_MARKER,
            Toml.KEY_TAG_SOLUTION: SOLUTION_PATTERN,
            Toml.KEY_TAG_DIRECTIONS: DIRECTIONS_PATTERN,
            Toml.KEY_TAG_ASIS: ASIS_PATTERN,
        },
        Toml.SECTION_FILES: {
            Toml.KEY_MAIN_SUFFIX: MAIN_SUFFIX,
            Toml.KEY_EXCLUDE_PATTERNS: [],
        },
        Toml.SECTION_RENDER: {
            Toml.KEY_COMMAND: RENDER_COMMAND,
            Toml.KEY_FORMATS: list(RENDER_FORMATS),
        },
    }


# --- TOML file I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``assignmark.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.assignmark]`` table of a parsed ``pyproject.toml``, if any."""
    node: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(node, Mapping):
            return None
        node = cast("Mapping[str, Any]", node).get(part)
    return cast("TomlTable", node) if isinstance(node, dict) else None


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists (TOML has no null)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


# --- Table access ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table stored under ``key``, or an empty dict."""
    value: Any = table.get(key)
    return cast("TomlTable", value) if isinstance(value, dict) else {}


# --- Schema/shape validation helpers (checked) ---


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Integers are not coerced: ``assign = 1`` is reported and ignored.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected boolean in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected boolean in {loc}, got {type(value).__name__}: {value}")
    return None


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Extract an optional list of strings, dropping non-string entries with a warning.

    Behavior:
        - If the key is missing, returns ``None``.
        - If the value is not a list, warns and returns ``None``.
        - Non-string items are ignored; each emits a warning and a diagnostic.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return None

    out: list[str] = []
    for v in cast("list[Any]", value):
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return out
