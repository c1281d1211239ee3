# topmark:header:start
#
#   project      : AssignMark
#   file         : discovery.py
#   file_relpath : src/assignmark/discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Identify main documents and the auxiliary files that travel with them.

A *main document* is an annotated source whose file name ends with the
configured suffix (``-main.Rmd`` by default). Its *base name* is the file name
with that suffix removed; derived variants are written as ``<base>-<variant>``.

Every other file below the main document's directory is an auxiliary file
(data, images, bibliography, ...) copied next to each variant, except:

- the top-level ``assignmark.toml``,
- files whose relative path matches ``-(main|assign|sol)`` (main documents and
  previously generated variants), and
- files matching one of the configured gitignore-style exclude patterns.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from assignmark.config.logging import get_logger
from assignmark.constants import CONFIG_FILE_NAME, DERIVED_NAME_PATTERN, MAIN_SUFFIX
from assignmark.emitter.fs import LocalFileSystem

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from assignmark.config.logging import AssignmarkLogger
    from assignmark.emitter.fs import FileSystem

logger: AssignmarkLogger = get_logger(__name__)

_DERIVED_RE: re.Pattern[str] = re.compile(DERIVED_NAME_PATTERN)


def is_main_document(path: Path | str, *, suffix: str = MAIN_SUFFIX) -> bool:
    """Return True if ``path`` names a main document (file name ends with ``suffix``)."""
    name: str = Path(path).name
    return name.endswith(suffix) and len(name) > len(suffix)


def extract_base_name(path: Path | str, *, suffix: str = MAIN_SUFFIX) -> str:
    """Return the base name of a main document.

    Args:
        path (Path | str): Path to the main document.
        suffix (str): Main document suffix.

    Returns:
        str: The file name without ``suffix`` (``hw00-main.Rmd`` gives ``hw00``).

    Raises:
        ValueError: If ``path`` is not a main document.
    """
    name: str = Path(path).name
    if not is_main_document(name, suffix=suffix):
        raise ValueError(f"{name!r} does not end with {suffix!r}")
    return name[: -len(suffix)]


def is_derived_name(relpath: str) -> bool:
    """Return True if ``relpath`` looks like a main document or a generated variant."""
    return _DERIVED_RE.search(relpath) is not None


def select_dependencies(
    relpaths: Iterable[str],
    *,
    exclude_patterns: Sequence[str] = (),
) -> list[str]:
    """Filter candidate auxiliary files.

    Args:
        relpaths (Iterable[str]): POSIX-style paths relative to the document directory.
        exclude_patterns (Sequence[str]): Gitignore-style patterns to drop.

    Returns:
        list[str]: The retained paths, sorted.
    """
    spec: PathSpec | None = (
        PathSpec.from_lines(GitWildMatchPattern, list(exclude_patterns))
        if exclude_patterns
        else None
    )
    kept: list[str] = []
    for rel in relpaths:
        if rel == CONFIG_FILE_NAME:
            continue
        if is_derived_name(rel):
            logger.trace("Skipping derived file: %s", rel)
            continue
        if spec is not None and spec.match_file(rel):
            logger.debug("Excluded by pattern: %s", rel)
            continue
        kept.append(rel)
    kept.sort()
    logger.debug("Selected %d auxiliary file(s)", len(kept))
    return kept


def relative_posix(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` as a POSIX string."""
    return path.relative_to(root).as_posix()


def dependency_files(
    main: Path,
    *,
    exclude_patterns: Sequence[str] = (),
    skip_dirs: Sequence[Path] = (),
    fs: FileSystem | None = None,
) -> list[str]:
    """Return the auxiliary files to copy next to each variant of ``main``.

    Args:
        main (Path): The main document.
        exclude_patterns (Sequence[str]): Gitignore-style patterns to drop.
        skip_dirs (Sequence[Path]): Directories whose contents are never copied
            (typically the output directory when it lives below the source directory).
        fs (FileSystem | None): Filesystem implementation; defaults to the local disk.

    Returns:
        list[str]: Sorted POSIX paths relative to ``main``'s directory.
    """
    filesystem: FileSystem = fs or LocalFileSystem()
    root: Path = main.parent
    candidates: list[str] = filesystem.list_files(root)

    prefixes: list[str] = []
    for d in skip_dirs:
        try:
            prefixes.append(relative_posix(d.resolve(), root.resolve()) + "/")
        except ValueError:
            continue  # outside the source directory
    if prefixes:
        candidates = [c for c in candidates if not any(c.startswith(p) for p in prefixes)]

    return select_dependencies(candidates, exclude_patterns=exclude_patterns)
