# topmark:header:start
#
#   project      : AssignMark
#   file         : fs.py
#   file_relpath : src/assignmark/emitter/fs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filesystem access used by the emitter.

`FileSystem` is the protocol consumed by the API and emitter; `LocalFileSystem`
implements it on top of `pathlib`, `shutil` and `zipfile`.
"""

from __future__ import annotations

import shutil
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from assignmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from assignmark.config.logging import AssignmarkLogger

logger: AssignmarkLogger = get_logger(__name__)


class FileSystem(Protocol):
    """Protocol for the file operations needed to emit a variant."""

    def read_lines(self, path: Path) -> list[str]:
        """Return the lines of a UTF-8 text file, without line terminators."""
        ...

    def write_lines(self, path: Path, lines: Sequence[str]) -> int:
        """Write ``lines`` (newline-terminated) to ``path`` and return the bytes written."""
        ...

    def list_files(self, root: Path) -> list[str]:
        """Return every file below ``root`` as a sorted POSIX path relative to ``root``."""
        ...

    def reset_dir(self, path: Path) -> None:
        """Delete ``path`` if it exists and recreate it empty."""
        ...

    def copy_files(self, src_root: Path, relpaths: Iterable[str], dest_root: Path) -> int:
        """Copy ``relpaths`` from ``src_root`` into ``dest_root`` keeping their layout."""
        ...

    def make_archive(self, directory: Path, archive: Path) -> list[str]:
        """Zip every file of ``directory`` into ``archive`` and return the member names."""
        ...


class LocalFileSystem:
    """`FileSystem` implementation backed by the local disk."""

    def read_lines(self, path: Path) -> list[str]:
        """Read a UTF-8 file into lines.

        Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line; form feeds and Unicode
        separators stay inside the line that holds them.
        """
        with path.open("r", encoding="utf-8") as f:
            lines: list[str] = [line.removesuffix("\n") for line in f]
        logger.trace("Read %d line(s) from %s", len(lines), path)
        return lines

    def write_lines(self, path: Path, lines: Sequence[str]) -> int:
        """Write newline-terminated lines, creating parent directories."""
        text: str = "".join(f"{line}\n" for line in lines)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("Wrote %d bytes to %s", bytes_written, path)
        return bytes_written

    def list_files(self, root: Path) -> list[str]:
        """List files recursively, relative to ``root``."""
        return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())

    def reset_dir(self, path: Path) -> None:
        """Recreate ``path`` as an empty directory."""
        if path.exists():
            logger.debug("Removing existing directory %s", path)
            shutil.rmtree(path)
        path.mkdir(parents=True)

    def copy_files(self, src_root: Path, relpaths: Iterable[str], dest_root: Path) -> int:
        """Copy files preserving metadata and relative layout."""
        count: int = 0
        for rel in relpaths:
            target: Path = dest_root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src_root / rel, target)
            count += 1
        logger.debug("Copied %d file(s) from %s to %s", count, src_root, dest_root)
        return count

    def make_archive(self, directory: Path, archive: Path) -> list[str]:
        """Write a deflated zip (level 9) of ``directory``, skipping the archive itself."""
        members: list[str] = [
            rel for rel in self.list_files(directory) if directory / rel != archive
        ]
        with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
            for rel in members:
                zf.write(directory / rel, arcname=rel)
        logger.debug("Archived %d file(s) into %s", len(members), archive)
        return members
