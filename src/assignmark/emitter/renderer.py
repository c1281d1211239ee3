# topmark:header:start
#
#   project      : AssignMark
#   file         : renderer.py
#   file_relpath : src/assignmark/emitter/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""External document rendering.

The default renderer shells out to ``Rscript -e 'rmarkdown::render(...)'``,
producing every requested output format next to the document.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Protocol

from assignmark.config.logging import get_logger
from assignmark.constants import RENDER_COMMAND, RENDER_FORMATS
from assignmark.core.errors import RenderError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from assignmark.config.logging import AssignmarkLogger

logger: AssignmarkLogger = get_logger(__name__)


class Renderer(Protocol):
    """Protocol for document renderers."""

    def render(self, document: Path, formats: Sequence[str]) -> None:
        """Render ``document`` to each of ``formats``.

        Raises:
            RenderError: If rendering cannot be performed or fails.
        """
        ...


def _r_string(value: str) -> str:
    escaped: str = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_expression(document: Path, formats: Sequence[str]) -> str:
    """Return the R expression that renders ``document`` to ``formats``."""
    fmt: str = ", ".join(_r_string(f) for f in formats)
    return f"rmarkdown::render({_r_string(document.name)}, output_format = c({fmt}))"


class RscriptRenderer:
    """Render R Markdown documents through ``Rscript`` and ``rmarkdown``."""

    def __init__(self, command: str = RENDER_COMMAND) -> None:
        self.command = command

    def render(self, document: Path, formats: Sequence[str] = RENDER_FORMATS) -> None:
        """Run ``rmarkdown::render`` on ``document`` inside its directory.

        Raises:
            RenderError: If the command is missing or exits with a non-zero status.
        """
        argv: list[str] = [self.command, "-e", render_expression(document, formats)]
        logger.info("Rendering %s (%s)", document, ", ".join(formats))
        logger.debug("Running: %s", argv)
        try:
            proc: subprocess.CompletedProcess[str] = subprocess.run(
                argv,
                cwd=document.parent,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise RenderError(
                f"Renderer command not found: {self.command!r} (use --no-render to skip rendering)"
            ) from e
        if proc.returncode != 0:
            detail: str = proc.stderr.strip().splitlines()[-1] if proc.stderr.strip() else ""
            logger.error("Rendering %s failed: %s", document, proc.stderr.strip())
            raise RenderError(
                f"Rendering {document.name} failed with exit status {proc.returncode}"
                + (f": {detail}" if detail else "")
            )
