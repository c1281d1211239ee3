# topmark:header:start
#
#   project      : AssignMark
#   file         : color.py
#   file_relpath : src/assignmark/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for terminal output.

Precedence: explicit ``--color``/``--no-color``, then the ``FORCE_COLOR`` and
``NO_COLOR`` environment variables, then TTY detection on stdout.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return True if ANSI color should be enabled.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value;
            ``None`` or ``AUTO`` defer to the environment and the terminal.
        stdout_isatty (bool | None): Override for TTY detection.

    Returns:
        bool: Whether to emit ANSI styles.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError, OSError):
            stdout_isatty = False
    return stdout_isatty
