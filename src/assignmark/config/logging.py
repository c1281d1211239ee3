# topmark:header:start
#
#   project      : AssignMark
#   file         : logging.py
#   file_relpath : src/assignmark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for AssignMark: a TRACE level, a typed logger and colored stderr output.

Log records are diagnostics for developers and go to stderr; the CLI's own
program output (``-v``/``-q``) is independent of them. The level is taken from
``ASSIGNMARK_LOG_LEVEL`` and defaults to ``CRITICAL``, so a normal run logs
nothing.

Usage:
    ```python
    from assignmark.config.logging import get_logger

    logger = get_logger(__name__)
    logger.trace("Fence index: %s", fences)
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "ASSIGNMARK_LOG_LEVEL"

HANDLER_NAME: Final[str] = "assignmark"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

# Spellings accepted in ASSIGNMARK_LOG_LEVEL besides the stdlib level names
_LEVEL_ALIASES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "WARN": logging.WARNING,
    "FATAL": logging.CRITICAL,
}


class AssignmarkLogger(logging.Logger):
    """Logger with a `trace` method for the level below DEBUG.

    TRACE is used for per-line detail (tag matches, fence indices, copied files)
    that is too noisy for DEBUG.
    """

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(AssignmarkLogger)


# Checked top-down; the first threshold at or below the record level wins
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity.

    Args:
        fmt (str): A `logging.Formatter` format string.
        color (bool): Whether to apply colors at all.
    """

    def __init__(self, fmt: str, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by its level."""
        message: str = super().format(record)
        if not self.color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def parse_log_level(value: str) -> int | None:
    """Return the level for a name (``"debug"``, ``"trace"``) or number (``"10"``).

    Returns ``None`` for blank or unknown values.
    """
    name: str = value.strip().upper()
    if not name:
        return None
    if name.isdigit():
        return int(name)
    if name in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[name]
    # getLevelName maps registered names back to their numeric level
    level: int | str = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def resolve_env_log_level() -> int | None:
    """Return the level named by ``ASSIGNMARK_LOG_LEVEL``, or ``None`` if unset or unknown."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR, ""))


def setup_logging(level: int | None = None, *, color: bool | None = None) -> None:
    """Install the AssignMark stderr handler on the root logger.

    Calling this again replaces the handler installed by a previous call and
    leaves handlers owned by others (pytest, an embedding application) alone.

    Args:
        level (int | None): Root log level; ``None`` consults the environment
            and falls back to ``CRITICAL``.
        color (bool | None): Colorize records; ``None`` colors only when
            stderr is a terminal.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL
    if color is None:
        color = sys.stderr.isatty()

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> AssignmarkLogger:
    """Return the `AssignmarkLogger` for ``name`` (usually ``__name__``)."""
    return cast("AssignmarkLogger", logging.getLogger(name))
