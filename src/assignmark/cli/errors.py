# topmark:header:start
#
#   project      : AssignMark
#   file         : errors.py
#   file_relpath : src/assignmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the AssignMark CLI.

Usage:
    Domain errors (`assignmark.core.errors`) are translated into these
    `click.ClickException` subclasses by `assignmark.cli.cmd_common.translate_errors`,
    so each failure exits with its sysexits-aligned status.

Styling:
    Exceptions prefer the project console when one is present in the Click
    context (see `show()`); otherwise Click's default display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from assignmark.core.exit_codes import ExitCode


class AssignmarkCliError(click.ClickException):
    """Base class for all AssignMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class AssignmarkUsageError(AssignmarkCliError):
    """Wrong number of documents or a document without the main suffix."""

    exit_code = ExitCode.USAGE_ERROR


class AssignmarkMalformedDocumentError(AssignmarkCliError):
    """A tagged chunk is not closed by a fence line."""

    exit_code = ExitCode.MALFORMED_DOCUMENT


class AssignmarkEncodingError(AssignmarkCliError):
    """The document could not be decoded as UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class AssignmarkFileNotFoundError(AssignmarkCliError):
    """Input document or bundled example does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class AssignmarkRenderError(AssignmarkCliError):
    """The renderer is unavailable or failed."""

    exit_code = ExitCode.RENDER_UNAVAILABLE


class AssignmarkIOError(AssignmarkCliError):
    """Reading the document or writing outputs failed."""

    exit_code = ExitCode.IO_ERROR


class AssignmarkConfigError(AssignmarkCliError):
    """A configuration file is missing, unreadable or invalid."""

    exit_code = ExitCode.CONFIG_ERROR
