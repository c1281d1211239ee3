# topmark:header:start
#
#   project      : AssignMark
#   file         : cmd_common.py
#   file_relpath : src/assignmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by AssignMark subcommands."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from assignmark.cli.errors import (
    AssignmarkConfigError,
    AssignmarkEncodingError,
    AssignmarkFileNotFoundError,
    AssignmarkIOError,
    AssignmarkMalformedDocumentError,
    AssignmarkRenderError,
    AssignmarkUsageError,
)
from assignmark.config.logging import get_logger
from assignmark.core.diagnostics import DiagnosticLevel
from assignmark.core.errors import (
    ConfigError,
    ExampleNotFoundError,
    MalformedChunkError,
    RenderError,
    UsageError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from assignmark.cli.console_api import ConsoleLike
    from assignmark.config.logging import AssignmarkLogger
    from assignmark.core.diagnostics import Diagnostic

logger: AssignmarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the root group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` default, ``>0`` verbose)."""
    return int(ctx.obj.get("verbosity_level", 0))


def render_diagnostics(
    ctx: click.Context,
    diagnostics: Iterable[Diagnostic],
) -> None:
    """Print config diagnostics; warnings and infos are hidden in quiet mode."""
    console: ConsoleLike = get_console(ctx)
    quiet: bool = get_effective_verbosity(ctx) < 0
    color: bool = bool(ctx.obj.get("color_enabled", False))
    for d in diagnostics:
        if quiet and d.level is not DiagnosticLevel.ERROR:
            continue
        console.warn(d.render(color=color))


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise domain errors as CLI errors carrying sysexits exit codes.

    Raises:
        AssignmarkUsageError: For `UsageError`.
        AssignmarkMalformedDocumentError: For `MalformedChunkError`.
        AssignmarkEncodingError: For a document that is not valid UTF-8.
        AssignmarkFileNotFoundError: For `ExampleNotFoundError` and missing files.
        AssignmarkRenderError: For `RenderError`.
        AssignmarkConfigError: For `ConfigError`.
        AssignmarkIOError: For any other `OSError`.
    """
    try:
        yield
    except UsageError as e:
        raise AssignmarkUsageError(str(e)) from e
    except MalformedChunkError as e:
        raise AssignmarkMalformedDocumentError(str(e)) from e
    except ExampleNotFoundError as e:
        raise AssignmarkFileNotFoundError(str(e)) from e
    except RenderError as e:
        raise AssignmarkRenderError(str(e)) from e
    except UnicodeDecodeError as e:
        logger.error("Encoding error: %s", e)
        raise AssignmarkEncodingError(f"Document is not valid UTF-8: {e}") from e
    except ConfigError as e:
        raise AssignmarkConfigError(str(e)) from e
    except FileNotFoundError as e:
        raise AssignmarkFileNotFoundError(str(e)) from e
    except OSError as e:
        logger.error("I/O error: %s", e)
        raise AssignmarkIOError(str(e)) from e
