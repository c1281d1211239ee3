# topmark:header:start
#
#   project      : AssignMark
#   file         : errors.py
#   file_relpath : src/assignmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the AssignMark API.

These exceptions are framework-agnostic: the API raises them, and the CLI layer
translates them into Click exceptions with sysexits-aligned exit codes (see
`assignmark.cli.errors`).

Hierarchy:
    AssignmarkError
    ├── UsageError              wrong number of documents / missing ``-main.Rmd`` suffix
    ├── MalformedChunkError     tagged chunk not closed by a fence line
    ├── ExampleNotFoundError    unknown bundled example (also a ``LookupError``)
    ├── RenderError             external renderer missing or failed
    └── ConfigError             unreadable or invalid configuration
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from assignmark.regions.types import StructuralError


class AssignmarkError(Exception):
    """Base class for all AssignMark errors."""


class UsageError(AssignmarkError):
    """The API or CLI was invoked with inputs that cannot be processed."""


class MalformedChunkError(AssignmarkError):
    """A tagged chunk is not closed by a pure fence line.

    Attributes:
        error (StructuralError): The structural error value reported by the region resolver.
    """

    def __init__(self, error: StructuralError) -> None:
        super().__init__(error.format_message())
        self.error = error

    @property
    def lines(self) -> tuple[int, ...]:
        """Return the offending 1-based document line numbers."""
        return self.error.lines


class ExampleNotFoundError(AssignmarkError, LookupError):
    """A requested bundled example document does not exist.

    Attributes:
        name (str): The requested example name.
        available (tuple[str, ...]): Names of the bundled examples.
    """

    def __init__(self, name: str, *, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        message: str = f"Example {name!r} does not exist"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class RenderError(AssignmarkError):
    """The external document renderer could not be run or reported a failure."""


class ConfigError(AssignmarkError):
    """A configuration file could not be loaded or holds invalid values."""
