# topmark:header:start
#
#   project      : AssignMark
#   file         : __init__.py
#   file_relpath : src/assignmark/examples/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundled example main documents.

The package ships annotated ``-main.Rmd`` documents that demonstrate the tag
conventions. They are located with `importlib.resources`, so they also work
from an installed wheel.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

from assignmark.config.logging import get_logger
from assignmark.constants import EXAMPLES_PACKAGE, MAIN_SUFFIX
from assignmark.core.errors import ExampleNotFoundError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from assignmark.config.logging import AssignmarkLogger

logger: AssignmarkLogger = get_logger(__name__)

DEFAULT_EXAMPLE: str = "hw00-main.Rmd"


def _examples_root() -> Traversable:
    return resources.files(EXAMPLES_PACKAGE)


def list_examples() -> list[str]:
    """Return the file names of all bundled example main documents, sorted."""
    return sorted(
        entry.name
        for entry in _examples_root().iterdir()
        if entry.is_file() and entry.name.endswith(MAIN_SUFFIX)
    )


def get_example_filepath(name: str = DEFAULT_EXAMPLE) -> Path:
    """Return the path of a bundled example.

    Args:
        name (str): Example file name (``hw00-main.Rmd``) or its base name (``hw00``).

    Returns:
        Path: Filesystem path of the example document.

    Raises:
        ExampleNotFoundError: If no bundled example has that name.
    """
    file_name: str = name if name.endswith(MAIN_SUFFIX) else f"{name}{MAIN_SUFFIX}"
    entry: Traversable = _examples_root().joinpath(file_name)
    if not entry.is_file():
        logger.error("Bundled example not found: %s", name)
        raise ExampleNotFoundError(name, available=list_examples())
    logger.debug("Resolved example %s -> %s", name, entry)
    return Path(str(entry))
