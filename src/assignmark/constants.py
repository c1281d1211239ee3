# topmark:header:start
#
#   project      : AssignMark
#   file         : constants.py
#   file_relpath : src/assignmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AssignMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ASSIGNMARK_VERSION: str = get_version("assignmark")

# Config discovery
CONFIG_FILE_NAME: str = "assignmark.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.assignmark"

# Name of the package holding bundled example documents
EXAMPLES_PACKAGE: str = "assignmark.examples"

# Chunk fence and tag patterns (regular expressions, searched per line)
FENCE_MARKER: str = "```"
SOLUTION_PATTERN: str = r"solution\s?=(?!\s*[fF])\s?[tT]?[rR]?[uU]?[eE]?"
DIRECTIONS_PATTERN: str = r"directions\s?=(?!\s*[fF])\s?[tT]?[rR]?[uU]?[eE]?"
ASIS_PATTERN: str = r"asis"

# File naming convention
MAIN_SUFFIX: str = "-main.Rmd"
DERIVED_NAME_PATTERN: str = r"-(main|assign|sol)"
OUTPUT_EXTENSION: str = ".Rmd"

# External renderer
RENDER_COMMAND: str = "Rscript"
RENDER_FORMATS: tuple[str, ...] = ("html_document", "pdf_document")
