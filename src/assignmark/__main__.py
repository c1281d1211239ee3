# topmark:header:start
#
#   project      : AssignMark
#   file         : __main__.py
#   file_relpath : src/assignmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running AssignMark via ``python -m assignmark``.

It delegates directly to :func:`assignmark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how AssignMark is launched.

Examples:
    Build both variants for a homework file::

        python -m assignmark build hw00-main.Rmd
"""

from __future__ import annotations

from assignmark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
