# topmark:header:start
#
#   project      : AssignMark
#   file         : __init__.py
#   file_relpath : src/assignmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AssignMark package.

AssignMark derives a student *assignment* document and an instructor *solution*
document from a single annotated R Markdown source. It detects tagged code
chunks, removes the lines that do not belong in each variant, and exposes both
a CLI and a small typed API for automation.
"""

from __future__ import annotations
