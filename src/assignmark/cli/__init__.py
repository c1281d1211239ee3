# topmark:header:start
#
#   project      : AssignMark
#   file         : __init__.py
#   file_relpath : src/assignmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for AssignMark (Click)."""
