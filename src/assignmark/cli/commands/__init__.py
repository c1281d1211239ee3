# topmark:header:start
#
#   project      : AssignMark
#   file         : __init__.py
#   file_relpath : src/assignmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AssignMark subcommands."""
