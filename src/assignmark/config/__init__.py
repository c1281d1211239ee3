# topmark:header:start
#
#   project      : AssignMark
#   file         : __init__.py
#   file_relpath : src/assignmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for AssignMark.

Submodules:
    - `assignmark.config.model`: `Config`, `MutableConfig` and `load_config`.
    - `assignmark.config.io`: TOML loading and checked value getters.
    - `assignmark.config.keys`: TOML section/key names and override keys.
    - `assignmark.config.logging`: logger factory and formatter.

Nothing is re-exported here: `assignmark.config.logging` is imported very early
by `assignmark.core`, and loading the model at package import would form a cycle.
"""
