# topmark:header:start
#
#   project      : AssignMark
#   file         : __init__.py
#   file_relpath : src/assignmark/emitter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Materialize document variants on disk.

The emitter owns all side effects: resetting variant directories, copying
auxiliary files, writing the derived document, rendering it and archiving the
result. File access and rendering are injected through the `FileSystem` and
`Renderer` protocols so tests can substitute in-memory or recording fakes.
"""

from __future__ import annotations

from .fs import FileSystem, LocalFileSystem
from .package import VariantPlan, VariantResult, emit_variant, plan_variant
from .renderer import Renderer, RscriptRenderer

__all__: list[str] = [
    "FileSystem",
    "LocalFileSystem",
    "Renderer",
    "RscriptRenderer",
    "VariantPlan",
    "VariantResult",
    "emit_variant",
    "plan_variant",
]
