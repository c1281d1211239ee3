# topmark:header:start
#
#   project      : AssignMark
#   file         : __init__.py
#   file_relpath : src/assignmark/regions/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Region detection and line selection.

Data flow for one document:

1. `fence_lines` computes the Fence Index Set once.
2. `resolve_regions` tags lines per pattern and pairs each tagged fence with
   its closing fence.
3. `condense` / `expand_to_range` flatten regions into line numbers.
4. `compose_variant` unions them into the `RemovalSet` of one output variant.
"""

from __future__ import annotations

from .composer import (
    ASSIGN_POLICY,
    DEFAULT_POLICIES,
    SOLN_POLICY,
    RemovalSet,
    VariantPolicy,
    compose_removal,
    compose_variant,
)
from .materializer import condense, expand_to_range, project
from .matcher import RegexMatcher, TextMatcher, fence_lines, tag_lines
from .resolver import resolve_regions
from .types import (
    Projection,
    Region,
    RegionResolution,
    ResolutionKind,
    StructuralError,
    Tag,
    Variant,
)

__all__: list[str] = [
    "ASSIGN_POLICY",
    "DEFAULT_POLICIES",
    "Projection",
    "Region",
    "RegionResolution",
    "RegexMatcher",
    "RemovalSet",
    "ResolutionKind",
    "SOLN_POLICY",
    "StructuralError",
    "Tag",
    "TextMatcher",
    "Variant",
    "VariantPolicy",
    "compose_removal",
    "compose_variant",
    "condense",
    "expand_to_range",
    "fence_lines",
    "project",
    "resolve_regions",
    "tag_lines",
]
