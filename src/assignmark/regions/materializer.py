# topmark:header:start
#
#   project      : AssignMark
#   file         : materializer.py
#   file_relpath : src/assignmark/regions/materializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Projections from region sets to flat line-number lists."""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING

from assignmark.regions.types import Projection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from assignmark.regions.types import Region


def condense(regions: Sequence[Region]) -> tuple[int, ...]:
    """Return all region starts followed by all region ends.

    Removing these lines drops the chunk fences but keeps the chunk's content.
    """
    return tuple(r.start for r in regions) + tuple(r.end for r in regions)


def expand_to_range(regions: Sequence[Region]) -> tuple[int, ...]:
    """Return every line number from start to end (inclusive) of each region."""
    return tuple(chain.from_iterable(range(r.start, r.end + 1) for r in regions))


def project(regions: Sequence[Region], projection: Projection) -> tuple[int, ...]:
    """Apply ``projection`` to ``regions``."""
    if projection is Projection.RANGE:
        return expand_to_range(regions)
    return condense(regions)
