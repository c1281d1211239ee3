# topmark:header:start
#
#   project      : AssignMark
#   file         : resolver.py
#   file_relpath : src/assignmark/regions/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pair tagged chunk openers with their closing fences.

The resolver only looks *forward*: the line carrying a tag must itself be a
fence line (a chunk header such as ```` ```{r solution=TRUE} ````), and the
region ends at the next entry of the Fence Index Set. That closing line must be
exactly the fence marker; anything else means the chunk was never closed (or
was closed inside another construct) and the document is rejected.

Failures are returned as a value (`RegionResolution` with
``ResolutionKind.MALFORMED``) so callers decide when to abort; see
`RegionResolution.unwrap`.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING

from assignmark.config.logging import get_logger
from assignmark.constants import FENCE_MARKER
from assignmark.regions.matcher import tag_lines
from assignmark.regions.types import Region, RegionResolution, StructuralError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from assignmark.config.logging import AssignmarkLogger
    from assignmark.regions.matcher import TextMatcher

logger: AssignmarkLogger = get_logger(__name__)


def _fence_position(fences: Sequence[int], index: int) -> int | None:
    """Return the position of ``index`` within the ordered fence sequence, if present."""
    pos: int = bisect_left(fences, index)
    if pos < len(fences) and fences[pos] == index:
        return pos
    return None


def resolve_regions(
    lines: Sequence[str],
    pattern: str,
    fences: Sequence[int],
    *,
    marker: str = FENCE_MARKER,
    matcher: TextMatcher | None = None,
) -> RegionResolution:
    """Resolve the regions of all chunks tagged by ``pattern``.

    Args:
        lines (Sequence[str]): Document lines (without line terminators).
        pattern (str): Tag pattern searched on each line.
        fences (Sequence[int]): The document's Fence Index Set (see `fence_lines`).
        marker (str): Fence marker a closing line must equal.
        matcher (TextMatcher | None): Matching strategy for the tag pattern.

    Returns:
        RegionResolution: The region set, or a structural error listing the
        offending document line numbers.
    """
    starts: tuple[int, ...] = tag_lines(lines, pattern, matcher=matcher)
    if not starts:
        return RegionResolution.of(pattern, ())

    regions: list[Region] = []
    offending: list[int] = []
    details: list[str] = []

    for start in starts:
        pos: int | None = _fence_position(fences, start)
        if pos is None:
            logger.warning(
                "Line %d matches %r but does not open a code chunk; ignored", start, pattern
            )
            continue

        if pos + 1 >= len(fences):
            offending.append(start)
            details.append(f"chunk opened on line {start} has no closing fence")
            continue

        end: int = fences[pos + 1]
        if lines[end - 1] != marker:
            offending.append(end)
            details.append(
                f"chunk opened on line {start} is followed by {lines[end - 1]!r} on line {end}"
            )
            continue

        regions.append(Region(start=start, end=end))

    if offending:
        error = StructuralError(
            pattern=pattern,
            marker=marker,
            lines=tuple(offending),
            details=tuple(details),
        )
        logger.error("%s", error.format_message())
        return RegionResolution.malformed(error)

    logger.debug("Pattern %r resolved to %d region(s)", pattern, len(regions))
    return RegionResolution.of(pattern, tuple(regions))
