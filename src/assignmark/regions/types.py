# topmark:header:start
#
#   project      : AssignMark
#   file         : types.py
#   file_relpath : src/assignmark/regions/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type definitions for region detection and line selection.

This module provides the structured values passed between the region
components: tags, regions, the resolver's result type, and the variants the
removal-set composer builds for. All line indices are **1-based** document
line numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from assignmark.core.errors import MalformedChunkError


class Tag(str, Enum):
    """Inline tags recognized on chunk-opening fence lines."""

    SOLUTION = "solution"
    DIRECTIONS = "directions"
    ASIS = "asis"


class Variant(str, Enum):
    """Derived output variants.

    The value is the suffix used for output names (``<base>-<value>``).
    """

    ASSIGN = "assign"
    SOLN = "soln"


class Projection(Enum):
    """How a region set contributes to a removal set.

    Members:
        RANGE: Remove every line of the region, fences included.
        CONDENSE: Remove only the region's boundary lines; the content survives.
    """

    RANGE = "range"
    CONDENSE = "condense"


@dataclass(frozen=True)
class Region:
    """A tagged chunk, from its tagged opening line to its closing fence (inclusive).

    Attributes:
        start (int): 1-based line number of the line carrying the tag.
        end (int): 1-based line number of the closing fence line.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1 or self.end < self.start:
            raise ValueError(f"Invalid region bounds: ({self.start}, {self.end})")


@dataclass(frozen=True)
class StructuralError:
    """Value describing tagged chunks that are not closed by a fence line.

    Attributes:
        pattern (str): The tag pattern whose chunks failed validation.
        marker (str): The fence marker a closing line must equal.
        lines (tuple[int, ...]): Offending 1-based document line numbers: the
            candidate closing line when it is not a pure fence, or the tagged
            line itself when no later fence exists.
        details (tuple[str, ...]): One human-readable explanation per offending line.
    """

    pattern: str
    marker: str
    lines: tuple[int, ...]
    details: tuple[str, ...] = ()

    def format_message(self) -> str:
        """Return a one-line summary suitable for user-facing output."""
        where: str = ",".join(str(n) for n in self.lines)
        return (
            f"Code chunks tagged by {self.pattern!r} are not closed by {self.marker!r} "
            f"on lines: {where}"
        )


class ResolutionKind(Enum):
    """Discriminant for region resolution results.

    Members:
        REGIONS: All tagged chunks were closed correctly (possibly zero regions).
        MALFORMED: At least one tagged chunk is not closed by a pure fence line.
    """

    REGIONS = "regions"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class RegionResolution:
    """Structured result of resolving the regions of one tag pattern.

    This is a discriminated union controlled by ``kind``:

    * ``REGIONS``: ``regions`` holds the region set, ``error`` is ``None``.
    * ``MALFORMED``: ``error`` describes every offending line, ``regions`` is empty.

    Attributes:
        kind (ResolutionKind): Discriminant of the result.
        pattern (str): The tag pattern that was resolved.
        regions (tuple[Region, ...]): Regions in document order.
        error (StructuralError | None): Structural error when ``kind`` is ``MALFORMED``.
    """

    kind: ResolutionKind
    pattern: str
    regions: tuple[Region, ...] = field(default_factory=tuple)
    error: StructuralError | None = None

    @classmethod
    def of(cls, pattern: str, regions: tuple[Region, ...]) -> RegionResolution:
        """Return a successful resolution holding ``regions``."""
        return cls(kind=ResolutionKind.REGIONS, pattern=pattern, regions=regions)

    @classmethod
    def malformed(cls, error: StructuralError) -> RegionResolution:
        """Return a failed resolution holding ``error``."""
        return cls(kind=ResolutionKind.MALFORMED, pattern=error.pattern, error=error)

    @property
    def ok(self) -> bool:
        """Whether the resolution succeeded."""
        return self.kind is ResolutionKind.REGIONS

    def unwrap(self) -> tuple[Region, ...]:
        """Return the regions, or raise when the resolution is malformed.

        Returns:
            tuple[Region, ...]: The resolved regions.

        Raises:
            MalformedChunkError: If the resolution holds a structural error.
        """
        if self.error is not None:
            raise MalformedChunkError(self.error)
        return self.regions
