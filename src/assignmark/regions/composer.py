# topmark:header:start
#
#   project      : AssignMark
#   file         : composer.py
#   file_relpath : src/assignmark/regions/composer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compose the set of lines to delete for each output variant.

Each variant is described by a `VariantPolicy`: a list of ``(tag, projection)``
rules. The default policies are asymmetric on purpose:

* **assign** removes solution chunks entirely (``RANGE``) and keeps the text of
  directions chunks, dropping only their fences (``CONDENSE``).
* **soln** keeps the text of as-is chunks (``CONDENSE``) and removes directions
  chunks entirely (``RANGE``).

Composition is plain concatenation; the resulting `RemovalSet` is consumed as
an index filter, so duplicate entries are harmless.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import TYPE_CHECKING

from assignmark.config.logging import get_logger
from assignmark.regions.materializer import project
from assignmark.regions.types import Projection, Tag, Variant

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from assignmark.config.logging import AssignmarkLogger
    from assignmark.regions.types import Region

logger: AssignmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class RemovalSet:
    """Line numbers (1-based) to drop from a document.

    Attributes:
        indices (tuple[int, ...]): Line numbers in composition order; may contain duplicates.
    """

    indices: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.unique)

    def __contains__(self, index: object) -> bool:
        return index in self.unique

    @property
    def unique(self) -> frozenset[int]:
        """Return the deduplicated line numbers."""
        return frozenset(self.indices)

    def sorted(self) -> list[int]:
        """Return the deduplicated line numbers in ascending order."""
        return sorted(self.unique)

    def apply(self, lines: Sequence[str]) -> tuple[str, ...]:
        """Return a new line sequence without the removed lines.

        Args:
            lines (Sequence[str]): Source document lines; left untouched.

        Returns:
            tuple[str, ...]: The kept lines in their original order.
        """
        drop: frozenset[int] = self.unique
        return tuple(line for i, line in enumerate(lines, start=1) if i not in drop)


def compose_removal(*index_lists: Iterable[int]) -> RemovalSet:
    """Return the union of several index lists as a `RemovalSet`."""
    return RemovalSet(indices=tuple(chain.from_iterable(index_lists)))


@dataclass(frozen=True)
class VariantPolicy:
    """Which tagged regions a variant removes, and how.

    Attributes:
        variant (Variant): The variant the policy applies to.
        rules (tuple[tuple[Tag, Projection], ...]): Ordered ``(tag, projection)`` rules.
    """

    variant: Variant
    rules: tuple[tuple[Tag, Projection], ...]

    @property
    def tags(self) -> tuple[Tag, ...]:
        """Return the tags referenced by this policy."""
        return tuple(tag for tag, _ in self.rules)


ASSIGN_POLICY = VariantPolicy(
    variant=Variant.ASSIGN,
    rules=(
        (Tag.SOLUTION, Projection.RANGE),
        (Tag.DIRECTIONS, Projection.CONDENSE),
    ),
)

SOLN_POLICY = VariantPolicy(
    variant=Variant.SOLN,
    rules=(
        (Tag.ASIS, Projection.CONDENSE),
        (Tag.DIRECTIONS, Projection.RANGE),
    ),
)

DEFAULT_POLICIES: dict[Variant, VariantPolicy] = {
    Variant.ASSIGN: ASSIGN_POLICY,
    Variant.SOLN: SOLN_POLICY,
}


def compose_variant(
    variant: Variant,
    regions_by_tag: Mapping[Tag, Sequence[Region]],
    *,
    policy: VariantPolicy | None = None,
) -> RemovalSet:
    """Compose the removal set of one output variant.

    Args:
        variant (Variant): The variant to build.
        regions_by_tag (Mapping[Tag, Sequence[Region]]): Resolved regions per tag.
            Tags missing from the mapping contribute nothing.
        policy (VariantPolicy | None): Override for the variant's default policy.

    Returns:
        RemovalSet: The lines to drop for ``variant``.
    """
    pol: VariantPolicy = policy or DEFAULT_POLICIES[variant]
    if pol.variant is not variant:
        raise ValueError(f"Policy for {pol.variant.value!r} cannot build {variant.value!r}")

    removal: RemovalSet = compose_removal(
        *(project(regions_by_tag.get(tag, ()), projection) for tag, projection in pol.rules)
    )
    logger.debug("Variant %s removes %d line(s)", variant.value, len(removal))
    return removal
