# topmark:header:start
#
#   project      : AssignMark
#   file         : types.py
#   file_relpath : src/assignmark/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result types returned by the public API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from assignmark.emitter.package import VariantPlan, VariantResult

if TYPE_CHECKING:
    from pathlib import Path

    from assignmark.core.diagnostics import Diagnostic
    from assignmark.regions.types import Region, Tag

__all__: list[str] = ["AssignResult", "VariantPlan", "VariantResult"]


@dataclass(frozen=True)
class AssignResult:
    """Outcome of processing one main document.

    Attributes:
        source (Path): The main document.
        base_name (str): The document's base name (``hw00`` for ``hw00-main.Rmd``).
        output_dir (Path): Parent directory of the variant directories.
        regions (dict[Tag, tuple[Region, ...]]): Resolved regions per tag.
        plans (tuple[VariantPlan, ...]): One plan per enabled variant.
        results (tuple[VariantResult, ...]): Emitted variants; empty for a dry run.
        dry_run (bool): Whether emission was skipped.
        diagnostics (tuple[Diagnostic, ...]): Configuration diagnostics.
    """

    source: Path
    base_name: str
    output_dir: Path
    regions: dict[Tag, tuple[Region, ...]]
    plans: tuple[VariantPlan, ...]
    results: tuple[VariantResult, ...] = ()
    dry_run: bool = False
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def documents(self) -> list[Path]:
        """Return the derived document paths, in variant order."""
        return [p.document for p in self.plans]
