# topmark:header:start
#
#   project      : AssignMark
#   file         : test_regions_property.py
#   file_relpath : tests/regions/test_regions_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for region resolution and composition on generated documents."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from assignmark.config.model import MutableConfig
from assignmark.regions.composer import compose_removal, compose_variant
from assignmark.regions.materializer import condense, expand_to_range
from assignmark.regions.matcher import fence_lines
from assignmark.regions.resolver import resolve_regions
from assignmark.regions.types import Region, Tag, Variant
from tests.strategies_assignmark import FENCE, GeneratedDocument, s_document

CONFIG = MutableConfig.from_defaults().freeze()


def _resolve_all(doc: GeneratedDocument) -> dict[Tag, tuple[Region, ...]]:
    fences = fence_lines(doc.lines, FENCE)
    return {
        tag: resolve_regions(doc.lines, CONFIG.pattern_for(tag.value), fences).unwrap()
        for tag in Tag
    }


@settings(max_examples=150)
@given(doc=s_document())
def test_well_formed_documents_never_fail(doc: GeneratedDocument) -> None:
    regions = _resolve_all(doc)
    for tag in Tag:
        expected = tuple(Region(s, e) for t, s, e in doc.chunks if t == tag.value)
        assert regions[tag] == expected


@given(
    starts=st.lists(st.integers(min_value=1, max_value=50), max_size=6),
    widths=st.lists(st.integers(min_value=0, max_value=5), min_size=6, max_size=6),
)
def test_range_is_superset_of_condense(starts: list[int], widths: list[int]) -> None:
    regions = [Region(s, s + w) for s, w in zip(starts, widths)]
    assert set(condense(regions)) <= set(expand_to_range(regions))


@given(doc=s_document())
def test_composition_is_order_independent(doc: GeneratedDocument) -> None:
    regions = _resolve_all(doc)
    reordered = dict(reversed(list(regions.items())))
    for variant in Variant:
        a = compose_variant(variant, regions)
        b = compose_variant(variant, reordered)
        assert a.unique == b.unique
        assert a.apply(doc.lines) == b.apply(doc.lines)


@given(
    a=st.lists(st.integers(min_value=1, max_value=30)),
    b=st.lists(st.integers(min_value=1, max_value=30)),
)
def test_compose_removal_is_commutative(a: list[int], b: list[int]) -> None:
    assert compose_removal(a, b).unique == compose_removal(b, a).unique


@given(doc=s_document())
def test_assign_variant_never_keeps_solution_lines(doc: GeneratedDocument) -> None:
    lines = compose_variant(Variant.ASSIGN, _resolve_all(doc)).apply(doc.lines)
    assert not any(line.startswith("```{r, solution") for line in lines)
    assert not any(line.startswith("```{r solution") for line in lines)
