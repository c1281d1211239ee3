# topmark:header:start
#
#   project      : AssignMark
#   file         : test_materializer_composer.py
#   file_relpath : tests/regions/test_materializer_composer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for region projections and removal-set composition."""

from __future__ import annotations

import pytest

from assignmark.regions.composer import (
    ASSIGN_POLICY,
    SOLN_POLICY,
    RemovalSet,
    VariantPolicy,
    compose_removal,
    compose_variant,
)
from assignmark.regions.materializer import condense, expand_to_range, project
from assignmark.regions.types import Projection, Region, Tag, Variant

SCENARIO: list[str] = ["```{r solution=TRUE}", "answer_code", "```", "```{r}", "plain", "```"]


def test_condense_lists_starts_then_ends() -> None:
    assert condense([Region(1, 3), Region(5, 9)]) == (1, 5, 3, 9)


def test_expand_to_range_is_inclusive() -> None:
    assert expand_to_range([Region(1, 3), Region(5, 6)]) == (1, 2, 3, 5, 6)


def test_project_dispatches_on_projection() -> None:
    regions = [Region(2, 4)]
    assert project(regions, Projection.RANGE) == (2, 3, 4)
    assert project(regions, Projection.CONDENSE) == (2, 4)


def test_empty_region_set_projects_to_nothing() -> None:
    assert condense([]) == ()
    assert expand_to_range([]) == ()


def test_scenario_assign_variant() -> None:
    removal = compose_variant(Variant.ASSIGN, {Tag.SOLUTION: (Region(1, 3),)})
    assert removal.sorted() == [1, 2, 3]
    assert removal.apply(SCENARIO) == ("```{r}", "plain", "```")


def test_empty_removal_set_round_trips() -> None:
    assert RemovalSet().apply(SCENARIO) == tuple(SCENARIO)
    assert len(RemovalSet()) == 0


def test_removal_set_deduplicates() -> None:
    removal = compose_removal([1, 2], [2, 3])
    assert removal.indices == (1, 2, 2, 3)
    assert len(removal) == 3
    assert 2 in removal
    assert 4 not in removal


def test_removal_set_ignores_out_of_range_indices() -> None:
    assert RemovalSet((99,)).apply(["a"]) == ("a",)


def test_solution_variant_keeps_asis_content_and_drops_directions() -> None:
    lines = [
        "```{r, directions = TRUE}",  # 1
        "Do the work.",  # 2
        "```",  # 3
        "```{asis}",  # 4
        "Explained answer.",  # 5
        "```",  # 6
    ]
    regions = {
        Tag.DIRECTIONS: (Region(1, 3),),
        Tag.ASIS: (Region(4, 6),),
        Tag.SOLUTION: (),
    }
    soln = compose_variant(Variant.SOLN, regions)
    assert soln.apply(lines) == ("Explained answer.",)

    assign = compose_variant(Variant.ASSIGN, regions)
    assert assign.apply(lines) == ("Do the work.", "```{asis}", "Explained answer.", "```")


def test_policies_reference_expected_tags() -> None:
    assert ASSIGN_POLICY.tags == (Tag.SOLUTION, Tag.DIRECTIONS)
    assert SOLN_POLICY.tags == (Tag.ASIS, Tag.DIRECTIONS)


def test_policy_for_wrong_variant_is_rejected() -> None:
    with pytest.raises(ValueError, match="cannot build"):
        compose_variant(Variant.ASSIGN, {}, policy=SOLN_POLICY)


def test_custom_policy() -> None:
    policy = VariantPolicy(variant=Variant.SOLN, rules=((Tag.SOLUTION, Projection.CONDENSE),))
    removal = compose_variant(Variant.SOLN, {Tag.SOLUTION: (Region(1, 3),)}, policy=policy)
    assert removal.sorted() == [1, 3]
