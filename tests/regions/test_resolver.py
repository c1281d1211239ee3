# topmark:header:start
#
#   project      : AssignMark
#   file         : test_resolver.py
#   file_relpath : tests/regions/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the region resolver and its result type."""

from __future__ import annotations

import logging

import pytest

from assignmark.constants import FENCE_MARKER, SOLUTION_PATTERN
from assignmark.core.errors import MalformedChunkError
from assignmark.regions.matcher import fence_lines
from assignmark.regions.resolver import resolve_regions
from assignmark.regions.types import Region, RegionResolution, ResolutionKind, StructuralError

SCENARIO: list[str] = ["```{r solution=TRUE}", "answer_code", "```", "```{r}", "plain", "```"]


def _resolve(lines: list[str], pattern: str = SOLUTION_PATTERN) -> RegionResolution:
    return resolve_regions(lines, pattern, fence_lines(lines, FENCE_MARKER))


def test_scenario_resolves_single_region() -> None:
    res = _resolve(SCENARIO)
    assert res.ok
    assert res.kind is ResolutionKind.REGIONS
    assert res.regions == (Region(1, 3),)
    assert res.unwrap() == (Region(1, 3),)


def test_zero_matches_is_empty_not_error() -> None:
    res = _resolve(["```{r}", "x", "```"])
    assert res.ok
    assert res.regions == ()


def test_tagged_fence_on_last_line_is_structural_error() -> None:
    lines = ["```{r}", "x", "```", "```{r solution=TRUE}"]
    res = _resolve(lines)
    assert not res.ok
    assert res.error is not None
    assert res.error.lines == (4,)
    with pytest.raises(MalformedChunkError) as excinfo:
        res.unwrap()
    assert excinfo.value.lines == (4,)


def test_next_fence_that_is_not_pure_is_reported() -> None:
    lines = ["```{r solution=TRUE}", "x", "```{r}", "y", "```"]
    res = _resolve(lines)
    assert res.kind is ResolutionKind.MALFORMED
    assert res.error is not None
    assert res.error.lines == (3,)
    assert "on lines: 3" in res.error.format_message()


def test_all_offending_lines_are_listed() -> None:
    lines = [
        "```{r solution=TRUE}",
        "```{r}",
        "```{r solution=TRUE}",
        "```{python}",
        "```",
    ]
    res = _resolve(lines)
    assert res.error is not None
    assert res.error.lines == (2, 4)
    assert len(res.error.details) == 2


def test_match_outside_fence_is_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    lines = ["Set solution = TRUE in the header.", "```{r solution=TRUE}", "x", "```"]
    res = _resolve(lines)
    assert res.regions == (Region(2, 4),)
    assert "does not open a code chunk" in caplog.text


def test_trailing_whitespace_on_closer_is_not_pure() -> None:
    lines = ["```{r solution=TRUE}", "x", "``` "]
    res = _resolve(lines)
    assert res.error is not None
    assert res.error.lines == (3,)


def test_structural_error_message_names_pattern_and_marker() -> None:
    err = StructuralError(pattern="asis", marker="```", lines=(3, 7))
    assert (
        err.format_message()
        == "Code chunks tagged by 'asis' are not closed by '```' on lines: 3,7"
    )


def test_custom_marker() -> None:
    lines = ["~~~{r solution=TRUE}", "x", "~~~"]
    res = resolve_regions(lines, SOLUTION_PATTERN, fence_lines(lines, "~~~"), marker="~~~")
    assert res.regions == (Region(1, 3),)


@pytest.mark.parametrize(("start", "end"), [(0, 1), (3, 2)])
def test_region_rejects_invalid_bounds(start: int, end: int) -> None:
    with pytest.raises(ValueError, match="Invalid region bounds"):
        Region(start, end)
