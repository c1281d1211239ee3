# topmark:header:start
#
#   project      : AssignMark
#   file         : test_assign_api.py
#   file_relpath : tests/api/test_assign_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public API (`assignmark.api`)."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from assignmark import api
from assignmark.core.errors import ConfigError, MalformedChunkError, RenderError, UsageError
from assignmark.regions.types import Region, Tag, Variant
from tests.conftest import RecordingRenderer, make_config, read_lines, write_lines

ASSIGN_LINES: list[str] = [
    "---",
    'title: "HW"',
    "---",
    "Read carefully.",
    "```{r}",
    "plot(x)",
    "```",
]

SOLN_LINES: list[str] = [
    "---",
    'title: "HW"',
    "---",
    "```{r, solution = TRUE}",
    "x <- 1",
    "```",
    "The answer is 1.",
    "```{r}",
    "plot(x)",
    "```",
]


def test_assign_writes_both_variants(main_doc: Path, tmp_path: Path) -> None:
    renderer = RecordingRenderer()
    result = api.assign(main_doc, output_dir=tmp_path / "out", renderer=renderer)

    assert result.base_name == "hw01"
    assert [r.plan.variant for r in result.results] == [Variant.ASSIGN, Variant.SOLN]
    assign_doc = tmp_path / "out" / "hw01-assign" / "hw01-assign.Rmd"
    soln_doc = tmp_path / "out" / "hw01-soln" / "hw01-soln.Rmd"
    assert result.documents == [assign_doc, soln_doc]
    assert read_lines(assign_doc) == ASSIGN_LINES
    assert read_lines(soln_doc) == SOLN_LINES
    assert [call[0] for call in renderer.calls] == [assign_doc, soln_doc]
    assert result.regions[Tag.SOLUTION] == (Region(7, 9), Region(10, 12))


def test_assign_archives_each_variant(main_doc: Path, tmp_path: Path) -> None:
    write_lines(main_doc.parent / "data" / "scores.csv", ["id,score"])
    result = api.assign(main_doc, output_dir=tmp_path / "out", render_files=False)

    for r in result.results:
        assert r.archive is not None
        with zipfile.ZipFile(r.archive) as zf:
            assert sorted(zf.namelist()) == sorted([f"{r.plan.name}.Rmd", "data/scores.csv"])


def test_default_output_dir_is_base_name_in_cwd(main_doc: Path, isolation: Path) -> None:
    result = api.assign(main_doc, render_files=False, zip_files=False)
    assert result.output_dir == isolation / "hw01"
    assert (isolation / "hw01" / "hw01-assign" / "hw01-assign.Rmd").is_file()


def test_disabled_variant_is_not_written(main_doc: Path, tmp_path: Path) -> None:
    result = api.assign(
        main_doc,
        output_dir=tmp_path / "out",
        soln_file=False,
        render_files=False,
        zip_files=False,
    )
    assert [p.variant for p in result.plans] == [Variant.ASSIGN]
    assert not (tmp_path / "out" / "hw01-soln").exists()


def test_variant_directory_is_recreated(main_doc: Path, tmp_path: Path) -> None:
    stale = write_lines(tmp_path / "out" / "hw01-assign" / "stale.txt", ["old"])
    api.assign(main_doc, output_dir=tmp_path / "out", render_files=False, zip_files=False)
    assert not stale.exists()


def test_previous_outputs_are_not_copied_as_dependencies(main_doc: Path) -> None:
    out = main_doc.parent / "build"
    api.assign(main_doc, output_dir=out, render_files=False, zip_files=False)
    result = api.assign(main_doc, output_dir=out, render_files=False, zip_files=False)
    assert all(r.copied == 0 for r in result.results)


def test_exclude_patterns_from_config(main_doc: Path, tmp_path: Path) -> None:
    write_lines(main_doc.parent / "notes.log", ["x"])
    write_lines(main_doc.parent / "img" / "a.txt", ["y"])
    result = api.assign(
        main_doc,
        output_dir=tmp_path / "out",
        render_files=False,
        zip_files=False,
        config={"files": {"exclude_patterns": ["*.log"]}},
    )
    assert result.plans[0].dependencies == ("img/a.txt",)


def test_frozen_config_is_accepted(main_doc: Path, tmp_path: Path) -> None:
    cfg = make_config(render_files=False, zip_files=False, assign_file=False)
    result = api.assign(main_doc, output_dir=tmp_path / "out", config=cfg)
    assert [p.variant for p in result.plans] == [Variant.SOLN]


def test_plan_writes_nothing(main_doc: Path, tmp_path: Path) -> None:
    result = api.plan(main_doc, output_dir=tmp_path / "out")
    assert result.dry_run is True
    assert result.results == ()
    assert result.plans[0].lines == tuple(ASSIGN_LINES)
    assert not (tmp_path / "out").exists()


def test_single_item_sequence_is_accepted(main_doc: Path, tmp_path: Path) -> None:
    result = api.plan([main_doc], output_dir=tmp_path / "out")
    assert result.source == main_doc


@pytest.mark.parametrize("files", [[], ["a-main.Rmd", "b-main.Rmd"]])
def test_wrong_document_count_is_usage_error(files: list[str]) -> None:
    with pytest.raises(UsageError, match="Exactly one"):
        api.assign(files)


def test_wrong_suffix_is_usage_error(tmp_path: Path) -> None:
    doc = write_lines(tmp_path / "hw01.Rmd", ["x"])
    with pytest.raises(UsageError, match="not a main document"):
        api.assign(doc, output_dir=tmp_path / "out")
    assert not (tmp_path / "out").exists()


def test_malformed_document_writes_nothing(tmp_path: Path) -> None:
    doc = write_lines(
        tmp_path / "src" / "hw02-main.Rmd",
        ["```{r}", "x", "```", "```{r, directions = TRUE}", "text", "```{r}", "```"],
    )
    with pytest.raises(MalformedChunkError) as excinfo:
        api.assign(doc, output_dir=tmp_path / "out", render_files=False)
    assert excinfo.value.lines == (6,)
    assert not (tmp_path / "out").exists()


def test_render_failure_propagates(main_doc: Path, tmp_path: Path) -> None:
    with pytest.raises(RenderError):
        api.assign(main_doc, output_dir=tmp_path / "out", renderer=RecordingRenderer(fail=True))


def test_config_file_next_to_document(main_doc: Path, tmp_path: Path) -> None:
    (main_doc.parent / "assignmark.toml").write_text(
        "[output]\nrender = false\narchive = false\n[variants]\nsolution = false\n",
        encoding="utf-8",
    )
    result = api.assign(main_doc, output_dir=tmp_path / "out")
    assert [r.plan.variant for r in result.results] == [Variant.ASSIGN]
    assert result.results[0].rendered is False
    assert result.results[0].plan.dependencies == ()


def test_version_is_a_string() -> None:
    assert isinstance(api.version(), str)


def test_assign_keeps_form_feeds_and_unicode_separators(tmp_path: Path) -> None:
    src = tmp_path / "src" / "hw08-main.Rmd"
    src.parent.mkdir()
    src.write_text(
        "```{r solution=TRUE}\nx\n```\nkeep\u2028this\npage\x0cbreak\n", encoding="utf-8"
    )

    result = api.assign(src, output_dir=tmp_path / "out", render_files=False, zip_files=False)

    assign_doc, soln_doc = result.documents
    assert assign_doc.read_text(encoding="utf-8") == "keep\u2028this\npage\x0cbreak\n"
    assert soln_doc.read_text(encoding="utf-8") == src.read_text(encoding="utf-8")


def test_wrong_suffix_is_reported_before_a_broken_config(tmp_path: Path) -> None:
    doc = write_lines(tmp_path / "hw01.Rmd", ASSIGN_LINES)
    (tmp_path / "assignmark.toml").write_text("[variants\nassign = ", encoding="utf-8")
    with pytest.raises(UsageError, match="not a main document"):
        api.assign(doc, output_dir=tmp_path / "out")
    assert not (tmp_path / "out").exists()


def test_broken_config_next_to_main_document_is_config_error(tmp_path: Path) -> None:
    doc = write_lines(tmp_path / "hw01-main.Rmd", ASSIGN_LINES)
    (tmp_path / "assignmark.toml").write_text("[variants\nassign = ", encoding="utf-8")
    with pytest.raises(ConfigError):
        api.assign(doc, output_dir=tmp_path / "out")
