# topmark:header:start
#
#   project      : AssignMark
#   file         : test_cli_commands.py
#   file_relpath : tests/cli/test_cli_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: commands, output and exit codes."""

from __future__ import annotations

from pathlib import Path
from typing import cast

import click
from click.testing import CliRunner, Result

from assignmark.cli.main import cli as _cli
from assignmark.constants import ASSIGNMARK_VERSION
from assignmark.core.exit_codes import ExitCode
from tests.conftest import read_lines, write_lines

# Type hint for the CLI command object
cli = cast("click.Command", _cli)


def _invoke(*args: str) -> Result:
    return CliRunner().invoke(cli, ["--no-color", *args])


def test_no_subcommand_prints_hint() -> None:
    result = _invoke()
    assert result.exit_code == ExitCode.SUCCESS
    assert "Hint: use 'assignmark build" in result.output


def test_version() -> None:
    result = _invoke("version")
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip() == ASSIGNMARK_VERSION


def test_build_writes_variants(main_doc: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = _invoke("build", str(main_doc), "-o", str(out), "--no-render", "--no-zip")
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "hw01-assign" in result.output
    assert "hw01-soln" in result.output
    assert read_lines(out / "hw01-assign" / "hw01-assign.Rmd")[-3:] == ["```{r}", "plot(x)", "```"]
    assert not (out / "hw01-assign" / "hw01-assign.zip").exists()


def test_build_verbose_reports_removed_lines(main_doc: Path, tmp_path: Path) -> None:
    result = _invoke(
        "-v", "build", str(main_doc), "-o", str(tmp_path / "out"), "--no-render", "--no-solution"
    )
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "removed lines: 4,6,7,8,9,10,11,12" in result.output
    assert "hw01-soln" not in result.output


def test_build_quiet_prints_nothing(main_doc: Path, tmp_path: Path) -> None:
    result = _invoke("-q", "build", str(main_doc), "-o", str(tmp_path / "out"), "--no-render")
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == ""


def test_build_dry_run(main_doc: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = _invoke("build", str(main_doc), "-o", str(out), "--dry-run")
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "hw01-assign: would remove 8 line(s), keep 7" in result.output
    assert "hw01-soln: would remove 5 line(s), keep 10" in result.output
    assert not out.exists()


def test_build_nothing_to_do(main_doc: Path, tmp_path: Path) -> None:
    result = _invoke(
        "build", str(main_doc), "-o", str(tmp_path / "out"), "--no-assign", "--no-solution"
    )
    assert result.exit_code == ExitCode.SUCCESS
    assert "Nothing to do" in result.output


def test_build_wrong_suffix_is_usage_error(tmp_path: Path) -> None:
    doc = write_lines(tmp_path / "hw01.Rmd", ["x"])
    result = _invoke("build", str(doc))
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "not a main document" in result.output


def test_build_malformed_document(tmp_path: Path) -> None:
    doc = write_lines(tmp_path / "hw02-main.Rmd", ["```{r, solution = TRUE}", "x"])
    result = _invoke("build", str(doc), "-o", str(tmp_path / "out"))
    assert result.exit_code == ExitCode.MALFORMED_DOCUMENT
    assert "are not closed by" in result.output
    assert "on lines: 1" in result.output
    assert not (tmp_path / "out").exists()


def test_build_document_not_utf8(tmp_path: Path) -> None:
    doc = tmp_path / "hw09-main.Rmd"
    doc.write_bytes(b"```{r solution=TRUE}\nx \xff\n```\n")
    result = _invoke("build", str(doc), "-o", str(tmp_path / "out"))
    assert result.exit_code == ExitCode.ENCODING_ERROR
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "not valid UTF-8" in result.output
    assert not (tmp_path / "out").exists()


def test_build_missing_renderer(main_doc: Path, tmp_path: Path) -> None:
    cfg = tmp_path / "render.toml"
    cfg.write_text('[render]\ncommand = "assignmark-no-such-renderer"\n', encoding="utf-8")
    result = _invoke(
        "build", str(main_doc), "-o", str(tmp_path / "out"), "--config", str(cfg), "--render"
    )
    assert result.exit_code == ExitCode.RENDER_UNAVAILABLE
    assert "Renderer command not found" in result.output


def test_build_missing_config_file(main_doc: Path, tmp_path: Path) -> None:
    result = _invoke("build", str(main_doc), "--config", str(tmp_path / "nope.toml"))
    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_build_config_warnings_are_shown(main_doc: Path, tmp_path: Path) -> None:
    (main_doc.parent / "assignmark.toml").write_text(
        "[output]\nrender = \"no\"\narchive = false\n", encoding="utf-8"
    )
    result = _invoke("build", str(main_doc), "-o", str(tmp_path / "out"), "--no-render")
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "[warning] Expected boolean in [output].render" in result.output


def test_verbose_and_quiet_are_exclusive() -> None:
    result = _invoke("-v", "-q", "version")
    assert result.exit_code == ExitCode.USAGE_ERROR


def test_example_prints_path() -> None:
    result = _invoke("example")
    assert result.exit_code == ExitCode.SUCCESS
    path = Path(result.output.strip())
    assert path.name == "hw00-main.Rmd"
    assert path.is_file()


def test_example_list() -> None:
    result = _invoke("example", "--list")
    assert result.exit_code == ExitCode.SUCCESS
    assert "hw00-main.Rmd" in result.output.splitlines()


def test_example_missing() -> None:
    result = _invoke("example", "hw99")
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "hw99" in result.output


def test_config_dump(main_doc: Path) -> None:
    (main_doc.parent / "assignmark.toml").write_text(
        "[variants]\nsolution = false\n", encoding="utf-8"
    )
    result = _invoke("config", "dump", str(main_doc))
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "[variants]" in result.output
    assert "solution = false" in result.output


def test_config_dump_no_config(main_doc: Path) -> None:
    (main_doc.parent / "assignmark.toml").write_text(
        "[variants]\nsolution = false\n", encoding="utf-8"
    )
    result = _invoke("-v", "config", "dump", str(main_doc), "--no-config")
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "solution = false" not in result.output
    assert "# config 1: <defaults>" in result.output
