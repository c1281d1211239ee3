# topmark:header:start
#
#   project      : AssignMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the AssignMark test suite.

Sets up global fixtures and TRACE-level logging for test runs, and provides
small builders for main documents and recording test doubles.

Notes:
    Tests respect the immutable/mutable configuration split: build configs with
    `MutableConfig`, then `freeze()` them into a `Config` for API calls. To tweak
    a frozen `Config`, `thaw()` it, edit, and `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from assignmark.config import logging
from assignmark.config.model import Config, MutableConfig
from assignmark.core.errors import RenderError

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_assignmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure AssignMark's runtime log level is not forced via env during tests."""
    monkeypatch.delenv("ASSIGNMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


# A small but complete main document: one solution chunk, one directions
# chunk, one asis chunk and an untagged chunk.
SAMPLE_LINES: tuple[str, ...] = (
    "---",  # 1
    'title: "HW"',  # 2
    "---",  # 3
    "```{r, directions = TRUE}",  # 4
    "Read carefully.",  # 5
    "```",  # 6
    "```{r, solution = TRUE}",  # 7
    "x <- 1",  # 8
    "```",  # 9
    "```{asis, solution = TRUE}",  # 10
    "The answer is 1.",  # 11
    "```",  # 12
    "```{r}",  # 13
    "plot(x)",  # 14
    "```",  # 15
)


def write_lines(path: Path, lines: Sequence[str]) -> Path:
    """Write ``lines`` (newline-terminated) to ``path`` and return it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def read_lines(path: Path) -> list[str]:
    """Return the lines of a newline-terminated text file."""
    return path.read_text(encoding="utf-8").split("\n")[:-1]


@pytest.fixture
def main_doc(tmp_path: Path) -> Path:
    """Write `SAMPLE_LINES` as ``src/hw01-main.Rmd`` below ``tmp_path``."""
    return write_lines(tmp_path / "src" / "hw01-main.Rmd", SAMPLE_LINES)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty working directory."""
    cwd: Path = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class RecordingRenderer:
    """Renderer double that records calls and optionally fails."""

    def __init__(self, *, fail: bool = False) -> None:
        self.calls: list[tuple[Path, tuple[str, ...]]] = []
        self.fail = fail

    def render(self, document: Path, formats: Sequence[str]) -> None:
        """Record the call; raise `RenderError` when configured to fail."""
        self.calls.append((document, tuple(formats)))
        if self.fail:
            raise RenderError(f"cannot render {document.name}")


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``Override`` keys."""
    return MutableConfig.from_defaults().apply_overrides(overrides).freeze()
