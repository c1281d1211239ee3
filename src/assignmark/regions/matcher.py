# topmark:header:start
#
#   project      : AssignMark
#   file         : matcher.py
#   file_relpath : src/assignmark/regions/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line tagging and chunk boundary detection.

Both functions are pure: they read a document's lines and return ordered,
1-based line numbers. Pattern matching is delegated to a `TextMatcher`, so
callers (and tests) can substitute their own matching strategy.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING, Protocol

from assignmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from assignmark.config.logging import AssignmarkLogger

logger: AssignmarkLogger = get_logger(__name__)


class TextMatcher(Protocol):
    """Capability that locates the lines matching a pattern."""

    def positions(self, lines: Sequence[str], pattern: str) -> tuple[int, ...]:
        """Return the ordered 1-based numbers of the lines matching ``pattern``."""
        ...


@functools.lru_cache(maxsize=64)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


class RegexMatcher:
    """`TextMatcher` that searches each line with a regular expression.

    A line matches when the pattern is found anywhere in it (``re.search``),
    not only when the whole line matches.
    """

    def positions(self, lines: Sequence[str], pattern: str) -> tuple[int, ...]:
        """Return the ordered 1-based numbers of the lines matching ``pattern``.

        Args:
            lines (Sequence[str]): Document lines (without line terminators).
            pattern (str): Regular expression to search for.

        Returns:
            tuple[int, ...]: Matching line numbers in document order.
        """
        rx: re.Pattern[str] = _compile(pattern)
        return tuple(i for i, line in enumerate(lines, start=1) if rx.search(line))


def tag_lines(
    lines: Sequence[str],
    pattern: str,
    *,
    matcher: TextMatcher | None = None,
) -> tuple[int, ...]:
    """Return the 1-based numbers of the lines carrying a tag.

    Args:
        lines (Sequence[str]): Document lines.
        pattern (str): Tag pattern.
        matcher (TextMatcher | None): Matching strategy; defaults to `RegexMatcher`.

    Returns:
        tuple[int, ...]: The Tag Match Set, in document order.
    """
    found: tuple[int, ...] = (matcher or RegexMatcher()).positions(lines, pattern)
    logger.trace("Pattern %r matched lines %s", pattern, found)
    return found


def fence_lines(lines: Sequence[str], marker: str) -> tuple[int, ...]:
    """Return the 1-based numbers of all chunk fence lines.

    A fence line starts with ``marker``: this covers chunk openers such as
    ```` ```{r solution=TRUE} ```` as well as bare closing fences.

    Args:
        lines (Sequence[str]): Document lines.
        marker (str): The fence marker (usually three backticks).

    Returns:
        tuple[int, ...]: The Fence Index Set, in document order.
    """
    if not marker:
        raise ValueError("Fence marker must not be empty")
    found = tuple(i for i, line in enumerate(lines, start=1) if line.startswith(marker))
    logger.debug("Found %d fence line(s)", len(found))
    return found
