"""Context window selection around the target line."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Final

DEFAULT_LINES_BEFORE: Final[int] = 2
DEFAULT_LINES_AFTER: Final[int] = 2


@dataclass(frozen=True, slots=True)
class LineWindow:
    """Inclusive range `[begin, end]` of 0-based line indices."""

    begin: int
    end: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.begin, self.end + 1))


def context_window(
    source_lines: Sequence[str],
    target_line: int,
    *,
    before: int = DEFAULT_LINES_BEFORE,
    after: int = DEFAULT_LINES_AFTER,
) -> LineWindow | None:
    """Lines to show around `target_line`, truncated at the file boundaries.

    Returns None when there is nothing to show: the source has no lines or the
    target lies so far past the end that the window is empty.
    """
    if not source_lines:
        return None
    begin = max(0, target_line - before)
    end = max(0, min(len(source_lines) - 1, target_line + after))
    if begin > end:
        return None
    return LineWindow(begin, end)
