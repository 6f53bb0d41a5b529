from dataclasses import dataclass
from typing import Final

LINE_TERMINATORS: Final[frozenset[str]] = frozenset({"\n", "\r"})


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """
    Location of a diagnostic as reported by the tokenizer.

    - `offset`: byte offset into the UTF-8 encoded file
    - `line`: 0-based line index
    - `length`: span length in bytes, starting at `offset`
    """

    offset: int
    line: int
    length: int = 0

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError("SourcePosition offset cannot be negative")
        if self.line < 0:
            raise ValueError("SourcePosition line cannot be negative")
        if self.length < 0:
            raise ValueError("SourcePosition length cannot be negative")

    @property
    def end(self) -> int:
        """Byte offset one past the end of the span."""
        return self.offset + self.length

    def __repr__(self) -> str:
        return f"SourcePosition({self.offset}, line={self.line}, len={self.length})"


@dataclass(frozen=True, slots=True)
class ResolvedColumn:
    """Start of the containing line (-1 for the first line) and 0-based column."""

    line_start: int
    column: int


def resolve_column(source: str, index: int) -> ResolvedColumn:
    """Resolve a character index into the start of its line and its column.

    Scans backward from the character before `index` (clamped into the text)
    to the previous line terminator, so an index sitting on a terminator
    resolves to the end of the line that terminator closes. Indices at or
    before the first character resolve to column 0.

    This differs from a scan that starts on `index` itself: that scan stops
    immediately on a terminator and reports column 0 for it, while this one
    reports the length of the closed line and keeps
    `line_start + column + 1 == index` for every index inside the text.
    """
    if not source:
        return ResolvedColumn(-1, 0)

    p = max(0, min(len(source), index)) - 1
    while p >= 0 and source[p] not in LINE_TERMINATORS:
        p -= 1

    return ResolvedColumn(p, max(0, index - p - 1))
