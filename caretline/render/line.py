"""Rendering of gutter-prefixed source lines and the pointer line under them."""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence
from typing import Final

from caretline.diagnostics import DiagnosticKind
from caretline.render.context import LineWindow
from caretline.style import Style

TAB_WIDTH: Final[int] = 4
GUTTER_WIDTH: Final[int] = 5
POINTER_GUTTER: Final[str] = " " * (GUTTER_WIDTH + 1) + "| "


def expand_tabs(text: str, tab_width: int = TAB_WIDTH) -> str:
    # plain replacement, not tab stops: both rows keep their tabs in the same
    # places so they expand identically
    return text.replace("\t", " " * tab_width)


def char_width(ch: str) -> int:
    """Terminal columns taken by a single character."""
    if unicodedata.combining(ch) or unicodedata.category(ch) == "Cf":
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def pointer_padding(prefix: str) -> str:
    """Blank out `prefix` so that a marker appended to it lands after it.

    Whitespace (tabs in particular) is kept verbatim; every other character
    becomes as many spaces as it is wide on screen.
    """
    return "".join(ch if ch.isspace() else " " * char_width(ch) for ch in prefix)


def span_columns(line: str, column: int, length: int) -> tuple[int, int]:
    """Clamp a span starting at `column` to the bounds of `line`."""
    start = max(0, min(column, len(line)))
    end = max(start, min(column + max(0, length), len(line)))
    return start, end


def gutter(line_index: int) -> str:
    return f"{line_index + 1:{GUTTER_WIDTH}d} | "


def render_plain_line(line_index: int, line: str, tab_width: int = TAB_WIDTH) -> str:
    return gutter(line_index) + expand_tabs(line, tab_width)


def render_target_line(
    line_index: int,
    line: str,
    *,
    column: int,
    length: int,
    kind: DiagnosticKind,
    style: Style,
    tab_width: int = TAB_WIDTH,
) -> tuple[str, str]:
    """Render the highlighted source row and the pointer row beneath it."""
    start, end = span_columns(line, column, length)
    highlighted = line[:start] + style.paint(kind, line[start:end]) + line[end:]

    if length > 1 and end > start:
        marker = "~" * (end - start)
    else:
        marker = "^"
    pointer = pointer_padding(line[:start]) + style.bold(style.paint(kind, marker))

    return (
        gutter(line_index) + expand_tabs(highlighted, tab_width),
        POINTER_GUTTER + expand_tabs(pointer, tab_width),
    )


def render_context(
    source_lines: Sequence[str],
    window: LineWindow,
    *,
    target_line: int,
    column: int,
    length: int,
    kind: DiagnosticKind,
    style: Style,
    tab_width: int = TAB_WIDTH,
) -> list[str]:
    """Render every line of `window`; the target line gets a pointer row too."""
    rendered: list[str] = []
    for index in window:
        line = source_lines[index]
        if index != target_line:
            rendered.append(render_plain_line(index, line, tab_width))
            continue
        rendered.extend(
            render_target_line(
                index,
                line,
                column=column,
                length=length,
                kind=kind,
                style=style,
                tab_width=tab_width,
            )
        )
    return rendered
