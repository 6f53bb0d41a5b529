"""Source excerpt rendering."""

from caretline.render.context import (
    DEFAULT_LINES_AFTER,
    DEFAULT_LINES_BEFORE,
    LineWindow,
    context_window,
)
from caretline.render.line import (
    TAB_WIDTH,
    char_width,
    expand_tabs,
    pointer_padding,
    render_context,
    render_plain_line,
    render_target_line,
    span_columns,
)

__all__ = [
    "DEFAULT_LINES_AFTER",
    "DEFAULT_LINES_BEFORE",
    "LineWindow",
    "TAB_WIDTH",
    "char_width",
    "context_window",
    "expand_tabs",
    "pointer_padding",
    "render_context",
    "render_plain_line",
    "render_target_line",
    "span_columns",
]
