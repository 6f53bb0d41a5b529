from caretline.diagnostics import DiagnosticKind
from caretline.render import (
    LineWindow,
    char_width,
    expand_tabs,
    pointer_padding,
    render_context,
    render_plain_line,
    render_target_line,
    span_columns,
)
from caretline.style import COLORED, PLAIN

CONTENT_GUTTER = len("    1 | ")
POINTER_GUTTER = "      | "


def _target(line: str, column: int, length: int, **kwargs) -> tuple[str, str]:
    kwargs.setdefault("kind", DiagnosticKind.ERROR)
    kwargs.setdefault("style", PLAIN)
    return render_target_line(0, line, column=column, length=length, **kwargs)


def test_plain_line_gutter() -> None:
    assert render_plain_line(0, "fn main() {") == "    1 | fn main() {"
    assert render_plain_line(99998, "x") == "99999 | x"


def test_expand_tabs_replaces_every_tab() -> None:
    assert expand_tabs("\ta\tb") == "    a    b"
    assert expand_tabs("\t", tab_width=2) == "  "


def test_single_character_span_uses_caret() -> None:
    row, pointer = _target("let x = y", column=4, length=1)

    assert row == "    1 | let x = y"
    assert pointer == POINTER_GUTTER + "    ^"


def test_zero_length_span_uses_caret() -> None:
    _, pointer = _target("let x = y", column=4, length=0)

    assert pointer == POINTER_GUTTER + "    ^"


def test_multi_character_span_uses_tildes() -> None:
    _, pointer = _target("  retrn 5", column=2, length=5)

    assert pointer == POINTER_GUTTER + "  ~~~~~"


def test_span_is_clipped_to_line_end() -> None:
    _, pointer = _target("abc", column=1, length=10)

    assert pointer == POINTER_GUTTER + " ~~"


def test_span_past_line_end_still_shows_caret() -> None:
    _, pointer = _target("abc", column=3, length=3)

    assert pointer == POINTER_GUTTER + "   ^"


def test_pointer_aligns_after_tab() -> None:
    row, pointer = _target("abc\tdefgh", column=5, length=1)

    content = row[CONTENT_GUTTER:]
    marker = pointer[len(POINTER_GUTTER) :]
    assert content == "abc    defgh"
    assert marker.index("^") == content.index("e")


def test_pointer_keeps_leading_tabs() -> None:
    assert pointer_padding("\t\tx =") == "\t\t   "


def test_pointer_aligns_after_wide_characters() -> None:
    row, pointer = _target("日本 x", column=3, length=1)

    assert row == "    1 | 日本 x"
    assert pointer == POINTER_GUTTER + "     ^"


def test_char_width() -> None:
    assert char_width("a") == 1
    assert char_width("日") == 2
    assert char_width("\u0301") == 0


def test_span_columns_clamps() -> None:
    assert span_columns("abcdef", 2, 3) == (2, 5)
    assert span_columns("abc", 5, 2) == (3, 3)
    assert span_columns("abc", 1, 100) == (1, 3)


def test_colored_target_highlights_only_the_span() -> None:
    row, pointer = _target("a bad c", column=2, length=3, style=COLORED)

    assert row == "    1 | a \x1b[31mbad\x1b[39m c"
    assert pointer == POINTER_GUTTER + "  \x1b[1m\x1b[31m~~~\x1b[39m\x1b[22m"


def test_warning_highlight_is_magenta() -> None:
    row, _ = _target("a bad c", column=2, length=3, style=COLORED, kind=DiagnosticKind.WARNING)

    assert "\x1b[35mbad" in row
    assert "\x1b[31m" not in row


def test_render_context_adds_pointer_row_for_target_only() -> None:
    lines = ["fn main() {", "  retrn 5", "}"]

    rendered = render_context(
        lines,
        LineWindow(0, 2),
        target_line=1,
        column=2,
        length=5,
        kind=DiagnosticKind.ERROR,
        style=PLAIN,
    )

    assert rendered == [
        "    1 | fn main() {",
        "    2 |   retrn 5",
        "      |   ~~~~~",
        "    3 | }",
    ]
