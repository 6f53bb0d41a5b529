#!/usr/bin/env python
"""Render one diagnostic for a file/offset, for eyeballing the output."""

import argparse

from caretline import DiagnosticFormatter, DiagnosticKind, SourcePosition, set_color_enabled
from caretline.format import FormatterOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", help="Source file the diagnostic points into")
    parser.add_argument("offset", type=int, help="Byte offset of the span start")
    parser.add_argument("line", type=int, help="1-based line number of the span")
    parser.add_argument("message", help="Diagnostic message")
    parser.add_argument("--length", type=int, default=1, help="Span length in bytes")
    parser.add_argument(
        "--kind",
        type=DiagnosticKind.from_tag,
        default=DiagnosticKind.ERROR,
        help="Diagnostic kind tag (error, warning, notice)",
    )
    color = parser.add_mutually_exclusive_group()
    color.add_argument("--color", dest="color", action="store_true", default=None)
    color.add_argument("--no-color", dest="color", action="store_false")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    set_color_enabled(args.color)

    formatter = DiagnosticFormatter(FormatterOptions.from_env())
    position = SourcePosition(offset=args.offset, line=max(0, args.line - 1), length=args.length)
    print(formatter.format(args.kind, args.message, args.path, position))


if __name__ == "__main__":
    main()
