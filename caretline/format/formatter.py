"""Diagnostic formatter: header line plus a highlighted source excerpt.

Formatting is best effort. A missing or unreadable source file only drops the
excerpt, the `path:line:col: kind message` header is always produced.
"""

from __future__ import annotations

import logging
from pathlib import Path

from caretline.diagnostics import Diagnostic, DiagnosticKind
from caretline.format.options import FormatterOptions
from caretline.format.paths import path_for_messages
from caretline.render import context_window, render_context
from caretline.style import Style, default_style
from caretline.text import SourcePosition, SourceText, resolve_column

logger = logging.getLogger(__name__)


class DiagnosticFormatter:
    """Formats diagnostics using one set of options and one style."""

    def __init__(self, options: FormatterOptions | None = None, style: Style | None = None):
        self.options = options if options is not None else FormatterOptions.from_env()
        self.style = style if style is not None else default_style()

    def format(
        self,
        kind: DiagnosticKind,
        message: str,
        file_path: str | Path,
        position: SourcePosition,
    ) -> str:
        style = self.style
        message = self._strip_module_qualifier(message)
        shown_path = path_for_messages(
            file_path,
            workdir=self.options.workdir,
            absolute=self.options.absolute_paths,
        )

        source = _read_source(file_path)
        column = 0
        context: list[str] = []
        if source is not None and not source.is_empty():
            index = source.index_for_offset(position.offset)
            column = resolve_column(source.text, index).column
            context = self.source_context(kind, source, position, column)

        header = f"{shown_path}:{position.line + 1}:{max(1, column + 1)}:"
        text = f"{style.bold(header)} {style.bold(style.paint(kind, kind.value))} {message}"
        if context:
            text += "\n" + "\n".join(context)
        return text.strip()

    def format_diagnostic(self, diagnostic: Diagnostic) -> str:
        text = self.format(
            diagnostic.kind,
            diagnostic.message,
            diagnostic.file_path,
            diagnostic.position,
        )
        if diagnostic.hint:
            text += f"\n{self.style.bold('hint:')} {diagnostic.hint}"
        return text

    def source_context(
        self,
        kind: DiagnosticKind,
        source: SourceText,
        position: SourcePosition,
        column: int,
    ) -> list[str]:
        """Rendered excerpt lines for `position`, empty if there is nothing to show."""
        window = context_window(
            source.lines,
            position.line,
            before=self.options.context_before,
            after=self.options.context_after,
        )
        if window is None:
            return []
        return render_context(
            source.lines,
            window,
            target_line=position.line,
            column=column,
            length=source.span_length(position.offset, position.length),
            kind=kind,
            style=self.style,
            tab_width=self.options.tab_width,
        )

    def _strip_module_qualifier(self, message: str) -> str:
        qualifier = self.options.module_qualifier
        if not qualifier:
            return message
        return message.replace(qualifier, "")


def _read_source(file_path: str | Path) -> SourceText | None:
    try:
        return SourceText.read(file_path)
    except (OSError, ValueError) as exc:
        logger.debug("no source context for %s: %s", file_path, exc)
        return None


def formatted_error(
    kind: DiagnosticKind,
    message: str,
    file_path: str | Path,
    position: SourcePosition,
    *,
    options: FormatterOptions | None = None,
    style: Style | None = None,
) -> str:
    """Format a single diagnostic with the process defaults.

    Returns `path:line:col: kind message`, followed by the source excerpt
    when the file can be read.
    """
    return DiagnosticFormatter(options=options, style=style).format(kind, message, file_path, position)
