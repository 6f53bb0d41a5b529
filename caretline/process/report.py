"""Printing formatted diagnostics."""

from __future__ import annotations

import sys
from typing import TextIO

from caretline.diagnostics import Diagnostic
from caretline.format import DiagnosticFormatter


def report_diagnostic(
    diagnostic: Diagnostic,
    formatter: DiagnosticFormatter | None = None,
    *,
    stream: TextIO | None = None,
) -> str:
    """Format `diagnostic`, write it to `stream` (stderr) and return the text."""
    formatter = formatter if formatter is not None else DiagnosticFormatter()
    text = formatter.format_diagnostic(diagnostic)
    print(text, file=stream if stream is not None else sys.stderr)
    return text
