"""Diagnostics."""

from caretline.diagnostics.diagnostic import Diagnostic
from caretline.diagnostics.kind import DiagnosticKind
from caretline.diagnostics.report import collect_diagnostics, has_errors, render_diagnostics

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "collect_diagnostics",
    "has_errors",
    "render_diagnostics",
]
