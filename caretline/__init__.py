"""Caret-and-underline diagnostic rendering for compiler front ends."""

from caretline.diagnostics import Diagnostic, DiagnosticKind
from caretline.format import DiagnosticFormatter, FormatterOptions, formatted_error
from caretline.style import Style, default_style, set_color_enabled
from caretline.text import SourcePosition

__all__ = [
    "Diagnostic",
    "DiagnosticFormatter",
    "DiagnosticKind",
    "FormatterOptions",
    "SourcePosition",
    "Style",
    "default_style",
    "formatted_error",
    "set_color_enabled",
]
