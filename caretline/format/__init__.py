"""Diagnostic formatting entry points."""

from caretline.format.formatter import DiagnosticFormatter, formatted_error
from caretline.format.options import DEFAULT_MODULE_QUALIFIER, PATHS_ENV_VAR, FormatterOptions
from caretline.format.paths import path_for_messages

__all__ = [
    "DEFAULT_MODULE_QUALIFIER",
    "DiagnosticFormatter",
    "FormatterOptions",
    "PATHS_ENV_VAR",
    "formatted_error",
    "path_for_messages",
]
