"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from caretline.diagnostics.diagnostic import Diagnostic

if TYPE_CHECKING:
    from caretline.format import DiagnosticFormatter


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.is_error for d in diagnostics)


def render_diagnostics(diagnostics: Iterable[Diagnostic], formatter: DiagnosticFormatter) -> str:
    """Format every diagnostic in order, one block per diagnostic."""
    return "\n".join(formatter.format_diagnostic(d) for d in diagnostics)
