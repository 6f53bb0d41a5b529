"""Diagnostics core types."""

from dataclasses import dataclass

from caretline.diagnostics.kind import DiagnosticKind
from caretline.text import SourcePosition


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single message anchored to a span of a source file."""

    kind: DiagnosticKind
    message: str
    file_path: str
    position: SourcePosition
    hint: str | None = None

    @property
    def is_error(self) -> bool:
        return self.kind == DiagnosticKind.ERROR
