"""Diagnostic kinds and their terminal colors."""

from enum import StrEnum
from typing import Final

from colorama import Fore


class DiagnosticKind(StrEnum):
    """Severity tag printed after the `path:line:col:` header."""

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"

    @property
    def ansi_color(self) -> str:
        return _KIND_COLORS[self]

    @staticmethod
    def from_tag(tag: str) -> "DiagnosticKind":
        """Map a free-form tag such as `"error:"` or `"warn"` to a kind."""
        normalized = tag.strip().rstrip(":").lower()
        try:
            return _TAG_ALIASES[normalized]
        except KeyError:
            raise ValueError(f"Unknown diagnostic kind tag: {tag!r}") from None


_KIND_COLORS: Final[dict[DiagnosticKind, str]] = {
    DiagnosticKind.ERROR: Fore.RED,
    DiagnosticKind.WARNING: Fore.MAGENTA,
    DiagnosticKind.NOTICE: Fore.MAGENTA,
}

_TAG_ALIASES: Final[dict[str, DiagnosticKind]] = {
    "error": DiagnosticKind.ERROR,
    "warning": DiagnosticKind.WARNING,
    "warn": DiagnosticKind.WARNING,
    "notice": DiagnosticKind.NOTICE,
}
