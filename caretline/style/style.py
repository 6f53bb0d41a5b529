"""ANSI styling that collapses to plain text when color is off."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from colorama import Fore
from colorama import Style as Ansi

if TYPE_CHECKING:
    from caretline.diagnostics import DiagnosticKind


@dataclass(frozen=True, slots=True)
class Style:
    """Whether diagnostics are painted with ANSI escape sequences."""

    color: bool = False

    def bold(self, text: str) -> str:
        if not self.color:
            return text
        return f"{Ansi.BRIGHT}{text}{Ansi.NORMAL}"

    def paint(self, kind: DiagnosticKind, text: str) -> str:
        """Wrap `text` in the color of `kind` (red for errors, magenta otherwise)."""
        if not self.color:
            return text
        return f"{kind.ansi_color}{text}{Fore.RESET}"


PLAIN = Style(color=False)
COLORED = Style(color=True)


def supports_color(stream: TextIO) -> bool:
    """Probe whether `stream` is an interactive terminal that understands ANSI."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        if not isatty():
            return False
    except ValueError:
        # closed stream
        return False
    return os.environ.get("TERM", "") != "dumb"
