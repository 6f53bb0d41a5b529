"""Process-terminating error reporting for top-level drivers."""

from __future__ import annotations

import sys
from typing import NoReturn, TextIO

from caretline.diagnostics import DiagnosticKind
from caretline.style import Style, default_style

FATAL_EXIT_CODE = 1


def fatal_error(
    kind: DiagnosticKind,
    message: str,
    *,
    stream: TextIO | None = None,
    style: Style | None = None,
) -> NoReturn:
    """Print `kind: message` to stderr and exit with status 1."""
    style = style if style is not None else default_style()
    stream = stream if stream is not None else sys.stderr
    print(f"{style.bold(style.paint(kind, kind.value))}: {message}", file=stream)
    stream.flush()
    raise SystemExit(FATAL_EXIT_CODE)
