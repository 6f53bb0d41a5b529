"""Formatter configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from caretline.render import DEFAULT_LINES_AFTER, DEFAULT_LINES_BEFORE, TAB_WIDTH

PATHS_ENV_VAR: Final[str] = "VERROR_PATHS"
DEFAULT_MODULE_QUALIFIER: Final[str] = "main."


def _current_workdir() -> str:
    return Path.cwd().resolve().as_posix()


@dataclass(frozen=True, slots=True)
class FormatterOptions:
    """Knobs controlling how a diagnostic is laid out.

    `workdir` is the directory paths are shown relative to; it is captured
    when the options are created, not when a diagnostic is formatted.
    """

    absolute_paths: bool = False
    workdir: str = field(default_factory=_current_workdir)
    context_before: int = DEFAULT_LINES_BEFORE
    context_after: int = DEFAULT_LINES_AFTER
    tab_width: int = TAB_WIDTH
    module_qualifier: str = DEFAULT_MODULE_QUALIFIER

    @staticmethod
    def from_env(
        environ: Mapping[str, str] | None = None,
        *,
        workdir: str | None = None,
    ) -> "FormatterOptions":
        """Build options from `VERROR_PATHS` (`absolute` selects absolute paths)."""
        env = os.environ if environ is None else environ
        absolute = env.get(PATHS_ENV_VAR, "").strip().lower() == "absolute"
        if workdir is None:
            return FormatterOptions(absolute_paths=absolute)
        return FormatterOptions(
            absolute_paths=absolute,
            workdir=Path(workdir).resolve().as_posix(),
        )
