"""Process-wide default style.

Probed lazily from stderr on first use. `set_color_enabled` is meant for the
startup phase (e.g. `--color` / `--no-color` flags), before any diagnostics
are formatted.
"""

from __future__ import annotations

import logging
import sys

import colorama

from caretline.style.style import COLORED, PLAIN, Style, supports_color

logger = logging.getLogger(__name__)

_override: bool | None = None
_detected: Style | None = None
_console_fixed = False


def _enable_ansi_console() -> None:
    global _console_fixed
    if not _console_fixed:
        colorama.just_fix_windows_console()
        _console_fixed = True


def default_style() -> Style:
    """Return the style diagnostics use when none is passed explicitly."""
    global _detected
    if _override is not None:
        style = COLORED if _override else PLAIN
    else:
        if _detected is None:
            _detected = COLORED if supports_color(sys.stderr) else PLAIN
            logger.debug("stderr color support detected: %s", _detected.color)
        style = _detected
    if style.color:
        _enable_ansi_console()
    return style


def set_color_enabled(enabled: bool | None) -> None:
    """Force color on or off; `None` drops the override and re-probes stderr."""
    global _override, _detected
    _override = enabled
    if enabled is None:
        _detected = None
