"""Path rendering for diagnostic headers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _as_posix(path: str | Path) -> str:
    return str(path).replace("\\", "/")


def path_for_messages(path: str | Path, *, workdir: str, absolute: bool = False) -> str:
    """Form of `path` as shown in a diagnostic header.

    With `absolute`, the canonical resolved path. Otherwise a leading `workdir`
    is stripped from the absolute form of `path`; paths outside `workdir` are
    shown as given. Separators are always forward slashes.
    """
    try:
        if absolute:
            return Path(path).resolve().as_posix()
        full = _as_posix(os.path.abspath(path))
    except (OSError, RuntimeError, ValueError) as exc:
        logger.debug("could not normalize %r: %s", path, exc)
        return _as_posix(path)

    prefix = workdir.rstrip("/") + "/"
    if full.startswith(prefix):
        return full[len(prefix) :]
    return _as_posix(path)
