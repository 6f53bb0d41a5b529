"""Comparing texts with an external `diff` tool.

Used to show expected/actual output mismatches. Tool failures never raise:
a missing tool is reported as None, a failed run as a descriptive string.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
import time
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

logger = logging.getLogger(__name__)

DIFF_OPTIONS_ENV_VAR: Final[str] = "VDIFF_OPTIONS"

KNOWN_DIFF_TOOLS: Final[tuple[str, ...]] = (
    "colordiff",
    "gdiff",
    "diff",
    "colordiff.exe",
    "diff.exe",
)

DIFF_FLAGS: Final[tuple[str, ...]] = (
    "--minimal",
    "--text",
    "--unified=2",
    "--show-function-line=fn ",
)


@dataclass(frozen=True, slots=True)
class DiffCommand:
    """A working diff executable plus user supplied extra options."""

    executable: str
    extra_options: tuple[str, ...] = ()

    def argv(self, file1: str | Path, file2: str | Path) -> list[str]:
        return [self.executable, *self.extra_options, *DIFF_FLAGS, str(file1), str(file2)]

    def __str__(self) -> str:
        return shlex.join([self.executable, *self.extra_options])


def diff_options_from_env(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    env = os.environ if environ is None else environ
    return tuple(shlex.split(env.get(DIFF_OPTIONS_ENV_VAR, "")))


def _responds_to_version_probe(executable: str) -> bool:
    try:
        completed = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("diff tool %s unavailable: %s", executable, exc)
        return False
    logger.debug("diff tool %s --version exited with %d", executable, completed.returncode)
    return completed.returncode == 0


def find_working_diff_command(
    candidates: tuple[str, ...] = KNOWN_DIFF_TOOLS,
    *,
    environ: Mapping[str, str] | None = None,
) -> DiffCommand | None:
    """First candidate whose `--version` probe succeeds, or None."""
    extra_options = diff_options_from_env(environ)
    for executable in candidates:
        if _responds_to_version_probe(executable):
            return DiffCommand(executable, extra_options)
    return None


def color_compare_files(command: DiffCommand | None, file1: str | Path, file2: str | Path) -> str:
    """Unified diff of two files, trailing newlines trimmed."""
    if command is None:
        return ""
    argv = command.argv(file1, file2)
    try:
        completed = subprocess.run(argv, capture_output=True, text=True, check=False)
    except OSError as exc:
        logger.warning("diff invocation failed: %s", exc)
        return f"comparison command: `{shlex.join(argv)}` failed"
    # exit status 1 only means the files differ
    return completed.stdout.rstrip("\r\n")


def color_compare_strings(
    command: DiffCommand | None,
    unique_prefix: str,
    expected: str,
    found: str,
) -> str:
    """Diff two strings by writing them to temporary files first."""
    workdir = Path(tempfile.gettempdir()) / unique_prefix
    stamp = time.monotonic_ns()
    expected_file = workdir / f"{stamp}.expected.txt"
    found_file = workdir / f"{stamp}.found.txt"
    try:
        try:
            workdir.mkdir(parents=True, exist_ok=True)
            expected_file.write_text(expected, encoding="utf-8")
            found_file.write_text(found, encoding="utf-8")
        except OSError as exc:
            logger.warning("could not write comparison files under %s: %s", workdir, exc)
            return f"comparison files could not be written to `{workdir}`"
        return color_compare_files(command, expected_file, found_file)
    finally:
        for path in (expected_file, found_file):
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                logger.debug("could not remove %s: %s", path, exc)
