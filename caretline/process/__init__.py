"""Process-level helpers: fatal exit, printing, external diff."""

from caretline.process.diff import (
    DIFF_FLAGS,
    DIFF_OPTIONS_ENV_VAR,
    KNOWN_DIFF_TOOLS,
    DiffCommand,
    color_compare_files,
    color_compare_strings,
    diff_options_from_env,
    find_working_diff_command,
)
from caretline.process.fatal import FATAL_EXIT_CODE, fatal_error
from caretline.process.report import report_diagnostic

__all__ = [
    "DIFF_FLAGS",
    "DIFF_OPTIONS_ENV_VAR",
    "FATAL_EXIT_CODE",
    "KNOWN_DIFF_TOOLS",
    "DiffCommand",
    "color_compare_files",
    "color_compare_strings",
    "diff_options_from_env",
    "find_working_diff_command",
    "fatal_error",
    "report_diagnostic",
]
