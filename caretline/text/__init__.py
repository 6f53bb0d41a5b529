"""Source text and position primitives."""

from caretline.text.position import ResolvedColumn, SourcePosition, resolve_column
from caretline.text.source import SourceText, decode_with_offsets, split_source_lines

__all__ = [
    "ResolvedColumn",
    "SourcePosition",
    "SourceText",
    "decode_with_offsets",
    "resolve_column",
    "split_source_lines",
]
