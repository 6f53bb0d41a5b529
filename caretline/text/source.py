"""Decoded source text with byte-offset translation."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
REPLACEMENT_CHARACTER: Final[str] = "\ufffd"


def split_source_lines(text: str) -> list[str]:
    """Split on `\\r\\n`, `\\r` and `\\n` only.

    Unlike `str.splitlines`, form feeds and other Unicode separators stay part
    of their line, so line indices agree with `resolve_column`. A trailing
    terminator does not produce an extra empty line.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _sequence_length(lead: int) -> int:
    """Expected UTF-8 sequence length for a lead byte, 0 if it cannot start one."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_with_offsets(data: bytes) -> tuple[str, tuple[int, ...]]:
    """Decode UTF-8 and return the byte offset at which each character starts.

    Every byte that is not part of a valid sequence becomes one U+FFFD, so
    the offsets line up with the text even for Latin-1 leftovers.
    """
    chars: list[str] = []
    starts: list[int] = []
    i = 0
    while i < len(data):
        width = _sequence_length(data[i])
        ch = REPLACEMENT_CHARACTER
        if width:
            try:
                ch = data[i : i + width].decode("utf-8")
            except UnicodeDecodeError:
                width = 0
        chars.append(ch)
        starts.append(i)
        i += width or 1
    return "".join(chars), tuple(starts)


@dataclass(frozen=True, slots=True)
class SourceText:
    """Raw UTF-8 bytes of a source file and their decoded text."""

    data: bytes
    text: str = field(init=False)
    lines: tuple[str, ...] = field(init=False)
    _starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        text, starts = decode_with_offsets(self.data)
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "lines", tuple(split_source_lines(text)))
        object.__setattr__(self, "_starts", starts)

    @staticmethod
    def of(text: str) -> "SourceText":
        """Create a SourceText from already decoded text."""
        return SourceText(text.encode("utf-8"))

    @staticmethod
    def read(path: str | Path) -> "SourceText":
        """Read a file from disk.

        Raises OSError when it cannot be read and ValueError for paths the OS
        cannot represent (e.g. embedded NUL bytes).
        """
        return SourceText(Path(path).read_bytes())

    def is_empty(self) -> bool:
        return not self.data

    def index_for_offset(self, offset: int) -> int:
        """Translate a byte offset into a character index into `text`.

        Offsets inside a multi-byte sequence map to the character that owns
        them; offsets past the end map to `len(text)`.
        """
        if offset >= len(self.data):
            return len(self.text)
        return max(0, bisect_right(self._starts, offset) - 1)

    def span_length(self, offset: int, length: int) -> int:
        """Number of characters covered by `length` bytes starting at `offset`."""
        start = self.index_for_offset(offset)
        end = self.index_for_offset(offset + length)
        # a 1-byte span inside a wide character still covers that character
        if length > 0 and end == start:
            return 1
        return end - start
