"""LineBuffer - the ordered sequence of lines that makes up a document.

Indices run over ``[0, count)``. Out-of-range requests are clamped or
ignored instead of raising: insertion positions clamp to the nearest
valid bound, deletions of a missing target do nothing. Every successful
mutation re-renders the touched line and bumps ``modified``.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from jakel.core.constants import ENCODING, TAB_STOP
from jakel.core.line import Line


class LineBuffer:
    """Document model: lines plus a dirty counter.

    Example:
        buf = LineBuffer.from_lines(["ab\\tc", "", "xyz"])
        buf.insert_char(2, 3, "!")
        data, length = buf.serialize()
    """

    def __init__(self, tab_stop: int = TAB_STOP) -> None:
        self.tab_stop = tab_stop
        self._lines: list[Line] = []
        self.modified = 0

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_lines(cls, lines: Iterable[str], tab_stop: int = TAB_STOP) -> LineBuffer:
        """Build a clean (unmodified) buffer from raw line strings."""
        buf = cls(tab_stop=tab_stop)
        for text in lines:
            buf.insert_line(buf.count, text)
        buf.modified = 0
        return buf

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> Line:
        if index < 0 or index >= len(self._lines):
            raise IndexError(f"line {index} out of range (count={len(self._lines)})")
        return self._lines[index]

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def get(self, index: int) -> Line | None:
        """Line at ``index``, or None for the past-the-end row."""
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def texts(self) -> list[str]:
        """Raw content of every line."""
        return [line.chars for line in self._lines]

    # -------------------------------------------------------------------------
    # Line operations
    # -------------------------------------------------------------------------

    def insert_line(self, at: int, text: str = "") -> None:
        if at < 0 or at > len(self._lines):
            return
        self._lines.insert(at, Line(text, self.tab_stop))
        self.modified += 1

    def delete_line(self, at: int) -> None:
        if at < 0 or at >= len(self._lines):
            return
        del self._lines[at]
        self.modified += 1

    def split_line(self, at: int, col: int) -> None:
        """Move everything from ``col`` onward into a new line below ``at``."""
        line = self.get(at)
        if line is None:
            return
        col = max(0, min(col, line.size))
        self.insert_line(at + 1, line.chars[col:])
        line.chars = line.chars[:col]
        self.modified += 1

    def join_line(self, at: int) -> None:
        """Append line ``at + 1`` onto line ``at`` and remove it."""
        if self.get(at) is None or self.get(at + 1) is None:
            return
        self.append_text(at, self._lines[at + 1].chars)
        self.delete_line(at + 1)

    # -------------------------------------------------------------------------
    # Character operations
    # -------------------------------------------------------------------------

    def insert_char(self, at: int, col: int, ch: str) -> None:
        line = self.get(at)
        if line is None:
            return
        if col < 0 or col > line.size:
            col = line.size
        line.chars = line.chars[:col] + ch + line.chars[col:]
        self.modified += 1

    def delete_char(self, at: int, col: int) -> None:
        line = self.get(at)
        if line is None or col < 0 or col >= line.size:
            return
        line.chars = line.chars[:col] + line.chars[col + 1:]
        self.modified += 1

    def append_text(self, at: int, text: str) -> None:
        line = self.get(at)
        if line is None:
            return
        line.chars = line.chars + text
        self.modified += 1

    # -------------------------------------------------------------------------
    # Persistence format
    # -------------------------------------------------------------------------

    def serialize(self) -> tuple[bytes, int]:
        """Join all lines, each terminated by a newline.

        Returns:
            Tuple of (encoded bytes, byte length)
        """
        text = "".join(f"{line.chars}\n" for line in self._lines)
        data = text.encode(ENCODING)
        return data, len(data)

    def __repr__(self) -> str:
        return f"LineBuffer(count={len(self._lines)}, modified={self.modified})"
