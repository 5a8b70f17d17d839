"""Frame composition - one full redraw as a single byte buffer."""

from __future__ import annotations

from jakel.cli.widgets.base import Rect
from jakel.cli.widgets.message_bar import MessageBarWidget
from jakel.cli.widgets.status_bar import StatusBarWidget
from jakel.cli.widgets.text_area import TextAreaWidget
from jakel.core.constants import (
    CRLF,
    CSI,
    CURSOR_HOME,
    ENCODING,
    HIDE_CURSOR,
    SHOW_CURSOR,
)
from jakel.core.state import EditorState


class FrameBuffer:
    """Append-only output buffer flushed with one terminal write."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, text: str) -> FrameBuffer:
        self._parts.append(text)
        return self

    def move_to(self, row: int, col: int) -> FrameBuffer:
        """Cursor-position escape (1-indexed)."""
        return self.append(f"{CSI}{row};{col}H")

    def __str__(self) -> str:
        return "".join(self._parts)

    def to_bytes(self) -> bytes:
        return str(self).encode(ENCODING, errors="replace")


class Compositor:
    """Builds frames from the editor state.

    Frame layout: hide cursor, home, text rows, status bar, message bar,
    cursor position, show cursor. The caller is expected to have scrolled
    the viewport so ``rx`` is current.
    """

    def __init__(self, state: EditorState) -> None:
        self.state = state
        self.text_area = TextAreaWidget(state)
        self.status_bar = StatusBarWidget(state)
        self.message_bar = MessageBarWidget(state)

    def compose(self, now: float | None = None) -> FrameBuffer:
        view = self.state.viewport
        cursor = self.state.cursor

        frame = FrameBuffer()
        frame.append(HIDE_CURSOR).append(CURSOR_HOME)

        for row in self.text_area.render(Rect(0, 0, view.cols, view.rows)):
            frame.append(row).append(CRLF)
        for row in self.status_bar.render(Rect(0, view.rows, view.cols, 1)):
            frame.append(row).append(CRLF)
        for row in self.message_bar.render(Rect(0, view.rows + 1, view.cols, 1), now=now):
            frame.append(row)

        frame.move_to(cursor.cy - view.row_offset + 1, cursor.rx - view.col_offset + 1)
        frame.append(SHOW_CURSOR)
        return frame
