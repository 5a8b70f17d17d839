"""Editor state shared by the viewport, compositor, prompt, and controller.

A single EditorState is created per editor and handed to every operation
that needs it; nothing here is module-global.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from jakel.core.buffer import LineBuffer
from jakel.core.config import EditorConfig
from jakel.core.line import Line


@dataclass
class Cursor:
    """Cursor position.

    ``cx`` indexes raw characters and may equal the line length; ``cy`` may
    equal the line count (past the last line). ``rx`` is derived from
    ``cx`` by the viewport before every redraw.
    """
    cx: int = 0
    cy: int = 0
    rx: int = 0


@dataclass
class Viewport:
    """Visible window into the document."""
    rows: int = 24
    cols: int = 80
    row_offset: int = 0
    col_offset: int = 0


@dataclass
class StatusMessage:
    """Transient message shown in the message bar."""
    text: str = ""
    timestamp: float = 0.0

    def set(self, text: str, now: float | None = None) -> None:
        self.text = text
        self.timestamp = time.time() if now is None else now

    def clear(self) -> None:
        self.set("")

    def visible(self, timeout: float, now: float | None = None) -> str:
        """The message text while it is younger than ``timeout``, else ''."""
        now = time.time() if now is None else now
        if self.text and now - self.timestamp < timeout:
            return self.text
        return ""


@dataclass
class EditorState:
    """Everything the editor knows about the open document and the screen."""
    buffer: LineBuffer = field(default_factory=LineBuffer)
    cursor: Cursor = field(default_factory=Cursor)
    viewport: Viewport = field(default_factory=Viewport)
    message: StatusMessage = field(default_factory=StatusMessage)
    config: EditorConfig = field(default_factory=EditorConfig)
    file_name: str | None = None

    @property
    def current_line(self) -> Line | None:
        """Line under the cursor, or None past the last line."""
        return self.buffer.get(self.cursor.cy)

    @property
    def modified(self) -> int:
        return self.buffer.modified

    def set_status(self, text: str) -> None:
        self.message.set(text)
