"""Status bar widget for file name, line count, and cursor line."""

from __future__ import annotations

from jakel.cli.widgets.base import BaseWidget, Rect
from jakel.core.constants import MODIFIED_MARKER, RESET, REVERSE_VIDEO, UNNAMED

NAME_WIDTH = 20


class StatusBarWidget(BaseWidget):
    """Reverse-video bar: name and line count on the left, ``line/total`` on the right."""

    def left_text(self) -> str:
        name = (self.state.file_name or UNNAMED)[:NAME_WIDTH]
        marker = MODIFIED_MARKER if self.state.modified else ""
        return f"{name} - {self.state.buffer.count} lines {marker}"

    def right_text(self) -> str:
        return f"{self.state.cursor.cy + 1}/{self.state.buffer.count}"

    def render(self, bounds: Rect) -> list[str]:
        """Render the status bar, fitting within bounds.width."""
        width = bounds.width
        left = self.left_text()[:width]
        right = self.right_text()

        # Right text only when it fits after the left text
        padding_needed = width - len(left)
        if padding_needed >= len(right):
            line = left + " " * (padding_needed - len(right)) + right
        else:
            line = left + " " * padding_needed

        return [f"{REVERSE_VIDEO}{line}{RESET}"]
