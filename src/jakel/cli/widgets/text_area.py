"""Text area widget - the visible window onto the document."""

from __future__ import annotations

from jakel.cli.widgets.base import BaseWidget, Rect
from jakel.core.constants import EMPTY_ROW_MARKER, ERASE_LINE, VERSION


def banner() -> str:
    return f"jakel -- version {VERSION}"


class TextAreaWidget(BaseWidget):
    """Document rows clipped to the viewport.

    Rows past the end of the document show a marker; an empty document
    shows the version banner a third of the way down.
    """

    def render(self, bounds: Rect) -> list[str]:
        buf = self.state.buffer
        view = self.state.viewport
        rows: list[str] = []

        for y in range(bounds.height):
            file_row = y + view.row_offset
            line = buf.get(file_row)
            if line is not None:
                text = line.render[view.col_offset:view.col_offset + bounds.width]
            elif buf.count == 0 and y == bounds.height // 3:
                text = self._centered_banner(bounds.width)
            else:
                text = EMPTY_ROW_MARKER
            rows.append(text + ERASE_LINE)

        return rows

    @staticmethod
    def _centered_banner(width: int) -> str:
        message = banner()[:width]
        padding = (width - len(message)) // 2
        if padding:
            return EMPTY_ROW_MARKER + " " * (padding - 1) + message
        return message
