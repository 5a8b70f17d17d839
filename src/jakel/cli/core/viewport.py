"""Viewport and cursor movement.

Scrolling is snap-to-visible: offsets move only as far as needed to bring
the cursor back on screen, so an unrelated redraw never shifts the view.
"""

from __future__ import annotations

from jakel.cli.core.input import Key
from jakel.cli.core.terminal import TerminalSize
from jakel.core.constants import RESERVED_ROWS
from jakel.core.state import EditorState, Viewport


def calculate_viewport(size: TerminalSize) -> Viewport:
    """Viewport for a terminal, leaving room for the status and message bars."""
    return Viewport(rows=max(1, size.rows - RESERVED_ROWS), cols=max(1, size.cols))


def scroll(state: EditorState) -> None:
    """Recompute ``rx`` and pull the offsets in until the cursor is visible."""
    cursor = state.cursor
    view = state.viewport

    line = state.current_line
    cursor.rx = line.cx_to_rx(cursor.cx) if line is not None else 0

    if cursor.cy < view.row_offset:
        view.row_offset = cursor.cy
    if cursor.cy >= view.row_offset + view.rows:
        view.row_offset = cursor.cy - view.rows + 1

    if cursor.rx < view.col_offset:
        view.col_offset = cursor.rx
    if cursor.rx >= view.col_offset + view.cols:
        view.col_offset = cursor.rx - view.cols + 1


def move_cursor(state: EditorState, key: Key) -> None:
    """Move one step; horizontal moves wrap across line ends."""
    cursor = state.cursor
    buf = state.buffer
    line = state.current_line

    if key == Key.UP:
        if cursor.cy > 0:
            cursor.cy -= 1
    elif key == Key.DOWN:
        if cursor.cy < buf.count:
            cursor.cy += 1
    elif key == Key.LEFT:
        if cursor.cx > 0:
            cursor.cx -= 1
        elif cursor.cy > 0:
            cursor.cy -= 1
            cursor.cx = buf[cursor.cy].size
    elif key == Key.RIGHT:
        if line is not None:
            if cursor.cx < line.size:
                cursor.cx += 1
            else:
                cursor.cy += 1
                cursor.cx = 0

    line = state.current_line
    line_len = line.size if line is not None else 0
    if cursor.cx > line_len:
        cursor.cx = line_len


def page(state: EditorState, key: Key) -> None:
    """Jump to the viewport edge, then step a full screen up or down."""
    cursor = state.cursor
    view = state.viewport

    if key == Key.PAGE_UP:
        cursor.cy = view.row_offset
        step = Key.UP
    elif key == Key.PAGE_DOWN:
        cursor.cy = min(view.row_offset + view.rows - 1, state.buffer.count)
        step = Key.DOWN
    else:
        return

    for _ in range(view.rows):
        move_cursor(state, step)
