"""Incremental search."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jakel.cli.core.input import Key, KeyEvent
from jakel.cli.studio.prompt import Prompt
from jakel.core.state import EditorState

if TYPE_CHECKING:
    from jakel.cli.studio.editor import EditorApp

SEARCH_PROMPT = "Find: {} (ESC/Arrows/Enter)"


class SearchObserver:
    """Moves the cursor to a match after every keystroke of the query.

    Right/Down search forward from the last match, Left/Up backward; any
    other key starts over from the top. Each search visits every line at
    most once, wrapping at either end.
    """

    def __init__(self, state: EditorState) -> None:
        self.state = state
        self.last_match = -1
        self.direction = 1

    def reset(self) -> None:
        self.last_match = -1
        self.direction = 1

    def on_key(self, query: str, event: KeyEvent) -> None:
        if event.key in (Key.ENTER, Key.ESCAPE):
            self.reset()
            return
        if event.key in (Key.RIGHT, Key.DOWN):
            self.direction = 1
        elif event.key in (Key.LEFT, Key.UP):
            self.direction = -1
        else:
            self.reset()

        if self.last_match == -1:
            self.direction = 1
        if query:
            self._search(query)

    def _search(self, query: str) -> None:
        buf = self.state.buffer
        count = buf.count
        current = self.last_match

        for _ in range(count):
            current += self.direction
            if current == -1:
                current = count - 1
            elif current == count:
                current = 0

            line = buf[current]
            rx = line.find(query)
            if rx != -1:
                self.last_match = current
                self.state.cursor.cy = current
                self.state.cursor.cx = line.rx_to_cx(rx)
                # Past-the-end offset makes the next scroll put the match on top
                self.state.viewport.row_offset = count
                return


def find(editor: EditorApp) -> None:
    """Search interactively; cancelling puts the cursor and view back."""
    state = editor.state
    cursor = state.cursor
    view = state.viewport
    saved = (cursor.cx, cursor.cy, view.col_offset, view.row_offset)

    query = Prompt(editor, SEARCH_PROMPT, SearchObserver(state)).run()

    if query is None:
        cursor.cx, cursor.cy, view.col_offset, view.row_offset = saved
