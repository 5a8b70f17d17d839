"""Interactive text editor application.

This module provides the EditorApp that ties together:
- Terminal: raw-mode session and byte I/O
- InputReader: key decoding
- LineBuffer / EditorState: the document and cursor
- Compositor: full-screen redraws
- Prompt / search: line input in the message bar
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from jakel.cli.core.frame import Compositor
from jakel.cli.core.input import InputReader, Key, KeyEvent
from jakel.cli.core.terminal import Terminal
from jakel.cli.core.viewport import calculate_viewport, move_cursor, page, scroll
from jakel.cli.studio.prompt import Prompt
from jakel.cli.studio.search import find
from jakel.core.buffer import LineBuffer
from jakel.core.config import EditorConfig
from jakel.core.state import EditorState
from jakel.io.paths import display_name, path_from_name
from jakel.io.reader import load
from jakel.io.writer import save

logger = logging.getLogger(__name__)

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"
SAVE_PROMPT = "Save as: {} (ESC to cancel)"


class EditorApp:
    """Modal-free terminal text editor.

    Every key either edits the document or moves the cursor; there is no
    separate command mode.

    Keyboard Controls:
        Ctrl-S: Save (prompts for a name if the buffer has none)
        Ctrl-Q: Quit (repeat to discard unsaved changes)
        Ctrl-F: Incremental find (arrows step between matches)
        Arrows / Home / End / PgUp / PgDn: Move cursor
        Backspace / Ctrl-H / Delete: Delete character
        Enter: Split line
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        terminal: Optional[Terminal] = None,
        config: Optional[EditorConfig] = None,
    ) -> None:
        """Initialize the editor.

        Args:
            path: Optional file path to load on startup
            terminal: Terminal to drive (defaults to stdin/stdout)
            config: Editor settings (defaults to environment overrides)
        """
        self.running = False
        self.terminal = terminal or Terminal()
        self.input = InputReader(self.terminal)

        config = config or EditorConfig.from_env()
        self.state = EditorState(buffer=LineBuffer(tab_stop=config.tab_stop), config=config)
        self.compositor = Compositor(self.state)

        self._quit_times = config.quit_times

        if path is not None:
            self._load_file(Path(path))
        if not self.state.message.text:
            self.state.set_status(HELP_MESSAGE)

    # -------------------------------------------------------------------------
    # Document Management
    # -------------------------------------------------------------------------

    def _load_file(self, path: Path) -> None:
        """Load a file for editing.

        A missing file opens as an empty buffer under that name, so the
        first save creates it. Any other read error leaves an unnamed
        empty buffer and reports the problem.
        """
        state = self.state
        name = display_name(path)
        try:
            state.buffer = load(path, tab_stop=state.config.tab_stop)
            state.file_name = name
        except FileNotFoundError:
            state.buffer = LineBuffer(tab_stop=state.config.tab_stop)
            state.file_name = name
            state.set_status(f"New file: {name}")
        except OSError as e:
            logger.warning("Cannot open %s: %s", path, e)
            state.buffer = LineBuffer(tab_stop=state.config.tab_stop)
            state.file_name = None
            state.set_status(f"Can't open {name}: {e.strerror or e}")

    def save(self) -> None:
        """Write the buffer, asking for a file name first if there is none."""
        state = self.state
        if state.file_name is None:
            name = Prompt(self, SAVE_PROMPT).run()
            if name is None:
                state.set_status("Save cancelled")
                return
            state.file_name = name

        try:
            length = save(state.buffer, path_from_name(state.file_name))
        except OSError as e:
            logger.error("Failed to save %s: %s", state.file_name, e)
            state.set_status(f"Can't save! I/O error: {e.strerror or e}")
            return

        state.set_status(f"{length} bytes written to disk")

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def insert_char(self, ch: str) -> None:
        state = self.state
        cursor = state.cursor
        if cursor.cy == state.buffer.count:
            state.buffer.insert_line(state.buffer.count, "")
        state.buffer.insert_char(cursor.cy, cursor.cx, ch)
        cursor.cx += 1

    def insert_newline(self) -> None:
        state = self.state
        cursor = state.cursor
        if cursor.cx == 0:
            state.buffer.insert_line(cursor.cy, "")
        else:
            state.buffer.split_line(cursor.cy, cursor.cx)
        cursor.cy += 1
        cursor.cx = 0

    def delete_char(self) -> None:
        """Delete left of the cursor, joining lines at column 0."""
        state = self.state
        cursor = state.cursor
        if cursor.cy == state.buffer.count:
            return
        if cursor.cx == 0 and cursor.cy == 0:
            return

        if cursor.cx > 0:
            state.buffer.delete_char(cursor.cy, cursor.cx - 1)
            cursor.cx -= 1
        else:
            cursor.cx = state.buffer[cursor.cy - 1].size
            state.buffer.join_line(cursor.cy - 1)
            cursor.cy -= 1

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Run the editor main loop until quit."""
        self.running = True

        with self.terminal.session():
            try:
                self.resize()
                while self.running:
                    self.refresh_screen()
                    self.process_key()
            finally:
                self.terminal.clear_screen()

    def resize(self) -> None:
        """Size the viewport to the terminal."""
        size = self.terminal.size()
        view = calculate_viewport(size)
        self.state.viewport.rows = view.rows
        self.state.viewport.cols = view.cols
        logger.info("Terminal size %dx%d", size.rows, size.cols)

    def refresh_screen(self) -> None:
        """Scroll to the cursor and redraw the whole screen in one write."""
        scroll(self.state)
        self.terminal.write(self.compositor.compose().to_bytes())

    def read_key(self) -> KeyEvent:
        return self.input.read_key()

    # -------------------------------------------------------------------------
    # Input Handling
    # -------------------------------------------------------------------------

    def process_key(self, event: Optional[KeyEvent] = None) -> None:
        """Read (or take) one key and apply it."""
        if event is None:
            event = self.read_key()
        state = self.state
        cursor = state.cursor

        if event.is_ctrl('q'):
            if state.modified and self._quit_times > 0:
                state.set_status(
                    f"UNSAVED FILE: Press CTRL-Q {self._quit_times} more times to quit."
                )
                self._quit_times -= 1
                return
            self.running = False
            return

        if event.key == Key.ENTER:
            self.insert_newline()
        elif event.is_ctrl('s'):
            self.save()
        elif event.is_ctrl('f'):
            find(self)
        elif event.key == Key.HOME:
            cursor.cx = 0
        elif event.key == Key.END:
            line = state.current_line
            if line is not None:
                cursor.cx = line.size
        elif event.key in (Key.BACKSPACE, Key.DELETE) or event.is_ctrl('h'):
            if event.key == Key.DELETE:
                move_cursor(state, Key.RIGHT)
            self.delete_char()
        elif event.key in (Key.PAGE_UP, Key.PAGE_DOWN):
            page(state, event.key)
        elif event.key in (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT):
            move_cursor(state, event.key)
        elif event.key == Key.ESCAPE or event.is_ctrl('l'):
            pass
        elif event.is_char:
            self.insert_char(event.char)

        self._quit_times = state.config.quit_times


def run_editor(path: Optional[Path] = None) -> None:
    """Launch the editor application.

    Args:
        path: Optional file path to open
    """
    app = EditorApp(path)
    app.run()
