"""Pytest configuration and shared fixtures."""

import logging
from collections import deque
from contextlib import contextmanager
from typing import Iterator

import pytest

from jakel.cli.core.terminal import TerminalSize
from jakel.cli.studio.editor import EditorApp
from jakel.core.buffer import LineBuffer
from jakel.core.config import EditorConfig
from jakel.core.log import LOGGER_NAME
from jakel.core.state import EditorState, Viewport

# Scripted read that returns nothing, like a terminal read timing out
TIMEOUT = b""

UP = b"\x1b[A"
DOWN = b"\x1b[B"
RIGHT = b"\x1b[C"
LEFT = b"\x1b[D"
ENTER = b"\r"
ESCAPE = b"\x1b"
BACKSPACE = b"\x7f"
DELETE = b"\x1b[3~"
CTRL_F = b"\x06"
CTRL_Q = b"\x11"
CTRL_S = b"\x13"


class InputExhausted(RuntimeError):
    """The test script ran out of input while the code kept reading."""


class FakeTerminal:
    """In-memory stand-in for Terminal: scripted input, captured output."""

    MAX_IDLE_READS = 100

    def __init__(self, rows: int = 10, cols: int = 40) -> None:
        self.rows = rows
        self.cols = cols
        self._input: deque[bytes] = deque()
        self.output = bytearray()
        self.writes = 0
        self.entered = 0
        self.exited = 0
        self._idle = 0

    def feed(self, *chunks: bytes) -> "FakeTerminal":
        """Queue input; each byte is one read, TIMEOUT is an empty read."""
        for chunk in chunks:
            if chunk == TIMEOUT:
                self._input.append(TIMEOUT)
            else:
                self._input.extend(bytes([b]) for b in chunk)
        return self

    def read_byte(self) -> bytes:
        if self._input:
            self._idle = 0
            return self._input.popleft()
        self._idle += 1
        if self._idle > self.MAX_IDLE_READS:
            raise InputExhausted("no scripted input left")
        return TIMEOUT

    @property
    def pending(self) -> int:
        return len(self._input)

    def write(self, data: bytes | str) -> None:
        if isinstance(data, str):
            data = data.encode("latin-1")
        self.output += data
        self.writes += 1

    def clear_screen(self) -> None:
        self.write("\x1b[2J\x1b[H")

    def size(self) -> TerminalSize:
        return TerminalSize(self.rows, self.cols)

    @contextmanager
    def session(self) -> Iterator["FakeTerminal"]:
        self.entered += 1
        try:
            yield self
        finally:
            self.exited += 1

    def last_frame(self) -> str:
        """Text of the most recent full frame."""
        text = self.output.decode("latin-1")
        start = text.rfind("\x1b[?25l")
        return text[start:] if start != -1 else text


@pytest.fixture
def config() -> EditorConfig:
    return EditorConfig()


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def sample_buffer() -> LineBuffer:
    """The three-line document used across tests."""
    return LineBuffer.from_lines(["ab\tc", "", "xyz"])


@pytest.fixture
def state(sample_buffer: LineBuffer) -> EditorState:
    return EditorState(buffer=sample_buffer, viewport=Viewport(rows=8, cols=40))


@pytest.fixture
def make_editor(terminal: FakeTerminal, config: EditorConfig):
    """Factory for an editor on the fake terminal, optionally preloaded with lines."""

    def _make(lines: list[str] | None = None, file_name: str | None = None) -> EditorApp:
        editor = EditorApp(terminal=terminal, config=config)
        if lines is not None:
            editor.state.buffer = LineBuffer.from_lines(lines, tab_stop=config.tab_stop)
        editor.state.file_name = file_name
        editor.resize()
        return editor

    return _make


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo any configure_logging() a test triggers."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
