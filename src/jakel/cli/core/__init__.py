"""Core TUI infrastructure - terminal I/O, input decoding, viewport, frames."""

from jakel.cli.core.terminal import Terminal, TerminalSize
from jakel.cli.core.input import InputReader, KeyEvent, Key
from jakel.cli.core.viewport import calculate_viewport, move_cursor, page, scroll
from jakel.cli.core.frame import Compositor, FrameBuffer

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "calculate_viewport",
    "move_cursor",
    "page",
    "scroll",
    "Compositor",
    "FrameBuffer",
]
