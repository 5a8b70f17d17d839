"""Document model, editor state, and shared settings."""

from jakel.core.line import Line
from jakel.core.buffer import LineBuffer
from jakel.core.state import Cursor, EditorState, StatusMessage, Viewport

__all__ = [
    "Line",
    "LineBuffer",
    "Cursor",
    "EditorState",
    "StatusMessage",
    "Viewport",
]
