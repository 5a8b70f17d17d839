"""
jakel: a small terminal text editor

Always-insert editing on a raw ANSI terminal: no modes, no curses.

Quick Start:
    $ jakel notes.txt

Library use:
    >>> import jakel
    >>> buf = jakel.load("notes.txt")
    >>> buf.insert_char(0, 0, "#")
    >>> jakel.save(buf, "notes.txt")

Features:
    - Tab-aware rendering with separate raw and screen columns
    - Incremental search that follows every keystroke
    - Flicker-free redraws composed into a single write
    - Byte-transparent load/save of any text file
"""

__version__ = "0.1.0"

# Core types
from jakel.core.line import Line
from jakel.core.buffer import LineBuffer
from jakel.core.config import EditorConfig
from jakel.core.state import EditorState
from jakel.core.errors import TerminalError

# Convenience functions
from jakel.io.reader import load
from jakel.io.writer import save

__all__ = [
    # Version
    "__version__",
    # Core types
    "Line",
    "LineBuffer",
    "EditorConfig",
    "EditorState",
    "TerminalError",
    # I/O
    "load",
    "save",
]
