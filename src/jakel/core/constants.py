"""Shared constants for the editor and its terminal protocol."""

VERSION = "0.1.0"

# Editing defaults
TAB_STOP = 8
QUIT_TIMES = 3
MESSAGE_TIMEOUT = 5.0

# Rows reserved below the text area (status bar + message bar)
RESERVED_ROWS = 2

# Files and keystrokes are kept byte-transparent: one character per byte
ENCODING = "latin-1"

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
CURSOR_HOME = f"{CSI}H"
CLEAR_SCREEN = f"{CSI}2J"
ERASE_LINE = f"{CSI}K"
REVERSE_VIDEO = f"{CSI}7m"
RESET = f"{CSI}m"
CURSOR_FAR_CORNER = f"{CSI}999C{CSI}999B"
QUERY_CURSOR = f"{CSI}6n"
CRLF = "\r\n"

# Markers drawn in the text area
EMPTY_ROW_MARKER = "-"
UNNAMED = "[Unnamed]"
MODIFIED_MARKER = "(M)"


def ctrl(letter: str) -> str:
    """Return the control character produced by Ctrl+<letter>."""
    return chr(ord(letter) & 0x1F)
