"""Low-level terminal operations - raw mode, byte I/O, and size queries."""

from __future__ import annotations

import atexit
import errno
import logging
import os
import re
import sys
import termios
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from jakel.core.constants import (
    CLEAR_SCREEN,
    CURSOR_FAR_CORNER,
    CURSOR_HOME,
    ENCODING,
    QUERY_CURSOR,
)
from jakel.core.errors import TerminalError

logger = logging.getLogger(__name__)

_CURSOR_REPORT = re.compile(rb"^\x1b\[(\d+);(\d+)")

# termios attribute list indices
_IFLAG, _OFLAG, _CFLAG, _LFLAG, _CC = 0, 1, 2, 3, 6


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Raw-mode terminal session over a pair of file descriptors.

    ``enter()`` switches the input side to unbuffered, unechoed, 8-bit clean
    reads with a 100 ms timeout; ``exit()`` puts the saved attributes back.
    ``exit()`` is also registered with atexit, so the user's shell gets its
    terminal back however the process ends.
    """

    def __init__(self, in_fd: int | None = None, out_fd: int | None = None) -> None:
        self.in_fd = sys.stdin.fileno() if in_fd is None else in_fd
        self.out_fd = sys.stdout.fileno() if out_fd is None else out_fd
        self._saved: list | None = None
        self._atexit_registered = False

    # -------------------------------------------------------------------------
    # Raw mode
    # -------------------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self._saved is not None

    def enter(self) -> None:
        """Capture the current attributes and switch to raw mode."""
        try:
            saved = termios.tcgetattr(self.in_fd)
        except termios.error as e:
            raise TerminalError("tcgetattr", str(e)) from e

        self._saved = saved
        if not self._atexit_registered:
            atexit.register(self.exit, quiet=True)
            self._atexit_registered = True

        raw = [list(attr) if isinstance(attr, list) else attr for attr in saved]
        raw[_IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[_OFLAG] &= ~termios.OPOST
        raw[_CFLAG] |= termios.CS8
        raw[_LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[_CC][termios.VMIN] = 0
        raw[_CC][termios.VTIME] = 1

        try:
            termios.tcsetattr(self.in_fd, termios.TCSAFLUSH, raw)
        except termios.error as e:
            raise TerminalError("tcsetattr", str(e)) from e
        logger.debug("Entered raw mode")

    def exit(self, quiet: bool = False) -> None:
        """Restore the attributes captured by ``enter()``. Safe to call twice.

        With ``quiet`` a failed restore is logged instead of raised, for
        callers that are already unwinding another error or the process.
        """
        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        try:
            termios.tcsetattr(self.in_fd, termios.TCSAFLUSH, saved)
        except termios.error as e:
            if quiet:
                logger.error("Could not restore terminal attributes: %s", e)
                return
            raise TerminalError("tcsetattr", str(e)) from e
        logger.debug("Restored terminal attributes")

    @contextmanager
    def session(self) -> Iterator[Terminal]:
        """Raw mode for the duration of the block."""
        self.enter()
        try:
            yield self
        except BaseException:
            self.exit(quiet=True)
            raise
        self.exit()

    # -------------------------------------------------------------------------
    # Byte I/O
    # -------------------------------------------------------------------------

    def read_byte(self) -> bytes:
        """Read one byte; returns b'' when the read times out."""
        while True:
            try:
                return os.read(self.in_fd, 1)
            except InterruptedError:
                continue
            except BlockingIOError:
                return b""
            except OSError as e:
                if e.errno == errno.EAGAIN:
                    return b""
                raise TerminalError("read", str(e)) from e

    def write(self, data: bytes | str) -> None:
        """Write the whole payload with a single write call."""
        if isinstance(data, str):
            data = data.encode(ENCODING)
        os.write(self.out_fd, data)

    def clear_screen(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    # -------------------------------------------------------------------------
    # Size
    # -------------------------------------------------------------------------

    def size(self) -> TerminalSize:
        """Get terminal dimensions, probing the cursor if the ioctl fails."""
        try:
            size = os.get_terminal_size(self.out_fd)
            if size.columns > 0:
                return TerminalSize(size.lines, size.columns)
        except OSError:
            pass

        logger.info("Window-size ioctl unavailable, probing cursor position")
        self.write(CURSOR_FAR_CORNER)
        return self.cursor_position()

    def cursor_position(self) -> TerminalSize:
        """Ask the terminal where the cursor is (ESC[6n) and parse the reply."""
        self.write(QUERY_CURSOR)

        reply = bytearray()
        while len(reply) < 31:
            byte = self.read_byte()
            if not byte or byte == b"R":
                break
            reply += byte

        match = _CURSOR_REPORT.match(bytes(reply))
        if match is None:
            raise TerminalError("getSize", f"unexpected cursor report {bytes(reply)!r}")
        return TerminalSize(int(match.group(1)), int(match.group(2)))
