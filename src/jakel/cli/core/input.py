"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol

from jakel.core.constants import ENCODING, ESC, ctrl

logger = logging.getLogger(__name__)


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    BACKSPACE = auto()
    ENTER = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character (printable or control) otherwise
    raw: str = ""  # Bytes that produced the event

    @property
    def is_char(self) -> bool:
        """Check if this is a character event (printable or control)."""
        return self.char is not None and self.key is None

    @property
    def is_printable(self) -> bool:
        """A non-control ASCII character."""
        return self.is_char and 32 <= ord(self.char) < 127

    def is_ctrl(self, letter: str) -> bool:
        """Check for the control character produced by Ctrl+<letter>."""
        return self.is_char and self.char == ctrl(letter)


class ByteSource(Protocol):
    """Anything that yields single bytes, returning b'' on timeout."""

    def read_byte(self) -> bytes:
        ...


class DecoderState(Enum):
    """States of the escape-sequence decoder."""
    NORMAL = auto()
    SAW_ESCAPE = auto()
    SAW_BRACKET_OR_O = auto()
    AWAITING_TILDE = auto()


class InputReader:
    """
    Blocking key reader over a raw byte source.

    A lone ESC starts a short lookahead. ``ESC [ <letter>`` and
    ``ESC O <letter>`` name arrows and Home/End directly; ``ESC [ <digit> ~``
    names the numbered VT keys. A timeout or an unknown byte anywhere in the
    lookahead yields a plain ESCAPE event.
    """

    # Final letter after "ESC [" or "ESC O"
    LETTER_KEYS: dict[str, Key] = {
        'A': Key.UP,
        'B': Key.DOWN,
        'C': Key.RIGHT,
        'D': Key.LEFT,
        'H': Key.HOME,
        'F': Key.END,
    }

    # Digit in "ESC [ <digit> ~"
    TILDE_KEYS: dict[str, Key] = {
        '1': Key.HOME,
        '3': Key.DELETE,
        '4': Key.END,
        '5': Key.PAGE_UP,
        '6': Key.PAGE_DOWN,
        '7': Key.HOME,
        '8': Key.END,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\x7f': Key.BACKSPACE,
    }

    def __init__(self, source: ByteSource) -> None:
        self._source = source

    def read_key(self) -> KeyEvent:
        """Block until one complete key event is available."""
        first = self._read_char()
        while first is None:
            first = self._read_char()

        if first != ESC:
            return self._simple(first)
        return self._decode_escape()

    def _read_char(self) -> Optional[str]:
        byte = self._source.read_byte()
        if not byte:
            return None
        return byte.decode(ENCODING)

    def _simple(self, ch: str) -> KeyEvent:
        key = self.SIMPLE_KEYS.get(ch)
        if key is not None:
            return KeyEvent(key=key, raw=ch)
        return KeyEvent(char=ch, raw=ch)

    def _decode_escape(self) -> KeyEvent:
        """Run the lookahead state machine after an ESC byte."""
        state = DecoderState.SAW_ESCAPE
        seq = ESC
        intro = ""
        digit = ""

        while True:
            ch = self._read_char()
            if ch is None:
                return self._escape(seq)
            seq += ch

            if state == DecoderState.SAW_ESCAPE:
                if ch not in ('[', 'O'):
                    return self._escape(seq)
                intro = ch
                state = DecoderState.SAW_BRACKET_OR_O

            elif state == DecoderState.SAW_BRACKET_OR_O:
                if intro == '[' and ch.isdigit():
                    digit = ch
                    state = DecoderState.AWAITING_TILDE
                    continue
                key = self.LETTER_KEYS.get(ch)
                if key is None:
                    return self._escape(seq)
                return KeyEvent(key=key, raw=seq)

            elif state == DecoderState.AWAITING_TILDE:
                key = self.TILDE_KEYS.get(digit)
                if ch != '~' or key is None:
                    return self._escape(seq)
                return KeyEvent(key=key, raw=seq)

    def _escape(self, seq: str) -> KeyEvent:
        if seq != ESC:
            logger.debug("Unrecognized escape sequence %r", seq)
        return KeyEvent(key=Key.ESCAPE, raw=seq)
