"""Load text files into a LineBuffer."""

from __future__ import annotations

import logging
from pathlib import Path

from jakel.core.buffer import LineBuffer
from jakel.core.constants import ENCODING, TAB_STOP

logger = logging.getLogger(__name__)


def split_lines(data: bytes) -> list[str]:
    """Split raw file bytes into line contents.

    Trailing newline and carriage-return characters are stripped from each
    line; a final newline does not produce an extra empty line.
    """
    text = data.decode(ENCODING)
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def load(path: str | Path, tab_stop: int = TAB_STOP) -> LineBuffer:
    """
    Load a text file from disk.

    Raises:
        OSError: If the file cannot be read (FileNotFoundError included)
    """
    path = Path(path)

    with open(path, "rb") as f:
        data = f.read()

    buf = LineBuffer.from_lines(split_lines(data), tab_stop=tab_stop)
    logger.info("Loaded %s (%d lines, %d bytes)", path, buf.count, len(data))
    return buf
