"""Save a LineBuffer to disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from jakel.core.buffer import LineBuffer

logger = logging.getLogger(__name__)


def save(buf: LineBuffer, path: str | Path) -> int:
    """
    Write the buffer to ``path``, one newline-terminated line per Line.

    The file is created with mode 0644 if missing and truncated to the
    exact output length. The modified counter is reset only after the
    whole payload has been written.

    Returns:
        Number of bytes written

    Raises:
        OSError: If the file cannot be opened or fully written
    """
    path = Path(path)
    data, length = buf.serialize()

    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        os.ftruncate(fd, length)
        written = os.write(fd, data)
    finally:
        os.close(fd)

    if written != length:
        raise OSError(f"short write ({written} of {length} bytes)")

    buf.modified = 0
    logger.info("Saved %s (%d bytes)", path, length)
    return length
