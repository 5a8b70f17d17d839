"""File names as the editor shows them.

Paths become one character per OS byte, the same form file contents take,
so any name can be drawn in the status bar and turned back into the exact
path it came from.
"""

from __future__ import annotations

import os
from pathlib import Path

from jakel.core.constants import ENCODING


def display_name(path: str | Path) -> str:
    return os.fsencode(path).decode(ENCODING)


def path_from_name(name: str) -> Path:
    """Inverse of ``display_name``."""
    return Path(os.fsdecode(name.encode(ENCODING)))
