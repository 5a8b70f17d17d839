"""Logging setup.

The editor owns the terminal while it runs, so log records never go to the
console. Set JAKEL_LOG_FILE to capture them in a file.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "jakel"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(path: str | None = None, level: str | None = None) -> logging.Logger:
    """Attach a file handler to the package logger, or a NullHandler if no file is set."""
    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    path = path or os.getenv("JAKEL_LOG_FILE")
    level_name = (level or os.getenv("JAKEL_LOG_LEVEL") or "INFO").upper()

    if path:
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.setLevel(getattr(logging, level_name, logging.INFO))
    else:
        handler = logging.NullHandler()

    root.addHandler(handler)
    root.propagate = False
    return root
