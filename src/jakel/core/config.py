"""Editor configuration with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from jakel.core.constants import MESSAGE_TIMEOUT, QUIT_TIMES, TAB_STOP

logger = logging.getLogger(__name__)

ENV_PREFIX = "JAKEL_"


def _env(name: str) -> str | None:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_number(name: str, default, cast, minimum):
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring %s%s=%r: not a number", ENV_PREFIX, name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s%s=%r: must be >= %s", ENV_PREFIX, name, raw, minimum)
        return default
    return value


@dataclass(frozen=True)
class EditorConfig:
    """Settings that affect editing and display.

    Attributes:
        tab_stop: Render width of a tab stop
        quit_times: Extra Ctrl-Q presses needed to quit a modified buffer
        message_timeout: Seconds a status message stays visible
    """
    tab_stop: int = TAB_STOP
    quit_times: int = QUIT_TIMES
    message_timeout: float = MESSAGE_TIMEOUT

    @classmethod
    def from_env(cls) -> EditorConfig:
        """Build a config from JAKEL_* environment variables."""
        return cls(
            tab_stop=_env_number("TAB_STOP", TAB_STOP, int, 1),
            quit_times=_env_number("QUIT_TIMES", QUIT_TIMES, int, 0),
            message_timeout=_env_number("MESSAGE_TIMEOUT", MESSAGE_TIMEOUT, float, 0.0),
        )
