"""Message bar widget - transient status messages."""

from __future__ import annotations

import time

from jakel.cli.widgets.base import BaseWidget, Rect
from jakel.core.constants import ERASE_LINE


class MessageBarWidget(BaseWidget):
    """Shows the status message until it is older than the configured timeout."""

    def render(self, bounds: Rect, now: float | None = None) -> list[str]:
        now = time.time() if now is None else now
        text = self.state.message.visible(self.state.config.message_timeout, now)
        return [ERASE_LINE + text[:bounds.width]]
