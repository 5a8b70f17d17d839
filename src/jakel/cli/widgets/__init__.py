"""Screen regions drawn into each frame."""

from jakel.cli.widgets.base import BaseWidget, Rect
from jakel.cli.widgets.text_area import TextAreaWidget
from jakel.cli.widgets.status_bar import StatusBarWidget
from jakel.cli.widgets.message_bar import MessageBarWidget

__all__ = [
    "BaseWidget",
    "Rect",
    "TextAreaWidget",
    "StatusBarWidget",
    "MessageBarWidget",
]
