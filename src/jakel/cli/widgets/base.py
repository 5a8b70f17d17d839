"""Base widget and bounds."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from jakel.core.state import EditorState


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int


class BaseWidget(ABC):
    """Base class for widgets that draw from the editor state."""

    def __init__(self, state: EditorState) -> None:
        self.state = state

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Subclasses must implement rendering."""
        pass
