"""Line-input prompt shown in the message bar.

The prompt runs its own read/redraw loop on top of the editor. An optional
observer is told about every keystroke, which is what lets search update
the cursor while the query is still being typed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from jakel.cli.core.input import Key, KeyEvent

if TYPE_CHECKING:
    from jakel.cli.studio.editor import EditorApp


class PromptObserver(Protocol):
    """Receives the current input after every key the prompt handles."""

    def on_key(self, query: str, event: KeyEvent) -> None:
        ...


class NullObserver:
    """Observer for plain prompts that need no live updates."""

    def on_key(self, query: str, event: KeyEvent) -> None:
        pass


class Prompt:
    """
    Capture one line of input.

    Args:
        editor: Editor whose screen and input the prompt borrows
        template: Message with a ``{}`` placeholder for the typed text
        observer: Optional per-keystroke observer
    """

    def __init__(
        self,
        editor: EditorApp,
        template: str,
        observer: Optional[PromptObserver] = None,
    ) -> None:
        self.editor = editor
        self.template = template
        self.observer: PromptObserver = observer or NullObserver()
        self._chars: list[str] = []

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def run(self) -> Optional[str]:
        """Loop until Enter (returns the text) or Escape (returns None)."""
        state = self.editor.state

        while True:
            state.set_status(self.template.format(self.text))
            self.editor.refresh_screen()

            event = self.editor.read_key()

            if event.key in (Key.BACKSPACE, Key.DELETE) or event.is_ctrl('h'):
                if self._chars:
                    self._chars.pop()
            elif event.key == Key.ESCAPE:
                state.message.clear()
                self.observer.on_key(self.text, event)
                self._chars.clear()
                return None
            elif event.key == Key.ENTER:
                if self._chars:
                    state.message.clear()
                    self.observer.on_key(self.text, event)
                    return self.text
            elif event.is_printable:
                self._chars.append(event.char)

            self.observer.on_key(self.text, event)
