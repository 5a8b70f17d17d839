"""Line - one row of document text with its tab-expanded render form."""

from __future__ import annotations

from jakel.core.constants import TAB_STOP


class Line:
    """
    A single row of text.

    ``chars`` is the raw content; ``render`` is the same content with each
    tab expanded to the next multiple of ``tab_stop``. Assigning ``chars``
    recomputes ``render``, so the two never disagree.
    """

    __slots__ = ("_chars", "_render", "tab_stop")

    def __init__(self, chars: str = "", tab_stop: int = TAB_STOP) -> None:
        self.tab_stop = tab_stop
        self._render = ""
        self._chars = ""
        self.chars = chars

    @property
    def chars(self) -> str:
        return self._chars

    @chars.setter
    def chars(self, value: str) -> None:
        self._chars = value
        self._render = self._expand_tabs(value)

    @property
    def render(self) -> str:
        return self._render

    @property
    def size(self) -> int:
        """Length of the raw content."""
        return len(self._chars)

    @property
    def rsize(self) -> int:
        """Length of the render form."""
        return len(self._render)

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Line):
            return self._chars == other._chars
        return NotImplemented

    def __repr__(self) -> str:
        return f"Line({self._chars!r})"

    def _expand_tabs(self, text: str) -> str:
        if "\t" not in text:
            return text
        out: list[str] = []
        col = 0
        for ch in text:
            if ch == "\t":
                pad = self.tab_stop - (col % self.tab_stop)
                out.append(" " * pad)
                col += pad
            else:
                out.append(ch)
                col += 1
        return "".join(out)

    def cx_to_rx(self, cx: int) -> int:
        """Map a raw column to its render column."""
        rx = 0
        for ch in self._chars[:cx]:
            if ch == "\t":
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def rx_to_cx(self, rx: int) -> int:
        """Map a render column back to the raw column that covers it.

        Returns the first character whose cumulative render width passes
        ``rx``; positions past the end map to ``size``.
        """
        cur_rx = 0
        for cx, ch in enumerate(self._chars):
            if ch == "\t":
                cur_rx += (self.tab_stop - 1) - (cur_rx % self.tab_stop)
            cur_rx += 1
            if cur_rx > rx:
                return cx
        return len(self._chars)

    def find(self, query: str) -> int:
        """Render column of the first occurrence of ``query``, or -1."""
        return self._render.find(query)
