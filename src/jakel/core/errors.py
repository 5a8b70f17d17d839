"""Exceptions raised by the editor core."""


class TerminalError(RuntimeError):
    """The terminal could not be driven (attributes, size, or input stream).

    These indicate a broken environment rather than an editing condition;
    the CLI restores the screen and exits when one escapes the editor.
    """

    def __init__(self, operation: str, reason: str = "") -> None:
        self.operation = operation
        self.reason = reason
        message = f"{operation}: {reason}" if reason else operation
        super().__init__(message)
