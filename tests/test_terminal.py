"""Tests for the raw-mode terminal wrapper."""

import logging
import os
import termios

import pytest

from jakel.cli.core.terminal import Terminal, TerminalSize
from jakel.core.errors import TerminalError


class ScriptedTerminal(Terminal):
    """Terminal whose reads come from a script and whose writes are captured."""

    def __init__(self, reply: bytes = b"") -> None:
        super().__init__(in_fd=-1, out_fd=-1)
        self.reply = list(reply)
        self.written = bytearray()

    def read_byte(self) -> bytes:
        if not self.reply:
            return b""
        return bytes([self.reply.pop(0)])

    def write(self, data) -> None:
        if isinstance(data, str):
            data = data.encode("latin-1")
        self.written += data


class TestCursorPosition:

    def test_parses_report(self) -> None:
        term = ScriptedTerminal(b"\x1b[24;80R")
        assert term.cursor_position() == TerminalSize(24, 80)
        assert term.written == b"\x1b[6n"

    def test_stops_at_r(self) -> None:
        term = ScriptedTerminal(b"\x1b[5;7Rxyz")
        assert term.cursor_position() == TerminalSize(5, 7)
        assert term.reply == list(b"xyz")

    def test_garbage_reply_is_fatal(self) -> None:
        term = ScriptedTerminal(b"hello")
        with pytest.raises(TerminalError) as exc:
            term.cursor_position()
        assert exc.value.operation == "getSize"

    def test_no_reply_is_fatal(self) -> None:
        with pytest.raises(TerminalError):
            ScriptedTerminal().cursor_position()


class TestSize:

    def test_probe_when_ioctl_fails(self, monkeypatch) -> None:
        def no_size(fd):
            raise OSError("not a tty")

        monkeypatch.setattr(os, "get_terminal_size", no_size)
        term = ScriptedTerminal(b"\x1b[30;100R")
        assert term.size() == TerminalSize(30, 100)
        assert term.written == b"\x1b[999C\x1b[999B\x1b[6n"

    def test_ioctl_result_used(self, monkeypatch) -> None:
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((100, 40)))
        term = ScriptedTerminal()
        assert term.size() == TerminalSize(40, 100)
        assert term.written == b""

    def test_zero_columns_falls_back_to_probe(self, monkeypatch) -> None:
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((0, 0)))
        term = ScriptedTerminal(b"\x1b[12;34R")
        assert term.size() == TerminalSize(12, 34)


class TestRawMode:

    def test_enter_on_non_tty_fails(self, tmp_path) -> None:
        path = tmp_path / "plain"
        path.write_bytes(b"")
        fd = os.open(path, os.O_RDONLY)
        try:
            term = Terminal(in_fd=fd, out_fd=fd)
            with pytest.raises(TerminalError):
                term.enter()
            assert not term.active
        finally:
            os.close(fd)

    def test_exit_without_enter_is_noop(self) -> None:
        Terminal(in_fd=-1, out_fd=-1).exit()

    @pytest.mark.tty
    def test_session_round_trip_on_pty(self) -> None:
        master, slave = os.openpty()
        try:
            before = termios.tcgetattr(slave)
            term = Terminal(in_fd=slave, out_fd=slave)
            with term.session():
                assert term.active
                raw = termios.tcgetattr(slave)
                assert not raw[3] & termios.ECHO
                assert not raw[3] & termios.ICANON
                assert not raw[1] & termios.OPOST
                assert raw[6][termios.VMIN] == 0
                assert raw[6][termios.VTIME] == 1
                # VMIN=0/VTIME=1: an idle read times out empty
                assert term.read_byte() == b""
            assert not term.active
            assert termios.tcgetattr(slave) == before
        finally:
            os.close(master)
            os.close(slave)


class TestRestoreFailure:
    """Raw mode entered on a fake tty whose restore call fails."""

    @pytest.fixture
    def broken_restore(self, monkeypatch):
        calls = []

        def fake_getattr(fd):
            return [0, 0, 0, 0, 0, 0, [0] * 32]

        def fake_setattr(fd, when, attrs):
            calls.append(attrs)
            if len(calls) > 1:
                raise termios.error(5, "Input/output error")

        monkeypatch.setattr(termios, "tcgetattr", fake_getattr)
        monkeypatch.setattr(termios, "tcsetattr", fake_setattr)
        return calls

    def test_clean_exit_reports_failure(self, broken_restore) -> None:
        term = Terminal(in_fd=0, out_fd=1)
        with pytest.raises(TerminalError) as exc:
            with term.session():
                pass
        assert exc.value.operation == "tcsetattr"
        assert not term.active

    def test_failure_does_not_mask_the_original_error(self, broken_restore) -> None:
        term = Terminal(in_fd=0, out_fd=1)
        with pytest.raises(ValueError, match="editor crashed"):
            with term.session():
                raise ValueError("editor crashed")
        assert len(broken_restore) == 2
        assert not term.active

    def test_quiet_exit_logs_instead_of_raising(self, broken_restore, caplog) -> None:
        term = Terminal(in_fd=0, out_fd=1)
        term.enter()
        with caplog.at_level(logging.ERROR, logger="jakel.cli.core.terminal"):
            term.exit(quiet=True)
        assert "Could not restore terminal attributes" in caplog.text
        assert not term.active
