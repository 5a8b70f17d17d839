"""Tests for loading and saving documents."""

import os
from pathlib import Path

import pytest

import jakel
from jakel.core.buffer import LineBuffer
from jakel.io.paths import display_name, path_from_name
from jakel.io.reader import load, split_lines
from jakel.io.writer import save


class TestSplitLines:

    def test_strips_newlines_and_carriage_returns(self) -> None:
        assert split_lines(b"one\r\ntwo\nthree\r\n") == ["one", "two", "three"]

    def test_no_trailing_newline(self) -> None:
        assert split_lines(b"a\nb") == ["a", "b"]

    def test_blank_lines_are_kept(self) -> None:
        assert split_lines(b"a\n\n\nb\n") == ["a", "", "", "b"]

    def test_empty_input(self) -> None:
        assert split_lines(b"") == []

    def test_single_newline_is_one_empty_line(self) -> None:
        assert split_lines(b"\n") == [""]

    def test_high_bytes_are_preserved(self) -> None:
        data = "café\n".encode("utf-8")
        lines = split_lines(data)
        assert LineBuffer.from_lines(lines).serialize()[0] == data


class TestLoad:

    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.txt"
        path.write_bytes(b"ab\tc\n\nxyz\n")
        buf = load(path)
        assert buf.texts() == ["ab\tc", "", "xyz"]
        assert buf[0].render == "ab      c"
        assert buf.modified == 0

    def test_load_with_tab_stop(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.txt"
        path.write_bytes(b"a\tb\n")
        assert load(path, tab_stop=4)[0].render == "a   b"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load(tmp_path / "missing.txt")

    def test_package_level_helpers(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.txt"
        jakel.save(jakel.LineBuffer.from_lines(["x"]), path)
        assert jakel.load(path).texts() == ["x"]


class TestSave:

    def test_save_writes_lines_and_resets_modified(self, tmp_path: Path) -> None:
        buf = LineBuffer.from_lines(["a"])
        buf.insert_line(1, "b")
        assert buf.modified > 0

        path = tmp_path / "out.txt"
        written = save(buf, path)

        assert written == 4
        assert path.read_bytes() == b"a\nb\n"
        assert buf.modified == 0

    def test_save_truncates_longer_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        path.write_bytes(b"a much longer previous content\n" * 10)
        save(LineBuffer.from_lines(["short"]), path)
        assert path.read_bytes() == b"short\n"

    def test_round_trip(self, tmp_path: Path) -> None:
        lines = ["first", "\tindented", "", "trailing spaces   ", "last"]
        path = tmp_path / "out.txt"
        save(LineBuffer.from_lines(lines), path)
        assert load(path).texts() == lines

    def test_save_failure_keeps_modified(self, tmp_path: Path) -> None:
        buf = LineBuffer.from_lines(["a"])
        buf.insert_char(0, 1, "b")
        with pytest.raises(OSError):
            save(buf, tmp_path / "no-such-dir" / "out.txt")
        assert buf.modified > 0


class TestDisplayName:

    def test_ascii_name_unchanged(self) -> None:
        assert display_name(Path("notes.txt")) == "notes.txt"

    def test_non_latin1_name_is_one_char_per_byte(self) -> None:
        name = display_name("notes☃.txt")
        assert name.encode("latin-1") == "notes☃.txt".encode("utf-8")
        assert path_from_name(name) == Path("notes☃.txt")

    def test_undecodable_bytes_survive(self) -> None:
        raw = Path(os.fsdecode(b"bad\xff.txt"))
        assert path_from_name(display_name(raw)) == raw
