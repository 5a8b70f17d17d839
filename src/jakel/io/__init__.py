"""File loading and saving."""

from jakel.io.paths import display_name, path_from_name
from jakel.io.reader import load, split_lines
from jakel.io.writer import save

__all__ = ["load", "split_lines", "save", "display_name", "path_from_name"]
