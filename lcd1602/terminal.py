"""A display stand-in that renders its two lines into a text file."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import BinaryIO, Iterable

from lcd1602.lcd import LineNumber

_LINE_WIDTH = 16
_MAX_FILE_SIZE = 10000

_FG_BLACK = 30
_FG_YELLOW = 33
_FG_HI_WHITE = 97
_BG_BLACK = 40
_BG_GREEN = 42
_BG_BLUE = 44
_BOLD = 1

_DEFAULT_ENTRY_MODE = (True, False)
_DEFAULT_DISPLAY_FLAGS = (True, False, False)

_CUSTOM_CHARACTERS = str.maketrans(
    {
        "\x00": "\u2080",
        "\x01": "\u2081",
        "\x02": "\u2082",
        "\x03": "\u2083",
        "\x04": "\u2084",
        "\x05": "\u2085",
        "\x06": "\u2086",
        "\x07": "\u2087",
        " ": "\u2591",
    }
)


def replace_custom_characters(s: str) -> str:
    """Make custom glyph slots and spaces visible in a terminal."""
    return s.translate(_CUSTOM_CHARACTERS)


def _paint(codes: Iterable[int], text: str) -> str:
    return f"\x1b[{';'.join(str(code) for code in codes)}m{text}\x1b[0m"


class TerminalLCD:
    """Writes a drawing of the display to ``<directory>/LCD`` on each change.

    Controller commands do not affect the drawing; their settings are only
    remembered on the instance.
    """

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory) if directory is not None else None
        self.line_width = _LINE_WIDTH
        self.line1 = ""
        self.line2 = ""
        self.path: Path | None = None
        self.entry_mode: tuple[bool, bool] = _DEFAULT_ENTRY_MODE
        self.display_flags: tuple[bool, bool, bool] = _DEFAULT_DISPLAY_FLAGS
        self.last_write: tuple[int, bool] | None = None
        self.glyphs: dict[int, tuple[int, ...]] = {}
        self.cursor = 0
        self._file: BinaryIO | None = None
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """Create and empty the output file and tell the user how to watch it."""
        self.line_width = _LINE_WIDTH
        directory = self.directory if self.directory is not None else Path.cwd()
        self.path = directory / "LCD"
        if self._file is not None:
            self._file.close()
        self._file = open(self.path, "wb")
        print("The Terminal LCD is visible with the following command on Linux")
        print(f"\n\ttail -f {self.path}\n\n", end="")
        self._file.seek(0)
        self._file.truncate(0)
        self._file.flush()

    def clear(self) -> None:
        self.write_line("", LineNumber.LINE1)
        self.write_line("", LineNumber.LINE2)

    def entry_mode_set(self, increment: bool, shift: bool) -> None:
        """Remember the entry mode; the drawing is unaffected."""
        self.entry_mode = (bool(increment), bool(shift))

    def display_mode(self, display: bool, cursor: bool, blink: bool) -> None:
        """Remember the display flags; the drawing is unaffected."""
        self.display_flags = (bool(display), bool(cursor), bool(blink))

    def reset(self) -> None:
        """Return the remembered controller settings to their defaults."""
        self.entry_mode = _DEFAULT_ENTRY_MODE
        self.display_flags = _DEFAULT_DISPLAY_FLAGS
        self.cursor = 0

    def width(self) -> int:
        return _LINE_WIDTH

    def write(self, data: int, mode: bool) -> None:
        """Remember the last raw byte sent; the drawing is unaffected."""
        self.last_write = (data & 0xFF, bool(mode))

    def create_char(self, position: int, data: Iterable[int]) -> None:
        """Remember a custom glyph; slots beyond 7 are ignored."""
        if 0 <= position <= 7:
            self.glyphs[position] = tuple(data)

    def return_home(self) -> None:
        """Move the remembered cursor back to the start."""
        self.cursor = 0

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _render(self) -> str:
        line_one = replace_custom_characters(self.line1).rjust(self.line_width)
        line_two = replace_custom_characters(self.line2).rjust(self.line_width)

        uc_top, uc_left, uc_right, uc_bottom = "\u2581", "\u2588", "\u2588", "\u2594"
        top = uc_top * 18
        bottom = uc_bottom * 18

        bold_white_black = (_FG_HI_WHITE, _BG_BLACK, _BOLD)
        white_green = (_FG_HI_WHITE, _BG_GREEN)
        black_green = (_FG_BLACK, _BG_GREEN)
        yellow_green = (_FG_YELLOW, _BG_GREEN)
        white_blue = (_BG_BLUE, _FG_HI_WHITE)

        line_one = _paint(white_blue, line_one)
        line_two = _paint(white_blue, line_two)

        empty_pre = _paint(bold_white_black, " " * 7)
        trailing = _paint(bold_white_black, " " * 4)
        pin = _paint(black_green, "\u2981")

        pre_head = (
            empty_pre + pin + _paint(yellow_green, f" {chr(0x2596) * 16} ") + pin + trailing
        )
        head = empty_pre + _paint(white_green, f" {top} ") + trailing
        second = (
            _paint(bold_white_black, " DEBUG ")
            + _paint(white_green, f" {uc_left}")
            + line_one
            + _paint(white_green, f"{uc_right} ")
            + trailing
        )
        third = (
            _paint(bold_white_black, "  LCD\u2122 ")
            + _paint(white_green, f" {uc_left}")
            + line_two
            + _paint(white_green, f"{uc_right} ")
            + trailing
        )
        bottom_line = empty_pre + pin + _paint(white_green, bottom) + pin + trailing
        margin = _paint(bold_white_black, " " * 31)

        rows = [margin, margin, pre_head, head, second, third, bottom_line, margin, margin]
        return "\x1b[2J\n" + "\n".join(rows)

    def update(self) -> None:
        """Append a fresh drawing, starting the file over once it grows large."""
        if self._file is None:
            raise RuntimeError("terminal display is not initialized")
        with self._lock:
            if os.fstat(self._file.fileno()).st_size > _MAX_FILE_SIZE:
                self._file.seek(0)
                self._file.truncate(0)
            self._file.write(self._render().encode("utf-8"))
            self._file.flush()

    def write_line(self, s: str, line: int) -> None:
        if line == LineNumber.LINE1:
            self.line1 = s
        else:
            self.line2 = s
        self.update()