"""Driver for HD44780-compatible 16x2 character displays on GPIO pins."""

from __future__ import annotations

import threading
import time
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterable, Protocol, Sequence

RS_DATA = True
RS_INSTRUCTION = False

ENABLE_DELAY = 1e-6
EXECUTION_TIME_DEFAULT = 40e-6
EXECUTION_TIME_RETURN_HOME = 1520e-6
INITIALIZE_DELAY = 10e-3


class LineNumber(IntEnum):
    """DDRAM start address of each display line."""

    LINE1 = 0x80
    LINE2 = 0xC0


class Pin(Protocol):
    """A digital output pin."""

    def output(self) -> None: ...

    def high(self) -> None: ...

    def low(self) -> None: ...

    def close(self) -> None: ...


class SysfsPin:
    """A GPIO pin driven through the sysfs GPIO interface."""

    def __init__(self, number: int, root: str | Path = "/sys/class/gpio") -> None:
        self.number = number
        self.root = Path(root)

    @property
    def _directory(self) -> Path:
        return self.root / f"gpio{self.number}"

    def output(self) -> None:
        """Export the pin if needed and configure it as an output."""
        if not self._directory.exists():
            (self.root / "export").write_text(str(self.number))
        (self._directory / "direction").write_text("out")

    def high(self) -> None:
        (self._directory / "value").write_text("1")

    def low(self) -> None:
        (self._directory / "value").write_text("0")

    def close(self) -> None:
        """Release the pin."""
        (self.root / "unexport").write_text(str(self.number))


class LCD:
    """A character display wired in 4-bit or 8-bit mode."""

    def __init__(
        self,
        rs: int,
        e: int,
        data: Sequence[int],
        line_width: int,
        pin_factory: Callable[[int], Pin] = SysfsPin,
    ) -> None:
        if len(data) not in (4, 8):
            raise ValueError("LCD requires four or eight datapins")
        self.rs = pin_factory(rs)
        self.e = pin_factory(e)
        self.data_pins = [pin_factory(number) for number in data]
        self.line_width = line_width
        self._write_lock = threading.Lock()
        self._line_lock = threading.Lock()
        for pin in (self.rs, self.e, *self.data_pins):
            pin.output()

    def width(self) -> int:
        return self.line_width

    def close(self) -> None:
        """Release every pin used by the display."""
        for pin in (self.rs, self.e, *self.data_pins):
            pin.close()

    def initialize(self) -> None:
        """Run the power-up sequence and clear the display."""
        self.reset()
        self.entry_mode_set(True, False)
        self.display_mode(True, False, False)
        self.write(0x28, RS_INSTRUCTION)
        self.return_home()
        self.clear()
        time.sleep(INITIALIZE_DELAY)

    def return_home(self) -> None:
        self.write(0x02, RS_INSTRUCTION)
        time.sleep(EXECUTION_TIME_RETURN_HOME)

    def entry_mode_set(self, increment: bool, shift: bool) -> None:
        instruction = 0x04
        if increment:
            instruction |= 0x02
        if shift:
            instruction |= 0x01
        self.write(instruction, RS_INSTRUCTION)

    def display_mode(self, display: bool, cursor: bool, blink: bool) -> None:
        instruction = 0x08
        if display:
            instruction |= 0x04
        if cursor:
            instruction |= 0x02
        if blink:
            instruction |= 0x01
        self.write(instruction, RS_INSTRUCTION)

    def clear(self) -> None:
        self.write(0x01, RS_INSTRUCTION)

    def reset(self) -> None:
        self.write(0x33, RS_INSTRUCTION)
        time.sleep(EXECUTION_TIME_DEFAULT)
        self.write(0x32, RS_INSTRUCTION)
        time.sleep(EXECUTION_TIME_DEFAULT)

    def write_line(self, s: str, line: int) -> None:
        """Write one right-aligned line, cut to the display width."""
        with self._line_lock:
            text = s.rjust(self.line_width)[: self.line_width]
            self.write(int(line), RS_INSTRUCTION)
            for char in text:
                self.write(ord(char) & 0xFF, RS_DATA)

    def write(self, data: int, mode: bool) -> None:
        """Send one byte as an instruction or as character data."""
        with self._write_lock:
            if mode:
                self.rs.high()
            else:
                self.rs.low()
            for pin in self.data_pins:
                pin.low()
            if len(self.data_pins) == 4:
                self._set_bits(data, 0x10)
                self._enable(EXECUTION_TIME_DEFAULT)
            self._set_bits(data, 0x01)
            self._enable(EXECUTION_TIME_DEFAULT)

    def create_char(self, position: int, data: Iterable[int]) -> None:
        """Store a custom glyph in CGRAM slot ``position`` (0-7)."""
        if position > 7:
            return
        self.write(0x40 | (position << 3), RS_INSTRUCTION)
        for row in data:
            self.write(row, RS_DATA)

    def _set_bits(self, data: int, base: int) -> None:
        for index, pin in enumerate(self.data_pins):
            mask = (base << index) & 0xFF
            if data & mask == mask:
                pin.high()
            else:
                pin.low()

    def _enable(self, execution_time: float) -> None:
        time.sleep(ENABLE_DELAY)
        self.e.high()
        time.sleep(ENABLE_DELAY)
        self.e.low()
        time.sleep(execution_time)


def set_custom_characters(lcd, characters: Sequence[Sequence[int]]) -> None:
    """Load glyphs into the highest CGRAM slots, last glyph in slot 7."""
    count = len(characters)
    for index, character in enumerate(characters):
        position = 8 - count + index
        if position < 0:
            continue
        lcd.create_char(position, character)