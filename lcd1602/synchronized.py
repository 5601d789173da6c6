"""Thread-safe access to a display, one lock per line."""

from __future__ import annotations

import threading

from lcd1602.animations import Animation
from lcd1602.lcd import LineNumber


class SynchronizedLCD:
    """Wraps a display so that each line is written by one writer at a time."""

    def __init__(self, lcd) -> None:
        lcd.initialize()
        self.lcd = lcd
        self._locks = {
            LineNumber.LINE1: threading.Lock(),
            LineNumber.LINE2: threading.Lock(),
        }

    def initialize(self) -> None:
        self.lcd.initialize()

    def clear(self) -> None:
        self.lcd.clear()

    def close(self) -> None:
        self.lcd.close()

    def width(self) -> int:
        return self.lcd.width()

    def write_line(self, s: str, line: int) -> None:
        """Write one line directly, without taking the line's lock."""
        self.lcd.write_line(s, line)

    def write_lines(self, *args: str) -> None:
        """Write the first text to line 1 and the second to line 2."""
        for line, text in zip((LineNumber.LINE1, LineNumber.LINE2), args):
            with self._locks[line]:
                self.lcd.write_line(text, line)

    def animate(self, animation: Animation, line: int) -> threading.Event:
        """Play ``animation`` on ``line`` in the background.

        The line stays locked until the animation ends. The returned event
        is set once the last frame has been written.
        """
        finished = threading.Event()
        lock = self._locks.get(line)
        if lock is not None:
            lock.acquire()

        def run() -> None:
            try:
                animation.set_width(self.width())
                while not animation.done():
                    self.write_line(animation.content(), line)
                    animation.delay()
            finally:
                if lock is not None:
                    lock.release()
                finished.set()

        threading.Thread(target=run, daemon=True).start()
        return finished