"""Text animations that produce successive frames for one display line."""

from __future__ import annotations

import random
import string
import time
from abc import ABC, abstractmethod
from typing import Callable

from lcd1602.stringutils import offset

_LETTERS = string.ascii_lowercase + string.ascii_uppercase


def _random_letters(n: int) -> str:
    return "".join(random.choice(_LETTERS) for _ in range(n))


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Animation(ABC):
    """A sequence of frames shown on one line."""

    @abstractmethod
    def set_width(self, width: int) -> None:
        """Fit the animation to a line of ``width`` cells."""

    @abstractmethod
    def content(self) -> str:
        """Advance one step and return the frame to show."""

    @abstractmethod
    def delay(self) -> None:
        """Wait between two frames."""

    @abstractmethod
    def done(self) -> bool:
        """Whether the last frame has been produced."""


class GarbleAnimation(Animation):
    """Random letters that resolve into the text from one side."""

    def __init__(
        self, source: str, iters: int = 8, delay: float = 0.01, reverse: bool = False
    ) -> None:
        self.source = source
        self.maximum = iters * len(source)
        self.delay_seconds = delay
        self.reverse = reverse
        self.current = 0

    def set_width(self, width: int) -> None:
        old = self.source
        self.source = old.rjust(width)
        self.maximum = (self.maximum // len(old)) * width

    def content(self) -> str:
        self.current += 1
        s = self.source
        revealed = self.current // (self.maximum // len(s))
        if self.reverse:
            return _random_letters(len(s) - revealed) + s[len(s) - revealed :]
        return s[:revealed] + _random_letters(len(s) - revealed)

    def delay(self) -> None:
        time.sleep(self.delay_seconds)

    def done(self) -> bool:
        return self.current >= self.maximum


class NoAnimation(Animation):
    """Shows the text once, unchanged."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._done = False

    def set_width(self, width: int) -> None:
        self.source = self.source.rjust(width)

    def content(self) -> str:
        self._done = True
        return self.source

    def delay(self) -> None:
        pass

    def done(self) -> bool:
        return self._done


class SlideAnimation(Animation):
    """Moves the text across the line one cell per frame."""

    def __init__(
        self,
        source: str,
        current: int,
        maximum: int,
        shift: Callable[[str, int], str],
        delay: float = 0.02,
    ) -> None:
        self.source = source
        self.current = current
        self.maximum = maximum
        self.shift = shift
        self.delay_seconds = delay

    def set_width(self, width: int) -> None:
        old = self.source
        self.source = old.rjust(width)
        self.current = _trunc_div(self.current, len(old)) * width
        self.maximum = _trunc_div(self.maximum, len(old)) * width

    def content(self) -> str:
        self.current += 1
        return self.shift(self.source, self.current)

    def delay(self) -> None:
        time.sleep(self.delay_seconds)

    def done(self) -> bool:
        return self.current >= self.maximum


def garble_left(s: str, iters: int, delay: float) -> Animation:
    return GarbleAnimation(s, iters, delay, reverse=False)


def garble_left_simple(s: str) -> Animation:
    return garble_left(s, 8, 0.01)


def garble_right(s: str, iters: int, delay: float) -> Animation:
    return GarbleAnimation(s, iters, delay, reverse=True)


def garble_right_simple(s: str) -> Animation:
    return garble_right(s, 8, 0.01)


def no_animation(s: str) -> Animation:
    return NoAnimation(s)


def _shift_right_of(s: str, current: int) -> str:
    return offset(s, current)


def _shift_in_right(s: str, current: int) -> str:
    return offset(s, len(s) - current)


def _shift_left_of(s: str, current: int) -> str:
    return offset(s, -current)


def slide_in_left(s: str) -> Animation:
    return slide_in_left_x(s, 0.02)


def slide_in_left_x(s: str, delay: float) -> Animation:
    return SlideAnimation(s, -len(s), 0, _shift_right_of, delay)


def slide_in_right(s: str) -> Animation:
    return SlideAnimation(s, 0, len(s), _shift_in_right, 0.02)


def slide_out_left(s: str) -> Animation:
    return SlideAnimation(s, 0, len(s), _shift_left_of, 0.02)


def slide_out_right(s: str) -> Animation:
    return slide_out_right_x(s, 0.02)


def slide_out_right_x(s: str, delay: float) -> Animation:
    return SlideAnimation(s, 0, len(s), _shift_right_of, delay)