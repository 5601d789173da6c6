import threading
import time

import pytest

from lcd1602.animations import Animation, NoAnimation
from lcd1602.lcd import LineNumber
from lcd1602.stringutils import center
from lcd1602.synchronized import SynchronizedLCD


class FakeLCD:
    def __init__(self, width=16):
        self._width = width
        self.initialized = 0
        self.cleared = 0
        self.closed = False
        self.writes = []

    def initialize(self):
        self.initialized += 1

    def clear(self):
        self.cleared += 1

    def close(self):
        self.closed = True

    def width(self):
        return self._width

    def write_line(self, s, line):
        self.writes.append((s, line))


class GatedAnimation(Animation):
    def __init__(self, text, gate):
        self.text = text
        self.gate = gate
        self.finished = False

    def set_width(self, width):
        self.text = self.text.rjust(width)

    def content(self):
        self.finished = True
        return self.text

    def delay(self):
        self.gate.wait(5)

    def done(self):
        return self.finished


def test_constructor_initializes_wrapped_display():
    fake = FakeLCD()
    SynchronizedLCD(fake)
    assert fake.initialized == 1


def test_write_lines_targets_both_lines():
    fake = FakeLCD()
    sync = SynchronizedLCD(fake)
    sync.write_lines("top", "bottom")
    assert fake.writes == [("top", LineNumber.LINE1), ("bottom", LineNumber.LINE2)]


def test_write_lines_ignores_extra_and_handles_none():
    fake = FakeLCD()
    sync = SynchronizedLCD(fake)
    sync.write_lines()
    assert fake.writes == []
    sync.write_lines("a", "b", "c")
    assert [text for text, _ in fake.writes] == ["a", "b"]


def test_delegated_methods():
    fake = FakeLCD(width=20)
    sync = SynchronizedLCD(fake)
    sync.clear()
    sync.close()
    sync.initialize()
    assert sync.width() == 20
    assert fake.cleared == 1
    assert fake.closed is True
    assert fake.initialized == 2


def test_animate_writes_frames_and_signals_done():
    fake = FakeLCD()
    sync = SynchronizedLCD(fake)
    event = sync.animate(NoAnimation("hello"), LineNumber.LINE2)
    assert event.wait(5)
    assert fake.writes == [("hello".rjust(16), LineNumber.LINE2)]


def test_sequential_animations_on_same_line():
    fake = FakeLCD()
    sync = SynchronizedLCD(fake)
    first = center("one", 16)
    second = center("two", 16)
    assert sync.animate(NoAnimation(first), LineNumber.LINE1).wait(5)
    assert sync.animate(NoAnimation(second), LineNumber.LINE1).wait(5)
    assert [text for text, _ in fake.writes] == [first, second]


def test_animation_holds_line_lock_until_finished():
    fake = FakeLCD()
    sync = SynchronizedLCD(fake)
    gate = threading.Event()
    event = sync.animate(GatedAnimation("anim", gate), LineNumber.LINE1)

    writer = threading.Thread(target=sync.write_lines, args=("after",))
    writer.start()
    time.sleep(0.1)
    assert writer.is_alive()

    gate.set()
    writer.join(5)
    assert event.wait(5)
    assert [text for text, _ in fake.writes] == ["anim".rjust(16), "after"]


def test_other_line_not_blocked_by_animation():
    fake = FakeLCD()
    sync = SynchronizedLCD(fake)
    gate = threading.Event()
    event = sync.animate(GatedAnimation("anim", gate), LineNumber.LINE1)
    writer = threading.Thread(target=sync.write_line, args=("free", LineNumber.LINE2))
    writer.start()
    writer.join(5)
    assert not writer.is_alive()
    gate.set()
    assert event.wait(5)
    assert ("free", LineNumber.LINE2) in fake.writes


@pytest.mark.parametrize("line", [LineNumber.LINE1, LineNumber.LINE2])
def test_animate_uses_display_width(line):
    fake = FakeLCD(width=8)
    sync = SynchronizedLCD(fake)
    assert sync.animate(NoAnimation("ab"), line).wait(5)
    assert fake.writes == [("ab".rjust(8), line)]