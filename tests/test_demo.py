from unittest.mock import patch

import pytest
from PIL import Image

from lcd1602.animations import NoAnimation
from lcd1602.demo import demo_animations, main, run_animations, run_hello
from lcd1602.lcd import LineNumber
from lcd1602.stringutils import center
from lcd1602.synchronized import SynchronizedLCD


class FakeLCD:
    def __init__(self):
        self.writes = []
        self.cleared = 0
        self.closed = False

    def initialize(self):
        pass

    def clear(self):
        self.cleared += 1

    def close(self):
        self.closed = True

    def width(self):
        return 16

    def write_line(self, s, line):
        self.writes.append((s, line))

    def create_char(self, position, data):
        pass


def test_demo_animations_list():
    animations = demo_animations()
    assert len(animations) == 9
    first = animations[0]
    assert isinstance(first, NoAnimation)
    first.set_width(16)
    assert first.content() == center("no animation", 16)


def test_run_animations_alternates_lines():
    fake = FakeLCD()
    with patch("lcd1602.demo.time.sleep"):
        run_animations(SynchronizedLCD(fake))
    assert fake.writes[0] == (center("no animation", 16), LineNumber.LINE1)
    assert (center("garble left", 16), LineNumber.LINE2) in fake.writes
    assert (center("garble right", 16), LineNumber.LINE1) in fake.writes
    assert fake.writes[-1][1] == LineNumber.LINE1
    assert all(len(text) == 16 for text, _ in fake.writes)


def test_run_hello_clears_and_closes():
    fake = FakeLCD()
    with patch("lcd1602.demo.time.sleep") as sleep:
        run_hello(SynchronizedLCD(fake))
    assert [line for _, line in fake.writes] == [LineNumber.LINE1, LineNumber.LINE2]
    assert fake.cleared == 1
    assert fake.closed is True
    sleep.assert_called_once()


def test_main_one_in_terminal(tmp_path, capsys):
    with patch("lcd1602.demo.time.sleep"):
        assert main(["--terminal", "--directory", str(tmp_path), "one"]) == 0
    assert (tmp_path / "LCD").exists()
    assert "tail -f" in capsys.readouterr().out


def test_main_gif_in_terminal(tmp_path):
    gif = tmp_path / "frame.gif"
    Image.new("RGB", (20, 16), (255, 255, 255)).save(gif, duration=100)
    with patch("lcd1602.demo.time.sleep"):
        assert main(["--terminal", "--directory", str(tmp_path), "--gif", str(gif), "gif"]) == 0
    text = (tmp_path / "LCD").read_text(encoding="utf-8")
    assert "\u2591" in text


def test_main_rejects_bad_pin_count():
    with pytest.raises(SystemExit):
        main(["--data", "1", "2", "3", "one"])