"""Demonstrations of the display: a greeting, animations and a GIF."""

from __future__ import annotations

import argparse
import time

from lcd1602.animations import (
    Animation,
    garble_left_simple,
    garble_right_simple,
    no_animation,
    slide_in_left,
    slide_in_right,
    slide_out_left,
    slide_out_right,
)
from lcd1602.gif2lcd import show_gif
from lcd1602.lcd import LCD, LineNumber
from lcd1602.stringutils import center
from lcd1602.synchronized import SynchronizedLCD
from lcd1602.terminal import TerminalLCD

HELLO_SECONDS = 1.0
WIDTH = 16


def demo_animations() -> list[Animation]:
    """One animation of each kind, followed by a closing pair."""
    return [
        no_animation(center("no animation", WIDTH)),
        garble_left_simple(center("garble left", WIDTH)),
        garble_right_simple(center("garble right", WIDTH)),
        slide_in_left(center("slide in left", WIDTH)),
        slide_in_right(center("slide in right", WIDTH)),
        slide_out_left(center("slide out left", WIDTH)),
        slide_out_right(center("slide out right", WIDTH)),
        garble_left_simple(center("thanks for", WIDTH)),
        garble_right_simple("  watching    "),
    ]


def run_animations(lcd: SynchronizedLCD) -> None:
    """Play the demo animations, alternating between the two lines."""
    for index, animation in enumerate(demo_animations()):
        line = LineNumber.LINE1 if index % 2 == 0 else LineNumber.LINE2
        lcd.animate(animation, line).wait()


def run_hello(lcd: SynchronizedLCD) -> None:
    """Show a greeting for a moment, then clear and close the display."""
    lcd.write_lines("Rpi LCD 1602", "hello, world")
    time.sleep(HELLO_SECONDS)
    lcd.clear()
    lcd.close()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lcd1602", description=__doc__)
    parser.add_argument(
        "example", nargs="?", choices=("one", "animations", "gif"), default="one"
    )
    parser.add_argument("--terminal", action="store_true", help="draw into a file")
    parser.add_argument("--directory", help="where the terminal display file goes")
    parser.add_argument("--rs", type=int, default=10)
    parser.add_argument("--enable", type=int, default=9)
    parser.add_argument("--data", type=int, nargs="+", default=[6, 13, 19, 26])
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--gif", default="test.gif", help="GIF file to show")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    if args.terminal:
        display = TerminalLCD(args.directory)
    else:
        try:
            display = LCD(args.rs, args.enable, args.data, args.width)
        except ValueError as exc:
            parser.error(str(exc))

    lcd = SynchronizedLCD(display)
    if args.example == "one":
        run_hello(lcd)
        return 0
    if args.example == "animations":
        run_animations(lcd)
    else:
        lcd.write_lines("Rpi LCD 1602", "hello, world")
        show_gif(args.gif, lcd)
    lcd.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())