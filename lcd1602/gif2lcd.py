"""Show animated GIF frames with the display's eight custom glyphs.

An image is cut into a 4x2 block of 5x8 cells, one per glyph slot.
Rewriting the glyphs often wears the display's CGRAM; use sparingly.
"""

from __future__ import annotations

import time
from typing import Sequence

from PIL import Image, ImageSequence

from lcd1602.lcd import set_custom_characters
from lcd1602.stringutils import center

_BEAM_ITERATIONS = 20
_BEAM_OFFSET = 20
_BEAM_EFFECT = 0.7


def _gray_byte(color: Sequence[int]) -> int:
    r, g, b = color[:3]
    alpha = color[3] if len(color) > 3 else 255
    r16, g16, b16 = (channel * 257 * alpha // 255 for channel in (r, g, b))
    luminance = 0.299 * r16 + 0.587 * g16 + 0.114 * b16
    return int(luminance / 256) & 0xFF


def slice_to_hex(colors: Sequence[Sequence[int]], threshold: int) -> int:
    """Pack up to five pixels into a glyph row; pixel ``i`` sets bit ``i``."""
    result = 0
    limit = threshold & 0xFF
    for index, color in enumerate(colors[:5]):
        if _gray_byte(color) > limit:
            result |= 1 << index
    return result


def _pixel(img: Image.Image, x: int, y: int) -> tuple:
    if 0 <= x < img.width and 0 <= y < img.height:
        return img.getpixel((x, y))
    return (0, 0, 0, 0)


def _as_rgba(img: Image.Image) -> Image.Image:
    return img if img.mode == "RGBA" else img.convert("RGBA")


def px_to_char(img: Image.Image, x_base: int, y_base: int, threshold: int) -> list[int]:
    """Turn the 5x8 cell at ``(x_base, y_base)`` into glyph rows.

    Pixels outside the image count as dark.
    """
    rgba = _as_rgba(img)
    return [
        slice_to_hex(
            [_pixel(rgba, x_base + column, y_base + row) for column in range(4, -1, -1)],
            threshold,
        )
        for row in range(8)
    ]


def chrmap(img: Image.Image, threshold: int) -> list[list[int]]:
    """Cut the top-left 20x16 pixels into eight glyphs, row by row."""
    rgba = _as_rgba(img)
    return [px_to_char(rgba, 5 * x, 8 * y, threshold) for y in range(2) for x in range(4)]


def beam_to_lcd(img: Image.Image, lcd, delay: float) -> None:
    """Fade one frame in over ``delay`` seconds by lowering the threshold."""
    itertime = delay / _BEAM_ITERATIONS
    start = time.monotonic()
    x = 1
    while x <= _BEAM_ITERATIONS:
        preoffset = _BEAM_OFFSET + (255 - _BEAM_OFFSET) // (x + 1)
        threshold = int(preoffset * _BEAM_EFFECT)
        set_custom_characters(lcd.lcd, chrmap(img, threshold))
        if itertime <= 0:
            break
        elapsed = time.monotonic() - start
        while elapsed > itertime:
            x += 1
            elapsed -= itertime
        time.sleep(itertime - elapsed)
        x += 1


def show_gif(source, lcd) -> None:
    """Play the GIF at ``source`` on a synchronized display."""
    with Image.open(source) as gif:
        lcd.write_lines(
            center("|\x00\x01\x02\x03|", 16),
            center("|\x04\x05\x06\x07|", 16),
        )
        for frame in ImageSequence.Iterator(gif):
            duration = frame.info.get("duration", 0) or 0
            beam_to_lcd(frame, lcd, duration / 1000)