# lcd1602

Drive an HD44780-compatible 16x2 character LCD wired to GPIO pins, in
4-bit or 8-bit mode. The package also provides:

- line animations
- a terminal stand-in display for work without hardware
- a GIF frame player that draws with the eight custom characters

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Writing text

```python
from lcd1602.lcd import LCD, LineNumber
from lcd1602.synchronized import SynchronizedLCD

lcd = LCD(rs=10, e=9, data=[6, 13, 19, 26], line_width=16)
display = SynchronizedLCD(lcd)      # runs lcd.initialize()
display.write_lines("Hello", "world")
display.clear()
display.close()
```

`LCD` raises `ValueError` unless it is given exactly four or eight data
pins. It sets every pin as an output when it is constructed. Text passed
to `write_line` or `write_lines` is right-aligned to the line width and
cut to fit. The lines are addressed as `LineNumber.LINE1` and
`LineNumber.LINE2`.

By default the pins are driven through the Linux sysfs GPIO interface by
`SysfsPin`, which writes under `/sys/class/gpio`. You can supply a
different pin implementation through `pin_factory`. It must be a
callable that takes a pin number and returns an object with `output()`,
`high()`, `low()` and `close()` methods. `LCD.close()` calls `close()`
on every pin; for a `SysfsPin` that unexports the pin.

The lower-level controller commands are methods of `LCD`:

- `reset`
- `initialize`
- `return_home`
- `entry_mode_set`
- `display_mode`
- `clear`
- `write`
- `create_char`

## Custom characters

```python
from lcd1602.lcd import set_custom_characters

heart = [0x00, 0x0A, 0x1F, 0x1F, 0x0E, 0x04, 0x00, 0x00]
set_custom_characters(lcd, [heart])   # stored in the last CGRAM slot (7)
display.write_lines("I \x07 LCDs")
```

`set_custom_characters` fills the highest slots, with the last glyph
going into slot 7. `create_char` ignores any slot above 7.

## Text helpers

In `lcd1602.stringutils`:

- `center(s, width)` centers text in a field of `width` characters. When
  the free space is odd, the extra space goes on the left.
- `offset(s, n)` shifts text right (positive `n`) or left (negative `n`)
  and keeps its length, filling the freed cells with spaces.

## Animations

```python
from lcd1602 import animations
from lcd1602.stringutils import center

done = display.animate(animations.slide_in_left(center("hello", 16)), LineNumber.LINE1)
done.wait()
```

`lcd1602.animations` provides these constructors:

- `no_animation`
- `garble_left`, `garble_left_simple`
- `garble_right`, `garble_right_simple`
- `slide_in_left`, `slide_in_left_x`
- `slide_in_right`
- `slide_out_left`
- `slide_out_right`, `slide_out_right_x`

The `_x` variants take a delay in seconds. `garble_left` and
`garble_right` also take an iteration count.

Every animation implements `Animation`, which has four methods:
`set_width`, `content`, `delay` and `done`.

`SynchronizedLCD.animate` plays the animation on a background thread and
holds the line's lock until the animation finishes. It returns a
`threading.Event` that is set after the last frame has been written.

## Without hardware

`lcd1602.terminal.TerminalLCD` has the same methods as `LCD`, but it
drives no pins. `initialize()` does the following:

- creates or empties a file named `LCD` in the chosen directory (the
  current directory by default)
- prints a `tail -f` command for watching that file

Each `write_line` then appends a colored drawing of the 16-character
display to the file. When the file grows past 10000 bytes, it is started
over. In the drawing:

- custom character slots 0 to 7 are shown as subscript digits
- spaces are shown as shaded blocks

Calling `write_line` before `initialize` raises `RuntimeError`.

## GIF frames

`lcd1602.gif2lcd.show_gif(path, display)` plays an animated GIF on a
`SynchronizedLCD`. It writes the eight custom slots in a 4x2 block
across the two lines. For each frame it then cuts the top-left 20x16
pixels into eight 5x8 glyphs and fades them in over the frame's
duration. Pixels outside the image count as dark.

Rewriting the custom characters this often may wear the display's
CGRAM, so use this sparingly.

## Demo

```
lcd1602-demo
```

By default this shows a greeting for one second, then clears the
display. The example is chosen by a positional argument:

```
lcd1602-demo animations
lcd1602-demo gif --gif test.gif
```

These options are available:

- `--rs`, `--enable`, `--data` and `--width` set the wiring. The defaults
  are RS on pin 10, E on pin 9, data on pins 6 13 19 26, and a width
  of 16.
- `--terminal` uses the terminal stand-in instead of GPIO pins.
- `--directory` sets where the stand-in writes its `LCD` file.

## Limitations

- GPIO access goes only through the sysfs interface. There is no
  memory-mapped or character-device GPIO backend, unless you pass your
  own `pin_factory`.
- The terminal stand-in always draws 16 columns. It only records
  controller commands such as `display_mode` or `create_char`; they do
  not change the drawing.