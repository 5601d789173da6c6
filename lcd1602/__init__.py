"""Drive HD44780-compatible character LCDs, with animations, a terminal stand-in and a GIF player."""

__version__ = "0.1.0"