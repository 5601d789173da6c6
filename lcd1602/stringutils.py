"""Helpers for laying out text on fixed-width display lines."""

from __future__ import annotations


def center(s: str, width: int) -> str:
    """Center ``s`` in a field of ``width`` characters.

    Extra padding goes to the left when the free space is odd. Strings
    leaving fewer than two free cells are returned unchanged.
    """
    rem = width - len(s)
    if rem > 1:
        right = s.rjust(len(s) + (rem - rem // 2))
        s = right.ljust(width)
    return s


def offset(s: str, offset: int) -> str:
    """Shift ``s`` by ``offset`` cells while keeping its length.

    A positive offset moves the text right and a negative one moves it
    left. The cells that are freed become spaces. An offset as large as
    the string itself yields only spaces.
    """
    if offset == 0:
        return s
    length = len(s)
    if offset >= length or offset <= -length:
        return " " * length
    if offset < 0:
        shift = -offset
        return s[shift:] + " " * shift
    return " " * offset + s[: length - offset]