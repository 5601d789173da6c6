import pytest

from lcd1602.stringutils import center, offset


@pytest.mark.parametrize("s,width", [("ab", 6), ("hello", 16), ("x", 16), ("abc", 8)])
def test_center_fills_width_and_keeps_text(s, width):
    result = center(s, width)
    assert len(result) == width
    assert result.strip() == s


@pytest.mark.parametrize("s,width", [("abc", 8), ("ab", 7), ("hello", 16)])
def test_center_puts_extra_space_left(s, width):
    result = center(s, width)
    left = len(result) - len(result.lstrip())
    right = len(result) - len(result.rstrip())
    assert left - right in (0, 1)


@pytest.mark.parametrize("s,width", [("abcd", 5), ("abcd", 4), ("abcdef", 3)])
def test_center_leaves_tight_strings(s, width):
    assert center(s, width) == s


def test_center_example():
    assert center("ab", 6) == "  ab  "


def test_offset_zero_is_identity():
    assert offset("hello", 0) == "hello"


@pytest.mark.parametrize("shift", [5, 9, -5, -12])
def test_offset_out_of_range_is_blank(shift):
    assert offset("hello", shift) == " " * len("hello")


@pytest.mark.parametrize("shift", range(-4, 5))
def test_offset_keeps_length(shift):
    assert len(offset("hello", shift)) == len("hello")


def test_offset_right_example():
    assert offset("hello", 2) == "  hel"


def test_offset_left_example():
    assert offset("hello", -2) == "llo  "