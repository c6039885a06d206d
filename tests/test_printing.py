import pytest

from vgakernel.printing import put_char, put_string
from vgakernel.vga import HEIGHT, PITCH, WIDTH, Framebuffer


def test_underscore_draws_bottom_row_only():
    fb = Framebuffer()
    put_char(fb, 10, 20, "_", 5)
    assert [fb.pixel(10 + i, 27) for i in range(8)] == [5] * 8
    lit = sum(1 for row in fb.rows() for value in row if value)
    assert lit == 8


def test_space_draws_nothing():
    fb = Framebuffer()
    put_char(fb, 0, 0, " ", 5)
    assert bytes(fb.memory) == bytes(PITCH * HEIGHT)


def test_unlit_pixels_keep_background():
    fb = Framebuffer()
    fb.fill_screen(3)
    put_char(fb, 0, 0, "A", 9)
    values = {value for row in fb.rows() for value in row}
    assert values == {3, 9}
    # Last row of 'A' is empty, so the background survives there.
    assert [fb.pixel(i, 7) for i in range(8)] == [3] * 8


def test_leftmost_column_maps_to_lowest_bit():
    fb = Framebuffer()
    # Row 0 of '!' has bits 3 and 4 set.
    put_char(fb, 0, 0, "!", 1)
    assert [fb.pixel(i, 0) for i in range(8)] == [0, 0, 0, 1, 1, 0, 0, 0]


def test_string_is_sequence_of_chars():
    expected = Framebuffer()
    put_char(expected, 4, 6, "H", 2)
    put_char(expected, 12, 6, "i", 2)
    actual = Framebuffer()
    put_string(actual, 4, 6, "Hi", 2)
    assert actual.memory == expected.memory


def test_string_stops_at_nul():
    expected = Framebuffer()
    put_string(expected, 0, 0, "A", 4)
    actual = Framebuffer()
    put_string(actual, 0, 0, "A\0B", 4)
    assert actual.memory == expected.memory


def test_empty_string_draws_nothing():
    fb = Framebuffer()
    put_string(fb, 0, 0, "", 4)
    assert bytes(fb.memory) == bytes(PITCH * HEIGHT)


def test_char_past_right_edge_wraps():
    fb = Framebuffer()
    put_char(fb, WIDTH - 4, 0, "_", 6)
    assert fb.pixel(WIDTH - 1, 7) == 6
    assert fb.pixel(0, 8) == 6
    assert fb.pixel(3, 8) == 6
    assert fb.pixel(4, 8) == 0


def test_char_below_screen_raises():
    with pytest.raises(IndexError):
        put_char(Framebuffer(), 0, HEIGHT - 1, "A", 1)


def test_non_ascii_rejected():
    with pytest.raises(ValueError):
        put_string(Framebuffer(), 0, 0, "caf\u00e9", 1)