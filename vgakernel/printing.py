"""Text drawing onto the framebuffer with the built-in 8x8 font."""

from __future__ import annotations

from .font import GLYPH_WIDTH, glyph
from .vga import Framebuffer


def put_char(fb: Framebuffer, x: int, y: int, letter: str, color: int) -> None:
    """Draw the lit pixels of ``letter`` with its top-left corner at ``(x, y)``.

    Unlit pixels of the glyph are left as they were.
    """
    for row, bits in enumerate(glyph(letter)):
        for column in range(GLYPH_WIDTH):
            if bits & (1 << column):
                fb.fill_rect(x + column, y + row, 1, 1, color)


def put_string(fb: Framebuffer, x: int, y: int, text: str, color: int) -> None:
    """Draw ``text`` left to right, one glyph width per character.

    Drawing stops at the first NUL character, if any.
    """
    text = text.split("\0", 1)[0]
    for offset, letter in enumerate(text):
        put_char(fb, x + offset * GLYPH_WIDTH, y, letter, color)