"""8x8 bitmap font covering the 128 ASCII code points.

Each glyph is eight bytes, one per row from top to bottom. Bit ``j`` of a
row byte set means the pixel in column ``j`` (counted from the left) is lit.
"""

from __future__ import annotations

import operator

GLYPH_WIDTH = 8
GLYPH_HEIGHT = 8

_BLANK = bytes(GLYPH_HEIGHT)

FONT: tuple[bytes, ...] = (
    *([_BLANK] * 32),
    bytes((0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00)),  # space
    bytes((0x18, 0x3C, 0x3C, 0x18, 0x18, 0x00, 0x18, 0x00)),  # !
    bytes((0x36, 0x36, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00)),  # "
    bytes((0x36, 0x36, 0x7F, 0x36, 0x7F, 0x36, 0x36, 0x00)),  # #
    bytes((0x0C, 0x3E, 0x03, 0x1E, 0x30, 0x1F, 0x0C, 0x00)),  # $
    bytes((0x00, 0x63, 0x33, 0x18, 0x0C, 0x66, 0x63, 0x00)),  # %
    bytes((0x1C, 0x36, 0x1C, 0x6E, 0x3B, 0x33, 0x6E, 0x00)),  # &
    bytes((0x06, 0x06, 0x03, 0x00, 0x00, 0x00, 0x00, 0x00)),  # '
    bytes((0x18, 0x0C, 0x06, 0x06, 0x06, 0x0C, 0x18, 0x00)),  # (
    bytes((0x06, 0x0C, 0x18, 0x18, 0x18, 0x0C, 0x06, 0x00)),  # )
    bytes((0x00, 0x66, 0x3C, 0xFF, 0x3C, 0x66, 0x00, 0x00)),  # *
    bytes((0x00, 0x0C, 0x0C, 0x3F, 0x0C, 0x0C, 0x00, 0x00)),  # +
    bytes((0x00, 0x00, 0x00, 0x00, 0x00, 0x0C, 0x0C, 0x06)),  # ,
    bytes((0x00, 0x00, 0x00, 0x3F, 0x00, 0x00, 0x00, 0x00)),  # -
    bytes((0x00, 0x00, 0x00, 0x00, 0x00, 0x0C, 0x0C, 0x00)),  # .
    bytes((0x60, 0x30, 0x18, 0x0C, 0x06, 0x03, 0x01, 0x00)),  # /
    bytes((0x3E, 0x63, 0x73, 0x7B, 0x6F, 0x67, 0x3E, 0x00)),  # 0
    bytes((0x0C, 0x0E, 0x0C, 0x0C, 0x0C, 0x0C, 0x3F, 0x00)),  # 1
    bytes((0x1E, 0x33, 0x30, 0x1C, 0x06, 0x33, 0x3F, 0x00)),  # 2
    bytes((0x1E, 0x33, 0x30, 0x1C, 0x30, 0x33, 0x1E, 0x00)),  # 3
    bytes((0x38, 0x3C, 0x36, 0x33, 0x7F, 0x30, 0x78, 0x00)),  # 4
    bytes((0x3F, 0x03, 0x1F, 0x30, 0x30, 0x33, 0x1E, 0x00)),  # 5
    bytes((0x1C, 0x06, 0x03, 0x1F, 0x33, 0x33, 0x1E, 0x00)),  # 6
    bytes((0x3F, 0x33, 0x30, 0x18, 0x0C, 0x0C, 0x0C, 0x00)),  # 7
    bytes((0x1E, 0x33, 0x33, 0x1E, 0x33, 0x33, 0x1E, 0x00)),  # 8
    bytes((0x1E, 0x33, 0x33, 0x3E, 0x30, 0x18, 0x0E, 0x00)),  # 9
    bytes((0x00, 0x0C, 0x0C, 0x00, 0x00, 0x0C, 0x0C, 0x00)),  # :
    bytes((0x00, 0x0C, 0x0C, 0x00, 0x00, 0x0C, 0x0C, 0x06)),  # ;
    bytes((0x18, 0x0C, 0x06, 0x03, 0x06, 0x0C, 0x18, 0x00)),  # <
    bytes((0x00, 0x00, 0x3F, 0x00, 0x00, 0x3F, 0x00, 0x00)),  # =
    bytes((0x06, 0x0C, 0x18, 0x30, 0x18, 0x0C, 0x06, 0x00)),  # >
    bytes((0x1E, 0x33, 0x30, 0x18, 0x0C, 0x00, 0x0C, 0x00)),  # ?
    bytes((0x3E, 0x63, 0x7B, 0x7B, 0x7B, 0x03, 0x1E, 0x00)),  # @
    bytes((0x0C, 0x1E, 0x33, 0x33, 0x3F, 0x33, 0x33, 0x00)),  # A
    bytes((0x3F, 0x66, 0x66, 0x3E, 0x66, 0x66, 0x3F, 0x00)),  # B
    bytes((0x3C, 0x66, 0x03, 0x03, 0x03, 0x66, 0x3C, 0x00)),  # C
    bytes((0x1F, 0x36, 0x66, 0x66, 0x66, 0x36, 0x1F, 0x00)),  # D
    bytes((0x7F, 0x46, 0x16, 0x1E, 0x16, 0x46, 0x7F, 0x00)),  # E
    bytes((0x7F, 0x46, 0x16, 0x1E, 0x16, 0x06, 0x0F, 0x00)),  # F
    bytes((0x3C, 0x66, 0x03, 0x03, 0x73, 0x66, 0x7C, 0x00)),  # G
    bytes((0x33, 0x33, 0x33, 0x3F, 0x33, 0x33, 0x33, 0x00)),  # H
    bytes((0x1E, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x1E, 0x00)),  # I
    bytes((0x78, 0x30, 0x30, 0x30, 0x33, 0x33, 0x1E, 0x00)),  # J
    bytes((0x67, 0x66, 0x36, 0x1E, 0x36, 0x66, 0x67, 0x00)),  # K
    bytes((0x0F, 0x06, 0x06, 0x06, 0x46, 0x66, 0x7F, 0x00)),  # L
    bytes((0x63, 0x77, 0x7F, 0x7F, 0x6B, 0x63, 0x63, 0x00)),  # M
    bytes((0x63, 0x67, 0x6F, 0x7B, 0x73, 0x63, 0x63, 0x00)),  # N
    bytes((0x1C, 0x36, 0x63, 0x63, 0x63, 0x36, 0x1C, 0x00)),  # O
    bytes((0x3F, 0x66, 0x66, 0x3E, 0x06, 0x06, 0x0F, 0x00)),  # P
    bytes((0x1E, 0x33, 0x33, 0x33, 0x3B, 0x1E, 0x38, 0x00)),  # Q
    bytes((0x3F, 0x66, 0x66, 0x3E, 0x36, 0x66, 0x67, 0x00)),  # R
    bytes((0x1E, 0x33, 0x07, 0x0E, 0x38, 0x33, 0x1E, 0x00)),  # S
    bytes((0x3F, 0x2D, 0x0C, 0x0C, 0x0C, 0x0C, 0x1E, 0x00)),  # T
    bytes((0x33, 0x33, 0x33, 0x33, 0x33, 0x33, 0x3F, 0x00)),  # U
    bytes((0x33, 0x33, 0x33, 0x33, 0x33, 0x1E, 0x0C, 0x00)),  # V
    bytes((0x63, 0x63, 0x63, 0x6B, 0x7F, 0x77, 0x63, 0x00)),  # W
    bytes((0x63, 0x63, 0x36, 0x1C, 0x1C, 0x36, 0x63, 0x00)),  # X
    bytes((0x33, 0x33, 0x33, 0x1E, 0x0C, 0x0C, 0x1E, 0x00)),  # Y
    bytes((0x7F, 0x63, 0x31, 0x18, 0x4C, 0x66, 0x7F, 0x00)),  # Z
    bytes((0x1E, 0x06, 0x06, 0x06, 0x06, 0x06, 0x1E, 0x00)),  # [
    bytes((0x03, 0x06, 0x0C, 0x18, 0x30, 0x60, 0x40, 0x00)),  # backslash
    bytes((0x1E, 0x18, 0x18, 0x18, 0x18, 0x18, 0x1E, 0x00)),  # ]
    bytes((0x08, 0x1C, 0x36, 0x63, 0x00, 0x00, 0x00, 0x00)),  # ^
    bytes((0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xFF)),  # _
    bytes((0x0C, 0x0C, 0x18, 0x00, 0x00, 0x00, 0x00, 0x00)),  # `
    bytes((0x00, 0x00, 0x1E, 0x30, 0x3E, 0x33, 0x6E, 0x00)),  # a
    bytes((0x07, 0x06, 0x06, 0x3E, 0x66, 0x66, 0x3B, 0x00)),  # b
    bytes((0x00, 0x00, 0x1E, 0x33, 0x03, 0x33, 0x1E, 0x00)),  # c
    bytes((0x38, 0x30, 0x30, 0x3E, 0x33, 0x33, 0x6E, 0x00)),  # d
    bytes((0x00, 0x00, 0x1E, 0x33, 0x3F, 0x03, 0x1E, 0x00)),  # e
    bytes((0x1C, 0x36, 0x06, 0x0F, 0x06, 0x06, 0x0F, 0x00)),  # f
    bytes((0x00, 0x00, 0x6E, 0x33, 0x33, 0x3E, 0x30, 0x1F)),  # g
    bytes((0x07, 0x06, 0x36, 0x6E, 0x66, 0x66, 0x67, 0x00)),  # h
    bytes((0x0C, 0x00, 0x0E, 0x0C, 0x0C, 0x0C, 0x1E, 0x00)),  # i
    bytes((0x30, 0x00, 0x30, 0x30, 0x30, 0x33, 0x33, 0x1E)),  # j
    bytes((0x07, 0x06, 0x66, 0x36, 0x1E, 0x36, 0x67, 0x00)),  # k
    bytes((0x0E, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x1E, 0x00)),  # l
    bytes((0x00, 0x00, 0x33, 0x7F, 0x7F, 0x6B, 0x63, 0x00)),  # m
    bytes((0x00, 0x00, 0x1F, 0x33, 0x33, 0x33, 0x33, 0x00)),  # n
    bytes((0x00, 0x00, 0x1E, 0x33, 0x33, 0x33, 0x1E, 0x00)),  # o
    bytes((0x00, 0x00, 0x3B, 0x66, 0x66, 0x3E, 0x06, 0x0F)),  # p
    bytes((0x00, 0x00, 0x6E, 0x33, 0x33, 0x3E, 0x30, 0x78)),  # q
    bytes((0x00, 0x00, 0x3B, 0x6E, 0x66, 0x06, 0x0F, 0x00)),  # r
    bytes((0x00, 0x00, 0x3E, 0x03, 0x1E, 0x30, 0x1F, 0x00)),  # s
    bytes((0x08, 0x0C, 0x3E, 0x0C, 0x0C, 0x2C, 0x18, 0x00)),  # t
    bytes((0x00, 0x00, 0x33, 0x33, 0x33, 0x33, 0x6E, 0x00)),  # u
    bytes((0x00, 0x00, 0x33, 0x33, 0x33, 0x1E, 0x0C, 0x00)),  # v
    bytes((0x00, 0x00, 0x63, 0x6B, 0x7F, 0x7F, 0x36, 0x00)),  # w
    bytes((0x00, 0x00, 0x63, 0x36, 0x1C, 0x36, 0x63, 0x00)),  # x
    bytes((0x00, 0x00, 0x33, 0x33, 0x33, 0x3E, 0x30, 0x1F)),  # y
    bytes((0x00, 0x00, 0x3F, 0x19, 0x0C, 0x26, 0x3F, 0x00)),  # z
    bytes((0x38, 0x0C, 0x0C, 0x07, 0x0C, 0x0C, 0x38, 0x00)),  # {
    bytes((0x18, 0x18, 0x18, 0x00, 0x18, 0x18, 0x18, 0x00)),  # |
    bytes((0x07, 0x0C, 0x0C, 0x38, 0x0C, 0x0C, 0x07, 0x00)),  # }
    bytes((0x6E, 0x3B, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00)),  # ~
    _BLANK,  # DEL
)


def glyph(letter: str | int) -> bytes:
    """Return the eight row bytes of the glyph for an ASCII character or code."""
    if isinstance(letter, str):
        if len(letter) != 1:
            raise ValueError(f"expected a single character, got {letter!r}")
        code = ord(letter)
    else:
        code = operator.index(letter)
    if not 0 <= code < len(FONT):
        raise ValueError(f"no glyph for code point {code:#x}")
    return FONT[code]