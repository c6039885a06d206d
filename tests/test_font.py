import pytest

from vgakernel.font import FONT, GLYPH_HEIGHT, glyph


def test_space_is_blank():
    assert glyph(" ") == bytes(8)


def test_capital_a_bitmap():
    assert glyph("A") == bytes((0x0C, 0x1E, 0x33, 0x33, 0x3F, 0x33, 0x33, 0x00))


def test_underscore_bitmap():
    assert glyph("_") == bytes((0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xFF))


def test_code_and_character_agree():
    assert glyph(ord("z")) == glyph("z")


def test_every_glyph_has_eight_rows():
    assert len(FONT) == 128
    assert all(len(glyph(code)) == GLYPH_HEIGHT for code in range(128))


def test_control_characters_are_blank():
    assert all(glyph(code) == bytes(8) for code in range(32))
    assert glyph(127) == bytes(8)


def test_printable_characters_have_pixels():
    blank = [code for code in range(33, 127) if bytes(glyph(code)) == bytes(8)]
    assert blank == []


@pytest.mark.parametrize("bad", [128, -1, "\u00e9"])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        glyph(bad)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        glyph("ab")