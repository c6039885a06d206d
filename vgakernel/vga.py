"""Linear 320x200, 8-bit-per-pixel VGA framebuffer."""

from __future__ import annotations

from collections.abc import Iterator

VRAM = 0xA0000
HEIGHT = 200  # pixels
WIDTH = 320  # pixels
PITCH = 320  # bytes per row
DEPTH = 8  # bits per pixel
PIXELWIDTH = 1  # bytes per pixel


def _check_color(color: int) -> int:
    if not 0 <= color <= 0xFF:
        raise ValueError(f"color {color!r} does not fit in one byte")
    return color


class Framebuffer:
    """Video memory of mode 13h held as one linear byte array."""

    def __init__(self) -> None:
        self.memory = bytearray(PITCH * HEIGHT)

    def pixel(self, x: int, y: int) -> int:
        """Return the color index stored at column ``x`` of row ``y``."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        return self.memory[y * PITCH + x]

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill ``h`` rows of ``w`` bytes starting at ``(x, y)``.

        Rows are addressed linearly, so a rectangle running past the right
        edge continues on the following row, as it does in video memory.
        """
        _check_color(color)
        if w < 0 or h < 0:
            raise ValueError("rectangle size must not be negative")
        span = bytes((color,)) * w
        for row in range(h):
            start = (y + row) * PITCH + x
            end = start + w
            if start < 0 or end > len(self.memory):
                raise IndexError(f"row {y + row} of rectangle lies outside video memory")
            self.memory[start:end] = span

    def fill_screen(self, color: int) -> None:
        """Set every visible pixel to ``color``."""
        self.fill_rect(0, 0, WIDTH, HEIGHT, color)

    def rows(self) -> Iterator[bytes]:
        """Yield the visible pixels of each row, top to bottom."""
        for y in range(HEIGHT):
            start = y * PITCH
            yield bytes(self.memory[start:start + WIDTH])