"""Kernel entry points: the start-up screen and interrupt handlers."""

from __future__ import annotations

from .printing import put_string
from .vga import HEIGHT, WIDTH, Framebuffer

BOX_SIZE = 10
BASE_COLOR = 0x07
ALTERNATE_STEP = 0x10
PIC_COLOR = 0x0A


def make_board(fb: Framebuffer) -> None:
    """Paint a checkerboard of ``BOX_SIZE`` squares over the whole screen."""
    for y in range(0, HEIGHT, BOX_SIZE):
        for x in range(0, WIDTH, BOX_SIZE):
            parity = (y // BOX_SIZE + x // BOX_SIZE) % 2
            fb.fill_rect(x, y, BOX_SIZE, BOX_SIZE, BASE_COLOR + parity * ALTERNATE_STEP)


def kernel_main(fb: Framebuffer) -> None:
    """Bring up the display."""
    make_board(fb)


def handle_pic(fb: Framebuffer) -> None:
    """Announce an interrupt from the programmable interrupt controller."""
    put_string(fb, 0, 0, "PIC", PIC_COLOR)