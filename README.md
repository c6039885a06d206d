# vgakernel

A small pure-Python model of a hobby kernel that draws in VGA mode 13h:
a 320×200 screen with one byte (a palette index) per pixel.

## What is in it

- `vgakernel.vga.Framebuffer`: the video memory as one linear `bytearray`
  (`memory`), 320 bytes per row.
  - `pixel(x, y)` returns the colour at a visible pixel and raises
    `IndexError` off screen.
  - `fill_rect(x, y, w, h, color)` fills `h` rows of `w` bytes starting at
    `(x, y)`. Rows are addressed linearly, so a rectangle that runs past the
    right edge carries on at the start of the next row. A colour outside
    0–255 or a negative size raises `ValueError`. A row that falls outside
    video memory raises `IndexError`.
  - `fill_screen(color)` sets every pixel.
  - `rows()` yields each of the 200 rows as 320 bytes, top to bottom.
  - The module constants `WIDTH`, `HEIGHT`, `PITCH`, `DEPTH`, `PIXELWIDTH`
    and `VRAM` describe the mode.
- `vgakernel.font`: `FONT` is the 8×8 bitmap font for the 128 ASCII code
  points. `glyph(letter)` takes a one-character string or an integer code
  and returns the glyph's eight row bytes. Bit `j` of a row lights column
  `j`, counted from the left. Anything outside ASCII raises `ValueError`.
- `vgakernel.printing`:
  - `put_char(fb, x, y, letter, color)` draws only the lit pixels of a
    glyph and leaves the rest unchanged.
  - `put_string(fb, x, y, text, color)` draws characters 8 pixels apart and
    stops at the first NUL character.
- `vgakernel.errors`: the `Fault` enum covers division by zero, overflow,
  segment not present, stack-segment fault, double fault and other errors.
  Each member's value is the message it shows. `report_fault(fb, fault)`
  writes that message at `(0, 0)` in colour `0x28`. It accepts a `Fault` or
  its message string and raises `ValueError` for any other value.
- `vgakernel.kernel`:
  - `make_board(fb)` paints a checkerboard of 10×10 boxes in colours `0x07`
    and `0x17`.
  - `kernel_main(fb)` does the same.
  - `handle_pic(fb)` prints `PIC` at `(0, 0)` in colour `0x0a`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from vgakernel.vga import Framebuffer
from vgakernel.printing import put_string
from vgakernel.errors import Fault, report_fault
from vgakernel.kernel import kernel_main

fb = Framebuffer()
kernel_main(fb)                       # checkerboard of colours 0x07 / 0x17
put_string(fb, 8, 16, "Hello", 0x0f)
report_fault(fb, Fault.DOUBLE_FAULT)  # "Double Fault" at (0, 0)

print(fb.pixel(0, 0))
for row in fb.rows():
    ...                               # each row is 320 colour bytes
```

## What it does not do

Everything happens in memory. Nothing boots, nothing reaches real video
hardware, and no interrupt or exception handler is wired to a processor.
The package does not display or save the framebuffer as an image, and it
has no command-line program. To see the result, read `memory` or `rows()`
and hand the bytes to a tool of your choice.