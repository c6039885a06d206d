"""Simulated VGA mode 13h framebuffer, 8x8 font, text drawing and a toy kernel that draws on it."""

__version__ = "0.1.0"
__all__ = ["errors", "font", "kernel", "printing", "vga"]