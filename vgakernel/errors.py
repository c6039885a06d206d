"""Messages shown on screen when the processor raises an exception."""

from __future__ import annotations

from enum import Enum

from .printing import put_string
from .vga import Framebuffer

ERROR_COLOR = 0x28


class Fault(Enum):
    """Processor exceptions the kernel reports, keyed by their message."""

    DIVISION_BY_ZERO = "Division by zero"
    OVERFLOW = "Overflow"
    SEGMENT_NOT_PRESENT = "Segment not present"
    STACK_SEGMENT_FAULT = "Stack-Segment Fault"
    DOUBLE_FAULT = "Double Fault"
    OTHER = "Other error"


def report_fault(fb: Framebuffer, fault: Fault | str) -> None:
    """Write the message for ``fault`` in the top-left corner of the screen."""
    fault = Fault(fault)
    put_string(fb, 0, 0, fault.value, ERROR_COLOR)