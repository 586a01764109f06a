"""Two-digit seven-segment display model and segment patterns."""

from __future__ import annotations

DISP_SEG_B = 0b01101111
DISP_SEG_C = 0b01111011
DISP_SEG_E = 0b01111110
DISP_SEG_F = 0b00111111
DISP_SEG_G = 0b01110111

DISP_BAR_LEFT = DISP_SEG_E & DISP_SEG_F
DISP_BAR_RIGHT = DISP_SEG_B & DISP_SEG_C

DISP_ON = 0b00000000
DISP_OFF = 0b01111111

DISP_LHS = 1 << 7

# Active-low segment patterns for the digits 0-9.
SEGS = (0x08, 0x6B, 0x44, 0x41, 0x23, 0x11, 0x10, 0x4B, 0x00, 0x01)

_TONE_PATTERNS = (
    (DISP_BAR_LEFT, DISP_OFF),
    (DISP_BAR_RIGHT, DISP_OFF),
    (DISP_OFF, DISP_BAR_LEFT),
    (DISP_OFF, DISP_BAR_RIGHT),
)


def find_digits(num: int) -> tuple[int | None, int]:
    """Split ``num`` (0-99) into tens and ones; tens is None below ten."""
    if not 0 <= num <= 99:
        raise ValueError(f"number must be between 0 and 99, got {num}")
    if num < 10:
        return None, num
    return divmod(num, 10)


def tone_pattern(tone: int) -> tuple[int, int]:
    """Return the (left, right) segment patterns lit for ``tone``."""
    if not 0 <= tone < len(_TONE_PATTERNS):
        raise ValueError(f"tone must be between 0 and 3, got {tone}")
    return _TONE_PATTERNS[tone]


class Display:
    """Holds the segment bytes shown on each side of the display."""

    def __init__(self) -> None:
        self.left = DISP_OFF
        self.right = DISP_OFF

    def update(self, left: int, right: int) -> None:
        """Show the given patterns, marking the left byte for the left digit."""
        self.left = (left | DISP_LHS) & 0xFF
        self.right = right & 0xFF

    def off(self) -> None:
        """Blank both digits."""
        self.left = DISP_OFF
        self.right = DISP_OFF

    def show_number(self, num: int) -> None:
        """Load the patterns for ``num`` (0-99), blanking the tens below ten."""
        tens, ones = find_digits(num)
        self.left = DISP_OFF if tens is None else SEGS[tens]
        self.right = SEGS[ones]