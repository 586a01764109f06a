"""Playback delay from the potentiometer and pushbutton debouncing."""

from __future__ import annotations

MIN_DELAY = 250


def playback_delay(adc_result: int) -> int:
    """Map an ADC reading to a playback delay in milliseconds.

    The scaling is done in 16-bit unsigned arithmetic, wrapping as it does
    on the target.
    """
    if not 0 <= adc_result <= 0xFFFF:
        raise ValueError(f"ADC result must fit in 16 bits, got {adc_result}")
    scaled = (((adc_result + 1) & 0xFFFF) * 1750) & 0xFFFF
    return MIN_DELAY + (scaled >> 8)


class Debouncer:
    """Vertical-counter debouncer for eight active-low inputs.

    A pin's debounced level changes only after three consecutive samples
    disagree with it.
    """

    def __init__(self) -> None:
        self.state = 0xFF
        self._count0 = 0
        self._count1 = 0

    def sample(self, pins: int) -> int:
        """Feed one raw sample of the pins and return the debounced state."""
        edge = (self.state ^ pins) & 0xFF
        self._count1 = (self._count1 ^ self._count0) & edge
        self._count0 = ~self._count0 & edge & 0xFF
        self.state ^= self._count1 & self._count0
        return self.state