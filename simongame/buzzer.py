"""Tone generator with an adjustable octave."""

from __future__ import annotations

BASE_PERIODS = (4931, 5869, 3696, 9862)
MIN_OCTAVE = -2
MAX_OCTAVE = 2


class Buzzer:
    """Models the PWM buzzer: a period, a compare value and an octave shift."""

    def __init__(self) -> None:
        self.period = 1
        self.compare = 0
        self.octave = 0
        self.tone = 0
        self.playing = False

    def on(self, tone: int) -> None:
        """Start playing ``tone`` (0-3) at the current octave."""
        if not 0 <= tone < len(BASE_PERIODS):
            raise ValueError(f"tone must be between 0 and 3, got {tone}")
        period = BASE_PERIODS[tone]
        if self.octave > 0:
            period >>= self.octave
        else:
            period <<= -self.octave
        self.playing = True
        self.tone = tone
        self.period = period & 0xFFFF
        self.compare = self.period >> 1

    def off(self) -> None:
        """Silence the buzzer."""
        self.compare = 0
        self.playing = False

    def increase_octave(self) -> None:
        """Raise the pitch by one octave, up to the limit."""
        if self.octave < MAX_OCTAVE:
            self.octave += 1
            if self.playing:
                self.on(self.tone)

    def decrease_octave(self) -> None:
        """Lower the pitch by one octave, down to the limit."""
        if self.octave > MIN_OCTAVE:
            self.octave -= 1
            if self.playing:
                self.on(self.tone)

    def reset_octave(self) -> None:
        """Return to the base octave; a playing tone keeps its pitch until replayed."""
        self.octave = 0