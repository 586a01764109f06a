"""Linear-feedback shift register that produces the Simon step sequence."""

from __future__ import annotations

MASK = 0xE2024CAB
_WORD = 0xFFFFFFFF


class Lfsr:
    """A 32-bit Galois LFSR whose low two bits select the next step."""

    def __init__(self, seed: int) -> None:
        self.state = seed & _WORD

    def reseed(self, seed: int) -> None:
        """Restart the register from ``seed``."""
        self.state = seed & _WORD

    def step(self) -> int:
        """Advance the register once and return a step in the range 0-3."""
        bit = self.state & 1
        self.state >>= 1
        if bit:
            self.state ^= MASK
        return self.state & 0b11