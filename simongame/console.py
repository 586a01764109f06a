"""Serial command console: tone keys, octave, reset, seed entry and names."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto

from simongame.buzzer import Buzzer
from simongame.high_scores import MAX_NAME_LENGTH, HighScoreTable
from simongame.lfsr import Lfsr

NAME_TIMEOUT_MS = 5000
SEED_LENGTH = 8

_TONE_KEYS = {
    "1": 0, "q": 0,
    "2": 1, "w": 1,
    "3": 2, "e": 2,
    "4": 3, "r": 3,
}
_OCTAVE_UP_KEYS = frozenset(",k")
_OCTAVE_DOWN_KEYS = frozenset(".l")
_RESET_KEYS = frozenset("0p")
_SEED_KEYS = frozenset("9o")
_HEX_DIGITS = "0123456789abcdef"


class _Mode(Enum):
    COMMAND = auto()
    PAYLOAD = auto()
    NAME = auto()


class SerialConsole:
    """Interprets characters arriving over the serial line."""

    def __init__(
        self,
        buzzer: Buzzer,
        lfsr: Lfsr,
        high_scores: HighScoreTable,
        write: Callable[[str], object],
        on_reset: Callable[[], object],
    ) -> None:
        self.buzzer = buzzer
        self.lfsr = lfsr
        self.high_scores = high_scores
        self._write = write
        self._on_reset = on_reset
        self.mode = _Mode.COMMAND
        self._pending: int | None = None
        self._seed = 0
        self._seed_chars = 0
        self._seed_valid = True
        self._name: list[str] = []
        self._name_index = 0

    def take_input(self) -> int | None:
        """Return the tone chosen over serial since the last call, or None."""
        pending, self._pending = self._pending, None
        return pending

    def receive(self, char: str) -> None:
        """Handle one received character."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if self.mode is _Mode.COMMAND:
            self._command(char)
        elif self.mode is _Mode.PAYLOAD:
            self._payload(char)
        else:
            self._name_char(char)

    def request_name(self, index: int) -> None:
        """Prompt for the name of the high-score entry at ``index``."""
        self.mode = _Mode.NAME
        self._name_index = index
        self._name = []
        self._write("Enter name: \n")
        self._pending = None

    def check_timeout(self, elapsed: int) -> None:
        """Finish name entry with what was typed once ``elapsed`` ms exceed the limit."""
        if self.mode is _Mode.NAME and elapsed > NAME_TIMEOUT_MS:
            self._finish_name(show=True)

    def _command(self, char: str) -> None:
        if char in _TONE_KEYS:
            self._pending = _TONE_KEYS[char]
        elif char in _OCTAVE_UP_KEYS:
            self.buzzer.increase_octave()
        elif char in _OCTAVE_DOWN_KEYS:
            self.buzzer.decrease_octave()
        elif char in _RESET_KEYS:
            self.buzzer.reset_octave()
            self._pending = None
            self._on_reset()
        elif char in _SEED_KEYS:
            self._seed_valid = True
            self._seed_chars = 0
            self._seed = 0
            self.mode = _Mode.PAYLOAD
            self._write("Enter 8-character hex SEED:\n")
        else:
            self._pending = None

    def _payload(self, char: str) -> None:
        digit = _HEX_DIGITS.find(char)
        if digit >= 0:
            self._seed = ((self._seed << 4) | digit) & 0xFFFFFFFF
        else:
            self._seed_valid = False
        self._seed_chars += 1
        if self._seed_chars == SEED_LENGTH:
            if self._seed_valid:
                self.lfsr.reseed(self._seed)
                self._write(f"Seed set to: 0x{self._seed:08x}\n")
            else:
                self._write("Invalid SEED\n")
            self.mode = _Mode.COMMAND

    def _name_char(self, char: str) -> None:
        if char in "\r\n":
            self._finish_name(show=bool(self._name))
        elif len(self._name) < MAX_NAME_LENGTH - 1 and " " <= char <= "~":
            self._name.append(char)

    def _finish_name(self, show: bool) -> None:
        self.high_scores.set_name(self._name_index, "".join(self._name))
        if show:
            for line in self.high_scores.lines():
                self._write(f"{line}\n")
        self.mode = _Mode.COMMAND
        self._name = []