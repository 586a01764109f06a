"""The Simon game: plays a growing sequence and checks the player's answers."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
import time
from collections.abc import Callable, Sequence
from enum import Enum, auto

from simongame.buzzer import Buzzer
from simongame.console import SerialConsole
from simongame.display import DISP_OFF, DISP_ON, DISP_SEG_G, Display, tone_pattern
from simongame.high_scores import HighScoreTable
from simongame.lfsr import Lfsr
from simongame.timing import MIN_DELAY, Debouncer
from simongame.timing import playback_delay as delay_from_adc

DEFAULT_SEED = 0x11548151
MAX_SEQUENCE_LENGTH = 1000
DEBOUNCE_PERIOD_MS = 5
BUTTON_COUNT = 4
_BUTTON_SHIFT = 4
_BUTTON_MASK = 0xF0
_ITERATION_LIMIT = 16


class State(Enum):
    """Phases of a round."""

    GENERATE = auto()
    INPUT_WAITING = auto()
    INPUT_RECEIVED = auto()
    INPUT_EVALUATE = auto()
    DISPLAY_SUCCESS = auto()
    DISPLAY_FAILURE = auto()
    DISPLAY_SCORE = auto()


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class SimonGame:
    """The game loop, driven by simulated milliseconds, buttons and serial input."""

    def __init__(
        self,
        seed: int = DEFAULT_SEED,
        write: Callable[[str], object] | None = None,
        potentiometer: Callable[[], int] | None = None,
    ) -> None:
        self.seed = seed
        self._write = write if write is not None else _write_stdout
        self._potentiometer = potentiometer if potentiometer is not None else (lambda: 0)
        self.lfsr = Lfsr(seed)
        self.buzzer = Buzzer()
        self.display = Display()
        self.high_scores = HighScoreTable()
        self.debouncer = Debouncer()
        self.console = SerialConsole(
            self.buzzer, self.lfsr, self.high_scores, self._write, self._reset
        )
        self.state = State.GENERATE
        self.sequence: list[int] = []
        self.step_index = 0
        self.score = 1
        self.elapsed = 0
        self.playback_delay = MIN_DELAY
        self._pins = 0xFF
        self._clock = 0
        self._buttons = 0xFF
        self._input = 0
        self._released = False
        self._game_over = False
        self._playback: int | None = None
        self._lit = False
        self._handlers = {
            State.GENERATE: self._generate,
            State.INPUT_WAITING: self._input_waiting,
            State.INPUT_RECEIVED: self._input_received,
            State.INPUT_EVALUATE: self._evaluate,
            State.DISPLAY_SUCCESS: self._success,
            State.DISPLAY_FAILURE: self._failure,
            State.DISPLAY_SCORE: self._show_score,
        }
        self._disable_outputs()

    def advance(self, milliseconds: int) -> None:
        """Let ``milliseconds`` of time pass, running the game after each one."""
        if milliseconds < 0:
            raise ValueError(f"cannot advance by a negative time: {milliseconds}")
        for _ in range(milliseconds):
            self._clock += 1
            self.elapsed = (self.elapsed + 1) & 0xFFFF
            if self._clock % DEBOUNCE_PERIOD_MS == 0:
                self.debouncer.sample(self._pins)
            self._settle()

    def press(self, button: int) -> None:
        """Hold down pushbutton ``button`` (0-3)."""
        self._pins &= ~self._button_bit(button) & 0xFF

    def release(self, button: int) -> None:
        """Let go of pushbutton ``button`` (0-3)."""
        self._pins |= self._button_bit(button)

    def receive(self, char: str) -> None:
        """Deliver one character arriving over the serial line."""
        self.console.receive(char)

    def update(self) -> None:
        """Run one pass of the game loop."""
        if self._playback is not None:
            self._continue_playback()
            return
        self.console.check_timeout(self.elapsed)
        previous, self._buttons = self._buttons, self.debouncer.state
        changed = previous ^ self._buttons
        falling = changed & previous
        rising = changed & self._buttons
        self._handlers[self.state](falling, rising)

    @staticmethod
    def _button_bit(button: int) -> int:
        if not 0 <= button < BUTTON_COUNT:
            raise ValueError(f"button must be between 0 and 3, got {button}")
        return 1 << (_BUTTON_SHIFT + button)

    def _settle(self) -> None:
        for _ in range(_ITERATION_LIMIT):
            before = self.state
            self.update()
            if self.state is before:
                break

    def _enable_outputs(self, tone: int) -> None:
        self.display.update(*tone_pattern(tone))
        self.buzzer.on(tone)
        self.elapsed = 0

    def _disable_outputs(self) -> None:
        self.display.update(DISP_OFF, DISP_OFF)
        self.buzzer.off()

    def _reset(self) -> None:
        self.score = 1
        self.elapsed = 0
        self.sequence.clear()
        self.step_index = 0
        self.lfsr.reseed(self.seed)

    def _generate(self, falling: int, rising: int) -> None:
        self._game_over = False
        self.playback_delay = delay_from_adc(self._potentiometer())
        if len(self.sequence) < MAX_SEQUENCE_LENGTH:
            self.sequence.append(self.lfsr.step())
        self._playback = 0
        self._play_current()

    def _play_current(self) -> None:
        if self._playback is None or self._playback >= len(self.sequence):
            self._playback = None
            self.elapsed = 0
            self.state = State.INPUT_WAITING
            return
        self._enable_outputs(self.sequence[self._playback])
        self._lit = True

    def _continue_playback(self) -> None:
        if self.elapsed < self.playback_delay >> 1:
            return
        if self._lit:
            self._disable_outputs()
            self.elapsed = 0
            self._lit = False
        else:
            self._playback += 1
            self._play_current()

    def _input_waiting(self, falling: int, rising: int) -> None:
        self._disable_outputs()
        pressed = falling & _BUTTON_MASK
        if pressed:
            self._input = next(
                button for button in range(BUTTON_COUNT)
                if pressed & (1 << (_BUTTON_SHIFT + button))
            )
            self._released = False
        else:
            serial = self.console.take_input()
            if serial is None:
                return
            self._input = serial
            self._released = True
        self._enable_outputs(self._input)
        self.elapsed = 0
        self.state = State.INPUT_RECEIVED

    def _input_received(self, falling: int, rising: int) -> None:
        if not self._released:
            if rising & _BUTTON_MASK:
                self._released = True
        elif self.elapsed > self.playback_delay >> 1:
            self._disable_outputs()
            self.state = State.INPUT_EVALUATE

    def _evaluate(self, falling: int, rising: int) -> None:
        expected = (
            self.sequence[self.step_index] if self.step_index < len(self.sequence) else None
        )
        self.elapsed = 0
        if self._input != expected:
            self.state = State.DISPLAY_FAILURE
            return
        self.display.update(DISP_ON, DISP_ON)
        self.step_index += 1
        if self.step_index == len(self.sequence):
            self.score = (self.score + 1) & 0xFF
            self.state = State.DISPLAY_SUCCESS
            self.step_index = 0
        else:
            self.state = State.INPUT_WAITING

    def _success(self, falling: int, rising: int) -> None:
        if self.elapsed == 0:
            self._write("SUCCESS\n")
            self._write(f"{self.score - 1}\n")
        if self.elapsed >= self.playback_delay:
            self._disable_outputs()
            self.state = State.GENERATE
            self.elapsed = 0

    def _failure(self, falling: int, rising: int) -> None:
        if self.elapsed <= self.playback_delay:
            self.display.update(DISP_SEG_G, DISP_SEG_G)
            if not self._game_over:
                self._write("GAME OVER\n")
                self._write(f"{self.score}\n")
                self._game_over = True
                self.elapsed = 0
        else:
            self.display.show_number(self.score % 100)
            self.elapsed = 0
            self.state = State.DISPLAY_SCORE

    def _show_score(self, falling: int, rising: int) -> None:
        if self.elapsed <= self.playback_delay:
            self.display.update(self.display.left, self.display.right)
        elif self.elapsed <= 2 * self.playback_delay:
            self.display.off()
        else:
            self.display.off()
            index = self.high_scores.check(self.score)
            if index is not None:
                self.console.request_name(index)
            self.score = 1
            self.elapsed = 0
            self.sequence.clear()
            self.step_index = 0
            self.state = State.GENERATE


def _hex_seed(text: str) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hexadecimal number: {text!r}") from None
    if not 0 <= value <= 0xFFFFFFFF:
        raise argparse.ArgumentTypeError(f"seed must fit in 32 bits: {text!r}")
    return value


def _adc_reading(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if not 0 <= value <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"reading must fit in 16 bits: {text!r}")
    return value


def _read_stdin(chars: queue.Queue[str | None]) -> None:
    while True:
        char = sys.stdin.read(1)
        if not char:
            chars.put(None)
            return
        chars.put(char)


def main(argv: Sequence[str] | None = None) -> int:
    """Play the game in real time, taking serial keys from standard input."""
    parser = argparse.ArgumentParser(prog="simongame", description="Play Simon over a console.")
    parser.add_argument("--seed", type=_hex_seed, default=DEFAULT_SEED,
                        help="initial LFSR seed in hexadecimal")
    parser.add_argument("--adc", type=_adc_reading, default=0,
                        help="potentiometer reading that sets the playback speed")
    args = parser.parse_args(argv)

    game = SimonGame(args.seed, _write_stdout, lambda: args.adc)
    chars: queue.Queue[str | None] = queue.Queue()
    threading.Thread(target=_read_stdin, args=(chars,), daemon=True).start()

    last = time.monotonic()
    shown: int | None = None
    try:
        while True:
            while True:
                try:
                    char = chars.get_nowait()
                except queue.Empty:
                    break
                if char is None:
                    return 0
                game.receive(char)
            milliseconds = int((time.monotonic() - last) * 1000)
            if milliseconds:
                game.advance(milliseconds)
                last += milliseconds / 1000
            tone = game.buzzer.tone if game.buzzer.playing else None
            if tone is not None and tone != shown:
                _write_stdout(f"* {tone + 1}\n")
            shown = tone
            time.sleep(0.001)
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())