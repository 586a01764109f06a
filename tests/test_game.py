import io

import pytest

from simongame.display import DISP_LHS, DISP_OFF, DISP_SEG_G, Display, tone_pattern
from simongame.game import DEFAULT_SEED, SimonGame, State, main
from simongame.high_scores import HighScore
from simongame.lfsr import Lfsr
from simongame.timing import playback_delay

KEYS = "qwer"


def make_game(seed=DEFAULT_SEED, adc=0):
    out = []
    game = SimonGame(seed=seed, write=out.append, potentiometer=lambda: adc)
    return game, out


def expected_steps(seed, count):
    lfsr = Lfsr(seed)
    return [lfsr.step() for _ in range(count)]


def wait_for(game, state, limit=30000):
    for _ in range(limit):
        if game.state is state:
            return
        game.advance(1)
    raise AssertionError(f"never reached {state}")


def test_first_round_plays_first_lfsr_step():
    game, _ = make_game()
    game.advance(1)
    first = expected_steps(DEFAULT_SEED, 1)[0]
    assert game.sequence == [first]
    assert game.state is State.GENERATE
    assert game.buzzer.playing
    assert game.buzzer.tone == first
    left, right = tone_pattern(first)
    assert game.display.left == left | DISP_LHS
    assert game.display.right == right


def test_playback_ends_in_waiting_with_outputs_off():
    game, out = make_game()
    wait_for(game, State.INPUT_WAITING)
    assert not game.buzzer.playing
    assert game.display.right == DISP_OFF
    assert out == []


def test_playback_delay_follows_potentiometer():
    game, _ = make_game(adc=1023)
    game.advance(1)
    assert game.playback_delay == playback_delay(1023)


def test_correct_serial_answer_succeeds_and_extends_sequence():
    game, out = make_game()
    wait_for(game, State.INPUT_WAITING)
    game.receive(KEYS[game.sequence[0]])
    wait_for(game, State.DISPLAY_SUCCESS)
    assert out == ["SUCCESS\n", f"{len(game.sequence)}\n"]
    wait_for(game, State.GENERATE)
    wait_for(game, State.INPUT_WAITING)
    assert game.sequence == expected_steps(DEFAULT_SEED, 2)
    assert game.step_index == 0


def test_correct_button_answer_succeeds():
    game, out = make_game()
    wait_for(game, State.INPUT_WAITING)
    button = game.sequence[0]
    game.press(button)
    wait_for(game, State.INPUT_RECEIVED)
    assert game.buzzer.tone == button
    game.release(button)
    wait_for(game, State.DISPLAY_SUCCESS)
    assert out[0] == "SUCCESS\n"


def test_held_button_keeps_tone_until_released():
    game, _ = make_game()
    wait_for(game, State.INPUT_WAITING)
    button = game.sequence[0]
    game.press(button)
    wait_for(game, State.INPUT_RECEIVED)
    game.advance(2000)
    assert game.state is State.INPUT_RECEIVED
    assert game.buzzer.playing


def test_name_entry_times_out_with_empty_name():
    game, out = make_game()
    wait_for(game, State.INPUT_WAITING)
    game.receive(KEYS[(game.sequence[0] + 1) % 4])
    wait_for(game, State.DISPLAY_SCORE)
    wait_for(game, State.GENERATE)
    assert out[-1] == "Enter name: \n"
    game.advance(6000)
    assert out[-1] == " 1\n"
    assert game.high_scores.entries[0].name == ""


def test_reset_key_restarts_sequence():
    game, _ = make_game()
    wait_for(game, State.INPUT_WAITING)
    game.receive("p")
    assert game.sequence == []
    assert game.score == 1
    assert game.lfsr.state == Lfsr(DEFAULT_SEED).state


def test_seed_entry_changes_next_step():
    game, out = make_game()
    for char in "o12345678":
        game.receive(char)
    game.advance(1)
    assert out == ["Enter 8-character hex SEED:\n", "Seed set to: 0x12345678\n"]
    assert game.sequence == expected_steps(0x12345678, 1)


def test_octave_key_reaches_buzzer():
    game, _ = make_game()
    game.receive("k")
    assert game.buzzer.octave == 1


def test_invalid_button_rejected():
    game, _ = make_game()
    with pytest.raises(ValueError):
        game.press(4)
    with pytest.raises(ValueError):
        game.release(-1)


def test_negative_advance_rejected():
    game, _ = make_game()
    with pytest.raises(ValueError):
        game.advance(-1)


def test_main_stops_at_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--seed", "1"]) == 0


@pytest.mark.parametrize("argv", [["--seed", "xyz"], ["--adc", "70000"]])
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit):
        main(argv)