# simongame

A Simon memory game. The game plays a growing sequence of four tones, each
with its own pattern on a two-digit seven-segment display model, and you
repeat it back. Each round you get right adds one step. When you get a step
wrong the game reports your score, shows it on the display model, and offers
a place in the five-entry high-score table.

The sequence comes from a 32-bit linear-feedback shift register, so a given
seed always produces the same game.

## Installing

```
pip install .
```

## Playing

```
simongame [--seed HEX] [--adc READING]
```

- `--seed` – the starting seed, in hexadecimal (default `11548151`).
- `--adc` – a potentiometer reading from 0 to 65535 that sets the playback
  speed (default `0`, the fastest).

Keys are read from standard input one character at a time. On a normal
terminal the characters reach the game when you press Enter.

| Key        | Action                                               |
|------------|------------------------------------------------------|
| `1` or `q` | tone 1                                               |
| `2` or `w` | tone 2                                               |
| `3` or `e` | tone 3                                               |
| `4` or `r` | tone 4                                               |
| `,` or `k` | raise the octave (up to two octaves)                 |
| `.` or `l` | lower the octave (down to two octaves)               |
| `0` or `p` | reset the game and the octave; high scores are kept  |
| `9` or `o` | enter a new seed as 8 lower-case hex digits          |

Each time a tone starts, the command prints a line such as `* 3`. After a
seed entry it prints `Seed set to: 0x...` or `Invalid SEED`. A reset returns
to the seed the game was started with.

After a correct round the game prints `SUCCESS` and the number of rounds
completed; after a mistake it prints `GAME OVER` and the score. If the score
beats an entry in the high-score table you are asked to `Enter name:`. Names
are printable characters, up to 20 of them; anything longer is cut off.
Finish with Enter, and the table is printed, one `name score` line per
entry. While a name is being entered, keys go to the name rather than to the
game.

The command stops at the end of standard input or on Ctrl-C.

## What the command does not do

The command does not make sound or draw the seven-segment display: a tone
appears only as its `* N` line, and the display exists only as the
`Display` model inside the game. There are no pushbuttons on the command
line; they are available through `SimonGame.press` and `SimonGame.release`.
High scores are kept in memory only and are lost when the command exits.

## Using it as a library

- `simongame.lfsr.Lfsr` – the sequence generator; `step()` gives the next
  tone (0–3) and `reseed(seed)` restarts it.
- `simongame.buzzer.Buzzer` – tone periods with octave shifting: `on`,
  `off`, `increase_octave`, `decrease_octave`, `reset_octave`.
- `simongame.display.Display` (`update`, `off`, `show_number`),
  `find_digits` and `tone_pattern` – segment patterns.
- `simongame.timing.playback_delay` – the playback delay in milliseconds
  for a potentiometer reading; `Debouncer.sample` – debouncing of eight
  active-low inputs.
- `simongame.high_scores.HighScoreTable` – the high-score table: `check`,
  `set_name`, `lines`.
- `simongame.console.SerialConsole` – the character-at-a-time command
  handler: `receive`, `request_name`, `check_timeout`, `take_input`.
  `check_timeout(elapsed)` ends name entry with what has been typed once
  `elapsed` exceeds 5000 ms.
- `simongame.game.SimonGame` – the whole game, driven by simulated time with
  `advance(milliseconds)`, by the pushbuttons with `press` and `release`, by
  serial characters with `receive`, and one loop pass at a time with
  `update`. Its phase is `SimonGame.state`, a `State`.

## Running the tests

```
pip install ".[test]"
pytest
```