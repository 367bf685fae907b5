# snakeboard

A snake game played on plain-text boards. A board is a grid of characters:

| Character | Meaning |
|-----------|---------|
| `#` | wall |
| `*` | food |
| ` ` | empty square |
| `w` `a` `s` `d` | snake tail, pointing up / left / down / right |
| `^` `<` `v` `>` | snake body, pointing up / left / down / right |
| `W` `A` `S` `D` | snake head, moving up / left / down / right |
| `x` | head of a dead snake |

Each step, every live snake, in the order its tail appears on the board
(row by row, left to right), moves one square in the direction of its head.
A snake that moves onto food grows by one square and new food is placed on the
board. A snake whose next square is a wall or any part of a snake dies, and
its head becomes `x`.

## Installation

```
pip install .
```

## Stepping a board once

```
snakeboard -i board.snk -o next.snk
```

This reads `board.snk`, finds the snakes on it, advances the game by one step
and writes the resulting board to `next.snk`. Without `-o` the board is printed
to standard output; without `-i` the built-in 20×18 default board (one snake,
one piece of food) is used.

New food is placed on an empty square picked by a deterministic generator that
starts from the same seed on every run, so the same input always gives the same
output.

Exit status: `0` on success, `1` for an unrecognised argument or an option
without its value (a usage line is printed), and `-1` if the input file cannot
be opened or the output file cannot be written (a message is printed to
standard error).

## Playing in the terminal

```
snakeboard-play -i board.snk -d 0.5
```

Snake number 0 (the first tail on the board) is yours: steer it with `w`, `a`,
`s`, `d`. Press `[` to lengthen the delay between steps by 0.1 s and `]` to
shorten it (not below 0.1 s). Every sixth step each other live snake turns
left or right at random. The screen is cleared and the board redrawn after
every step and every key press.

`-d` sets the delay between steps in seconds (default 1; a negative value is a
usage error). Without `-i` the default board is used.

Stepping stops once no snake is alive; the program then returns after the next
key press. End of input also ends the game. There is no quit key; use Ctrl+C
to leave early. Keys are read one at a time without Enter using `termios`, so
playing from a terminal needs a POSIX system; when standard input is not a
terminal, characters are read from it as they are.

## Using the library

```python
from snakeboard.state import create_default_state, load_board
from snakeboard.utils import DeterministicRandom, deterministic_food, corner_food

state = create_default_state()
state.update(corner_food)
print(state.to_text(), end="")

rng = DeterministicRandom(1)
board = load_board("board.snk")
board.initialize_snakes()
board.update(lambda s: deterministic_food(s, rng))
board.save("next.snk")
```

Modules:

- `snakeboard.cells` — character tests and movement: `is_tail`, `is_head`,
  `is_snake`, `body_to_tail`, `head_to_body`, `get_next_row`, `get_next_col`.
- `snakeboard.state` — `Snake` (tail and head positions, `live` flag) and
  `GameState`, whose cells are read and written with `state[row, col]`
  (out-of-range positions raise `IndexError`). `GameState` offers
  `next_square`, `update_head`, `update_tail`, `update`, `find_head`,
  `initialize_snakes`, `num_cols`, `to_text`, `write` and `save`. Boards are
  built with `create_default_state`, `parse_board` (from text) or `load_board`
  (from a file; raises `OSError` if it cannot be opened).
- `snakeboard.utils` — `DeterministicRandom` and `det_rand` (a 32-bit
  linear-feedback shift register), `deterministic_food` (places food on an
  empty square and returns its position; raises `ValueError` if none is left),
  `corner_food` (places food at `(1, 1)`), `redirect_snake` and `random_turn`.
- `snakeboard.cli` — `parse_args`, `run` and `main` behind `snakeboard`.
- `snakeboard.interactive` — `GameInterval`, `InteractiveGame`,
  `read_raw_char`, `parse_args` and `main` behind `snakeboard-play`.

`GameState.update` raises `TypeError` if a snake eats while no food function
was given, and `find_head` raises `ValueError` if a snake's segments lead off
the snake before reaching a head.

## Running the tests

```
pip install .[test]
pytest
```