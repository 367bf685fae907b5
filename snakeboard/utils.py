"""Food placement, steering and a small deterministic random generator."""

from __future__ import annotations

from typing import Optional

from snakeboard.state import EMPTY, FOOD, GameState

KEY_MOVE_UP = "w"
KEY_MOVE_RIGHT = "d"
KEY_MOVE_DOWN = "s"
KEY_MOVE_LEFT = "a"
KEY_QUIT = "q"

_TAPS = 0x80000057
_MASK = 0xFFFFFFFF

_DIRECTIONS = {
    KEY_MOVE_UP: "W",
    KEY_MOVE_LEFT: "A",
    KEY_MOVE_DOWN: "S",
    KEY_MOVE_RIGHT: "D",
}
_TURN_HEADS = "<v>^"


def det_rand(value: int) -> int:
    """Return the next value of a 32-bit linear-feedback shift register.

    A value of zero is treated as one, so the sequence never gets stuck.
    """
    value &= _MASK
    if value == 0:
        value = 1
    if value & 1:
        return (value >> 1) ^ _TAPS
    return value >> 1


class DeterministicRandom:
    """A stateful wrapper around :func:`det_rand`."""

    def __init__(self, seed: int = 1) -> None:
        self.state = seed & _MASK

    def next(self) -> int:
        """Advance the generator and return its new value."""
        self.state = det_rand(self.state)
        return self.state


_food_rng = DeterministicRandom()
_turn_rng = DeterministicRandom()


def deterministic_food(
    state: GameState, rng: Optional[DeterministicRandom] = None
) -> tuple[int, int]:
    """Place food on a pseudo-randomly chosen empty cell and return its position.

    Raises ``ValueError`` if the board has no empty cell left.
    """
    rng = _food_rng if rng is None else rng
    if not any(c == EMPTY for cells in state.board for c in cells):
        raise ValueError("no empty cell left for food")
    while True:
        row = rng.next() % state.num_rows
        num_cols = state.num_cols(row)
        if num_cols == 0:
            continue
        col = rng.next() % num_cols
        if state[row, col] == EMPTY:
            break
    state[row, col] = FOOD
    return row, col


def corner_food(state: GameState) -> tuple[int, int]:
    """Place food in the top-left cell inside the wall."""
    state[1, 1] = FOOD
    return 1, 1


def redirect_snake(state: GameState, direction: str) -> None:
    """Point the head of the first snake according to a ``wasd`` key.

    Other keys and dead snakes are left alone.
    """
    snake = state.snakes[0]
    if not snake.live:
        return
    head = _DIRECTIONS.get(direction)
    if head is not None:
        state[snake.head_row, snake.head_col] = head


def random_turn(
    state: GameState, snum: int, rng: Optional[DeterministicRandom] = None
) -> None:
    """Turn the head of snake ``snum`` one step left or right, pseudo-randomly."""
    rng = _turn_rng if rng is None else rng
    snake = state.snakes[snum]
    current = state[snake.head_row, snake.head_col]
    index = _TURN_HEADS.find(current)
    if index < 0:
        index = len(_TURN_HEADS)
    index += 1 if rng.next() % 2 == 0 else -1
    state[snake.head_row, snake.head_col] = _TURN_HEADS[index % len(_TURN_HEADS)]