"""Game state: the board, the snakes on it and the rules for one step."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from os import PathLike
from typing import Optional, TextIO, Union

from snakeboard.cells import (
    body_to_tail,
    get_next_col,
    get_next_row,
    head_to_body,
    is_head,
    is_snake,
    is_tail,
)

WALL = "#"
FOOD = "*"
EMPTY = " "
DEAD_HEAD = "x"

DEFAULT_BOARD = (
    "####################",
    "#                  #",
    "# d>D    *         #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "#                  #",
    "####################",
)

FoodFunction = Callable[["GameState"], object]


@dataclass
class Snake:
    """Position of a snake's tail and head, and whether it is alive."""

    tail_row: int = 0
    tail_col: int = 0
    head_row: int = 0
    head_col: int = 0
    live: bool = True


@dataclass
class GameState:
    """A board of character cells together with the snakes moving on it."""

    board: list[list[str]] = field(default_factory=list)
    snakes: list[Snake] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: Iterable[str], snakes: Iterable[Snake] = ()) -> "GameState":
        """Build a state from board rows given as strings."""
        return cls([list(row) for row in rows], list(snakes))

    @property
    def num_rows(self) -> int:
        return len(self.board)

    @property
    def num_snakes(self) -> int:
        return len(self.snakes)

    def _check(self, row: int, col: int) -> None:
        if not 0 <= row < len(self.board) or not 0 <= col < len(self.board[row]):
            raise IndexError(f"cell ({row}, {col}) is outside the board")

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        self._check(row, col)
        return self.board[row][col]

    def __setitem__(self, position: tuple[int, int], ch: str) -> None:
        row, col = position
        self._check(row, col)
        self.board[row][col] = ch

    def num_cols(self, row: int) -> int:
        """Number of cells in ``row``, ignoring any trailing newlines."""
        cells = self.board[row]
        count = len(cells)
        while count > 0 and cells[count - 1] == "\n":
            count -= 1
        return count

    def next_square(self, snum: int) -> str:
        """Return the cell the snake ``snum`` will move into next; changes nothing."""
        snake = self.snakes[snum]
        head = self[snake.head_row, snake.head_col]
        return self[get_next_row(snake.head_row, head), get_next_col(snake.head_col, head)]

    def update_head(self, snum: int) -> None:
        """Move the head of snake ``snum`` one step, ignoring what is in the way."""
        snake = self.snakes[snum]
        row, col = snake.head_row, snake.head_col
        head = self[row, col]
        body = head_to_body(head)
        if body == "?":
            return
        new_row, new_col = get_next_row(row, head), get_next_col(col, head)
        self[new_row, new_col] = head
        self[row, col] = body
        snake.head_row, snake.head_col = new_row, new_col

    def update_tail(self, snum: int) -> None:
        """Move the tail of snake ``snum`` one step, blanking the old tail cell."""
        snake = self.snakes[snum]
        row, col = snake.tail_row, snake.tail_col
        tail = self[row, col]
        if is_tail(tail):
            self[row, col] = EMPTY
            row, col = get_next_row(row, tail), get_next_col(col, tail)
        new_tail = body_to_tail(self[row, col])
        if new_tail != "?":
            self[row, col] = new_tail
        snake.tail_row, snake.tail_col = row, col

    def update(self, add_food: Optional[FoodFunction]) -> None:
        """Advance every live snake by one step.

        A snake that reaches food grows and ``add_food`` places new food; a
        snake that runs into a wall or any snake dies and its head becomes ``x``.
        """
        for snum, snake in enumerate(self.snakes):
            if not snake.live:
                continue
            target = self.next_square(snum)
            if target == FOOD:
                self.update_head(snum)
                if add_food is None:
                    raise TypeError("a food function is required when a snake eats")
                add_food(self)
            elif target == EMPTY:
                self.update_head(snum)
                self.update_tail(snum)
            elif target == WALL or is_snake(target):
                snake.live = False
                self[snake.head_row, snake.head_col] = DEAD_HEAD

    def find_head(self, snum: int) -> None:
        """Follow snake ``snum`` from its tail and record where its head is."""
        snake = self.snakes[snum]
        row, col = snake.tail_row, snake.tail_col
        c = self[row, col]
        while not is_head(c):
            if not is_snake(c):
                raise ValueError(f"snake {snum} is broken at ({row}, {col}): {c!r}")
            row, col = get_next_row(row, c), get_next_col(col, c)
            c = self[row, col]
        snake.head_row, snake.head_col = row, col

    def initialize_snakes(self) -> "GameState":
        """Find every snake on the board, in row-major order of their tails."""
        self.snakes = [
            Snake(tail_row=row, tail_col=col, live=True)
            for row, cells in enumerate(self.board)
            for col, c in enumerate(cells)
            if is_tail(c)
        ]
        for snum in range(len(self.snakes)):
            self.find_head(snum)
        return self

    def to_text(self) -> str:
        """Render the board with each row followed by a newline."""
        return "".join("".join(cells) + "\n" for cells in self.board)

    def __str__(self) -> str:
        return self.to_text()

    def write(self, fp: TextIO) -> None:
        """Write the board to an open text stream."""
        fp.write(self.to_text())

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the board to the file at ``path``."""
        with open(path, "w", encoding="utf-8", newline="") as fp:
            self.write(fp)


def create_default_state() -> GameState:
    """Return the default 20x18 board with one snake and one piece of food."""
    return GameState.from_rows(DEFAULT_BOARD, [Snake(2, 2, 2, 4, True)])


def parse_board(text: str) -> GameState:
    """Build a state from board text; snakes are not located yet."""
    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return GameState.from_rows(rows)


def load_board(path: Union[str, PathLike]) -> GameState:
    """Read a board from a file; raises ``OSError`` if it cannot be opened."""
    with open(path, encoding="utf-8", newline="") as fp:
        return parse_board(fp.read())