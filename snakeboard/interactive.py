"""Play the board in a terminal: the player steers, other snakes wander."""

from __future__ import annotations

import os
import re
import sys
import threading
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional, Sequence, TextIO

from snakeboard.cli import UsageError
from snakeboard.state import GameState, create_default_state, load_board
from snakeboard.utils import (
    DeterministicRandom,
    deterministic_food,
    random_turn,
    redirect_snake,
)

_NANOS = 1_000_000_000
_STEP = 100_000_000
_CLEAR_SCREEN = "\033[2J\033[H"
_TURN_EVERY = 6
_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)")


@dataclass
class GameInterval:
    """Delay between game steps, kept as whole seconds and nanoseconds."""

    sec: int = 1
    nsec: int = 0

    @classmethod
    def from_seconds(cls, delay: float) -> "GameInterval":
        if delay < 0:
            raise ValueError("delay must not be negative")
        return cls(int(delay), int(delay * _NANOS) % _NANOS)

    @property
    def seconds(self) -> float:
        return max(0.0, self.sec + self.nsec / _NANOS)

    def slower(self) -> None:
        """Lengthen the delay by a tenth of a second."""
        if self.nsec >= 900_000_000:
            self.sec += 1
            self.nsec = 0
        else:
            self.nsec += _STEP

    def faster(self) -> None:
        """Shorten the delay by a tenth of a second, never below a tenth."""
        if self.nsec == 0:
            self.sec -= 1
            self.nsec = 900_000_000
        elif self.sec > 0 or self.nsec > _STEP:
            self.nsec -= _STEP


class InteractiveGame:
    """A running game shared between the step loop and the key loop."""

    def __init__(
        self,
        state: GameState,
        interval: Optional[GameInterval] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.state = state
        self.interval = interval if interval is not None else GameInterval()
        self.output = output if output is not None else sys.stdout
        self.food_rng = DeterministicRandom()
        self.turn_rng = DeterministicRandom()
        self.finished = threading.Event()
        self._lock = threading.RLock()

    def handle_key(self, key: str) -> None:
        """``[`` slows the game, ``]`` speeds it up, ``wasd`` steers the player."""
        with self._lock:
            if key == "[":
                self.interval.slower()
            elif key == "]":
                self.interval.faster()
            else:
                redirect_snake(self.state, key)
            self.render()

    def step(self, timestep: int) -> int:
        """Advance the game once; return how many snakes were alive before it."""
        with self._lock:
            live = 0
            for snum, snake in enumerate(self.state.snakes):
                if snake.live:
                    live += 1
                    if snum >= 1 and timestep % _TURN_EVERY == 0:
                        random_turn(self.state, snum, self.turn_rng)
            self.state.update(partial(deterministic_food, rng=self.food_rng))
            return live

    def render(self) -> None:
        """Clear the screen and draw the board."""
        with self._lock:
            self.output.write(_CLEAR_SCREEN)
            self.state.write(self.output)
            self.output.flush()

    def game_loop(self) -> None:
        """Step and draw the game until no snake is alive or it is stopped."""
        timestep = 0
        self.render()
        while not self.finished.wait(self.interval.seconds):
            live = self.step(timestep)
            self.render()
            timestep += 1
            if live == 0:
                break
        self.finished.set()

    def input_loop(self, read_key: Callable[[], str]) -> None:
        """Feed keys to the game until input ends or the game is over."""
        while not self.finished.is_set():
            key = read_key()
            if not key:
                break
            self.handle_key(key)


def read_raw_char(stream: Optional[TextIO] = None) -> str:
    """Read one character without waiting for Enter; ``''`` at end of input."""
    stream = sys.stdin if stream is None else stream
    if not stream.isatty():
        return stream.read(1)

    import termios

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return data.decode("latin-1")


def _parse_delay(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(0)) if match else 0.0


def parse_args(argv: Sequence[str]) -> tuple[Optional[str], GameInterval]:
    """Return ``(input path, interval)`` from ``-i`` and ``-d`` options."""
    in_path: Optional[str] = None
    interval = GameInterval()
    args = iter(argv)
    for arg in args:
        if arg in ("-i", "-d"):
            value = next(args, None)
            if value is None:
                raise UsageError(f"option {arg} needs a value")
            if arg == "-i":
                in_path = value
            else:
                try:
                    interval = GameInterval.from_seconds(_parse_delay(value))
                except ValueError as exc:
                    raise UsageError(str(exc)) from exc
            continue
        raise UsageError(f"unexpected argument: {arg}")
    return in_path, interval


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the interactive game; returns the exit status."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "snakeboard"
    if argv is None:
        argv = sys.argv[1:]
    try:
        in_path, interval = parse_args(argv)
    except UsageError:
        print(f"Usage: {prog} [-i filename] [-d delay]", file=sys.stderr)
        return 1

    if in_path is not None:
        try:
            state = load_board(in_path)
        except OSError:
            print(f"could not open file: {in_path}", file=sys.stderr)
            return -1
        state.initialize_snakes()
    else:
        state = create_default_state()

    game = InteractiveGame(state, interval, sys.stdout)
    thread = threading.Thread(target=game.game_loop, daemon=True)
    thread.start()
    game.input_loop(read_raw_char)
    game.finished.set()
    return 0


if __name__ == "__main__":
    sys.exit(main())