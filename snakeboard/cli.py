"""Command that advances a board by one step and prints the result."""

from __future__ import annotations

import os
import sys
from functools import partial
from os import PathLike
from typing import Optional, Sequence, Union

from snakeboard.state import GameState, create_default_state, load_board
from snakeboard.utils import DeterministicRandom, deterministic_food

PathArg = Optional[Union[str, PathLike]]


class UsageError(ValueError):
    """The command line could not be understood."""


class BoardInputError(Exception):
    """The input board file could not be read."""

    def __init__(self, path) -> None:
        super().__init__(f"could not open file: {path}")
        self.path = path


class BoardOutputError(Exception):
    """The output file could not be written."""

    def __init__(self, path) -> None:
        super().__init__(f"could not open file for writing: {path}")
        self.path = path


def parse_args(argv: Sequence[str]) -> tuple[Optional[str], Optional[str]]:
    """Return ``(input path, output path)`` from ``-i`` and ``-o`` options."""
    in_path: Optional[str] = None
    out_path: Optional[str] = None
    args = iter(argv)
    for arg in args:
        if arg in ("-i", "-o"):
            value = next(args, None)
            if value is None:
                raise UsageError(f"option {arg} needs a filename")
            if arg == "-i":
                in_path = value
            else:
                out_path = value
            continue
        raise UsageError(f"unexpected argument: {arg}")
    return in_path, out_path


def run(in_path: PathArg = None, out_path: PathArg = None) -> GameState:
    """Load a board (or the default one), advance it one step and write it out."""
    if in_path is not None:
        try:
            state = load_board(in_path)
        except OSError as exc:
            raise BoardInputError(in_path) from exc
        state.initialize_snakes()
    else:
        state = create_default_state()

    state.update(partial(deterministic_food, rng=DeterministicRandom()))

    if out_path is not None:
        try:
            state.save(out_path)
        except OSError as exc:
            raise BoardOutputError(out_path) from exc
    else:
        state.write(sys.stdout)
    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; returns the process exit status."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "snakeboard"
    if argv is None:
        argv = sys.argv[1:]
    try:
        in_path, out_path = parse_args(argv)
    except UsageError:
        print(f"Usage: {prog} [-i filename] [-o filename]", file=sys.stderr)
        return 1
    try:
        run(in_path, out_path)
    except (BoardInputError, BoardOutputError) as exc:
        print(exc, file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())