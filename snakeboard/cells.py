"""Classification of board cells and movement along snake segments.

A snake on the board is drawn with these characters:

* tail: ``w a s d`` (pointing up, left, down, right)
* body: ``^ < v >``
* head: ``W A S D``, or ``x`` for a dead snake
"""

TAIL_CHARS = frozenset("wasd")
HEAD_CHARS = frozenset("WASDx")
BODY_CHARS = frozenset("^<v>")
SNAKE_CHARS = TAIL_CHARS | HEAD_CHARS | BODY_CHARS

UNKNOWN = "?"

_BODY_TO_TAIL = {"^": "w", "<": "a", "v": "s", ">": "d"}
_HEAD_TO_BODY = {"W": "^", "A": "<", "S": "v", "D": ">"}

_DOWN = frozenset("vsS")
_UP = frozenset("^wW")
_RIGHT = frozenset(">dD")
_LEFT = frozenset("<aA")


def is_tail(c: str) -> bool:
    """Return True if ``c`` is a snake tail character (``wasd``)."""
    return c in TAIL_CHARS


def is_head(c: str) -> bool:
    """Return True if ``c`` is a snake head character (``WASDx``)."""
    return c in HEAD_CHARS


def is_snake(c: str) -> bool:
    """Return True if ``c`` is any part of a snake (``wasd^<v>WASDx``)."""
    return c in SNAKE_CHARS


def body_to_tail(c: str) -> str:
    """Map a body character (``^<v>``) to its tail character (``wasd``).

    Any other character maps to ``'?'``.
    """
    return _BODY_TO_TAIL.get(c, UNKNOWN)


def head_to_body(c: str) -> str:
    """Map a head character (``WASD``) to its body character (``^<v>``).

    Any other character maps to ``'?'``.
    """
    return _HEAD_TO_BODY.get(c, UNKNOWN)


def get_next_row(cur_row: int, c: str) -> int:
    """Return the row reached by moving one step in the direction of ``c``."""
    if c in _DOWN:
        return cur_row + 1
    if c in _UP:
        return cur_row - 1
    return cur_row


def get_next_col(cur_col: int, c: str) -> int:
    """Return the column reached by moving one step in the direction of ``c``."""
    if c in _RIGHT:
        return cur_col + 1
    if c in _LEFT:
        return cur_col - 1
    return cur_col