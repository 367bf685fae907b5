import pytest

from snakeboard.cells import (
    body_to_tail,
    get_next_col,
    get_next_row,
    head_to_body,
    is_head,
    is_snake,
    is_tail,
)


@pytest.mark.parametrize("c", ["w", "a", "s", "d"])
def test_is_tail_true(c):
    assert is_tail(c) is True


@pytest.mark.parametrize("c", ["W", "^", "x", " ", "#", "*"])
def test_is_tail_false(c):
    assert is_tail(c) is False


@pytest.mark.parametrize("c", ["W", "A", "S", "D", "x"])
def test_is_head_true(c):
    assert is_head(c) is True


@pytest.mark.parametrize("c", ["w", "^", ">", " ", "#"])
def test_is_head_false(c):
    assert is_head(c) is False


@pytest.mark.parametrize("c", list("wasd^<v>WASDx"))
def test_is_snake_true(c):
    assert is_snake(c) is True


@pytest.mark.parametrize("c", ["#", "*", " ", "X", "q"])
def test_is_snake_false(c):
    assert is_snake(c) is False


@pytest.mark.parametrize(
    "body, tail", [("^", "w"), ("<", "a"), ("v", "s"), (">", "d")]
)
def test_body_to_tail(body, tail):
    assert body_to_tail(body) == tail


def test_body_to_tail_unknown():
    assert body_to_tail("W") == "?"
    assert body_to_tail(" ") == "?"


@pytest.mark.parametrize(
    "head, body", [("W", "^"), ("A", "<"), ("S", "v"), ("D", ">")]
)
def test_head_to_body(head, body):
    assert head_to_body(head) == body


def test_head_to_body_unknown():
    assert head_to_body("x") == "?"
    assert head_to_body("w") == "?"


@pytest.mark.parametrize(
    "c, expected",
    [("v", 6), ("s", 6), ("S", 6), ("^", 4), ("w", 4), ("W", 4), ("a", 5), ("D", 5)],
)
def test_get_next_row(c, expected):
    assert get_next_row(5, c) == expected


@pytest.mark.parametrize(
    "c, expected",
    [(">", 6), ("d", 6), ("D", 6), ("<", 4), ("a", 4), ("A", 4), ("^", 5), ("w", 5)],
)
def test_get_next_col(c, expected):
    assert get_next_col(5, c) == expected


def test_head_body_tail_chain_consistent():
    for head in "WASD":
        body = head_to_body(head)
        tail = body_to_tail(body)
        assert is_head(head) and not is_head(body) and is_tail(tail)
        assert get_next_row(3, head) == get_next_row(3, body) == get_next_row(3, tail)
        assert get_next_col(3, head) == get_next_col(3, body) == get_next_col(3, tail)