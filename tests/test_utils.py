import pytest

from snakeboard.state import create_default_state, parse_board
from snakeboard.utils import (
    DeterministicRandom,
    corner_food,
    det_rand,
    deterministic_food,
    random_turn,
    redirect_snake,
)


def test_det_rand_one_applies_taps():
    assert det_rand(1) == 0x80000057


def test_det_rand_zero_behaves_like_one():
    assert det_rand(0) == det_rand(1)


@pytest.mark.parametrize("k", [1, 2, 7, 1000, 0x7FFFFFFF])
def test_det_rand_even_shifts(k):
    assert det_rand(2 * k) == k


@pytest.mark.parametrize("k", [0, 3, 12345, 0x7FFFFFFF])
def test_det_rand_odd_shifts_and_xors(k):
    assert det_rand(2 * k + 1) == k ^ 0x80000057


def test_det_rand_stays_32_bit():
    value = 1
    for _ in range(500):
        value = det_rand(value)
        assert 0 < value < 2**32


def test_generator_follows_det_rand():
    rng = DeterministicRandom(5)
    value = 5
    for _ in range(20):
        value = det_rand(value)
        assert rng.next() == value


def test_generator_default_seed():
    assert DeterministicRandom().next() == 0x80000057


def test_corner_food():
    state = create_default_state()
    before = state.to_text()
    corner_food(state)
    assert state[1, 1] == "*"
    after = state.to_text()
    assert sum(a != b for a, b in zip(before, after)) == 1


def test_deterministic_food_places_on_empty_cell():
    state = create_default_state()
    before = [row[:] for row in state.board]
    row, col = deterministic_food(state, DeterministicRandom(1))
    assert before[row][col] == " "
    assert state[row, col] == "*"
    assert state.to_text().count("*") == 2


def test_deterministic_food_is_deterministic():
    first = create_default_state()
    second = create_default_state()
    pos_a = deterministic_food(first, DeterministicRandom(1))
    pos_b = deterministic_food(second, DeterministicRandom(1))
    assert pos_a == pos_b
    assert first.to_text() == second.to_text()


def test_deterministic_food_full_board_raises():
    state = parse_board("###\n#*#\n###\n")
    with pytest.raises(ValueError):
        deterministic_food(state, DeterministicRandom(1))


@pytest.mark.parametrize("key,head", [("w", "W"), ("a", "A"), ("s", "S"), ("d", "D")])
def test_redirect_snake(key, head):
    state = create_default_state()
    redirect_snake(state, key)
    assert state[2, 4] == head


def test_redirect_snake_ignores_other_keys():
    state = create_default_state()
    before = state.to_text()
    redirect_snake(state, "k")
    assert state.to_text() == before


def test_redirect_dead_snake_does_nothing():
    state = create_default_state()
    state.snakes[0].live = False
    redirect_snake(state, "w")
    assert state[2, 4] == "D"


def test_random_turn_from_unknown_head():
    state = create_default_state()
    random_turn(state, 0, DeterministicRandom(2))
    turned_odd = state[2, 4]
    state = create_default_state()
    random_turn(state, 0, DeterministicRandom(4))
    turned_even = state[2, 4]
    assert {turned_odd, turned_even} == {"v", "^"}


def test_random_turn_from_body_character():
    state = create_default_state()
    state[2, 4] = "^"
    random_turn(state, 0, DeterministicRandom(7))
    assert state[2, 4] in {"<", ">"}