from grid_dodge.components import Position
from grid_dodge.utils.grid import is_column_in_bounds, is_in_bounds, translate
from tests.test_utils import make_state


def test_translate_adds_delta() -> None:
    assert translate(Position(3, 4), Position(-1, 0)) == Position(2, 4)
    assert translate(Position(0, 0), Position(0, 1)) == Position(0, 1)


def test_is_in_bounds_checks_both_axes() -> None:
    state = make_state(width=4, height=3)
    assert is_in_bounds(state, Position(0, 0))
    assert is_in_bounds(state, Position(3, 2))
    assert not is_in_bounds(state, Position(4, 0))
    assert not is_in_bounds(state, Position(0, 3))
    assert not is_in_bounds(state, Position(-1, 1))


def test_column_bound_ignores_row() -> None:
    state = make_state(width=4, height=3)
    assert is_column_in_bounds(state, Position(2, 10))
    assert not is_column_in_bounds(state, Position(-1, 0))
    assert not is_column_in_bounds(state, Position(4, 0))
