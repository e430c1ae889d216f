from grid_dodge.components import Position
from grid_dodge.systems.enemy import enemy_fall_system
from tests.test_utils import enemy_cells, make_state


def test_enemies_fall_one_row_in_place() -> None:
    state = make_state(player=(4, 7), enemies=[(0, 0), (3, 2), (7, 5)])
    state = enemy_fall_system(state)
    assert enemy_cells(state) == [(0, 1), (3, 3), (7, 6)]
    assert state.player == Position(4, 7)


def test_enemy_landing_on_player_ends_game() -> None:
    state = make_state(player=(4, 7), enemies=[(4, 6)])
    state = enemy_fall_system(state)
    assert state.player is None
    assert enemy_cells(state) == [(4, 7)]


def test_adjacent_column_does_not_collide() -> None:
    state = make_state(player=(4, 7), enemies=[(3, 6), (5, 6)])
    assert enemy_fall_system(state).player == Position(4, 7)


def test_enemy_already_level_with_player_passes_below() -> None:
    state = make_state(player=(4, 7), enemies=[(4, 7)])
    state = enemy_fall_system(state)
    assert state.player == Position(4, 7)
    assert enemy_cells(state) == [(4, 8)]


def test_multiple_hits_in_one_tick_are_safe() -> None:
    state = make_state(player=(2, 7), enemies=[(2, 6), (2, 6), (1, 0)])
    state = enemy_fall_system(state)
    assert state.player is None
    assert enemy_cells(state) == [(2, 7), (2, 7), (1, 1)]


def test_enemies_keep_falling_below_grid() -> None:
    state = make_state(player=(0, 7), enemies=[(5, 8), (6, 20)])
    assert enemy_cells(enemy_fall_system(state)) == [(5, 9), (6, 21)]


def test_enemies_fall_while_game_over() -> None:
    state = make_state(player=None, enemies=[(1, 1)])
    state = enemy_fall_system(state)
    assert state.player is None
    assert enemy_cells(state) == [(1, 2)]
