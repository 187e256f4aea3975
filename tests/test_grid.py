import random

import pytest

from lightsout.grid import (
    Coord,
    count_lit,
    create_grid,
    flip_around,
    flip_targets,
    format_grid,
    grid_shape,
    has_won,
    lit_coords,
    neighbor_coords,
)


def _dark(rows, cols):
    return create_grid(rows, cols, 0.0)


def _toggled(before, after):
    return {
        Coord(r, c)
        for r, row in enumerate(before)
        for c, lit in enumerate(row)
        if after[r][c] != lit
    }


@pytest.mark.parametrize("rows,cols", [(1, 1), (3, 7), (5, 5), (8, 2)])
def test_create_grid_zero_chance_is_dark(rows, cols):
    grid = create_grid(rows, cols, 0.0, random.Random(1))
    assert grid_shape(grid) == (rows, cols)
    assert all(not lit for row in grid for lit in row)


@pytest.mark.parametrize("rows,cols", [(1, 1), (3, 7), (5, 5), (8, 2)])
def test_create_grid_full_chance_is_lit(rows, cols):
    grid = create_grid(rows, cols, 1.0, random.Random(1))
    assert grid_shape(grid) == (rows, cols)
    assert all(lit for row in grid for lit in row)


def test_create_grid_same_seed_same_grid():
    a = create_grid(6, 6, 0.5, random.Random(42))
    b = create_grid(6, 6, 0.5, random.Random(42))
    assert a == b


def test_create_grid_without_rng():
    grid = create_grid(2, 3, 0.5)
    assert grid_shape(grid) == (2, 3)


def test_has_won_on_dark_grid():
    assert has_won(_dark(1, 1))
    assert has_won(_dark(4, 6))


def test_has_won_false_with_any_lit_cell():
    grid = flip_around(_dark(3, 3), 0, 0)
    assert not has_won(grid)
    grid = tuple(tuple(r == 2 and c == 2 for c in range(5)) for r in range(5))
    assert not has_won(grid)


def test_flip_around_corner_toggles_three():
    before = _dark(5, 5)
    after = flip_around(before, 0, 0)
    assert _toggled(before, after) == {Coord(0, 0), Coord(0, 1), Coord(1, 0)}


def test_flip_around_edge_toggles_four():
    before = _dark(5, 5)
    after = flip_around(before, 0, 2)
    assert _toggled(before, after) == {Coord(0, 2), Coord(0, 1), Coord(0, 3), Coord(1, 2)}


def test_flip_around_interior_toggles_five():
    before = _dark(5, 5)
    after = flip_around(before, 2, 2)
    assert _toggled(before, after) == {
        Coord(2, 2), Coord(1, 2), Coord(3, 2), Coord(2, 1), Coord(2, 3),
    }


def test_flip_around_opposite_corner_does_not_wrap():
    before = _dark(5, 5)
    after = flip_around(before, 4, 4)
    assert _toggled(before, after) == {Coord(4, 4), Coord(3, 4), Coord(4, 3)}


def test_flip_around_is_self_inverse():
    grid = create_grid(5, 5, 0.5, random.Random(3))
    for row in range(5):
        for col in range(5):
            assert flip_around(flip_around(grid, row, col), row, col) == grid


def test_flip_around_leaves_input_untouched():
    grid = create_grid(3, 3, 1.0)
    flip_around(grid, 1, 1)
    assert all(lit for row in grid for lit in row)


def test_flip_around_inverts_lit_cells():
    grid = create_grid(3, 3, 1.0)
    after = flip_around(grid, 1, 1)
    assert lit_coords(after) == [Coord(0, 0), Coord(0, 2), Coord(2, 0), Coord(2, 2)]


def test_single_cell_game_is_won_in_one_move():
    grid = create_grid(1, 1, 1.0)
    assert not has_won(grid)
    grid = flip_around(grid, 0, 0)
    assert grid == ((False,),)
    assert has_won(grid)


def test_neighbor_coords_order_and_bounds():
    assert neighbor_coords(5, 5, 2, 2) == [Coord(1, 2), Coord(3, 2), Coord(2, 1), Coord(2, 3)]
    assert neighbor_coords(1, 1, 0, 0) == []
    assert neighbor_coords(1, 3, 0, 1) == [Coord(0, 0), Coord(0, 2)]


def test_flip_targets_include_center_first():
    targets = flip_targets(5, 5, 0, 0)
    assert targets[0] == Coord(0, 0)
    assert len(targets) == 3


def test_count_and_format():
    grid = flip_around(_dark(2, 3), 0, 0)
    assert count_lit(grid) == 3
    assert format_grid(grid) == "110\n100"
