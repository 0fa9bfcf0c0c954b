#!/usr/bin/env python3
"""
Tests for the cell state evaluator.

Verifies:
1. The 3x3 white-corner scenario (birth candidate with neighborhood 3.0)
2. Boundary cells and 1x1 grids
3. Zero neighborhood guard (no NaN)
4. Per-cell and vectorized evaluation agree
"""

import numpy as np
from color_life.color import BLACK, BLUE, RED, WHITE
from color_life.evaluator import evaluate_cell, evaluate_grid, round4
from color_life.grid import get_pixel_checked, new_grid, random_grid


def _scenario_grid():
    grid = new_grid(3, 3)
    grid[0, 0] = WHITE  # (x=0, y=0)
    grid[0, 1] = WHITE  # (x=1, y=0)
    grid[2, 2] = WHITE  # (x=2, y=2)
    return grid


def test_center_of_three_whites():
    state = evaluate_cell(_scenario_grid(), 1, 1)
    assert state.alive is False
    assert state.neighborhood == 3.0, f"neighborhood: {state.neighborhood}"
    assert np.allclose(state.neighborhood_color, WHITE), state.neighborhood_color


def test_alive_threshold():
    grid = new_grid(3, 3)
    grid[1, 1] = [0.2, 0.0, 0.0]
    assert evaluate_cell(grid, 1, 1).alive is False
    grid[1, 1] = [0.3, 0.0, 0.0]
    assert evaluate_cell(grid, 1, 1).alive is True


def test_out_of_bounds_lookup():
    grid = new_grid(4, 2)
    assert get_pixel_checked(grid, -1, 0) is None
    assert get_pixel_checked(grid, 4, 0) is None
    assert get_pixel_checked(grid, 0, 2) is None
    assert get_pixel_checked(grid, 3, 1) is not None
    # an out-of-grid coordinate is simply not alive
    assert evaluate_cell(grid, 10, 10).alive is False


def test_single_cell_grid():
    grid = new_grid(1, 1)
    grid[0, 0] = WHITE
    state = evaluate_cell(grid, 0, 0)
    assert state.alive is True
    assert state.neighborhood == 0.0
    assert np.array_equal(state.neighborhood_color, BLACK)
    alive, neighborhood, color = evaluate_grid(grid)
    assert neighborhood.shape == (1, 1) and neighborhood[0, 0] == 0.0


def test_corner_counts_only_in_grid_neighbors():
    grid = np.ones((3, 3, 3))
    # corner has 3 neighbors, edge 5, center 8
    assert evaluate_cell(grid, 0, 0).neighborhood == 3.0
    assert evaluate_cell(grid, 1, 0).neighborhood == 5.0
    assert evaluate_cell(grid, 1, 1).neighborhood == 8.0


def test_zero_neighborhood_gives_black_not_nan():
    grid = new_grid(3, 3)
    grid[1, 1] = RED
    grid[0, 0] = BLUE  # orthogonal to red: similarity 0
    state = evaluate_cell(grid, 1, 1)
    assert state.neighborhood == 0.0
    assert np.array_equal(state.neighborhood_color, BLACK)
    _, _, colors = evaluate_grid(grid)
    assert not np.isnan(colors).any()


def test_dissimilar_neighbors_excluded_from_color():
    grid = new_grid(3, 3)
    grid[1, 1] = RED * 0.1  # dim, not alive, but has a direction
    grid[0, 0] = RED
    grid[0, 1] = RED
    grid[0, 2] = RED
    grid[2, 0] = BLUE
    state = evaluate_cell(grid, 1, 1)
    assert state.alive is False
    assert state.neighborhood == 3.0
    assert np.allclose(state.neighborhood_color, RED)


def test_round4():
    assert round4(2.99999999) == 3.0
    assert round4(0.00005) == 0.0001
    assert round4(-0.00005) == -0.0001
    assert round4(1.23454) == 1.2345


def test_grid_matches_per_cell():
    rng = np.random.default_rng(11)
    grid = random_grid(9, 7, rng, density=0.5)
    before = grid.copy()
    alive, neighborhood, colors = evaluate_grid(grid)
    assert np.array_equal(grid, before), "evaluate_grid must not modify its input"
    for y in range(7):
        for x in range(9):
            state = evaluate_cell(grid, x, y)
            assert state.alive == bool(alive[y, x])
            assert abs(state.neighborhood - neighborhood[y, x]) < 1e-9, (x, y)
            assert np.allclose(state.neighborhood_color, colors[y, x])


if __name__ == "__main__":
    print("\n=== Testing cell state evaluator ===\n")
    test_center_of_three_whites()
    test_alive_threshold()
    test_out_of_bounds_lookup()
    test_single_cell_grid()
    test_corner_counts_only_in_grid_neighbors()
    test_zero_neighborhood_gives_black_not_nan()
    test_dissimilar_neighbors_excluded_from_color()
    test_round4()
    test_grid_matches_per_cell()
    print("\n✓ All tests passed!\n")
