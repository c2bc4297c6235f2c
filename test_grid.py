"""
Tests for the grid model and neighbour function
"""

import numpy as np
import pytest

from gridpath.gridpath_algorithm.constants import (ROWS, COLS, START, END, EMPTY, OBSTACLE,
                                                   START_CELL, END_CELL, VISITED, PATH)
from gridpath.gridpath_algorithm.grid import Grid, create_grid, neighbors


def test_create_grid_defaults():
    grid = create_grid()

    assert (grid.rows, grid.cols) == (ROWS, COLS) == (20, 20)
    assert [node.position for node in grid if node.is_start] == [START]
    assert [node.position for node in grid if node.is_end] == [END]
    for node in grid:
        assert not node.is_obstacle
        assert not node.is_visited
        assert not node.is_path
        assert node.distance == float('inf')
        assert node.heuristic == float('inf')
        assert node.previous_node is None


@pytest.mark.parametrize("rows, cols, start, end", [
    (0, 5, (0, 0), (0, 0)),
    (5, -1, (0, 0), (0, 0)),
    (5, 5, (5, 0), (0, 0)),
    (5, 5, (0, 0), (0, -1)),
])
def test_invalid_grid_raises(rows, cols, start, end):
    with pytest.raises(ValueError):
        Grid(rows, cols, start, end)


def test_get_node_out_of_bounds():
    grid = create_grid(3, 4, (0, 0), (2, 3))
    assert grid.get_node(2, 3).position == (2, 3)
    assert grid.get_node(3, 0) is None
    assert grid.get_node(0, -1) is None


def test_nodes_compare_by_position():
    first = create_grid(3, 3, (0, 0), (2, 2))
    second = create_grid(3, 3, (0, 0), (2, 2))
    assert first.get_node(1, 2) == second.get_node(1, 2)
    assert first.get_node(1, 2) != first.get_node(2, 1)
    assert len({first.get_node(1, 1), second.get_node(1, 1)}) == 1


def test_neighbors_order_and_bounds():
    grid = create_grid(3, 3, (0, 0), (2, 2))

    middle = [n.position for n in neighbors(grid.get_node(1, 1), grid)]
    corner = [n.position for n in neighbors(grid.get_node(0, 0), grid)]
    edge = [n.position for n in neighbors(grid.get_node(2, 1), grid)]

    assert middle == [(0, 1), (2, 1), (1, 0), (1, 2)]
    assert corner == [(1, 0), (0, 1)]
    assert edge == [(1, 1), (2, 0), (2, 2)]


def test_neighbors_do_not_filter_obstacles():
    grid = create_grid(3, 3, (0, 0), (2, 2))
    grid.toggle_obstacle(0, 1)
    assert (0, 1) in [n.position for n in neighbors(grid.start_node, grid)]


def test_toggle_obstacle():
    grid = create_grid(3, 3, (0, 0), (2, 2))

    assert grid.toggle_obstacle(1, 1)
    assert grid.get_node(1, 1).is_obstacle
    assert grid.toggle_obstacle(1, 1)
    assert not grid.get_node(1, 1).is_obstacle


def test_toggle_obstacle_ignores_start_end_and_out_of_bounds():
    grid = create_grid(3, 3, (0, 0), (2, 2))

    assert not grid.toggle_obstacle(0, 0)
    assert not grid.toggle_obstacle(2, 2)
    assert not grid.toggle_obstacle(5, 5)
    assert grid.obstacles() == []


def test_reset_search_state_keeps_obstacles():
    grid = create_grid(3, 3, (0, 0), (2, 2))
    grid.toggle_obstacle(1, 1)
    node = grid.get_node(0, 1)
    node.is_visited = node.is_path = True
    node.distance, node.heuristic = 1, 3
    node.previous_node = grid.start_node

    grid.reset_search_state()

    assert not node.is_visited and not node.is_path
    assert node.distance == node.heuristic == float('inf')
    assert node.previous_node is None
    assert grid.obstacles() == [(1, 1)]

    grid.reset_search_state(clear_obstacles=True)
    assert grid.obstacles() == []


def test_clear_rebuilds_nodes():
    grid = create_grid(3, 3, (0, 0), (2, 2))
    grid.toggle_obstacle(1, 1)
    grid.clear()

    assert grid.obstacles() == []
    assert grid.start_node.is_start and grid.end_node.is_end


def test_random_maze_spares_start_and_end():
    grid = create_grid()
    grid.generate_random_maze(probability=1.0, seed=0)

    assert len(grid.obstacles()) == ROWS * COLS - 2
    assert not grid.start_node.is_obstacle
    assert not grid.end_node.is_obstacle


def test_random_maze_is_reproducible_and_clears_old_obstacles():
    first = create_grid()
    first.generate_random_maze(seed=42)
    second = create_grid()
    second.toggle_obstacle(5, 5)
    second.generate_random_maze(seed=42)

    assert first.obstacles() == second.obstacles()
    assert 0 < len(first.obstacles()) < ROWS * COLS

    second.generate_random_maze(probability=0.0)
    assert second.obstacles() == []


def test_to_array():
    grid = create_grid(2, 3, (0, 0), (1, 2))
    grid.toggle_obstacle(0, 1)
    grid.get_node(1, 0).is_visited = True
    grid.get_node(1, 1).is_visited = True
    grid.get_node(1, 1).is_path = True
    grid.end_node.is_path = True

    expected = np.array([[START_CELL, OBSTACLE, EMPTY],
                         [VISITED, PATH, END_CELL]], dtype=np.int8)
    np.testing.assert_array_equal(grid.to_array(), expected)

    plain = grid.to_array(include_search_state=False)
    assert plain[1, 0] == EMPTY and plain[1, 1] == EMPTY
    assert plain.dtype == np.int8


def test_end_defaults_to_bottom_right_of_any_size():
    grid = create_grid(5, 7)
    assert grid.end == (4, 6)
    assert grid.end_node.is_end
    assert Grid(rows=3, cols=2).end == (2, 1)
