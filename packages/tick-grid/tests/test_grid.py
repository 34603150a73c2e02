"""
Test suite for GridWorld.

Tests cover:
- Construction and dimension validation
- Bounds queries
- Obstacle and occupancy queries
- Neighbourhood and free-cell enumeration
"""

import pytest
from tick_grid import GridWorld, InvalidDimensions


class TestGridWorldConstruction:
    """Constructor and properties."""

    def test_constructor_sets_dimensions(self):
        grid = GridWorld(width=20, height=15)
        assert grid.width == 20
        assert grid.height == 15
        assert grid.obstacles == frozenset()

    def test_one_by_one_is_valid(self):
        grid = GridWorld(1, 1)
        assert grid.in_bounds((0, 0))

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (0, 0)])
    def test_non_positive_dimensions_raise(self, width, height):
        with pytest.raises(InvalidDimensions) as exc:
            GridWorld(width, height)
        assert exc.value.width == width
        assert exc.value.height == height

    def test_invalid_dimensions_is_value_error(self):
        with pytest.raises(ValueError):
            GridWorld(0, 1)

    def test_duplicate_obstacles_collapse(self):
        grid = GridWorld(5, 5, [(1, 1), (1, 1), (2, 2)])
        assert grid.obstacles == frozenset({(1, 1), (2, 2)})


class TestGridWorldBounds:
    """in_bounds edges."""

    def test_corners_in_bounds(self):
        grid = GridWorld(10, 8)
        for pos in [(0, 0), (9, 0), (0, 7), (9, 7)]:
            assert grid.in_bounds(pos)

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (10, 0), (0, 8), (10, 8)])
    def test_outside_is_out_of_bounds(self, pos):
        grid = GridWorld(10, 8)
        assert not grid.in_bounds(pos)


class TestGridWorldQueries:
    """Obstacle, occupancy and walkability queries."""

    def test_is_obstacle(self):
        grid = GridWorld(5, 5, [(2, 3)])
        assert grid.is_obstacle((2, 3))
        assert not grid.is_obstacle((3, 2))

    def test_is_occupied_uses_caller_set(self):
        grid = GridWorld(5, 5, [(0, 0)])
        body = [(1, 1), (1, 2)]
        assert grid.is_occupied((1, 2), body)
        assert not grid.is_occupied((0, 0), body)

    def test_is_walkable(self):
        grid = GridWorld(3, 3, [(1, 1)])
        assert grid.is_walkable((0, 0))
        assert not grid.is_walkable((1, 1))
        assert not grid.is_walkable((3, 0))

    def test_neighbors_center(self):
        grid = GridWorld(5, 5)
        assert sorted(grid.neighbors((2, 2))) == [(1, 2), (2, 1), (2, 3), (3, 2)]

    def test_neighbors_corner_clipped(self):
        grid = GridWorld(5, 5)
        assert sorted(grid.neighbors((0, 0))) == [(0, 1), (1, 0)]

    def test_heuristic_is_manhattan(self):
        grid = GridWorld(10, 10)
        assert grid.heuristic((0, 0), (3, 4)) == 7.0

    def test_cells_row_major(self):
        grid = GridWorld(2, 2)
        assert list(grid.cells()) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_free_cells_excludes_obstacles_and_occupied(self):
        grid = GridWorld(2, 2, [(0, 0)])
        assert grid.free_cells([(1, 1)]) == [(1, 0), (0, 1)]

    def test_with_obstacles_returns_new_grid(self):
        grid = GridWorld(4, 4)
        other = grid.with_obstacles([(1, 1)])
        assert grid.obstacles == frozenset()
        assert other.obstacles == frozenset({(1, 1)})
        assert other == GridWorld(4, 4, [(1, 1)])
