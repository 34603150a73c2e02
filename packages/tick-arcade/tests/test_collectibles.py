"""Tests for collectible spawning."""
import random

from tick_grid import GridWorld

from tick_arcade import DEFAULT_REWARDS, Collectible, RewardTier, spawn_collectible


def test_spawn_avoids_occupied_cells():
    grid = GridWorld(3, 3)
    body = [(x, y) for x in range(3) for y in range(3) if (x, y) != (2, 2)]
    rng = random.Random(0)
    for _ in range(20):
        collectible = spawn_collectible(grid, body, rng, DEFAULT_REWARDS)
        assert collectible.pos == (2, 2)


def test_spawn_avoids_obstacles():
    grid = GridWorld(2, 1, [(0, 0)])
    collectible = spawn_collectible(grid, [], random.Random(0), DEFAULT_REWARDS)
    assert collectible.pos == (1, 0)


def test_spawn_on_full_board_returns_none():
    grid = GridWorld(2, 1)
    assert spawn_collectible(grid, [(0, 0), (1, 0)], random.Random(0), DEFAULT_REWARDS) is None


def test_points_come_from_tier():
    tier = RewardTier("golden", 50, 0.1)
    assert Collectible((1, 1), tier).points == 50
