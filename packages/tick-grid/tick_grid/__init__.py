"""tick-grid - Bounded 2D grid worlds and level generation for the tick engine."""
from __future__ import annotations

from tick_grid.types import (
    ZERO,
    Instruction,
    InvalidDimensions,
    Pos,
    Vec,
    add,
    adjacent,
    is_reverse,
    is_unit,
)
from tick_grid.grid import GridWorld
from tick_grid.levelgen import Level, LevelGenerator, generate_level, obstacle_count
from tick_grid.pathfind import path_to_instructions, pathfind

__all__ = [
    "ZERO",
    "Instruction",
    "InvalidDimensions",
    "Pos",
    "Vec",
    "add",
    "adjacent",
    "is_reverse",
    "is_unit",
    "GridWorld",
    "Level",
    "LevelGenerator",
    "generate_level",
    "obstacle_count",
    "path_to_instructions",
    "pathfind",
]
