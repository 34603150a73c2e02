"""Procedural start/goal/obstacle placement for path puzzles."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from tick_grid.grid import GridWorld
from tick_grid.pathfind import pathfind
from tick_grid.types import InvalidDimensions, Pos

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Level:
    """One generated round: the board plus its start and goal cells."""

    grid: GridWorld
    start: Pos
    goal: Pos
    round_number: int = 1
    difficulty: str = "custom"

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def obstacles(self) -> frozenset[Pos]:
        return self.grid.obstacles


def obstacle_count(obstacle_base: int, round_number: int, width: int) -> int:
    """Obstacles for a round: grows linearly with the round, capped at the width."""
    return min(obstacle_base + round_number, width)


class LevelGenerator:
    """Draws levels from a caller-owned ``random.Random``.

    Start sits on column 0 and goal on column ``W-1``, each on a random
    interior row (rows 1..H-2) so neither hugs the top or bottom wall.
    Boards shorter than three rows fall back to every row.

    Solvability is not guaranteed unless ``require_path`` is set.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        allow_duplicates: bool = False,
        require_path: bool = False,
        max_attempts: int = 50,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._rng = rng if rng is not None else random.Random()
        self._allow_duplicates = allow_duplicates
        self._require_path = require_path
        self._max_attempts = max_attempts

    @property
    def rng(self) -> random.Random:
        return self._rng

    def generate(
        self,
        width: int,
        height: int,
        obstacle_base: int,
        round_number: int = 1,
        difficulty: str = "custom",
    ) -> Level:
        if width < 2 or height < 1:
            raise InvalidDimensions(
                width, height,
                f"A level needs at least 2 columns and 1 row, got {width}x{height}",
            )
        attempts = self._max_attempts if self._require_path else 1
        level = self._draw(width, height, obstacle_base, round_number, difficulty)
        for attempt in range(1, attempts):
            if pathfind(level.grid, level.start, level.goal) is not None:
                break
            logger.debug("Level %dx%d round %d unsolvable, redraw %d",
                         width, height, round_number, attempt)
            level = self._draw(width, height, obstacle_base, round_number, difficulty)
        else:
            if self._require_path and pathfind(level.grid, level.start, level.goal) is None:
                logger.warning(
                    "No solvable %dx%d level after %d attempts; using last draw",
                    width, height, attempts,
                )
        logger.debug(
            "Generated %s level round %d: start=%s goal=%s obstacles=%d",
            difficulty, round_number, level.start, level.goal, len(level.obstacles),
        )
        return level

    def _interior_row(self, height: int) -> int:
        if height >= 3:
            return self._rng.randint(1, height - 2)
        return self._rng.randint(0, height - 1)

    def _draw(
        self,
        width: int,
        height: int,
        obstacle_base: int,
        round_number: int,
        difficulty: str,
    ) -> Level:
        start = (0, self._interior_row(height))
        goal = (width - 1, self._interior_row(height))
        reserved = {start, goal}

        count = obstacle_count(obstacle_base, round_number, width)
        count = max(0, min(count, width * height - len(reserved)))

        obstacles: set[Pos] = set()
        for _ in range(count):
            while True:
                cell = (self._rng.randrange(width), self._rng.randrange(height))
                if cell in reserved:
                    continue
                if cell in obstacles and not self._allow_duplicates:
                    continue
                break
            obstacles.add(cell)

        return Level(
            grid=GridWorld(width, height, obstacles),
            start=start,
            goal=goal,
            round_number=round_number,
            difficulty=difficulty,
        )


def generate_level(
    width: int,
    height: int,
    obstacle_base: int,
    round_number: int = 1,
    rng: random.Random | None = None,
    difficulty: str = "custom",
) -> Level:
    """One-shot convenience wrapper around :class:`LevelGenerator`."""
    return LevelGenerator(rng).generate(width, height, obstacle_base, round_number, difficulty)
