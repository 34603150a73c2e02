"""A* pathfinding over a GridWorld, plus path/instruction conversion."""
from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Callable

from tick_grid.types import Instruction, Pos

if TYPE_CHECKING:
    from tick_grid.grid import GridWorld


def pathfind(
    grid: GridWorld,
    start: Pos,
    goal: Pos,
    walkable: Callable[[Pos], bool] | None = None,
) -> list[Pos] | None:
    """Shortest 4-connected path from *start* to *goal*, inclusive.

    ``walkable`` defaults to ``grid.is_walkable``.  Returns None when the
    goal cannot be reached.
    """
    if walkable is None:
        walkable = grid.is_walkable
    if not walkable(start) or not walkable(goal):
        return None

    open_set: list[tuple[float, int, Pos]] = [(0.0, 0, start)]
    came_from: dict[Pos, Pos] = {}
    g_score: dict[Pos, float] = {start: 0.0}
    counter = 1

    closed: set[Pos] = set()

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current in closed:
            continue
        closed.add(current)
        if current == goal:
            path: list[Pos] = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            path.reverse()
            return path

        for neighbor in grid.neighbors(current):
            if not walkable(neighbor):
                continue
            tentative = g_score[current] + 1.0
            if tentative < g_score.get(neighbor, float("inf")):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                h = grid.heuristic(neighbor, goal)
                heapq.heappush(open_set, (tentative + h, counter, neighbor))
                counter += 1

    return None


def path_to_instructions(path: list[Pos]) -> list[Instruction]:
    """Translate consecutive cells into the moves that connect them."""
    return [
        Instruction.from_delta((b[0] - a[0], b[1] - a[1]))
        for a, b in zip(path, path[1:])
    ]
