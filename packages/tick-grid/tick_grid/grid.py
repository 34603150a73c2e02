"""GridWorld - bounded 2D integer grid with static obstacles."""
from __future__ import annotations

from typing import Collection, Iterable, Iterator

from tick_grid.types import InvalidDimensions, Pos

_DIRS: tuple[Pos, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class GridWorld:
    """Immutable board: dimensions plus a set of obstacle cells.

    All methods are pure queries.
    """

    __slots__ = ("_width", "_height", "_obstacles")

    def __init__(self, width: int, height: int, obstacles: Iterable[Pos] = ()) -> None:
        if width < 1 or height < 1:
            raise InvalidDimensions(width, height)
        self._width = width
        self._height = height
        self._obstacles = frozenset(obstacles)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def obstacles(self) -> frozenset[Pos]:
        return self._obstacles

    def in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self._width and 0 <= y < self._height

    def is_obstacle(self, pos: Pos) -> bool:
        return pos in self._obstacles

    def is_occupied(self, pos: Pos, occupants: Collection[Pos]) -> bool:
        return pos in occupants

    def is_walkable(self, pos: Pos) -> bool:
        return self.in_bounds(pos) and pos not in self._obstacles

    def neighbors(self, pos: Pos) -> list[Pos]:
        """In-bounds 4-neighbourhood of *pos* (obstacles included)."""
        x, y = pos
        result: list[Pos] = []
        for dx, dy in _DIRS:
            n = (x + dx, y + dy)
            if self.in_bounds(n):
                result.append(n)
        return result

    def heuristic(self, a: Pos, b: Pos) -> float:
        return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))

    def cells(self) -> Iterator[Pos]:
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y)

    def free_cells(self, occupied: Collection[Pos] = ()) -> list[Pos]:
        """Cells that are neither obstacles nor in *occupied*, row-major."""
        return [
            c for c in self.cells()
            if c not in self._obstacles and c not in occupied
        ]

    def with_obstacles(self, obstacles: Iterable[Pos]) -> GridWorld:
        return GridWorld(self._width, self._height, obstacles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridWorld):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._obstacles == other._obstacles
        )

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._obstacles))

    def __repr__(self) -> str:
        return (
            f"GridWorld({self._width}x{self._height}, "
            f"{len(self._obstacles)} obstacles)"
        )
