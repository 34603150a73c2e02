"""Shared types for tick-grid: positions, vectors and instructions."""
from __future__ import annotations

from enum import Enum

Pos = tuple[int, int]
Vec = tuple[int, int]

ZERO: Vec = (0, 0)


class InvalidDimensions(ValueError):
    """Raised when a grid or level is requested with unusable dimensions."""

    def __init__(self, width: int, height: int, message: str | None = None) -> None:
        self.width = width
        self.height = height
        super().__init__(message or f"Invalid grid dimensions {width}x{height}")


class Instruction(Enum):
    """One queued move. Screen coordinates: y grows downward."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Vec:
        return _DELTAS[self]

    @property
    def opposite(self) -> Instruction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Instruction:
        """Parse ``"up"``, ``"w"``, ``"ArrowUp"`` and friends."""
        key = name.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown direction {name!r}") from None

    @classmethod
    def from_delta(cls, delta: Vec) -> Instruction:
        for instr, d in _DELTAS.items():
            if d == delta:
                return instr
        raise ValueError(f"{delta} is not a unit axis vector")


_DELTAS: dict[Instruction, Vec] = {
    Instruction.UP: (0, -1),
    Instruction.DOWN: (0, 1),
    Instruction.LEFT: (-1, 0),
    Instruction.RIGHT: (1, 0),
}

_OPPOSITES: dict[Instruction, Instruction] = {
    Instruction.UP: Instruction.DOWN,
    Instruction.DOWN: Instruction.UP,
    Instruction.LEFT: Instruction.RIGHT,
    Instruction.RIGHT: Instruction.LEFT,
}

_ALIASES: dict[str, Instruction] = {}
for _instr, _names in (
    (Instruction.UP, ("up", "w", "arrowup", "north")),
    (Instruction.DOWN, ("down", "s", "arrowdown", "south")),
    (Instruction.LEFT, ("left", "a", "arrowleft", "west")),
    (Instruction.RIGHT, ("right", "d", "arrowright", "east")),
):
    for _name in _names:
        _ALIASES[_name] = _instr


def add(pos: Pos, delta: Vec) -> Pos:
    return (pos[0] + delta[0], pos[1] + delta[1])


def is_unit(vec: Vec) -> bool:
    """True for vectors one step long along exactly one axis."""
    return abs(vec[0]) + abs(vec[1]) == 1


def is_reverse(a: Vec, b: Vec) -> bool:
    return a != ZERO and a == (-b[0], -b[1])


def adjacent(a: Pos, b: Pos) -> bool:
    """True when *a* and *b* differ by one unit on exactly one axis."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
