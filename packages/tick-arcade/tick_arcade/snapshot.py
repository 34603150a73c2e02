"""Read-only views handed to renderers after each step or tick."""
from __future__ import annotations

from dataclasses import dataclass

from tick_grid import Instruction, Pos, Vec

from tick_arcade.collectibles import Collectible
from tick_arcade.states import FailureReason, GameOverReason, PuzzleState, SnakeState


@dataclass(frozen=True)
class Outcome:
    """Result of one program run."""

    success: bool
    reason: FailureReason | None
    path: tuple[Pos, ...]
    points: int
    round_number: int


@dataclass(frozen=True)
class PuzzleSnapshot:
    width: int
    height: int
    start: Pos
    goal: Pos
    obstacles: frozenset[Pos]
    path: tuple[Pos, ...]
    program: tuple[Instruction, ...]
    state: PuzzleState
    failure: FailureReason | None
    score: int
    round_number: int
    difficulty: str
    cursor: int = 0

    @property
    def position(self) -> Pos:
        return self.path[-1]


@dataclass(frozen=True)
class SnakeSnapshot:
    width: int
    height: int
    body: tuple[Pos, ...]
    direction: Vec
    collectible: Collectible | None
    score: int
    state: SnakeState
    reason: GameOverReason | None = None

    @property
    def head(self) -> Pos:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)
