"""Command dataclasses produced by the input layer."""
from dataclasses import dataclass


@dataclass(frozen=True)
class QueueInstruction:
    """Append a move (``"up"``, ``"left"``, ...) to the puzzle program."""
    direction: str


@dataclass(frozen=True)
class UndoInstruction:
    pass


@dataclass(frozen=True)
class ClearProgram:
    pass


@dataclass(frozen=True)
class RunProgram:
    pass


@dataclass(frozen=True)
class ResetRound:
    pass


@dataclass(frozen=True)
class RestartGame:
    """Full reset of whichever game receives it."""
    pass


@dataclass(frozen=True)
class SelectDifficulty:
    difficulty: str


@dataclass(frozen=True)
class Steer:
    """Raw directional input for the snake."""
    dx: int
    dy: int
